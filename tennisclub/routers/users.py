from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from tennisclub.database import get_db
from tennisclub.schemas.user import UserResponse
from tennisclub.services import user_service

router = APIRouter()


# Los usuarios se crean solo al reservar con un teléfono nuevo
@router.get("/", response_model=List[UserResponse])
def read_users(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return user_service.get_users(db, skip=skip, limit=limit)


@router.get("/{user_id}", response_model=UserResponse)
def read_user(user_id: int, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
    return {"message": "User deleted successfully"}
