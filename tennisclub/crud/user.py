from sqlalchemy.orm import Session
from typing import List, Optional

from tennisclub.crud.base import SoftDeleteRepository
from tennisclub.models.user import User

repository = SoftDeleteRepository(User)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return repository.get(db, user_id)


def get_user_by_phone(db: Session, phone_number: str) -> Optional[User]:
    return (
        db.query(User)
        .filter(User.phone_number == phone_number, User.deleted == False)
        .first()
    )


def get_users(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    return repository.get_all(db, skip=skip, limit=limit)


def create_user(db: Session, name: str, phone_number: str) -> User:
    return repository.create(db, User(name=name, phone_number=phone_number))


def delete_user(db: Session, user_id: int) -> bool:
    return repository.soft_delete(db, user_id)
