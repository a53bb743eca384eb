from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from tennisclub.database import get_db
from tennisclub.schemas.court import CourtCreate, CourtResponse, CourtUpdate
from tennisclub.services import court_service

router = APIRouter()


@router.post("/", response_model=CourtResponse, status_code=201)
def create_court(court: CourtCreate, db: Session = Depends(get_db)):
    return court_service.create_court(db, court)


@router.get("/", response_model=List[CourtResponse])
def read_courts(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return court_service.get_courts(db, skip=skip, limit=limit)


@router.get("/{court_id}", response_model=CourtResponse)
def read_court(court_id: int, db: Session = Depends(get_db)):
    return court_service.get_court(db, court_id)


@router.put("/{court_id}", response_model=CourtResponse)
def update_court(court_id: int, court: CourtUpdate, db: Session = Depends(get_db)):
    return court_service.update_court(db, court_id, court)


@router.delete("/{court_id}")
def delete_court(court_id: int, db: Session = Depends(get_db)):
    court_service.delete_court(db, court_id)
    return {"message": "Court deleted successfully"}
