from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from tennisclub.database import get_db
from tennisclub.schemas.reservation import (
    ReservationCreate,
    ReservationPriceResponse,
    ReservationResponse,
    ReservationUpdate,
)
from tennisclub.services import reservation_service

router = APIRouter()


@router.post("/", response_model=ReservationPriceResponse, status_code=201)
def create_reservation(reservation: ReservationCreate, db: Session = Depends(get_db)):
    total_price = reservation_service.create_reservation(db, reservation)
    return {"total_price": total_price}


@router.get("/", response_model=List[ReservationResponse])
def read_reservations(db: Session = Depends(get_db)):
    return reservation_service.get_reservations(db)


@router.get("/court/{court_id}", response_model=List[ReservationResponse])
def read_reservations_by_court(court_id: int, db: Session = Depends(get_db)):
    return reservation_service.get_reservations_by_court(db, court_id)


@router.get("/phone/{phone_number}", response_model=List[ReservationResponse])
def read_reservations_by_phone(
    phone_number: str, future: bool = False, db: Session = Depends(get_db)
):
    return reservation_service.get_reservations_by_phone(db, phone_number, future=future)


@router.get("/{reservation_id}", response_model=ReservationResponse)
def read_reservation(reservation_id: int, db: Session = Depends(get_db)):
    return reservation_service.get_reservation(db, reservation_id)


@router.put("/{reservation_id}", response_model=ReservationResponse)
def update_reservation(
    reservation_id: int, reservation: ReservationUpdate, db: Session = Depends(get_db)
):
    return reservation_service.update_reservation(db, reservation_id, reservation)


@router.delete("/{reservation_id}")
def delete_reservation(reservation_id: int, db: Session = Depends(get_db)):
    reservation_service.delete_reservation(db, reservation_id)
    return {"message": "Reservation deleted successfully"}
