from sqlalchemy.orm import Session
from datetime import datetime, timezone
from typing import List, Optional

from tennisclub.crud.base import SoftDeleteRepository
from tennisclub.models.court import Court
from tennisclub.models.reservation import Reservation
from tennisclub.models.user import User

repository = SoftDeleteRepository(Reservation)


def get_reservation(db: Session, reservation_id: int) -> Optional[Reservation]:
    return repository.get(db, reservation_id)


def get_reservations(db: Session) -> List[Reservation]:
    """Reservas vivas cuya cancha y usuario tampoco están borrados."""
    return (
        db.query(Reservation)
        .join(Reservation.court)
        .join(Reservation.user)
        .filter(
            Reservation.deleted == False,
            Court.deleted == False,
            User.deleted == False,
        )
        .order_by(Reservation.start_time.asc())
        .all()
    )


def get_reservations_by_court(db: Session, court_id: int) -> List[Reservation]:
    return (
        db.query(Reservation)
        .filter(Reservation.court_id == court_id, Reservation.deleted == False)
        .order_by(Reservation.start_time.asc())
        .all()
    )


def get_reservations_by_phone(
    db: Session, phone_number: str, future: bool = False
) -> List[Reservation]:
    query = (
        db.query(Reservation)
        .join(Reservation.court)
        .join(Reservation.user)
        .filter(
            Reservation.deleted == False,
            Court.deleted == False,
            User.deleted == False,
            User.phone_number == phone_number,
        )
    )

    # Las horas se guardan en UTC sin zona
    if future:
        query = query.filter(Reservation.start_time > datetime.now(timezone.utc).replace(tzinfo=None))

    return query.order_by(Reservation.start_time.asc()).all()


def create_reservation(db: Session, reservation: Reservation) -> Reservation:
    return repository.create(db, reservation)


def update_reservation(
    db: Session, db_reservation: Reservation, update_data: dict
) -> Reservation:
    return repository.update(db, db_reservation, update_data)


def delete_reservation(db: Session, reservation_id: int) -> bool:
    return repository.soft_delete(db, reservation_id)
