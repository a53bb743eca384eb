"""
Admisión y precio de reservas.

Orden del flujo para crear o actualizar:
    cancha -> usuario -> duración -> disponibilidad -> precio -> persistencia

Cualquier error antes de persistir corta la operación sin escribir la
reserva. El usuario creado en el paso de resolución se conserva: el
teléfono es una identidad duradera, independiente de la reserva.
"""

from sqlalchemy.orm import Session
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
import logging

from tennisclub import config, mappers
from tennisclub.crud import court as court_crud
from tennisclub.crud import reservation as crud
from tennisclub.exceptions import ConflictError, InvalidArgumentError, NotFoundError
from tennisclub.models.court import Court
from tennisclub.models.reservation import Reservation
from tennisclub.schemas.reservation import ReservationCreate, ReservationUpdate
from tennisclub.services.user_service import resolve_user
from tennisclub.utils.pricing import compute_price, reservation_minutes
from tennisclub.utils.reservation_overlap import has_conflict

logger = logging.getLogger(__name__)


def validate_duration(start_time: datetime, end_time: datetime) -> None:
    if reservation_minutes(start_time, end_time) < config.MIN_RESERVATION_MINUTES:
        raise InvalidArgumentError(
            f"Reservation has to be at least {config.MIN_RESERVATION_MINUTES} minutes long"
        )


def ensure_available(
    db: Session,
    court_id: int,
    start_time: datetime,
    end_time: datetime,
    exclude_reservation_id: Optional[int] = None,
) -> None:
    if has_conflict(db, court_id, start_time, end_time, exclude_reservation_id):
        raise ConflictError("Court is already reserved at this time")


def _price_for(court: Court, start_time: datetime, end_time: datetime, is_doubles: bool) -> Decimal:
    return compute_price(court.surface.price_per_minute, start_time, end_time, is_doubles)


def _resolve_court(db: Session, court_id: Optional[int]) -> Court:
    return mappers.resolve_court(court_id, lambda cid: court_crud.get_court(db, cid))


def create_reservation(db: Session, reservation_in: ReservationCreate) -> Decimal:
    """
    Admite una reserva nueva y devuelve su precio total.

    Raises:
        InvalidArgumentError: Falta court_id o la ventana dura menos del mínimo
        NotFoundError: La cancha no existe o está borrada
        ConflictError: La cancha ya está reservada en esa ventana
    """
    court = _resolve_court(db, reservation_in.court_id)
    user = resolve_user(db, reservation_in.phone_number, reservation_in.user_name)

    try:
        validate_duration(reservation_in.start_time, reservation_in.end_time)
        ensure_available(db, court.id, reservation_in.start_time, reservation_in.end_time)
    except (InvalidArgumentError, ConflictError) as e:
        logger.warning(
            f"Reservation rejected for court {court.id} "
            f"({reservation_in.start_time} - {reservation_in.end_time}): {e.detail}"
        )
        raise

    reservation = Reservation(**mappers.reservation_fields(reservation_in, court, user))
    reservation.total_price = _price_for(
        court, reservation.start_time, reservation.end_time, reservation.is_doubles
    )
    reservation = crud.create_reservation(db, reservation)

    logger.info(
        f"Reservation {reservation.id} created: court={court.id} user={user.id} "
        f"price={reservation.total_price}"
    )
    return reservation.total_price


def update_reservation(
    db: Session,
    reservation_id: int,
    reservation_in: ReservationUpdate,
    check_conflicts: Optional[bool] = None,
) -> Reservation:
    """
    Reemplaza los datos de una reserva existente y recalcula su precio.

    A diferencia de la creación, por defecto no revisa solapamientos
    (ver RESERVATION_UPDATE_CHECKS_CONFLICTS). Si se revisan, la propia
    reserva queda excluida de la comparación.

    Args:
        db: Sesión de base de datos
        reservation_id: Reserva a actualizar
        reservation_in: Datos nuevos completos
        check_conflicts: Fuerza la política; None usa la configuración

    Returns:
        Reservation: Reserva actualizada
    """
    if check_conflicts is None:
        check_conflicts = config.RESERVATION_UPDATE_CHECKS_CONFLICTS

    reservation = get_reservation(db, reservation_id)
    court = _resolve_court(db, reservation_in.court_id)
    user = resolve_user(db, reservation_in.phone_number, reservation_in.user_name)

    try:
        validate_duration(reservation_in.start_time, reservation_in.end_time)
        if check_conflicts:
            ensure_available(
                db,
                court.id,
                reservation_in.start_time,
                reservation_in.end_time,
                exclude_reservation_id=reservation.id,
            )
    except (InvalidArgumentError, ConflictError) as e:
        logger.warning(f"Update of reservation {reservation_id} rejected: {e.detail}")
        raise

    update_data = mappers.reservation_fields(reservation_in, court, user)
    update_data["total_price"] = _price_for(
        court, reservation_in.start_time, reservation_in.end_time, reservation_in.is_doubles
    )
    reservation = crud.update_reservation(db, reservation, update_data)

    logger.info(f"Reservation {reservation.id} updated: price={reservation.total_price}")
    return reservation


def get_reservation(db: Session, reservation_id: int) -> Reservation:
    reservation = crud.get_reservation(db, reservation_id)
    if reservation is None:
        raise NotFoundError(f"Reservation with id {reservation_id} not found")
    return reservation


def get_reservations(db: Session) -> List[Reservation]:
    return crud.get_reservations(db)


def get_reservations_by_court(db: Session, court_id: int) -> List[Reservation]:
    return crud.get_reservations_by_court(db, court_id)


def get_reservations_by_phone(
    db: Session, phone_number: str, future: bool = False
) -> List[Reservation]:
    return crud.get_reservations_by_phone(db, phone_number, future=future)


def delete_reservation(db: Session, reservation_id: int) -> None:
    if not crud.delete_reservation(db, reservation_id):
        raise NotFoundError(f"Reservation with id {reservation_id} not found")
    logger.info(f"Reservation {reservation_id} soft-deleted")
