"""
Utilidades para detectar solapamientos de reservas en una cancha.

Los intervalos son semiabiertos: una reserva que termina a las 11:00 no
choca con otra que empieza a las 11:00.
"""

from datetime import datetime
from typing import Iterable, Optional
from sqlalchemy.orm import Session

from tennisclub.crud import reservation as reservation_crud
from tennisclub.models.reservation import Reservation


def windows_overlap(
    start_time: datetime,
    end_time: datetime,
    other_start: datetime,
    other_end: datetime,
) -> bool:
    return start_time < other_end and end_time > other_start


def overlaps_any(
    start_time: datetime,
    end_time: datetime,
    reservations: Iterable[Reservation],
    exclude_reservation_id: Optional[int] = None,
) -> bool:
    """
    Verifica si la ventana propuesta se solapa con alguna de las reservas dadas.

    Args:
        start_time: Inicio propuesto
        end_time: Fin propuesto
        reservations: Reservas existentes de la cancha
        exclude_reservation_id: Reserva a ignorar (la propia, al actualizar)

    Returns:
        bool: True si hay solapamiento, False en caso contrario
    """
    return any(
        windows_overlap(start_time, end_time, r.start_time, r.end_time)
        for r in reservations
        if exclude_reservation_id is None or r.id != exclude_reservation_id
    )


def has_conflict(
    db: Session,
    court_id: int,
    start_time: datetime,
    end_time: datetime,
    exclude_reservation_id: Optional[int] = None,
) -> bool:
    # Se comparan todas las reservas vivas de la cancha, pasadas incluidas
    existing = reservation_crud.get_reservations_by_court(db, court_id)
    return overlaps_any(start_time, end_time, existing, exclude_reservation_id)
