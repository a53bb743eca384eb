"""
Conversión entre esquemas de entrada y modelos.

Las funciones que necesitan resolver una referencia reciben la búsqueda
como argumento, p. ej. `lambda court_id: court_crud.get_court(db, court_id)`.
"""

from typing import Callable, Optional

from tennisclub.exceptions import InvalidArgumentError, NotFoundError
from tennisclub.models.court import Court
from tennisclub.models.surface import Surface
from tennisclub.models.user import User
from tennisclub.schemas.court import CourtCreate
from tennisclub.schemas.reservation import ReservationBase


def resolve_surface(
    surface_id: Optional[int], get_surface: Callable[[int], Optional[Surface]]
) -> Surface:
    if surface_id is None:
        raise InvalidArgumentError("Missing surface_id")

    surface = get_surface(surface_id)
    if surface is None:
        raise NotFoundError(f"Surface with id {surface_id} not found")
    return surface


def resolve_court(
    court_id: Optional[int], get_court: Callable[[int], Optional[Court]]
) -> Court:
    if court_id is None:
        raise InvalidArgumentError("Missing court_id")

    court = get_court(court_id)
    if court is None:
        raise NotFoundError(f"Court with id {court_id} not found")
    return court


def court_from_create(
    court_in: CourtCreate, get_surface: Callable[[int], Optional[Surface]]
) -> Court:
    surface = resolve_surface(court_in.surface_id, get_surface)
    return Court(name=court_in.name, surface=surface)


def reservation_fields(
    reservation_in: ReservationBase, court: Court, user: User
) -> dict:
    """Campos persistibles de la reserva; el precio se agrega aparte."""
    return {
        "court": court,
        "user": user,
        "start_time": reservation_in.start_time,
        "end_time": reservation_in.end_time,
        "is_doubles": reservation_in.is_doubles,
    }


def require_values(update_data: dict, *fields: str) -> None:
    """Rechaza un null explícito en campos que la tabla no admite vacíos."""
    for field in fields:
        if field in update_data and update_data[field] is None:
            raise InvalidArgumentError(f"{field} cannot be null")
