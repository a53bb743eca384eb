from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from tennisclub import mappers
from tennisclub.crud import surface as crud
from tennisclub.exceptions import ConflictError, NotFoundError
from tennisclub.models.surface import Surface
from tennisclub.schemas.surface import SurfaceCreate, SurfaceUpdate

logger = logging.getLogger(__name__)


def _ensure_name_available(db: Session, name: str, surface_id: Optional[int] = None) -> None:
    existing = (
        db.query(Surface)
        .filter(Surface.name == name, Surface.deleted == False)
        .first()
    )
    if existing is not None and existing.id != surface_id:
        raise ConflictError(f"Surface '{name}' already exists")


def create_surface(db: Session, surface_in: SurfaceCreate) -> Surface:
    _ensure_name_available(db, surface_in.name)
    surface = crud.create_surface(db, Surface(**surface_in.model_dump()))
    logger.info(f"Surface {surface.id} '{surface.name}' created")
    return surface


def get_surface(db: Session, surface_id: int) -> Surface:
    surface = crud.get_surface(db, surface_id)
    if surface is None:
        raise NotFoundError(f"Surface with id {surface_id} not found")
    return surface


def get_surfaces(db: Session, skip: int = 0, limit: int = 100) -> List[Surface]:
    return crud.get_surfaces(db, skip=skip, limit=limit)


def update_surface(db: Session, surface_id: int, surface_in: SurfaceUpdate) -> Surface:
    surface = get_surface(db, surface_id)
    update_data = surface_in.model_dump(exclude_unset=True)
    mappers.require_values(update_data, "name", "price_per_minute")
    if "name" in update_data:
        _ensure_name_available(db, update_data["name"], surface_id)
    return crud.update_surface(db, surface, update_data)


def delete_surface(db: Session, surface_id: int) -> None:
    if not crud.delete_surface(db, surface_id):
        raise NotFoundError(f"Surface with id {surface_id} not found")
    logger.info(f"Surface {surface_id} soft-deleted")
