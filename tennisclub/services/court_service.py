from sqlalchemy.orm import Session
from typing import List
import logging

from tennisclub import mappers
from tennisclub.crud import court as crud
from tennisclub.crud import surface as surface_crud
from tennisclub.exceptions import NotFoundError
from tennisclub.models.court import Court
from tennisclub.schemas.court import CourtCreate, CourtUpdate

logger = logging.getLogger(__name__)


def create_court(db: Session, court_in: CourtCreate) -> Court:
    court = mappers.court_from_create(
        court_in, lambda surface_id: surface_crud.get_surface(db, surface_id)
    )
    court = crud.create_court(db, court)
    logger.info(f"Court {court.id} '{court.name}' created on surface {court.surface_id}")
    return court


def get_court(db: Session, court_id: int) -> Court:
    court = crud.get_court(db, court_id)
    if court is None:
        raise NotFoundError(f"Court with id {court_id} not found")
    return court


def get_courts(db: Session, skip: int = 0, limit: int = 100) -> List[Court]:
    return crud.get_courts(db, skip=skip, limit=limit)


def update_court(db: Session, court_id: int, court_in: CourtUpdate) -> Court:
    court = get_court(db, court_id)
    update_data = court_in.model_dump(exclude_unset=True)
    mappers.require_values(update_data, "name")

    if "surface_id" in update_data:
        update_data["surface"] = mappers.resolve_surface(
            update_data.pop("surface_id"),
            lambda surface_id: surface_crud.get_surface(db, surface_id),
        )

    return crud.update_court(db, court, update_data)


def delete_court(db: Session, court_id: int) -> None:
    if not crud.delete_court(db, court_id):
        raise NotFoundError(f"Court with id {court_id} not found")
    logger.info(f"Court {court_id} soft-deleted")
