from sqlalchemy.orm import Session
from typing import List, Optional

from tennisclub.crud.base import SoftDeleteRepository
from tennisclub.models.surface import Surface

repository = SoftDeleteRepository(Surface)


def get_surface(db: Session, surface_id: int) -> Optional[Surface]:
    return repository.get(db, surface_id)


def get_surfaces(db: Session, skip: int = 0, limit: int = 100) -> List[Surface]:
    return repository.get_all(db, skip=skip, limit=limit)


def count_surfaces(db: Session) -> int:
    return db.query(Surface).filter(Surface.deleted == False).count()


def create_surface(db: Session, surface: Surface) -> Surface:
    return repository.create(db, surface)


def update_surface(db: Session, db_surface: Surface, update_data: dict) -> Surface:
    return repository.update(db, db_surface, update_data)


def delete_surface(db: Session, surface_id: int) -> bool:
    return repository.soft_delete(db, surface_id)
