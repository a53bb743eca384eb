from sqlalchemy.orm import Session
from typing import List, Optional

from tennisclub.crud.base import SoftDeleteRepository
from tennisclub.models.court import Court
from tennisclub.models.surface import Surface

repository = SoftDeleteRepository(Court)


def _live_courts(db: Session):
    # Una cancha sobre una superficie borrada tampoco es válida
    return (
        db.query(Court)
        .join(Court.surface)
        .filter(Court.deleted == False, Surface.deleted == False)
    )


def get_court(db: Session, court_id: int) -> Optional[Court]:
    return _live_courts(db).filter(Court.id == court_id).first()


def get_courts(db: Session, skip: int = 0, limit: int = 100) -> List[Court]:
    return _live_courts(db).order_by(Court.id).offset(skip).limit(limit).all()


def create_court(db: Session, court: Court) -> Court:
    return repository.create(db, court)


def update_court(db: Session, db_court: Court, update_data: dict) -> Court:
    return repository.update(db, db_court, update_data)


def delete_court(db: Session, court_id: int) -> bool:
    return repository.soft_delete(db, court_id)
