from sqlalchemy.orm import Session
from typing import Generic, List, Optional, Type, TypeVar
import logging

from tennisclub.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class SoftDeleteRepository(Generic[ModelType]):
    """
    Repositorio genérico para modelos con columna `deleted`.

    Nunca se borran filas: `soft_delete` marca el registro y todas las
    búsquedas normales lo excluyen. `get_including_deleted` es la única
    forma de recuperar una fila marcada.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def create(self, db: Session, db_obj: ModelType) -> ModelType:
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get(self, db: Session, obj_id: int) -> Optional[ModelType]:
        logger.debug(f"Finding {self.model.__name__} with id {obj_id}")
        return (
            db.query(self.model)
            .filter(self.model.id == obj_id, self.model.deleted == False)
            .first()
        )

    def get_including_deleted(self, db: Session, obj_id: int) -> Optional[ModelType]:
        return db.get(self.model, obj_id)

    def get_all(self, db: Session, skip: int = 0, limit: int = 100) -> List[ModelType]:
        return (
            db.query(self.model)
            .filter(self.model.deleted == False)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def update(self, db: Session, db_obj: ModelType, update_data: dict) -> ModelType:
        for field, value in update_data.items():
            setattr(db_obj, field, value)

        db.commit()
        db.refresh(db_obj)
        return db_obj

    def soft_delete(self, db: Session, obj_id: int) -> bool:
        db_obj = self.get(db, obj_id)
        if not db_obj:
            return False

        db_obj.deleted = True
        db.commit()
        return True

    def soft_delete_all(self, db: Session) -> int:
        count = (
            db.query(self.model)
            .filter(self.model.deleted == False)
            .update({self.model.deleted: True}, synchronize_session="fetch")
        )
        db.commit()
        return count
