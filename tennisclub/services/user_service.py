from sqlalchemy.orm import Session
from typing import List
import logging

from tennisclub.crud import user as crud
from tennisclub.exceptions import NotFoundError
from tennisclub.models.user import User

logger = logging.getLogger(__name__)


def resolve_user(db: Session, phone_number: str, name: str) -> User:
    """
    Devuelve el usuario vivo con ese teléfono o lo crea si no existe.

    El teléfono es la identidad del usuario: si ya existe, su nombre guardado
    se mantiene aunque la reserva traiga otro.

    Args:
        db: Sesión de base de datos
        phone_number: Teléfono tal como llega en la reserva
        name: Nombre a usar solo si hay que crear el usuario

    Returns:
        User: Usuario existente o recién creado
    """
    user = crud.get_user_by_phone(db, phone_number)
    if user is not None:
        return user

    user = crud.create_user(db, name=name, phone_number=phone_number)
    logger.info(f"User {user.id} created for phone {phone_number}")
    return user


def get_user(db: Session, user_id: int) -> User:
    user = crud.get_user(db, user_id)
    if user is None:
        raise NotFoundError(f"User with id {user_id} not found")
    return user


def get_users(db: Session, skip: int = 0, limit: int = 100) -> List[User]:
    return crud.get_users(db, skip=skip, limit=limit)


def delete_user(db: Session, user_id: int) -> None:
    if not crud.delete_user(db, user_id):
        raise NotFoundError(f"User with id {user_id} not found")
    logger.info(f"User {user_id} soft-deleted")
