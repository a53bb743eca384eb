"""
Tests para la resolución de usuarios por teléfono
"""
from tennisclub.crud import user as user_crud
from tennisclub.models.user import User
from tennisclub.services.user_service import resolve_user


def test_new_phone_creates_user(db):
    user = resolve_user(db, "123456789", "Rafa")

    assert user.id is not None
    assert user.name == "Rafa"
    assert user.phone_number == "123456789"
    assert db.query(User).count() == 1


def test_existing_phone_returns_same_user(db):
    """
    Test: El teléfono identifica al usuario; el nombre guardado no se pisa
    """
    first = resolve_user(db, "123456789", "Rafa")
    second = resolve_user(db, "123456789", "Roger")

    assert second.id == first.id
    assert second.name == "Rafa"
    assert db.query(User).count() == 1


def test_different_phones_create_different_users(db):
    first = resolve_user(db, "111", "Ana")
    second = resolve_user(db, "222", "Ana")

    assert first.id != second.id


def test_deleted_user_is_not_reused(db):
    """
    Test: Un usuario borrado no se encuentra y su teléfono puede volver a usarse
    """
    old = resolve_user(db, "123", "Old")
    user_crud.delete_user(db, old.id)

    new = resolve_user(db, "123", "New")

    assert new.id != old.id
    assert new.name == "New"
    assert user_crud.repository.get_including_deleted(db, old.id).deleted is True
