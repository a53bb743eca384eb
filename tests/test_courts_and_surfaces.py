"""
Tests para la administración de superficies y canchas
"""
import pytest
from decimal import Decimal

from tennisclub.crud import court as court_crud
from tennisclub.crud import surface as surface_crud
from tennisclub.exceptions import ConflictError, InvalidArgumentError, NotFoundError
from tennisclub.init_db import create_initial_data
from tennisclub.models.court import Court
from tennisclub.models.surface import Surface
from tennisclub.schemas.court import CourtCreate, CourtUpdate
from tennisclub.schemas.surface import SurfaceCreate, SurfaceUpdate
from tennisclub.services import court_service, surface_service


def test_create_court_resolves_surface(db, sample_surface):
    court = court_service.create_court(db, CourtCreate(name="Center", surface_id=sample_surface.id))

    assert court.id is not None
    assert court.surface.id == sample_surface.id


def test_create_court_without_surface_is_invalid(db):
    with pytest.raises(InvalidArgumentError):
        court_service.create_court(db, CourtCreate(name="Center"))


def test_create_court_with_unknown_surface_not_found(db):
    with pytest.raises(NotFoundError):
        court_service.create_court(db, CourtCreate(name="Center", surface_id=99))


def test_update_court_changes_name_and_surface(db, sample_court):
    grass = surface_service.create_surface(
        db, SurfaceCreate(name="Grass", price_per_minute=Decimal("0.80"))
    )

    court = court_service.update_court(
        db, sample_court.id, CourtUpdate(name="Renamed", surface_id=grass.id)
    )

    assert court.name == "Renamed"
    assert court.surface_id == grass.id


def test_deleted_court_hidden_but_kept(db, sample_court):
    court_service.delete_court(db, sample_court.id)

    assert court_service.get_courts(db) == []
    with pytest.raises(NotFoundError):
        court_service.get_court(db, sample_court.id)
    assert court_crud.repository.get_including_deleted(db, sample_court.id).deleted is True


def test_court_on_deleted_surface_is_hidden(db, sample_court, sample_surface):
    surface_service.delete_surface(db, sample_surface.id)

    assert court_service.get_courts(db) == []
    with pytest.raises(NotFoundError):
        court_service.get_court(db, sample_court.id)


def test_surface_name_unique_among_live_surfaces(db, sample_surface):
    with pytest.raises(ConflictError):
        surface_service.create_surface(
            db, SurfaceCreate(name=sample_surface.name, price_per_minute=Decimal("2.00"))
        )

    surface_service.delete_surface(db, sample_surface.id)
    replacement = surface_service.create_surface(
        db, SurfaceCreate(name=sample_surface.name, price_per_minute=Decimal("2.00"))
    )
    assert replacement.id != sample_surface.id


def test_update_surface_price(db, sample_surface):
    surface = surface_service.update_surface(
        db, sample_surface.id, SurfaceUpdate(price_per_minute=Decimal("1.25"))
    )

    assert surface.price_per_minute == Decimal("1.25")
    assert surface.name == "Hard"


def test_delete_unknown_surface_not_found(db):
    with pytest.raises(NotFoundError):
        surface_service.delete_surface(db, 1)


def test_initial_data_seeds_once(db):
    """
    Test: Se crean Clay y Grass y cuatro canchas alternadas, una sola vez
    """
    create_initial_data(db)
    create_initial_data(db)

    surfaces = {s.name: s for s in surface_crud.get_surfaces(db)}
    assert set(surfaces) == {"Clay", "Grass"}
    assert surfaces["Clay"].price_per_minute == Decimal("0.50")

    courts = court_crud.get_courts(db)
    assert [c.name for c in courts] == ["Court 1", "Court 2", "Court 3", "Court 4"]
    assert [c.surface.name for c in courts] == ["Grass", "Clay", "Grass", "Clay"]


def test_update_rejects_explicit_nulls(db, sample_court, sample_surface):
    """
    Test: Un null explícito en un campo obligatorio es un argumento inválido
    """
    with pytest.raises(InvalidArgumentError):
        court_service.update_court(db, sample_court.id, CourtUpdate(name=None))
    with pytest.raises(InvalidArgumentError):
        court_service.update_court(db, sample_court.id, CourtUpdate(surface_id=None))
    with pytest.raises(InvalidArgumentError):
        surface_service.update_surface(db, sample_surface.id, SurfaceUpdate(price_per_minute=None))
    with pytest.raises(InvalidArgumentError):
        surface_service.update_surface(db, sample_surface.id, SurfaceUpdate(name=None))

    # La sesión sigue usable: no quedó ninguna transacción fallida
    court = court_service.update_court(db, sample_court.id, CourtUpdate(name="Center"))
    assert court.name == "Center"
    assert surface_service.get_surface(db, sample_surface.id).price_per_minute == Decimal("1.00")
