"""
Configuración compartida para tests pytest
"""
import pytest
from datetime import datetime
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tennisclub.database import Base, get_db

# Importar todos los modelos para que SQLAlchemy pueda resolver las relaciones
from tennisclub.models.surface import Surface
from tennisclub.models.court import Court
from tennisclub.models.user import User
from tennisclub.models.reservation import Reservation


# Base de datos en memoria para tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    """Crear base de datos de test y limpiarla después"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def override_get_db(db):
    """Override de get_db para tests"""
    def _get_db():
        try:
            yield db
        finally:
            pass
    return _get_db


@pytest.fixture
def client(override_get_db):
    """Cliente HTTP sin lifespan: las tablas las crea el fixture db"""
    from tennisclub.main import app

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_surface(db):
    """Superficie de prueba a 1.00 por minuto"""
    surface = Surface(name="Hard", price_per_minute=Decimal("1.00"))
    db.add(surface)
    db.commit()
    db.refresh(surface)
    return surface


@pytest.fixture
def sample_court(db, sample_surface):
    """Cancha de prueba sobre la superficie de prueba"""
    court = Court(name="Court 1", surface=sample_surface)
    db.add(court)
    db.commit()
    db.refresh(court)
    return court


@pytest.fixture
def at():
    """Atajo para construir horas del 2030-06-01"""
    def _at(hour: int, minute: int = 0, second: int = 0) -> datetime:
        return datetime(2030, 6, 1, hour, minute, second)
    return _at
