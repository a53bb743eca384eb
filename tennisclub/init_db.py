from sqlalchemy.orm import Session
from decimal import Decimal
import logging

from tennisclub.crud import court as court_crud
from tennisclub.crud import surface as surface_crud
from tennisclub.models.court import Court
from tennisclub.models.surface import Surface

logger = logging.getLogger(__name__)


def create_initial_data(db: Session):
    """
    Crea las superficies y canchas de demostración si no hay superficies.
    """
    if surface_crud.count_surfaces(db) > 0:
        logger.info("Surfaces already exist, skipping initial data.")
        return

    clay = surface_crud.create_surface(
        db, Surface(name="Clay", price_per_minute=Decimal("0.50"))
    )
    grass = surface_crud.create_surface(
        db, Surface(name="Grass", price_per_minute=Decimal("0.80"))
    )

    # Canchas pares en polvo de ladrillo, impares en césped
    for i in range(1, 5):
        court = court_crud.create_court(
            db, Court(name=f"Court {i}", surface=clay if i % 2 == 0 else grass)
        )
        logger.info(f"Court created: {court.name} ({court.surface.name})")
