from decimal import Decimal
from dotenv import load_dotenv
import os

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tennisclub.db")

# Startup
APP_DATA_INIT = _env_flag("APP_DATA_INIT")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Reservation rules
MIN_RESERVATION_MINUTES = 10
SINGLES_PRICE_MULTIPLIER = Decimal("1.5")

# Las actualizaciones no revalidan solapamientos salvo que se active explícitamente
RESERVATION_UPDATE_CHECKS_CONFLICTS = _env_flag("RESERVATION_UPDATE_CHECKS_CONFLICTS")
