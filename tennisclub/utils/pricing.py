"""
Cálculo del precio de una reserva.

El precio se deriva siempre de la superficie de la cancha y de la duración
de la reserva; nunca se acepta desde el cliente.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Union

from tennisclub.config import SINGLES_PRICE_MULTIPLIER

ONE_MINUTE = timedelta(minutes=1)


def reservation_minutes(start_time: datetime, end_time: datetime) -> int:
    """
    Minutos completos entre inicio y fin, truncados hacia cero.

    Los segundos sobrantes no se cobran: 10:00:00 a 10:10:59 son 10 minutos.
    """
    delta = end_time - start_time
    minutes = abs(delta) // ONE_MINUTE
    return minutes if delta >= timedelta(0) else -minutes


def compute_price(
    price_per_minute: Union[Decimal, int, str],
    start_time: datetime,
    end_time: datetime,
    is_doubles: bool,
) -> Decimal:
    """
    Calcula el precio total de una reserva.

    El recargo de 1.5x se aplica a los partidos de singles; los dobles pagan
    la tarifa base.

    Args:
        price_per_minute: Precio por minuto de la superficie
        start_time: Inicio de la reserva
        end_time: Fin de la reserva
        is_doubles: True si la reserva es de dobles

    Returns:
        Decimal: Precio total, sin redondear
    """
    minutes = reservation_minutes(start_time, end_time)
    total_price = Decimal(price_per_minute) * minutes

    if not is_doubles:
        total_price = total_price * SINGLES_PRICE_MULTIPLIER

    return total_price
