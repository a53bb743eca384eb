from pydantic import BaseModel, field_serializer, field_validator
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from tennisclub.schemas.court import CourtResponse
from tennisclub.schemas.user import UserResponse

CENTS = Decimal("0.01")


def format_price(value: Decimal) -> Decimal:
    """Muestra el precio con 2 decimales salvo que haga falta más precisión."""
    quantized = value.quantize(CENTS)
    return quantized if quantized == value else value.normalize()


class ReservationBase(BaseModel):
    court_id: Optional[int] = None
    user_name: str
    phone_number: str
    start_time: datetime
    end_time: datetime
    is_doubles: bool = False

    @field_validator("start_time", "end_time")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        # Las columnas DateTime guardan horas sin zona: se almacena todo en UTC
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class ReservationCreate(ReservationBase):
    pass


class ReservationUpdate(ReservationBase):
    pass


class ReservationPriceResponse(BaseModel):
    total_price: Decimal

    @field_serializer("total_price")
    def serialize_total_price(self, total_price: Decimal) -> Decimal:
        return format_price(total_price)


class ReservationResponse(BaseModel):
    id: int
    court: CourtResponse
    user: UserResponse
    start_time: datetime
    end_time: datetime
    is_doubles: bool
    total_price: Decimal

    class Config:
        from_attributes = True

    @field_serializer("total_price")
    def serialize_total_price(self, total_price: Decimal) -> Decimal:
        return format_price(total_price)
