from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal


class SurfaceBase(BaseModel):
    name: str
    price_per_minute: Decimal = Field(..., ge=0, decimal_places=2)


class SurfaceCreate(SurfaceBase):
    pass


class SurfaceUpdate(BaseModel):
    name: Optional[str] = None
    price_per_minute: Optional[Decimal] = Field(None, ge=0, decimal_places=2)


class SurfaceResponse(SurfaceBase):
    id: int

    class Config:
        from_attributes = True
