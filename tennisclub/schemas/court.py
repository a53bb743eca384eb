from pydantic import BaseModel
from typing import Optional

from tennisclub.schemas.surface import SurfaceResponse


class CourtCreate(BaseModel):
    name: str
    # Opcional a nivel de esquema: la ausencia se reporta como argumento inválido
    surface_id: Optional[int] = None


class CourtUpdate(BaseModel):
    name: Optional[str] = None
    surface_id: Optional[int] = None


class CourtResponse(BaseModel):
    id: int
    name: str
    surface: SurfaceResponse

    class Config:
        from_attributes = True
