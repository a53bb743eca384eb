from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from tennisclub.database import get_db
from tennisclub.schemas.surface import SurfaceCreate, SurfaceResponse, SurfaceUpdate
from tennisclub.services import surface_service

router = APIRouter()


@router.post("/", response_model=SurfaceResponse, status_code=201)
def create_surface(surface: SurfaceCreate, db: Session = Depends(get_db)):
    return surface_service.create_surface(db, surface)


@router.get("/", response_model=List[SurfaceResponse])
def read_surfaces(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return surface_service.get_surfaces(db, skip=skip, limit=limit)


@router.get("/{surface_id}", response_model=SurfaceResponse)
def read_surface(surface_id: int, db: Session = Depends(get_db)):
    return surface_service.get_surface(db, surface_id)


@router.put("/{surface_id}", response_model=SurfaceResponse)
def update_surface(
    surface_id: int, surface: SurfaceUpdate, db: Session = Depends(get_db)
):
    return surface_service.update_surface(db, surface_id, surface)


@router.delete("/{surface_id}")
def delete_surface(surface_id: int, db: Session = Depends(get_db)):
    surface_service.delete_surface(db, surface_id)
    return {"message": "Surface deleted successfully"}
