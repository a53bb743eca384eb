from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Boolean
from sqlalchemy.orm import relationship
from datetime import datetime

from tennisclub.database import Base


class Court(Base):
    __tablename__ = "courts"
    __table_args__ = {"extend_existing": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    surface_id = Column(Integer, ForeignKey("surfaces.id"), nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    surface = relationship("Surface", back_populates="courts")
    reservations = relationship("Reservation", back_populates="court")