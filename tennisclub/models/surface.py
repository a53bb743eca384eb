from sqlalchemy import Column, Integer, String, Numeric, Boolean, DateTime, Index, text
from sqlalchemy.orm import relationship
from datetime import datetime

from tennisclub.database import Base


class Surface(Base):
    __tablename__ = "surfaces"
    __table_args__ = (
        # Nombre único solo entre superficies no borradas
        Index(
            "uq_surfaces_name_active",
            "name",
            unique=True,
            sqlite_where=text("deleted = 0"),
            postgresql_where=text("deleted = false"),
        ),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    price_per_minute = Column(Numeric(10, 2), nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    courts = relationship("Court", back_populates="surface")
