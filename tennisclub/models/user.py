from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index, text
from sqlalchemy.orm import relationship
from datetime import datetime

from tennisclub.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_phone_number_active",
            "phone_number",
            unique=True,
            sqlite_where=text("deleted = 0"),
            postgresql_where=text("deleted = false"),
        ),
        {"extend_existing": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True)
    phone_number = Column(String, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    reservations = relationship("Reservation", back_populates="user")
