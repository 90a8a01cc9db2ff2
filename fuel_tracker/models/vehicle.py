"""Modele Vehicule / Vehicle model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fuel_tracker.database import Base


class Vehicle(Base):
    """Vehicule d'un utilisateur / Vehicle owned by a user."""
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)

    # --- Identification ---
    make: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    license_plate: Mapped[str | None] = mapped_column(String(20), unique=True)

    # --- Carburant / Fuel ---
    fuel_type: Mapped[str] = mapped_column(String(20), nullable=False)  # GASOLINE, DIESEL, ELECTRIC, HYBRID
    tank_capacity: Mapped[float] = mapped_column(Float, nullable=False)  # litres

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)

    # Relations
    user: Mapped["User"] = relationship(back_populates="vehicles")
    refuelings: Mapped[list["Refueling"]] = relationship(
        back_populates="vehicle", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Vehicle {self.make} {self.model} ({self.year})>"
