"""Modele plein de carburant / Refueling model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fuel_tracker.database import Base


class Refueling(Base):
    """Plein de carburant / Refueling event.

    total_cost est toujours recalcule par le service (fuel_amount * price_per_liter).
    total_cost is always recomputed by the service (fuel_amount * price_per_liter).
    """
    __tablename__ = "refuelings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    odometer: Mapped[float] = mapped_column(Float, nullable=False)  # km
    fuel_amount: Mapped[float] = mapped_column(Float, nullable=False)  # litres
    price_per_liter: Mapped[float] = mapped_column(Float, nullable=False)
    total_cost: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)
    full_tank: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)

    # Relations
    vehicle: Mapped["Vehicle"] = relationship(back_populates="refuelings")

    def __repr__(self) -> str:
        return f"<Refueling {self.date} - {self.fuel_amount}L @ {self.odometer}km - vehicle {self.vehicle_id}>"
