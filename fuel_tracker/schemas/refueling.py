"""
Schémas Plein et analyses / Refueling and analytics schemas.
"""

from datetime import datetime

from pydantic import Field, field_validator

from fuel_tracker.schemas.base import CamelModel, naive, reject_null


# --- Pleins / Refuelings ---

class RefuelingCreate(CamelModel):
    vehicle_id: int
    date: datetime
    odometer: float = Field(gt=0)
    fuel_amount: float = Field(gt=0)
    price_per_liter: float = Field(gt=0)
    notes: str | None = None
    full_tank: bool = False

    @field_validator("date")
    @classmethod
    def drop_offset(cls, value):
        return naive(value)


class RefuelingUpdate(CamelModel):
    date: datetime | None = None
    odometer: float | None = Field(default=None, gt=0)
    fuel_amount: float | None = Field(default=None, gt=0)
    price_per_liter: float | None = Field(default=None, gt=0)
    notes: str | None = None
    full_tank: bool | None = None

    @field_validator("date", "odometer", "fuel_amount", "price_per_liter", "full_tank")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)

    @field_validator("date")
    @classmethod
    def drop_offset(cls, value):
        return naive(value)


class RefuelingRead(CamelModel):
    id: int
    vehicle_id: int
    date: datetime
    odometer: float
    fuel_amount: float
    price_per_liter: float
    total_cost: float
    notes: str | None = None
    full_tank: bool
    fuel_consumption: float | None = None  # L/100km, None si non calculable
    distance_since_last_refueling: float | None = None  # km, None pour le premier plein
    created_at: datetime
    updated_at: datetime


# --- Analyses / Analytics ---

class FuelStatisticsResponse(CamelModel):
    vehicle_id: int
    total_refuelings: int
    total_fuel_amount: float
    total_cost: float
    average_consumption: float | None = None  # L/100km
    average_price_per_liter: float
    total_distance: float
    period_start: datetime | None = None
    period_end: datetime | None = None


class ConsumptionGraphDataPoint(CamelModel):
    date: datetime
    fuel_consumption: float  # L/100km
    odometer: float


class ConsumptionGraphResponse(CamelModel):
    vehicle_id: int
    data_points: list[ConsumptionGraphDataPoint]
    average_consumption: float | None = None


class CostGraphDataPoint(CamelModel):
    date: datetime
    total_cost: float
    price_per_liter: float


class CostGraphResponse(CamelModel):
    vehicle_id: int
    data_points: list[CostGraphDataPoint]
    total_cost: float
    average_price_per_liter: float
