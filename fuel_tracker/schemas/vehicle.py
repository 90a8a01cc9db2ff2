"""Schémas Véhicule / Vehicle schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from fuel_tracker.schemas.base import CamelModel, reject_null


class VehicleBase(CamelModel):
    make: str = Field(min_length=1, max_length=50)
    model: str = Field(min_length=1, max_length=50)
    year: int = Field(ge=1900, le=2100)
    license_plate: str | None = Field(default=None, max_length=20)
    fuel_type: str = Field(min_length=1, max_length=20)
    tank_capacity: float = Field(gt=0)


class VehicleCreate(VehicleBase):
    pass


class VehicleUpdate(CamelModel):
    make: str | None = Field(default=None, min_length=1, max_length=50)
    model: str | None = Field(default=None, min_length=1, max_length=50)
    year: int | None = Field(default=None, ge=1900, le=2100)
    license_plate: str | None = Field(default=None, max_length=20)
    fuel_type: str | None = Field(default=None, min_length=1, max_length=20)
    tank_capacity: float | None = Field(default=None, gt=0)

    @field_validator("make", "model", "year", "fuel_type", "tank_capacity")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)


class VehicleRead(VehicleBase):
    id: int
    created_at: datetime
    updated_at: datetime
