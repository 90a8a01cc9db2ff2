"""
Service Vehicule / Vehicle service.
CRUD des vehicules avec controle de propriete.
Vehicle CRUD with ownership checks.
"""

import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.exceptions import DuplicateResourceError, ResourceNotFoundError
from fuel_tracker.models.vehicle import Vehicle
from fuel_tracker.repositories import vehicle_repository
from fuel_tracker.schemas.vehicle import VehicleCreate, VehicleUpdate

logger = logging.getLogger(__name__)

VEHICLE_NOT_FOUND = "Vehicle not found or access denied"
DUPLICATE_PLATE = "Vehicle with this license plate already exists"


class VehicleService:
    """Gestion des vehicules d'un utilisateur / Management of a user's vehicles."""

    @staticmethod
    async def create_vehicle(db: AsyncSession, data: VehicleCreate, user_id: int) -> Vehicle:
        if data.license_plate is not None and await vehicle_repository.license_plate_exists(db, data.license_plate):
            logger.warning("Duplicate license plate %s rejected for user %s", data.license_plate, user_id)
            raise DuplicateResourceError(DUPLICATE_PLATE)

        dump = data.model_dump()
        dump["fuel_type"] = dump["fuel_type"].upper()
        vehicle = Vehicle(user_id=user_id, **dump)
        db.add(vehicle)
        await db.flush()
        await db.refresh(vehicle)
        logger.info("Vehicle %s created for user %s", vehicle.id, user_id)
        return vehicle

    @staticmethod
    async def list_vehicles(db: AsyncSession, user_id: int) -> list[Vehicle]:
        return await vehicle_repository.list_owned(db, user_id)

    @staticmethod
    async def get_vehicle(db: AsyncSession, vehicle_id: int, user_id: int) -> Vehicle:
        vehicle = await vehicle_repository.get_owned(db, vehicle_id, user_id)
        if vehicle is None:
            raise ResourceNotFoundError(VEHICLE_NOT_FOUND)
        return vehicle

    @staticmethod
    async def update_vehicle(db: AsyncSession, vehicle_id: int, data: VehicleUpdate, user_id: int) -> Vehicle:
        """Mise a jour partielle / Partial update. Omitted fields keep their value."""
        vehicle = await VehicleService.get_vehicle(db, vehicle_id, user_id)
        updates = data.model_dump(exclude_unset=True)

        new_plate = updates.get("license_plate")
        if (
            new_plate is not None
            and new_plate != vehicle.license_plate
            and await vehicle_repository.license_plate_exists(db, new_plate)
        ):
            logger.warning("Duplicate license plate %s rejected for vehicle %s", new_plate, vehicle_id)
            raise DuplicateResourceError(DUPLICATE_PLATE)

        if "fuel_type" in updates:
            updates["fuel_type"] = updates["fuel_type"].upper()

        for key, value in updates.items():
            setattr(vehicle, key, value)
        vehicle.updated_at = datetime.now()

        await db.flush()
        await db.refresh(vehicle)
        logger.info("Vehicle %s updated (%s)", vehicle_id, ", ".join(sorted(updates)) or "no fields")
        return vehicle

    @staticmethod
    async def delete_vehicle(db: AsyncSession, vehicle_id: int, user_id: int) -> None:
        vehicle = await VehicleService.get_vehicle(db, vehicle_id, user_id)
        await db.delete(vehicle)
        await db.flush()
        logger.info("Vehicle %s deleted", vehicle_id)
