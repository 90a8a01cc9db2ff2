"""
Acces donnees Vehicule / Vehicle data access.
Toutes les lectures sont cloisonnees par proprietaire.
Every read is scoped to the owning user.
"""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.models.vehicle import Vehicle


async def get_owned(db: AsyncSession, vehicle_id: int, owner_id: int) -> Vehicle | None:
    """Vehicule si possede par owner_id / Vehicle if owned by owner_id."""
    result = await db.execute(
        select(Vehicle).where(Vehicle.id == vehicle_id, Vehicle.user_id == owner_id)
    )
    return result.scalar_one_or_none()


async def list_owned(db: AsyncSession, owner_id: int) -> list[Vehicle]:
    result = await db.execute(
        select(Vehicle).where(Vehicle.user_id == owner_id).order_by(Vehicle.id)
    )
    return list(result.scalars().all())


async def license_plate_exists(db: AsyncSession, license_plate: str) -> bool:
    result = await db.execute(select(exists().where(Vehicle.license_plate == license_plate)))
    return bool(result.scalar())
