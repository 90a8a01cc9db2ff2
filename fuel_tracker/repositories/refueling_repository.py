"""
Acces donnees Plein / Refueling data access.

Lecture cloisonnee par proprietaire via la jointure sur Vehicle.user_id.
Owner-scoped reads through a join on Vehicle.user_id.
"""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.models.refueling import Refueling
from fuel_tracker.models.vehicle import Vehicle


async def fetch_records(
    db: AsyncSession,
    vehicle_id: int,
    owner_id: int,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
) -> list[Refueling]:
    """
    Pleins d'un vehicule / Refuelings of one vehicle.

    Avec les deux bornes : periode incluse, date croissante.
    Sinon : tous les pleins, date decroissante.
    With both bounds: inclusive period, ascending date.
    Otherwise: every record, descending date.
    """
    query = (
        select(Refueling)
        .join(Vehicle, Refueling.vehicle_id == Vehicle.id)
        .where(Refueling.vehicle_id == vehicle_id, Vehicle.user_id == owner_id)
    )
    if start_date is not None and end_date is not None:
        query = query.where(Refueling.date >= start_date, Refueling.date <= end_date)
        query = query.order_by(Refueling.date.asc(), Refueling.id.asc())
    else:
        query = query.order_by(Refueling.date.desc(), Refueling.id.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_owned(db: AsyncSession, refueling_id: int, owner_id: int) -> Refueling | None:
    """Plein si son vehicule appartient a owner_id / Refueling if its vehicle belongs to owner_id."""
    result = await db.execute(
        select(Refueling)
        .join(Vehicle, Refueling.vehicle_id == Vehicle.id)
        .where(Refueling.id == refueling_id, Vehicle.user_id == owner_id)
    )
    return result.scalar_one_or_none()
