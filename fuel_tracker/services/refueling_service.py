"""
Service Pleins / Refueling service.

CRUD des pleins et points d'entree des analyses. Les champs derives et les
statistiques sont recalcules a chaque lecture a partir d'un instantane
complet des pleins du vehicule.
Refueling CRUD and analytics entry points. Derived fields and statistics are
recomputed on every read from one full snapshot of the vehicle's records.
"""

import logging
from dataclasses import asdict
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.exceptions import ResourceNotFoundError
from fuel_tracker.models.refueling import Refueling
from fuel_tracker.repositories import refueling_repository, vehicle_repository
from fuel_tracker.schemas.refueling import (
    ConsumptionGraphResponse,
    CostGraphResponse,
    FuelStatisticsResponse,
    RefuelingCreate,
    RefuelingRead,
    RefuelingUpdate,
)
from fuel_tracker.services.fuel_analytics import DerivedFields, FuelAnalyticsService, RefuelingRecord

logger = logging.getLogger(__name__)

VEHICLE_NOT_FOUND = "Vehicle not found or access denied"
REFUELING_NOT_FOUND = "Refueling record not found or access denied"


def _to_read(entity: Refueling, derived: DerivedFields) -> RefuelingRead:
    return RefuelingRead(
        id=entity.id,
        vehicle_id=entity.vehicle_id,
        date=entity.date,
        odometer=entity.odometer,
        fuel_amount=entity.fuel_amount,
        price_per_liter=entity.price_per_liter,
        total_cost=entity.total_cost,
        notes=entity.notes,
        full_tank=entity.full_tank,
        fuel_consumption=derived.fuel_consumption,
        distance_since_last_refueling=derived.distance_since_last_refueling,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


class RefuelingService:
    """Gestion des pleins et analyses / Refuelings and analytics."""

    @staticmethod
    async def _require_vehicle(db: AsyncSession, vehicle_id: int, user_id: int) -> None:
        if await vehicle_repository.get_owned(db, vehicle_id, user_id) is None:
            raise ResourceNotFoundError(VEHICLE_NOT_FOUND)

    @staticmethod
    async def _snapshot(db: AsyncSession, vehicle_id: int, user_id: int) -> list[RefuelingRecord]:
        """Instantane complet des pleins / Full snapshot of the vehicle's records."""
        rows = await refueling_repository.fetch_records(db, vehicle_id, user_id)
        return [RefuelingRecord.from_entity(row) for row in rows]

    @staticmethod
    async def _enriched(db: AsyncSession, entity: Refueling, user_id: int) -> RefuelingRead:
        snapshot = await RefuelingService._snapshot(db, entity.vehicle_id, user_id)
        derived = FuelAnalyticsService.enrich_record(RefuelingRecord.from_entity(entity), snapshot)
        return _to_read(entity, derived)

    @staticmethod
    async def _get_owned(db: AsyncSession, refueling_id: int, user_id: int) -> Refueling:
        entity = await refueling_repository.get_owned(db, refueling_id, user_id)
        if entity is None:
            raise ResourceNotFoundError(REFUELING_NOT_FOUND)
        return entity

    # --- CRUD ---

    @staticmethod
    async def create_refueling(db: AsyncSession, data: RefuelingCreate, user_id: int) -> RefuelingRead:
        await RefuelingService._require_vehicle(db, data.vehicle_id, user_id)

        entity = Refueling(
            **data.model_dump(),
            total_cost=FuelAnalyticsService.total_cost_of(data.fuel_amount, data.price_per_liter),
        )
        db.add(entity)
        await db.flush()
        await db.refresh(entity)
        logger.info("Refueling %s created for vehicle %s", entity.id, entity.vehicle_id)
        return await RefuelingService._enriched(db, entity, user_id)

    @staticmethod
    async def list_refuelings(
        db: AsyncSession,
        vehicle_id: int,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[RefuelingRead]:
        """Pleins enrichis contre un seul instantane / Records enriched against one snapshot."""
        await RefuelingService._require_vehicle(db, vehicle_id, user_id)
        rows = await refueling_repository.fetch_records(db, vehicle_id, user_id)
        entities = {row.id: row for row in rows}
        snapshot = [RefuelingRecord.from_entity(row) for row in rows]
        selected = FuelAnalyticsService.select_period(snapshot, start_date, end_date)
        return [
            _to_read(entities[record.id], FuelAnalyticsService.enrich_record(record, snapshot))
            for record in selected
        ]

    @staticmethod
    async def get_refueling(db: AsyncSession, refueling_id: int, user_id: int) -> RefuelingRead:
        entity = await RefuelingService._get_owned(db, refueling_id, user_id)
        return await RefuelingService._enriched(db, entity, user_id)

    @staticmethod
    async def update_refueling(
        db: AsyncSession, refueling_id: int, data: RefuelingUpdate, user_id: int
    ) -> RefuelingRead:
        """
        Mise a jour partielle / Partial update.

        Un champ omis est conserve ; total_cost est recalcule a partir des
        valeurs resolues.
        An omitted field keeps its value; total_cost is recomputed from the
        resolved values.
        """
        entity = await RefuelingService._get_owned(db, refueling_id, user_id)
        patch = data.model_dump(exclude_unset=True)

        for key, value in patch.items():
            setattr(entity, key, value)
        entity.total_cost = FuelAnalyticsService.total_cost_of(entity.fuel_amount, entity.price_per_liter)
        entity.updated_at = datetime.now()

        await db.flush()
        await db.refresh(entity)
        logger.info("Refueling %s updated (%s)", refueling_id, ", ".join(sorted(patch)) or "no fields")
        return await RefuelingService._enriched(db, entity, user_id)

    @staticmethod
    async def delete_refueling(db: AsyncSession, refueling_id: int, user_id: int) -> None:
        entity = await RefuelingService._get_owned(db, refueling_id, user_id)
        await db.delete(entity)
        await db.flush()
        logger.info("Refueling %s deleted", refueling_id)

    # --- Analyses / Analytics ---

    @staticmethod
    async def _period(
        db: AsyncSession,
        vehicle_id: int,
        user_id: int,
        start_date: datetime | None,
        end_date: datetime | None,
    ) -> list[RefuelingRecord]:
        await RefuelingService._require_vehicle(db, vehicle_id, user_id)
        snapshot = await RefuelingService._snapshot(db, vehicle_id, user_id)
        return FuelAnalyticsService.select_period(snapshot, start_date, end_date)

    @staticmethod
    async def get_statistics(
        db: AsyncSession,
        vehicle_id: int,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> FuelStatisticsResponse:
        records = await RefuelingService._period(db, vehicle_id, user_id, start_date, end_date)
        stats = FuelAnalyticsService.compute_statistics(records)
        return FuelStatisticsResponse(vehicle_id=vehicle_id, **asdict(stats))

    @staticmethod
    async def get_consumption_graph(
        db: AsyncSession,
        vehicle_id: int,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> ConsumptionGraphResponse:
        records = await RefuelingService._period(db, vehicle_id, user_id, start_date, end_date)
        series = FuelAnalyticsService.compute_consumption_series(FuelAnalyticsService.chronological(records))
        return ConsumptionGraphResponse(vehicle_id=vehicle_id, **asdict(series))

    @staticmethod
    async def get_cost_graph(
        db: AsyncSession,
        vehicle_id: int,
        user_id: int,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> CostGraphResponse:
        records = await RefuelingService._period(db, vehicle_id, user_id, start_date, end_date)
        series = FuelAnalyticsService.compute_cost_series(FuelAnalyticsService.chronological(records))
        return CostGraphResponse(vehicle_id=vehicle_id, **asdict(series))
