"""Routes Pleins / Refueling API routes."""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.api.deps import get_current_user, get_period
from fuel_tracker.database import get_db
from fuel_tracker.models.user import User
from fuel_tracker.schemas.refueling import (
    ConsumptionGraphResponse,
    CostGraphResponse,
    FuelStatisticsResponse,
    RefuelingCreate,
    RefuelingRead,
    RefuelingUpdate,
)
from fuel_tracker.services.refueling_service import RefuelingService

router = APIRouter()


@router.post("/", response_model=RefuelingRead, status_code=201)
async def create_refueling(
    data: RefuelingCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Enregistrer un plein / Record a refueling."""
    return await RefuelingService.create_refueling(db, data, user.id)


@router.get("/vehicle/{vehicle_id}", response_model=list[RefuelingRead])
async def list_refuelings(
    vehicle_id: int,
    period: tuple[datetime | None, datetime | None] = Depends(get_period),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Pleins d'un vehicule / Refuelings of a vehicle."""
    return await RefuelingService.list_refuelings(db, vehicle_id, user.id, *period)


@router.get("/{refueling_id}", response_model=RefuelingRead)
async def get_refueling(
    refueling_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return await RefuelingService.get_refueling(db, refueling_id, user.id)


@router.put("/{refueling_id}", response_model=RefuelingRead)
async def update_refueling(
    refueling_id: int,
    data: RefuelingUpdate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Modifier un plein / Update a refueling. Omitted fields keep their value."""
    return await RefuelingService.update_refueling(db, refueling_id, data, user.id)


@router.delete("/{refueling_id}", status_code=204)
async def delete_refueling(
    refueling_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    await RefuelingService.delete_refueling(db, refueling_id, user.id)


# ─── Analyses (anciens chemins) / Analytics (legacy paths) ───

@router.get("/vehicle/{vehicle_id}/statistics", response_model=FuelStatisticsResponse)
async def get_vehicle_statistics(
    vehicle_id: int,
    period: tuple[datetime | None, datetime | None] = Depends(get_period),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Statistiques carburant / Fuel statistics. Same as /api/vehicles/{id}/statistics."""
    return await RefuelingService.get_statistics(db, vehicle_id, user.id, *period)


@router.get("/vehicle/{vehicle_id}/consumption-graph", response_model=ConsumptionGraphResponse)
async def get_vehicle_consumption_graph(
    vehicle_id: int,
    period: tuple[datetime | None, datetime | None] = Depends(get_period),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return await RefuelingService.get_consumption_graph(db, vehicle_id, user.id, *period)


@router.get("/vehicle/{vehicle_id}/cost-graph", response_model=CostGraphResponse)
async def get_vehicle_cost_graph(
    vehicle_id: int,
    period: tuple[datetime | None, datetime | None] = Depends(get_period),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return await RefuelingService.get_cost_graph(db, vehicle_id, user.id, *period)
