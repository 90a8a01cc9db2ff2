"""Routes Vehicules et analyses / Vehicle and analytics API routes."""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.api.deps import get_current_user, get_period
from fuel_tracker.database import get_db
from fuel_tracker.models.user import User
from fuel_tracker.schemas.refueling import ConsumptionGraphResponse, CostGraphResponse, FuelStatisticsResponse
from fuel_tracker.schemas.vehicle import VehicleCreate, VehicleRead, VehicleUpdate
from fuel_tracker.services.refueling_service import RefuelingService
from fuel_tracker.services.vehicle_service import VehicleService

router = APIRouter()

Period = tuple[datetime | None, datetime | None]


@router.get("/", response_model=list[VehicleRead])
async def list_vehicles(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Lister mes vehicules / List my vehicles."""
    return await VehicleService.list_vehicles(db, user.id)


@router.post("/", response_model=VehicleRead, status_code=201)
async def create_vehicle(
    data: VehicleCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Creer un vehicule / Create vehicle."""
    return await VehicleService.create_vehicle(db, data, user.id)


@router.get("/{vehicle_id}", response_model=VehicleRead)
async def get_vehicle(
    vehicle_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Voir un vehicule / Get vehicle detail."""
    return await VehicleService.get_vehicle(db, vehicle_id, user.id)


@router.put("/{vehicle_id}", response_model=VehicleRead)
async def update_vehicle(
    vehicle_id: int,
    data: VehicleUpdate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Modifier un vehicule / Update vehicle."""
    return await VehicleService.update_vehicle(db, vehicle_id, data, user.id)


@router.delete("/{vehicle_id}", status_code=204)
async def delete_vehicle(
    vehicle_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Supprimer un vehicule et ses pleins / Delete vehicle and its refuelings."""
    await VehicleService.delete_vehicle(db, vehicle_id, user.id)


# ─── Analyses / Analytics ───

@router.get("/{vehicle_id}/statistics", response_model=FuelStatisticsResponse)
async def get_statistics(
    vehicle_id: int,
    period: Period = Depends(get_period),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Statistiques carburant / Fuel statistics."""
    return await RefuelingService.get_statistics(db, vehicle_id, user.id, *period)


@router.get("/{vehicle_id}/consumption-graph", response_model=ConsumptionGraphResponse)
async def get_consumption_graph(
    vehicle_id: int,
    period: Period = Depends(get_period),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Courbe de consommation / Consumption graph."""
    return await RefuelingService.get_consumption_graph(db, vehicle_id, user.id, *period)


@router.get("/{vehicle_id}/cost-graph", response_model=CostGraphResponse)
async def get_cost_graph(
    vehicle_id: int,
    period: Period = Depends(get_period),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Courbe des couts / Cost graph."""
    return await RefuelingService.get_cost_graph(db, vehicle_id, user.id, *period)
