"""Tests des services / Service tests."""

from datetime import datetime

import pytest

from fuel_tracker.exceptions import DuplicateResourceError, ResourceNotFoundError
from fuel_tracker.repositories import refueling_repository
from fuel_tracker.schemas.refueling import RefuelingCreate, RefuelingUpdate
from fuel_tracker.schemas.vehicle import VehicleCreate, VehicleUpdate
from fuel_tracker.services.refueling_service import RefuelingService
from fuel_tracker.services.vehicle_service import VehicleService


def _vehicle_data(**overrides) -> VehicleCreate:
    data = {"make": "Renault", "model": "Clio", "year": 2019, "fuel_type": "diesel", "tank_capacity": 45}
    data.update(overrides)
    return VehicleCreate(**data)


def _fill(vehicle_id: int, day: int, odometer: float, fuel: float, price: float = 1.5, full_tank: bool = True):
    return RefuelingCreate(
        vehicle_id=vehicle_id,
        date=datetime(2024, 1, day, 8, 0),
        odometer=odometer,
        fuel_amount=fuel,
        price_per_liter=price,
        full_tank=full_tank,
    )


@pytest.fixture
async def vehicle(db, users):
    alice, _ = users
    return await VehicleService.create_vehicle(db, _vehicle_data(license_plate="AB-123-CD"), alice.id)


# --- Vehicules / Vehicles ---

@pytest.mark.asyncio
async def test_create_vehicle_uppercases_fuel_type(vehicle):
    assert vehicle.fuel_type == "DIESEL"
    assert vehicle.created_at is not None


@pytest.mark.asyncio
async def test_duplicate_license_plate_rejected(db, users, vehicle):
    _, bob = users
    with pytest.raises(DuplicateResourceError):
        await VehicleService.create_vehicle(db, _vehicle_data(license_plate="AB-123-CD"), bob.id)


@pytest.mark.asyncio
async def test_vehicle_hidden_from_other_owner(db, users, vehicle):
    _, bob = users
    with pytest.raises(ResourceNotFoundError):
        await VehicleService.get_vehicle(db, vehicle.id, bob.id)
    assert await VehicleService.list_vehicles(db, bob.id) == []


@pytest.mark.asyncio
async def test_update_vehicle_partial(db, users, vehicle):
    alice, _ = users
    updated = await VehicleService.update_vehicle(
        db, vehicle.id, VehicleUpdate(model="Megane", fuel_type="hybrid"), alice.id
    )
    assert updated.model == "Megane"
    assert updated.fuel_type == "HYBRID"
    assert updated.make == "Renault"
    assert updated.license_plate == "AB-123-CD"


@pytest.mark.asyncio
async def test_update_vehicle_same_plate_is_not_a_conflict(db, users, vehicle):
    alice, _ = users
    updated = await VehicleService.update_vehicle(db, vehicle.id, VehicleUpdate(license_plate="AB-123-CD"), alice.id)
    assert updated.license_plate == "AB-123-CD"


@pytest.mark.asyncio
async def test_delete_vehicle_removes_refuelings(db, users, vehicle):
    alice, _ = users
    await RefuelingService.create_refueling(db, _fill(vehicle.id, 1, 1000, 40), alice.id)
    await VehicleService.delete_vehicle(db, vehicle.id, alice.id)
    with pytest.raises(ResourceNotFoundError):
        await VehicleService.get_vehicle(db, vehicle.id, alice.id)
    assert await refueling_repository.fetch_records(db, vehicle.id, alice.id) == []


# --- Pleins / Refuelings ---

@pytest.mark.asyncio
async def test_create_refueling_computes_cost_and_derived_fields(db, users, vehicle):
    alice, _ = users
    first = await RefuelingService.create_refueling(db, _fill(vehicle.id, 1, 10000, 40, 1.5), alice.id)
    assert first.total_cost == pytest.approx(60.0)
    assert first.fuel_consumption is None
    assert first.distance_since_last_refueling is None

    second = await RefuelingService.create_refueling(db, _fill(vehicle.id, 2, 10500, 45, 1.6), alice.id)
    assert second.distance_since_last_refueling == 500
    assert second.fuel_consumption == pytest.approx(9.0)


@pytest.mark.asyncio
async def test_create_refueling_on_foreign_vehicle(db, users, vehicle):
    _, bob = users
    with pytest.raises(ResourceNotFoundError):
        await RefuelingService.create_refueling(db, _fill(vehicle.id, 1, 1000, 40), bob.id)


@pytest.mark.asyncio
async def test_derived_fields_change_retroactively(db, users, vehicle):
    alice, _ = users
    entered_first = await RefuelingService.create_refueling(db, _fill(vehicle.id, 5, 2000, 30), alice.id)
    assert entered_first.distance_since_last_refueling is None

    await RefuelingService.create_refueling(db, _fill(vehicle.id, 6, 1500, 40), alice.id)
    reread = await RefuelingService.get_refueling(db, entered_first.id, alice.id)
    assert reread.distance_since_last_refueling == 500
    assert reread.fuel_consumption == pytest.approx(6.0)


@pytest.mark.asyncio
async def test_update_refueling_patch_semantics(db, users, vehicle):
    alice, _ = users
    created = await RefuelingService.create_refueling(
        db,
        RefuelingCreate(
            vehicle_id=vehicle.id, date=datetime(2024, 1, 1), odometer=1000,
            fuel_amount=40, price_per_liter=1.5, notes="highway", full_tank=True,
        ),
        alice.id,
    )

    updated = await RefuelingService.update_refueling(db, created.id, RefuelingUpdate(price_per_liter=2.0), alice.id)
    assert updated.fuel_amount == 40
    assert updated.total_cost == pytest.approx(80.0)
    assert updated.notes == "highway"
    assert updated.full_tank is True

    cleared = await RefuelingService.update_refueling(db, created.id, RefuelingUpdate(notes=None), alice.id)
    assert cleared.notes is None
    assert cleared.total_cost == pytest.approx(80.0)


@pytest.mark.asyncio
async def test_delete_refueling_by_other_owner(db, users, vehicle):
    alice, bob = users
    created = await RefuelingService.create_refueling(db, _fill(vehicle.id, 1, 1000, 40), alice.id)
    with pytest.raises(ResourceNotFoundError):
        await RefuelingService.delete_refueling(db, created.id, bob.id)
    await RefuelingService.delete_refueling(db, created.id, alice.id)
    with pytest.raises(ResourceNotFoundError):
        await RefuelingService.get_refueling(db, created.id, alice.id)


@pytest.mark.asyncio
async def test_list_refuelings_enriches_against_full_history(db, users, vehicle):
    alice, _ = users
    await RefuelingService.create_refueling(db, _fill(vehicle.id, 1, 1000, 40), alice.id)
    await RefuelingService.create_refueling(db, _fill(vehicle.id, 10, 1400, 28), alice.id)

    everything = await RefuelingService.list_refuelings(db, vehicle.id, alice.id)
    assert [r.odometer for r in everything] == [1400, 1000]

    window = await RefuelingService.list_refuelings(
        db, vehicle.id, alice.id, datetime(2024, 1, 5), datetime(2024, 1, 31)
    )
    assert len(window) == 1
    assert window[0].distance_since_last_refueling == 400
    assert window[0].fuel_consumption == pytest.approx(7.0)


# --- Analyses / Analytics ---

@pytest.mark.asyncio
async def test_analytics_for_three_full_fills(db, users, vehicle):
    alice, _ = users
    for day, odometer, fuel, price in [(1, 10000, 40, 1.50), (2, 10500, 45, 1.60), (3, 11000, 42, 1.55)]:
        await RefuelingService.create_refueling(db, _fill(vehicle.id, day, odometer, fuel, price), alice.id)

    stats = await RefuelingService.get_statistics(db, vehicle.id, alice.id)
    assert stats.vehicle_id == vehicle.id
    assert stats.total_refuelings == 3
    assert stats.total_cost == pytest.approx(197.1)
    assert stats.average_consumption == pytest.approx(8.7)
    assert stats.period_start == datetime(2024, 1, 1, 8, 0)

    graph = await RefuelingService.get_consumption_graph(db, vehicle.id, alice.id)
    assert [p.fuel_consumption for p in graph.data_points] == [pytest.approx(9.0), pytest.approx(8.4)]
    assert graph.average_consumption == pytest.approx(8.7)

    costs = await RefuelingService.get_cost_graph(db, vehicle.id, alice.id)
    assert len(costs.data_points) == 3
    assert costs.data_points[0].date == datetime(2024, 1, 1, 8, 0)


@pytest.mark.asyncio
async def test_statistics_with_period(db, users, vehicle):
    alice, _ = users
    for day, odometer in [(1, 1000), (10, 1500), (20, 2000)]:
        await RefuelingService.create_refueling(db, _fill(vehicle.id, day, odometer, 30), alice.id)

    stats = await RefuelingService.get_statistics(
        db, vehicle.id, alice.id, datetime(2024, 1, 5), datetime(2024, 1, 25)
    )
    assert stats.total_refuelings == 2
    assert stats.total_distance == 500

    half_open = await RefuelingService.get_statistics(db, vehicle.id, alice.id, datetime(2024, 1, 5), None)
    assert half_open.total_refuelings == 3


@pytest.mark.asyncio
async def test_statistics_on_foreign_vehicle(db, users, vehicle):
    _, bob = users
    with pytest.raises(ResourceNotFoundError):
        await RefuelingService.get_statistics(db, vehicle.id, bob.id)


@pytest.mark.asyncio
async def test_consumption_graph_follows_dates_not_odometer(db, users, vehicle):
    alice, _ = users
    for day, odometer in [(1, 1000), (2, 2000), (3, 1500)]:
        await RefuelingService.create_refueling(db, _fill(vehicle.id, day, odometer, 40), alice.id)

    graph = await RefuelingService.get_consumption_graph(db, vehicle.id, alice.id)
    assert [p.odometer for p in graph.data_points] == [2000]
    assert graph.data_points[0].fuel_consumption == pytest.approx(4.0)
    assert graph.average_consumption == pytest.approx(4.0)


@pytest.mark.asyncio
async def test_cost_graph_in_date_order(db, users, vehicle):
    alice, _ = users
    for day, price in [(3, 1.7), (1, 1.5), (2, 1.6)]:
        await RefuelingService.create_refueling(db, _fill(vehicle.id, day, 1000 + day * 100, 40, price), alice.id)

    costs = await RefuelingService.get_cost_graph(db, vehicle.id, alice.id)
    assert [p.date.day for p in costs.data_points] == [1, 2, 3]
    assert [p.price_per_liter for p in costs.data_points] == [1.5, 1.6, 1.7]


@pytest.mark.asyncio
async def test_shared_timestamp_ordered_by_id_everywhere(db, users, vehicle):
    alice, _ = users
    first = await RefuelingService.create_refueling(db, _fill(vehicle.id, 1, 1000, 40), alice.id)
    second = await RefuelingService.create_refueling(db, _fill(vehicle.id, 1, 1500, 30), alice.id)
    period = (datetime(2024, 1, 1), datetime(2024, 1, 31))

    listed = await RefuelingService.list_refuelings(db, vehicle.id, alice.id, *period)
    assert [r.id for r in listed] == [first.id, second.id]

    graph = await RefuelingService.get_consumption_graph(db, vehicle.id, alice.id, *period)
    assert [p.odometer for p in graph.data_points] == [1500]

    costs = await RefuelingService.get_cost_graph(db, vehicle.id, alice.id, *period)
    assert [p.total_cost for p in costs.data_points] == [pytest.approx(60.0), pytest.approx(45.0)]
