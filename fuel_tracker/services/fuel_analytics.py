"""
Moteur d'analyse carburant / Fuel analytics engine.

Fonctions pures sur la liste des pleins d'un vehicule : statistiques de
periode, serie de consommation, serie de couts et champs derives par plein.
Pure functions over one vehicle's refueling list: period statistics,
consumption series, cost series and per-record derived fields.

Toutes les distances sont calculees dans l'ordre du compteur kilometrique,
jamais dans l'ordre de saisie. Les resultats indefinis valent None.
All distance math follows odometer order, never entry order.
Undefined results are None, never NaN or infinity.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Sequence


@dataclass(frozen=True)
class RefuelingRecord:
    """Vue en lecture seule d'un plein / Read-only view of a refueling."""
    id: int
    vehicle_id: int
    timestamp: datetime
    odometer_km: float
    fuel_amount_liters: float
    price_per_liter: float
    total_cost: float
    full_tank: bool
    notes: str | None = None

    @classmethod
    def from_entity(cls, entity: Any) -> "RefuelingRecord":
        """Copier une ligne ORM Refueling / Copy an ORM Refueling row."""
        return cls(
            id=entity.id,
            vehicle_id=entity.vehicle_id,
            timestamp=entity.date,
            odometer_km=entity.odometer,
            fuel_amount_liters=entity.fuel_amount,
            price_per_liter=entity.price_per_liter,
            total_cost=entity.total_cost,
            full_tank=entity.full_tank,
            notes=entity.notes,
        )


@dataclass(frozen=True)
class FuelStatistics:
    total_refuelings: int
    total_fuel_amount: float
    total_cost: float
    average_consumption: float | None  # L/100km
    average_price_per_liter: float
    total_distance: float
    period_start: datetime | None
    period_end: datetime | None


@dataclass(frozen=True)
class ConsumptionPoint:
    date: datetime
    fuel_consumption: float  # L/100km
    odometer: float


@dataclass(frozen=True)
class ConsumptionSeries:
    data_points: list[ConsumptionPoint]
    average_consumption: float | None


@dataclass(frozen=True)
class CostPoint:
    date: datetime
    total_cost: float
    price_per_liter: float


@dataclass(frozen=True)
class CostSeries:
    data_points: list[CostPoint]
    total_cost: float
    average_price_per_liter: float


@dataclass(frozen=True)
class DerivedFields:
    fuel_consumption: float | None  # L/100km
    distance_since_last_refueling: float | None  # km


EMPTY_DERIVED = DerivedFields(fuel_consumption=None, distance_since_last_refueling=None)


class FuelAnalyticsService:
    """Calcul des analyses carburant / Fuel analytics computation."""

    @staticmethod
    def total_cost_of(fuel_amount: float, price_per_liter: float) -> float:
        """Cout total d'un plein / Total cost of a refueling."""
        return fuel_amount * price_per_liter

    @staticmethod
    def interval_consumption(fuel_amount: float, distance: float) -> float:
        """Consommation en L/100km / Consumption in L/100km. Caller guarantees distance > 0."""
        return (fuel_amount / distance) * 100

    @staticmethod
    def select_period(
        records: Iterable[RefuelingRecord],
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[RefuelingRecord]:
        """
        Selection de periode / Period selection.

        Bornes incluses, tri chronologique ascendant (puis par id). Une periode partielle
        (une seule borne) n'est pas un filtre : l'entree est rendue telle quelle.
        Inclusive bounds, ascending by timestamp then id. A partial range (only one
        bound) is no filter: the input is returned in its own order.
        """
        if start_date is None or end_date is None:
            return list(records)
        selected = [r for r in records if start_date <= r.timestamp <= end_date]
        return sorted(selected, key=lambda r: (r.timestamp, r.id))

    @staticmethod
    def chronological(records: Iterable[RefuelingRecord]) -> list[RefuelingRecord]:
        """Tri par date puis id / Sort by timestamp, then id."""
        return sorted(records, key=lambda r: (r.timestamp, r.id))

    @staticmethod
    def by_odometer(records: Iterable[RefuelingRecord]) -> list[RefuelingRecord]:
        """Tri stable par compteur / Stable sort by odometer."""
        return sorted(records, key=lambda r: r.odometer_km)

    @staticmethod
    def compute_statistics(records: Sequence[RefuelingRecord]) -> FuelStatistics:
        """
        Statistiques de periode / Period statistics.

        La consommation moyenne exclut le carburant du plein au plus petit
        compteur : il precede la distance suivie. Aucune condition de plein
        complet n'est exigee ici, contrairement a la serie de consommation.
        Average consumption excludes the fuel of the lowest-odometer fill, which
        precedes the tracked distance. No full-tank condition applies here,
        unlike the consumption series.
        """
        if not records:
            return FuelStatistics(
                total_refuelings=0,
                total_fuel_amount=0.0,
                total_cost=0.0,
                average_consumption=None,
                average_price_per_liter=0.0,
                total_distance=0.0,
                period_start=None,
                period_end=None,
            )

        sorted_by_odometer = FuelAnalyticsService.by_odometer(records)
        total_fuel_amount = sum(r.fuel_amount_liters for r in records)
        total_cost = sum(r.total_cost for r in records)
        # Fuel amounts are validated positive upstream
        average_price_per_liter = total_cost / total_fuel_amount
        first, last = sorted_by_odometer[0], sorted_by_odometer[-1]
        total_distance = last.odometer_km - first.odometer_km

        average_consumption = None
        if len(sorted_by_odometer) >= 2 and total_distance > 0:
            fuel_for_consumption = sum(r.fuel_amount_liters for r in sorted_by_odometer[1:])
            average_consumption = FuelAnalyticsService.interval_consumption(
                fuel_for_consumption, total_distance
            )

        return FuelStatistics(
            total_refuelings=len(records),
            total_fuel_amount=total_fuel_amount,
            total_cost=total_cost,
            average_consumption=average_consumption,
            average_price_per_liter=average_price_per_liter,
            total_distance=total_distance,
            period_start=first.timestamp,
            period_end=last.timestamp,
        )

    @staticmethod
    def compute_consumption_series(records: Sequence[RefuelingRecord]) -> ConsumptionSeries:
        """
        Serie de consommation / Consumption series.

        L'entree doit deja etre chronologique ; l'ordre n'est pas recalcule.
        Un point par paire consecutive dont la distance est positive et dont
        le plein courant est complet.
        Input must already be chronological; it is not re-ordered. One point
        per consecutive pair with positive distance and a full-tank current fill.
        """
        data_points: list[ConsumptionPoint] = []
        for previous, current in zip(records, records[1:]):
            distance = current.odometer_km - previous.odometer_km
            if distance > 0 and current.full_tank:
                data_points.append(ConsumptionPoint(
                    date=current.timestamp,
                    fuel_consumption=FuelAnalyticsService.interval_consumption(
                        current.fuel_amount_liters, distance
                    ),
                    odometer=current.odometer_km,
                ))

        average_consumption = None
        if data_points:
            average_consumption = sum(p.fuel_consumption for p in data_points) / len(data_points)

        return ConsumptionSeries(data_points=data_points, average_consumption=average_consumption)

    @staticmethod
    def compute_cost_series(records: Sequence[RefuelingRecord]) -> CostSeries:
        """
        Serie de couts / Cost series.

        Un point par plein, sans filtre. Prix moyen 0 (et non None) sans carburant.
        One point per record, unfiltered. Average price is 0 (not None) without fuel.
        """
        data_points = [
            CostPoint(date=r.timestamp, total_cost=r.total_cost, price_per_liter=r.price_per_liter)
            for r in records
        ]
        total_cost = sum(r.total_cost for r in records)
        total_fuel = sum(r.fuel_amount_liters for r in records)
        average_price_per_liter = total_cost / total_fuel if total_fuel > 0 else 0.0

        return CostSeries(
            data_points=data_points,
            total_cost=total_cost,
            average_price_per_liter=average_price_per_liter,
        )

    @staticmethod
    def enrich_record(
        target: RefuelingRecord, vehicle_records: Iterable[RefuelingRecord]
    ) -> DerivedFields:
        """
        Champs derives d'un plein / Derived fields of one refueling.

        Compare au plein precedent dans l'ordre du compteur. La distance n'est
        pas bornee a zero : des compteurs egaux ou incoherents la rendent nulle
        ou negative, et la consommation vaut alors None.
        Compared with the previous record in odometer order. Distance is not
        clamped: equal or inconsistent odometers make it zero or negative, and
        consumption is then None.
        """
        ordered = FuelAnalyticsService.by_odometer(vehicle_records)
        index = next((i for i, r in enumerate(ordered) if r.id == target.id), None)
        # Absent, ou premier au compteur / Absent, or first by odometer
        if index is None or index == 0:
            return EMPTY_DERIVED

        previous = ordered[index - 1]
        distance = target.odometer_km - previous.odometer_km
        consumption = None
        if distance > 0 and target.full_tank:
            consumption = FuelAnalyticsService.interval_consumption(target.fuel_amount_liters, distance)
        return DerivedFields(fuel_consumption=consumption, distance_since_last_refueling=distance)
