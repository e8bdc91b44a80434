"""
PA-28 Performance: Weight and Balance
=====================================

Builds the loading sheet: station moments, ramp, take-off, zero-fuel and
landing weights with their arms. Moments are rounded UP to the whole unit
as on the paper load sheet.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import math

from perfconfig import config, AircraftModel, LoadingStations
from .conversions import fuel_litres_to_lbs, lbs_to_kg, round_half_up, round_one_dec


@dataclass
class LoadingInput:
    """Pilot-entered loading. Weights in lb, fuel in litres."""
    basic_empty_lbs: float = 0.0
    basic_empty_arm_in: float = 0.0
    front_seats_lbs: float = 0.0
    rear_seats_lbs: float = 0.0
    fuel_l: float = 181.0
    baggage_lbs: float = 0.0
    trip_burn_l: float = 0.0


@dataclass(frozen=True)
class LoadRow:
    """One line of the load sheet."""
    label: str
    weight_lbs: float
    arm_in: Optional[float]
    moment: Optional[float]
    weight_kg: Optional[int] = None


@dataclass
class WeightBalanceSheet:
    """Complete load sheet."""
    stations: List[LoadRow]
    ramp: LoadRow
    fuel_allowance: LoadRow
    takeoff: LoadRow
    zero_fuel: LoadRow
    trip_burn_lbs: int
    landing: LoadRow
    warnings: List[str] = field(default_factory=list)

    @property
    def takeoff_weight_lbs(self) -> float:
        return self.takeoff.weight_lbs

    @property
    def landing_weight_lbs(self) -> float:
        return self.landing.weight_lbs


def _station(label: str, weight: float, arm: float) -> LoadRow:
    return LoadRow(label=label, weight_lbs=weight, arm_in=arm, moment=math.ceil(weight * arm))


def _arm(moment: float, weight: float) -> Optional[float]:
    """Resulting arm to 0.1 in, or None for zero weight."""
    if weight == 0:
        return None
    return round_one_dec(moment / weight)


def _total(label: str, weight: float, moment: float) -> LoadRow:
    return LoadRow(
        label=label,
        weight_lbs=weight,
        arm_in=_arm(moment, weight),
        moment=moment,
        weight_kg=lbs_to_kg(weight),
    )


def compute_weight_balance(
    loading: LoadingInput,
    model: Optional[AircraftModel] = None,
    stations: Optional[LoadingStations] = None,
) -> WeightBalanceSheet:
    """
    Compute the load sheet for a loading.

    Args:
        loading: Weights and fuel entered by the pilot
        model: Aircraft type for the MTOW check (defaults to config.model)
        stations: Station arms (defaults to config.stations)

    Returns:
        WeightBalanceSheet including any limit warnings
    """
    model = model or config.model
    st = stations or config.stations

    fuel_lbs = round_half_up(fuel_litres_to_lbs(loading.fuel_l))
    rows = [
        _station("Basic Empty", loading.basic_empty_lbs, loading.basic_empty_arm_in),
        _station("Pilot/Front Pass.", loading.front_seats_lbs, st.front_seats_arm),
        _station("Rear Pass.", loading.rear_seats_lbs, st.rear_seats_arm),
        _station("Fuel", fuel_lbs, st.fuel_arm),
        _station("Baggage", loading.baggage_lbs, st.baggage_arm),
    ]
    fuel_row = rows[3]

    ramp_w = sum(r.weight_lbs for r in rows)
    ramp_m = sum(r.moment for r in rows)
    ramp = _total("Ramp (RW)", ramp_w, ramp_m)

    allowance = LoadRow(
        label="Fuel Allowance",
        weight_lbs=st.fuel_allowance_weight,
        arm_in=st.fuel_allowance_arm,
        moment=st.fuel_allowance_moment,
    )

    takeoff = _total(
        "TOW",
        ramp_w + st.fuel_allowance_weight,
        ramp_m + st.fuel_allowance_moment,
    )
    zero_fuel = _total("ZFW", ramp_w - fuel_row.weight_lbs, ramp_m - fuel_row.moment)

    trip_burn_lbs = math.ceil(fuel_litres_to_lbs(loading.trip_burn_l))
    landing_w = takeoff.weight_lbs - trip_burn_lbs
    landing = LoadRow(
        label="LW",
        weight_lbs=landing_w,
        arm_in=None,
        moment=None,
        weight_kg=lbs_to_kg(landing_w),
    )

    warnings = []
    if loading.fuel_l > config.max_fuel_litres:
        warnings.append(
            f"FUEL: {loading.fuel_l:.0f} L exceeds {st.max_fuel_gal:.0f} gal usable."
        )
    if loading.baggage_lbs > st.max_baggage_lbs:
        warnings.append(
            f"BAGGAGE: {loading.baggage_lbs:.0f} lb exceeds {st.max_baggage_lbs:.0f} lb limit."
        )
    mtow = config.limits[model].mtow_lbs
    if takeoff.weight_lbs > mtow:
        warnings.append(
            f"WEIGHT: TOW {takeoff.weight_lbs:.0f} lb exceeds MTOW {mtow:.0f} lb."
        )

    return WeightBalanceSheet(
        stations=rows,
        ramp=ramp,
        fuel_allowance=allowance,
        takeoff=takeoff,
        zero_fuel=zero_fuel,
        trip_burn_lbs=trip_burn_lbs,
        landing=landing,
        warnings=warnings,
    )
