"""
PA-28 Performance: Fuel Planning
================================

Minimum fuel table and the full fuel plan. All fuel in litres; volumes are
rounded UP and times DOWN so that rounding never flatters the plan.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import math

from perfconfig import config, AircraftModel, FuelPolicy


class ContingencyType(Enum):
    """Contingency fuel rule."""
    PRIVATE = "private"     # No contingency
    PISTON = "piston"       # 10% of trip, 5 minutes minimum


@dataclass(frozen=True)
class MinimumFuel:
    """Legal and company minimum fuel."""
    taxi_l: float
    trip_l: float
    holding_l: float
    final_reserve_l: float
    legal_min_l: int
    ten_percent_l: int
    solo_vdo_l: float
    unusable_l: float
    company_min_l: int


def minimum_fuel(
    trip_burn_l: float,
    holding_l: float = 0.0,
    solo: bool = False,
    policy: Optional[FuelPolicy] = None,
) -> MinimumFuel:
    """
    Legal and company minimum fuel for a trip.

    Args:
        trip_burn_l: Planned trip burn
        holding_l: Holding allowance (0, 15 or 30 L)
        solo: Add the 15-minute VDO allowance
        policy: Fuel constants (defaults to config.fuel)
    """
    policy = policy or config.fuel
    legal_min = math.ceil(
        policy.min_fuel_taxi_l + trip_burn_l + holding_l + policy.min_fuel_final_reserve_l
    )
    solo_vdo = policy.solo_extra_burn_lph / 4 if solo else 0.0
    company_min = math.ceil(legal_min + legal_min / 10 + solo_vdo + policy.min_fuel_unusable_l)

    return MinimumFuel(
        taxi_l=policy.min_fuel_taxi_l,
        trip_l=trip_burn_l,
        holding_l=holding_l,
        final_reserve_l=policy.min_fuel_final_reserve_l,
        legal_min_l=legal_min,
        ten_percent_l=math.ceil(legal_min / 10),
        solo_vdo_l=solo_vdo,
        unusable_l=policy.min_fuel_unusable_l,
        company_min_l=company_min,
    )


@dataclass
class FuelPlanInput:
    """Planned times (minutes), climb fuel and endurance (litres)."""
    climb_min: int = 0
    climb_l: int = 0
    cruise_min: int = 0
    alternate_min: int = 0
    holding_min: int = 0
    additional_min: int = 0
    endurance_l: int = 0
    contingency: ContingencyType = ContingencyType.PRIVATE
    final_reserve_min: int = 30
    solo: bool = False


@dataclass(frozen=True)
class FuelPlan:
    """Fuel plan in litres with matching times in minutes."""
    taxi_l: float
    trip_min: int
    trip_l: int
    cruise_l: int
    alternate_l: int
    holding_l: int
    contingency_min: int
    contingency_l: int
    final_reserve_l: int
    additional_l: int
    required_min: int
    required_l: float
    discretionary_min: int
    discretionary_l: int
    margin_min: int
    margin_l: float
    endurance_min: int

    @property
    def sufficient(self) -> bool:
        return self.margin_l >= 0


def _litres(minutes: float, rate_lph: float) -> int:
    return math.ceil(minutes / 60 * rate_lph)


def fuel_plan(
    plan: FuelPlanInput,
    model: Optional[AircraftModel] = None,
    policy: Optional[FuelPolicy] = None,
) -> FuelPlan:
    """
    Build the fuel plan.

    Raises:
        ValueError: final reserve time not one of the policy options
    """
    model = model or config.model
    policy = policy or config.fuel
    if plan.final_reserve_min not in policy.final_reserve_options_min:
        raise ValueError(
            f"final reserve must be one of {policy.final_reserve_options_min} minutes, "
            f"got {plan.final_reserve_min}"
        )

    cruise_rate = policy.cruise_rate_lph
    holding_rate = policy.holding_rate_lph

    taxi_l = policy.taxi_litres[model]
    cruise_l = _litres(plan.cruise_min, cruise_rate)
    alternate_l = _litres(plan.alternate_min, cruise_rate)
    holding_l = _litres(plan.holding_min, holding_rate)
    trip_min = plan.climb_min + plan.cruise_min
    trip_l = plan.climb_l + cruise_l

    contingency_min = 0
    contingency_l = 0
    if plan.contingency == ContingencyType.PISTON:
        contingency_min = math.floor(trip_min * 0.1)
        contingency_l = math.ceil(trip_l * 0.1)
    if 0 < contingency_min < policy.contingency_floor_min:
        contingency_min = policy.contingency_floor_min
        contingency_l = _litres(contingency_min, cruise_rate)

    final_reserve_l = _litres(plan.final_reserve_min, holding_rate)
    additional_l = _litres(plan.additional_min, cruise_rate)

    required_min = (
        plan.climb_min + plan.cruise_min + plan.alternate_min + plan.holding_min
        + contingency_min + plan.final_reserve_min + plan.additional_min
    )
    required_l = (
        taxi_l + plan.climb_l + cruise_l + alternate_l + holding_l
        + contingency_l + final_reserve_l + additional_l
    )

    discretionary_l = math.ceil(required_l * 0.1) + (_litres(15, cruise_rate) if plan.solo else 0)
    discretionary_min = math.floor(discretionary_l / cruise_rate * 60)
    margin_l = plan.endurance_l - required_l - discretionary_l
    margin_min = math.floor(margin_l / cruise_rate * 60)

    return FuelPlan(
        taxi_l=taxi_l,
        trip_min=trip_min,
        trip_l=trip_l,
        cruise_l=cruise_l,
        alternate_l=alternate_l,
        holding_l=holding_l,
        contingency_min=contingency_min,
        contingency_l=contingency_l,
        final_reserve_l=final_reserve_l,
        additional_l=additional_l,
        required_min=required_min,
        required_l=required_l,
        discretionary_min=discretionary_min,
        discretionary_l=discretionary_l,
        margin_min=margin_min,
        margin_l=margin_l,
        endurance_min=required_min + discretionary_min + margin_min,
    )
