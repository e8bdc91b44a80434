"""
PA-28 Performance: Single Source of Truth (SSOT)
================================================

This configuration file defines the loading arms, airframe limits and fuel
policy used by every calculator. NEVER hard-code these numbers elsewhere.
Performance tables themselves live with each aircraft in perfcore.aircraft.

Arms are inches aft of datum, weights in pounds, fuel in litres unless noted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class AircraftModel(Enum):
    """Supported aircraft types."""
    WARRIOR_III = "warrior3"    # PA-28-161, fixed pitch
    ARROW_III = "arrow3"        # PA-28R-201, constant speed


@dataclass
class LoadingStations:
    """Loading station arms and placarded limits (POH section 6)."""

    front_seats_arm: float = 80.5
    rear_seats_arm: float = 118.1
    fuel_arm: float = 95.0
    baggage_arm: float = 142.8

    # Taxi/run-up burn deducted from ramp to get take-off weight
    fuel_allowance_weight: float = -7.0
    fuel_allowance_arm: float = 95.0
    fuel_allowance_moment: float = -665.0

    max_fuel_gal: float = 48.0            # US gallons usable
    max_baggage_lbs: float = 200.0


@dataclass
class AirframeLimits:
    """Per-type weight limit and design maneuvering speed."""
    mtow_lbs: float
    va_kt: float


@dataclass
class FuelPolicy:
    """Fuel planning constants (company operations manual)."""

    fuel_lbs_per_litre: float = 1.58      # Avgas 100LL
    litres_per_gal: float = 3.8           # Matches the POH climb figures
    litres_per_us_gal: float = 3.785

    cruise_rate_lph: float = 35.0
    holding_rate_lph: float = 30.0
    taxi_litres: Dict[AircraftModel, float] = field(default_factory=lambda: {
        AircraftModel.WARRIOR_III: 5.0,
        AircraftModel.ARROW_III: 6.0,
    })

    # Minimum fuel table
    min_fuel_taxi_l: float = 5.0
    min_fuel_final_reserve_l: float = 15.0
    min_fuel_unusable_l: float = 8.0
    solo_extra_burn_lph: float = 36.0     # 15 min VDO allowance when solo

    contingency_floor_min: int = 5
    final_reserve_options_min: tuple = (30, 45)


@dataclass
class RoundingPolicy:
    """Display rounding for derived values."""
    rpm_step: int = 10
    manifold_pressure_decimals: int = 1


@dataclass
class PerformanceConfig:
    """
    Master configuration singleton.

    ALL downstream modules import this. Changes here propagate through:
    - Weight and balance sheets
    - Reference speed cards
    - Fuel plans and minimum fuel tables
    - Cruise/climb rounding
    """

    model: AircraftModel = AircraftModel.WARRIOR_III
    stations: LoadingStations = field(default_factory=LoadingStations)
    limits: Dict[AircraftModel, AirframeLimits] = field(default_factory=lambda: {
        AircraftModel.WARRIOR_III: AirframeLimits(mtow_lbs=2440.0, va_kt=111.0),
        AircraftModel.ARROW_III: AirframeLimits(mtow_lbs=2750.0, va_kt=118.0),
    })
    fuel: FuelPolicy = field(default_factory=FuelPolicy)
    rounding: RoundingPolicy = field(default_factory=RoundingPolicy)

    # Project metadata
    project_name: str = "PA-28 Performance"
    version: str = "0.1.0"

    @property
    def airframe(self) -> AirframeLimits:
        """Limits for the currently selected aircraft."""
        return self.limits[self.model]

    @property
    def max_fuel_litres(self) -> float:
        return self.stations.max_fuel_gal * self.fuel.litres_per_us_gal

    def validate(self) -> List[str]:
        """Validate configuration for internal consistency."""
        errors = []

        for model in AircraftModel:
            if model not in self.limits:
                errors.append(f"MISSING LIMITS: No airframe limits for {model.value}.")
                continue
            lim = self.limits[model]
            if lim.mtow_lbs <= 0 or lim.va_kt <= 0:
                errors.append(
                    f"INVALID LIMITS: {model.value} MTOW and Va must be positive."
                )
            if model not in self.fuel.taxi_litres:
                errors.append(f"MISSING TAXI FUEL: No taxi allowance for {model.value}.")

        # Fuel allowance must be self-consistent (W x A = M)
        st = self.stations
        expected_moment = st.fuel_allowance_weight * st.fuel_allowance_arm
        if abs(expected_moment - st.fuel_allowance_moment) > 1.0:
            errors.append(
                f"FUEL ALLOWANCE MISMATCH: {st.fuel_allowance_weight} lb x "
                f"{st.fuel_allowance_arm} in != {st.fuel_allowance_moment}."
            )

        if self.fuel.fuel_lbs_per_litre <= 0 or self.fuel.cruise_rate_lph <= 0:
            errors.append("INVALID FUEL POLICY: Density and burn rates must be positive.")

        if self.rounding.rpm_step <= 0:
            errors.append("INVALID ROUNDING: RPM step must be positive.")

        return errors

    def summary(self) -> str:
        """Generate human-readable configuration summary."""
        st = self.stations
        return f"""
PA-28 Performance Configuration Summary
=======================================
Aircraft: {self.model.value}
Version: {self.version}

AIRFRAME
--------
MTOW: {self.airframe.mtow_lbs:.0f} lb
Va (at MTOW): {self.airframe.va_kt:.0f} kt

LOADING ARMS
------------
Front seats: {st.front_seats_arm:.1f} in
Rear seats: {st.rear_seats_arm:.1f} in
Fuel: {st.fuel_arm:.1f} in ({st.max_fuel_gal:.0f} gal max)
Baggage: {st.baggage_arm:.1f} in ({st.max_baggage_lbs:.0f} lb max)

FUEL POLICY
-----------
Cruise burn: {self.fuel.cruise_rate_lph:.0f} L/h
Holding burn: {self.fuel.holding_rate_lph:.0f} L/h
Taxi: {self.fuel.taxi_litres.get(self.model, 0):.0f} L
"""


# Singleton instance - import this throughout the project
config = PerformanceConfig()

# Validate on import
_errors = config.validate()
if _errors:
    import warnings
    for err in _errors:
        warnings.warn(err, UserWarning)
