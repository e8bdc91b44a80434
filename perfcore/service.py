"""
PA-28 Performance: Lookup Service
=================================

The interface consumed by the presentation layer. A service is bound to an
explicit PerformanceTables instance; `performance` is the default instance
built once at import.

Rejecting lookups (spline, bicubic) raise OutOfRangeError. Their safe_*
variants return a LookupResult instead.
"""

from dataclasses import dataclass
from typing import Dict, Optional
import math
import logging

from perfconfig import config
from .aircraft import arrow3
from .atmosphere import density_altitude_isa, temp_from_isa
from .bicubic import ClimbPerformance, calculate_climb
from .bilinear import lookup
from .conversions import gal_to_litres, round_half_up, round_one_dec
from .cruise import CruiseResult, cruise_lookup
from .result import LookupResult, attempt
from .tables import PerformanceTables, build_tables

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class ClimbSegment:
    """Climb between two altitudes. Unavailable values are None."""
    from_temp_c: float
    to_temp_c: float
    minutes: Optional[int]
    fuel_gal: Optional[float]
    fuel_l: Optional[float]
    from_density_alt_ft: Optional[int] = None
    to_density_alt_ft: Optional[int] = None


@dataclass(frozen=True)
class PowerSetting:
    """Arrow III cruise at one percent power."""
    percent_power: int
    tas_kt: int
    manifold_pressure: Dict[int, Optional[float]]   # rpm -> in Hg, None if unpublished


@dataclass(frozen=True)
class Arrow3Cruise:
    density_alt_ft: int
    temp_c: float
    settings: Dict[int, PowerSetting]


class PerformanceService:
    """Pure lookups over an immutable table set. Safe for concurrent use."""

    def __init__(self, tables: PerformanceTables):
        self.tables = tables

    # ------------------------------------------------------------------
    # Engine interface
    # ------------------------------------------------------------------

    def evaluate_spline(self, table_id: str, x: float) -> float:
        """
        Raises:
            UnknownTableError: table_id not registered
            OutOfRangeError: x outside the spline's knots
        """
        return self.tables.spline(table_id).evaluate(x)

    def bilinear_lookup(
        self, table_id: str, pressure_altitude_ft: float, isa_deviation_c: float
    ) -> float:
        """Clamped bilinear lookup; never raises for out-of-range inputs."""
        return lookup(pressure_altitude_ft, isa_deviation_c, self.tables.grid(table_id))

    def bicubic_climb_lookup(
        self, isa_deviation_c: float, altitude_hundreds_ft: float
    ) -> ClimbPerformance:
        """
        Raises:
            OutOfRangeError: outside the published climb figures
        """
        return calculate_climb(isa_deviation_c, altitude_hundreds_ft, self.tables.climb_grid)

    def cruise_lookup(self, pressure_altitude_ft: float, isa_deviation_c: float) -> CruiseResult:
        return cruise_lookup(pressure_altitude_ft, isa_deviation_c, self.tables.cruise_table)

    def safe_evaluate_spline(self, table_id: str, x: float) -> LookupResult[float]:
        return attempt(self.evaluate_spline, table_id, x)

    def safe_bicubic_climb_lookup(
        self, isa_deviation_c: float, altitude_hundreds_ft: float
    ) -> LookupResult[ClimbPerformance]:
        return attempt(self.bicubic_climb_lookup, isa_deviation_c, altitude_hundreds_ft)

    # ------------------------------------------------------------------
    # Aircraft calculators
    # ------------------------------------------------------------------

    def warrior3_climb_minutes(self, pressure_altitude_ft: float, isa_deviation_c: float) -> float:
        return self.bilinear_lookup("warrior3.climb_minutes", pressure_altitude_ft, isa_deviation_c)

    def warrior3_climb_fuel_gal(self, pressure_altitude_ft: float, isa_deviation_c: float) -> float:
        return self.bilinear_lookup("warrior3.climb_fuel_gal", pressure_altitude_ft, isa_deviation_c)

    def warrior3_climb_segment(
        self,
        from_alt_hundreds: float,
        from_isa: float,
        to_alt_hundreds: float,
        to_isa: float,
    ) -> ClimbSegment:
        """
        Climb time and fuel between two altitudes from the bicubic figures.

        An end outside the figures counts as zero (e.g. departing from sea
        level, below the first published altitude).
        """
        start = self.safe_bicubic_climb_lookup(from_isa, from_alt_hundreds)
        end = self.safe_bicubic_climb_lookup(to_isa, to_alt_hundreds)
        if not start.ok:
            logger.debug("Climb start (%g, %g) unavailable: %s",
                         from_alt_hundreds, from_isa, start.error)
        if not end.ok:
            logger.debug("Climb end (%g, %g) unavailable: %s",
                         to_alt_hundreds, to_isa, end.error)

        zero = ClimbPerformance(minutes=0, fuel_gal=0.0)
        start_perf = start.value_or(zero)
        end_perf = end.value_or(zero)

        fuel_gal = end_perf.fuel_gal - start_perf.fuel_gal
        return ClimbSegment(
            from_temp_c=round_half_up(temp_from_isa(from_alt_hundreds, from_isa)),
            to_temp_c=round_half_up(temp_from_isa(to_alt_hundreds, to_isa)),
            minutes=math.ceil(end_perf.minutes - start_perf.minutes),
            fuel_gal=fuel_gal,
            fuel_l=round_one_dec(gal_to_litres(fuel_gal)),
        )

    def arrow3_climb_segment(
        self,
        from_alt_hundreds: float,
        from_isa: float,
        to_alt_hundreds: float,
        to_isa: float,
    ) -> ClimbSegment:
        """
        Climb time and fuel between two altitudes from the density-altitude
        splines. Values are None when either end is beyond the published
        curves.
        """
        from_da = max(0, density_altitude_isa(max(0.0, from_alt_hundreds * 100), from_isa))
        to_da = max(0, density_altitude_isa(max(0.0, to_alt_hundreds * 100), to_isa))

        minutes_from = self.safe_evaluate_spline("arrow3.climb_minutes", from_da / 100)
        minutes_to = self.safe_evaluate_spline("arrow3.climb_minutes", to_da / 100)
        fuel_from = self.safe_evaluate_spline("arrow3.climb_fuel_gal", from_da / 100)
        fuel_to = self.safe_evaluate_spline("arrow3.climb_fuel_gal", to_da / 100)

        minutes = None
        if minutes_from.ok and minutes_to.ok:
            minutes = math.ceil(minutes_to.value - minutes_from.value)

        fuel_gal = fuel_l = None
        if fuel_from.ok and fuel_to.ok:
            fuel_gal = fuel_to.value - fuel_from.value
            fuel_l = gal_to_litres(fuel_gal)

        return ClimbSegment(
            from_temp_c=temp_from_isa(from_alt_hundreds, from_isa),
            to_temp_c=temp_from_isa(to_alt_hundreds, to_isa),
            minutes=minutes,
            fuel_gal=fuel_gal,
            fuel_l=fuel_l,
            from_density_alt_ft=from_da,
            to_density_alt_ft=to_da,
        )

    def arrow3_manifold_pressure(
        self, percent_power: int, rpm: int, pressure_altitude_hundreds: float
    ) -> Optional[float]:
        """Manifold pressure to 0.1 in Hg, or None outside the published range."""
        table_id = f"arrow3.{arrow3.manifold_table_id(percent_power, rpm)}"
        result = self.safe_evaluate_spline(table_id, pressure_altitude_hundreds)
        if not result.ok:
            return None
        digits = config.rounding.manifold_pressure_decimals
        return round_half_up(result.value * 10 ** digits) / 10 ** digits

    def arrow3_cruise(
        self, pressure_altitude_hundreds: float, isa_deviation: float
    ) -> Arrow3Cruise:
        """TAS and manifold pressure for each published power setting."""
        density_alt = density_altitude_isa(pressure_altitude_hundreds * 100, isa_deviation)

        settings: Dict[int, PowerSetting] = {}
        for power in sorted(arrow3.TAS_RAMPS):
            rpms = sorted(rpm for (p, rpm) in arrow3.MANIFOLD_PRESSURE if p == power)
            settings[power] = PowerSetting(
                percent_power=power,
                tas_kt=round_half_up(arrow3.cruise_tas(power, density_alt)),
                manifold_pressure={
                    rpm: self.arrow3_manifold_pressure(power, rpm, pressure_altitude_hundreds)
                    for rpm in rpms
                },
            )

        return Arrow3Cruise(
            density_alt_ft=density_alt,
            temp_c=temp_from_isa(pressure_altitude_hundreds, isa_deviation),
            settings=settings,
        )


# Default service instance - tables built once for the process
performance = PerformanceService(build_tables())
