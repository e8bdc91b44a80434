"""
Piper Arrow III (PA-28R-201) performance data.

Climb time/fuel are published against density altitude; manifold pressure
for each power setting against pressure altitude (hundreds of feet).
"""

from typing import Dict

from ..spline import NaturalCubicSpline

# === CLIMB (from sea level, density altitude hundreds) ===
CLIMB_FUEL_ALT = (0, 20, 40, 60, 70, 80, 100, 110, 120, 130, 150, 160)
CLIMB_FUEL_GAL = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)

CLIMB_MIN_ALT = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110, 120, 130, 140, 150, 160)
CLIMB_MINUTES = (0, 1, 2, 4, 5, 6, 8, 10, 12, 15, 18, 21, 24, 27.5, 32, 37, 45)

# === MANIFOLD PRESSURE (in Hg, pressure altitude hundreds) ===
# (percent power, rpm) -> (altitudes, manifold pressures)
MANIFOLD_PRESSURE = {
    (55, 2200): (
        (0, 10, 20, 30, 40, 50, 60, 68, 70, 75, 80, 90, 94),
        (23.7, 23.4, 23.0, 22.6, 22.3, 21.9, 21.6, 21.3, 21.2, 21.0, 20.8, 20.5, 20.3),
    ),
    (55, 2500): (
        (0, 10, 20, 30, 40, 50, 60, 68, 70, 75, 80, 90, 94, 100, 110, 120, 130, 140),
        (21.7, 21.4, 21.1, 20.8, 20.5, 20.2, 19.9, 19.7, 19.6, 19.4, 19.3, 19.0, 18.9,
         18.7, 18.4, 18.1, 17.8, 17.5),
    ),
    (65, 2200): (
        (0, 10, 20, 30, 40, 50, 60, 68, 70),
        (26.1, 25.8, 25.4, 25.1, 24.7, 24.3, 24.0, 23.7, 23.6),
    ),
    (65, 2500): (
        (0, 10, 20, 30, 40, 50, 60, 68, 70, 75, 80, 90),
        (24.1, 23.7, 23.4, 23.1, 22.8, 22.4, 22.1, 21.9, 21.8, 21.6, 21.5, 21.1),
    ),
    (75, 2500): (
        (0, 10, 20, 30, 40, 50, 60),
        (26.3, 26.0, 25.6, 25.3, 24.9, 24.6, 24.3),
    ),
}

# === CRUISE TAS (kt) against density altitude (ft) ===
# percent power -> (sea-level TAS, ceiling TAS, density altitude span)
TAS_RAMPS = {
    55: (114.0, 131.0, 13000.0),
    65: (124.5, 138.0, 9800.0),
    75: (132.0, 144.0, 6700.0),
}

# === REFERENCE SPEEDS (KIAS against weight, lb) ===
SPEED_WEIGHTS = (2000, 2200, 2400, 2600, 2750)
VR_FLAPS0_KT = (60, 63, 66, 69, 71)
VR_FLAPS25_KT = (51, 53, 55, 57, 59)
VREF_KT = (61, 64, 67, 70, 72)


def manifold_table_id(percent_power: int, rpm: int) -> str:
    return f"mp{percent_power}_{rpm}"


def cruise_tas(percent_power: int, density_altitude_ft: float) -> float:
    """
    Cruise TAS for a power setting, linear in density altitude.

    Clamped to the sea-level and ceiling values of the ramp.
    """
    sea_level, ceiling, span = TAS_RAMPS[percent_power]
    tas = sea_level + (ceiling - sea_level) / span * density_altitude_ft
    return min(ceiling, max(sea_level, tas))


def build_splines() -> Dict[str, NaturalCubicSpline]:
    """Climb and manifold-pressure splines keyed by table name."""
    splines = {
        "climb_fuel_gal": NaturalCubicSpline(CLIMB_FUEL_ALT, CLIMB_FUEL_GAL),
        "climb_minutes": NaturalCubicSpline(CLIMB_MIN_ALT, CLIMB_MINUTES),
    }
    for (power, rpm), (alts, pressures) in MANIFOLD_PRESSURE.items():
        splines[manifold_table_id(power, rpm)] = NaturalCubicSpline(alts, pressures)
    return splines
