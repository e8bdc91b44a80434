"""
Piper Warrior III (PA-28-161) performance data.

Figures transcribed from the POH. All tables are compiled-in constants;
builders turn them into engine tables once, at registry construction.
"""

from typing import Dict

from ..bicubic import BicubicGrid, GridPoint
from ..bilinear import BilinearGrid
from ..cruise import CruiseRow, CruiseTable

# === CRUISE (75% power) ===
# (pa_ft, isa break-points, rpm at each, TAS at first ISA, TAS at last ISA)
CRUISE_ROWS = (
    (0, (-15, 0, 10, 20, 30), (2340, 2390, 2420, 2440, 2470), 100, 106),
    (2000, (-15, 0, 10, 20, 30), (2390, 2440, 2460, 2490, 2520), 103, 108),
    (4000, (-15, 0, 10, 20, 30), (2440, 2480, 2510, 2540, 2560), 105, 111),
    (6000, (-15, 0, 10, 20, 30), (2490, 2530, 2560, 2580, 2600), 107, 113),
    (8000, (-15, 0, 10, 17.5), (2530, 2580, 2610, 2630), 109, 114),
    (9000, (-15, 0, 8.5), (2560, 2600, 2630), 110, 114),
    (10000, (-15,), (2580,), 112, 112),
)

# === CLIMB (bilinear, from sea level) ===
CLIMB_ISA = (-15, 0, 15, 30)
CLIMB_PA = (0, 1000, 2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000)

CLIMB_MINUTES = (
    (0, 0, 0, 0),
    (1.8, 2, 2.2, 2.4),
    (2.8, 3, 3.5, 5),
    (4.5, 5, 6, 7.5),
    (6, 7.25, 9, 10.5),
    (8, 10, 12, 15),
    (10.5, 12.5, 15.5, 20),
    (13, 15.5, 19.5, 22),
    (16, 19, 25.5, 35),
    (19, 24, 32.5, 53),
    (23, 29.5, 38, 53),
)

CLIMB_FUEL_GAL = (
    (1, 1, 1, 1),
    (1.2, 1.3, 1.4, 1.5),
    (1.6, 1.7, 1.8, 1.95),
    (1.9, 2, 2.15, 2.4),
    (2.2, 2.45, 2.8, 3.15),
    (2.6, 3, 3.45, 4),
    (3.1, 3.5, 4.05, 5),
    (3.7, 4.15, 5, 6.2),
    (4.1, 4.9, 6.1, 8),
    (4.85, 5.8, 7.5, 11.8),
    (5.6, 6.45, 8.6, 11.8),
)

# === CLIMB (bicubic figures) ===
# (isa deviation, altitude hundreds, minutes, US gal). Hot rows end lower.
CLIMB_FIGURES = (
    (-15, 10, 2, 1.2), (-15, 20, 3, 1.6), (-15, 30, 5, 2), (-15, 40, 6, 2.2),
    (-15, 50, 8, 2.6), (-15, 60, 10, 3.1), (-15, 70, 13, 3.6), (-15, 80, 16, 4.1),
    (-15, 90, 19, 4.9), (-15, 100, 23, 5.6), (-15, 110, 28, 6.5), (-15, 120, 33, 7.8),

    (0, 10, 2, 1.3), (0, 20, 3, 1.7), (0, 30, 5, 2), (0, 40, 7, 2.4),
    (0, 50, 10, 3), (0, 60, 13, 3.6), (0, 70, 16, 4.2), (0, 80, 20, 5),
    (0, 90, 24, 5.9), (0, 100, 32, 7), (0, 110, 38, 8.5), (0, 120, 50, 11),

    (15, 10, 2, 1.4), (15, 20, 4, 1.8), (15, 30, 6, 2.2), (15, 40, 8, 2.8),
    (15, 50, 12, 3.4), (15, 60, 15, 4.1), (15, 70, 20, 5), (15, 80, 25, 6),
    (15, 90, 32, 7.5), (15, 100, 44, 9.7),

    (30, 10, 2, 1.5), (30, 20, 5, 2), (30, 30, 8, 2.4), (30, 40, 11, 3.1),
    (30, 50, 15, 4), (30, 60, 20, 5), (30, 70, 26, 6.2), (30, 80, 35, 8),
    (30, 90, 55, 11.8),
)

# === REFERENCE SPEEDS (KIAS against weight, lb) ===
SPEED_WEIGHTS = (1600, 1800, 2000, 2200, 2440)
VR_KT = (40, 43, 46, 48, 52)
VREF_KT = (49, 55, 60, 63, 65)
VTOSS_KT = (44, 47, 50, 53, 57)


def build_cruise_table() -> CruiseTable:
    return CruiseTable([
        CruiseRow(pa=pa, isa=isa, rpm=rpm, tas_lo=tas_lo, tas_hi=tas_hi)
        for pa, isa, rpm, tas_lo, tas_hi in CRUISE_ROWS
    ])


def build_climb_grids() -> Dict[str, BilinearGrid]:
    """Bilinear climb grids keyed by output name."""
    return {
        "climb_minutes": BilinearGrid(pa=CLIMB_PA, isa=CLIMB_ISA, table=CLIMB_MINUTES),
        "climb_fuel_gal": BilinearGrid(pa=CLIMB_PA, isa=CLIMB_ISA, table=CLIMB_FUEL_GAL),
    }


def build_climb_bicubic() -> BicubicGrid:
    return BicubicGrid.from_points(GridPoint(*figure) for figure in CLIMB_FIGURES)
