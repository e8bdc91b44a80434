"""
PA-28 Performance: Bicubic Grid Lookup
======================================

Cubic convolution (Catmull-Rom kernel) over a grid of rows. Each row holds
points at one outer-axis value (ISA deviation) ordered along the inner axis
(altitude), carrying two co-located outputs z1 and z2.

Unlike the bilinear lookup, queries outside the grid are REJECTED with
OutOfRangeError. Nothing is clamped or extrapolated at the query level.

Grid rows may be ragged (the published climb table stops at lower altitudes
on hot days). Neighbour indices are clamped to each row's length; an index
that still falls outside a shorter row contributes zero.
"""

from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from .conversions import round_half_up
from .errors import ConstructionError, OutOfRangeError

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class GridPoint:
    """One published figure: outer x, inner y, outputs z1 and z2."""
    x: float
    y: float
    z1: float
    z2: float


@dataclass(frozen=True)
class ClimbPerformance:
    """Time and fuel to climb from sea level."""
    minutes: int
    fuel_gal: float


class BicubicGrid:
    """
    Immutable grid of GridPoint rows.

    Rows are ordered by x; points within a row are ordered by y. The inner
    axis used for bracketing is taken from the first row.
    """

    def __init__(
        self,
        rows: Sequence[Sequence[GridPoint]],
        require_rectangular: bool = False,
    ):
        """
        Args:
            rows: Outer-axis rows, each a sequence of GridPoint
            require_rectangular: Reject rows whose inner axis differs from
                the first row's

        Raises:
            ConstructionError: empty grid or row, mixed x within a row,
                unordered axes, or ragged rows when require_rectangular.
        """
        frozen = tuple(tuple(row) for row in rows)
        if not frozen:
            raise ConstructionError("bicubic grid needs at least one row")

        for i, row in enumerate(frozen):
            if not row:
                raise ConstructionError(f"bicubic grid row {i} is empty")
            if any(p.x != row[0].x for p in row):
                raise ConstructionError(f"bicubic grid row {i} mixes outer-axis values")
            ys = [p.y for p in row]
            if any(b <= a for a, b in zip(ys, ys[1:])):
                raise ConstructionError(f"bicubic grid row {i} inner axis not strictly increasing")

        xs = [row[0].x for row in frozen]
        if any(b <= a for a, b in zip(xs, xs[1:])):
            raise ConstructionError("bicubic grid rows must be strictly increasing in x")

        first_axis = [p.y for p in frozen[0]]
        ragged = [i for i, row in enumerate(frozen) if [p.y for p in row] != first_axis]
        if ragged:
            if require_rectangular:
                raise ConstructionError(
                    f"bicubic grid rows {ragged} do not share the first row's inner axis"
                )
            logger.debug("Bicubic grid has ragged rows %s; short rows read as zero", ragged)

        self._rows = frozen
        self._x_points = tuple(xs)
        self._y_points = tuple(first_axis)

    @classmethod
    def from_points(
        cls,
        points: Iterable[GridPoint],
        require_rectangular: bool = False,
    ) -> "BicubicGrid":
        """Group flat points into rows by x (ascending), keeping y order."""
        ordered = sorted(points, key=lambda p: (p.x, p.y))
        rows = [list(group) for _, group in groupby(ordered, key=lambda p: p.x)]
        return cls(rows, require_rectangular=require_rectangular)

    @property
    def rows(self) -> Tuple[Tuple[GridPoint, ...], ...]:
        return self._rows

    @property
    def x_points(self) -> Tuple[float, ...]:
        return self._x_points

    @property
    def y_points(self) -> Tuple[float, ...]:
        return self._y_points

    @property
    def is_rectangular(self) -> bool:
        return all(len(row) == len(self._y_points) for row in self._rows)

    def __repr__(self) -> str:
        return (f"<{self.__class__.__name__}({len(self._x_points)} rows x "
                f"{len(self._y_points)} cols)>")


def cubic_weights(t: float) -> Tuple[float, float, float, float]:
    """Catmull-Rom convolution weights for normalized distance t in [0, 1]."""
    t2 = t * t
    t3 = t2 * t
    return (
        -0.5 * t3 + t2 - 0.5 * t,
        1.5 * t3 - 2.5 * t2 + 1,
        -1.5 * t3 + 2 * t2 + 0.5 * t,
        0.5 * t3 - 0.5 * t2,
    )


def locate(value: float, points: Sequence[float]) -> Tuple[int, float]:
    """
    Find the lower bracketing index and fractional position of value.

    Raises:
        OutOfRangeError: value is not between two consecutive points
    """
    for i in range(len(points) - 1):
        if points[i] <= value <= points[i + 1]:
            factor = (value - points[i]) / (points[i + 1] - points[i])
            return i, factor
    raise OutOfRangeError("value out of bounds")


def _convolve(values: Sequence[Optional[float]], weights: Sequence[float]) -> float:
    """Weighted sum with missing samples read as zero."""
    return sum((v if v is not None else 0.0) * w for v, w in zip(values, weights))


def _at(row: Sequence[GridPoint], index: int) -> Optional[GridPoint]:
    if 0 <= index < len(row):
        return row[index]
    return None


def bicubic_interpolate(grid: BicubicGrid, x: float, y: float) -> Tuple[float, float]:
    """
    Interpolate both outputs at (x, y).

    Returns:
        (z1, z2), unrounded

    Raises:
        OutOfRangeError: x or y outside the grid axes
    """
    x_index, tx = locate(x, grid.x_points)
    y_index, ty = locate(y, grid.y_points)

    wx = cubic_weights(tx)
    wy = cubic_weights(ty)

    rows = grid.rows
    z1_rows: List[float] = []
    z2_rows: List[float] = []

    # Pass 1: along y within each of the 4 neighbouring rows
    for i in range(-1, 3):
        row = rows[max(0, min(x_index + i, len(rows) - 1))]
        last = len(row) - 1
        neighbours = [
            _at(row, max(0, y_index - 1)),
            _at(row, y_index),
            _at(row, min(y_index + 1, last)),
            _at(row, min(y_index + 2, last)),
        ]
        z1_rows.append(_convolve([p.z1 if p is not None else None for p in neighbours], wy))
        z2_rows.append(_convolve([p.z2 if p is not None else None for p in neighbours], wy))

    # Pass 2: along x across the row results
    return _convolve(z1_rows, wx), _convolve(z2_rows, wx)


def calculate_climb(
    isa_deviation: float,
    altitude_hundreds_ft: float,
    grid: BicubicGrid,
) -> ClimbPerformance:
    """
    Time and fuel to climb from the bicubic climb grid.

    Args:
        isa_deviation: ISA deviation in degrees C (outer axis)
        altitude_hundreds_ft: Pressure altitude in hundreds of feet (inner axis)
        grid: Climb grid with z1 = minutes and z2 = US gallons

    Returns:
        ClimbPerformance with minutes rounded to the nearest integer and fuel
        unrounded.

    Raises:
        OutOfRangeError: query outside the published figures
    """
    minutes, fuel_gal = bicubic_interpolate(grid, isa_deviation, altitude_hundreds_ft)
    return ClimbPerformance(minutes=round_half_up(minutes), fuel_gal=fuel_gal)
