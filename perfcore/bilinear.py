"""
PA-28 Performance: Bilinear Grid Lookup
=======================================

Interpolates a rectangular, non-uniform grid indexed by pressure altitude
and ISA deviation. Both axes CLAMP at the edges: queries beyond the last
grid line reuse the boundary row/column instead of extrapolating.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import logging

from .errors import ConstructionError, InterpolationError

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _strictly_increasing(values: Sequence[float]) -> bool:
    return all(b > a for a, b in zip(values, values[1:]))


@dataclass(frozen=True)
class BilinearGrid:
    """Dense table[pa_index][isa_index] over two ascending axes."""
    pa: Tuple[float, ...]
    isa: Tuple[float, ...]
    table: Tuple[Tuple[float, ...], ...]

    def __post_init__(self):
        pa = tuple(float(v) for v in self.pa)
        isa = tuple(float(v) for v in self.isa)
        table = tuple(tuple(float(v) for v in row) for row in self.table)

        if not pa or not isa:
            raise ConstructionError("grid axes must each hold at least one value")
        if not _strictly_increasing(pa) or not _strictly_increasing(isa):
            raise ConstructionError("grid axes must be strictly increasing")
        if len(table) != len(pa):
            raise ConstructionError(
                f"table has {len(table)} rows, pressure-altitude axis has {len(pa)}"
            )
        for i, row in enumerate(table):
            if len(row) != len(isa):
                raise ConstructionError(
                    f"table row {i} has {len(row)} values, ISA axis has {len(isa)}"
                )

        object.__setattr__(self, "pa", pa)
        object.__setattr__(self, "isa", isa)
        object.__setattr__(self, "table", table)
        logger.debug("Bilinear grid built: %d x %d", len(pa), len(isa))

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.pa), len(self.isa)


def bracket(axis: Sequence[float], v: float) -> Tuple[int, int]:
    """
    Find the grid lines around v.

    Returns:
        (i0, i1) with i0 == i1 when v is at or beyond an edge (degenerate,
        single line), otherwise the first pair with axis[i0] <= v <= axis[i1].
    """
    if v <= axis[0]:
        return 0, 0
    last = len(axis) - 1
    if v >= axis[last]:
        return last, last
    for i in range(last):
        if axis[i] <= v <= axis[i + 1]:
            return i, i + 1
    raise InterpolationError(f"bracket: value {v!r} not bracketed")


def _bilinear(
    x: float, y: float,
    x0: float, x1: float, y0: float, y1: float,
    f00: float, f10: float, f01: float, f11: float,
) -> float:
    t = (x - x0) / (x1 - x0)
    u = (y - y0) / (y1 - y0)
    return (
        (1 - t) * (1 - u) * f00
        + t * (1 - u) * f10
        + (1 - t) * u * f01
        + t * u * f11
    )


def lookup(pa_ft: float, isa_dev_c: float, grid: BilinearGrid) -> float:
    """
    Interpolate the grid at (pressure altitude, ISA deviation).

    Args:
        pa_ft: Pressure altitude in feet
        isa_dev_c: ISA deviation in degrees C
        grid: Table to read

    Returns:
        Interpolated value, clamped to the grid edges.
    """
    i0, i1 = bracket(grid.pa, pa_ft)
    j0, j1 = bracket(grid.isa, isa_dev_c)
    table = grid.table

    # Exact grid point or double-clamped
    if i0 == i1 and j0 == j1:
        return table[i0][j0]

    # Linear in ISA only
    if i0 == i1:
        f0 = table[i0][j0]
        f1 = table[i0][j1]
        return f0 + (f1 - f0) * (isa_dev_c - grid.isa[j0]) / (grid.isa[j1] - grid.isa[j0])

    # Linear in altitude only
    if j0 == j1:
        f0 = table[i0][j0]
        f1 = table[i1][j0]
        return f0 + (f1 - f0) * (pa_ft - grid.pa[i0]) / (grid.pa[i1] - grid.pa[i0])

    return _bilinear(
        pa_ft, isa_dev_c,
        grid.pa[i0], grid.pa[i1],
        grid.isa[j0], grid.isa[j1],
        table[i0][j0], table[i1][j0],
        table[i0][j1], table[i1][j1],
    )
