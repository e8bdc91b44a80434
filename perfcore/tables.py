"""
PA-28 Performance: Table Registry
=================================

Builds every performance table once and exposes them read-only by id.
Ids are "<aircraft>.<table>", e.g. "arrow3.climb_minutes".
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
import logging

from .aircraft import arrow3, warrior3
from .bicubic import BicubicGrid
from .bilinear import BilinearGrid
from .cruise import CruiseTable
from .errors import UnknownTableError
from .spline import NaturalCubicSpline

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class PerformanceTables:
    """Immutable set of all engine tables."""
    splines: Mapping[str, NaturalCubicSpline]
    grids: Mapping[str, BilinearGrid]
    climb_grid: BicubicGrid
    cruise_table: CruiseTable

    def spline(self, table_id: str) -> NaturalCubicSpline:
        try:
            return self.splines[table_id]
        except KeyError:
            raise UnknownTableError(f"no spline table '{table_id}'") from None

    def grid(self, table_id: str) -> BilinearGrid:
        try:
            return self.grids[table_id]
        except KeyError:
            raise UnknownTableError(f"no bilinear table '{table_id}'") from None


def build_tables() -> PerformanceTables:
    """
    Construct all tables from the embedded constants.

    Raises:
        ConstructionError: any table's data is malformed
    """
    splines = {f"arrow3.{name}": s for name, s in arrow3.build_splines().items()}
    grids = {f"warrior3.{name}": g for name, g in warrior3.build_climb_grids().items()}

    tables = PerformanceTables(
        splines=MappingProxyType(splines),
        grids=MappingProxyType(grids),
        climb_grid=warrior3.build_climb_bicubic(),
        cruise_table=warrior3.build_cruise_table(),
    )
    logger.debug("Built %d spline and %d bilinear tables", len(splines), len(grids))
    return tables
