# PA-28 Performance Core Module
from .errors import (
    PerformanceError, ConstructionError, InvalidInputError,
    OutOfRangeError, InterpolationError, UnknownTableError,
)
from .spline import NaturalCubicSpline
from .bilinear import BilinearGrid
from .bicubic import BicubicGrid, ClimbPerformance
from .cruise import CruiseRow, CruiseTable, CruiseResult
from .result import LookupResult
from .tables import PerformanceTables, build_tables
from .service import PerformanceService, performance

__all__ = [
    "PerformanceError",
    "ConstructionError",
    "InvalidInputError",
    "OutOfRangeError",
    "InterpolationError",
    "UnknownTableError",
    "NaturalCubicSpline",
    "BilinearGrid",
    "BicubicGrid",
    "ClimbPerformance",
    "CruiseRow",
    "CruiseTable",
    "CruiseResult",
    "LookupResult",
    "PerformanceTables",
    "build_tables",
    "PerformanceService",
    "performance",
]
