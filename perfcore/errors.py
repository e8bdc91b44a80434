"""Exception hierarchy for the performance engine."""


class PerformanceError(Exception):
    """Base class for all performance engine errors."""


class ConstructionError(PerformanceError, ValueError):
    """A performance table could not be built from the supplied data.

    Raised eagerly when the table is constructed (too few points, mismatched
    lengths, axes that are not strictly increasing). There is no fallback
    table.
    """


# Name used by the spline contract
InvalidInputError = ConstructionError


class OutOfRangeError(PerformanceError, ValueError):
    """An evaluation input lies outside a table that rejects rather than clamps.

    Expected for user-entered values; callers present "N/A" for the affected
    output.
    """


class InterpolationError(PerformanceError, RuntimeError):
    """A bracket search failed for a value inside the axis range."""


class UnknownTableError(PerformanceError, KeyError):
    """No table is registered under the requested id."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown table"
