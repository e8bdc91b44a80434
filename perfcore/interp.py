"""
PA-28 Performance: 1-D Interpolation Helpers
============================================

interp1: linear interpolation that CLAMPS at the ends (no error).
scale_linear: piecewise-linear scale that EXTRAPOLATES past the ends.

Callers that need range validation must check bounds themselves.
"""

from bisect import bisect_right
from typing import Sequence

from .errors import InterpolationError


def lerp(a: float, b: float, w: float) -> float:
    """Linear blend of a and b at weight w."""
    return a + w * (b - a)


def interp1(xs: Sequence[float], ys: Sequence[float], v: float) -> float:
    """
    Interpolate inside a monotone table, clamping outside it.

    Args:
        xs: Ascending break-points
        ys: Values at each break-point (same length as xs)
        v: Query value

    Returns:
        ys[0] for v <= xs[0], ys[-1] for v >= xs[-1], otherwise the linear
        interpolation between the first bracketing pair.
    """
    if v <= xs[0]:
        return ys[0]
    if v >= xs[-1]:
        return ys[-1]
    for i in range(len(xs) - 1):
        if xs[i] <= v <= xs[i + 1]:
            t = (v - xs[i]) / (xs[i + 1] - xs[i])
            return ys[i] + t * (ys[i + 1] - ys[i])
    raise InterpolationError(f"interp1: value {v!r} not bracketed")


def scale_linear(domain: Sequence[float], range_: Sequence[float], v: float) -> float:
    """
    Piecewise-linear map from domain to range, unclamped.

    Inside the domain this equals interp1. Outside it, the first or last
    segment is extended.
    """
    j = min(len(domain), len(range_)) - 1
    if j < 1:
        return range_[0]
    i = bisect_right(domain, v, 1, j) - 1
    t = (v - domain[i]) / (domain[i + 1] - domain[i])
    return lerp(range_[i], range_[i + 1], t)
