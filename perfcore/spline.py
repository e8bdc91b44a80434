"""
PA-28 Performance: Natural Cubic Spline
=======================================

C2-continuous piecewise cubic through strictly increasing knots, with zero
second derivative at both ends. Used for the single-variable POH curves
(climb time/fuel against density altitude, manifold pressure against
pressure altitude).

The spline REJECTS inputs outside its knot range. It never extrapolates.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import logging

import numpy as np

from .errors import ConstructionError, InterpolationError, OutOfRangeError

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class SplineSegment:
    """Cubic a + b*dx + c*dx^2 + d*dx^3 on [x0, next knot]."""
    x0: float
    a: float
    b: float
    c: float
    d: float

    def evaluate(self, x: float) -> float:
        dx = x - self.x0
        return self.a + self.b * dx + self.c * dx * dx + self.d * dx * dx * dx


class NaturalCubicSpline:
    """
    Natural cubic spline interpolant.

    Coefficients are solved once at construction with the Thomas algorithm
    (tridiagonal forward elimination and back substitution). The instance is
    read-only afterwards and safe to share between threads.
    """

    def __init__(self, xs: Sequence[float], ys: Sequence[float]):
        """
        Build the spline.

        Args:
            xs: Knot abscissae, strictly increasing
            ys: Knot ordinates, same length as xs

        Raises:
            ConstructionError: fewer than two knots, mismatched lengths,
                non-finite values or non-increasing abscissae.
        """
        x = np.asarray(xs, dtype=float)
        y = np.asarray(ys, dtype=float)

        if x.ndim != 1 or y.ndim != 1:
            raise ConstructionError("x and y must be one-dimensional sequences")
        n = len(x)
        if n < 2 or n != len(y):
            raise ConstructionError("x and y arrays must have the same length >= 2")
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ConstructionError("x and y arrays must contain finite values")

        h = np.diff(x)
        if np.any(h <= 0):
            raise ConstructionError("x array must be strictly increasing")

        b, c, d = self._solve_coefficients(x, y, h)

        self._segments: Tuple[SplineSegment, ...] = tuple(
            SplineSegment(
                x0=float(x[i]),
                a=float(y[i]),
                b=float(b[i]),
                c=float(c[i]),
                d=float(d[i]),
            )
            for i in range(n - 1)
        )

        self._xs = x
        self._ys = y
        self._left_knots = x[:-1].copy()
        for arr in (self._xs, self._ys, self._left_knots):
            arr.setflags(write=False)

        logger.debug("Natural cubic spline built over [%g, %g] with %d knots",
                     x[0], x[-1], n)

    @staticmethod
    def _solve_coefficients(
        x: np.ndarray, y: np.ndarray, h: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Solve the natural-spline tridiagonal system for b, c, d."""
        n = len(x)

        alpha = np.zeros(n - 1)
        for i in range(1, n - 1):
            alpha[i] = (3 / h[i]) * (y[i + 1] - y[i]) - (3 / h[i - 1]) * (y[i] - y[i - 1])

        l = np.zeros(n)  # noqa: E741
        mu = np.zeros(n)
        z = np.zeros(n)

        # Natural boundary: c[0] = c[n-1] = 0
        l[0] = 1.0
        for i in range(1, n - 1):
            l[i] = 2 * (x[i + 1] - x[i - 1]) - h[i - 1] * mu[i - 1]
            mu[i] = h[i] / l[i]
            z[i] = (alpha[i] - h[i - 1] * z[i - 1]) / l[i]
        l[n - 1] = 1.0
        z[n - 1] = 0.0

        c = np.zeros(n)
        b = np.zeros(n - 1)
        d = np.zeros(n - 1)
        for j in range(n - 2, -1, -1):
            c[j] = z[j] - mu[j] * c[j + 1]
            b[j] = (y[j + 1] - y[j]) / h[j] - h[j] * (c[j + 1] + 2 * c[j]) / 3
            d[j] = (c[j + 1] - c[j]) / (3 * h[j])

        return b, c[:-1], d

    @property
    def domain(self) -> Tuple[float, float]:
        """Inclusive (min, max) of valid inputs."""
        return float(self._xs[0]), float(self._xs[-1])

    @property
    def knots(self) -> Tuple[Tuple[float, float], ...]:
        return tuple(zip(self._xs.tolist(), self._ys.tolist()))

    @property
    def segments(self) -> Tuple[SplineSegment, ...]:
        return self._segments

    def evaluate(self, x: float) -> float:
        """
        Evaluate the spline.

        Args:
            x: Abscissa within [xs[0], xs[-1]]

        Returns:
            Interpolated value. The last knot returns its ordinate exactly.

        Raises:
            OutOfRangeError: x outside the knot range (or NaN)
        """
        x = float(x)
        lo, hi = self.domain
        if not lo <= x <= hi:
            raise OutOfRangeError(
                f"x={x:g} is outside the interpolation range [{lo:g}, {hi:g}]"
            )
        # Half-open search below would miss the closing knot
        if x == hi:
            return float(self._ys[-1])

        return self._find_segment(x).evaluate(x)

    __call__ = evaluate

    def _find_segment(self, x: float) -> SplineSegment:
        """Binary search for the segment whose [x0, x1) contains x."""
        idx = int(np.searchsorted(self._left_knots, x, side="right")) - 1
        if idx < 0 or idx >= len(self._segments):
            raise InterpolationError(f"segment search failed for x={x:g}")
        return self._segments[idx]

    def __len__(self) -> int:
        return len(self._xs)

    def __repr__(self) -> str:
        lo, hi = self.domain
        return f"<{self.__class__.__name__}([{lo:g}, {hi:g}]) [{len(self)} knots]>"
