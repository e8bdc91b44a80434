"""
Natural Cubic Spline Validation
===============================

The spline must pass through every knot, match an independent natural
spline (scipy) between knots, keep C2 continuity with zero end curvature,
and reject anything outside its knot range.
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

import numpy as np  # noqa: E402
import pytest  # noqa: E402
from scipy.interpolate import CubicSpline  # noqa: E402

from perfcore.errors import ConstructionError, OutOfRangeError  # noqa: E402
from perfcore.spline import NaturalCubicSpline  # noqa: E402

# Arrow III climb minutes against density altitude (hundreds ft)
XS = [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110, 120, 130, 140, 150, 160]
YS = [0, 1, 2, 4, 5, 6, 8, 10, 12, 15, 18, 21, 24, 27.5, 32, 37, 45]


@pytest.fixture(scope="module")
def spline():
    return NaturalCubicSpline(XS, YS)


class TestKnots:
    """Evaluation at the knots returns the published figures."""

    @pytest.mark.parametrize("x,y", list(zip(XS, YS)))
    def test_passes_through_knots(self, spline, x, y):
        assert spline.evaluate(x) == pytest.approx(y, abs=1e-12)

    def test_last_knot_is_exact(self, spline):
        """The closing knot is inside the domain and returns its ordinate."""
        assert spline.evaluate(160) == 45.0

    def test_call_matches_evaluate(self, spline):
        assert spline(55) == spline.evaluate(55)


class TestAgainstScipy:
    """Between knots the curve matches scipy's natural spline."""

    def test_matches_natural_cubic_spline(self, spline):
        oracle = CubicSpline(XS, YS, bc_type="natural")
        for x in np.linspace(0, 160, 321):
            assert spline.evaluate(x) == pytest.approx(float(oracle(x)), rel=1e-9, abs=1e-9), (
                f"Mismatch at x={x:.2f}"
            )

    def test_irregular_spacing(self):
        xs = [0, 68, 70, 75, 94]
        ys = [23.7, 21.3, 21.2, 21.0, 20.3]
        ours = NaturalCubicSpline(xs, ys)
        oracle = CubicSpline(xs, ys, bc_type="natural")
        for x in (1, 33.3, 68.5, 72, 80, 93.9):
            assert ours(x) == pytest.approx(float(oracle(x)), rel=1e-9)


class TestContinuity:
    """C2 continuity and natural end conditions."""

    def test_value_and_slope_continuous_at_interior_knots(self, spline):
        segs = spline.segments
        for left, right in zip(segs, segs[1:]):
            h = right.x0 - left.x0
            value = left.a + left.b * h + left.c * h**2 + left.d * h**3
            slope = left.b + 2 * left.c * h + 3 * left.d * h**2
            curvature = 2 * left.c + 6 * left.d * h
            assert value == pytest.approx(right.a, abs=1e-9)
            assert slope == pytest.approx(right.b, abs=1e-9)
            assert curvature == pytest.approx(2 * right.c, abs=1e-9)

    def test_natural_boundary(self, spline):
        first, last = spline.segments[0], spline.segments[-1]
        h = XS[-1] - last.x0
        assert first.c == pytest.approx(0.0)
        assert 2 * last.c + 6 * last.d * h == pytest.approx(0.0, abs=1e-9)

    def test_two_points_is_linear(self):
        line = NaturalCubicSpline([0, 10], [0, 5])
        assert line(4) == pytest.approx(2.0)
        assert line(10) == 5.0


class TestRangeRejection:
    """Inputs outside [xs[0], xs[-1]] are rejected, never extrapolated."""

    @pytest.mark.parametrize("x", [-0.001, -10, 160.001, 1000])
    def test_outside_domain_raises(self, spline, x):
        with pytest.raises(OutOfRangeError):
            spline.evaluate(x)

    def test_nan_raises(self, spline):
        with pytest.raises(OutOfRangeError):
            spline.evaluate(float("nan"))

    def test_out_of_range_is_value_error(self, spline):
        with pytest.raises(ValueError):
            spline.evaluate(200)

    def test_domain(self, spline):
        assert spline.domain == (0.0, 160.0)


class TestConstruction:
    """Malformed knot data fails at construction."""

    @pytest.mark.parametrize(
        "xs,ys",
        [
            ([0], [1]),
            ([], []),
            ([0, 1, 2], [0, 1]),
            ([0, 2, 1], [0, 1, 2]),
            ([0, 1, 1], [0, 1, 2]),
            ([0, float("nan")], [0, 1]),
            ([0, 1], [0, float("inf")]),
            ([[0, 1], [2, 3]], [[0, 1], [2, 3]]),
        ],
    )
    def test_invalid_input_rejected(self, xs, ys):
        with pytest.raises(ConstructionError):
            NaturalCubicSpline(xs, ys)

    def test_knot_arrays_read_only(self, spline):
        with pytest.raises(ValueError):
            spline._xs[0] = 5.0

    def test_knots_and_len(self, spline):
        assert len(spline) == len(XS)
        assert spline.knots[3] == (30.0, 4.0)
        assert "17 knots" in repr(spline)
