"""Clamped and extrapolating 1-D interpolation."""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

import pytest  # noqa: E402

from perfcore.errors import InterpolationError  # noqa: E402
from perfcore.interp import interp1, lerp, scale_linear  # noqa: E402


class TestInterp1:
    """interp1 clamps at both ends."""

    def test_inside(self):
        assert interp1([0, 10], [0, 100], 2.5) == pytest.approx(25.0)

    def test_clamps_below_and_above(self):
        assert interp1([0, 10], [0, 100], -5) == 0
        assert interp1([0, 10], [0, 100], 15) == 100

    def test_break_point_exact(self):
        assert interp1([0, 10, 20], [0, 100, 300], 10) == pytest.approx(100.0)

    def test_single_point_table(self):
        assert interp1([5], [42], 3) == 42
        assert interp1([5], [42], 9) == 42

    def test_nan_not_bracketed(self):
        with pytest.raises(InterpolationError):
            interp1([0, 10], [0, 100], float("nan"))


class TestScaleLinear:
    """scale_linear extends the end segments."""

    def test_matches_interp1_inside(self):
        domain, range_ = [0, 10, 20], [0, 100, 300]
        for v in (0, 5, 10, 15, 20):
            assert scale_linear(domain, range_, v) == pytest.approx(interp1(domain, range_, v))

    def test_extrapolates_past_ends(self):
        domain, range_ = [0, 10, 20], [0, 100, 300]
        assert scale_linear(domain, range_, 25) == pytest.approx(400.0)
        assert scale_linear(domain, range_, -5) == pytest.approx(-50.0)

    def test_two_point_domain(self):
        assert scale_linear([0, 10], [0, 100], 15) == pytest.approx(150.0)


def test_lerp():
    assert lerp(10, 20, 0.25) == pytest.approx(12.5)
