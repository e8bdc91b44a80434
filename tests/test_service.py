"""
Performance Service
===================

Table registry, rejecting and safe lookups, and the per-aircraft climb and
cruise calculators built on them.
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

import pytest  # noqa: E402

from perfcore.errors import OutOfRangeError, UnknownTableError  # noqa: E402
from perfcore.service import PerformanceService, performance  # noqa: E402
from perfcore.tables import build_tables  # noqa: E402


class TestRegistry:
    def test_table_ids(self):
        splines = set(performance.tables.splines)
        assert {"arrow3.climb_fuel_gal", "arrow3.climb_minutes", "arrow3.mp55_2200",
                "arrow3.mp75_2500"} <= splines
        assert set(performance.tables.grids) == {
            "warrior3.climb_minutes", "warrior3.climb_fuel_gal",
        }

    def test_unknown_table(self):
        with pytest.raises(UnknownTableError, match="arrow3.nope"):
            performance.evaluate_spline("arrow3.nope", 10)
        with pytest.raises(KeyError):
            performance.bilinear_lookup("warrior3.nope", 0, 0)

    def test_registry_read_only(self):
        with pytest.raises(TypeError):
            performance.tables.splines["arrow3.extra"] = None

    def test_independent_service(self):
        service = PerformanceService(build_tables())
        assert service.cruise_lookup(0, 0) == performance.cruise_lookup(0, 0)


class TestArrow3ClimbSplines:
    """Published climb knots come back unchanged."""

    @pytest.mark.parametrize(
        "alt,gal",
        [(20, 1), (40, 2), (60, 3), (70, 4), (80, 5), (100, 6),
         (110, 7), (120, 8), (130, 9), (150, 10)],
    )
    def test_fuel(self, alt, gal):
        assert performance.evaluate_spline("arrow3.climb_fuel_gal", alt) == pytest.approx(gal)

    @pytest.mark.parametrize(
        "alt,minutes",
        [(0, 0), (10, 1), (20, 2), (30, 4), (40, 5), (50, 6), (60, 8), (70, 10),
         (80, 12), (90, 15), (100, 18), (110, 21), (120, 24), (130, 27.5),
         (140, 32), (150, 37)],
    )
    def test_minutes(self, alt, minutes):
        assert performance.evaluate_spline("arrow3.climb_minutes", alt) == pytest.approx(minutes)

    def test_beyond_curve_rejected(self):
        with pytest.raises(OutOfRangeError):
            performance.evaluate_spline("arrow3.climb_minutes", 170)


class TestSafeLookups:
    def test_safe_spline_out_of_range(self):
        result = performance.safe_evaluate_spline("arrow3.climb_minutes", 200)
        assert not result.ok
        assert result.display() == "N/A"

    def test_safe_spline_in_range(self):
        result = performance.safe_evaluate_spline("arrow3.climb_minutes", 90)
        assert result.ok
        assert result.unwrap() == pytest.approx(15.0)

    def test_safe_spline_unknown_table_still_raises(self):
        with pytest.raises(UnknownTableError):
            performance.safe_evaluate_spline("arrow3.nope", 10)

    def test_safe_bicubic_below_grid(self):
        assert not performance.safe_bicubic_climb_lookup(0, 0).ok


class TestWarrior3Climb:
    def test_from_sea_level(self):
        segment = performance.warrior3_climb_segment(0, 0, 30, 0)
        assert segment.minutes == 5
        assert segment.fuel_gal == pytest.approx(2.0)
        assert segment.fuel_l == pytest.approx(7.6)
        assert segment.from_temp_c == 15
        assert segment.to_temp_c == 9

    def test_between_altitudes(self):
        segment = performance.warrior3_climb_segment(10, 0, 30, 0)
        assert segment.minutes == 3
        assert segment.fuel_gal == pytest.approx(0.7)

    def test_bilinear_grids(self):
        assert performance.warrior3_climb_minutes(5000, 0) == pytest.approx(10.0)
        assert performance.warrior3_climb_fuel_gal(5000, 0) == pytest.approx(3.0)


class TestArrow3:
    def test_climb_segment(self):
        segment = performance.arrow3_climb_segment(0, 0, 50, 0)
        assert segment.from_density_alt_ft == 0
        assert segment.to_density_alt_ft == 5000
        assert segment.minutes == 6
        expected = performance.evaluate_spline("arrow3.climb_fuel_gal", 50)
        assert segment.fuel_gal == pytest.approx(expected)

    def test_climb_segment_beyond_curve(self):
        segment = performance.arrow3_climb_segment(0, 0, 200, 0)
        assert segment.minutes is None
        assert segment.fuel_gal is None
        assert segment.fuel_l is None

    def test_manifold_pressure(self):
        assert performance.arrow3_manifold_pressure(55, 2200, 94) == pytest.approx(20.3)
        assert performance.arrow3_manifold_pressure(55, 2200, 95) is None

    def test_cruise_at_sea_level(self):
        cruise = performance.arrow3_cruise(0, 0)
        assert cruise.density_alt_ft == 0
        assert sorted(cruise.settings) == [55, 65, 75]
        assert cruise.settings[55].tas_kt == 114
        assert cruise.settings[65].tas_kt == 125
        assert cruise.settings[55].manifold_pressure[2200] == pytest.approx(23.7)
        assert list(cruise.settings[75].manifold_pressure) == [2500]

    def test_cruise_above_published_manifold_pressure(self):
        cruise = performance.arrow3_cruise(100, 0)
        assert cruise.settings[75].manifold_pressure[2500] is None
        assert cruise.settings[55].manifold_pressure[2500] == pytest.approx(18.7)
