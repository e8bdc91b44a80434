"""
Weight and Balance Sheet
========================

Reference loading: 1500 lb empty at 86.0 in, 340 lb in front, 100 L fuel,
40 L trip burn. Values checked by hand against the paper load sheet.
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

import pytest  # noqa: E402

from perfconfig import AircraftModel  # noqa: E402
from perfcore.weight_balance import LoadingInput, compute_weight_balance  # noqa: E402


@pytest.fixture
def loading():
    return LoadingInput(
        basic_empty_lbs=1500,
        basic_empty_arm_in=86.0,
        front_seats_lbs=340,
        rear_seats_lbs=0,
        fuel_l=100,
        baggage_lbs=0,
        trip_burn_l=40,
    )


class TestStations:
    def test_fuel_station(self, loading):
        sheet = compute_weight_balance(loading, AircraftModel.WARRIOR_III)
        fuel = sheet.stations[3]
        assert fuel.weight_lbs == 158
        assert fuel.moment == 15010

    def test_zero_weight_station(self, loading):
        sheet = compute_weight_balance(loading, AircraftModel.WARRIOR_III)
        rear = sheet.stations[2]
        assert rear.weight_lbs == 0
        assert rear.moment == 0


class TestTotals:
    def test_ramp(self, loading):
        ramp = compute_weight_balance(loading, AircraftModel.WARRIOR_III).ramp
        assert ramp.weight_lbs == 1998
        assert ramp.moment == 171380
        assert ramp.arm_in == pytest.approx(85.8)
        assert ramp.weight_kg == 906

    def test_takeoff(self, loading):
        sheet = compute_weight_balance(loading, AircraftModel.WARRIOR_III)
        assert sheet.takeoff_weight_lbs == 1991
        assert sheet.takeoff.moment == 170715
        assert sheet.takeoff.arm_in == pytest.approx(85.7)
        assert sheet.takeoff.weight_kg == 903

    def test_zero_fuel(self, loading):
        zfw = compute_weight_balance(loading, AircraftModel.WARRIOR_III).zero_fuel
        assert zfw.weight_lbs == 1840
        assert zfw.moment == 156370
        assert zfw.arm_in == pytest.approx(85.0)

    def test_landing(self, loading):
        sheet = compute_weight_balance(loading, AircraftModel.WARRIOR_III)
        assert sheet.trip_burn_lbs == 64
        assert sheet.landing_weight_lbs == 1927
        assert sheet.landing.weight_kg == 874

    def test_no_warnings(self, loading):
        assert compute_weight_balance(loading, AircraftModel.WARRIOR_III).warnings == []

    def test_empty_sheet_has_no_arm(self):
        sheet = compute_weight_balance(LoadingInput(fuel_l=0), AircraftModel.WARRIOR_III)
        assert sheet.zero_fuel.arm_in is None


class TestLimits:
    def test_fuel_over_capacity(self, loading):
        loading.fuel_l = 250
        warnings = compute_weight_balance(loading, AircraftModel.WARRIOR_III).warnings
        assert any(w.startswith("FUEL") for w in warnings)

    def test_baggage_over_limit(self, loading):
        loading.baggage_lbs = 250
        warnings = compute_weight_balance(loading, AircraftModel.WARRIOR_III).warnings
        assert any(w.startswith("BAGGAGE") for w in warnings)

    def test_mtow_depends_on_model(self, loading):
        loading.front_seats_lbs = 400
        loading.rear_seats_lbs = 340
        loading.baggage_lbs = 100
        # TOW 2491 lb: over the Warrior limit only
        warrior = compute_weight_balance(loading, AircraftModel.WARRIOR_III).warnings
        arrow = compute_weight_balance(loading, AircraftModel.ARROW_III).warnings
        assert any(w.startswith("WEIGHT") for w in warrior)
        assert not any(w.startswith("WEIGHT") for w in arrow)
