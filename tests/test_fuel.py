"""
Fuel Planning
=============

Reference plan: 10 min / 8 L climb, 60 min cruise, 150 L endurance, private
contingency, 30 min final reserve, Warrior III (35 L/h cruise, 30 L/h hold).
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

import pytest  # noqa: E402

from perfconfig import AircraftModel, FuelPolicy  # noqa: E402
from perfcore.fuel import (  # noqa: E402
    ContingencyType,
    FuelPlanInput,
    fuel_plan,
    minimum_fuel,
)


class TestMinimumFuel:
    def test_dual(self):
        result = minimum_fuel(40)
        assert result.legal_min_l == 60
        assert result.ten_percent_l == 6
        assert result.solo_vdo_l == 0
        assert result.company_min_l == 74

    def test_solo_adds_vdo_allowance(self):
        result = minimum_fuel(40, solo=True)
        assert result.solo_vdo_l == pytest.approx(9.0)
        assert result.company_min_l == 83

    def test_holding_included(self):
        assert minimum_fuel(40, holding_l=15).legal_min_l == 75


@pytest.fixture
def plan():
    return FuelPlanInput(climb_min=10, climb_l=8, cruise_min=60, endurance_l=150)


class TestFuelPlan:
    def test_required(self, plan):
        result = fuel_plan(plan, AircraftModel.WARRIOR_III)
        assert result.taxi_l == 5
        assert result.cruise_l == 35
        assert result.trip_min == 70
        assert result.trip_l == 43
        assert result.final_reserve_l == 15
        assert result.required_min == 100
        assert result.required_l == 63

    def test_discretionary_and_margin(self, plan):
        result = fuel_plan(plan, AircraftModel.WARRIOR_III)
        assert result.discretionary_l == 7
        assert result.discretionary_min == 12
        assert result.margin_l == 80
        assert result.margin_min == 137
        assert result.endurance_min == 249
        assert result.sufficient

    def test_arrow3_taxi(self, plan):
        assert fuel_plan(plan, AircraftModel.ARROW_III).taxi_l == 6

    def test_piston_contingency(self, plan):
        plan.contingency = ContingencyType.PISTON
        result = fuel_plan(plan, AircraftModel.WARRIOR_III)
        assert result.contingency_min == 7
        assert result.contingency_l == 5

    def test_piston_contingency_floor(self, plan):
        plan.contingency = ContingencyType.PISTON
        plan.cruise_min = 20
        result = fuel_plan(plan, AircraftModel.WARRIOR_III)
        assert result.contingency_min == 5
        assert result.contingency_l == 3

    def test_insufficient_endurance(self, plan):
        plan.endurance_l = 50
        assert not fuel_plan(plan, AircraftModel.WARRIOR_III).sufficient

    def test_policy_override(self, plan):
        policy = FuelPolicy(cruise_rate_lph=40.0)
        assert fuel_plan(plan, AircraftModel.WARRIOR_III, policy).cruise_l == 40

    def test_invalid_final_reserve(self, plan):
        plan.final_reserve_min = 40
        with pytest.raises(ValueError, match="final reserve"):
            fuel_plan(plan, AircraftModel.WARRIOR_III)
