"""Performance regression scenarios anchored to POH reference figures."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .atmosphere import density_altitude_isa
from .service import PerformanceService, performance

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass
class ScenarioResult:
    name: str
    metrics: Dict[str, float]


@dataclass
class RegressionScenario:
    name: str
    description: str
    evaluate: Callable[[PerformanceService], ScenarioResult]


class RegressionRunner:
    """Run deterministic table regressions for CI validation."""

    def __init__(self, tolerance: float = 0.05, service: Optional[PerformanceService] = None):
        self.tolerance = tolerance
        self.service = service or performance
        self.scenarios: List[RegressionScenario] = [
            RegressionScenario(
                name="warrior3_cruise_sea_level",
                description="Cruise RPM/TAS at sea level, ISA",
                evaluate=self._cruise_sea_level,
            ),
            RegressionScenario(
                name="warrior3_cruise_blended",
                description="Cruise RPM/TAS blended between the 4000 and 6000 ft rows",
                evaluate=self._cruise_blended,
            ),
            RegressionScenario(
                name="warrior3_climb_bicubic",
                description="Bicubic climb figures at 3000 ft, ISA",
                evaluate=self._climb_bicubic,
            ),
            RegressionScenario(
                name="warrior3_climb_bilinear",
                description="Bilinear climb grids at 5000 ft, ISA",
                evaluate=self._climb_bilinear,
            ),
            RegressionScenario(
                name="arrow3_climb_spline",
                description="Climb splines at published knots",
                evaluate=self._climb_spline,
            ),
            RegressionScenario(
                name="density_altitude",
                description="Density altitude equals pressure altitude at ISA",
                evaluate=self._density_altitude,
            ),
        ]

    def _cruise_sea_level(self, service: PerformanceService) -> ScenarioResult:
        result = service.cruise_lookup(0, 0)
        return ScenarioResult(
            name="warrior3_cruise_sea_level",
            metrics={"rpm": result.rpm, "tas_kt": result.tas},
        )

    def _cruise_blended(self, service: PerformanceService) -> ScenarioResult:
        result = service.cruise_lookup(5000, 10)
        return ScenarioResult(
            name="warrior3_cruise_blended",
            metrics={"rpm": result.rpm, "tas_kt": result.tas},
        )

    def _climb_bicubic(self, service: PerformanceService) -> ScenarioResult:
        climb = service.bicubic_climb_lookup(0, 30)
        return ScenarioResult(
            name="warrior3_climb_bicubic",
            metrics={"minutes": climb.minutes, "fuel_gal": climb.fuel_gal},
        )

    def _climb_bilinear(self, service: PerformanceService) -> ScenarioResult:
        return ScenarioResult(
            name="warrior3_climb_bilinear",
            metrics={
                "minutes": service.warrior3_climb_minutes(5000, 0),
                "fuel_gal": service.warrior3_climb_fuel_gal(5000, 0),
            },
        )

    def _climb_spline(self, service: PerformanceService) -> ScenarioResult:
        return ScenarioResult(
            name="arrow3_climb_spline",
            metrics={
                "fuel_gal_at_6000": service.evaluate_spline("arrow3.climb_fuel_gal", 60),
                "minutes_at_9000": service.evaluate_spline("arrow3.climb_minutes", 90),
            },
        )

    def _density_altitude(self, _: PerformanceService) -> ScenarioResult:
        return ScenarioResult(
            name="density_altitude",
            metrics={
                "sea_level_isa_ft": density_altitude_isa(0, 0),
                "5000ft_isa_ft": density_altitude_isa(5000, 0),
            },
        )

    def run(self) -> List[ScenarioResult]:
        """Execute all regression scenarios."""

        results: List[ScenarioResult] = []
        for scenario in self.scenarios:
            results.append(scenario.evaluate(self.service))
        return results

    def to_serializable(
        self, results: Iterable[ScenarioResult]
    ) -> Dict[str, Dict[str, float]]:
        return {res.name: res.metrics for res in results}

    def load_baseline(self, baseline_path: Path) -> Dict[str, Dict[str, float]]:
        with open(baseline_path, "r", encoding="utf-8") as f:
            return json.load(f)

    def compare_to_baseline(
        self,
        baseline_path: Path,
        report_dir: Path,
    ) -> Tuple[bool, Dict[str, Dict[str, float]], List[str]]:
        """Compare regression results to stored baseline with tolerance."""

        report_dir.mkdir(parents=True, exist_ok=True)
        baseline = self.load_baseline(baseline_path)
        current = self.to_serializable(self.run())

        failures: List[str] = []
        for name, metrics in current.items():
            if name not in baseline:
                failures.append(f"Missing baseline for {name}")
                continue

            for metric_name, value in metrics.items():
                if metric_name not in baseline[name]:
                    failures.append(f"Missing baseline metric {metric_name} for {name}")
                    continue

                reference = baseline[name][metric_name]
                if reference == 0:
                    deviation = abs(value - reference)
                else:
                    deviation = abs(value - reference) / abs(reference)

                if deviation > self.tolerance:
                    failures.append(
                        f"{name}:{metric_name} deviated by {deviation:.2%} (value {value:.4f} vs {reference:.4f})"
                    )

        report = {
            "baseline": baseline,
            "current": current,
            "tolerance": self.tolerance,
            "failures": failures,
            "status": "fail" if failures else "pass",
        }

        json_report = report_dir / "performance_validation_report.json"
        with open(json_report, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
        logger.info("Performance validation report written to %s", json_report)

        return (len(failures) == 0, current, failures)
