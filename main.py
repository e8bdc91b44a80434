#!/usr/bin/env python3
"""
PA-28 Performance: Main Entry Point
===================================

Usage:
    python main.py --summary                          Show configuration summary
    python main.py --cruise 5000 10                   Cruise setting at PA/ISA dev
    python main.py --climb 0 0 65 5                   Climb FROM_ALT FROM_ISA TO_ALT TO_ISA
    python main.py --density-altitude 5000 15         Density altitude at PA/ISA dev
    python main.py --validate-regressions             Check tables against baseline

Altitudes for --climb are in hundreds of feet; --cruise and
--density-altitude take feet.
"""

import argparse
import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from perfconfig import config, AircraftModel  # noqa: E402
from perfcore.atmosphere import density_altitude_isa  # noqa: E402
from perfcore.service import performance  # noqa: E402


def validate_config() -> bool:
    """Validate performance configuration."""
    print("Validating configuration...")
    errors = config.validate()

    if errors:
        print("\nCONFIGURATION ERRORS:")
        for err in errors:
            print(f"  [!] {err}")
        return False

    print("  Configuration valid.")
    return True


def validate_regressions() -> bool:
    """Run table regressions against stored baselines."""
    from perfcore.regression import RegressionRunner

    print("\n--- Validating Performance Tables ---")
    report_dir = project_root / "output" / "reports"
    baseline = project_root / "tests" / "snapshots" / "performance_baseline.json"

    runner = RegressionRunner()
    passed, current, failures = runner.compare_to_baseline(
        baseline_path=baseline, report_dir=report_dir
    )

    if passed:
        print("  Performance regressions PASSED")
    else:
        print("  Performance regressions FAILED:")
        for failure in failures:
            print(f"   - {failure}")
    return passed


def run_cruise(pa_ft: float, isa_dev: float) -> None:
    print(f"\n--- Cruise at {pa_ft:.0f} ft, ISA{isa_dev:+.0f} ---")

    if config.model == AircraftModel.WARRIOR_III:
        result = performance.cruise_lookup(pa_ft, isa_dev)
        print(f"  RPM: {result.rpm}")
        print(f"  TAS: {result.tas} kt")
        return

    cruise = performance.arrow3_cruise(pa_ft / 100, isa_dev)
    print(f"  Density altitude: {cruise.density_alt_ft} ft")
    print(f"  OAT: {cruise.temp_c:.0f} C")
    for setting in cruise.settings.values():
        mps = ", ".join(
            f"{rpm} RPM {mp:.1f}\"" if mp is not None else f"{rpm} RPM N/A"
            for rpm, mp in setting.manifold_pressure.items()
        )
        print(f"  {setting.percent_power}%: {setting.tas_kt} kt  [{mps}]")


def run_climb(from_alt: float, from_isa: float, to_alt: float, to_isa: float) -> None:
    print(f"\n--- Climb {from_alt:.0f} -> {to_alt:.0f} (hundreds ft) ---")

    if config.model == AircraftModel.WARRIOR_III:
        segment = performance.warrior3_climb_segment(from_alt, from_isa, to_alt, to_isa)
    else:
        segment = performance.arrow3_climb_segment(from_alt, from_isa, to_alt, to_isa)
        print(f"  Density altitude: {segment.from_density_alt_ft} -> {segment.to_density_alt_ft} ft")

    print(f"  OAT: {segment.from_temp_c:.0f} -> {segment.to_temp_c:.0f} C")
    print(f"  Time: {segment.minutes if segment.minutes is not None else 'N/A'} min")
    if segment.fuel_gal is None:
        print("  Fuel: N/A")
    else:
        print(f"  Fuel: {segment.fuel_gal:.1f} gal ({segment.fuel_l:.1f} L)")


def main():
    parser = argparse.ArgumentParser(description="PA-28 Performance Calculator")
    parser.add_argument(
        "--model",
        choices=[m.value for m in AircraftModel],
        help="Aircraft type (default from configuration)",
    )
    parser.add_argument(
        "--cruise", nargs=2, type=float, metavar=("PA_FT", "ISA_DEV"),
        help="Cruise setting at pressure altitude and ISA deviation",
    )
    parser.add_argument(
        "--climb", nargs=4, type=float,
        metavar=("FROM_ALT", "FROM_ISA", "TO_ALT", "TO_ISA"),
        help="Climb time and fuel between two altitudes (hundreds ft)",
    )
    parser.add_argument(
        "--density-altitude", nargs=2, type=float, metavar=("PA_FT", "ISA_DEV"),
        help="Density altitude at pressure altitude and ISA deviation",
    )
    parser.add_argument(
        "--validate", action="store_true", help="Validate configuration only"
    )
    parser.add_argument(
        "--validate-regressions",
        action="store_true",
        help="Validate performance tables against the regression baseline",
    )
    parser.add_argument(
        "--summary", action="store_true", help="Show configuration summary"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log table construction and lookups"
    )

    args = parser.parse_args()

    if len(sys.argv) == 1:
        parser.print_help()
        return

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.model:
        config.model = AircraftModel(args.model)

    print(f"{config.project_name} v{config.version} [{config.model.value}]")

    if args.summary:
        print(config.summary())
        return 0

    if args.validate:
        return 0 if validate_config() else 1

    if args.validate_regressions:
        return 0 if validate_regressions() else 1

    if not validate_config():
        print("\nAborting due to configuration errors.")
        return 1

    if args.cruise:
        run_cruise(*args.cruise)

    if args.climb:
        run_climb(*args.climb)

    if args.density_altitude:
        pa_ft, isa_dev = args.density_altitude
        print(f"\n  Density altitude: {density_altitude_isa(pa_ft, isa_dev)} ft")

    print("\nDone.")


if __name__ == "__main__":
    sys.exit(main())
