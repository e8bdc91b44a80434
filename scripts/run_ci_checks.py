"""CI entrypoint for PA-28 Performance.

Runs config validation and the performance table regressions.
"""
# ruff: noqa: E402
from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from perfconfig import config
from perfcore.regression import RegressionRunner


def run_config_validation() -> int:
    errors = config.validate()
    if errors:
        print("Configuration validation failed:")
        for err in errors:
            print(f" - {err}")
        return 1

    print("Configuration validation passed.")
    return 0


def run_regressions() -> int:
    baseline = PROJECT_ROOT / "tests" / "snapshots" / "performance_baseline.json"
    report_dir = PROJECT_ROOT / "output" / "reports"
    passed, _, failures = RegressionRunner().compare_to_baseline(
        baseline_path=baseline, report_dir=report_dir
    )
    if not passed:
        print("Performance regressions failed:")
        for failure in failures:
            print(f" - {failure}")
        return 1

    print("Performance regressions passed.")
    return 0


def main() -> int:
    exit_codes = [run_config_validation()]
    exit_codes.append(run_regressions())

    return 1 if any(code != 0 for code in exit_codes) else 0


if __name__ == "__main__":
    sys.exit(main())
