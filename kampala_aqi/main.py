"""
Command-line entry point.

Simulates a period of daily AQI readings, summarizes them and prints the
report to stdout. Any failure is logged once to stderr with its traceback.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
import sys
from typing import Optional, Sequence

from kampala_aqi.report import render_report
from kampala_aqi.simulator import DEFAULT_DAYS, generate_readings
from kampala_aqi.stats import summarize


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    report: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run(days: int = DEFAULT_DAYS, *, seed: Optional[int] = None, city: str = "Kampala") -> RunResult:
    try:
        readings = generate_readings(days, seed=seed)
        summary = summarize(readings)
        return RunResult(report=render_report(summary, city=city))
    except Exception as e:
        return RunResult(error=e)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="City Air Quality Monitor - simulated daily AQI analysis")
    p.add_argument("--days", type=_positive_int, default=DEFAULT_DAYS, help="Number of days to simulate")
    p.add_argument("--seed", type=int, default=None, help="Random seed (omit for a fresh run)")
    p.add_argument("--city", default="Kampala", help="City name used in the report")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (stderr)",
    )
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    log.info("Analysing %d days for %s (seed=%s)", args.days, args.city, args.seed)
    result = run(args.days, seed=args.seed, city=args.city)
    if not result.ok:
        log.error("Error in AQI monitoring system: %s", result.error, exc_info=result.error)
        return 1

    print(result.report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
