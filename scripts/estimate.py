"""
Command-line estimator for the hormone body-composition model.

Usage:
  python scripts/estimate.py --insulin 80 --cortisol 65 --gender female
  python scripts/estimate.py --random --seed 7 --json

Prints the regional distribution (with deltas from the neutral archetype) and
the aggregate monthly body-fat change.
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Any, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.settings import RuntimeSettings  # noqa: E402
from composition import (  # noqa: E402
    available_policies,
    build_gauges,
    compute_body_fat_impact,
    compute_distribution,
    resolve_policy,
)
from composition.constants import OUTPUT_REGIONS  # noqa: E402
from hormones import HORMONE_NAMES, HormoneReading, random_reading  # noqa: E402

logger = logging.getLogger("bodyfat.cli")


def _level(value: str) -> float:
    try:
        level = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number") from exc
    if not 0.0 <= level <= 100.0:
        raise argparse.ArgumentTypeError(f"{level:g} is outside the 0-100 scale")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate hormone-driven body-fat distribution.")
    for name in HORMONE_NAMES:
        parser.add_argument(
            f"--{name}",
            type=_level,
            default=None,
            help=f"{name.capitalize()} level on the 0-100 scale (default: neutral 50).",
        )
    parser.add_argument("--gender", default=None, help="Archetype: male or female.")
    parser.add_argument("--baseline", type=float, default=None, help="Baseline body-fat percentage.")
    parser.add_argument(
        "--policy",
        choices=available_policies(),
        default=None,
        help="Sensitivity policy used for regional multipliers.",
    )
    parser.add_argument("--random", action="store_true", help="Draw hormone levels in the 30-70 band.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random.")
    parser.add_argument("--json", action="store_true", help="Emit a JSON document instead of a table.")
    return parser


def _reading_from_args(args: argparse.Namespace) -> HormoneReading:
    if args.random:
        base = random_reading(random.Random(args.seed)).as_dict()
    else:
        base = {}
    for name in HORMONE_NAMES:
        value = getattr(args, name)
        if value is not None:
            base[name] = value
    return HormoneReading.from_mapping(base)


def run(args: argparse.Namespace, settings: RuntimeSettings) -> dict[str, Any]:
    reading = _reading_from_args(args)
    policy = resolve_policy(args.policy) if args.policy else settings.sensitivity_policy
    gender = args.gender if args.gender is not None else settings.default_gender
    baseline = args.baseline if args.baseline is not None else settings.baseline_percent
    result = compute_distribution(reading, gender, policy=policy)
    gauges = build_gauges(reading, gender, policy=policy, result=result)
    report = result.as_dict()
    report["hormones"] = reading.as_dict()
    report["policy"] = policy.name
    report["fill"] = {region: round(gauge.fill, 3) for region, gauge in gauges.items()}
    report["impact"] = compute_body_fat_impact(reading, baseline).as_dict()
    return report


def format_report(report: dict[str, Any]) -> str:
    lines = [
        "Hormones: " + ", ".join(f"{name}={level:g}" for name, level in report["hormones"].items()),
        f"Archetype: {report['gender']} (policy: {report['policy']})",
        f"{'region':>10} {'share %':>8} {'delta':>6} {'fill':>6}",
    ]
    for region in OUTPUT_REGIONS:
        lines.append(
            f"{region:>10} {report['distribution'][region]:>8.1f} "
            f"{report['delta'][region]:>+6.1f} {report['fill'][region]:>6.2f}"
        )
    impact = report["impact"]
    lines.append(f"Monthly change: {impact['deltaPercent']:+.2f} pts -> body fat {impact['newBodyFat']:.2f}%")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = RuntimeSettings.load()
    report = run(args, settings)
    logger.debug("Estimate computed for %s", report["hormones"])
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print(format_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
