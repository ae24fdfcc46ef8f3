#!/usr/bin/env python3
"""
demo_cli.py — Standalone command-line demo
============================================
Scores a biomarker map WITHOUT the FastAPI server.
Useful for quick testing, demos, and debugging.

Usage:
    python demo_cli.py --biomarker heartRate=72 --biomarker bloodPressure=120/80
    python demo_cli.py --json reading.json --biomarker jitter=0.8 --as-json

Values given with --biomarker override the same keys from --json.

⚠️  DISCLAIMER: The health score is a WELLNESS INDICATOR — NOT medical grade.
"""

import argparse
import json
import sys

from scoring.calculator import HealthScoreCalculator
from scoring.results import HealthReport
from utils.formatting import format_biomarker_value
from utils.logger import get_logger

logger = get_logger("demo_cli")


def pretty_print(label: str, value, unit: str = "") -> None:
    """Colourised terminal output."""
    print(f"  \033[1;36m{label:<28}\033[0m \033[1;33m{value}\033[0m {unit}")


def parse_pair(text: str) -> tuple[str, str]:
    """argparse type for NAME=VALUE pairs."""
    name, sep, value = text.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {text!r}")
    return name.strip(), value.strip()


def build_biomarkers(json_path: str | None, pairs: list[tuple[str, str]]) -> dict:
    biomarkers = {}
    if json_path:
        with open(json_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"{json_path} must contain a JSON object of biomarkers")
        biomarkers.update(loaded)
    biomarkers.update(dict(pairs))
    return biomarkers


def print_report(report: HealthReport) -> None:
    result = report.health_score

    print("=" * 60)
    print("  HEALTH SCORE")
    print("=" * 60)
    pretty_print("Score", result.score, "/ 100")
    pretty_print("Level", f"{report.status.icon} {result.level}")
    pretty_print("Confidence", result.confidence, "%")
    pretty_print("Biomarkers assessed", result.assessed_biomarkers)
    print(f"    {report.status.description}")

    print("\n  ── Breakdown ──")
    pretty_print("Base score", result.breakdown.base_score)
    pretty_print("Completeness bonus", f"+{result.breakdown.completeness_bonus}")
    pretty_print("Consistency penalty", f"-{result.breakdown.consistency_penalty}")

    print("\n  ── Individual biomarkers ──")
    for name, entry in result.individual_scores.items():
        pretty_print(name, format_biomarker_value(entry.value, name), f"(score {entry.score:.2f})")

    print("\n  ── Risk ──")
    pretty_print("Level", report.risk.level)
    pretty_print("Urgency", report.risk.urgency)
    for factor in report.risk.factors:
        print(f"    • {factor}")

    print("\n  ── Recommendations ──")
    for i, text in enumerate(report.recommendations, start=1):
        print(f"    {i}. {text}")

    print("\n" + "=" * 60)
    print("  ⚠️  DISCLAIMER: This score is a wellness indicator only.")
    print("      Do NOT use for medical diagnosis or treatment.")
    print("=" * 60 + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Biomarker Health Score CLI Demo")
    parser.add_argument("--json", dest="json_path", help="JSON file with a biomarker object")
    parser.add_argument(
        "--biomarker", "-b",
        action="append",
        type=parse_pair,
        default=[],
        metavar="NAME=VALUE",
        help="Biomarker value (repeatable), e.g. heartRate=72 or bloodPressure=120/80",
    )
    parser.add_argument("--as-json", action="store_true", help="Print the report as JSON")
    args = parser.parse_args(argv)

    try:
        biomarkers = build_biomarkers(args.json_path, args.biomarker)
    except (OSError, ValueError) as e:
        print(f"  ERROR: {e}")
        return 1

    report = HealthScoreCalculator().evaluate(biomarkers)

    if args.as_json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    elif report.health_score is not None:
        print_report(report)
    else:
        print(f"  {report.recommendations[0]}")

    if report.health_score is None:
        logger.error("No biomarker could be scored from %d inputs.", len(biomarkers))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
