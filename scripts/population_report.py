#!/usr/bin/env python3
"""
Foe Finder — Population Report: offline analytics over an answer snapshot

Runs the population statistics aggregator over a JSON export of every
user's answers and prints what the admin analytics tab shows.  Two
subcommands:

  stats         Per-question statistics plus the population summary.
  distribution  The 1-7 response distribution of a single question.

The snapshot is a JSON list of ``{"user_id": ..., "answers": [...]}``
objects, answers in the persistence layer's ``{questionId, value}`` form.

Usage examples
--------------
  # Statistics table for every answered question
  python scripts/population_report.py stats snapshot.json

  # Same, as JSON
  python scripts/population_report.py stats snapshot.json --json

  # Distribution for question 12
  python scripts/population_report.py distribution snapshot.json --question 12
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Ensure the project root is importable
sys.path.insert(0, ".")

from foefinder.catalog import QUESTIONS, get_question
from foefinder.config import get_settings
from foefinder.schemas.questionnaire import AnswerSubmission
from foefinder.services.population_stats import (
    aggregate,
    is_high_variance,
    response_distribution,
    summarize_population,
)
from foefinder.services.validation import validate_population


def load_snapshot(path: Path) -> list[AnswerSubmission]:
    """Read a snapshot file; rows that are not objects are skipped."""
    with open(path, encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        raise SystemExit(f"{path}: expected a JSON list of answer submissions")
    return [
        AnswerSubmission(
            user_id=row.get("user_id"),
            answers=row.get("answers") or [],
        )
        for row in rows
        if isinstance(row, dict)
    ]


# ══════════════════════════════════════════════════════════════════════════
# Subcommands
# ══════════════════════════════════════════════════════════════════════════

def cmd_stats(args: argparse.Namespace) -> None:
    settings = get_settings()
    population = validate_population(load_snapshot(args.snapshot), QUESTIONS)
    question_statistics = aggregate(population, QUESTIONS)
    summary = summarize_population(
        population,
        question_statistics,
        high_variance_threshold=settings.HIGH_VARIANCE_STD_DEV,
    )

    if args.json:
        payload = {
            "statistics": [s.model_dump() for s in question_statistics.values()],
            "summary": summary.model_dump(),
        }
        print(json.dumps(payload, indent=2))
        return

    print(f"\n{'=' * 78}")
    print(f"  Population Statistics")
    print(f"{'=' * 78}")
    print(f"  Respondents:           {summary.respondent_count}")
    print(f"  Questions with data:   {summary.question_count}/{len(QUESTIONS)}")
    print(f"  Total responses:       {summary.total_responses}")
    print(f"  High-variance (>{settings.HIGH_VARIANCE_STD_DEV}): {len(summary.high_variance_question_ids)}")

    print(f"\n  {'Q':>3}  {'n':>5}  {'mean':>5}  {'sd':>5}  {'p10':>3} {'p25':>3} {'p50':>3} {'p75':>3} {'p90':>3}  {'min':>3} {'max':>3}")
    for qid, s in question_statistics.items():
        flag = "  *" if is_high_variance(s, settings.HIGH_VARIANCE_STD_DEV) else ""
        print(
            f"  {qid:>3}  {s.count:>5}  {s.mean:>5.2f}  {s.std_dev:>5.2f}  "
            f"{s.p10:>3} {s.p25:>3} {s.p50:>3} {s.p75:>3} {s.p90:>3}  "
            f"{s.min:>3} {s.max:>3}{flag}"
        )
    print(f"{'=' * 78}\n")


def cmd_distribution(args: argparse.Namespace) -> None:
    question = get_question(args.question, QUESTIONS)
    if question is None:
        print(f"Unknown question id: {args.question}", file=sys.stderr)
        sys.exit(1)

    population = validate_population(load_snapshot(args.snapshot), QUESTIONS)
    stats = aggregate(population, QUESTIONS).get(question.id)

    if stats is None:
        rows = []
    else:
        rows = response_distribution(stats)

    if args.json:
        print(json.dumps([r.model_dump() for r in rows], indent=2))
        return

    print(f"\n  Q{question.id}: {question.text}")
    if not rows:
        print("  No responses yet.\n")
        return
    for row in rows:
        bar = "#" * int(round(row.percentage / 2))
        print(f"  {row.value}  {row.count:>5}  {row.percentage:>5.1f}%  {bar}")
    print()


# ══════════════════════════════════════════════════════════════════════════
# Entry point
# ══════════════════════════════════════════════════════════════════════════

def main() -> None:
    parser = argparse.ArgumentParser(
        description="Foe Finder population analytics over a JSON answer snapshot.",
    )
    subparsers = parser.add_subparsers(dest="command")

    stats_parser = subparsers.add_parser(
        "stats",
        help="Per-question statistics and population summary.",
    )
    stats_parser.add_argument("snapshot", type=Path, help="Path to the snapshot JSON file.")
    stats_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output raw JSON instead of a table.",
    )

    dist_parser = subparsers.add_parser(
        "distribution",
        help="Response distribution for one question.",
    )
    dist_parser.add_argument("snapshot", type=Path, help="Path to the snapshot JSON file.")
    dist_parser.add_argument(
        "--question", "-q",
        type=int,
        required=True,
        help="Question id (1-30).",
    )
    dist_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output raw JSON instead of a bar chart.",
    )

    args = parser.parse_args()

    if args.command == "stats":
        cmd_stats(args)
    elif args.command == "distribution":
        cmd_distribution(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
