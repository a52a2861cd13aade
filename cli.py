#!/usr/bin/env python3
"""CLI for scoring receipt JSON files offline, without the web service."""

import argparse
import json
import sys
from pathlib import Path

from src.models import Receipt
from src.scoring import score_breakdown
from src.validation import receipt_errors


def _load_receipt_json(path: Path):
    if not path.exists():
        print(f"Error: Receipt file not found: {path}", file=sys.stderr)
        sys.exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        print(f"Error: {path} is not valid JSON: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_score(args: argparse.Namespace) -> None:
    """Validate a receipt file and print its points with the per-rule breakdown."""
    data = _load_receipt_json(Path(args.receipt))
    errors = receipt_errors(data)
    if errors:
        print(f"Error: Invalid receipt: {errors[0]}", file=sys.stderr)
        sys.exit(1)

    breakdown = score_breakdown(Receipt.from_dict(data))
    points = sum(breakdown.values())

    if args.json:
        print(json.dumps({"points": points, "breakdown": breakdown}, indent=2))
    else:
        print("=== Points ===")
        print(f"Total: {points}")
        print("\nPer rule:")
        for rule, rule_points in breakdown.items():
            print(f"  {rule}: {rule_points}")


def cmd_validate(args: argparse.Namespace) -> None:
    """Print every schema violation in a receipt file; exit 1 if there are any."""
    data = _load_receipt_json(Path(args.receipt))
    errors = receipt_errors(data)
    if errors:
        for err in errors:
            print(f"  {err}")
        print(f"{args.receipt}: {len(errors)} error(s)", file=sys.stderr)
        sys.exit(1)
    print(f"{args.receipt}: OK")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score purchase receipts with the receipt points rules")
    sub = parser.add_subparsers(dest="command", required=True)

    # score
    p_score = sub.add_parser("score", help="Compute points for a receipt JSON file")
    p_score.add_argument("receipt", type=Path, help="Path to receipt JSON file")
    p_score.add_argument("--json", action="store_true", help="Output JSON")
    p_score.set_defaults(func=cmd_score)

    # validate
    p_validate = sub.add_parser("validate", help="Check a receipt JSON file against the receipt schema")
    p_validate.add_argument("receipt", type=Path, help="Path to receipt JSON file")
    p_validate.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
