#!/usr/bin/env python3
"""CLI for the Receipt Processor: score receipt JSON files without running the server."""

import argparse
import json
import sys
from pathlib import Path

from receipts import Receipt
from receipts.scoring import score_breakdown
from receipts.validation import InvalidReceiptError


def _load_receipt(path: Path) -> Receipt:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidReceiptError(f"not valid JSON ({e})") from e
    return Receipt.from_payload(data)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute loyalty points for one or more receipt JSON files."
    )
    parser.add_argument(
        "receipts",
        type=Path,
        nargs="+",
        help="Path(s) to receipt JSON files (same shape as POST /receipts/process)",
    )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Show the points contributed by each rule",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )

    args = parser.parse_args(argv)

    results = []
    for path in args.receipts:
        if not path.exists():
            print(f"Error: Receipt file not found: {path}", file=sys.stderr)
            return 1
        try:
            receipt = _load_receipt(path)
        except InvalidReceiptError as e:
            print(f"Error: {path}: invalid receipt: {e}", file=sys.stderr)
            return 1
        breakdown = score_breakdown(receipt)
        results.append({"file": str(path), "points": sum(breakdown.values()), "breakdown": breakdown})

    if args.json:
        if not args.breakdown:
            results = [{k: v for k, v in r.items() if k != "breakdown"} for r in results]
        print(json.dumps(results, indent=2))
        return 0

    for r in results:
        print(f"{r['file']}: {r['points']} points")
        if args.breakdown:
            for rule, points in r["breakdown"].items():
                print(f"  • {rule.replace('_', ' ')}: {points}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
