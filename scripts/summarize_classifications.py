"""Classify a file of search box queries and summarize the outcome.

One query per line. Blank lines are skipped.

Usage:
  python scripts/summarize_classifications.py --input queries.txt
  python scripts/summarize_classifications.py --input queries.txt --profile basic --format json
"""

from __future__ import annotations

import argparse
import json
import sys
from collections import defaultdict
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from seo_search_box import ParsedInput, classify  # noqa: E402
from seo_search_box.classification import ClassifierConfig  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarize classifications of a query file")
    parser.add_argument("--input", required=True, help="Path to newline-delimited queries")
    parser.add_argument("--profile", default="full", help="Classifier profile (default: full)")
    parser.add_argument(
        "--low-confidence",
        type=float,
        default=0.7,
        help="Queries below this confidence are listed (default: 0.7)",
    )
    parser.add_argument("--top", type=int, default=20, help="Low-confidence queries to show (default: 20)")
    parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument("--output", help="Optional output file path")
    return parser.parse_args()


def load_queries(path: Path) -> list[str]:
    if not path.exists():
        return []
    return [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def summarize(results: list[ParsedInput]) -> list[dict]:
    grouped: dict[tuple[str, str], dict] = defaultdict(lambda: {"count": 0, "confidence_sum": 0.0})

    for result in results:
        entry = grouped[(result.type, result.detector)]
        entry["count"] += 1
        entry["confidence_sum"] += result.confidence

    rows = [
        {
            "type": input_type,
            "detector": detector,
            "count": entry["count"],
            "avg_confidence": round(entry["confidence_sum"] / entry["count"], 4),
        }
        for (input_type, detector), entry in grouped.items()
    ]
    rows.sort(key=lambda row: (-row["count"], row["type"], row["detector"]))
    return rows


def low_confidence(results: list[ParsedInput], threshold: float) -> list[dict]:
    rows = [
        {"value": r.value, "type": r.type, "detector": r.detector, "confidence": r.confidence}
        for r in results
        if r.confidence < threshold
    ]
    rows.sort(key=lambda row: (row["confidence"], row["value"]))
    return rows


def render_table(rows: list[dict], low: list[dict], top: int) -> str:
    lines = ["count | type | detector | avg_confidence", "--- | --- | --- | ---"]
    for row in rows:
        lines.append(f"{row['count']} | {row['type']} | {row['detector']} | {row['avg_confidence']}")

    if low:
        lines.extend(["", "confidence | type | detector | value", "--- | --- | --- | ---"])
        for row in low[:top]:
            lines.append(f"{row['confidence']} | {row['type']} | {row['detector']} | {row['value']}")
    return "\n".join(lines)


def main() -> int:
    args = parse_args()
    config = ClassifierConfig.for_profile(args.profile)
    results = [classify(query, config=config) for query in load_queries(Path(args.input))]
    rows = summarize(results)
    low = low_confidence(results, args.low_confidence)

    if args.format == "json":
        output = json.dumps(
            {"total": len(results), "groups": rows, "low_confidence": low[: args.top]},
            ensure_ascii=False,
            indent=2,
        )
    else:
        output = render_table(rows, low, args.top)

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
