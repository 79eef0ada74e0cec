#!/usr/bin/env python3
"""
Download the passenger count dataset (data.bs.ch, dataset 100075) and save it
as a JSON file for offline analysis.

Usage:
    uv run python scripts/fetch_ridership_data.py
    uv run python scripts/fetch_ridership_data.py -o data/100075.json
    uv run ridership --file data/100075.json
"""

import argparse
import sys
from pathlib import Path

from ridership.analysis.loader import load_records
from ridership.analysis.sources.open_data import DEFAULT_URL, OpenDataSource

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_OUTPUT = PROJECT_ROOT / "data" / "100075.json"


def main() -> None:
    parser = argparse.ArgumentParser(description="Download passenger count data")
    parser.add_argument("--url", default=DEFAULT_URL, help="Export URL")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output JSON file. Default: {DEFAULT_OUTPUT}",
    )
    args = parser.parse_args()

    print(f"Fetching {args.url}...", file=sys.stderr)
    text = OpenDataSource(args.url, timeout=60).read_text()

    # Refuse to save something the analysis cannot read
    records = load_records(text)
    if not records:
        print("Error: Download contains no usable records.", file=sys.stderr)
        sys.exit(1)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(text, encoding="utf-8")
    print(f"Wrote {len(records)} records to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
