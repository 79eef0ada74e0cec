"""CLI for passenger count analysis."""

import argparse
import sys
from datetime import date
from typing import Callable, List, Optional, Tuple

import requests

from ridership.analysis.errors import FormatError
from ridership.analysis.loader import load_records
from ridership.analysis.periods import PERIOD_FORMATS, is_valid_period
from ridership.analysis.service import AnalysisService
from ridership.analysis.sources import FileSource, OpenDataSource, RecordSource
from ridership.config import settings
from ridership.logging_config import setup_logging

SEPARATOR = "-" * 45


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Minimum, maximum and average passenger counts per year, quarter, month or week"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file",
        "-f",
        default=settings.data_file,
        help="JSON file with passenger data (default: RIDERSHIP_DATA_FILE)",
    )
    group.add_argument(
        "--url",
        "-u",
        help="Download passenger data from this URL (default: RIDERSHIP_DATA_URL)",
    )
    parser.add_argument(
        "--period",
        "-p",
        action="append",
        help="Analyse this period and exit (repeatable). Omit for interactive mode",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Write records matching the last --period to CSV file",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.output and not args.period:
        parser.error("--output requires --period")
    return args


def build_source(args) -> RecordSource:
    if args.url:
        return OpenDataSource(args.url, timeout=settings.timeout)
    if args.file:
        return FileSource(args.file)
    return OpenDataSource(settings.data_url, timeout=settings.timeout)


def print_menu(
    coverage: Optional[Tuple[date, date]] = None,
    write: Callable[[str], None] = print,
) -> None:
    write("")
    write(SEPARATOR)
    write("Enter a period (year, quarter, month or week),")
    write("or 'exit' to quit.")
    write(SEPARATOR)
    write("Formats:")
    for fmt in PERIOD_FORMATS:
        write(f"- {fmt}")
    if coverage:
        first, last = coverage
        write(f"Data covers {first:%Y-%m} to {last:%Y-%m}")
    write(SEPARATOR)


def print_invalid_period(write: Callable[[str], None] = print) -> None:
    write("Invalid input. Please use one of the following formats:")
    for fmt in PERIOD_FORMATS:
        write(f"- {fmt}")


def run_interactive(
    service: AnalysisService,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Prompt for periods until 'exit' or end of input."""
    coverage = service.coverage()
    while True:
        print_menu(coverage, write)
        try:
            text = read_line().strip()
        except EOFError:
            break

        if text.lower() == "exit":
            write("Exiting.")
            break

        if not is_valid_period(text):
            print_invalid_period(write)
            continue

        result = service.analyze(text)
        write("\nResult:")
        write(result.format())
        write("")


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level)

    source = build_source(args)
    try:
        text = source.read_text()
    except (OSError, requests.RequestException) as e:
        print(f"Error: Could not read passenger data: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        records = load_records(text)
    except FormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not records:
        print("Error: No records loaded.", file=sys.stderr)
        sys.exit(1)

    print(f"Loaded {len(records)} records.")
    service = AnalysisService(records)

    if not args.period:
        run_interactive(service)
        return

    invalid = [p for p in args.period if not is_valid_period(p)]
    if invalid:
        print(f"Error: Invalid period: {', '.join(invalid)}", file=sys.stderr)
        print_invalid_period(lambda line: print(line, file=sys.stderr))
        sys.exit(2)

    for period in args.period:
        print()
        print(service.analyze(period).format())

    if args.output:
        df = service.query(args.period[-1]).to_dataframe()
        df.to_csv(args.output, index=False)
        print(f"\nWrote {len(df)} rows to {args.output}", file=sys.stderr)


if __name__ == "__main__":
    main()
