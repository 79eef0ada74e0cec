"""Load passenger records from a JSON array of flat objects.

The input is expected to look like the Basel open-data export::

    [
      {"startdatum_kalenderwoche_monat": "2020-02-03",
       "fahrgaeste_einsteiger": "1000",
       "kalenderwoche": "6",
       "granularitat": "Woche",
       "datum_der_monatswerte": null},
      ...
    ]

Only a top-level structure that is not an array is fatal. Bad entries are
logged and skipped one by one.
"""

import json
import logging
import re
from typing import Any, List, Optional

from ridership.analysis.errors import FormatError, RecordParseError
from ridership.analysis.models import PassengerRecord

logger = logging.getLogger(__name__)

# Dataset keys first, then English aliases
START_DATE_KEYS = ("startdatum_kalenderwoche_monat", "start_date")
PASSENGER_COUNT_KEYS = ("fahrgaeste_einsteiger", "passenger_count")
CALENDAR_WEEK_KEYS = ("kalenderwoche", "calendar_week")
GRANULARITY_KEYS = ("granularitat", "granularity")
MONTHLY_DATE_KEYS = ("datum_der_monatswerte", "monthly_date")

# Plain decimal integers only: no "1_000", no non-ASCII digits
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def load_records(text: str) -> List[PassengerRecord]:
    """Parse JSON text into passenger records.

    Raises FormatError if the text is not a JSON array. Entries that cannot be
    converted are skipped with a warning; the result may be empty.
    """
    stripped = text.strip()
    if not stripped.startswith("[") or not stripped.endswith("]"):
        raise FormatError("Invalid JSON format: expected an array")

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise FormatError("Invalid JSON format: expected an array")

    records = []
    for index, obj in enumerate(data):
        if not isinstance(obj, dict):
            logger.warning("Skipping entry %d: expected an object, got %s", index, type(obj).__name__)
            continue
        try:
            records.append(parse_record(obj))
        except RecordParseError as e:
            logger.warning("Skipping entry %d: %s", index, e)

    if not records:
        logger.warning("No records loaded")
    else:
        logger.info("Loaded %d of %d records", len(records), len(data))
    return records


def parse_record(obj: dict) -> PassengerRecord:
    """Convert a single JSON object into a PassengerRecord."""
    start_date = _get_str(obj, *START_DATE_KEYS)
    if start_date is None:
        raise RecordParseError("missing start date", obj)

    raw_count = _get_value(obj, *PASSENGER_COUNT_KEYS)
    if raw_count is None:
        raise RecordParseError("missing passenger count", obj)
    passenger_count = _to_int(raw_count, "passenger count", obj)

    raw_week = _get_value(obj, *CALENDAR_WEEK_KEYS)
    calendar_week = None
    if raw_week is not None:
        calendar_week = _to_int(raw_week, "calendar week", obj)

    try:
        return PassengerRecord(
            start_date=start_date,
            passenger_count=passenger_count,
            calendar_week=calendar_week,
            granularity=_get_str(obj, *GRANULARITY_KEYS),
            monthly_date=_get_str(obj, *MONTHLY_DATE_KEYS),
        )
    except ValueError as e:
        raise RecordParseError(str(e), obj) from e


def _get_value(d: dict, *keys: str) -> Any:
    """First present value among keys. null, blank and "null" count as absent."""
    for k in keys:
        v = d.get(k)
        if v is None:
            continue
        if isinstance(v, str):
            v = v.strip()
            if not v or v == "null":
                continue
        return v
    return None


def _get_str(d: dict, *keys: str) -> Optional[str]:
    v = _get_value(d, *keys)
    if v is None:
        return None
    return str(v)


def _to_int(value: Any, name: str, obj: dict) -> int:
    if isinstance(value, bool):
        raise RecordParseError(f"invalid {name}: {value!r}", obj)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        return int(value)
    raise RecordParseError(f"invalid {name}: {value!r}", obj)
