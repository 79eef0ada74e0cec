"""Unit tests for loading passenger records from JSON."""

import json
import logging

import pytest

from ridership.analysis.errors import FormatError, RecordParseError
from ridership.analysis.loader import load_records, parse_record
from ridership.analysis.models import PassengerRecord

WEEK_6 = {
    "startdatum_kalenderwoche_monat": "2020-02-03",
    "fahrgaeste_einsteiger": "1000",
    "kalenderwoche": "6",
    "granularitat": "Woche",
    "datum_der_monatswerte": None,
}

MONTH_ROW = {
    "startdatum_kalenderwoche_monat": "2020-03-01",
    "fahrgaeste_einsteiger": 45000,
    "kalenderwoche": None,
    "granularitat": "Monat",
    "datum_der_monatswerte": "2020-03",
}


class TestLoadRecords:
    """Tests for load_records."""

    def test_dataset_row(self) -> None:
        records = load_records(json.dumps([WEEK_6]))
        assert records == [
            PassengerRecord(
                start_date="2020-02-03",
                passenger_count=1000,
                calendar_week=6,
                granularity="Woche",
                monthly_date=None,
            )
        ]

    def test_preserves_order(self) -> None:
        records = load_records(json.dumps([MONTH_ROW, WEEK_6]))
        assert [r.start_date for r in records] == ["2020-03-01", "2020-02-03"]

    def test_surrounding_whitespace(self) -> None:
        records = load_records("\n  " + json.dumps([WEEK_6]) + "  \n")
        assert len(records) == 1

    def test_not_an_array_raises(self) -> None:
        with pytest.raises(FormatError, match="expected an array"):
            load_records("{not an array}")
        with pytest.raises(FormatError):
            load_records(json.dumps(WEEK_6))

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(FormatError, match="Invalid JSON"):
            load_records("[{]")

    def test_bad_count_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        bad = dict(WEEK_6, fahrgaeste_einsteiger="abc")
        with caplog.at_level(logging.WARNING):
            records = load_records(json.dumps([bad, MONTH_ROW]))
        assert len(records) == 1
        assert records[0].passenger_count == 45000
        assert "invalid passenger count" in caplog.text

    def test_missing_required_fields_dropped(self) -> None:
        no_date = {k: v for k, v in WEEK_6.items() if k != "startdatum_kalenderwoche_monat"}
        no_count = dict(WEEK_6, fahrgaeste_einsteiger=None)
        records = load_records(json.dumps([no_date, no_count, MONTH_ROW]))
        assert [r.start_date for r in records] == ["2020-03-01"]

    def test_non_object_entries_dropped(self) -> None:
        records = load_records(json.dumps([1, "x", [WEEK_6], WEEK_6]))
        assert len(records) == 1

    def test_empty_array(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert load_records("[]") == []
        assert "No records loaded" in caplog.text

    def test_braces_inside_strings(self) -> None:
        row = dict(WEEK_6, granularitat="Woche {Mo-So}, \"KW\"")
        records = load_records(json.dumps([row]))
        assert records[0].granularity == 'Woche {Mo-So}, "KW"'

    def test_nested_values_ignored(self) -> None:
        row = dict(WEEK_6, geo={"lat": 47.5, "lon": [7.6]})
        assert len(load_records(json.dumps([row]))) == 1


class TestParseRecord:
    """Tests for parse_record field coercion."""

    def test_english_keys(self) -> None:
        r = parse_record(
            {"start_date": "2021-01-04", "passenger_count": 12, "calendar_week": 1}
        )
        assert r == PassengerRecord("2021-01-04", 12, calendar_week=1)

    def test_null_text_means_absent(self) -> None:
        r = parse_record(dict(WEEK_6, kalenderwoche="null", datum_der_monatswerte="null"))
        assert r.calendar_week is None
        assert r.monthly_date is None

    def test_count_with_whitespace(self) -> None:
        assert parse_record(dict(WEEK_6, fahrgaeste_einsteiger=" 1000 ")).passenger_count == 1000

    def test_float_count_rejected(self) -> None:
        with pytest.raises(RecordParseError):
            parse_record(dict(WEEK_6, fahrgaeste_einsteiger=1000.5))
        with pytest.raises(RecordParseError):
            parse_record(dict(WEEK_6, fahrgaeste_einsteiger="1000.0"))

    def test_underscore_count_rejected(self) -> None:
        with pytest.raises(RecordParseError, match="invalid passenger count"):
            parse_record(dict(WEEK_6, fahrgaeste_einsteiger="1_000"))

    def test_non_ascii_digit_count_rejected(self) -> None:
        with pytest.raises(RecordParseError, match="invalid passenger count"):
            parse_record(dict(WEEK_6, fahrgaeste_einsteiger="\uff11\uff10"))

    def test_signed_count(self) -> None:
        assert parse_record(dict(WEEK_6, fahrgaeste_einsteiger="+42")).passenger_count == 42

    def test_underscore_week_rejected(self) -> None:
        with pytest.raises(RecordParseError, match="calendar week"):
            parse_record(dict(WEEK_6, kalenderwoche="0_6"))

    def test_bool_count_rejected(self) -> None:
        with pytest.raises(RecordParseError):
            parse_record(dict(WEEK_6, fahrgaeste_einsteiger=True))

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(RecordParseError, match="negative"):
            parse_record(dict(WEEK_6, fahrgaeste_einsteiger="-5"))

    def test_bad_week_rejected(self) -> None:
        with pytest.raises(RecordParseError, match="calendar week"):
            parse_record(dict(WEEK_6, kalenderwoche="six"))
        with pytest.raises(RecordParseError, match="out of range"):
            parse_record(dict(WEEK_6, kalenderwoche=60))

    def test_error_carries_object(self) -> None:
        bad = dict(WEEK_6, fahrgaeste_einsteiger="abc")
        with pytest.raises(RecordParseError) as exc_info:
            parse_record(bad)
        assert exc_info.value.obj is bad
