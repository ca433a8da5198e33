"""Tests for the hourly interval CSV importer."""

from datetime import datetime

import pytest
from ratecompare.collectors import interval
from ratecompare.errors import InvalidUsageError, MalformedSampleError


def _write(tmp_path, text):
    path = tmp_path / "usage.csv"
    path.write_text(text)
    return path


def test_separate_date_and_time_columns(tmp_path):
    path = _write(
        tmp_path,
        "Date,Start Time,Usage (kWh)\n"
        "2022-07-15,2:00 PM,10\n"
        "2022-07-15,11:00 PM,0.5\n"
        "2022-07-16,12:00 AM,\"1,234\"\n",
    )
    result = interval.parse_csv(path)

    assert result.skipped == 0
    assert [s.timestamp for s in result.samples] == [
        datetime(2022, 7, 15, 14),
        datetime(2022, 7, 15, 23),
        datetime(2022, 7, 16, 0),
    ]
    assert result.samples[0].kwh == 10.0
    assert result.samples[2].kwh == 1234.0


def test_combined_timestamp_column(tmp_path):
    path = _write(tmp_path, "Timestamp,kWh\n2022-01-12 08:00,5\n1/12/2022 9:30 AM,2\n")
    result = interval.parse_csv(path)

    assert [s.timestamp for s in result.samples] == [
        datetime(2022, 1, 12, 8),
        datetime(2022, 1, 12, 9),
    ]


def test_hour_number_column(tmp_path):
    path = _write(tmp_path, "Date,Hour,kWh\n2022-01-12,0,1\n2022-01-12,23,2\n")
    result = interval.parse_csv(path)
    assert [s.timestamp.hour for s in result.samples] == [0, 23]


def test_time_range_uses_start(tmp_path):
    path = _write(tmp_path, "Date,Time,kWh\n2022-01-12,1:00 AM - 2:00 AM,1\n")
    [sample] = interval.parse_csv(path).samples
    assert sample.timestamp == datetime(2022, 1, 12, 1)


def test_malformed_rows_skipped(tmp_path):
    path = _write(
        tmp_path,
        "Date,Time,kWh\n"
        "2022-07-15,14:00,10\n"
        "not a date,14:00,1\n"
        "2022-07-15,15:00,lots\n"
        "2022-07-15,16:00,-3\n",
    )
    result = interval.parse_csv(path)
    assert result.imported == 1
    assert result.skipped == 3


def test_strict_raises_on_bad_timestamp(tmp_path):
    path = _write(tmp_path, "Date,Time,kWh\nnot a date,14:00,1\n")
    with pytest.raises(MalformedSampleError):
        interval.parse_csv(path, strict=True)


def test_strict_raises_on_negative_usage(tmp_path):
    path = _write(tmp_path, "Date,Time,kWh\n2022-07-15,14:00,-1\n")
    with pytest.raises(InvalidUsageError):
        interval.parse_csv(path, strict=True)


def test_missing_columns(tmp_path):
    path = _write(tmp_path, "When,Amount\n2022-07-15,1\n")
    with pytest.raises(MalformedSampleError, match="kWh"):
        interval.parse_csv(path)


def test_french_month_names(tmp_path):
    path = _write(tmp_path, "Timestamp,kWh\n15 juillet 2022 14:00,1\n")
    [sample] = interval.parse_csv(path, locale="fr-ca").samples
    assert sample.timestamp == datetime(2022, 7, 15, 14)


def test_day_first_slash_date_skipped(tmp_path):
    """15/07/2022 is not read as a month-first date."""
    path = _write(tmp_path, "Timestamp,kWh\n15/07/2022 14:00,1\n")
    result = interval.parse_csv(path)
    assert result.samples == []
    assert result.skipped == 1


def test_non_utf8_file(tmp_path):
    path = tmp_path / "usage.csv"
    path.write_bytes("Date,Time,kWh,Note\n2022-07-15,14:00,1,café\n".encode("latin-1"))
    with pytest.raises(MalformedSampleError, match="Could not read"):
        interval.parse_csv(path)
