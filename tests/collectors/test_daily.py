"""Tests for the daily-row CSV importer."""

from datetime import datetime

import pytest
from ratecompare.collectors import daily
from ratecompare.errors import MalformedSampleError

HEADER = "Date," + ",".join(f"{h:02d}:00" for h in range(24)) + ",Off-Peak,Mid-Peak,On-Peak,Total\n"


def _row(day, values, totals="1,2,3,6"):
    return f"{day}," + ",".join(str(v) for v in values) + f",{totals}\n"


def _write(tmp_path, *rows):
    path = tmp_path / "daily.csv"
    path.write_text(HEADER + "".join(rows))
    return path


def test_expands_day_into_hours(tmp_path):
    path = _write(tmp_path, _row("2022-07-15", range(24)))
    result = daily.parse_csv(path)

    assert result.imported == 24
    assert result.samples[0].timestamp == datetime(2022, 7, 15, 0)
    assert result.samples[23].timestamp == datetime(2022, 7, 15, 23)
    assert result.samples[14].kwh == 14.0


def test_totals_columns_ignored(tmp_path):
    path = _write(tmp_path, _row("7/15/2022", [1] * 24, totals="99,99,99,999"))
    result = daily.parse_csv(path)
    assert sum(s.kwh for s in result.samples) == 24


def test_blank_hours_are_missing_readings(tmp_path):
    values = [1] * 24
    values[3] = ""
    path = _write(tmp_path, _row("2022-07-15", values))
    result = daily.parse_csv(path)

    assert result.imported == 23
    assert result.skipped == 0
    assert 3 not in {s.timestamp.hour for s in result.samples}


def test_bad_cells_and_rows_skipped(tmp_path):
    values = [1] * 24
    values[5] = "n/a"
    path = _write(
        tmp_path,
        _row("2022-07-15", values),
        _row("someday", [1] * 24),
        "2022-07-17,1,2,3\n",
    )
    result = daily.parse_csv(path)

    assert result.imported == 23
    assert result.skipped == 3


def test_strict_raises(tmp_path):
    path = _write(tmp_path, _row("someday", [1] * 24))
    with pytest.raises(MalformedSampleError):
        daily.parse_csv(path, strict=True)


def test_non_utf8_file(tmp_path):
    path = tmp_path / "daily.csv"
    path.write_bytes((HEADER + _row("2022-07-15", [1] * 24, totals="café,1,1,3")).encode("latin-1"))
    with pytest.raises(MalformedSampleError, match="Could not read"):
        daily.parse_csv(path)
