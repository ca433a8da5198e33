"""Importer for hourly interval exports.

One row per hour with a date, a time and a kWh value, e.g.

    Date,Start Time,Usage (kWh)
    2022-07-15,2:00 PM,1.23

A single combined date-time column is accepted in place of separate date
and time columns. Column names are matched case-insensitively.
"""

import csv
import logging
from datetime import datetime, timedelta
from pathlib import Path

from ..errors import InvalidUsageError, MalformedSampleError
from ..models import UsageSample
from .common import DEFAULT_LOCALE, ImportResult, handle_bad_row, parse_date, parse_kwh, parse_timestamp

logger = logging.getLogger(__name__)

FORMAT_NAME = "interval"

DATETIME_COLUMNS = ("timestamp", "date/time", "datetime", "date time", "interval start", "start")
DATE_COLUMNS = ("date", "start date", "read date", "usage date")
TIME_COLUMNS = ("time", "start time", "hour", "interval")
KWH_COLUMNS = ("kwh", "usage (kwh)", "usage", "consumption", "consumption (kwh)", "kwh used")


def _find_column(header: list[str], aliases: tuple[str, ...]) -> str | None:
    normalized = {name.strip().lower(): name for name in header}
    for alias in aliases:
        if alias in normalized:
            return normalized[alias]
    return None


def _row_timestamp(date_text: str, time_text: str, locale: str) -> datetime:
    """Combine separate date and time cells."""
    # Ranges like "1:00 AM - 2:00 AM" are keyed by their start
    time_text = (time_text or "").split(" - ")[0].split(" to ")[0].strip()
    if time_text.isdigit():
        hour = int(time_text)
        if not 0 <= hour <= 23:
            raise MalformedSampleError(f"Hour out of range: {time_text!r}")
        day = parse_date(date_text, locale)
        return datetime(day.year, day.month, day.day) + timedelta(hours=hour)
    return parse_timestamp(f"{date_text.strip()} {time_text}", locale)


def parse_rows(
    rows: list[dict], header: list[str], locale: str = DEFAULT_LOCALE, strict: bool = False
) -> ImportResult:
    """Turn interval CSV rows into usage samples."""
    kwh_col = _find_column(header, KWH_COLUMNS)
    datetime_col = _find_column(header, DATETIME_COLUMNS)
    date_col = _find_column(header, DATE_COLUMNS)
    time_col = _find_column(header, TIME_COLUMNS)

    if kwh_col is None:
        raise MalformedSampleError(f"No kWh column found in header: {header}")
    if datetime_col is None and (date_col is None or time_col is None):
        raise MalformedSampleError(f"No date/time columns found in header: {header}")

    result = ImportResult()
    # Header is line 1
    for line_no, row in enumerate(rows, start=2):
        try:
            if date_col is not None and time_col is not None:
                timestamp = _row_timestamp(row[date_col] or "", row[time_col] or "", locale)
            else:
                timestamp = parse_timestamp(row[datetime_col], locale)
            kwh = parse_kwh(row[kwh_col])
            result.samples.append(UsageSample.create(timestamp, kwh))
        except (MalformedSampleError, InvalidUsageError) as e:
            handle_bad_row(e, f"line {line_no}", strict)
            result.skipped += 1

    return result


def parse_csv(csv_path: Path, locale: str = DEFAULT_LOCALE, strict: bool = False) -> ImportResult:
    """Parse an hourly interval CSV export."""
    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            header = list(reader.fieldnames or [])
            rows = list(reader)
    except (UnicodeDecodeError, csv.Error) as e:
        raise MalformedSampleError(f"Could not read {csv_path}: {e}")

    result = parse_rows(rows, header, locale, strict)
    logger.info("Read %d sample(s) from %s, skipped %d", result.imported, csv_path, result.skipped)
    return result
