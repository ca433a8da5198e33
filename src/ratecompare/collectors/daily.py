"""Importer for daily-row exports.

Each row holds one day: the date in the first column, 24 hourly kWh
columns for hours 0-23, then optional per-category daily totals which
are ignored, e.g.

    Date,00:00,01:00,...,23:00,Off-Peak,Mid-Peak,On-Peak,Total
"""

import csv
import logging
from datetime import datetime, timedelta
from pathlib import Path

from ..errors import InvalidUsageError, MalformedSampleError
from ..models import UsageSample
from .common import DEFAULT_LOCALE, ImportResult, handle_bad_row, parse_date, parse_kwh

logger = logging.getLogger(__name__)

FORMAT_NAME = "daily"
HOURS_PER_DAY = 24


def parse_row(row: list[str], locale: str = DEFAULT_LOCALE, strict: bool = False) -> ImportResult:
    """Expand one day's row into up to 24 hourly samples.

    Blank hourly cells are treated as missing readings and skipped silently.
    """
    result = ImportResult()
    if len(row) < 1 + HOURS_PER_DAY:
        raise MalformedSampleError(
            f"Expected a date and {HOURS_PER_DAY} hourly values, got {len(row)} column(s)"
        )

    day = parse_date(row[0], locale)
    midnight = datetime(day.year, day.month, day.day)

    for hour, cell in enumerate(row[1 : 1 + HOURS_PER_DAY]):
        if not cell.strip():
            continue
        try:
            kwh = parse_kwh(cell)
            result.samples.append(UsageSample.create(midnight + timedelta(hours=hour), kwh))
        except (MalformedSampleError, InvalidUsageError) as e:
            handle_bad_row(e, f"{day} hour {hour}", strict)
            result.skipped += 1

    return result


def parse_rows(rows: list[list[str]], locale: str = DEFAULT_LOCALE, strict: bool = False) -> ImportResult:
    """Turn daily CSV rows (header excluded) into usage samples."""
    result = ImportResult()
    for line_no, row in enumerate(rows, start=2):
        if not any(cell.strip() for cell in row):
            continue
        try:
            result.extend(parse_row(row, locale, strict))
        except MalformedSampleError as e:
            handle_bad_row(e, f"line {line_no}", strict)
            result.skipped += 1
    return result


def parse_csv(csv_path: Path, locale: str = DEFAULT_LOCALE, strict: bool = False) -> ImportResult:
    """Parse a daily-row CSV export."""
    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as f:
            reader = csv.reader(f)
            next(reader, None)  # header
            rows = list(reader)
    except (UnicodeDecodeError, csv.Error) as e:
        raise MalformedSampleError(f"Could not read {csv_path}: {e}")

    result = parse_rows(rows, locale, strict)
    logger.info("Read %d sample(s) from %s, skipped %d", result.imported, csv_path, result.skipped)
    return result
