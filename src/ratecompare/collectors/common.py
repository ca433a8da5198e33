"""Helpers shared by the usage CSV importers."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

import arrow
from arrow.parser import ParserError

from ..errors import MalformedSampleError
from ..models import UsageSample

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-us"

# Formats are tried in order and may match a prefix of the cell, so
# 12-hour formats must come before 24-hour ones and seconds before minutes.
DATETIME_FORMATS = [
    "YYYY-MM-DD h:mm:ss A",
    "YYYY-MM-DD h:mm A",
    "YYYY-MM-DD h A",
    "M/D/YYYY h:mm:ss A",
    "M/D/YYYY h:mm A",
    "M/D/YYYY h A",
    "MMM D, YYYY h:mm A",
    "MMM D, YYYY h A",
    "MMMM D, YYYY h:mm A",
    "MMMM D, YYYY h A",
    "YYYY-MM-DD HH:mm:ss",
    "YYYY-MM-DD HH:mm",
    "YYYY-MM-DD[T]HH:mm:ss",
    "YYYY-MM-DD[T]HH:mm",
    "YYYY/MM/DD HH:mm:ss",
    "YYYY/MM/DD HH:mm",
    "M/D/YYYY H:mm:ss",
    "M/D/YYYY H:mm",
    "D MMMM YYYY HH:mm",
    "D MMM YYYY HH:mm",
]

DATE_FORMATS = [
    "YYYY-MM-DD",
    "YYYY/MM/DD",
    "M/D/YYYY",
    "MMM D, YYYY",
    "MMMM D, YYYY",
    "D MMMM YYYY",
    "D MMM YYYY",
]


@dataclass
class ImportResult:
    """Samples read from a file, plus the number of rows skipped."""

    samples: list[UsageSample] = field(default_factory=list)
    skipped: int = 0

    @property
    def imported(self) -> int:
        return len(self.samples)

    def extend(self, other: "ImportResult") -> None:
        self.samples.extend(other.samples)
        self.skipped += other.skipped


def parse_timestamp(text: str, locale: str = DEFAULT_LOCALE) -> datetime:
    """Parse a date-time cell into a naive local datetime.

    Raises:
        MalformedSampleError: if no known format matches
    """
    text = (text or "").strip()
    try:
        return arrow.get(text, DATETIME_FORMATS, locale=locale).naive
    except (ParserError, ValueError) as e:
        raise MalformedSampleError(f"Unrecognised timestamp {text!r}: {e}")


def parse_date(text: str, locale: str = DEFAULT_LOCALE) -> date:
    """Parse a date-only cell.

    Raises:
        MalformedSampleError: if no known format matches
    """
    text = (text or "").strip()
    try:
        return arrow.get(text, DATE_FORMATS, locale=locale).date()
    except (ParserError, ValueError) as e:
        raise MalformedSampleError(f"Unrecognised date {text!r}: {e}")


def parse_kwh(text: str) -> float:
    """Parse a kWh cell, allowing thousands separators."""
    cleaned = (text or "").strip().replace(",", "")
    try:
        return float(cleaned)
    except ValueError:
        raise MalformedSampleError(f"Unrecognised kWh value {text!r}")


def handle_bad_row(error: Exception, where: str, strict: bool) -> None:
    """Raise in strict mode, otherwise log the row as skipped."""
    if strict:
        raise error
    logger.debug("Skipping %s: %s", where, error)

