"""Usage CSV importers, one per vendor export layout."""

from . import daily, interval

IMPORTERS = {
    interval.FORMAT_NAME: interval.parse_csv,
    daily.FORMAT_NAME: daily.parse_csv,
}
