"""Compare monthly electricity costs under tiered, TOU and ULO rate plans."""

__version__ = "0.1.0"
