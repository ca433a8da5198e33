"""Exceptions raised by ratecompare."""


class RateCompareError(Exception):
    """Base exception for ratecompare errors."""
    pass


class MalformedSampleError(RateCompareError):
    """A usage row whose timestamp or kWh value could not be parsed."""
    pass


class InvalidUsageError(RateCompareError, ValueError):
    """A kWh value that is negative, NaN or infinite."""
    pass


class ConfigError(RateCompareError):
    """The rate configuration file is missing or invalid."""
    pass
