from __future__ import annotations


class ChartError(Exception):
    """Base class for every error raised by cellplot."""


class InvalidArgumentError(ChartError, ValueError):
    pass


class SeriesIndexError(ChartError, IndexError):
    pass


class UnsupportedConfigurationError(ChartError, ValueError):
    pass
