from __future__ import annotations


class AggregationError(Exception):
    """Base class for dashboard aggregation failures."""


class FetchFailure(AggregationError):
    """The record store could not serve one of the dashboard reads."""


class InvalidRange(AggregationError):
    """A date range bound could not be parsed."""
