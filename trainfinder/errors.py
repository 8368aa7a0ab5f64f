"""
errors.py – everything find_trains() may raise.

Validation errors share ``TrainQueryError`` so callers can catch the whole
family; ``DatasetError`` is kept apart so a broken dataset never looks like
an empty search.
"""
from __future__ import annotations


class TrainQueryError(ValueError):
    """Base class for rejected query parameters."""

    message = "bad query"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class EmptyDepartureStation(TrainQueryError):
    message = "empty departure station"


class EmptyArrivalStation(TrainQueryError):
    message = "empty arrival station"


class BadDepartureStation(TrainQueryError):
    message = "bad departure station input"


class BadArrivalStation(TrainQueryError):
    message = "bad arrival station input"


class UnsupportedCriteria(TrainQueryError):
    message = "unsupported criteria"


class DatasetError(RuntimeError):
    """Raised when the train dataset cannot be read or decoded."""
