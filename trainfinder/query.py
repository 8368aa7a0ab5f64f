"""
query.py – the train search itself.

Public symbols
--------------
find_trains(...)        – validate, filter, stable-sort, truncate
parse_station_id(...)   – text → station id (int ≥ 1) or None
NUM_OF_RETURN_TRAINS    – default size of the result
"""
from __future__ import annotations

import logging
import re
from operator import attrgetter
from pathlib import Path
from typing import Final, Iterable, Optional

from . import DEFAULT_DATASET
from .dataset_io import load_trains
from .errors import (
    BadArrivalStation,
    BadDepartureStation,
    EmptyArrivalStation,
    EmptyDepartureStation,
)
from .models import Criterion, Train

log = logging.getLogger("trainfinder.query")

NUM_OF_RETURN_TRAINS: Final[int] = 3
MIN_STATION_ID: Final[int] = 1

# optional sign + ASCII digits; int() alone would also take " 7", "1_0", "٧"
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_station_id(text: str) -> Optional[int]:
    """Return the station id encoded in *text*, or None when it is not one."""
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value >= MIN_STATION_ID else None


def sort_trains(trains: Iterable[Train], criterion: Criterion) -> list[Train]:
    """Ascending, stable: equal keys keep their dataset order."""
    log.debug("Sorting by %s", criterion.value)
    return sorted(trains, key=attrgetter(criterion.sort_key))


def find_trains(
    departure_station: str,
    arrival_station: str,
    criteria: str,
    *,
    data_path: Path | str | None = None,
    limit: int = NUM_OF_RETURN_TRAINS,
) -> list[Train]:
    """
    Trains running from *departure_station* to *arrival_station*, sorted
    by *criteria* and cut to the first *limit*.

    Checks run in a fixed order and the first failure is raised:
    empty departure, empty arrival, bad departure, bad arrival, criteria.
    An empty list means the query was valid but nothing matched.

    The dataset is re-read on every call; a dataset that cannot be read
    raises ``DatasetError`` instead of looking like an empty result.
    """
    if not departure_station:
        raise EmptyDepartureStation()
    if not arrival_station:
        raise EmptyArrivalStation()

    departure_id = parse_station_id(departure_station)
    if departure_id is None:
        raise BadDepartureStation()
    arrival_id = parse_station_id(arrival_station)
    if arrival_id is None:
        raise BadArrivalStation()

    criterion = Criterion.parse(criteria)
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    if data_path is None:
        data_path = DEFAULT_DATASET

    data = load_trains(data_path)
    matches = [
        t for t in data
        if t.departure_station_id == departure_id and t.arrival_station_id == arrival_id
    ]
    log.info("%d of %d trains run %d → %d", len(matches), len(data), departure_id, arrival_id)

    if not matches:
        return []

    return sort_trains(matches, criterion)[:limit]
