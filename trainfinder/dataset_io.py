"""
dataset_io.py – train dataset loading and per-record validation
"""

from __future__ import annotations

import logging
from datetime import datetime, time
from pathlib import Path
from typing import Final, List

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import DatasetError
from .models import Train

logger = logging.getLogger("trainfinder.dataset_io")

# ────────────────────────────────────────────────────────────────────────────
TIME_LAYOUT: Final[str] = "%H:%M:%S"
ZERO_TIME: Final[time] = time(0, 0)

DATASET_REQUIRED_COLS: Final[List[str]] = [
    "trainId",
    "departureStationId",
    "arrivalStationId",
    "price",
]
# may be absent altogether: every train then gets the zero time
DATASET_TIME_COLS: Final[List[str]] = ["arrivalTime", "departureTime"]


# ---------------------------------------------------------------------------
def parse_time_of_day(value) -> time:
    """
    ``"HH:MM:SS"`` → ``datetime.time``.

    Surrounding quotes and backslashes are trimmed.  Missing values, ``""``
    and the literal ``"null"`` give midnight (the zero time); anything else
    that does not match the layout raises ``ValueError``.
    """
    if value is None:
        return ZERO_TIME
    if isinstance(value, time):
        return value
    if not isinstance(value, str):
        raise ValueError(f"time of day must be text, got {type(value).__name__}")
    text = value.strip('\\"')
    if text in ("", "null"):
        return ZERO_TIME
    return datetime.strptime(text, TIME_LAYOUT).time()


class TrainRecord(BaseModel):
    """One record of the dataset exactly as it is stored on disk."""

    model_config = ConfigDict(validate_by_name=True, frozen=True)

    train_id: int = Field(alias="trainId")
    departure_station_id: int = Field(alias="departureStationId")
    arrival_station_id: int = Field(alias="arrivalStationId")
    price: float
    arrival_time: time = Field(ZERO_TIME, alias="arrivalTime")
    departure_time: time = Field(ZERO_TIME, alias="departureTime")

    # ── validators ──────────────────────────────────────────────────────
    @field_validator("arrival_time", "departure_time", mode="before")
    @classmethod
    def _parse_time(cls, v):
        return parse_time_of_day(v)

    def to_train(self) -> Train:
        return Train(
            train_id=self.train_id,
            departure_station_id=self.departure_station_id,
            arrival_station_id=self.arrival_station_id,
            price=self.price,
            arrival_time=self.arrival_time,
            departure_time=self.departure_time,
        )


# ────────────────────────────────────────────────────────────────────────────
def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(
            path,
            dtype={c: str for c in DATASET_TIME_COLS},
            float_precision="round_trip",
        )
    # JSON is the native format; no dtype or date guessing, times stay text
    return pd.read_json(
        path, orient="records", dtype=False, convert_dates=False, precise_float=True
    )


def _is_missing(value) -> bool:
    # nested lists / objects are left for pydantic to reject
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def load_trains(path: Path | str) -> list[Train]:
    """
    Parse the train dataset and return a list[Train] in source order.

    The load is all-or-nothing: one malformed record (bad time text,
    non-numeric id, ...) fails the whole dataset with ``DatasetError``.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetError(f"dataset not found: {path}")

    try:
        df = _read_frame(path)
    except ValueError as err:
        raise DatasetError(f"cannot decode dataset {path}: {err}") from err

    if df.empty:
        logger.info("Dataset %s holds no trains", path)
        return []

    # Header check
    missing = [c for c in DATASET_REQUIRED_COLS if c not in df.columns]
    if missing:
        raise DatasetError(f"dataset {path} is missing columns {missing}")
    for col in DATASET_TIME_COLS:
        if col not in df.columns:
            df[col] = None

    records = df[DATASET_REQUIRED_COLS + DATASET_TIME_COLS].to_dict(orient="records")
    trains: list[Train] = []
    for idx, raw in enumerate(records):
        # Convert pandas NaN → None so the time fields fall back to zero
        raw = {k: (None if _is_missing(v) else v) for k, v in raw.items()}
        try:
            trains.append(TrainRecord(**raw).to_train())
        except ValidationError as err:
            raise DatasetError(f"invalid record #{idx} in {path}: {err}") from err

    logger.info("Loaded %d trains from %s", len(trains), path.name)
    return trains
