import json
from pathlib import Path

import pytest


def _record(train_id, dep, arr, price, arrival="00:00:00", departure="00:00:00"):
    return {
        "trainId": train_id,
        "departureStationId": dep,
        "arrivalStationId": arr,
        "price": price,
        "arrivalTime": arrival,
        "departureTime": departure,
    }


@pytest.fixture
def record():
    return _record


@pytest.fixture
def write_dataset(tmp_path):
    """Dump a list of raw records to ``tmp_path/data.json`` and return the path."""

    def _write(records, name="data.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write
