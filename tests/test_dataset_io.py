from datetime import time

import pytest

from trainfinder.dataset_io import TrainRecord, load_trains, parse_time_of_day
from trainfinder.errors import DatasetError
from trainfinder.models import Train


@pytest.mark.parametrize("raw, expected", [
    ("10:25:00", time(10, 25)),
    ("23:59:59", time(23, 59, 59)),
    ('"04:15:00"', time(4, 15)),
    ("", time(0, 0)),
    ("null", time(0, 0)),
    (None, time(0, 0)),
])
def test_parse_time_of_day(raw, expected):
    assert parse_time_of_day(raw) == expected


@pytest.mark.parametrize("raw", ["25:00:00", "10:25", "ten past", 1025])
def test_parse_time_of_day_rejects_garbage(raw):
    with pytest.raises(ValueError):
        parse_time_of_day(raw)


def test_record_accepts_dataset_field_names():
    rec = TrainRecord(
        trainId=978,
        departureStationId=1902,
        arrivalStationId=1929,
        price=258.53,
        arrivalTime="04:15:00",
        departureTime="13:10:00",
    )
    assert rec.to_train() == Train(978, 1902, 1929, 258.53, time(4, 15), time(13, 10))


def test_load_json_keeps_source_order(write_dataset, record):
    path = write_dataset([
        record(3, 1, 2, 9.5, "10:00:00", "08:00:00"),
        record(1, 2, 1, 280, "11:00:00", "09:30:00"),
    ])
    trains = load_trains(path)
    assert trains == [
        Train(3, 1, 2, 9.5, time(10), time(8)),
        Train(1, 2, 1, 280.0, time(11), time(9, 30)),
    ]


def test_null_and_empty_times_become_midnight(write_dataset):
    path = write_dataset([
        {"trainId": 1, "departureStationId": 1, "arrivalStationId": 2, "price": 1.0,
         "arrivalTime": None, "departureTime": ""},
        {"trainId": 2, "departureStationId": 1, "arrivalStationId": 2, "price": 1.0,
         "arrivalTime": "null", "departureTime": "07:00:00"},
        {"trainId": 3, "departureStationId": 1, "arrivalStationId": 2, "price": 1.0},
    ])
    trains = load_trains(path)
    assert [t.arrival_time for t in trains] == [time(0), time(0), time(0)]
    assert [t.departure_time for t in trains] == [time(0), time(7), time(0)]


def test_time_columns_may_be_absent(write_dataset):
    path = write_dataset([{"trainId": 1, "departureStationId": 1, "arrivalStationId": 2, "price": 3}])
    assert load_trains(path) == [Train(1, 1, 2, 3.0)]


def test_one_bad_time_fails_the_whole_load(write_dataset, record):
    path = write_dataset([
        record(1, 1, 2, 1.0, "10:00:00"),
        record(2, 1, 2, 1.0, "10h00"),
    ])
    with pytest.raises(DatasetError, match="record #1"):
        load_trains(path)


def test_missing_columns(write_dataset):
    path = write_dataset([{"trainId": 1, "price": 3}])
    with pytest.raises(DatasetError, match="missing columns"):
        load_trains(path)


def test_non_numeric_station(write_dataset, record):
    path = write_dataset([record(1, "north", 2, 1.0)])
    with pytest.raises(DatasetError):
        load_trains(path)


def test_missing_file(tmp_path):
    with pytest.raises(DatasetError, match="not found"):
        load_trains(tmp_path / "missing.json")


def test_malformed_json(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(DatasetError, match="cannot decode"):
        load_trains(path)


def test_empty_array(write_dataset):
    assert load_trains(write_dataset([])) == []


def test_load_csv(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(
        "trainId,departureStationId,arrivalStationId,price,arrivalTime,departureTime\n"
        "1177,1902,1929,164.65,10:25:00,16:36:00\n"
        "1290,1909,1981,188.8,,11:25:00\n",
        encoding="utf-8",
    )
    assert load_trains(path) == [
        Train(1177, 1902, 1929, 164.65, time(10, 25), time(16, 36)),
        Train(1290, 1909, 1981, 188.8, time(0), time(11, 25)),
    ]


def test_bundled_dataset_loads():
    from trainfinder import DEFAULT_DATASET

    trains = load_trains(DEFAULT_DATASET)
    assert trains
    assert all(isinstance(t, Train) for t in trains)


@pytest.mark.parametrize("raw", ['\\"04:15:00\\"', '"\\04:15:00\\"'])
def test_parse_time_of_day_trims_escaped_quotes(raw):
    assert parse_time_of_day(raw) == time(4, 15)


@pytest.mark.parametrize("field, value", [
    ("price", [1, 2]),
    ("trainId", {"id": 1}),
    ("arrivalTime", ["04:15:00"]),
])
def test_nested_values_fail_the_load(write_dataset, record, field, value):
    bad = record(2, 1, 2, 1.0)
    bad[field] = value
    path = write_dataset([record(1, 1, 2, 1.0), bad])
    with pytest.raises(DatasetError, match="record #1"):
        load_trains(path)
