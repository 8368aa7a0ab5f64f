"""
report.py – terminal rendering of search results.
"""
from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from .models import Train

NO_TRAINS_MESSAGE = "Can't find trains on request. Please, try again."


def format_train(train: Train) -> str:
    return (
        f"Train {train.train_id}: {train.departure_station_id} → {train.arrival_station_id}, "
        f"departs {train.departure_time:%H:%M:%S}, arrives {train.arrival_time:%H:%M:%S}, "
        f"price {train.price:.2f}"
    )


def build_table(trains: Sequence[Train]) -> Table:
    table = Table(title="Trains found")
    for header in ("train", "from", "to", "departure", "arrival", "price"):
        table.add_column(header, justify="right" if header == "price" else "left")
    for t in trains:
        table.add_row(
            str(t.train_id),
            str(t.departure_station_id),
            str(t.arrival_station_id),
            f"{t.departure_time:%H:%M:%S}",
            f"{t.arrival_time:%H:%M:%S}",
            f"{t.price:.2f}",
        )
    return table


def print_results(trains: Sequence[Train], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not trains:
        console.print(NO_TRAINS_MESSAGE)
        return
    console.print(build_table(trains))
