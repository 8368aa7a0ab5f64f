"""
trainfinder – find the cheapest / earliest trains between two stations.
Top-level package.  Exposes a tiny public API and the package logger
every sub-module hangs its own logger from.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

__all__ = [
    "logger",
    "PROJECT_ROOT",
    "DATA_DIR",
    "DEFAULT_DATASET",
    "find_trains",
    "load_trains",
    "Train",
    "Criterion",
]

# ---------- paths ----------
PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parent.parent
DATA_DIR: Final[Path] = PROJECT_ROOT / "data"
DEFAULT_DATASET: Final[Path] = DATA_DIR / "data.json"

# ---------- logging ----------
logger = logging.getLogger("trainfinder")
logger.addHandler(logging.NullHandler())

from .dataset_io import load_trains  # noqa: E402
from .models import Criterion, Train  # noqa: E402
from .query import find_trains  # noqa: E402
