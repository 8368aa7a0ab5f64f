"""
trainfinder configuration management.
Defaults, environment overrides and JSON/YAML config files.
"""
from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from . import DEFAULT_DATASET

ENV_DATA = "TRAINFINDER_DATA"
ENV_RESULT_LIMIT = "TRAINFINDER_RESULT_LIMIT"
ENV_LOG_LEVEL = "TRAINFINDER_LOG_LEVEL"


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class FinderConfig:
    """Everything the CLI needs to run one query"""
    data_path: Path = field(default_factory=lambda: DEFAULT_DATASET)
    result_limit: int = 3
    log_level: LogLevel = LogLevel.INFO

    def __post_init__(self):
        if isinstance(self.data_path, str):
            self.data_path = Path(self.data_path)
        if not isinstance(self.log_level, LogLevel):
            self.log_level = LogLevel(str(self.log_level).lower())
        self.result_limit = int(self.result_limit)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FinderConfig":
        """Defaults overridden by TRAINFINDER_* variables"""
        environ = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}
        if environ.get(ENV_DATA):
            kwargs["data_path"] = environ[ENV_DATA]
        if environ.get(ENV_RESULT_LIMIT):
            kwargs["result_limit"] = environ[ENV_RESULT_LIMIT]
        if environ.get(ENV_LOG_LEVEL):
            kwargs["log_level"] = environ[ENV_LOG_LEVEL]
        return cls(**kwargs)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "FinderConfig":
        """Load configuration from file"""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        # Load data based on file extension
        if file_path.suffix.lower() in [".yaml", ".yml"]:
            with open(file_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        else:
            with open(file_path, "r") as f:
                config_data = json.load(f)

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "FinderConfig":
        if not isinstance(config_dict, dict):
            raise ValueError(f"configuration must be a mapping, got {type(config_dict).__name__}")
        known = {k: v for k, v in config_dict.items() if k in cls.__dataclass_fields__}
        return cls(**known)

    def save_to_file(self, file_path: Union[str, Path]):
        """Save configuration to file (JSON or YAML)"""
        file_path = Path(file_path)
        config_dict = self.to_dict()

        if file_path.suffix.lower() in [".yaml", ".yml"]:
            with open(file_path, "w") as f:
                yaml.dump(config_dict, f, default_flow_style=False, indent=2)
        else:
            with open(file_path, "w") as f:
                json.dump(config_dict, f, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["data_path"] = str(self.data_path)
        data["log_level"] = self.log_level.value
        return data

    def validate(self) -> List[str]:
        """Validate configuration and return list of issues"""
        issues = []
        if self.result_limit < 1:
            issues.append(f"invalid result_limit: {self.result_limit} (must be >= 1)")
        if not self.data_path.is_file():
            issues.append(f"dataset not found: {self.data_path}")
        return issues
