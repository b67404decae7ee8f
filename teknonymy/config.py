"""Configuration loader for teknonymy.

Behavior:
- Load defaults.
- If a config path is given (or `TEKNONYMY_CONFIG` is set), load that JSON file and merge.
- Environment variables `TEKNONYMY_STRATEGY` and `TEKNONYMY_LOG_LEVEL` override
  file values unless an explicit path was passed to `load_config`.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import os
import json
import logging
from typing import Optional

from .resolver import DEFAULT_STRATEGY


@dataclass
class Config:
    strategy: str = DEFAULT_STRATEGY
    log_level: str = "WARNING"

    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def _load_json_file(path: Path) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError):
        logging.warning("config: could not read %s, using defaults", path)
        return None


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from (1) defaults, (2) JSON file, (3) env vars.

    :param config_path: optional path to a JSON config file. If not provided
                        will use environment variable `TEKNONYMY_CONFIG` if set.
    """
    cfg = Config()

    cp = config_path or os.environ.get("TEKNONYMY_CONFIG")
    if cp:
        data = _load_json_file(Path(cp))
        if isinstance(data, dict):
            if data.get("strategy"):
                cfg.strategy = str(data["strategy"])
            if data.get("log_level"):
                cfg.log_level = str(data["log_level"])

    # an explicit path is authoritative; env only fills in the implicit case
    if config_path is None:
        if os.environ.get("TEKNONYMY_STRATEGY"):
            cfg.strategy = os.environ["TEKNONYMY_STRATEGY"]
        if os.environ.get("TEKNONYMY_LOG_LEVEL"):
            cfg.log_level = os.environ["TEKNONYMY_LOG_LEVEL"]

    return cfg
