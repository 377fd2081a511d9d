"""
Processing variables: which sheet holds the log, which columns to extract and
which rows sample the resting baseline. Captured once ("Set Variables"),
persisted as a flat key/value JSON file and passed explicitly to the pipeline.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

import config
from a1_notation import col_a1_to_index, row_a1_to_index
from errors import MissingConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    data_sheet: str
    unix_time: str
    log_sample: str
    acc_x: str
    acc_y: str
    acc_z: str
    shift_sample_from: int
    shift_sample_to: int

    @classmethod
    def from_properties(cls, props: Dict[str, str]) -> "Settings":
        """
        Build from the persisted key/value form. Every key in config.SETTINGS_KEYS
        must be present and non-empty; column letters and row numbers are parsed here.
        """
        missing = [k for k in config.SETTINGS_KEYS if props.get(k) is None or not str(props[k]).strip()]
        if missing:
            raise MissingConfigurationError(missing)
        settings = cls(
            data_sheet=str(props["dataSheet"]).strip(),
            unix_time=str(props["unixTime"]).strip().upper(),
            log_sample=str(props["logSample"]).strip().upper(),
            acc_x=str(props["accX"]).strip().upper(),
            acc_y=str(props["accY"]).strip().upper(),
            acc_z=str(props["accZ"]).strip().upper(),
            shift_sample_from=row_a1_to_index(props["shiftSampleFrom"]),
            shift_sample_to=row_a1_to_index(props["shiftSampleTo"]),
        )
        settings.column_indices()
        return settings

    def to_properties(self) -> Dict[str, str]:
        return {
            "dataSheet": self.data_sheet,
            "unixTime": self.unix_time,
            "logSample": self.log_sample,
            "accX": self.acc_x,
            "accY": self.acc_y,
            "accZ": self.acc_z,
            "shiftSampleFrom": str(self.shift_sample_from),
            "shiftSampleTo": str(self.shift_sample_to),
        }

    def column_indices(self) -> Dict[str, int]:
        """Raw column name (config.RAW_COLUMNS) -> 1-based source column number."""
        letters = (self.unix_time, self.log_sample, self.acc_x, self.acc_y, self.acc_z)
        return {name: col_a1_to_index(letter) for name, letter in zip(config.RAW_COLUMNS, letters)}


def load_settings(path: Optional[str] = None) -> Settings:
    """Read persisted variables. A missing file counts as every key missing."""
    path = Path(path or config.DEFAULT_SETTINGS_FILE)
    if not path.exists():
        raise MissingConfigurationError(config.SETTINGS_KEYS)
    with open(path, encoding="utf-8") as f:
        props = json.load(f)
    logger.info(f"Loaded variables from {path}")
    return Settings.from_properties(props)


def save_settings(settings: Settings, path: Optional[str] = None) -> Path:
    path = Path(path or config.DEFAULT_SETTINGS_FILE)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings.to_properties(), f, indent=2)
    logger.info(f"Saved variables to {path}")
    return path


def prompt_settings(ask: Callable[[str, str], Optional[str]]) -> Settings:
    """
    Capture all variables interactively. `ask(title, text)` returns the user's
    answer, or None when the prompt was cancelled. Nothing is returned (and so
    nothing gets saved) unless every prompt is answered.
    """
    props = {}
    for key in config.SETTINGS_KEYS:
        title, text = config.SETTINGS_PROMPTS[key]
        answer = ask(title, text)
        if answer is None:
            raise MissingConfigurationError([key])
        props[key] = answer.strip()
    return Settings.from_properties(props)
