"""Settings read from the environment (and a local .env file, if any)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from dafny_export.result import Err, Ok, Result

DEFAULT_STATE_DIR = ".dafny_export"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    state_dir: Path
    log_level: str

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> Result["Settings", ValueError]:
        load_dotenv()
        state_dir = os.getenv("DAFNY_EXPORT_STATE_DIR") or DEFAULT_STATE_DIR
        log_level = (os.getenv("DAFNY_EXPORT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

        if log_level not in _LOG_LEVELS:
            return Err(
                ValueError(
                    f"DAFNY_EXPORT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
                    f"got {log_level!r}."
                )
            )
        return Ok(cls(state_dir=Path(state_dir), log_level=log_level))
