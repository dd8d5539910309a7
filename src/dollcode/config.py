"""Environment-driven settings.

Environment:
    DOLLCODE_LOG_LEVEL      Logging level (default: WARNING)
    DOLLCODE_LOG_FORMAT     logging format string (default: built-in)
    DOLLCODE_OUTPUT_FORMAT  CLI output: text, json or msgpack (default: text)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json", "msgpack")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str | None = None
    output_format: str = "text"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment (or a given mapping)."""
    env = os.environ if environ is None else environ

    log_level = env.get("DOLLCODE_LOG_LEVEL", "WARNING").upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"DOLLCODE_LOG_LEVEL must be one of {LOG_LEVELS}, got {log_level!r}")

    output_format = env.get("DOLLCODE_OUTPUT_FORMAT", "text").lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"DOLLCODE_OUTPUT_FORMAT must be one of {OUTPUT_FORMATS}, got {output_format!r}")

    return Settings(
        log_level=log_level,
        log_format=env.get("DOLLCODE_LOG_FORMAT") or None,
        output_format=output_format,
    )
