"""Environment-driven settings for lazyinject."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = ("1", "true", "yes")


@dataclass
class InjectorSettings:
    """Runtime settings for applications embedding the injector."""

    log_level: str = "INFO"
    json_logs: bool = False
    log_file: Path | None = None

    @classmethod
    def from_env(cls, prefix: str = "LAZYINJECT_") -> InjectorSettings:
        """Load settings from environment variables.

        Args:
            prefix: Variable prefix (``LAZYINJECT_LOG_LEVEL`` etc.)

        Returns:
            InjectorSettings instance
        """
        level = os.environ.get(f"{prefix}LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"

        json_logs = os.environ.get(f"{prefix}LOG_JSON", "").strip().lower() in _TRUTHY

        log_file = None
        if path := os.environ.get(f"{prefix}LOG_FILE"):
            log_file = Path(path)

        return cls(log_level=level, json_logs=json_logs, log_file=log_file)
