from __future__ import annotations

import os
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Settings for the logging and HTTP helpers, read from the environment.

    Nothing here changes what the guards accept or reject.
    """

    log_level: str
    expose_details: bool

    @staticmethod
    def from_env() -> Settings:
        prefix = "ARGCHECK_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip().upper() or "INFO"
        raw_expose = os.getenv(f"{prefix}EXPOSE_DETAILS", "true").strip().lower()
        expose_details = raw_expose not in _FALSE_VALUES
        return Settings(log_level=log_level, expose_details=expose_details)
