"""Environment-driven configuration for the pet store service."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import PetStoreConfigError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _read_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(value)
        return parsed if parsed > 0 else default
    except ValueError:
        return default


def _read_log_level(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise PetStoreConfigError(
            f"PETSTORE_LOG_LEVEL must be one of {', '.join(sorted(_LOG_LEVELS))}, "
            f"got {value!r}."
        )
    return level


@dataclass(frozen=True)
class PetStoreSettings:
    """Configuration container."""

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "PetStoreSettings":
        host = os.environ.get("PETSTORE_HOST", cls.host)
        port = _read_int(os.environ.get("PETSTORE_PORT"), cls.port)
        log_level = _read_log_level(os.environ.get("PETSTORE_LOG_LEVEL"), cls.log_level)

        return cls(host=host, port=port, log_level=log_level)
