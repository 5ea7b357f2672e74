"""Centralized logger configuration for the pet store service.

Every module logs through ``get_logger(__name__)`` so that application and
Uvicorn output share one timestamped format.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Track if root logger has been configured
_root_logger_configured = False

# Handler installed by configure_root_logger, replaced on a forced reconfigure
_handler: Optional[logging.Handler] = None

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_root_logger(level: Optional[str] = None, *, force: bool = False) -> None:
    """Configure the root logger with standard formatting.

    Subsequent calls are no-ops unless ``force`` is set. Uvicorn loggers get
    the same handler so access logs and application logs line up. Handlers
    installed on the root logger by other code are left in place.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, reads from PETSTORE_LOG_LEVEL env var or defaults to INFO.
        force: Replace an existing configuration, e.g. once settings are loaded.
    """
    global _root_logger_configured, _handler

    if _root_logger_configured and not force:
        return

    if level is None:
        level = os.environ.get("PETSTORE_LOG_LEVEL", "INFO")
    level = level.upper()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for logger_name in _UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = False

    _handler = handler
    _root_logger_configured = True


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a logger, configuring the root logger on first call.

    Args:
        name: Logger name (typically __name__ of the calling module)
        level: Optional log level override. If None, inherits from root.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Service started")
        2024-01-15 10:30:45.123 | INFO     | pet_store.server | Service started
    """
    if not _root_logger_configured:
        configure_root_logger(level)

    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level.upper())

    return logger
