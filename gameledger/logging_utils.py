"""Mini README: Logging setup shared by the ledger console and web interface.

Structure:
    * get_logger - module loggers; installs the default handler on first use.
    * configure_root_logger - one stream handler, level given as int or name.
    * configure_from_settings - apply ``LedgerSettings.log_level`` to the
      package and to uvicorn's loggers when the web interface is served.

Library modules only call ``get_logger``. Entry points (``menu``, ``show``,
``serve``) call ``configure_from_settings`` so ``GAMELEDGER_LOG_LEVEL``
governs everything printed during a run.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .configuration import LedgerSettings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_handler: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> int:
    """Install the ledger handler once and set the root level.

    Returns the numeric level applied.
    """

    global _handler
    numeric_level = _resolve_level(level)
    root_logger = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(_handler)
    root_logger.setLevel(numeric_level)
    return numeric_level


def configure_from_settings(settings: "LedgerSettings", *, serving: bool = False) -> int:
    """Apply the configured level; align uvicorn's loggers when serving."""

    numeric_level = configure_root_logger(settings.log_level)
    if serving:
        for name in SERVER_LOGGERS:
            logging.getLogger(name).setLevel(numeric_level)
    return numeric_level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if _handler is None:
        configure_root_logger()
    return logging.getLogger(name)
