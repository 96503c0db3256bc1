"""Mini README: Core package initializer for the gameledger revenue ledger.

This module exposes convenience imports so the console and web interface can
reach the logging helpers without knowing the exact module structure. The
tree model and text codec live in :mod:`gameledger.ledger`.
"""

from .logging_utils import configure_from_settings, configure_root_logger, get_logger

__all__ = ["configure_from_settings", "configure_root_logger", "get_logger"]
