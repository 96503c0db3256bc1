"""Mini README: Interfaces for the revenue ledger.

Exports the FastAPI application factory that serves the ledger as JSON. The
interactive console lives in ``main_ledger_console.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
