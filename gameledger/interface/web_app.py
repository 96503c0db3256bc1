"""Mini README: FastAPI interface for the revenue ledger.

Structure:
    * create_application - application factory wiring ledger routes.

Routes mirror the console menu: show the tree, list groups and games, add a
game to a group, add revenue to a game, save and load the ledger file. One
``LedgerSession`` is shared by all routes of an application instance.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..ledger import LedgerDecodeError, LedgerSession
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def create_application(session: Optional[LedgerSession] = None) -> FastAPI:
    """Create the FastAPI application bound to ``session``."""

    app = FastAPI(title="Game Ledger", version="0.1.0")
    if session is None:
        session = LedgerSession(ledger_path=get_settings().ledger_path)

    def _snapshot() -> Dict[str, object]:
        return {"ledger": session.root.as_dict(), "total_revenue": session.root.revenue()}

    @app.get("/ledger")
    async def show_ledger() -> JSONResponse:
        """Return the whole tree with computed totals."""

        return JSONResponse(_snapshot())

    @app.get("/ledger/groups")
    async def list_groups() -> JSONResponse:
        groups = [
            {"number": number, "name": group.name, "revenue": group.revenue()}
            for number, group in session.list_groups()
        ]
        return JSONResponse({"groups": groups})

    @app.get("/ledger/items")
    async def list_items() -> JSONResponse:
        items = [
            {"number": number, "name": item.name, "revenue": item.value}
            for number, item in session.list_items()
        ]
        return JSONResponse({"items": items})

    @app.post("/ledger/groups/{group_number}/items")
    async def add_item(
        group_number: int,
        name: str = Form(...),
        revenue: float = Form(0.0),
    ) -> JSONResponse:
        """Add a game to one of the top-level groups."""

        try:
            item = session.add_item(group_number, name, revenue)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"item": item.as_dict(), "total_revenue": session.root.revenue()})

    @app.post("/ledger/items/{item_number}/revenue")
    async def add_revenue(item_number: int, amount: float = Form(...)) -> JSONResponse:
        try:
            item = session.add_revenue(item_number, amount)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"item": item.as_dict(), "total_revenue": session.root.revenue()})

    @app.post("/ledger/save")
    async def save_ledger() -> JSONResponse:
        if not session.save():
            raise HTTPException(status_code=500, detail=f"Could not save to {session.ledger_path}")
        return JSONResponse({"saved_to": str(session.ledger_path)})

    @app.post("/ledger/load")
    async def load_ledger() -> JSONResponse:
        """Replace the tree with the saved ledger file."""

        try:
            loaded = session.load()
        except LedgerDecodeError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        if not loaded:
            raise HTTPException(
                status_code=404, detail=f"No ledger could be loaded from {session.ledger_path}"
            )
        LOGGER.info("Ledger reloaded through the web interface")
        return JSONResponse(_snapshot())

    return app
