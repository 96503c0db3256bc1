"""Mini README: Entry point CLI for the gameledger revenue ledger.

This script exposes a Typer CLI with three commands: ``menu`` runs the
interactive ledger menu (display, add game, add revenue, save, load),
``show`` prints the tree stored in a ledger file, and ``serve`` starts the
FastAPI interface with uvicorn. Settings come from ``GAMELEDGER_*``
environment variables when available.
"""

from __future__ import annotations

from pathlib import Path

import typer
import uvicorn

from gameledger.configuration import get_settings
from gameledger.ledger import LedgerDecodeError, LedgerSession, render
from gameledger.ledger.nodes import format_value
from gameledger.logging_utils import configure_from_settings
from gameledger.storage import load_tree

cli = typer.Typer(help="Track game revenue in a nested group ledger.")

MENU = "\n1. Display games\n2. Add game\n3. Add revenue\n4. Save\n5. Load\n0. Exit"


def _echo_lines(lines) -> None:
    for line in lines:
        typer.echo(line)


def _add_game(session: LedgerSession) -> None:
    groups = session.list_groups()
    typer.echo("Groups:")
    for number, group in groups:
        typer.echo(f"{number}. {group.name}")
    group_number = typer.prompt("Select group", type=int)
    if group_number not in {number for number, _ in groups}:
        typer.echo("Invalid group selection.")
        return
    name = typer.prompt("Game name")
    revenue = typer.prompt("Revenue", type=float)
    try:
        session.add_item(group_number, name, revenue)
    except ValueError as error:
        typer.echo(f"Game not added: {error}")
        return
    typer.echo("Game added!")


def _add_revenue(session: LedgerSession) -> None:
    items = session.list_items()
    typer.echo("Games:")
    for number, item in items:
        typer.echo(f"{number}. {item.name} (Revenue: {format_value(item.value)})")
    item_number = typer.prompt("Select game", type=int)
    if not 1 <= item_number <= len(items):
        typer.echo("Invalid game selection.")
        return
    amount = typer.prompt("Add revenue", type=float)
    try:
        session.add_revenue(item_number, amount)
    except ValueError as error:
        typer.echo(f"Revenue not added: {error}")
        return
    typer.echo("Revenue added!")


def _load(session: LedgerSession) -> None:
    try:
        loaded = session.load()
    except LedgerDecodeError as error:
        typer.echo(f"Failed to load file: {error}")
        return
    if not loaded:
        typer.echo("Failed to load file!")
        return
    typer.echo(f"Loaded from: {session.ledger_path}")
    _echo_lines(session.display())


@cli.command()
def menu(
    ledger_file: Path = typer.Option(None, help="Ledger file used by Save and Load."),
) -> None:
    """Run the interactive ledger menu."""

    settings = get_settings()
    configure_from_settings(settings)
    session = LedgerSession(ledger_path=ledger_file or settings.ledger_path)

    while True:
        typer.echo(MENU)
        choice = typer.prompt("Choice", type=int)
        if choice == 0:
            break
        if choice == 1:
            _echo_lines(session.display())
        elif choice == 2:
            _add_game(session)
        elif choice == 3:
            _add_revenue(session)
        elif choice == 4:
            if session.save():
                typer.echo(f"Saved to: {session.ledger_path}")
            else:
                typer.echo("Failed to save file!")
        elif choice == 5:
            _load(session)
        else:
            typer.echo("Unknown option.")


@cli.command()
def show(path: Path = typer.Argument(..., help="Ledger file to display.")) -> None:
    """Print the tree stored in a ledger file."""

    configure_from_settings(get_settings())
    try:
        root = load_tree(path)
    except LedgerDecodeError as error:
        typer.echo(f"Failed to load {path}: {error}", err=True)
        raise typer.Exit(code=1) from error
    if root is None:
        typer.echo(f"Failed to load {path}", err=True)
        raise typer.Exit(code=1)
    _echo_lines(render(root))


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI ledger interface using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_from_settings(settings, serving=True)

    typer.echo(f"Serving ledger {settings.ledger_path} on http://{effective_host}:{effective_port}")
    uvicorn.run(
        "gameledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
