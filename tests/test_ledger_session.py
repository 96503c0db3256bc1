"""Mini README: Tests for the ledger session and file helpers.

Structure:
    * menu operations - numbered group and game selection.
    * persistence - save/load round trips through a temporary file.
    * failures - missing files and malformed values keep the current tree.
"""

from __future__ import annotations

import pytest

from gameledger.ledger import Group, Item, LedgerDecodeError, LedgerSession
from gameledger.storage import load_tree, read_lines, save_tree, write_lines


def test_session_seeds_demo_tree(tmp_path) -> None:
    """A new session starts with the casino demo tree at zero revenue."""

    session = LedgerSession(ledger_path=tmp_path / "casino.txt")

    assert session.root.name == "Casino Games"
    assert [item.name for _, item in session.list_items()] == [
        "Blackjack",
        "Roulette",
        "Mega Joker",
    ]
    assert session.root.revenue() == 0.0


def test_list_groups_numbers_by_child_position() -> None:
    """Group numbers follow the root's child positions, skipping games."""

    root = Group("Root")
    root.add(Item("Loose Game", 1))
    root.add(Group("Tables"))
    session = LedgerSession(root=root)

    assert [(number, group.name) for number, group in session.list_groups()] == [(2, "Tables")]
    with pytest.raises(KeyError):
        session.add_item(1, "Craps", 5)
    with pytest.raises(KeyError):
        session.add_item(3, "Craps", 5)

    session.add_item(2, "Craps", 5)
    assert root.children[1].children == [Item("Craps", 5)]


def test_add_revenue_updates_selected_game(tmp_path) -> None:
    """Revenue goes to the numbered game and bad numbers raise KeyError."""

    session = LedgerSession(ledger_path=tmp_path / "casino.txt")

    game = session.add_revenue(2, 75.25)

    assert game.name == "Roulette"
    assert session.root.revenue() == pytest.approx(75.25)
    with pytest.raises(KeyError):
        session.add_revenue(4, 1.0)
    with pytest.raises(KeyError):
        session.add_revenue(0, 1.0)


def test_save_then_load_restores_tree(tmp_path) -> None:
    """A saved session loads back into an equal but separate tree."""

    ledger_file = tmp_path / "casino.txt"
    session = LedgerSession(ledger_path=ledger_file)
    session.add_item(1, "Texas Hold em", 12.5)
    session.add_revenue(1, 100.5)

    assert session.save()
    assert read_lines(ledger_file)[:3] == [
        "GROUP Casino Games",
        "  GROUP Table Games",
        "    GAME Blackjack 100.5",
    ]

    fresh = LedgerSession(ledger_path=ledger_file)
    assert fresh.load()
    assert fresh.root == session.root
    assert fresh.root is not session.root


def test_load_missing_file_keeps_current_tree(tmp_path) -> None:
    """A missing ledger file leaves the current tree in place."""

    session = LedgerSession(ledger_path=tmp_path / "missing.txt")
    before = session.root

    assert read_lines(tmp_path / "missing.txt") is None
    assert session.load() is False
    assert session.root is before


def test_load_rejects_file_without_group_root(tmp_path) -> None:
    """A file whose first entry is a game is not accepted as a ledger."""

    ledger_file = tmp_path / "solo.txt"
    write_lines(ledger_file, ["GAME Solo 5"])
    session = LedgerSession(ledger_path=ledger_file)
    before = session.root

    assert load_tree(ledger_file) is None
    assert session.load() is False
    assert session.root is before


def test_malformed_value_keeps_current_tree(tmp_path) -> None:
    """Decode errors surface to the caller and nothing is swapped in."""

    ledger_file = tmp_path / "broken.txt"
    write_lines(ledger_file, ["GROUP Root", "  GAME Poker many"])
    session = LedgerSession(ledger_path=ledger_file)
    before = session.root

    with pytest.raises(LedgerDecodeError):
        session.load()
    assert session.root is before


def test_save_tree_creates_parent_directories(tmp_path) -> None:
    """Saving creates missing directories and writes one line per node."""

    target = tmp_path / "nested" / "dir" / "ledger.txt"
    root = Group("Root")
    root.add(Item("Keno", 4))

    assert save_tree(root, target)
    assert target.read_text(encoding="utf-8") == "GROUP Root\n  GAME Keno 4\n"
    assert load_tree(target) == root


def test_write_lines_reports_failure(tmp_path) -> None:
    """Write errors are reported as False instead of raising."""

    blocker = tmp_path / "file.txt"
    blocker.write_text("not a directory", encoding="utf-8")

    assert write_lines(blocker / "ledger.txt", ["GROUP Root"]) is False


@pytest.mark.parametrize("name", ["Poker 1\n  GAME Injected 1000000", "Split\rName", "", "   "])
def test_add_item_rejects_unsaveable_names(name: str) -> None:
    """Names with line breaks or no text are refused before the tree changes."""

    session = LedgerSession()
    before = session.root.as_dict()

    with pytest.raises(ValueError):
        session.add_item(1, name, 1.0)
    assert session.root.as_dict() == before


def test_added_names_survive_save_and_load(tmp_path) -> None:
    """Extra whitespace is collapsed so a saved game loads back with the same name."""

    ledger_file = tmp_path / "casino.txt"
    session = LedgerSession(ledger_path=ledger_file)
    game = session.add_item(1, "  Texas \t Hold   em ", 4)
    assert game.name == "Texas Hold em"

    assert session.save()
    fresh = LedgerSession(ledger_path=ledger_file)
    assert fresh.load()
    assert fresh.root == session.root


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_amounts_are_rejected(amount: float) -> None:
    """NaN and infinities never reach a game's value."""

    session = LedgerSession()

    with pytest.raises(ValueError):
        session.add_revenue(1, amount)
    with pytest.raises(ValueError):
        session.add_item(1, "Craps", amount)
    assert [item.value for _, item in session.list_items()] == [0.0, 0.0, 0.0]
    assert [item.name for _, item in session.list_items()] == ["Blackjack", "Roulette", "Mega Joker"]
