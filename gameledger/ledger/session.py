"""Mini README: Ledger session holding the current tree for interactive use.

Structure:
    * LedgerSession - owns the root group and exposes the menu operations
      (display, add game, add revenue, save, load).

Selections use the 1-based numbers shown to operators. Loading swaps the root
in one assignment and only after a complete tree has been decoded, so a
failed load leaves the previous tree untouched.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..logging_utils import get_logger
from .. import storage
from .nodes import Group, Item, render

LOGGER = get_logger(__name__)

DEFAULT_LEDGER_FILE = Path("casino.txt")


def _clean_game_name(name: str) -> str:
    """Validate a game name so it survives a save and load unchanged.

    Line breaks would split the saved entry, and runs of whitespace collapse
    on load, so breaks are rejected and whitespace is normalised here.
    """

    if "\n" in name or "\r" in name:
        raise ValueError("Game names cannot contain line breaks.")
    cleaned = " ".join(name.split())
    if not cleaned:
        raise ValueError("Game names cannot be blank.")
    return cleaned


def _finite_amount(amount: float, label: str) -> float:
    value = float(amount)
    if not math.isfinite(value):
        raise ValueError(f"{label} must be a finite number, got {amount!r}.")
    return value


class LedgerSession:
    """Manage the current revenue tree and its persistence."""

    def __init__(
        self,
        root: Optional[Group] = None,
        ledger_path: Optional[Union[str, Path]] = None,
    ) -> None:
        self._root = root if root is not None else self._build_demo_tree()
        self.ledger_path = Path(ledger_path) if ledger_path else DEFAULT_LEDGER_FILE
        LOGGER.debug(
            "Ledger session initialised with root '%s' and file %s",
            self._root.name,
            self.ledger_path,
        )

    @staticmethod
    def _build_demo_tree() -> Group:
        """Create the default casino tree with zero revenue."""

        root = Group("Casino Games")
        table_games = root.add(Group("Table Games"))
        table_games.add(Item("Blackjack", 0))
        table_games.add(Item("Roulette", 0))
        slot_games = root.add(Group("Slot Games"))
        slot_games.add(Item("Mega Joker", 0))
        return root

    @property
    def root(self) -> Group:
        return self._root

    def display(self) -> List[str]:
        return render(self._root)

    def list_groups(self) -> List[Tuple[int, Group]]:
        """Return the root's child groups numbered by their position."""

        return [
            (number, child)
            for number, child in enumerate(self._root.children, start=1)
            if isinstance(child, Group)
        ]

    def list_items(self) -> List[Tuple[int, Item]]:
        return list(enumerate(self._root.all_items(), start=1))

    def add_item(self, group_number: int, name: str, revenue: float) -> Item:
        """Add a new game to the selected top-level group."""

        name = _clean_game_name(name)
        revenue = _finite_amount(revenue, "Revenue")
        children = self._root.children
        if not 1 <= group_number <= len(children) or not isinstance(
            children[group_number - 1], Group
        ):
            raise KeyError(f"Group {group_number} not found")
        group = children[group_number - 1]
        item = group.add(Item(name, revenue))
        LOGGER.info("Added game '%s' to group '%s'", name, group.name)
        return item

    def add_revenue(self, item_number: int, amount: float) -> Item:
        """Add ``amount`` to the selected game."""

        amount = _finite_amount(amount, "Revenue amount")
        items = self._root.all_items()
        if not 1 <= item_number <= len(items):
            raise KeyError(f"Game {item_number} not found")
        item = items[item_number - 1]
        item.add_revenue(amount)
        LOGGER.info("Added %s revenue to game '%s'", amount, item.name)
        return item

    def save(self, path: Optional[Union[str, Path]] = None) -> bool:
        target = Path(path) if path else self.ledger_path
        saved = storage.save_tree(self._root, target)
        if saved:
            LOGGER.info("Saved ledger to %s", target)
        return saved

    def load(self, path: Optional[Union[str, Path]] = None) -> bool:
        """Replace the current tree with the one stored at ``path``.

        Returns ``False`` when the file is missing or holds no group tree.
        :class:`~gameledger.ledger.codec.LedgerDecodeError` propagates; the
        current tree is kept in every failure case.
        """

        source = Path(path) if path else self.ledger_path
        loaded = storage.load_tree(source)
        if loaded is None:
            return False
        self._root = loaded
        LOGGER.info("Loaded ledger from %s", source)
        return True
