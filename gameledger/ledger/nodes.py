"""Mini README: Tree model for the revenue ledger.

Structure:
    * Item - leaf entry (a game) holding a mutable revenue value.
    * Group - composite owning an ordered list of child nodes.
    * Node - union alias covering both variants.
    * new_item / new_group - constructors used by callers and the codec.
    * render - human readable nested display with computed totals.
    * format_value - shared number formatting for display and the text format.

A group never stores its revenue: every ``revenue()`` call walks the subtree
depth-first, left-to-right, so mutations made after construction are always
reflected. Children are owned by exactly one group and are never shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union


def format_value(value: float) -> str:
    """Format a revenue value so it can be parsed back with ``float``.

    Whole numbers drop their fractional part (``50`` rather than ``50.0``),
    everything else uses the shortest repr that round-trips.
    """

    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(slots=True)
class Item:
    """Leaf node with a name and a revenue value."""

    name: str
    value: float = 0.0

    def __post_init__(self) -> None:
        self.value = float(self.value)

    def is_group(self) -> bool:
        return False

    def revenue(self) -> float:
        return self.value

    def add_revenue(self, amount: float) -> None:
        """Add ``amount`` (which may be negative) to the stored value."""

        self.value += float(amount)

    def as_dict(self) -> Dict[str, object]:
        return {"type": "game", "name": self.name, "revenue": self.value}


@dataclass(slots=True)
class Group:
    """Composite node whose revenue is the sum of its children."""

    name: str
    children: List["Node"] = field(default_factory=list)

    def is_group(self) -> bool:
        return True

    def add(self, child: "Node") -> "Node":
        """Append ``child`` and take ownership of it."""

        self.children.append(child)
        return child

    def revenue(self) -> float:
        total = 0.0
        for child in self.children:
            total += child.revenue()
        return total

    def all_items(self) -> List[Item]:
        """Return every leaf below this group, depth-first, left-to-right."""

        items: List[Item] = []
        for child in self.children:
            if isinstance(child, Group):
                items.extend(child.all_items())
            else:
                items.append(child)
        return items

    def as_dict(self) -> Dict[str, object]:
        return {
            "type": "group",
            "name": self.name,
            "revenue": self.revenue(),
            "children": [child.as_dict() for child in self.children],
        }


Node = Union[Item, Group]


def new_item(name: str, value: float = 0.0) -> Item:
    return Item(name=name, value=value)


def new_group(name: str) -> Group:
    return Group(name=name)


def render(node: Node, indent: int = 0) -> List[str]:
    """Return display lines for ``node`` nested at ``indent`` levels."""

    prefix = "  " * indent
    if isinstance(node, Group):
        lines = [f"{prefix}----- {node.name} -----"]
        for child in node.children:
            lines.extend(render(child, indent + 1))
        lines.append(f"{prefix}Total: {format_value(node.revenue())}")
        return lines
    return [f"{prefix}{node.name} | Revenue: {format_value(node.revenue())}"]
