"""Mini README: Revenue tree model, text codec, and session helpers.

The ``nodes`` module defines the two node variants (games and groups), the
``codec`` module converts trees to and from indented text lines, and the
``session`` module keeps the tree an operator is currently working on.
"""

from .codec import LedgerDecodeError, decode, encode, line_depth, parse_node
from .nodes import Group, Item, Node, format_value, new_group, new_item, render
from .session import LedgerSession

__all__ = [
    "Group",
    "Item",
    "LedgerDecodeError",
    "LedgerSession",
    "Node",
    "decode",
    "encode",
    "format_value",
    "line_depth",
    "new_group",
    "new_item",
    "parse_node",
    "render",
]
