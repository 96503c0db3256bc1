"""Mini README: Indented text format for saving and loading ledger trees.

Structure:
    * encode - turn a tree into ordered lines (``GROUP`` / ``GAME`` tags).
    * decode - parse one tree from a list of lines.
    * parse_node - recursive-descent step taking and returning the cursor.
    * line_depth - count the two-space indentation units of a line.
    * LedgerDecodeError - raised when a ``GAME`` value is not a number.

Format::

    GROUP Casino Games
      GROUP Table Games
        GAME Blackjack 100.5
      GAME Mega Joker 50

Each level of nesting adds two spaces. Blank lines are ignored on read and
never written. A ``GAME`` line's last whitespace token is the value and the
tokens before it form the name. Lines that match no tag, ``GAME`` lines with
no value, and lines nested deeper than their parent allows are skipped so a
damaged file still yields the rest of the tree.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..logging_utils import get_logger
from .nodes import Group, Item, Node, format_value

LOGGER = get_logger(__name__)

INDENT = "  "
GROUP_TAG = "GROUP "
GAME_TAG = "GAME "


class LedgerDecodeError(ValueError):
    """A ``GAME`` line carried a value that cannot be parsed as a number."""

    def __init__(self, line_number: int, line: str, token: str) -> None:
        super().__init__(f"Line {line_number}: revenue value {token!r} is not a number")
        self.line_number = line_number
        self.line = line
        self.token = token


def encode(root: Node) -> List[str]:
    """Return the text lines describing ``root`` and its subtree."""

    lines: List[str] = []
    _encode_into(root, 0, lines)
    return lines


def _encode_into(node: Node, depth: int, lines: List[str]) -> None:
    prefix = INDENT * depth
    if isinstance(node, Group):
        lines.append(f"{prefix}{GROUP_TAG}{node.name}")
        for child in node.children:
            _encode_into(child, depth + 1, lines)
    else:
        lines.append(f"{prefix}{GAME_TAG}{node.name} {format_value(node.value)}")


def line_depth(line: str) -> int:
    """Count leading two-space units; a trailing odd space is not a level."""

    depth = 0
    while line.startswith(INDENT, depth * 2):
        depth += 1
    return depth


def _clean(line: str) -> str:
    return line.rstrip("\r\n")


def _is_blank(line: str) -> bool:
    return not line.strip()


def _skip_blank(lines: Sequence[str], index: int) -> int:
    while index < len(lines) and _is_blank(lines[index]):
        index += 1
    return index


def parse_node(lines: Sequence[str], index: int = 0) -> Tuple[Optional[Node], int]:
    """Parse the node starting at ``index``.

    Returns the node (or ``None`` when the line holds nothing usable) together
    with the index of the first line not consumed.
    """

    index = _skip_blank(lines, index)
    if index >= len(lines):
        return None, index

    line = _clean(lines[index])
    depth = line_depth(line)
    payload = line[len(INDENT) * depth :]

    if payload.startswith(GROUP_TAG):
        group = Group(name=payload[len(GROUP_TAG) :])
        index += 1
        while True:
            index = _skip_blank(lines, index)
            if index >= len(lines):
                break
            next_depth = line_depth(_clean(lines[index]))
            if next_depth <= depth:
                break
            if next_depth == depth + 1:
                child, index = parse_node(lines, index)
                if child is not None:
                    group.add(child)
            else:
                LOGGER.debug("Skipping orphaned line %s at depth %s", index + 1, next_depth)
                index += 1
        return group, index

    if payload.startswith(GAME_TAG):
        tokens = payload[len(GAME_TAG) :].split()
        if len(tokens) >= 2:
            try:
                value = float(tokens[-1])
            except ValueError as error:
                raise LedgerDecodeError(index + 1, line, tokens[-1]) from error
            return Item(name=" ".join(tokens[:-1]), value=value), index + 1

    LOGGER.debug("Skipping unparseable line %s: %r", index + 1, line)
    return None, index + 1


def decode(lines: Sequence[str]) -> Optional[Node]:
    """Parse a single tree starting at the first line.

    Returns ``None`` when the input holds no usable first node. Raises
    :class:`LedgerDecodeError` on a malformed ``GAME`` value; no partially
    built tree escapes in that case.
    """

    node, _ = parse_node(lines, 0)
    return node
