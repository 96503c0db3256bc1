"""Mini README: File-backed line source and sink for ledger trees.

Structure:
    * read_lines - read a text file into lines, ``None`` when unavailable.
    * write_lines - write lines to a text file, reporting success.
    * load_tree / save_tree - combine the file helpers with the text codec.

Missing or unreadable files are an expected condition (the first run has no
ledger yet), so they are logged and reported through return values instead of
exceptions. Decode errors from the codec still propagate to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from .ledger.codec import decode, encode
from .ledger.nodes import Group
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


def read_lines(path: PathLike) -> Optional[List[str]]:
    """Return the lines of ``path`` without line endings, or ``None``."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as error:
        LOGGER.warning("Ledger source %s is unavailable: %s", path, error)
        return None
    return text.splitlines()


def write_lines(path: PathLike, lines: Iterable[str]) -> bool:
    """Write each line newline-terminated to ``path``."""

    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="\n") as handle:
            for line in lines:
                handle.write(f"{line}\n")
    except OSError as error:
        LOGGER.error("Could not write ledger to %s: %s", target, error)
        return False
    return True


def load_tree(path: PathLike) -> Optional[Group]:
    """Load a ledger tree, returning ``None`` when no group tree is available."""

    lines = read_lines(path)
    if lines is None:
        return None
    root = decode(lines)
    if not isinstance(root, Group):
        LOGGER.warning("Ledger source %s does not start with a group", path)
        return None
    LOGGER.debug("Loaded ledger %s with %s games", path, len(root.all_items()))
    return root


def save_tree(root: Group, path: PathLike) -> bool:
    """Encode ``root`` and write it to ``path``."""

    return write_lines(path, encode(root))
