# src/file_struct_stringer/pipeline/render.py
from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import Dict, List, Sequence, Tuple, Union

from file_struct_stringer.models import Entry

logger = logging.getLogger(__name__)

CORNER = "└"
TEE = "├"
HORIZONTAL = "─"
VERTICAL_SEGMENT = "│   "
BLANK_SEGMENT = "    "


class SiblingIndex:
    """
    Answers "is this the last entry under its parent" for a sorted entry list.

    Both the branch glyph of an entry and the vertical bars of its ancestors
    go through `is_last`, so the two can never disagree.
    """

    def __init__(self, entries: Sequence[Entry]):
        self._last_child: Dict[Tuple[str, ...], Tuple[str, ...]] = {}
        for entry in entries:
            # later entries overwrite earlier ones, leaving the last in sort order
            self._last_child[entry.parent_parts] = entry.parts

    def is_last(self, parts: Tuple[str, ...]) -> bool:
        return self._last_child.get(parts[:-1]) == parts


def display_name(name: str) -> str:
    """
    Printable form of a file name. Bytes that are not valid UTF-8 (kept as
    surrogate escapes by the OS layer) become U+FFFD.
    """
    return os.fsencode(name).decode("utf-8", "replace")


def root_label(root: Union[str, os.PathLike]) -> str:
    # ".", "/", "foo/.." have no final component; fall back to the path as given
    raw = os.fspath(root)
    name = PurePath(raw).name
    if not name or name == "..":
        return display_name(raw)
    return display_name(name)


def branch(is_last: bool, dash_count: int) -> str:
    return (CORNER if is_last else TEE) + HORIZONTAL * dash_count


def indent_prefix(entry: Entry, siblings: SiblingIndex) -> str:
    segments = []
    for d in range(entry.depth):
        ancestor = entry.parts[: d + 1]
        open_ancestor = not siblings.is_last(ancestor)
        segments.append(VERTICAL_SEGMENT if open_ancestor else BLANK_SEGMENT)
    return "".join(segments)


def format_entry(entry: Entry, siblings: SiblingIndex, dash_count: int) -> str:
    prefix = indent_prefix(entry, siblings)
    glyph = branch(siblings.is_last(entry.parts), dash_count)
    suffix = "/" if entry.is_dir else ""
    return f"{prefix}{glyph} {display_name(entry.name)}{suffix}"


def render_lines(
    root: Union[str, os.PathLike], entries: Sequence[Entry], dash_count: int = 2
) -> List[str]:
    """
    Render the root header plus one line per entry.
    `entries` must already be filtered and sorted by path components.
    """
    siblings = SiblingIndex(entries)
    lines = [f"{root_label(root)}/"]
    lines.extend(format_entry(entry, siblings, dash_count) for entry in entries)
    logger.debug("[RENDER] Rendered %d entries under %s", len(entries), root)
    return lines
