# src/file_struct_stringer/pipeline/walker.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import FrozenSet, Iterator, Tuple

from file_struct_stringer.models import Entry

logger = logging.getLogger(__name__)

# Build output and VCS/editor metadata, skipped at every depth below the root
IGNORED_DIRS: FrozenSet[str] = frozenset(
    {".git", "node_modules", "target", ".idea", ".vscode"}
)


def is_ignored(name: str, is_dir: bool) -> bool:
    return is_dir and name in IGNORED_DIRS


def _is_dir(dir_entry: os.DirEntry) -> bool:
    # Symlinks are never followed, so a link to a directory counts as a file.
    try:
        return dir_entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def walk(root: Path) -> Iterator[Entry]:
    """
    Recursively yield every entry below `root` (the root itself excluded).

    Ignored directories are dropped together with their subtree. A directory
    that cannot be listed is still yielded, but its children are omitted.
    """
    yield from _walk_dir(root, ())


def _walk_dir(directory: Path, parts: Tuple[str, ...]) -> Iterator[Entry]:
    try:
        with os.scandir(directory) as it:
            dir_entries = list(it)
    except OSError as exc:
        logger.debug("[WALK] Cannot list %s, skipping subtree: %s", directory, exc)
        return

    for dir_entry in dir_entries:
        is_dir = _is_dir(dir_entry)
        if is_ignored(dir_entry.name, is_dir):
            logger.debug("[WALK] Skipping ignored directory %s", dir_entry.path)
            continue

        path = directory / dir_entry.name
        entry_parts = parts + (dir_entry.name,)
        yield Entry(path=path, parts=entry_parts, is_dir=is_dir)

        if is_dir:
            yield from _walk_dir(path, entry_parts)
