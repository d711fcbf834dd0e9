# src/file_struct_stringer/pipeline/filters.py
from __future__ import annotations

from typing import Optional

from file_struct_stringer.models import Entry, TreeOptions


def file_extension(name: str) -> Optional[str]:
    """
    Text after the final dot, or None if there is none.
    A dotfile such as ".bashrc" has no extension; "notes." has the empty one.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def should_include(entry: Entry, options: TreeOptions) -> bool:
    # Directories are always kept, even when nothing below them matches.
    if entry.is_dir:
        return True

    if options.folders_only:
        return False

    if options.extensions is not None:
        ext = file_extension(entry.name)
        if ext is None:
            return False
        return ext.lower() in options.extensions

    return True
