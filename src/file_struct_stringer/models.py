# src/file_struct_stringer/models.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Entry:
    """
    One filesystem entry found under the root.
    `parts` are the path components relative to the root, used for sorting and sibling lookups.
    """

    path: Path
    parts: Tuple[str, ...]
    is_dir: bool

    @property
    def name(self) -> str:
        return self.parts[-1]

    @property
    def depth(self) -> int:
        return len(self.parts) - 1

    @property
    def parent_parts(self) -> Tuple[str, ...]:
        return self.parts[:-1]


@dataclass(frozen=True)
class TreeOptions:
    folders_only: bool = False
    # None means no extension filtering at all
    extensions: Optional[FrozenSet[str]] = None
    dash_count: int = 2

    @classmethod
    def from_cli(
        cls,
        folders_only: bool = False,
        formats: Optional[Iterable[str]] = None,
        dashes: int = 2,
    ) -> TreeOptions:
        """
        Build options from raw CLI values. Each format value may hold several
        comma-separated extensions, e.g. "rs,toml".
        """
        if dashes < 0:
            raise ValueError(f"dash count must be >= 0, got {dashes}")

        extensions = None
        if formats is not None:
            extensions = frozenset(
                ext
                for value in formats
                for ext in (normalize_extension(item) for item in value.split(","))
                if ext
            )

        return cls(folders_only=folders_only, extensions=extensions, dash_count=dashes)


def normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if ext.startswith("."):
        ext = ext[1:]
    return ext
