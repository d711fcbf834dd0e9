# src/file_struct_stringer/pipeline/tree.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from file_struct_stringer.models import Entry, TreeOptions
from file_struct_stringer.pipeline.filters import should_include
from file_struct_stringer.pipeline.render import render_lines
from file_struct_stringer.pipeline.walker import walk

logger = logging.getLogger(__name__)


def sort_entries(entries: Iterable[Entry]) -> List[Entry]:
    # Component-wise order keeps every subtree contiguous ("a/b" before "a-c").
    return sorted(entries, key=lambda e: e.parts)


def collect_entries(root: Path, options: TreeOptions) -> List[Entry]:
    """
    Walk -> filter -> sort. Returns the entry list the renderer works from.
    """
    included = [e for e in walk(root) if should_include(e, options)]
    logger.debug("[TREE] %d entries passed the filter under %s", len(included), root)
    return sort_entries(included)


def display_tree(root: Union[str, Path], options: TreeOptions) -> List[str]:
    """
    Run the whole pipeline. `root` is kept as given for the header line.
    """
    entries = collect_entries(Path(root), options)
    return render_lines(root, entries, options.dash_count)
