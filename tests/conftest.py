# tests/conftest.py
from pathlib import Path

import pytest


def make_files(root: Path, rel_paths):
    """Create empty files (and their parent folders) under root."""
    for rel in rel_paths:
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.touch()
    return root


@pytest.fixture
def make_tree():
    return make_files


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """
    A small project with a couple of ignored directories mixed in.
    """
    root = tmp_path / "project"
    make_files(
        root,
        [
            "a.txt",
            "b.txt",
            "docs/readme.md",
            "src/main.rs",
            "src/lib.RS",
            "src/util/helper.rs",
            "node_modules/pkg/index.js",
            ".git/config",
            "src/target/debug/out.rs",
        ],
    )
    return root
