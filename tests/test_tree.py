from pathlib import Path

from file_struct_stringer.models import Entry, TreeOptions
from file_struct_stringer.pipeline.tree import collect_entries, display_tree, sort_entries


def _entry(rel: str) -> Entry:
    parts = tuple(rel.split("/"))
    return Entry(path=Path(rel), parts=parts, is_dir=False)


def test_sort_is_component_wise():
    entries = [_entry("a-c"), _entry("a/b"), _entry("B"), _entry("a")]
    assert [e.parts for e in sort_entries(entries)] == [
        ("B",),
        ("a",),
        ("a", "b"),
        ("a-c",),
    ]


def test_line_count_matches_included_entries(project: Path):
    for options in (
        TreeOptions(),
        TreeOptions(folders_only=True),
        TreeOptions.from_cli(formats=["rs"]),
    ):
        entries = collect_entries(project, options)
        lines = display_tree(project, options)
        assert len(lines) - 1 == len(entries)


def test_node_modules_never_shown(project: Path, make_tree):
    make_tree(project, ["deep/er/node_modules/x.rs"])
    for options in (TreeOptions(), TreeOptions.from_cli(formats=["js", "rs"])):
        assert not any("node_modules" in line for line in display_tree(project, options))


def test_extension_filter_only_shows_matching_files(project: Path):
    entries = collect_entries(project, TreeOptions.from_cli(formats=["rs"]))
    files = [e for e in entries if not e.is_dir]
    assert files
    assert all(e.name.lower().endswith(".rs") for e in files)
    assert ("docs",) in [e.parts for e in entries]
    assert not any(e.parts[0] == "docs" and len(e.parts) > 1 for e in entries)
