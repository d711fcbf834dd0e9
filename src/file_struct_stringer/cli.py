# src/file_struct_stringer/cli.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from file_struct_stringer.logging_config import setup_logging
from file_struct_stringer.models import TreeOptions
from file_struct_stringer.pipeline.render import display_name
from file_struct_stringer.pipeline.tree import display_tree

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Convert folder structures into readable text format",
    add_completion=False,
)


@app.command()
def main(
    path: Annotated[str, typer.Argument(help="Target directory to display.")] = ".",
    folders_only: Annotated[
        bool,
        typer.Option("--folders-only", "-f", help="List only folders, no files."),
    ] = False,
    formats: Annotated[
        Optional[List[str]],
        typer.Option(
            "--format",
            "-e",
            help='Filter by file extensions, comma-separated (e.g. "rs,toml").',
        ),
    ] = None,
    dashes: Annotated[
        int,
        typer.Option(
            "--dashes", "-d", min=0, help="Number of dashes in branch characters."
        ),
    ] = 2,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose (DEBUG) logging")
    ] = False,
    log_dir: Annotated[
        Optional[Path], typer.Option(help="Also write the log to this directory.")
    ] = None,
):
    """
    Print the directory tree under PATH.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    setup_logging(log_dir=log_dir, level=level)

    if not Path(path).exists():
        typer.echo(f"Error: Path '{display_name(path)}' does not exist", err=True)
        raise typer.Exit(code=1)

    options = TreeOptions.from_cli(
        folders_only=folders_only, formats=formats or None, dashes=dashes
    )
    logger.debug("[CLI] Rendering %s with %s", path, options)

    for line in display_tree(path, options):
        typer.echo(line)


if __name__ == "__main__":
    app()
