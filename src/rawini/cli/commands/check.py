from __future__ import annotations

from pathlib import Path
from typing import List

import typer

from rawini.cli.ui import get_ui, render_check_result, render_read_error
from rawini.core.errors import ExitCode
from rawini.parsers import RawConfigParser


def check_cmd(
    files: List[Path] = typer.Argument(
        ..., exists=True, dir_okay=False, help="Files to check (each parsed on its own)."
    ),
    encoding: str = typer.Option("utf-8", "--encoding", help="Text encoding of the files."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Parse each file on its own and report the first error per file."""
    ui = get_ui(verbose=verbose)

    cp = RawConfigParser(encoding=encoding)
    failed = 0
    for path in files:
        try:
            cp.parse_file(path)
        except (OSError, UnicodeDecodeError) as e:
            cp.finish()
            render_read_error(ui.console, str(path), e)
            failed += 1
            continue
        _, err = cp.finish()
        render_check_result(ui.console, str(path), err)
        if err is not None:
            failed += 1

    if failed:
        raise typer.Exit(code=int(ExitCode.ERROR))
    raise typer.Exit(code=int(ExitCode.OK))
