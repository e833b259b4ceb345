from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from rawini.cli.ui import get_ui, render_check_result, render_read_error, render_values
from rawini.core.errors import ExitCode
from rawini.parsers import parse_file


def get_cmd(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="INI file to read."),
    key: str = typer.Argument(..., help="Property name."),
    section: Optional[str] = typer.Option(
        None, "--section", "-s", help="Section to read from (default: global)."
    ),
    number: bool = typer.Option(
        False, "--number", help="Print all values joined as one number-shaped string."
    ),
    encoding: str = typer.Option("utf-8", "--encoding", help="Text encoding of the file."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Print the values of one property, one per line."""
    ui = get_ui(verbose=verbose)
    console = ui.console

    try:
        config, err = parse_file(file, encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        render_read_error(console, str(file), e)
        raise typer.Exit(code=int(ExitCode.ERROR))
    if err is not None:
        render_check_result(console, str(file), err)
        raise typer.Exit(code=int(ExitCode.ERROR))

    target = config.global_section if section is None else config.get_section(section)
    if target is None:
        console.print(f"[warn]No section named {escape(repr(section))}.[/warn]")
        raise typer.Exit(code=int(ExitCode.NOT_FOUND))

    if key not in target:
        console.print(f"[warn]No property named {escape(repr(key))}.[/warn]")
        raise typer.Exit(code=int(ExitCode.NOT_FOUND))

    if number:
        render_values(console, [target.get_property_number(key)])
    else:
        render_values(console, target.get_property_values(key))
    raise typer.Exit(code=int(ExitCode.OK))
