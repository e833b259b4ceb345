from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from rawini.cli.ui import (
    SectionRenderOptions,
    get_ui,
    render_check_result,
    render_config,
    render_config_dump,
    render_read_error,
)
from rawini.core.config import load_cli_config
from rawini.core.errors import ExitCode
from rawini.parsers import RawConfigParser


def show_cmd(
    files: List[Path] = typer.Argument(
        ..., exists=True, dir_okay=False, help="Files to merge into one document, in order."
    ),
    section: Optional[str] = typer.Option(
        None, "--section", "-s", help="Only show this section ('' for the global one)."
    ),
    fmt: Optional[str] = typer.Option(
        None, "--format", "-f", help="table, json or yaml (overrides config if set)."
    ),
    encoding: str = typer.Option("utf-8", "--encoding", help="Text encoding of the files."),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output."),
) -> None:
    """Merge files into one document and print its sections."""
    ui = get_ui(verbose=verbose)
    console = ui.console

    cli_overrides = {"output": {}}
    if fmt is not None:
        cli_overrides["output"]["format"] = fmt

    try:
        loaded_cfg = load_cli_config(start_dir=Path.cwd(), cli_overrides=cli_overrides)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    out_cfg = loaded_cfg.output

    if ui.verbose:
        console.print("[bold]Config sources:[/bold]")
        console.print(f"  global: {loaded_cfg.global_path or '-'}")
        console.print(f"  repo:   {loaded_cfg.repo_path or '-'}")
        console.print()

    cp = RawConfigParser(encoding=encoding)
    for path in files:
        try:
            if cp.parse_file(path) is not None:
                break
        except (OSError, UnicodeDecodeError) as e:
            cp.finish()
            render_read_error(console, str(path), e)
            raise typer.Exit(code=int(ExitCode.ERROR))
    config, err = cp.finish()
    if err is not None:
        render_check_result(console, err.source or "-", err)
        raise typer.Exit(code=int(ExitCode.ERROR))

    if section not in (None, "") and config.get_section(section) is None:
        console.print(f"[warn]No section named {escape(repr(section))}.[/warn]")
        raise typer.Exit(code=int(ExitCode.NOT_FOUND))

    opts = SectionRenderOptions(
        only=section,
        show_global=out_cfg.show_global,
        max_value_width=out_cfg.max_value_width,
    )
    if out_cfg.format == "table":
        render_config(console, config, opts=opts)
    else:
        render_config_dump(console, config, fmt=out_cfg.format, opts=opts)

    raise typer.Exit(code=int(ExitCode.OK))
