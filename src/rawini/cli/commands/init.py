from __future__ import annotations

from pathlib import Path

import typer

from rawini.cli.ui import get_ui
from rawini.cli.utils.files import ensure_dir, write_file

DEFAULT_CONFIG_TOML = """\
[output]
# table, json or yaml
format = "table"
# long values are cut to this many characters in tables
max_value_width = 120
# include properties declared before the first [section]
show_global = true
"""


def init_cmd(
    path: Path = typer.Argument(
        Path("."), file_okay=False, help="Directory to create .rawini/config.toml in."
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config."),
) -> None:
    """Write a default .rawini/config.toml."""
    ui = get_ui()

    cfg_dir = path.resolve() / ".rawini"
    ensure_dir(cfg_dir)
    cfg_path = cfg_dir / "config.toml"

    if write_file(cfg_path, DEFAULT_CONFIG_TOML, force=force):
        ui.console.print(f"[ok]Wrote[/ok] [path]{cfg_path}[/path]")
    else:
        ui.console.print(f"[muted]{cfg_path} exists (use --force to overwrite).[/muted]")
