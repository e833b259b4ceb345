from __future__ import annotations

import typer
from rich.console import Console

from rawini import __version__
from rawini.cli.commands.check import check_cmd
from rawini.cli.commands.get import get_cmd
from rawini.cli.commands.init import init_cmd
from rawini.cli.commands.show import show_cmd

app = typer.Typer(
    name="rawini",
    help="Check, inspect and query INI-style configuration files.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"rawini {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback
    ),
) -> None:
    pass


app.command("check")(check_cmd)
app.command("show")(show_cmd)
app.command("get")(get_cmd)
app.command("init")(init_cmd)
