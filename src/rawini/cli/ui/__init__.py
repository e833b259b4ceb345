from __future__ import annotations

import sys
from dataclasses import dataclass

from loguru import logger
from rich.console import Console
from rich.theme import Theme

from rawini.cli.ui.formatters import (
    SectionRenderOptions,
    render_check_result,
    render_config,
    render_config_dump,
    render_read_error,
    render_section_table,
    render_values,
)

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "err": "bold red",
        "muted": "dim",
        "path": "cyan",
        "section": "bold magenta",
        "key": "bold",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("rawini")
    return UI(console=Console(theme=THEME), verbose=verbose)


__all__ = [
    "SectionRenderOptions",
    "THEME",
    "UI",
    "get_ui",
    "render_check_result",
    "render_config",
    "render_config_dump",
    "render_read_error",
    "render_section_table",
    "render_values",
]
