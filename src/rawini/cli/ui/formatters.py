from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from rawini.core.models import RawConfig, RawSection
from rawini.parsers.errors import ParseError


def _short(s: str, max_len: int = 140) -> str:
    s = s or ""
    if len(s) <= max_len:
        return s
    return s[:max_len] + "…"


# ----------------------------
# Check results
# ----------------------------

def render_check_result(
    console: Console,
    path: str,
    err: Optional[ParseError],
) -> None:
    if err is None:
        console.print(Text.assemble(("OK ", "ok"), (path, "path")), soft_wrap=True)
        return
    line = Text()
    line.append("FAIL ", style="err")
    line.append(path, style="path")
    line.append(f": line {err.line}: {err.reason}")
    console.print(line, soft_wrap=True)


def render_read_error(console: Console, path: str, exc: Exception) -> None:
    line = Text()
    line.append("FAIL ", style="err")
    line.append(path, style="path")
    line.append(f": cannot read: {exc}")
    console.print(line, soft_wrap=True)


# ----------------------------
# Section tables
# ----------------------------

@dataclass(frozen=True)
class SectionRenderOptions:
    only: Optional[str] = None        # render just this section ("" = global)
    show_global: bool = True
    max_value_width: int = 120


def _selected(config: RawConfig, opts: SectionRenderOptions) -> List[Tuple[str, RawSection]]:
    if opts.only is not None:
        section = config.global_section if opts.only == "" else config.get_section(opts.only)
        return [(opts.only, section)] if section is not None else []

    out: List[Tuple[str, RawSection]] = []
    if opts.show_global and len(config.global_section):
        out.append(("", config.global_section))
    for name in config.section_names():
        out.append((name, config.sections()[name]))
    return out


def render_section_table(
    console: Console,
    title: str,
    section: RawSection,
    *,
    max_value_width: int = 120,
) -> None:
    table = Table(title=Text(title, style="section"), show_lines=False)
    table.add_column("Property", style="key", no_wrap=True)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Value")

    for prop in section.properties():
        for i, v in enumerate(section.get_property_values(prop), start=1):
            table.add_row(Text(prop if i == 1 else ""), str(i), Text(_short(v, max_value_width)))

    console.print(table)


def render_config(
    console: Console,
    config: RawConfig,
    *,
    opts: Optional[SectionRenderOptions] = None,
) -> None:
    opts = opts or SectionRenderOptions()

    sections = _selected(config, opts)
    if not sections:
        console.print("[muted]No sections.[/muted]")
        return

    for name, section in sections:
        title = f"[{name}]" if name else "(global)"
        if not len(section):
            console.print(Text.assemble((title, "section"), " ", ("(empty)", "muted")))
            continue
        render_section_table(console, title, section, max_value_width=opts.max_value_width)


# ----------------------------
# Machine-readable dumps
# ----------------------------

def render_config_dump(
    console: Console,
    config: RawConfig,
    *,
    fmt: str,
    opts: Optional[SectionRenderOptions] = None,
) -> None:
    opts = opts or SectionRenderOptions()
    data = {name: {k: list(v) for k, v in section.items()} for name, section in _selected(config, opts)}

    if fmt == "json":
        console.out(json.dumps(data, indent=2, ensure_ascii=False), highlight=False)
    elif fmt == "yaml":
        console.out(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), end="", highlight=False)
    else:
        raise ValueError(f"unknown dump format: {fmt}")


def render_values(console: Console, values: Sequence[str]) -> None:
    for v in values:
        console.out(v, highlight=False)
