from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


# Project-local config (closest one wins)
DEFAULT_REPO_CONFIG_FILES = (".rawini/config.toml",)

# Per-user config
DEFAULT_GLOBAL_CONFIG_FILES = (
    "~/.config/rawini/config.toml",
    "~/.rawini/config.toml",
)


class OutputConfig(BaseModel):
    format: Literal["table", "json", "yaml"] = "table"
    max_value_width: int = Field(default=120, ge=10)
    show_global: bool = True


def _read_toml(path: Path) -> Dict[str, Any]:
    return tomllib.loads(path.read_text(encoding="utf-8"))


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def find_repo_config(start_dir: Path) -> Optional[Path]:
    """
    Walk upward to find a project-local config.
    Finds the closest config in parent chain.
    """
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        for rel in DEFAULT_REPO_CONFIG_FILES:
            p = parent / rel
            if p.is_file():
                return p.resolve()
    return None


def find_global_config() -> Optional[Path]:
    for raw in DEFAULT_GLOBAL_CONFIG_FILES:
        p = Path(raw).expanduser()
        if p.is_file():
            return p.resolve()
    return None


@dataclass(frozen=True)
class LoadedConfig:
    output: OutputConfig
    global_path: Optional[Path]
    repo_path: Optional[Path]


def load_cli_config(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedConfig:
    """
    Precedence (lowest -> highest):
      defaults (OutputConfig) ->
      global config ->
      repo config (closest) ->
      cli_overrides
    """
    cli_overrides = cli_overrides or {}

    global_path = find_global_config()
    repo_path = find_repo_config(start_dir)

    merged: Dict[str, Any] = {}

    if global_path:
        merged = _deep_merge(merged, _read_toml(global_path))

    if repo_path:
        merged = _deep_merge(merged, _read_toml(repo_path))

    # CLI overrides are expected to be in the same shape as TOML (namespaced)
    merged = _deep_merge(merged, cli_overrides)

    output_dict = merged.get("output") or {}
    if not isinstance(output_dict, dict):
        output_dict = {}

    return LoadedConfig(
        output=OutputConfig.model_validate(output_dict),
        global_path=global_path,
        repo_path=repo_path,
    )
