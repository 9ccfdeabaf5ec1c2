"""Workspace configuration support for the QuickReact CLI."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_FILE_NAMES = ("quickreact.toml", ".quickreactrc")


class ConfigError(ValueError):
    """Raised when a workspace configuration file cannot be read."""

    code = "CONFIG_ERROR"

    def __init__(self, message: str, *, path: Optional[Path] = None, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.hint = hint


@dataclass
class OutputLayout:
    """Where generated files go, relative to the output directory."""

    out_dir: Optional[Path] = None
    components_dir: str = "components"
    images_dir: str = "images"
    assets_dir: str = "assets"
    index_file: str = "index_qr.js"
    app_file: str = "App_qr.js"
    component_file: str = "index.js"
    confirm_overwrite: bool = True

    def component_path(self, name: str) -> str:
        return f"{self.components_dir}/{name}/{self.component_file}"

    @property
    def scaffold_dirs(self) -> tuple:
        return (self.components_dir, self.images_dir, self.assets_dir)


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    layout: OutputLayout = field(default_factory=OutputLayout)
    path: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    def is_default(self) -> bool:
        return self.path is None


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Invalid JSON in {path.name}: {exc.msg} (line {exc.lineno})",
            path=path,
        ) from exc
    if not isinstance(data, dict):
        raise ConfigError(
            f"{path.name} must hold a JSON object.",
            path=path,
            hint='Wrap the settings in braces, e.g. {"output": {"out_dir": "web"}}.',
        )
    return data


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path.name}: {exc}", path=path) from exc


def _section(data: Dict[str, Any], name: str, path: Optional[Path]) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"The [{name}] section must be a table.",
            path=path,
            hint=f"Write it as [{name}] followed by key = value lines.",
        )
    return section


def _read_flag(section: Dict[str, Any], key: str, default: bool, path: Optional[Path]) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(
            f"{key} must be true or false, not {value!r}.",
            path=path,
            hint=f"Write {key} = true or {key} = false without quotes.",
        )
    return value


def _parse_layout(data: Dict[str, Any], root: Path, path: Optional[Path]) -> OutputLayout:
    files_section = _section(data, "files", path)
    output_section = _section(data, "output", path)
    defaults = OutputLayout()

    out_dir: Optional[Path] = None
    if output_section.get("out_dir"):
        out_dir = Path(str(output_section["out_dir"]))
        if not out_dir.is_absolute():
            out_dir = (root / out_dir).resolve()

    return OutputLayout(
        out_dir=out_dir,
        components_dir=str(output_section.get("components_dir") or defaults.components_dir),
        images_dir=str(output_section.get("images_dir") or defaults.images_dir),
        assets_dir=str(output_section.get("assets_dir") or defaults.assets_dir),
        index_file=str(output_section.get("index_file") or defaults.index_file),
        app_file=str(output_section.get("app_file") or defaults.app_file),
        component_file=str(output_section.get("component_file") or defaults.component_file),
        confirm_overwrite=_read_flag(files_section, "confirm_overwrite", defaults.confirm_overwrite, path),
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    """
    Load ``quickreact.toml`` or ``.quickreactrc`` from ``root``.

    A missing file yields the default layout. ``explicit`` overrides the
    lookup; TOML is used for ``.toml`` files and JSON for everything else.

    Raises:
        ConfigError: If the file cannot be parsed or holds values of the wrong type
    """
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return WorkspaceConfig(root=root)

    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)

    return WorkspaceConfig(
        root=root,
        layout=_parse_layout(data, root, config_path),
        path=config_path,
        raw=data,
    )


__all__ = [
    "CONFIG_FILE_NAMES",
    "ConfigError",
    "OutputLayout",
    "WorkspaceConfig",
    "load_workspace_config",
    "locate_config_file",
]
