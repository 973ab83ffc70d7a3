"""Configuration loading utilities."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Final, Mapping

import yaml

from ..interfaces.config import DEFAULT_HEIGHT, DEFAULT_MAX_TEMP_FILES, DEFAULT_WIDTH, SessionConfig
from .paths import project_root

_CONFIG_ENV: Final[str] = "PLOTPIPE_CONFIG"


def _default_config_path() -> Path:
    override = os.getenv(_CONFIG_ENV)
    if override:
        return Path(override)
    return project_root() / "config.yml"


def config_from_mapping(raw: Mapping[str, Any]) -> SessionConfig:
    """Build a :class:`SessionConfig` from the ``plotpipe`` section of a mapping."""

    section = raw.get("plotpipe", {}) or {}
    tmp_dir = section.get("tmp_dir")
    return SessionConfig(
        executable=str(section.get("executable", "gnuplot")),
        tmp_dir=Path(tmp_dir).expanduser() if tmp_dir else None,
        terminal=str(section.get("terminal", "wxt")),
        width=int(section.get("width", DEFAULT_WIDTH)),
        height=int(section.get("height", DEFAULT_HEIGHT)),
        max_temp_files=int(section.get("max_temp_files", DEFAULT_MAX_TEMP_FILES)),
        require_display=bool(section.get("require_display", False)),
        hardcopy_terminal=str(section.get("hardcopy_terminal", "postscript")),
        echo=bool(section.get("echo", False)),
    )


def load_config(path: str | Path | None = None) -> SessionConfig:
    """Load session configuration from YAML.

    Args:
        path: Optional path override. Defaults to ``$PLOTPIPE_CONFIG`` or
            ``<project_root>/config.yml``.

    Returns:
        A :class:`~plotpipe.interfaces.config.SessionConfig`. When no explicit
        path is given and the default file does not exist, the built-in
        defaults are returned.
    """

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found at {config_path}")
    else:
        config_path = _default_config_path()
        if not config_path.exists():
            return SessionConfig()

    with config_path.open("r", encoding="utf-8") as handle:
        raw: Mapping[str, Any] = yaml.safe_load(handle) or {}

    return config_from_mapping(raw)
