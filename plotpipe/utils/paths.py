"""Utility helpers for resolving the project root and external executables."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from ..interfaces.errors import ExecutableNotFound

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def project_root() -> Path:
    """Return the absolute path to the project root directory."""

    return _PROJECT_ROOT


def _local_executable(name: str) -> Path | None:
    candidate = Path.cwd() / name
    if candidate.is_file() and os.access(candidate, os.X_OK):
        return candidate
    return None


def resolve_executable(name: str) -> Path:
    """Return the full path of ``name``, searching the working directory then ``PATH``.

    Args:
        name: Bare program name, e.g. ``"gnuplot"``.

    Returns:
        Absolute ``Path`` to the executable.

    Raises:
        ExecutableNotFound: If the program is not found anywhere.
    """

    if os.sep in name or (os.altsep and os.altsep in name):
        raise ExecutableNotFound(f"Expected a bare program name, got '{name}'")
    local = _local_executable(name)
    if local is not None:
        return local.resolve()
    found = shutil.which(name)
    if found is None:
        raise ExecutableNotFound(f"Cannot find {name} in your PATH, check `which {name}`")
    return Path(found).resolve()


def find_program_path(name: str) -> Path | None:
    """Return the directory holding the executable ``name``, or ``None``."""

    try:
        return resolve_executable(name).parent
    except ExecutableNotFound:
        return None
