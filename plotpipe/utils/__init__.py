"""Shared utilities for paths, configuration, and console output.

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

paths.py:
    project_root() → project absolute path
    resolve_executable(name) → full path of a program (working dir, then PATH)
    find_program_path(name) → directory holding the program, or None
    Every call returns a fresh value; nothing is cached between lookups.

config.py:
    load_config(path=None) → SessionConfig from YAML
    Reads the ``plotpipe:`` section of config.yml (or $PLOTPIPE_CONFIG)
    Falls back to defaults when the default file is absent

console.py:
    console - shared Rich console on stderr
    warn(message, target=None) → yellow warning line

===================================================================================
USAGE PATTERNS
===================================================================================

from plotpipe.utils.config import load_config
config = load_config()
print(f"Terminal: {config.terminal} {config.width}x{config.height}")

from plotpipe.utils.paths import find_program_path
print(find_program_path("gnuplot"))

===================================================================================
"""

from .config import config_from_mapping, load_config
from .console import console, warn
from .paths import find_program_path, project_root, resolve_executable

__all__ = [
    "project_root",
    "find_program_path",
    "resolve_executable",
    "load_config",
    "config_from_mapping",
    "console",
    "warn",
]
