"""Shared interfaces for gnuplot sessions.

===================================================================================
OVERVIEW
===================================================================================
This package defines the contract between the session, its serializers, and
callers via:
  - Dataclasses for configuration and points
  - A Protocol for callback-driven point producers
  - The error taxonomy raised by every session operation

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

config.py:
    SessionConfig - Immutable configuration dataclass
    Fields:
      - executable: str (looked up on PATH)
      - tmp_dir: Path | None (system temp dir when None)
      - terminal: str, width: int, height: int
      - max_temp_files: int
      - require_display: bool
      - hardcopy_terminal: str
      - echo: bool

points.py:
    Point - (x, y, z) carrier
    PointSource (Protocol) - point_at(index, count) → Point
    CallbackPointSource - adapts a plain callable to PointSource

errors.py:
    PlotPipeError and its subclasses, each also a builtin exception:
      ExecutableNotFound, SpawnError, InvalidArgument, InvalidDimensions,
      InvalidSession, TooManyTempFiles, TempFileError, WriteError,
      ShutdownError

===================================================================================
ERROR HANDLING
===================================================================================

The gnuplot pipe is unidirectional. Only local failures (lookup, spawn,
temp files, pipe writes, shutdown) are reported; a malformed command is
silently rejected by gnuplot and cannot be detected here.

===================================================================================
"""

from .config import SessionConfig
from .errors import (
    ExecutableNotFound,
    InvalidArgument,
    InvalidDimensions,
    InvalidSession,
    PlotPipeError,
    ShutdownError,
    SpawnError,
    TempFileError,
    TooManyTempFiles,
    WriteError,
)
from .points import CallbackPointSource, Point, PointSource, as_point_source

__all__ = [
    "SessionConfig",
    "Point",
    "PointSource",
    "CallbackPointSource",
    "as_point_source",
    "PlotPipeError",
    "ExecutableNotFound",
    "SpawnError",
    "InvalidArgument",
    "InvalidDimensions",
    "InvalidSession",
    "TooManyTempFiles",
    "TempFileError",
    "WriteError",
    "ShutdownError",
]
