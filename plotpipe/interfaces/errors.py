"""Error taxonomy for gnuplot sessions.

Each error also derives from the closest builtin exception so callers that
only know ``ValueError``/``OSError``/``RuntimeError`` still catch them.
Failures inside the gnuplot process itself never surface here: the command
channel is write-only.
"""

from __future__ import annotations


class PlotPipeError(Exception):
    """Base class for every error raised by plotpipe."""


class ExecutableNotFound(PlotPipeError, FileNotFoundError):
    """The gnuplot executable (or a required display) is not available."""


class SpawnError(PlotPipeError, RuntimeError):
    """The gnuplot process could not be started."""


class InvalidArgument(PlotPipeError, ValueError):
    """Plot data is missing, empty, or has mismatched lengths."""


class InvalidDimensions(InvalidArgument):
    """A terminal width or height is negative."""


class InvalidSession(PlotPipeError, RuntimeError):
    """The session is missing or has already been closed."""


class TooManyTempFiles(PlotPipeError, RuntimeError):
    """The session already tracks its maximum number of temporary files."""


class TempFileError(PlotPipeError, OSError):
    """A temporary data file could not be created, written, or closed."""


class WriteError(PlotPipeError, OSError):
    """A command could not be written to the gnuplot pipe."""


class ShutdownError(PlotPipeError, RuntimeError):
    """The gnuplot process handle could not be closed cleanly."""
