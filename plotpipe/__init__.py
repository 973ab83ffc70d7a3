"""plotpipe: drive gnuplot from Python through a one-way pipe.

===================================================================================
OVERVIEW
===================================================================================
plotpipe spawns gnuplot, writes plot data to temporary files, and sends the
commands that plot them over the process's standard input. All rendering is
done by gnuplot; this package only formats commands and data and keeps track
of the session state needed to compose them (plot count, style, terminal,
temp files).

===================================================================================
ARCHITECTURE
===================================================================================

    plotpipe/
    ├── interfaces/       SessionConfig, Point/PointSource, error taxonomy
    ├── session/          PlotSession, temp-file registry, serializers, plot_once
    └── utils/            PATH lookup, YAML config loading, Rich console

===================================================================================
SYSTEM FLOW DIAGRAM
===================================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │  load_config() → SessionConfig (config.yml / $PLOTPIPE_CONFIG)     │
    └──────────────────────┬──────────────────────────────────────────────┘
                           │
    ┌──────────────────────▼──────────────────────────────────────────────┐
    │  PlotSession.open()                                                │
    │  ├─ resolve_executable("gnuplot")                                  │
    │  ├─ subprocess.Popen(stdin=PIPE)                                   │
    │  └─ set_style("points"), set_terminal(<terminal>, 900, 400)        │
    └──────────────────────┬──────────────────────────────────────────────┘
                           │
    ┌──────────────────────▼──────────────────────────────────────────────┐
    │  plot_coordinates / splot / splot_grid / contour_plot / *_obj      │
    │  ├─ temp file → serialized rows                                    │
    │  └─ send("plot|replot|splot \"<file>\" title ... with <style>")   │
    └──────────────────────┬──────────────────────────────────────────────┘
                           │
    ┌──────────────────────▼──────────────────────────────────────────────┐
    │  close(): stop gnuplot, delete every temp file                     │
    └─────────────────────────────────────────────────────────────────────┘

===================================================================================
CONSTRAINTS & ASSUMPTIONS
===================================================================================

1. The pipe is write-only: gnuplot's own errors are never observed.
2. A session belongs to one thread; there is no internal locking.
3. At most ``max_temp_files`` (default 64) temp files per session.

===================================================================================
USAGE PATTERNS
===================================================================================

from plotpipe import PlotSession

with PlotSession.open() as session:
    session.set_style("linespoints")
    session.plot_coordinates([0, 1, 2], [0, 1, 4], "parabola")
    session.plot_equation("sin(x)", "sine")
    session.hardcopy("parabola.ps", color=True)

===================================================================================
"""

from .interfaces import (
    CallbackPointSource,
    ExecutableNotFound,
    InvalidArgument,
    InvalidDimensions,
    InvalidSession,
    PlotPipeError,
    Point,
    PointSource,
    SessionConfig,
    ShutdownError,
    SpawnError,
    TempFileError,
    TooManyTempFiles,
    WriteError,
)
from .session import PLOT_STYLES, PlotSession, plot_once
from .utils import find_program_path, load_config

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__license__",
    "PlotSession",
    "plot_once",
    "PLOT_STYLES",
    "SessionConfig",
    "load_config",
    "find_program_path",
    "Point",
    "PointSource",
    "CallbackPointSource",
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
