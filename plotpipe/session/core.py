"""Gnuplot session: process lifecycle, command channel, and plot submission."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Any, Callable, Sequence, TextIO

from rich.console import Console
from rich.panel import Panel

from ..interfaces.config import SessionConfig
from ..interfaces.errors import (
    ExecutableNotFound,
    InvalidArgument,
    InvalidDimensions,
    InvalidSession,
    ShutdownError,
    SpawnError,
    WriteError,
)
from ..interfaces.points import PointFunction, PointSource, as_point_source
from ..utils.config import load_config
from ..utils.console import console as default_console
from ..utils.console import warn
from ..utils.paths import resolve_executable
from .serializers import (
    as_matrix,
    as_vector,
    is_uniform,
    write_contour,
    write_coordinates,
    write_grid,
    write_points,
    write_xyz,
)
from .tempfiles import TempFileRegistry

PLOT_STYLES = (
    "lines",
    "points",
    "linespoints",
    "impulses",
    "dots",
    "steps",
    "filledcurves",
    "errorbars",
    "boxes",
    "boxerrorbars",
)
DEFAULT_STYLE = "points"
DEFAULT_TITLE = "No title"
TERMINAL_NAME_LIMIT = 31

CONTOUR_PRELUDE = (
    "unset surface",
    "set contour base",
    "set view map",
    "set view 0,0",
)


class PlotSession:
    """One gnuplot process plus the state needed to compose commands for it.

    Commands travel over the process's stdin only. Nothing is ever read back,
    so a command gnuplot rejects fails silently; only local errors (pipe
    writes, temp files, shutdown) are raised.

    Sessions are meant for a single owner on a single thread. Use
    :meth:`open` to spawn gnuplot, and :meth:`close` (or a ``with`` block) to
    stop it and delete every temp file the session created.
    """

    def __init__(
        self,
        process: subprocess.Popen[Any],
        *,
        config: SessionConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.console = console or default_console
        self._process: subprocess.Popen[Any] | None = process
        self._tempfiles = TempFileRegistry(
            self.config.temp_dir,
            self.config.max_temp_files,
            console=self.console,
        )
        self.style = DEFAULT_STYLE
        self.terminal = ""
        self.active_plots = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @classmethod
    def open(
        cls,
        config: SessionConfig | None = None,
        *,
        console: Console | None = None,
    ) -> "PlotSession":
        """Spawn gnuplot and apply the default style and terminal.

        Raises:
            ExecutableNotFound: gnuplot is not on ``PATH``, or a display is
                required by the config and ``DISPLAY`` is unset.
            SpawnError: The process could not be started.
        """

        cfg = config or load_config()
        if cfg.require_display and not os.getenv("DISPLAY"):
            raise ExecutableNotFound("Cannot find DISPLAY variable")
        executable = resolve_executable(cfg.executable)

        try:
            process = subprocess.Popen(
                [str(executable)],
                stdin=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except OSError as exc:
            raise SpawnError(f"Error starting {executable}: {exc}") from exc

        session = cls(process, config=cfg, console=console)
        try:
            session.set_style(DEFAULT_STYLE)
            session.set_terminal(cfg.terminal, cfg.width, cfg.height)
        except Exception:
            session.close()
            raise
        return session

    def close(self) -> None:
        """Stop gnuplot and delete every tracked temp file.

        Temp files are removed even when the process cannot be shut down
        cleanly; the :class:`ShutdownError` is raised afterwards. Closing an
        already closed session does nothing.
        """

        process = self._process
        if process is None:
            return
        self._process = None
        try:
            if process.stdin is not None:
                process.stdin.close()
            process.wait()
        except (OSError, ValueError, subprocess.SubprocessError) as exc:
            raise ShutdownError(f"Cannot close communication to gnuplot: {exc}") from exc
        finally:
            self._tempfiles.clear()

    def reset(self) -> None:
        """Delete tracked temp files and restart plotting with ``plot``."""

        self._ensure_open()
        self._tempfiles.clear()
        self.active_plots = 0

    def __enter__(self) -> "PlotSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._process is None

    @property
    def process(self) -> subprocess.Popen[Any] | None:
        return self._process

    @property
    def temp_files(self) -> tuple[Path, ...]:
        return self._tempfiles.paths

    @property
    def temp_file_count(self) -> int:
        return len(self._tempfiles)

    # ------------------------------------------------------------------
    # Command channel
    # ------------------------------------------------------------------
    def send(self, command: str, *args: Any) -> None:
        """Write one command line to gnuplot and flush.

        ``args`` are applied with ``%`` formatting, e.g.
        ``session.send("plot %g * cos(%g * x)", 32.0, -3.0)``.
        """

        self._ensure_open()
        line = command % args if args else command
        stream = self._process.stdin
        if stream is None:
            raise WriteError("gnuplot process has no input pipe")
        try:
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            raise WriteError(f"Cannot write to gnuplot: {exc}") from exc
        if self.config.echo:
            self.console.log(f"gnuplot> {line}", markup=False)

    def set_style(self, style: str) -> None:
        """Set the ``with <style>`` used by later plots.

        An unknown style falls back to ``points`` with a warning.
        """

        self._ensure_open()
        if style not in PLOT_STYLES:
            warn(f"unknown requested plot style '{style}': using default '{DEFAULT_STYLE}'", self.console)
            self.style = DEFAULT_STYLE
        else:
            self.style = style

    def set_terminal(self, terminal: str, width: int, height: int) -> None:
        self._ensure_open()
        if width < 0 or height < 0:
            raise InvalidDimensions(f"Plot size dimensions cannot be negative: {width}x{height}")
        self.terminal = terminal[:TERMINAL_NAME_LIMIT]
        self.send(f"set terminal {self.terminal} size {width:d},{height:d}")

    def set_axis_label(self, axis: str, label: str) -> None:
        self.send(f'set {axis}label "{label}"')

    # ------------------------------------------------------------------
    # Plot submission
    # ------------------------------------------------------------------
    def plot_coordinates(
        self,
        x: Sequence[float],
        y: Sequence[float] | None = None,
        title: str | None = None,
        *,
        index_as_x: bool | None = None,
    ) -> Path:
        """Plot a 2-D curve from ``x`` (and optionally ``y``).

        With ``index_as_x`` unset, a missing or uniform ``y`` writes only the
        ``x`` column, which gnuplot plots against the row index. Pass
        ``index_as_x=True`` or ``False`` to choose the layout explicitly.

        Returns:
            Path of the temp file handed to gnuplot.
        """

        xs = as_vector("x", x)
        ys = None
        if y is not None:
            ys = as_vector("y", y)
            if ys.size != xs.size:
                raise InvalidArgument(f"'x' and 'y' lengths differ: {xs.size} != {ys.size}")
        if index_as_x is None:
            index_as_x = ys is None or is_uniform(ys)
        elif not index_as_x and ys is None:
            raise InvalidArgument("'y' is required when index_as_x is False")

        return self._submit(
            self._plot_verb(),
            lambda handle: write_coordinates(handle, xs, ys, index_as_x),
            title,
        )

    def splot(
        self,
        x: Sequence[float],
        y: Sequence[float],
        z: Sequence[float],
        title: str | None = None,
    ) -> Path:
        xs, ys, zs = as_vector("x", x), as_vector("y", y), as_vector("z", z)
        if not xs.size == ys.size == zs.size:
            raise InvalidArgument(f"'x', 'y' and 'z' lengths differ: {xs.size}, {ys.size}, {zs.size}")
        return self._submit("splot", lambda handle: write_xyz(handle, xs, ys, zs), title)

    def splot_grid(
        self,
        points: Any,
        rows: int | None = None,
        cols: int | None = None,
        title: str | None = None,
    ) -> Path:
        """Surface plot of a ``rows`` x ``cols`` matrix indexed by (row, col)."""

        grid = as_matrix("points", points, rows, cols)
        return self._submit("splot", lambda handle: write_grid(handle, grid), title)

    def contour_plot(
        self,
        x: Any,
        y: Any,
        z: Any,
        nx: int | None = None,
        ny: int | None = None,
        title: str | None = None,
    ) -> Path:
        """Top-down contour map of ``nx`` x ``ny`` samples.

        ``x``, ``y`` and ``z`` are either ``(nx, ny)`` matrices or flat arrays
        of ``nx * ny`` values in row-major order.
        """

        xm = as_matrix("x", x, nx, ny)
        nx, ny = xm.shape
        ym = as_matrix("y", y, nx, ny)
        zm = as_matrix("z", z, nx, ny)
        return self._submit(
            "splot",
            lambda handle: write_contour(handle, xm, ym, zm),
            title,
            prelude=CONTOUR_PRELUDE,
        )

    def splot_obj(self, source: PointSource | PointFunction, n: int, title: str | None = None) -> Path:
        """Surface plot of ``n`` points pulled from ``source``."""

        producer = self._point_source(source, n)
        return self._submit("splot", lambda handle: write_points(handle, producer, n, 3), title)

    def plot_obj_xy(self, source: PointSource | PointFunction, n: int, title: str | None = None) -> Path:
        """2-D plot of ``n`` points pulled from ``source``; ``z`` is ignored."""

        producer = self._point_source(source, n)
        return self._submit(self._plot_verb(), lambda handle: write_points(handle, producer, n, 2), title)

    def plot_equation(self, expression: str, title: str | None = None) -> None:
        """Plot ``y = expression`` as given, e.g. ``"sin(x) * cos(2*x)"``."""

        self.send(self._compose(self._plot_verb(), expression, title))
        self.active_plots += 1

    def hardcopy(self, filename: str | Path, color: bool = False) -> None:
        """Replot the current graph into a PostScript file, then restore the terminal."""

        terminal = self.config.hardcopy_terminal
        self.send(f"set terminal {terminal} enhanced color" if color else f"set terminal {terminal}")
        self.send(f'set output "{filename}"')
        self.send("replot")
        self.send(f"set terminal {self.terminal}")

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def summary(self) -> dict[str, Any]:
        return {
            "temp_files": self.temp_file_count,
            "active_plots": self.active_plots,
            "style": self.style,
            "terminal": self.terminal,
            "closed": self.closed,
        }

    def print_summary(self, console: Console | None = None) -> None:
        state = self.summary()
        body = "\n".join(
            [
                f"Temporary files: {state['temp_files']}",
                f"Active plots: {state['active_plots']}",
                f"Plotting style: {state['style']}",
                f"Terminal name: {state['terminal']}",
            ]
        )
        style = "red" if self.closed else "cyan"
        (console or self.console).print(Panel.fit(body, title="Gnuplot session", style=style))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _ensure_open(self) -> None:
        if self._process is None:
            raise InvalidSession("Gnuplot session is closed")

    def _plot_verb(self) -> str:
        return "replot" if self.active_plots > 0 else "plot"

    def _compose(self, verb: str, target: str, title: str | None) -> str:
        label = DEFAULT_TITLE if title is None else title
        return f'{verb} {target} title "{label}" with {self.style}'

    @staticmethod
    def _point_source(source: PointSource | PointFunction | None, n: int) -> PointSource:
        if source is None or n < 1:
            raise InvalidArgument("A point source and a positive point count are required")
        try:
            return as_point_source(source)
        except TypeError as exc:
            raise InvalidArgument(str(exc)) from exc

    def _submit(
        self,
        verb: str,
        write: Callable[[TextIO], int],
        title: str | None,
        *,
        prelude: Sequence[str] = (),
    ) -> Path:
        self._ensure_open()
        with self._tempfiles.create() as (path, handle):
            write(handle)
        for command in prelude:
            self.send(command)
        self.send(self._compose(verb, f'"{path.as_posix()}"', title))
        self.active_plots += 1
        return path
