"""Gnuplot sessions: lifecycle, commands, temp files, and plot submission.

===================================================================================
SUBMODULE STRUCTURE
===================================================================================

core.py:
    PlotSession - owns one gnuplot process
    Lifecycle:
      - open(config=None) → spawn gnuplot, style "points", configured terminal
      - close() → stop gnuplot, delete temp files
      - reset() → delete temp files, next plot restarts with "plot"
    Commands:
      - send(command, *args), set_style, set_terminal, set_axis_label
    Plots (each writes one temp file, then sends plot/replot/splot):
      - plot_coordinates, splot, splot_grid, contour_plot
      - plot_obj_xy, splot_obj (PointSource driven)
      - plot_equation (no temp file), hardcopy (PostScript replot)

tempfiles.py:
    TempFileRegistry - bounded set of files owned by a session
      - create() context manager: track, write, delete again on failure
      - clear() → best-effort deletion, failures logged

serializers.py:
    as_vector / as_matrix - input validation → InvalidArgument
    write_coordinates, write_xyz, write_grid, write_contour, write_points

oneshot.py:
    plot_once(x, y=None, ...) - open, plot, wait for Enter, close

===================================================================================
DATA FLOW DIAGRAM
===================================================================================

    caller data (lists / ndarrays / PointSource)
            ↓
    as_vector / as_matrix → validated float arrays
            ↓
    TempFileRegistry.create() → gnuplot-i-XXXXXX
            ↓
    write_* serializer → rows of "%g" columns
            ↓
    PlotSession.send('plot "<file>" title "..." with <style>')
            ↓
    gnuplot stdin (write-only, flushed per line)

===================================================================================
"""

from .core import PLOT_STYLES, PlotSession
from .oneshot import plot_once
from .tempfiles import TempFileRegistry

__all__ = [
    "PLOT_STYLES",
    "PlotSession",
    "TempFileRegistry",
    "plot_once",
]
