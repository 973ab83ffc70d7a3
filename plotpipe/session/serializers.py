"""Writers that lay plot data out in the text formats gnuplot reads.

Every row ends with a newline and columns are separated by one space. Values
use ``%g`` formatting; grid indices are written as integers. Grid and contour
data put a blank line after each row group, which gnuplot needs to treat the
file as a surface.
"""

from __future__ import annotations

from typing import Any, Iterable, TextIO

import numpy as np

from ..interfaces.errors import InvalidArgument
from ..interfaces.points import PointSource


def _fmt(value: float) -> str:
    return f"{value:g}"


def as_vector(name: str, values: Any) -> np.ndarray:
    """Coerce ``values`` to a non-empty 1-D float array."""

    if values is None:
        raise InvalidArgument(f"'{name}' is required")
    try:
        array = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"'{name}' must be numeric: {exc}") from exc
    if array.ndim > 1:
        raise InvalidArgument(f"'{name}' must be 1-D, got shape {array.shape}")
    array = array.ravel()
    if array.size < 1:
        raise InvalidArgument(f"'{name}' must hold at least one value")
    return array


def as_matrix(name: str, values: Any, rows: int | None = None, cols: int | None = None) -> np.ndarray:
    """Coerce ``values`` to a ``rows`` x ``cols`` float matrix.

    When ``rows`` and ``cols`` are omitted ``values`` must already be 2-D;
    otherwise it is reshaped row-major and must hold exactly ``rows * cols``
    values.
    """

    if values is None:
        raise InvalidArgument(f"'{name}' is required")
    try:
        array = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"'{name}' must be numeric: {exc}") from exc

    if rows is None and cols is None:
        if array.ndim != 2:
            raise InvalidArgument(f"'{name}' must be 2-D when no shape is given, got ndim={array.ndim}")
        rows, cols = array.shape
    elif rows is None or cols is None:
        raise InvalidArgument("Both dimensions must be given together")

    if rows < 1 or cols < 1:
        raise InvalidArgument(f"'{name}' dimensions must be at least 1x1, got {rows}x{cols}")
    if array.size != rows * cols:
        raise InvalidArgument(f"'{name}' holds {array.size} values, expected {rows}x{cols}")
    return array.reshape(rows, cols)


def is_uniform(values: np.ndarray) -> bool:
    return bool(np.all(values == values[0]))


def write_rows(handle: TextIO, rows: Iterable[Iterable[float]]) -> int:
    count = 0
    for row in rows:
        handle.write(" ".join(_fmt(v) for v in row) + "\n")
        count += 1
    return count


def write_coordinates(handle: TextIO, x: np.ndarray, y: np.ndarray | None, index_as_x: bool) -> int:
    """Write 2-D data: ``x`` alone when ``index_as_x``, else ``x y`` pairs."""

    if index_as_x:
        return write_rows(handle, ((v,) for v in x))
    if y is None:
        raise InvalidArgument("'y' is required unless the index is used as x")
    return write_rows(handle, zip(x, y))


def write_xyz(handle: TextIO, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> int:
    return write_rows(handle, zip(x, y, z))


def write_grid(handle: TextIO, grid: np.ndarray) -> int:
    """Write ``row col value`` for every cell, with a blank line after each row."""

    count = 0
    rows, cols = grid.shape
    for i in range(rows):
        for j in range(cols):
            handle.write(f"{i:d} {j:d} {_fmt(grid[i, j])}\n")
            count += 1
        handle.write("\n")
    return count


def write_contour(handle: TextIO, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> int:
    """Write matching ``x y z`` matrices row-major, blank line after each row."""

    count = 0
    for xs, ys, zs in zip(x, y, z):
        count += write_rows(handle, zip(xs, ys, zs))
        handle.write("\n")
    return count


def write_points(handle: TextIO, source: PointSource, count: int, dims: int) -> int:
    """Pull ``count`` points from ``source`` in index order and write ``dims`` columns."""

    written = 0
    for index in range(count):
        point = source.point_at(index, count)
        row = (point.x, point.y, point.z)[:dims]
        handle.write(" ".join(_fmt(v) for v in row) + "\n")
        written += 1
    return written
