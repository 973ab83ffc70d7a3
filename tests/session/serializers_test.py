# Unit tests for the data-file layouts handed to gnuplot

import io

import numpy as np
import pytest

from plotpipe.interfaces.errors import InvalidArgument
from plotpipe.session.serializers import (
    as_matrix,
    as_vector,
    is_uniform,
    write_contour,
    write_coordinates,
    write_grid,
)


def _rows(text):
    return text.split("\n")[:-1]


class TestCoordinateFiles:
    def test_uniform_y_writes_single_column_of_x(self, session):
        x = [0.5, 1.5, 2.5, 3.5]
        path = session.plot_coordinates(x, [7.0, 7.0, 7.0, 7.0])
        rows = _rows(path.read_text())
        assert rows == ["0.5", "1.5", "2.5", "3.5"]

    def test_missing_y_writes_single_column(self, session):
        path = session.plot_coordinates([3, 1, 2])
        assert path.read_text() == "3\n1\n2\n"

    def test_varying_y_writes_pairs_in_order(self, session):
        x = np.linspace(0.0, 1.0, 5)
        y = x ** 2
        path = session.plot_coordinates(x, y)
        rows = [row.split() for row in _rows(path.read_text())]
        assert len(rows) == 5
        assert [(float(a), float(b)) for a, b in rows] == pytest.approx(list(zip(x, y)))

    def test_explicit_flag_overrides_inference(self, session):
        forced_pairs = session.plot_coordinates([1, 2], [5, 5], index_as_x=False)
        assert forced_pairs.read_text() == "1 5\n2 5\n"
        forced_index = session.plot_coordinates([1, 2], [5, 6], index_as_x=True)
        assert forced_index.read_text() == "1\n2\n"

    def test_values_use_general_format(self):
        buffer = io.StringIO()
        write_coordinates(buffer, np.array([1e-5, 123456789.0]), np.array([0.25, -2.0]), False)
        assert buffer.getvalue() == "1e-05 0.25\n1.23457e+08 -2\n"

    def test_single_point_is_valid(self, session):
        path = session.plot_coordinates([4.0], [9.0])
        assert path.read_text() == "4\n"


class TestGridFiles:
    def test_grid_groups_rows_with_blank_separators(self):
        rows, cols = 3, 4
        grid = np.arange(rows * cols, dtype=float).reshape(rows, cols)
        buffer = io.StringIO()
        count = write_grid(buffer, grid)

        groups = buffer.getvalue().split("\n\n")
        assert count == rows * cols
        assert buffer.getvalue().endswith("\n\n")
        assert groups[-1] == ""
        groups = groups[:-1]
        assert len(groups) == rows
        for i, group in enumerate(groups):
            lines = group.split("\n")
            assert lines == [f"{i} {j} {i * cols + j:g}" for j in range(cols)]

    def test_flat_grid_is_reshaped_row_major(self, session):
        path = session.splot_grid([1, 2, 3, 4, 5, 6], rows=2, cols=3)
        assert path.read_text() == "0 0 1\n0 1 2\n0 2 3\n\n1 0 4\n1 1 5\n1 2 6\n\n"


class TestContourFiles:
    def test_contour_rows_follow_ny_stride(self, session):
        nx, ny = 2, 3
        x = np.repeat(np.arange(nx), ny)
        y = np.tile(np.arange(ny), nx)
        z = np.arange(nx * ny) * 10.0
        path = session.contour_plot(x, y, z, nx=nx, ny=ny)
        assert path.read_text() == (
            "0 0 0\n0 1 10\n0 2 20\n\n"
            "1 0 30\n1 1 40\n1 2 50\n\n"
        )

    def test_write_contour_counts_points(self):
        buffer = io.StringIO()
        ones = np.ones((2, 2))
        assert write_contour(buffer, ones, ones, ones) == 4
        assert buffer.getvalue().count("\n\n") == 2


class TestCoercion:
    def test_as_vector_rejects_matrices(self):
        with pytest.raises(InvalidArgument, match="1-D"):
            as_vector("x", [[1, 2], [3, 4]])

    def test_as_vector_accepts_scalars(self):
        assert as_vector("x", 2.5).tolist() == [2.5]

    def test_as_matrix_rejects_wrong_size(self):
        with pytest.raises(InvalidArgument):
            as_matrix("points", [1, 2, 3], 2, 2)

    def test_as_matrix_needs_both_dimensions(self):
        with pytest.raises(InvalidArgument):
            as_matrix("points", [1, 2, 3, 4], rows=2)

    def test_is_uniform(self):
        assert is_uniform(np.array([2.0, 2.0, 2.0]))
        assert not is_uniform(np.array([2.0, 2.0, 2.5]))
