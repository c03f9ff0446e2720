"""Tests for the scatter chart renderer."""

import pytest

from tabviz.charts import ScatterChartRenderer
from tabviz.commands import DrawLine, Ellipse, FillShape
from tabviz.errors import InsufficientColumnsError, InvalidDomainError
from tabviz.types import ChartStyle, TableData


@pytest.fixture
def renderer():
    return ScatterChartRenderer()


class TestScatterAxes:
    def test_positive_data(self, renderer, measurer):
        """Non-negative data needs no shift."""
        layout = renderer.compute_layout(TableData.from_rows([[0, 0], [10, 5]]), measurer=measurer)

        assert layout.x_axis.shift == 0
        assert layout.x_axis.labels() == (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
        assert layout.y_axis.grid_maximum == 5

    def test_negative_data_is_shifted(self, renderer, measurer):
        """Each axis is shifted so its minimum sits on the first tick."""
        layout = renderer.compute_layout(TableData.from_rows([[-5, -2], [5, 2]]), measurer=measurer)

        assert layout.x_axis.shift == 5
        assert layout.x_axis.labels()[0] == -5
        assert layout.x_axis.labels()[-1] == 5
        assert layout.y_axis.labels()[0] == -2

    def test_y_labels_descend(self, renderer, measurer):
        """Y labels run from the largest value at the top."""
        layout = renderer.compute_layout(TableData.from_rows([[0, 0], [1, 3]]), measurer=measurer)

        assert [p.label.text for p in layout.left_labels] == ["3", "2", "1", "0"]


class TestScatterPoints:
    def test_extremes_hit_grid_corners(self, renderer, measurer):
        """Minimum and maximum points land on opposite grid corners."""
        layout = renderer.compute_layout(TableData.from_rows([[0, 0], [10, 5]]), measurer=measurer)
        grid = layout.regions.grid

        low, high = layout.points
        assert (low.x, low.y) == (pytest.approx(grid.left), pytest.approx(grid.bottom))
        assert (high.x, high.y) == (pytest.approx(grid.right), pytest.approx(grid.top))

    def test_larger_y_is_higher(self, renderer, measurer):
        """Larger y values are drawn closer to the top."""
        layout = renderer.compute_layout(TableData.from_rows([[1, 1], [2, 8], [3, 4]]), measurer=measurer)

        ys = [point.y for point in layout.points]
        assert ys[1] < ys[2] < ys[0]

    def test_points_are_normalized_by_grid_maximum(self, renderer, measurer):
        """A point at half the grid maximum sits halfway up the grid."""
        layout = renderer.compute_layout(TableData.from_rows([[0, 0], [5, 5], [9, 9]]), measurer=measurer)
        grid = layout.regions.grid

        assert layout.y_axis.grid_maximum == 9
        middle = layout.points[1]
        assert middle.y == pytest.approx(grid.bottom - grid.height * 5 / 9)

    def test_extra_columns_are_ignored(self, renderer, measurer):
        """Only the first two columns position points."""
        two = renderer.compute_layout(TableData.from_rows([[0, 0], [4, 4]]), measurer=measurer)
        three = renderer.compute_layout(TableData.from_rows([[0, 0, 99], [4, 4, -99]]), measurer=measurer)

        assert two.points == three.points


class TestScatterCommands:
    def test_gridlines_both_directions(self, renderer, measurer):
        """One gridline per tick on each axis."""
        commands = renderer.render(TableData.from_rows([[0, 0], [10, 5]]), measurer=measurer)

        lines = [c for c in commands if isinstance(c, DrawLine)]
        horizontal = [c for c in lines if c.start.y == c.end.y]
        vertical = [c for c in lines if c.start.x == c.end.x]
        assert len(horizontal) == 6
        assert len(vertical) == 11

    def test_points_are_circles(self, renderer, measurer):
        """Points are outlined circles of point_radius."""
        style = ChartStyle(point_radius=4, palette=("#ff0000",))

        commands = renderer.render(TableData.from_rows([[0, 0], [10, 5]]), style, measurer)

        points = [c for c in commands if isinstance(c, FillShape)]
        assert len(points) == 2
        for command in points:
            assert isinstance(command.shape, Ellipse)
            assert command.shape.bounds.width == command.shape.bounds.height == 8
            assert command.fill_color == "#ff0000"
            assert command.stroke_color == "#000000"

    def test_points_are_drawn_last(self, renderer, measurer):
        """Points are drawn over the gridlines."""
        commands = renderer.render(TableData.from_rows([[0, 0], [10, 5]]), measurer=measurer)

        assert all(isinstance(c, FillShape) for c in commands[-2:])


class TestScatterErrors:
    def test_single_column(self, renderer, measurer):
        """A single column has no y coordinate."""
        with pytest.raises(InsufficientColumnsError):
            renderer.render(TableData.from_rows([[1], [2]]), measurer=measurer)

    def test_constant_axis(self, renderer, measurer):
        """An axis without spread has no scale."""
        with pytest.raises(InvalidDomainError):
            renderer.render(TableData.from_rows([[1, 1], [1, 2]]), measurer=measurer)
