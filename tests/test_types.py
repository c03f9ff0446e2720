"""Tests for core data types."""

import pytest

from tabviz.errors import InvalidArgumentError, InvalidDataError
from tabviz.types import ChartStyle, FontSpec, MultipleValuesDisplay, Rectangle, Size, TableData


class TestSize:
    def test_valid(self):
        assert Size(800, 600).width == 800

    @pytest.mark.parametrize("width,height", [(0, 10), (10, -1), (1.5, 10), (True, 10)])
    def test_invalid(self, width, height):
        with pytest.raises(InvalidArgumentError):
            Size(width, height)


class TestRectangle:
    def test_edges_and_center(self):
        rect = Rectangle(10, 20, 100, 50)

        assert (rect.left, rect.top, rect.right, rect.bottom) == (10, 20, 110, 70)
        assert (rect.center_x, rect.center_y) == (60, 45)

    def test_inset(self):
        rect = Rectangle(0, 0, 100, 100).inset(left=10, top=5, right=20, bottom=15)

        assert rect == Rectangle(10, 5, 70, 80)


class TestChartStyle:
    def test_defaults(self):
        style = ChartStyle()

        assert style.size == Size(800, 600)
        assert style.bar_width_rate == 0.8
        assert style.title_font.size == 36
        assert style.label_font.size == 14
        assert style.palette == ("#00ffff", "#00ff00", "#ffff00", "#ffc800")

    def test_palette_is_coerced_to_tuple(self):
        assert ChartStyle(palette=["#000000"]).palette == ("#000000",)

    def test_with_options(self):
        style = ChartStyle().with_options(multiple_values_display=MultipleValuesDisplay.STACKED)

        assert style.multiple_values_display is MultipleValuesDisplay.STACKED
        assert style.size == Size(800, 600)

    @pytest.mark.parametrize(
        "options",
        [
            {"bar_width_rate": 0},
            {"bar_width_rate": 1.5},
            {"palette": ()},
            {"point_radius": 0},
            {"bars_count": 0},
        ],
    )
    def test_invalid_options(self, options):
        with pytest.raises(InvalidArgumentError):
            ChartStyle(**options)

    def test_font_size_must_be_positive(self):
        with pytest.raises(InvalidArgumentError):
            FontSpec(size=0)


class TestTableData:
    def test_from_rows_generates_labels(self):
        table = TableData.from_rows([[1, 2, 3], [4, 5, 6]])

        assert table.column_labels == ("Input 1", "Input 2", "Input 3")
        assert table.row_labels == ("Series 1", "Series 2")
        assert table.values == ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))

    def test_accessors(self):
        table = TableData.from_rows([[1, 2], [3, 4]])

        assert table.n_rows == 2
        assert table.n_columns == 2
        assert table.column(1) == (2.0, 4.0)
        assert table.row_sums() == (3.0, 7.0)
        assert list(table.cells()) == [1.0, 2.0, 3.0, 4.0]

    def test_ragged_rows_rejected(self):
        with pytest.raises(InvalidDataError):
            TableData.from_rows([[1, 2], [3]], column_labels=["a", "b"])

    def test_label_count_mismatch(self):
        with pytest.raises(InvalidDataError):
            TableData.from_rows([[1]], row_labels=["a", "b"])

    def test_empty_rejected(self):
        with pytest.raises(InvalidDataError):
            TableData.from_rows([])
