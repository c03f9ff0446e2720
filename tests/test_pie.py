"""Tests for the pie chart renderer."""

import pytest

from tabviz.charts import PieChartRenderer
from tabviz.charts.pie import START_ANGLE, compute_sectors
from tabviz.commands import Arc, DrawText, FillShape
from tabviz.errors import EmptyDataError, InvalidDataError
from tabviz.types import ChartStyle, TableData


@pytest.fixture
def renderer():
    return PieChartRenderer()


class TestSectors:
    def test_extents_are_shares_of_360(self):
        sectors = compute_sectors((1.0, 1.0, 2.0), 4.0, ("a", "b", "c"))

        assert sum(s.extent for s in sectors) == pytest.approx(360)
        extents = {s.column: s.extent for s in sectors}
        assert extents == {0: pytest.approx(90), 1: pytest.approx(90), 2: pytest.approx(180)}

    def test_reverse_column_order_from_twelve_oclock(self):
        """The last column starts at 90 degrees; the first one ends there."""
        sectors = compute_sectors((1.0, 1.0, 2.0), 4.0, ("a", "b", "c"))

        assert [s.column for s in sectors] == [2, 1, 0]
        assert sectors[0].start == START_ANGLE
        first_column = sectors[-1]
        assert first_column.start + first_column.extent == pytest.approx(START_ANGLE + 360)

    def test_sectors_are_adjacent(self):
        sectors = compute_sectors((3.0, 2.0, 5.0), 10.0, ("a", "b", "c"))

        for previous, current in zip(sectors, sectors[1:]):
            assert current.start == pytest.approx(previous.start + previous.extent)

    def test_colors_follow_columns(self):
        sectors = compute_sectors((1.0, 2.0), 3.0, ("a", "b"))

        assert {s.column: s.color for s in sectors} == {0: "a", 1: "b"}


class TestPieLayout:
    def test_uses_first_row_only(self, renderer, measurer):
        table = TableData.from_rows([[1, 3], [100, 100]])

        layout = renderer.compute_layout(table, measurer=measurer)

        assert layout.total == 4
        assert len(layout.sectors) == 2

    def test_pie_is_a_centered_square(self, renderer, small_table, measurer):
        layout = renderer.compute_layout(small_table, measurer=measurer)
        graph = layout.graph_region

        assert layout.pie.width == layout.pie.height
        assert layout.pie.center_x == pytest.approx(graph.center_x)
        assert layout.pie.center_y == pytest.approx(graph.center_y)
        assert layout.pie.top >= graph.top and layout.pie.bottom <= graph.bottom

    def test_legend_lists_columns(self, renderer, sales_table, measurer):
        layout = renderer.compute_layout(sales_table, measurer=measurer)

        assert [entry.text.label.text for entry in layout.legend] == ["Org1", "Org2", "Org3", "Org4"]
        assert [entry.color for entry in layout.legend] == list(layout.colors)


class TestPieCommands:
    def test_arcs_share_the_pie_bounds(self, renderer, sales_table, measurer):
        commands = renderer.render(sales_table, measurer=measurer)

        arcs = [c.shape for c in commands if isinstance(c, FillShape) and isinstance(c.shape, Arc)]
        assert len(arcs) == 4
        assert len({arc.bounds for arc in arcs}) == 1

    def test_zero_sector_is_not_drawn(self, renderer, measurer):
        table = TableData.from_rows([[0, 5]])

        layout = renderer.compute_layout(table, measurer=measurer)
        commands = renderer.emit_commands(layout)

        assert len(layout.sectors) == 2
        arcs = [c for c in commands if isinstance(c, FillShape) and isinstance(c.shape, Arc)]
        assert len(arcs) == 1
        assert arcs[0].shape.extent == pytest.approx(360)

    def test_title_first(self, renderer, sales_table, measurer):
        commands = renderer.render(sales_table, measurer=measurer)

        assert isinstance(commands[0], DrawText)
        assert commands[0].text == "Sales"


class TestPieErrors:
    def test_zero_sum(self, renderer, measurer):
        with pytest.raises(EmptyDataError):
            renderer.render(TableData.from_rows([[0, 0]]), measurer=measurer)

    def test_negative_value(self, renderer, measurer):
        with pytest.raises(InvalidDataError):
            renderer.render(TableData.from_rows([[3, -1]]), measurer=measurer)

    def test_no_legend(self, renderer, small_table, measurer):
        layout = renderer.compute_layout(small_table, ChartStyle(display_legend=False), measurer)

        assert layout.legend == ()
