"""Tests for the high-level API and export."""

import sys

import pytest

import tabviz
from tabviz import ChartKind, ChartStyle, TableData, render_chart, render_svg, save_chart
from tabviz.charts import chart_registry
from tabviz.errors import ExportError, InvalidArgumentError
from tabviz.export import rasterize, write_svg
from tabviz.types import Size


class TestRenderChart:
    @pytest.mark.parametrize("kind", ["bar", "histogram", "pie", "scatter"])
    def test_every_kind_renders(self, kind, sales_table, measurer):
        result = render_chart(kind, sales_table, measurer=measurer)

        assert result.kind is ChartKind(kind)
        assert result.style == ChartStyle()
        assert len(result.commands) > 0

    def test_unknown_kind(self, sales_table, measurer):
        with pytest.raises(InvalidArgumentError, match="Unknown chart kind"):
            render_chart("donut", sales_table, measurer=measurer)

    def test_registry_lists_all_kinds(self):
        assert set(chart_registry.list_kinds()) == set(ChartKind)

    def test_render_svg(self, sales_table, measurer):
        svg = render_svg("bar", sales_table, measurer=measurer)

        assert svg.startswith("<?xml")
        assert "Sales" in svg
        assert svg.rstrip().endswith("</svg>")

    def test_default_measurer(self, small_table):
        """Without an injected measurer text is measured with Pillow."""
        result = render_chart("bar", small_table)

        assert len(result.commands) > 0

    def test_version(self):
        assert tabviz.__version__


class TestSaveChart:
    def test_svg(self, tmp_path, small_table, measurer):
        result = render_chart("pie", small_table, ChartStyle(size=Size(400, 300)), measurer=measurer)

        path = save_chart(result, tmp_path / "pie.svg")

        content = path.read_text()
        assert 'width="400" height="300"' in content
        assert "<path " in content

    def test_write_svg_to_missing_directory(self, tmp_path):
        with pytest.raises(ExportError):
            write_svg("<svg/>", tmp_path / "missing" / "out.svg")

    def test_png(self, tmp_path, small_table, measurer):
        pytest.importorskip("cairosvg")
        result = render_chart("bar", small_table, ChartStyle(size=Size(200, 150)), measurer=measurer)

        path = save_chart(result, tmp_path / "bar.png", png=True)

        assert path.read_bytes().startswith(b"\x89PNG")

    def test_png_without_cairosvg(self, tmp_path, monkeypatch):
        monkeypatch.setitem(sys.modules, "cairosvg", None)

        with pytest.raises(ExportError, match="cairosvg"):
            rasterize("<svg/>", tmp_path / "out.png", Size(10, 10))


class TestTableFromRowsExample:
    def test_docstring_example(self, measurer):
        table = TableData.from_rows([[3, 5], [4, 1]], title="Sales")

        result = render_chart("bar", table, measurer=measurer)

        assert result.commands[0].text == "Sales"
