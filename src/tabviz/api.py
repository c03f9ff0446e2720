"""High-level rendering API.

Example:
    >>> from tabviz import TableData, render_chart, save_chart
    >>> table = TableData.from_rows([[3, 5], [4, 1]], title="Sales")
    >>> result = render_chart("bar", table)
    >>> save_chart(result, "sales.svg")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tabviz.canvas import SVGCanvas, replay
from tabviz.charts import get_chart_renderer
from tabviz.commands import DrawCommand
from tabviz.export import rasterize, write_svg
from tabviz.text import TextMeasurer
from tabviz.types import ChartKind, ChartStyle, TableData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartResult:
    """A rendered chart: its kind, the style used and the command sequence."""

    kind: ChartKind
    style: ChartStyle
    commands: tuple[DrawCommand, ...]

    def to_svg(self, background: str | None = None) -> str:
        canvas = SVGCanvas(self.style.size, background=background)
        replay(self.commands, canvas)
        return canvas.to_svg()


def render_chart(
    kind: ChartKind | str,
    table: TableData,
    style: ChartStyle | None = None,
    *,
    measurer: TextMeasurer | None = None,
) -> ChartResult:
    """Render ``table`` as a chart of the given kind.

    Raises:
        TabvizError: Any layout or data error; nothing is returned partially.
    """
    renderer = get_chart_renderer(kind)
    style = style or ChartStyle()
    commands = renderer.render(table, style, measurer)
    return ChartResult(kind=renderer.kind, style=style, commands=commands)


def render_svg(
    kind: ChartKind | str,
    table: TableData,
    style: ChartStyle | None = None,
    *,
    measurer: TextMeasurer | None = None,
) -> str:
    """Render ``table`` straight to an SVG document."""
    return render_chart(kind, table, style, measurer=measurer).to_svg()


def save_chart(result: ChartResult, path: str | Path, png: bool = False) -> Path:
    """Write ``result`` as SVG, or as PNG when ``png`` is set."""
    svg = result.to_svg()
    if png:
        return rasterize(svg, path, result.style.size)
    return write_svg(svg, path)


__all__ = ["ChartResult", "render_chart", "render_svg", "save_chart"]
