"""Pie chart renderer.

Only the first row of the table is drawn: one sector per column, sized by
its share of the row total. Sectors are laid out from twelve o'clock with
the first column running clockwise, and a legend of column labels is placed
under the pie.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tabviz.charts.base import (
    ChartRenderer,
    ensure_non_negative,
    measure_title,
    register_chart_renderer,
    title_commands,
)
from tabviz.colors import assign_colors
from tabviz.commands import Arc, DrawCommand
from tabviz.errors import EmptyDataError
from tabviz.layout import (
    LegendEntry,
    TextPlacement,
    centered_square,
    graph_region,
    legend_commands,
    legend_entries,
    legend_region,
    outlined,
    place_title,
    title_region,
)
from tabviz.text import LabelCache, LabelMeasurement
from tabviz.types import ChartKind, ChartStyle, Rectangle, TableData

START_ANGLE = 90.0


@dataclass(frozen=True)
class Sector:
    """A pie slice; angles in degrees, counter-clockwise from three o'clock."""

    column: int
    start: float
    extent: float
    color: str


@dataclass(frozen=True)
class PieLayout:
    style: ChartStyle
    total: float
    title: TextPlacement | None
    title_region: Rectangle
    legend_region: Rectangle
    graph_region: Rectangle
    pie: Rectangle
    colors: tuple[str, ...]
    sectors: tuple[Sector, ...]
    legend: tuple[LegendEntry, ...]


def data_sum(table: TableData) -> float:
    """Total of the first row.

    Raises:
        EmptyDataError: If the row sums to zero.
    """
    total = math.fsum(table.values[0])
    if total == 0:
        raise EmptyDataError("Pie chart values sum to zero")
    return total


def compute_sectors(
    row: tuple[float, ...],
    total: float,
    colors: tuple[str, ...],
) -> tuple[Sector, ...]:
    """Sectors in drawing order.

    Columns are consumed last to first, counter-clockwise from twelve
    o'clock, so column 0 ends up starting at twelve o'clock and growing
    clockwise. The returned tuple is in that drawing order.
    """
    sectors = []
    angle = START_ANGLE
    for column in reversed(range(len(row))):
        extent = 360.0 * row[column] / total
        sectors.append(Sector(column=column, start=angle, extent=extent, color=colors[column]))
        angle += extent
    return tuple(sectors)


@register_chart_renderer(ChartKind.PIE)
class PieChartRenderer(ChartRenderer):
    """Renders the first table row as a pie chart."""

    def build_layout(self, table: TableData, style: ChartStyle, labels: LabelCache) -> PieLayout:
        ensure_non_negative(table)
        total = data_sum(table)

        title = measure_title(table, style, labels)
        columns: tuple[LabelMeasurement, ...] = labels.measure_all(table.column_labels, style.label_font)

        title_rect = title_region(style.size, title)
        legend_rect = legend_region(style.size, columns, style.display_legend)
        graph_rect = graph_region(style.size, title_rect, legend_rect)
        pie = centered_square(graph_rect)

        colors = assign_colors(table.n_columns, style.palette)
        sectors = compute_sectors(table.values[0], total, colors)
        legend = legend_entries(legend_rect, columns, colors) if style.display_legend else ()

        return PieLayout(
            style=style,
            total=total,
            title=place_title(title_rect, title),
            title_region=title_rect,
            legend_region=legend_rect,
            graph_region=graph_rect,
            pie=pie,
            colors=colors,
            sectors=sectors,
            legend=legend,
        )

    def emit_commands(self, layout: PieLayout) -> list[DrawCommand]:
        style = layout.style
        commands = title_commands(layout.title, style)
        # Zero-valued columns keep their place in the layout but draw nothing.
        commands += [
            outlined(Arc(layout.pie, sector.start, sector.extent), sector.color, style.stroke_color)
            for sector in layout.sectors
            if sector.extent > 0
        ]
        commands += legend_commands(layout.legend, style.label_font, style.text_color, style.stroke_color)
        return commands


__all__ = ["START_ANGLE", "Sector", "PieLayout", "data_sum", "compute_sectors", "PieChartRenderer"]
