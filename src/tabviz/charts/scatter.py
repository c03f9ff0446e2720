"""Scatter chart renderer.

The first column holds x coordinates and the second y coordinates; further
columns are ignored. Each axis is shifted so its minimum lands on zero, a
round-number scale is built for the shifted range, and the tick labels show
the original (un-shifted) values.
"""

from __future__ import annotations

from dataclasses import dataclass

from tabviz.charts.base import (
    ChartRenderer,
    measure_title,
    register_chart_renderer,
    title_commands,
)
from tabviz.commands import DrawCommand, Ellipse
from tabviz.errors import InsufficientColumnsError
from tabviz.interpolation import interpolate
from tabviz.layout import (
    Line,
    Regions,
    TextPlacement,
    gridlines,
    line_commands,
    outlined,
    partition,
    place_bottom_labels,
    place_left_labels,
    place_title,
    text_commands,
)
from tabviz.scale import AxisScale, build_scale, format_tick
from tabviz.text import LabelCache
from tabviz.types import ChartKind, ChartStyle, Orientation, Point, Rectangle, TableData


@dataclass(frozen=True)
class AxisDomain:
    """One axis: the shift that moves its minimum to zero, and its scale."""

    shift: float
    scale: AxisScale

    @property
    def grid_maximum(self) -> float:
        return self.scale.grid_maximum

    def labels(self) -> tuple[float, ...]:
        """Tick values in data coordinates, ascending."""
        return tuple(tick - self.shift for tick in self.scale.ticks)

    def fraction(self, value: float) -> float:
        """Position of ``value`` along the axis, 0 at the first tick, 1 at the last."""
        return (value + self.shift) / self.grid_maximum


@dataclass(frozen=True)
class ScatterLayout:
    style: ChartStyle
    x_axis: AxisDomain
    y_axis: AxisDomain
    regions: Regions
    title: TextPlacement | None
    left_labels: tuple[TextPlacement, ...]
    bottom_labels: tuple[TextPlacement, ...]
    gridlines: tuple[Line, ...]
    points: tuple[Point, ...]


def axis_domain(values: tuple[float, ...]) -> AxisDomain:
    shift = -min(values)
    return AxisDomain(shift=shift, scale=build_scale(max(values) + shift))


def point_position(grid: Rectangle, x_axis: AxisDomain, y_axis: AxisDomain, x: float, y: float) -> Point:
    return Point(
        grid.left + x_axis.fraction(x) * grid.width,
        grid.bottom - y_axis.fraction(y) * grid.height,
    )


@register_chart_renderer(ChartKind.SCATTER)
class ScatterChartRenderer(ChartRenderer):
    """Renders (x, y) pairs from the first two columns as points."""

    def build_layout(self, table: TableData, style: ChartStyle, labels: LabelCache) -> ScatterLayout:
        if table.n_columns < 2:
            raise InsufficientColumnsError(0, table.n_columns)

        x_axis = axis_domain(table.column(0))
        y_axis = axis_domain(table.column(1))

        font = style.label_font
        title = measure_title(table, style, labels)
        x_labels = labels.measure_all((format_tick(v) for v in x_axis.labels()), font)
        y_labels = labels.measure_all((format_tick(v) for v in reversed(y_axis.labels())), font)

        regions = partition(style.size, title, (), False, y_labels, x_labels)
        grid = regions.grid

        left = place_left_labels(grid, y_labels, interpolate(grid.top, grid.bottom, len(y_labels)))
        bottom = place_bottom_labels(grid, x_labels, interpolate(grid.left, grid.right, len(x_labels)))
        lines = gridlines(grid, len(y_labels), Orientation.VERTICAL) + gridlines(
            grid, len(x_labels), Orientation.HORIZONTAL
        )

        points = tuple(point_position(grid, x_axis, y_axis, row[0], row[1]) for row in table.values)

        return ScatterLayout(
            style=style,
            x_axis=x_axis,
            y_axis=y_axis,
            regions=regions,
            title=place_title(regions.title, title),
            left_labels=left,
            bottom_labels=bottom,
            gridlines=lines,
            points=points,
        )

    def emit_commands(self, layout: ScatterLayout) -> list[DrawCommand]:
        style = layout.style
        radius = style.point_radius
        commands = title_commands(layout.title, style)
        commands += text_commands(layout.left_labels, style.label_font, style.text_color)
        commands += text_commands(layout.bottom_labels, style.label_font, style.text_color)
        commands += line_commands(layout.gridlines, style.grid_color)
        for point in layout.points:
            bounds = Rectangle(point.x - radius, point.y - radius, 2 * radius, 2 * radius)
            commands.append(outlined(Ellipse(bounds), style.palette[0], style.stroke_color))
        return commands


__all__ = ["AxisDomain", "ScatterLayout", "axis_domain", "point_position", "ScatterChartRenderer"]
