"""Bar chart renderer (clustered or stacked, vertical or horizontal).

Layout stages, each consuming the previous stage's record::

    Title -> Ticks -> Labels -> Legend & Graph & Grid regions
          -> Axis labels (Y, X) -> Gridlines -> Bar slots & colors -> Bars
          -> Legend

Rows of the table are categories: each gets one slot along the category
axis. Columns are series: each gets one color, and within a slot either its
own side-by-side bar (clustered) or one segment of a stack (stacked).
"""

from __future__ import annotations

from dataclasses import dataclass

from tabviz.charts.base import (
    ChartRenderer,
    ensure_non_negative,
    measure_title,
    register_chart_renderer,
    title_commands,
)
from tabviz.colors import assign_colors
from tabviz.commands import DrawCommand
from tabviz.interpolation import interpolate, interpolate_midpoints, interpolation_delta
from tabviz.layout import (
    LegendEntry,
    Line,
    Regions,
    TextPlacement,
    gridlines,
    legend_commands,
    legend_entries,
    line_commands,
    outlined,
    partition,
    place_bottom_labels,
    place_left_labels,
    place_title,
    text_commands,
)
from tabviz.scale import CLUSTERED_SHIFT, STACKED_SHIFT, AxisScale, build_scale, format_tick
from tabviz.text import LabelCache, LabelMeasurement
from tabviz.types import (
    ChartKind,
    ChartStyle,
    MultipleValuesDisplay,
    Orientation,
    Rectangle,
    TableData,
)


# =============================================================================
# Stage records
# =============================================================================


@dataclass(frozen=True)
class BarTicks:
    """Value axis scale and the tick values in on-screen order."""

    scale: AxisScale
    axis_values: tuple[float, ...]

    @property
    def grid_maximum(self) -> float:
        return self.scale.grid_maximum


@dataclass(frozen=True)
class BarLabels:
    """Measured labels; ``values`` follow ``BarTicks.axis_values``."""

    title: LabelMeasurement | None
    columns: tuple[LabelMeasurement, ...]
    rows: tuple[LabelMeasurement, ...]
    values: tuple[LabelMeasurement, ...]


@dataclass(frozen=True)
class Bar:
    """One drawn bar or stack segment."""

    rect: Rectangle
    row: int
    column: int
    color: str


@dataclass(frozen=True)
class BarLayout:
    """Complete geometry of a bar chart."""

    style: ChartStyle
    ticks: BarTicks
    labels: BarLabels
    regions: Regions
    title: TextPlacement | None
    left_labels: tuple[TextPlacement, ...]
    bottom_labels: tuple[TextPlacement, ...]
    gridlines: tuple[Line, ...]
    slots: tuple[Rectangle, ...]
    colors: tuple[str, ...]
    bars: tuple[Bar, ...]
    legend: tuple[LegendEntry, ...]


# =============================================================================
# Stages
# =============================================================================


def value_axis_maximum(table: TableData, display: MultipleValuesDisplay) -> float:
    """Largest cell (clustered) or largest row total (stacked)."""
    if display is MultipleValuesDisplay.STACKED:
        return max(table.row_sums())
    return max(table.cells())


def compute_ticks(table: TableData, style: ChartStyle) -> BarTicks:
    display = style.multiple_values_display
    shift = STACKED_SHIFT if display is MultipleValuesDisplay.STACKED else CLUSTERED_SHIFT
    scale = build_scale(value_axis_maximum(table, display), shift)
    if style.orientation is Orientation.VERTICAL:
        axis_values = scale.descending()
    else:
        axis_values = scale.ticks
    return BarTicks(scale=scale, axis_values=axis_values)


def measure_labels(
    table: TableData,
    style: ChartStyle,
    ticks: BarTicks,
    labels: LabelCache,
) -> BarLabels:
    font = style.label_font
    return BarLabels(
        title=measure_title(table, style, labels),
        columns=labels.measure_all(table.column_labels, font),
        rows=labels.measure_all(table.row_labels, font),
        values=labels.measure_all((format_tick(v) for v in ticks.axis_values), font),
    )


def axis_labels(style: ChartStyle, labels: BarLabels) -> tuple[
    tuple[LabelMeasurement, ...], tuple[LabelMeasurement, ...]
]:
    """Labels on the (left, bottom) sides of the grid."""
    if style.orientation is Orientation.VERTICAL:
        return labels.values, labels.rows
    return labels.rows, labels.values


def compute_regions(style: ChartStyle, labels: BarLabels) -> Regions:
    left, bottom = axis_labels(style, labels)
    return partition(
        style.size,
        labels.title,
        labels.columns,
        style.display_legend,
        left,
        bottom,
    )


def place_axis_labels(
    style: ChartStyle,
    labels: BarLabels,
    grid: Rectangle,
) -> tuple[tuple[TextPlacement, ...], tuple[TextPlacement, ...]]:
    """Value labels sit on gridlines, category labels between them."""
    n_values = len(labels.values)
    n_rows = len(labels.rows)
    if style.orientation is Orientation.VERTICAL:
        left = place_left_labels(grid, labels.values, interpolate(grid.top, grid.bottom, n_values))
        bottom = place_bottom_labels(
            grid, labels.rows, interpolate_midpoints(grid.left, grid.right, n_rows)
        )
    else:
        left = place_left_labels(
            grid, labels.rows, interpolate_midpoints(grid.top, grid.bottom, n_rows)
        )
        bottom = place_bottom_labels(
            grid, labels.values, interpolate(grid.left, grid.right, n_values)
        )
    return left, bottom


def compute_slots(style: ChartStyle, grid: Rectangle, n_rows: int) -> tuple[Rectangle, ...]:
    """Part of the grid each category's bars may occupy.

    The category axis is split into ``n_rows`` equal slots; the bars take
    the central ``bar_width_rate`` fraction of each slot.
    """
    rate = style.bar_width_rate
    slots = []
    if style.orientation is Orientation.VERTICAL:
        width = interpolation_delta(grid.left, grid.right, n_rows + 1)
        for x in interpolate(grid.left, grid.right, n_rows + 1)[:-1]:
            start = x + (1 - rate) / 2.0 * width
            end = x + (1 + rate) / 2.0 * width
            slots.append(Rectangle(start, grid.top, end - start, grid.height))
    else:
        height = interpolation_delta(grid.top, grid.bottom, n_rows + 1)
        for y in interpolate(grid.top, grid.bottom, n_rows + 1)[:-1]:
            start = y + (1 - rate) / 2.0 * height
            end = y + (1 + rate) / 2.0 * height
            slots.append(Rectangle(grid.left, start, grid.width, end - start))
    return tuple(slots)


def clustered_bars(
    table: TableData,
    style: ChartStyle,
    slots: tuple[Rectangle, ...],
    grid_maximum: float,
    colors: tuple[str, ...],
) -> tuple[Bar, ...]:
    """One bar per column, side by side inside each slot."""
    bars = []
    n = table.n_columns
    for row_index, (slot, row) in enumerate(zip(slots, table.values)):
        if style.orientation is Orientation.VERTICAL:
            bar_width = interpolation_delta(slot.left, slot.right, n + 1)
            for column, x in enumerate(interpolate(slot.left, slot.right, n + 1)[:-1]):
                length = slot.height * (row[column] / grid_maximum)
                rect = Rectangle(x, slot.bottom - length, bar_width, length)
                bars.append(Bar(rect, row_index, column, colors[column]))
        else:
            bar_height = interpolation_delta(slot.top, slot.bottom, n + 1)
            for column, y in enumerate(interpolate(slot.top, slot.bottom, n + 1)[:-1]):
                length = slot.width * (row[column] / grid_maximum)
                rect = Rectangle(slot.left, y, length, bar_height)
                bars.append(Bar(rect, row_index, column, colors[column]))
    return tuple(bars)


def stacked_bars(
    table: TableData,
    style: ChartStyle,
    slots: tuple[Rectangle, ...],
    grid_maximum: float,
    colors: tuple[str, ...],
) -> tuple[Bar, ...]:
    """Column segments stacked from the baseline outward, in column order."""
    bars = []
    for row_index, (slot, row) in enumerate(zip(slots, table.values)):
        if style.orientation is Orientation.VERTICAL:
            current = slot.bottom
            for column, value in enumerate(row):
                length = slot.height * (value / grid_maximum)
                rect = Rectangle(slot.left, current - length, slot.width, length)
                bars.append(Bar(rect, row_index, column, colors[column]))
                current -= length
        else:
            current = slot.left
            for column, value in enumerate(row):
                length = slot.width * (value / grid_maximum)
                rect = Rectangle(current, slot.top, length, slot.height)
                bars.append(Bar(rect, row_index, column, colors[column]))
                current += length
    return tuple(bars)


# =============================================================================
# Renderer
# =============================================================================


@register_chart_renderer(ChartKind.BAR)
class BarChartRenderer(ChartRenderer):
    """Renders clustered or stacked bar charts."""

    def build_layout(self, table: TableData, style: ChartStyle, labels: LabelCache) -> BarLayout:
        ensure_non_negative(table)

        ticks = compute_ticks(table, style)
        measured = measure_labels(table, style, ticks, labels)
        regions = compute_regions(style, measured)
        grid = regions.grid

        left, bottom = place_axis_labels(style, measured, grid)
        lines = gridlines(grid, len(ticks.axis_values), style.orientation)

        slots = compute_slots(style, grid, table.n_rows)
        colors = assign_colors(table.n_columns, style.palette)
        if style.multiple_values_display is MultipleValuesDisplay.STACKED:
            bars = stacked_bars(table, style, slots, ticks.grid_maximum, colors)
        else:
            bars = clustered_bars(table, style, slots, ticks.grid_maximum, colors)

        legend = legend_entries(regions.legend, measured.columns, colors) if style.display_legend else ()

        return BarLayout(
            style=style,
            ticks=ticks,
            labels=measured,
            regions=regions,
            title=place_title(regions.title, measured.title),
            left_labels=left,
            bottom_labels=bottom,
            gridlines=lines,
            slots=slots,
            colors=colors,
            bars=bars,
            legend=legend,
        )

    def emit_commands(self, layout: BarLayout) -> list[DrawCommand]:
        style = layout.style
        commands = title_commands(layout.title, style)
        commands += text_commands(layout.left_labels, style.label_font, style.text_color)
        commands += text_commands(layout.bottom_labels, style.label_font, style.text_color)
        commands += line_commands(layout.gridlines, style.grid_color)
        commands += [outlined(bar.rect, bar.color, style.stroke_color) for bar in layout.bars]
        commands += legend_commands(layout.legend, style.label_font, style.text_color, style.stroke_color)
        return commands


__all__ = [
    "BarTicks",
    "BarLabels",
    "Bar",
    "BarLayout",
    "BarChartRenderer",
    "value_axis_maximum",
    "compute_ticks",
    "compute_slots",
    "clustered_bars",
    "stacked_bars",
]
