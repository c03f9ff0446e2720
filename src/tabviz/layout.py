"""Region partitioning and shared layout helpers.

The canvas is split top-down in a fixed order: title, legend, graph, grid.
Each step consumes the result of the previous one, and every region keeps a
``MARGIN`` distance from its neighbours. The helpers at the bottom of the
module turn label measurements and regions into text placements, gridlines
and legend entries, and finally into drawing commands shared by all chart
variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tabviz.commands import DrawCommand, DrawLine, DrawText, FillShape, Shape
from tabviz.errors import LayoutOverflowError
from tabviz.interpolation import interpolate
from tabviz.text import LabelMeasurement, max_height, max_width
from tabviz.types import FontSpec, Orientation, Point, Rectangle, Size

# Default indentation between regions, in pixels.
MARGIN = 5.0


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True)
class Regions:
    """The four canvas regions of a chart."""

    title: Rectangle
    legend: Rectangle
    graph: Rectangle
    grid: Rectangle


@dataclass(frozen=True)
class TextPlacement:
    """A measured label anchored at its baseline origin."""

    label: LabelMeasurement
    x: float
    y: float


@dataclass(frozen=True)
class LegendEntry:
    """One legend item: a color swatch followed by its label."""

    swatch: Rectangle
    color: str
    text: TextPlacement


Line = tuple[Point, Point]


# =============================================================================
# Partition
# =============================================================================


def _require(name: str, rect: Rectangle, *, allow_zero_height: bool = False) -> Rectangle:
    if rect.width <= 0 or rect.height < 0 or (rect.height == 0 and not allow_zero_height):
        raise LayoutOverflowError(name, rect.width, rect.height)
    return rect


def title_region(canvas: Size, title: LabelMeasurement | None) -> Rectangle:
    """Full-width band at the top; zero height when there is no title."""
    height = 0.0 if title is None or not title.text else 2 * MARGIN + title.height
    rect = Rectangle(MARGIN, MARGIN, canvas.width - 2 * MARGIN, height)
    return _require("title", rect, allow_zero_height=True)


def legend_region(
    canvas: Size,
    labels: Sequence[LabelMeasurement],
    display: bool,
) -> Rectangle:
    """Full-width band anchored to the bottom of the canvas."""
    height = max_height(labels) if display else 0.0
    rect = Rectangle(
        MARGIN,
        canvas.height - MARGIN - height,
        canvas.width - 2 * MARGIN,
        height,
    )
    return _require("legend", rect, allow_zero_height=True)


def graph_region(canvas: Size, title: Rectangle, legend: Rectangle) -> Rectangle:
    """Everything between the title and the legend."""
    rect = Rectangle(
        MARGIN,
        title.bottom,
        canvas.width - 2 * MARGIN,
        legend.top - title.bottom,
    )
    return _require("graph", rect)


def grid_region(
    graph: Rectangle,
    left_labels: Sequence[LabelMeasurement],
    bottom_labels: Sequence[LabelMeasurement],
) -> Rectangle:
    """The graph inset by ``MARGIN`` and by the space its axis labels need."""
    rect = graph.inset(
        left=MARGIN + max_width(left_labels),
        top=MARGIN,
        right=MARGIN,
        bottom=MARGIN + max_height(bottom_labels),
    )
    return _require("grid", rect)


def centered_square(region: Rectangle) -> Rectangle:
    """Largest square centered in ``region`` after a ``MARGIN`` inset."""
    inner = region.inset(MARGIN, MARGIN, MARGIN, MARGIN)
    side = min(inner.width, inner.height)
    rect = Rectangle(inner.center_x - side / 2.0, inner.center_y - side / 2.0, side, side)
    return _require("pie", rect)


def partition(
    canvas: Size,
    title: LabelMeasurement | None,
    legend_labels: Sequence[LabelMeasurement],
    display_legend: bool,
    left_labels: Sequence[LabelMeasurement],
    bottom_labels: Sequence[LabelMeasurement],
) -> Regions:
    """Compute title, legend, graph and grid regions in that order.

    Raises:
        LayoutOverflowError: If any region ends up with no room.
    """
    title_rect = title_region(canvas, title)
    legend_rect = legend_region(canvas, legend_labels, display_legend)
    graph_rect = graph_region(canvas, title_rect, legend_rect)
    grid_rect = grid_region(graph_rect, left_labels, bottom_labels)
    return Regions(title=title_rect, legend=legend_rect, graph=graph_rect, grid=grid_rect)


# =============================================================================
# Placement helpers
# =============================================================================


def place_title(region: Rectangle, title: LabelMeasurement | None) -> TextPlacement | None:
    """Center the title in its region."""
    if title is None or not title.text:
        return None
    return TextPlacement(
        label=title,
        x=region.center_x - title.width / 2.0,
        y=title.baseline_for_center(region.center_y),
    )


def place_left_labels(
    grid: Rectangle,
    labels: Sequence[LabelMeasurement],
    positions: Sequence[float],
) -> tuple[TextPlacement, ...]:
    """Right-align labels against the grid's left edge, centered on ``positions``."""
    return tuple(
        TextPlacement(
            label=label,
            x=grid.left - label.width - MARGIN,
            y=label.baseline_for_center(y),
        )
        for label, y in zip(labels, positions)
    )


def place_bottom_labels(
    grid: Rectangle,
    labels: Sequence[LabelMeasurement],
    positions: Sequence[float],
) -> tuple[TextPlacement, ...]:
    """Hang labels under the grid's bottom edge, centered on ``positions``."""
    return tuple(
        TextPlacement(
            label=label,
            x=x - label.width / 2.0,
            y=label.baseline_for_top(grid.bottom + MARGIN),
        )
        for label, x in zip(labels, positions)
    )


def gridlines(grid: Rectangle, count: int, orientation: Orientation) -> tuple[Line, ...]:
    """Evenly spaced reference lines across the grid.

    ``VERTICAL`` spaces ``count`` horizontal lines along the vertical axis;
    ``HORIZONTAL`` spaces vertical lines along the horizontal axis.
    """
    if orientation is Orientation.VERTICAL:
        return tuple(
            (Point(grid.left, y), Point(grid.right, y))
            for y in interpolate(grid.top, grid.bottom, count)
        )
    return tuple(
        (Point(x, grid.top), Point(x, grid.bottom))
        for x in interpolate(grid.left, grid.right, count)
    )


def legend_entries(
    legend: Rectangle,
    labels: Sequence[LabelMeasurement],
    colors: Sequence[str],
) -> tuple[LegendEntry, ...]:
    """Lay the legend out as one centered row of swatch + label pairs."""
    if legend.height <= 0 or not labels:
        return ()

    n = len(labels)
    swatch_size = max_height(labels)
    total_width = (
        n * swatch_size
        + sum(label.width for label in labels)
        + (2 * (n - 1) + n) * MARGIN
    )

    entries = []
    x = legend.center_x - total_width / 2.0
    for label, color in zip(labels, colors):
        swatch = Rectangle(x, legend.top, swatch_size, swatch_size)
        x += swatch_size + MARGIN
        text = TextPlacement(label=label, x=x, y=label.baseline_for_center(legend.center_y))
        x += label.width + 2 * MARGIN
        entries.append(LegendEntry(swatch=swatch, color=color, text=text))
    return tuple(entries)


# =============================================================================
# Emission helpers
# =============================================================================


def outlined(shape: Shape, fill_color: str, stroke_color: str) -> FillShape:
    """Fill ``shape`` and draw its outline."""
    return FillShape(shape=shape, fill_color=fill_color, stroke_color=stroke_color)


def text_commands(
    placements: Sequence[TextPlacement | None],
    font: FontSpec,
    color: str,
) -> list[DrawCommand]:
    return [
        DrawText(text=p.label.text, x=p.x, y=p.y, font=font, color=color)
        for p in placements
        if p is not None
    ]


def line_commands(lines: Sequence[Line], color: str) -> list[DrawCommand]:
    return [DrawLine(start=start, end=end, color=color) for start, end in lines]


def legend_commands(
    entries: Sequence[LegendEntry],
    font: FontSpec,
    text_color: str,
    stroke_color: str,
) -> list[DrawCommand]:
    commands: list[DrawCommand] = []
    for entry in entries:
        commands.append(outlined(entry.swatch, entry.color, stroke_color))
        commands.extend(text_commands([entry.text], font, text_color))
    return commands


__all__ = [
    "MARGIN",
    "Regions",
    "TextPlacement",
    "LegendEntry",
    "title_region",
    "legend_region",
    "graph_region",
    "grid_region",
    "centered_square",
    "partition",
    "place_title",
    "place_left_labels",
    "place_bottom_labels",
    "gridlines",
    "legend_entries",
    "outlined",
    "text_commands",
    "line_commands",
    "legend_commands",
]
