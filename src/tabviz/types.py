"""Core data types for tabviz.

This module contains the enums and frozen dataclasses shared by the
layout engine, the chart renderers and the I/O adapters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable, Sequence

from tabviz.colors import CLASSIC_PALETTE
from tabviz.errors import InvalidArgumentError, InvalidDataError


# =============================================================================
# Enums
# =============================================================================


class ChartKind(str, Enum):
    """Supported chart kinds."""

    BAR = "bar"
    HISTOGRAM = "histogram"
    PIE = "pie"
    SCATTER = "scatter"


class Orientation(str, Enum):
    """Direction bars grow in (bar charts only)."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class MultipleValuesDisplay(str, Enum):
    """How several columns of one row are drawn.

    CLUSTERED places the bars side by side; STACKED puts them on top of each
    other so the contribution of every column to the total is visible.
    """

    CLUSTERED = "clustered"
    STACKED = "stacked"


# =============================================================================
# Geometry
# =============================================================================


@dataclass(frozen=True)
class Size:
    """Canvas size in pixels."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidArgumentError(f"Canvas {name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class Point:
    """A point in canvas coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle; origin top-left, y grows downward."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0

    def inset(
        self,
        left: float = 0.0,
        top: float = 0.0,
        right: float = 0.0,
        bottom: float = 0.0,
    ) -> "Rectangle":
        """Return the rectangle shrunk by the given amount on each side."""
        return Rectangle(
            self.x + left,
            self.y + top,
            self.width - left - right,
            self.height - top - bottom,
        )

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


# =============================================================================
# Fonts and style
# =============================================================================


@dataclass(frozen=True)
class FontSpec:
    """Font used for one class of text on the chart."""

    size: float = 14.0
    family: str = "Arial"
    bold: bool = False

    def __post_init__(self) -> None:
        if not self.size > 0:
            raise InvalidArgumentError(f"Font size must be positive, got {self.size!r}")


TITLE_FONT = FontSpec(size=36.0)
LABEL_FONT = FontSpec(size=14.0)


@dataclass(frozen=True)
class ChartStyle:
    """Style configuration supplied per render call.

    Attributes:
        size: Canvas size in pixels.
        orientation: Bar direction (bar charts only).
        multiple_values_display: Clustered or stacked bars (bar charts only).
        bar_width_rate: Fraction of a category slot covered by its bar(s).
        palette: Colors assigned cyclically to columns or sectors.
        display_legend: Draw the column legend under the graph.
        point_radius: Radius of scatter points in pixels.
        bars_count: Number of histogram buckets.
        grid_color: Color of gridlines.
        stroke_color: Outline color of bars, sectors, points and swatches.
        text_color: Color of every text element.
        title_font: Font of the chart title.
        label_font: Font of axis labels and legend entries.
    """

    size: Size = field(default_factory=lambda: Size(800, 600))
    orientation: Orientation = Orientation.VERTICAL
    multiple_values_display: MultipleValuesDisplay = MultipleValuesDisplay.CLUSTERED
    bar_width_rate: float = 0.8
    palette: tuple[str, ...] = CLASSIC_PALETTE
    display_legend: bool = True
    point_radius: float = 5.0
    bars_count: int = 10
    grid_color: str = "#c0c0c0"
    stroke_color: str = "#000000"
    text_color: str = "#000000"
    title_font: FontSpec = TITLE_FONT
    label_font: FontSpec = LABEL_FONT

    def __post_init__(self) -> None:
        if not isinstance(self.palette, tuple):
            object.__setattr__(self, "palette", tuple(self.palette))
        if not 0.0 < self.bar_width_rate <= 1.0:
            raise InvalidArgumentError(
                f"bar_width_rate must be in (0, 1], got {self.bar_width_rate!r}"
            )
        if not self.palette:
            raise InvalidArgumentError("palette must contain at least one color")
        if not self.point_radius > 0:
            raise InvalidArgumentError(f"point_radius must be positive, got {self.point_radius!r}")
        if isinstance(self.bars_count, bool) or not isinstance(self.bars_count, int) or self.bars_count < 1:
            raise InvalidArgumentError(f"bars_count must be a positive integer, got {self.bars_count!r}")

    def with_options(self, **changes: Any) -> "ChartStyle":
        """Return a copy of this style with the given fields replaced."""
        return replace(self, **changes)


# =============================================================================
# Table data
# =============================================================================


@dataclass(frozen=True)
class TableData:
    """A rectangular table of numbers with row and column labels.

    Rows are categories (bar slots), columns are series (bar colors, pie
    sectors). Immutable once constructed.
    """

    title: str
    column_labels: tuple[str, ...]
    row_labels: tuple[str, ...]
    values: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        if not self.values or not self.column_labels:
            raise InvalidDataError("A table needs at least one row and one column")
        if len(self.values) != len(self.row_labels):
            raise InvalidDataError(
                f"{len(self.values)} rows of values but {len(self.row_labels)} row labels"
            )
        width = len(self.column_labels)
        for index, row in enumerate(self.values):
            if len(row) != width:
                raise InvalidDataError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )

    @classmethod
    def from_rows(
        cls,
        values: Iterable[Sequence[float]],
        *,
        title: str = "",
        column_labels: Sequence[str] | None = None,
        row_labels: Sequence[str] | None = None,
    ) -> "TableData":
        """Build a table from nested sequences, generating missing labels.

        Missing column labels become ``"Input 1"``, ``"Input 2"``...; missing
        row labels become ``"Series 1"``, ``"Series 2"``...
        """
        rows = tuple(tuple(float(cell) for cell in row) for row in values)
        if column_labels is None:
            width = len(rows[0]) if rows else 0
            column_labels = [f"Input {i + 1}" for i in range(width)]
        if row_labels is None:
            row_labels = [f"Series {i + 1}" for i in range(len(rows))]
        return cls(
            title=title,
            column_labels=tuple(column_labels),
            row_labels=tuple(row_labels),
            values=rows,
        )

    @property
    def n_rows(self) -> int:
        return len(self.values)

    @property
    def n_columns(self) -> int:
        return len(self.column_labels)

    def column(self, index: int) -> tuple[float, ...]:
        """Return one column of values."""
        return tuple(row[index] for row in self.values)

    def row_sums(self) -> tuple[float, ...]:
        return tuple(math.fsum(row) for row in self.values)

    def cells(self) -> Iterable[float]:
        for row in self.values:
            yield from row


__all__ = [
    "ChartKind",
    "Orientation",
    "MultipleValuesDisplay",
    "Size",
    "Point",
    "Rectangle",
    "FontSpec",
    "TITLE_FONT",
    "LABEL_FONT",
    "ChartStyle",
    "TableData",
]
