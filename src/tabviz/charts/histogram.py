"""Histogram renderer.

A histogram is a special case of a bar chart: the first column of the table
is split into equal-width buckets, and the bucket counts are drawn as a
single-series vertical bar chart with touching bars and no legend.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Sequence

from tabviz.charts.bar import BarChartRenderer, BarLayout
from tabviz.charts.base import ChartRenderer, register_chart_renderer
from tabviz.commands import DrawCommand
from tabviz.errors import InvalidArgumentError
from tabviz.interpolation import interpolate
from tabviz.text import LabelCache
from tabviz.types import (
    ChartKind,
    ChartStyle,
    MultipleValuesDisplay,
    Orientation,
    TableData,
)

HISTOGRAM_COLUMN_LABEL = "Data"


@dataclass(frozen=True)
class Bucket:
    """One histogram bucket; ``closed`` marks an inclusive upper bound."""

    low: float
    high: float
    count: int
    closed: bool = False

    @property
    def label(self) -> str:
        return f"[{self.low:.3f}, {self.high:.3f}{']' if self.closed else ')'}"


def bucketize(values: Sequence[float], bars_count: int) -> tuple[Bucket, ...]:
    """Count ``values`` into ``bars_count`` equal-width buckets over ``[min, max]``.

    Every bucket is half-open ``[low, high)`` except the last one, which is
    closed so the maximum value is always counted.

    Raises:
        InvalidArgumentError: If ``bars_count`` is less than 1 or ``values``
            is empty.
    """
    if bars_count < 1:
        raise InvalidArgumentError(f"bars_count must be at least 1, got {bars_count}")
    if not values:
        raise InvalidArgumentError("Cannot build a histogram of no values")

    # Neighbouring buckets share one edge value and the last edge is max(values).
    edges = interpolate(min(values), max(values), bars_count + 1)
    last = bars_count - 1

    counts = [0] * bars_count
    for value in values:
        counts[min(bisect_right(edges, value) - 1, last)] += 1

    return tuple(
        Bucket(low=edges[i], high=edges[i + 1], count=counts[i], closed=i == last)
        for i in range(bars_count)
    )


def histogram_table(table: TableData, bars_count: int) -> TableData:
    """Derive the one-column bucket-count table drawn by the histogram."""
    buckets = bucketize(table.column(0), bars_count)
    return TableData(
        title=table.title,
        column_labels=(HISTOGRAM_COLUMN_LABEL,),
        row_labels=tuple(bucket.label for bucket in buckets),
        values=tuple((float(bucket.count),) for bucket in buckets),
    )


def histogram_style(style: ChartStyle) -> ChartStyle:
    """Bar style used for histograms: one color, touching bars, no legend."""
    return style.with_options(
        display_legend=False,
        bar_width_rate=1.0,
        multiple_values_display=MultipleValuesDisplay.CLUSTERED,
        orientation=Orientation.VERTICAL,
        palette=(style.palette[0],),
    )


@register_chart_renderer(ChartKind.HISTOGRAM)
class HistogramChartRenderer(ChartRenderer):
    """Renders a histogram of the table's first column."""

    def __init__(self) -> None:
        self._bars = BarChartRenderer()

    def build_layout(self, table: TableData, style: ChartStyle, labels: LabelCache) -> BarLayout:
        counts = histogram_table(table, style.bars_count)
        return self._bars.build_layout(counts, histogram_style(style), labels)

    def emit_commands(self, layout: BarLayout) -> list[DrawCommand]:
        return self._bars.emit_commands(layout)


__all__ = [
    "HISTOGRAM_COLUMN_LABEL",
    "Bucket",
    "bucketize",
    "histogram_table",
    "histogram_style",
    "HistogramChartRenderer",
]
