"""Chart renderers.

Importing this package registers every built-in renderer with
``chart_registry``.
"""

from tabviz.charts.base import (
    ChartRenderer,
    ChartRendererRegistry,
    chart_registry,
    get_chart_renderer,
    register_chart_renderer,
)
from tabviz.charts.bar import BarChartRenderer
from tabviz.charts.histogram import HistogramChartRenderer
from tabviz.charts.pie import PieChartRenderer
from tabviz.charts.scatter import ScatterChartRenderer

__all__ = [
    "ChartRenderer",
    "ChartRendererRegistry",
    "chart_registry",
    "get_chart_renderer",
    "register_chart_renderer",
    "BarChartRenderer",
    "HistogramChartRenderer",
    "PieChartRenderer",
    "ScatterChartRenderer",
]
