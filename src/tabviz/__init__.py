"""tabviz - Bar, histogram, pie and scatter charts from tabular data.

Rendering is split into a pure layout engine that turns a ``TableData`` and a
``ChartStyle`` into an ordered tuple of drawing commands, and sinks that
replay those commands (SVG, PNG).
"""

from tabviz.adapters import read_table, table_from_frame
from tabviz.api import ChartResult, render_chart, render_svg, save_chart
from tabviz.canvas import Canvas, SVGCanvas, replay
from tabviz.charts import get_chart_renderer
from tabviz.config import load_style
from tabviz.errors import (
    EmptyDataError,
    ExportError,
    InsufficientColumnsError,
    InvalidArgumentError,
    InvalidDataError,
    InvalidDomainError,
    LayoutOverflowError,
    TableParseError,
    TabvizError,
)
from tabviz.types import (
    ChartKind,
    ChartStyle,
    FontSpec,
    MultipleValuesDisplay,
    Orientation,
    Size,
    TableData,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Data
    "TableData",
    "read_table",
    "table_from_frame",
    # Style
    "ChartKind",
    "ChartStyle",
    "FontSpec",
    "MultipleValuesDisplay",
    "Orientation",
    "Size",
    "load_style",
    # Rendering
    "ChartResult",
    "render_chart",
    "render_svg",
    "save_chart",
    "get_chart_renderer",
    "Canvas",
    "SVGCanvas",
    "replay",
    # Errors
    "TabvizError",
    "InvalidDomainError",
    "InvalidArgumentError",
    "LayoutOverflowError",
    "EmptyDataError",
    "InsufficientColumnsError",
    "InvalidDataError",
    "TableParseError",
    "ExportError",
]
