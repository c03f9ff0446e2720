"""Render command - Draw a chart from a CSV file.

This module implements the `tabviz render` command.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from tabviz.cli_modules.common.errors import error_boundary, require_file
from tabviz.cli_modules.common.output import configure_logging, success
from tabviz.types import ChartKind, MultipleValuesDisplay, Orientation

logger = logging.getLogger(__name__)


@error_boundary
def render_cmd(
    data: Annotated[
        Path,
        typer.Argument(help="Path to the ';'-separated data file"),
    ],
    chart_type: Annotated[
        ChartKind,
        typer.Option("--type", "-t", case_sensitive=False, help="Chart type"),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output file name (.svg is written, .png with --png)"),
    ] = Path("output.svg"),
    size: Annotated[
        Optional[tuple[int, int]],
        typer.Option("--size", "-s", help="Canvas width and height in pixels"),
    ] = None,
    png: Annotated[
        bool,
        typer.Option("--png", "-p", help="Also render a PNG next to the SVG"),
    ] = False,
    rows_labels: Annotated[
        bool,
        typer.Option("--rows-labels", "-r", help="Treat the first column as row labels"),
    ] = False,
    columns_labels: Annotated[
        bool,
        typer.Option("--columns-labels", "-c", help="Treat the first row as column labels"),
    ] = False,
    title: Annotated[
        Optional[str],
        typer.Option("--title", help="Chart title"),
    ] = None,
    orientation: Annotated[
        Optional[Orientation],
        typer.Option("--orientation", case_sensitive=False, help="Bar direction (bar charts)"),
    ] = None,
    display: Annotated[
        Optional[MultipleValuesDisplay],
        typer.Option("--display", "-d", case_sensitive=False, help="Clustered or stacked bars"),
    ] = None,
    no_legend: Annotated[
        bool,
        typer.Option("--no-legend", help="Hide the column legend"),
    ] = False,
    bars: Annotated[
        Optional[int],
        typer.Option("--bars", help="Number of histogram buckets"),
    ] = None,
    palette: Annotated[
        Optional[str],
        typer.Option("--palette", help="Named palette (see `tabviz palettes`)"),
    ] = None,
    style_file: Annotated[
        Optional[Path],
        typer.Option("--style", help="YAML or JSON style file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """Render a chart from a CSV file.

    Examples:
        tabviz render sales.csv -t bar -r -c --title "Sales"
        tabviz render sales.csv -t bar --display stacked --orientation horizontal
        tabviz render values.csv -t histogram --bars 20 -o hist --png
        tabviz render shares.csv -t pie -c --style style.yaml
    """
    from tabviz.adapters import read_table
    from tabviz.api import render_chart, save_chart
    from tabviz.config import load_style

    configure_logging(verbose)
    require_file(data, "Data file")

    table = read_table(
        data,
        extract_row_labels=rows_labels,
        extract_column_labels=columns_labels,
        title=title or "",
    )

    overrides = {
        "size": size if size and None not in size else None,
        "orientation": orientation,
        "multiple_values_display": display,
        "display_legend": False if no_legend else None,
        "bars_count": bars,
        "palette": palette,
    }
    style = load_style(style_file, overrides)
    logger.debug("Rendering %s chart at %dx%d", chart_type.value, style.size.width, style.size.height)

    result = render_chart(chart_type, table, style)

    svg_path = save_chart(result, output.with_suffix(".svg"))
    success(f"Chart written to {svg_path}")
    if png:
        png_path = save_chart(result, output.with_suffix(".png"), png=True)
        success(f"Chart written to {png_path}")
