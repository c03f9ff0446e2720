"""Palettes command - List the named color palettes."""

from __future__ import annotations

from rich.table import Table

from tabviz.cli_modules.common.errors import error_boundary
from tabviz.cli_modules.common.output import console
from tabviz.colors import COLOR_PALETTES


@error_boundary
def palettes_cmd() -> None:
    """List the named palettes accepted by --palette."""
    table = Table(title="Palettes", show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Colors")
    table.add_column("Swatches")

    for scheme, colors in COLOR_PALETTES.items():
        swatches = "".join(f"[on {color}]  [/]" for color in colors)
        table.add_row(scheme.value, ", ".join(colors), swatches)

    console.print(table)
