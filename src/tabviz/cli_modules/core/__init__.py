"""Core CLI commands for tabviz.

    - render: Draw a chart from a CSV file
    - palettes: List the named color palettes
"""

import typer

from tabviz.cli_modules.core.palettes import palettes_cmd
from tabviz.cli_modules.core.render import render_cmd


def register_commands(parent_app: typer.Typer) -> None:
    """Register core commands with the parent app.

    Args:
        parent_app: Parent Typer app to register commands to
    """
    parent_app.command(name="render")(render_cmd)
    parent_app.command(name="palettes")(palettes_cmd)


__all__ = ["register_commands", "render_cmd", "palettes_cmd"]
