"""CLI modules for tabviz.

    - common: Shared infrastructure (errors, output)
    - core: Chart commands (render, palettes)

Usage:
    from tabviz.cli_modules import core

    app = typer.Typer()
    core.register_commands(app)
"""
