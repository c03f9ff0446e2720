"""Command-line interface for tabviz."""

import typer

from tabviz.cli_modules import core

app = typer.Typer(
    name="tabviz",
    help="Render bar, histogram, pie and scatter charts from CSV tables",
    add_completion=False,
)

core.register_commands(app)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
