"""Console output and logging setup for CLI commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Send ``tabviz`` log records to stderr through rich.

    Without ``verbose`` only warnings are shown.
    """
    root = logging.getLogger("tabviz")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)


def success(message: str) -> None:
    typer.echo(typer.style(message, fg="green"))


__all__ = ["console", "configure_logging", "success"]
