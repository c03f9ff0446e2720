"""CLI error handling utilities.

Library errors (``TabvizError``) are turned into a red ``Error:`` line, an
optional yellow ``Hint:`` line and a non-zero exit code.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, TypeVar

import typer

from tabviz.config import ConfigError
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

logger = logging.getLogger(__name__)


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(Enum):
    """Standard CLI exit codes."""

    # General errors (1-9)
    GENERAL_ERROR = 1
    USAGE_ERROR = 2

    # File errors (10-19)
    FILE_NOT_FOUND = 10
    FILE_NOT_WRITABLE = 12
    INVALID_FILE_FORMAT = 13

    # Configuration errors (30-39)
    CONFIG_INVALID = 31

    # Data errors (50-59)
    DATA_ERROR = 50
    DATA_EMPTY = 51

    # Layout errors (60-69)
    LAYOUT_OVERFLOW = 60


# Most specific classes first.
_EXIT_CODES: tuple[tuple[type[TabvizError], ErrorCode], ...] = (
    (ConfigError, ErrorCode.CONFIG_INVALID),
    (TableParseError, ErrorCode.INVALID_FILE_FORMAT),
    (ExportError, ErrorCode.FILE_NOT_WRITABLE),
    (LayoutOverflowError, ErrorCode.LAYOUT_OVERFLOW),
    (EmptyDataError, ErrorCode.DATA_EMPTY),
    (InvalidDomainError, ErrorCode.DATA_ERROR),
    (InsufficientColumnsError, ErrorCode.DATA_ERROR),
    (InvalidDataError, ErrorCode.DATA_ERROR),
    (InvalidArgumentError, ErrorCode.USAGE_ERROR),
)


def exit_code_for(error: TabvizError) -> ErrorCode:
    for error_class, code in _EXIT_CODES:
        if isinstance(error, error_class):
            return code
    return ErrorCode.GENERAL_ERROR


# =============================================================================
# Exception Classes
# =============================================================================


class CLIError(Exception):
    """Error raised by the CLI layer itself.

    Attributes:
        message: Error message
        code: Exit code
        hint: Helpful hint for resolution
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GENERAL_ERROR,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Decorator
# =============================================================================


F = TypeVar("F", bound=Callable[..., Any])


def _report(message: str, hint: str | None) -> None:
    typer.echo(typer.style(f"Error: {message}", fg="red"), err=True)
    if hint:
        typer.echo(typer.style(f"Hint: {hint}", fg="yellow"), err=True)


def error_boundary(func: F) -> F:
    """Convert exceptions raised by a command into diagnostics and exit codes."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except CLIError as e:
            _report(e.message, e.hint)
            raise typer.Exit(e.code.value)
        except TabvizError as e:
            logger.debug("Command failed", exc_info=True)
            _report(e.message, e.hint)
            raise typer.Exit(exit_code_for(e).value)
        except Exception as e:
            logger.exception("Unexpected error")
            _report(str(e), None)
            raise typer.Exit(ErrorCode.GENERAL_ERROR.value)

    return wrapper  # type: ignore


# =============================================================================
# Validation Helpers
# =============================================================================


def require_file(path: Path, description: str = "File") -> Path:
    """Require that a file exists.

    Raises:
        CLIError: If the file doesn't exist.
    """
    if not path.is_file():
        raise CLIError(
            f"{description} not found: {path}",
            code=ErrorCode.FILE_NOT_FOUND,
            hint="Check that the file exists and the path is correct.",
        )
    return path


__all__ = ["ErrorCode", "CLIError", "exit_code_for", "error_boundary", "require_file"]
