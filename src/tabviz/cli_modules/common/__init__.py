"""Shared CLI infrastructure."""

from tabviz.cli_modules.common.errors import (
    CLIError,
    ErrorCode,
    error_boundary,
    exit_code_for,
    require_file,
)
from tabviz.cli_modules.common.output import configure_logging, console, success

__all__ = [
    "CLIError",
    "ErrorCode",
    "error_boundary",
    "exit_code_for",
    "require_file",
    "configure_logging",
    "console",
    "success",
]
