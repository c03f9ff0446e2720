"""Exception hierarchy for tabviz.

Every error is raised synchronously where the problem is detected and
propagates to the caller of the current render. The engine never catches
or retries these; the CLI layer turns them into diagnostics and exit codes.
"""

from __future__ import annotations

from pathlib import Path


class TabvizError(Exception):
    """Base exception for all tabviz errors."""

    hint: str | None = None

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if hint is not None:
            self.hint = hint


class InvalidDomainError(TabvizError):
    """Raised when a scale is requested for a non-positive or non-finite maximum."""

    hint = "The data must contain at least one positive, finite value."

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Cannot build an axis scale for maximum value {value!r}")


class InvalidArgumentError(TabvizError):
    """Raised for malformed parameters (interpolation steps, style options)."""

    pass


class LayoutOverflowError(TabvizError):
    """Raised when the canvas is too small for the required regions and labels."""

    hint = "Enlarge the canvas or shorten the labels."

    def __init__(self, region: str, width: float, height: float) -> None:
        self.region = region
        self.width = width
        self.height = height
        super().__init__(
            f"Canvas too small: {region} region would be {width:.1f}x{height:.1f} px"
        )


class EmptyDataError(TabvizError):
    """Raised when pie values sum to zero."""

    hint = "A pie chart needs at least one non-zero value."


class InsufficientColumnsError(TabvizError):
    """Raised when a scatter row lacks an x or y coordinate."""

    hint = "Scatter charts read x from the first column and y from the second."

    def __init__(self, row_index: int, columns: int) -> None:
        self.row_index = row_index
        self.columns = columns
        super().__init__(
            f"Row {row_index} has {columns} column(s); at least 2 are required"
        )


class InvalidDataError(TabvizError):
    """Raised for NaN/infinite values, negative magnitudes or a non-rectangular table."""

    pass


class TableParseError(TabvizError):
    """Raised when an input file cannot be turned into a complete table.

    Attributes:
        path: The file being read.
        line: 1-based line of the offending cell, when known.
        reason: Short description of the failure.
    """

    hint = "Check the delimiter (';'), that every row has the same number of cells, and that values are numeric."

    def __init__(self, path: Path | str, reason: str, line: int | None = None) -> None:
        self.path = str(path)
        self.line = line
        self.reason = reason
        location = f"{self.path}:{line}" if line is not None else self.path
        super().__init__(f"Malformed input file {location}: {reason}")


class ExportError(TabvizError):
    """Raised when a rendered chart cannot be written or rasterized."""

    pass


__all__ = [
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
