"""Input adapters for turning files and Polars frames into ``TableData``.

CSV files use ``;`` as the delimiter and may carry row labels in the first
column and column labels in the first row. Numbers are read the way a
spreadsheet in a comma-decimal locale writes them: ``1 234,5`` is 1234.5.
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import Sequence

import polars as pl

from tabviz.errors import InvalidDataError, TableParseError
from tabviz.types import TableData

logger = logging.getLogger(__name__)

CSV_SEPARATOR = ";"

# Unicode \s also covers no-break and narrow no-break spaces used for grouping.
_GROUPING = re.compile(r"\s+")


def parse_number(text: str | None) -> float | None:
    """Parse a locale-formatted number, returning None when it is not one.

    >>> parse_number(" 1 234,5 ")
    1234.5
    """
    if text is None:
        return None
    cleaned = _GROUPING.sub("", text)
    if not cleaned:
        return None
    if "," in cleaned:
        if "." in cleaned:
            return None
        cleaned = cleaned.replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _label(cell: str | None) -> str:
    return cell if cell else " "


def read_table(
    path: str | Path,
    *,
    extract_row_labels: bool = False,
    extract_column_labels: bool = False,
    title: str = "",
) -> TableData:
    """Read a ``;``-separated file into a table.

    Args:
        path: CSV file to read.
        extract_row_labels: Treat the first column as row labels.
        extract_column_labels: Treat the first row as column labels.
        title: Chart title stored on the table.

    Returns:
        A complete table. Missing labels default to ``"Input i"`` for
        columns and ``"Series i"`` for rows; empty label cells become a
        single space.

    Raises:
        TableParseError: If the file is missing, empty, ragged or has a
            non-numeric value cell.
    """
    path = Path(path)
    if not path.is_file():
        raise TableParseError(path, "file not found")
    if path.stat().st_size == 0:
        raise TableParseError(path, "file is empty")

    try:
        frame = pl.read_csv(
            path,
            separator=CSV_SEPARATOR,
            has_header=False,
            infer_schema=False,
            truncate_ragged_lines=False,
        )
    except (pl.exceptions.PolarsError, OSError, UnicodeDecodeError) as e:
        raise TableParseError(path, str(e).splitlines()[0] if str(e) else type(e).__name__) from e

    logger.debug("Read %s: %d lines x %d cells", path, frame.height, frame.width)
    return table_from_cells(
        frame.rows(),
        path=path,
        extract_row_labels=extract_row_labels,
        extract_column_labels=extract_column_labels,
        title=title,
    )


def table_from_cells(
    cells: Sequence[Sequence[str | None]],
    *,
    path: str | Path = "<memory>",
    extract_row_labels: bool = False,
    extract_column_labels: bool = False,
    title: str = "",
) -> TableData:
    """Build a table from raw string cells laid out as in the input file."""
    if not cells or not cells[0]:
        raise TableParseError(path, "file is empty")

    skip_rows = 1 if extract_column_labels else 0
    skip_columns = 1 if extract_row_labels else 0

    width = len(cells[0]) - skip_columns
    body = cells[skip_rows:]
    if width < 1 or not body:
        raise TableParseError(path, "no value cells")

    if extract_column_labels:
        column_labels = [_label(cell) for cell in cells[0][skip_columns:]]
    else:
        column_labels = [f"Input {i + 1}" for i in range(width)]

    row_labels: list[str] = []
    values: list[tuple[float, ...]] = []
    for offset, row in enumerate(body):
        line = offset + skip_rows + 1
        if len(row) - skip_columns != width:
            raise TableParseError(path, f"expected {width} value cells, got {len(row) - skip_columns}", line)
        if extract_row_labels:
            row_labels.append(_label(row[0]))
        else:
            row_labels.append(f"Series {offset + 1}")

        parsed = []
        for cell in row[skip_columns:]:
            value = parse_number(cell)
            if value is None:
                reason = "missing value" if cell is None else f"not a number: {cell!r}"
                raise TableParseError(path, reason, line)
            parsed.append(value)
        values.append(tuple(parsed))

    return TableData(
        title=title,
        column_labels=tuple(column_labels),
        row_labels=tuple(row_labels),
        values=tuple(values),
    )


def table_from_frame(
    frame: pl.DataFrame,
    *,
    row_labels_column: str | None = None,
    title: str = "",
) -> TableData:
    """Build a table from a Polars DataFrame.

    Column names become column labels. When ``row_labels_column`` is given,
    that column supplies the row labels and is not drawn.

    Raises:
        InvalidDataError: If a value column is not numeric or holds nulls.
    """
    if row_labels_column is not None:
        if row_labels_column not in frame.columns:
            raise InvalidDataError(f"Row label column {row_labels_column!r} not found")
        row_labels = [_label(None if v is None else str(v)) for v in frame.get_column(row_labels_column)]
        frame = frame.drop(row_labels_column)
    else:
        row_labels = [f"Series {i + 1}" for i in range(frame.height)]

    if frame.width == 0:
        raise InvalidDataError("The frame has no value columns")
    for name, dtype in frame.schema.items():
        if not dtype.is_numeric():
            raise InvalidDataError(f"Column {name!r} is not numeric ({dtype})")
    if frame.null_count().sum_horizontal().item() > 0:
        raise InvalidDataError("Value columns must not contain nulls")

    values = frame.cast(pl.Float64).rows()
    return TableData(
        title=title,
        column_labels=tuple(frame.columns),
        row_labels=tuple(row_labels),
        values=tuple(tuple(row) for row in values),
    )


__all__ = ["CSV_SEPARATOR", "parse_number", "read_table", "table_from_cells", "table_from_frame"]
