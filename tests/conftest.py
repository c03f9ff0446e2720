"""Shared fixtures for tabviz tests."""

import pytest

from tabviz.text import TextMetrics
from tabviz.types import ChartStyle, FontSpec, TableData


class FakeTextMeasurer:
    """Deterministic measurer: every character is half the font size wide.

    Height equals the font size and the ascent is 80% of it, so a 14px
    label is ``7 * len(text)`` wide, 14 tall with an ascent of 11.2.
    """

    def __init__(self) -> None:
        self.calls = 0

    def measure(self, text: str, font: FontSpec) -> TextMetrics:
        self.calls += 1
        return TextMetrics(
            width=len(text) * font.size * 0.5,
            height=font.size,
            ascent=font.size * 0.8,
        )


@pytest.fixture
def measurer():
    """Deterministic text measurer."""
    return FakeTextMeasurer()


@pytest.fixture
def style():
    """Default chart style (800x600)."""
    return ChartStyle()


@pytest.fixture
def small_table():
    """Two categories, two series, no title."""
    return TableData.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def sales_table():
    """A titled table with explicit labels."""
    return TableData.from_rows(
        [
            [150.0, 342.0, 234.0, 500.0],
            [180.0, 400.0, 210.0, 487.999],
            [120.0, 378.0, 260.0, 420.0],
        ],
        title="Sales",
        column_labels=["Org1", "Org2", "Org3", "Org4"],
        row_labels=["Q1", "Q2", "Q3"],
    )


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file in a temporary directory and return its path."""

    def _write(content: str, name: str = "data.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
