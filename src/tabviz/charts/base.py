"""Chart renderer base class and registry.

Each chart kind is a ``ChartRenderer`` variant with two steps:

1. ``compute_layout`` runs a pipeline of pure stages (ticks, label
   measurement, regions, geometry) and returns a frozen layout record.
2. ``emit_commands`` turns that record into drawing commands.

``render`` chains both and returns the complete command sequence; nothing is
handed to a sink before the whole sequence exists.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar

from tabviz.commands import DrawCommand
from tabviz.errors import InvalidArgumentError, InvalidDataError
from tabviz.layout import TextPlacement, text_commands
from tabviz.text import LabelCache, LabelMeasurement, PillowTextMeasurer, TextMeasurer
from tabviz.types import ChartKind, ChartStyle, TableData

logger = logging.getLogger(__name__)


# =============================================================================
# Shared stages
# =============================================================================


def ensure_finite(table: TableData) -> None:
    """Fail fast on NaN or infinite cells."""
    for row_index, row in enumerate(table.values):
        for column_index, value in enumerate(row):
            if not math.isfinite(value):
                raise InvalidDataError(
                    f"Non-finite value {value!r} at row {row_index}, column {column_index}"
                )


def ensure_non_negative(table: TableData) -> None:
    """Bar lengths and pie sectors are magnitudes; negative cells are rejected."""
    for row_index, row in enumerate(table.values):
        for column_index, value in enumerate(row):
            if value < 0:
                raise InvalidDataError(
                    f"Negative value {value!r} at row {row_index}, column {column_index}",
                    hint="Bar and pie charts only display non-negative magnitudes.",
                )


def measure_title(table: TableData, style: ChartStyle, labels: LabelCache) -> LabelMeasurement | None:
    if not table.title:
        return None
    return labels.measure(table.title, style.title_font)


def title_commands(
    placement: TextPlacement | None,
    style: ChartStyle,
) -> list[DrawCommand]:
    return text_commands([placement], style.title_font, style.text_color)


# =============================================================================
# Base class
# =============================================================================


class ChartRenderer(ABC):
    """Base class for chart variants."""

    kind: ClassVar[ChartKind]

    def compute_layout(
        self,
        table: TableData,
        style: ChartStyle | None = None,
        measurer: TextMeasurer | None = None,
    ) -> Any:
        """Validate the input and compute the complete layout record."""
        style = style or ChartStyle()
        ensure_finite(table)
        return self.build_layout(table, style, LabelCache(measurer or PillowTextMeasurer()))

    @abstractmethod
    def build_layout(self, table: TableData, style: ChartStyle, labels: LabelCache) -> Any:
        """Run the layout stages with a per-render label cache."""
        pass

    @abstractmethod
    def emit_commands(self, layout: Any) -> list[DrawCommand]:
        """Turn a layout record into drawing commands, in drawing order."""
        pass

    def render(
        self,
        table: TableData,
        style: ChartStyle | None = None,
        measurer: TextMeasurer | None = None,
    ) -> tuple[DrawCommand, ...]:
        """Compute the layout and return the full command sequence."""
        layout = self.compute_layout(table, style, measurer)
        commands = tuple(self.emit_commands(layout))
        logger.debug(
            "Rendered %s chart: %d rows x %d columns -> %d commands",
            self.kind.value,
            table.n_rows,
            table.n_columns,
            len(commands),
        )
        return commands


# =============================================================================
# Registry
# =============================================================================


class ChartRendererRegistry:
    """Registry mapping chart kinds to renderer classes."""

    def __init__(self) -> None:
        self._renderers: dict[ChartKind, type[ChartRenderer]] = {}

    def register(self, kind: ChartKind, renderer_class: type[ChartRenderer]) -> None:
        """Register a renderer class for a chart kind."""
        self._renderers[kind] = renderer_class

    def get(self, kind: ChartKind | str) -> ChartRenderer:
        """Return a new renderer instance for ``kind``."""
        try:
            kind = ChartKind(kind)
        except ValueError:
            raise InvalidArgumentError(f"Unknown chart kind: {kind!r}") from None
        if kind not in self._renderers:
            raise InvalidArgumentError(f"No renderer registered for {kind.value} charts")
        return self._renderers[kind]()

    def list_kinds(self) -> list[ChartKind]:
        return list(self._renderers.keys())


# Global registry instance
chart_registry = ChartRendererRegistry()


def register_chart_renderer(
    kind: ChartKind,
) -> Callable[[type[ChartRenderer]], type[ChartRenderer]]:
    """Decorator to register a chart renderer class."""

    def decorator(cls: type[ChartRenderer]) -> type[ChartRenderer]:
        cls.kind = kind
        chart_registry.register(kind, cls)
        return cls

    return decorator


def get_chart_renderer(kind: ChartKind | str) -> ChartRenderer:
    """Get a renderer instance for a chart kind."""
    return chart_registry.get(kind)


__all__ = [
    "ChartRenderer",
    "ChartRendererRegistry",
    "chart_registry",
    "register_chart_renderer",
    "get_chart_renderer",
    "ensure_finite",
    "ensure_non_negative",
    "measure_title",
    "title_commands",
]
