"""Text measurement.

The layout engine never measures text itself: it asks an injected
``TextMeasurer`` for the extents of each label and keeps the answers in a
per-render ``LabelCache``. ``PillowTextMeasurer`` is the host
implementation; tests substitute a deterministic fake.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Protocol, runtime_checkable

from tabviz.types import FontSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextMetrics:
    """Extents of a rendered string.

    Attributes:
        width: Advance width in pixels.
        height: Line height (ascent + descent) in pixels.
        ascent: Distance from the top of the line box to the baseline.
    """

    width: float
    height: float
    ascent: float


@dataclass(frozen=True)
class LabelMeasurement:
    """A label together with its measured extents."""

    text: str
    width: float
    height: float
    ascent: float

    def baseline_for_top(self, top: float) -> float:
        """Baseline y that puts the top of the label box at ``top``."""
        return top + self.ascent

    def baseline_for_center(self, center_y: float) -> float:
        """Baseline y that centers the label box vertically on ``center_y``."""
        return center_y - self.height / 2.0 + self.ascent


@runtime_checkable
class TextMeasurer(Protocol):
    """Protocol for text measurement backends."""

    def measure(self, text: str, font: FontSpec) -> TextMetrics:
        """Measure ``text`` set in ``font``."""
        ...


class PillowTextMeasurer:
    """Text measurer backed by Pillow's FreeType fonts.

    The font family is looked up as a TrueType file (``Arial`` ->
    ``Arial.ttf`` on the font path). When it is not installed, Pillow's
    bundled scalable default font is used at the requested size.
    """

    def measure(self, text: str, font: FontSpec) -> TextMetrics:
        pil_font = _load_font(font.family, round(font.size), font.bold)
        ascent, descent = pil_font.getmetrics()
        width = float(pil_font.getlength(text)) if text else 0.0
        return TextMetrics(width=width, height=float(ascent + descent), ascent=float(ascent))


@lru_cache(maxsize=64)
def _load_font(family: str, size: int, bold: bool):
    from PIL import ImageFont

    candidates = [f"{family} Bold.ttf", f"{family}bd.ttf"] if bold else []
    candidates += [f"{family}.ttf", family]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    logger.debug("Font %r not found, using Pillow default font at %spx", family, size)
    return ImageFont.load_default(size=size)


class LabelCache:
    """Measures each (text, font) pair once for the duration of one render."""

    def __init__(self, measurer: TextMeasurer) -> None:
        self._measurer = measurer
        self._cache: dict[tuple[str, FontSpec], LabelMeasurement] = {}

    def measure(self, text: str, font: FontSpec) -> LabelMeasurement:
        key = (text, font)
        label = self._cache.get(key)
        if label is None:
            metrics = self._measurer.measure(text, font)
            label = LabelMeasurement(
                text=text,
                width=metrics.width,
                height=metrics.height,
                ascent=metrics.ascent,
            )
            self._cache[key] = label
        return label

    def measure_all(self, texts: Iterable[str], font: FontSpec) -> tuple[LabelMeasurement, ...]:
        return tuple(self.measure(text, font) for text in texts)

    def __len__(self) -> int:
        return len(self._cache)


def max_width(labels: Iterable[LabelMeasurement]) -> float:
    return max((label.width for label in labels), default=0.0)


def max_height(labels: Iterable[LabelMeasurement]) -> float:
    return max((label.height for label in labels), default=0.0)


__all__ = [
    "TextMetrics",
    "LabelMeasurement",
    "TextMeasurer",
    "PillowTextMeasurer",
    "LabelCache",
    "max_width",
    "max_height",
]
