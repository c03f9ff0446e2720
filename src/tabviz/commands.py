"""Drawing commands: the sole output of a render pass.

A render produces an ordered tuple of commands which a canvas sink replays
in emission order. Commands are immutable and carry everything the sink
needs; the engine keeps no reference to them after returning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tabviz.types import FontSpec, Point, Rectangle


@dataclass(frozen=True)
class Arc:
    """Pie slice inscribed in ``bounds``.

    Angles are in degrees, 0 at three o'clock, counter-clockwise positive.
    The slice is closed through the center of ``bounds``.
    """

    bounds: Rectangle
    start: float
    extent: float


@dataclass(frozen=True)
class Ellipse:
    """Ellipse inscribed in ``bounds``."""

    bounds: Rectangle


Shape = Union[Rectangle, Arc, Ellipse]


@dataclass(frozen=True)
class DrawLine:
    """Straight line segment."""

    start: Point
    end: Point
    color: str


@dataclass(frozen=True)
class FillShape:
    """Shape filled with ``fill_color`` and then outlined with ``stroke_color``."""

    shape: Shape
    fill_color: str
    stroke_color: str


@dataclass(frozen=True)
class DrawText:
    """Text whose left end of the baseline is at ``(x, y)``."""

    text: str
    x: float
    y: float
    font: FontSpec
    color: str


DrawCommand = Union[DrawLine, FillShape, DrawText]


__all__ = [
    "Arc",
    "Ellipse",
    "Shape",
    "DrawLine",
    "FillShape",
    "DrawText",
    "DrawCommand",
]
