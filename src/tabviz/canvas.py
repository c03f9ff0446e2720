"""Canvas sinks that replay drawing commands.

A render hands back an ordered command tuple; ``replay`` feeds it to any
object implementing the ``Canvas`` protocol. ``SVGCanvas`` is the built-in
sink and produces a standalone SVG document.
"""

from __future__ import annotations

import math
from html import escape
from typing import Iterable, Protocol, runtime_checkable

from tabviz.commands import Arc, DrawCommand, DrawLine, DrawText, Ellipse, FillShape, Shape
from tabviz.errors import InvalidArgumentError
from tabviz.types import FontSpec, Point, Rectangle, Size


@runtime_checkable
class Canvas(Protocol):
    """Protocol for drawing sinks."""

    def draw_line(self, start: Point, end: Point, color: str) -> None:
        ...

    def fill_shape(self, shape: Shape, color: str) -> None:
        ...

    def stroke_shape(self, shape: Shape, color: str) -> None:
        ...

    def draw_text(self, text: str, x: float, y: float, font: FontSpec, color: str) -> None:
        ...


def replay(commands: Iterable[DrawCommand], canvas: Canvas) -> None:
    """Apply ``commands`` to ``canvas`` in emission order.

    A ``FillShape`` is applied as a fill followed by an outline of the same
    shape.
    """
    for command in commands:
        if isinstance(command, DrawLine):
            canvas.draw_line(command.start, command.end, command.color)
        elif isinstance(command, FillShape):
            canvas.fill_shape(command.shape, command.fill_color)
            canvas.stroke_shape(command.shape, command.stroke_color)
        elif isinstance(command, DrawText):
            canvas.draw_text(command.text, command.x, command.y, command.font, command.color)
        else:
            raise InvalidArgumentError(f"Unsupported drawing command: {command!r}")


def _num(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _arc_point(bounds: Rectangle, angle: float) -> tuple[float, float]:
    radians = math.radians(angle)
    return (
        bounds.center_x + bounds.width / 2.0 * math.cos(radians),
        bounds.center_y - bounds.height / 2.0 * math.sin(radians),
    )


def arc_path(arc: Arc) -> str:
    """SVG path data for a pie slice closed through the center.

    Angles grow counter-clockwise on screen, which is SVG sweep-flag 0. A
    full circle cannot be expressed as one SVG arc and is split in two.
    """
    bounds = arc.bounds
    rx = _num(bounds.width / 2.0)
    ry = _num(bounds.height / 2.0)
    cx, cy = bounds.center_x, bounds.center_y
    x1, y1 = _arc_point(bounds, arc.start)

    if abs(arc.extent) >= 360.0:
        xm, ym = _arc_point(bounds, arc.start + 180.0)
        return (
            f"M {_num(cx)} {_num(cy)} L {_num(x1)} {_num(y1)} "
            f"A {rx} {ry} 0 1 0 {_num(xm)} {_num(ym)} "
            f"A {rx} {ry} 0 1 0 {_num(x1)} {_num(y1)} Z"
        )

    x2, y2 = _arc_point(bounds, arc.start + arc.extent)
    large_arc = 1 if abs(arc.extent) > 180.0 else 0
    sweep = 0 if arc.extent >= 0 else 1
    return (
        f"M {_num(cx)} {_num(cy)} L {_num(x1)} {_num(y1)} "
        f"A {rx} {ry} 0 {large_arc} {sweep} {_num(x2)} {_num(y2)} Z"
    )


class SVGCanvas:
    """Canvas that accumulates SVG elements.

    Example:
        >>> canvas = SVGCanvas(Size(800, 600))
        >>> replay(commands, canvas)
        >>> svg = canvas.to_svg()
    """

    def __init__(self, size: Size, background: str | None = None) -> None:
        self.size = size
        self.background = background
        self._elements: list[str] = []

    @property
    def elements(self) -> list[str]:
        return list(self._elements)

    def draw_line(self, start: Point, end: Point, color: str) -> None:
        self._elements.append(
            f'<line x1="{_num(start.x)}" y1="{_num(start.y)}" '
            f'x2="{_num(end.x)}" y2="{_num(end.y)}" stroke="{escape(color)}"/>'
        )

    def fill_shape(self, shape: Shape, color: str) -> None:
        self._elements.append(self._shape(shape, f'fill="{escape(color)}" stroke="none"'))

    def stroke_shape(self, shape: Shape, color: str) -> None:
        self._elements.append(self._shape(shape, f'fill="none" stroke="{escape(color)}"'))

    def draw_text(self, text: str, x: float, y: float, font: FontSpec, color: str) -> None:
        weight = ' font-weight="bold"' if font.bold else ""
        self._elements.append(
            f'<text x="{_num(x)}" y="{_num(y)}" font-family="{escape(font.family)}" '
            f'font-size="{_num(font.size)}"{weight} fill="{escape(color)}" '
            f'xml:space="preserve">{escape(text)}</text>'
        )

    def _shape(self, shape: Shape, paint: str) -> str:
        if isinstance(shape, Rectangle):
            return (
                f'<rect x="{_num(shape.x)}" y="{_num(shape.y)}" '
                f'width="{_num(shape.width)}" height="{_num(shape.height)}" {paint}/>'
            )
        if isinstance(shape, Ellipse):
            b = shape.bounds
            return (
                f'<ellipse cx="{_num(b.center_x)}" cy="{_num(b.center_y)}" '
                f'rx="{_num(b.width / 2.0)}" ry="{_num(b.height / 2.0)}" {paint}/>'
            )
        if isinstance(shape, Arc):
            return f'<path d="{arc_path(shape)}" {paint}/>'
        raise InvalidArgumentError(f"Unsupported shape: {shape!r}")

    def to_svg(self) -> str:
        """Return the complete SVG document."""
        width, height = self.size.width, self.size.height
        body = list(self._elements)
        if self.background:
            body.insert(
                0,
                f'<rect x="0" y="0" width="{width}" height="{height}" '
                f'fill="{escape(self.background)}" stroke="none"/>',
            )
        content = "\n    ".join(body)
        return f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
    {content}
</svg>
'''


__all__ = ["Canvas", "replay", "arc_path", "SVGCanvas"]
