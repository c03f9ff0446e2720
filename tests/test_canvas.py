"""Tests for command replay and the SVG canvas."""

import pytest

from tabviz.canvas import Canvas, SVGCanvas, arc_path, replay
from tabviz.commands import Arc, DrawLine, DrawText, Ellipse, FillShape
from tabviz.errors import InvalidArgumentError
from tabviz.types import LABEL_FONT, FontSpec, Point, Rectangle, Size


class RecordingCanvas:
    """Canvas that records the calls it receives."""

    def __init__(self):
        self.calls = []

    def draw_line(self, start, end, color):
        self.calls.append(("line", color))

    def fill_shape(self, shape, color):
        self.calls.append(("fill", color))

    def stroke_shape(self, shape, color):
        self.calls.append(("stroke", color))

    def draw_text(self, text, x, y, font, color):
        self.calls.append(("text", text))


class TestReplay:
    def test_dispatch_in_emission_order(self):
        canvas = RecordingCanvas()
        commands = (
            DrawText("Title", 0, 10, LABEL_FONT, "#000000"),
            DrawLine(Point(0, 0), Point(10, 0), "#c0c0c0"),
            FillShape(Rectangle(0, 0, 5, 5), "#00ffff", "#000000"),
        )

        replay(commands, canvas)

        assert canvas.calls == [
            ("text", "Title"),
            ("line", "#c0c0c0"),
            ("fill", "#00ffff"),
            ("stroke", "#000000"),
        ]

    def test_unknown_command(self):
        with pytest.raises(InvalidArgumentError):
            replay([object()], RecordingCanvas())

    def test_recording_canvas_satisfies_protocol(self):
        assert isinstance(RecordingCanvas(), Canvas)
        assert isinstance(SVGCanvas(Size(10, 10)), Canvas)


class TestArcPath:
    def test_quarter_counter_clockwise(self):
        path = arc_path(Arc(Rectangle(0, 0, 100, 100), 90, 90))

        assert path == "M 50 50 L 50 0 A 50 50 0 0 0 0 50 Z"

    def test_large_arc_flag(self):
        path = arc_path(Arc(Rectangle(0, 0, 100, 100), 0, 270))

        assert " 0 1 0 " in path

    def test_full_circle_uses_two_arcs(self):
        path = arc_path(Arc(Rectangle(0, 0, 100, 100), 90, 360))

        assert path.count("A ") == 2


class TestSVGCanvas:
    def test_document(self):
        canvas = SVGCanvas(Size(800, 600))

        svg = canvas.to_svg()

        assert svg.startswith("<?xml")
        assert 'width="800" height="600"' in svg
        assert 'viewBox="0 0 800 600"' in svg

    def test_shapes(self):
        canvas = SVGCanvas(Size(100, 100))
        replay(
            [
                FillShape(Rectangle(1, 2, 3, 4), "#00ffff", "#000000"),
                FillShape(Ellipse(Rectangle(0, 0, 10, 10)), "#00ff00", "#000000"),
                FillShape(Arc(Rectangle(0, 0, 100, 100), 90, 90), "#ffff00", "#000000"),
            ],
            canvas,
        )

        svg = canvas.to_svg()

        assert '<rect x="1" y="2" width="3" height="4" fill="#00ffff" stroke="none"/>' in svg
        assert '<ellipse cx="5" cy="5" rx="5" ry="5" fill="#00ff00" stroke="none"/>' in svg
        assert 'fill="none" stroke="#000000"' in svg
        assert "<path " in svg

    def test_text_is_escaped(self):
        canvas = SVGCanvas(Size(100, 100))

        canvas.draw_text("<a & b>", 1.5, 20, FontSpec(size=14, bold=True), "#000000")

        element = canvas.elements[0]
        assert "&lt;a &amp; b&gt;" in element
        assert 'x="1.5"' in element
        assert 'font-family="Arial"' in element
        assert 'font-weight="bold"' in element

    def test_background(self):
        svg = SVGCanvas(Size(10, 10), background="#ffffff").to_svg()

        assert 'fill="#ffffff"' in svg
