"""Tests for text measurement."""

from tabviz.text import LabelCache, LabelMeasurement, PillowTextMeasurer, TextMeasurer, max_height, max_width
from tabviz.types import FontSpec, LABEL_FONT, TITLE_FONT


class TestLabelCache:
    def test_measures_each_label_once(self, measurer):
        """Repeated labels hit the cache instead of the measurer."""
        cache = LabelCache(measurer)

        first = cache.measure("Q1", LABEL_FONT)
        second = cache.measure("Q1", LABEL_FONT)

        assert first is second
        assert measurer.calls == 1

    def test_font_is_part_of_the_key(self, measurer):
        cache = LabelCache(measurer)

        small = cache.measure("Title", LABEL_FONT)
        large = cache.measure("Title", TITLE_FONT)

        assert small.width < large.width
        assert len(cache) == 2

    def test_measure_all_keeps_order(self, measurer):
        labels = LabelCache(measurer).measure_all(["a", "bbb", "cc"], LABEL_FONT)

        assert [label.text for label in labels] == ["a", "bbb", "cc"]
        assert max_width(labels) == 21
        assert max_height(labels) == 14

    def test_max_of_nothing_is_zero(self):
        assert max_width([]) == 0
        assert max_height([]) == 0


class TestLabelMeasurement:
    def test_baselines(self):
        label = LabelMeasurement(text="x", width=7, height=14, ascent=11)

        assert label.baseline_for_top(100) == 111
        assert label.baseline_for_center(100) == 100 - 7 + 11


class TestPillowTextMeasurer:
    def test_is_a_text_measurer(self):
        assert isinstance(PillowTextMeasurer(), TextMeasurer)

    def test_measures_text(self):
        metrics = PillowTextMeasurer().measure("Hello", FontSpec(size=14))

        assert metrics.width > 0
        assert metrics.height > 0
        assert 0 < metrics.ascent <= metrics.height

    def test_longer_text_is_wider(self):
        measurer = PillowTextMeasurer()
        font = FontSpec(size=14)

        assert measurer.measure("Hello world", font).width > measurer.measure("Hello", font).width

    def test_empty_text_has_no_width(self):
        assert PillowTextMeasurer().measure("", FontSpec(size=14)).width == 0
