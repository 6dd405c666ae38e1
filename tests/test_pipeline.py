"""Tests for the pass order and the end-to-end slide formatting."""
from unittest.mock import Mock

import pytest
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN

from builders import add_target, add_text_box, drop_text_frame, shape_names
from slide_formatter.errors import NotFoundError, TextFrameMissingError
from slide_formatter.geometry import Geometry, bounds_of
from slide_formatter.pipeline import PASSES, format_slide, ran_after_merge

WIDTH = round(3.04 * 914400)
HEIGHT = round(1.58 * 914400)


class TestPasses:
    """Fixed pass order."""

    def test_order(self) -> None:
        assert [step.__name__ for step in PASSES] == [
            "rewrite_title",
            "merge_text_boxes",
            "layout_target_shapes",
            "normalize_fonts",
            "layout_text_boxes",
            "normalize_bullets",
            "strip_bold_underline",
        ]

    @pytest.mark.parametrize(
        "step,expected",
        [
            ("rewrite_title", False),
            ("merge_text_boxes", False),
            ("layout_target_shapes", True),
            ("strip_bold_underline", True),
            (None, False),
        ],
    )
    def test_ran_after_merge(self, step, expected: bool) -> None:
        assert ran_after_merge(step) is expected


class TestFormatSlide:
    """Whole pipeline over one slide."""

    @pytest.fixture
    def scenario(self, slide):
        """Title, a text box over the first Chevron, a second Chevron and a loose bold text box."""
        box = add_text_box(slide, 0, 0, 100, 100, text="Discover\nDeliver", name="TextBox 2")
        first = add_target(slide, 50, 50, 200, 200, name="Chevron 3")
        second = add_target(slide, 1000, 50, 200, 200, name="Chevron 4")
        loose = add_text_box(slide, 5000, 5000, 100, 100, text="loud", name="TextBox 5")
        font = loose.text_frame.paragraphs[0].runs[0].font
        font.bold = True
        font.underline = True
        return {
            "box_texts": [p.text for p in box.text_frame.paragraphs],
            "first": first,
            "second": second,
            "loose": loose,
        }

    def test_end_to_end(self, slide, title_shape, scenario) -> None:
        results = format_slide(slide)

        title = title_shape.text_frame.paragraphs[0]
        assert title.text == "Output Slide"
        assert title.alignment == PP_ALIGN.CENTER
        assert all(run.font.name == "Beirut" for run in title.runs)

        first, second = scenario["first"], scenario["second"]
        assert [p.text for p in first.text_frame.paragraphs] == scenario["box_texts"]
        assert bounds_of(first) == Geometry(50, 50, WIDTH, HEIGHT)
        assert bounds_of(second) == Geometry(50 + WIDTH + 150000, 50, WIDTH, HEIGHT)
        assert first.text_frame.vertical_anchor == MSO_ANCHOR.MIDDLE

        assert "TextBox 2" not in shape_names(slide)
        loose_font = scenario["loose"].text_frame.paragraphs[0].runs[0].font
        assert loose_font.bold is None
        assert loose_font.underline is None
        assert loose_font.name == "Beirut"
        assert bounds_of(scenario["loose"]) == Geometry(5000, 5000, 100, 100)

        assert results["merge_text_boxes"] == 1
        assert results["layout_target_shapes"] == 2
        assert results["layout_text_boxes"] == 1

    def test_persist_runs_once_after_merge(self, slide, scenario) -> None:
        seen = []
        persist = Mock(side_effect=lambda: seen.append(shape_names(slide)))

        format_slide(slide, persist=persist)

        persist.assert_called_once_with()
        # flushed after the merge, before layout
        assert "TextBox 2" not in seen[0]
        assert bounds_of(scenario["first"]).width == WIDTH

    def test_failure_aborts_remaining_passes(self, blank_slide) -> None:
        box = add_text_box(blank_slide, 0, 0, 100, 100, text="kept", name="TextBox 1")
        persist = Mock()

        with pytest.raises(NotFoundError) as exc_info:
            format_slide(blank_slide, persist=persist)

        assert exc_info.value.step == "rewrite_title"
        persist.assert_not_called()
        assert box.text_frame.paragraphs[0].runs[0]._r.rPr is None

    def test_mutations_before_failure_are_kept(self, slide, title_shape) -> None:
        add_text_box(slide, 0, 0, 100, 100, text="moved", name="TextBox 1")
        chevron = add_target(slide, 0, 0, 100, 100, name="Chevron 2")
        other = add_target(slide, 500, 0, 100, 100, name="Chevron 3")
        drop_text_frame(other)

        with pytest.raises(TextFrameMissingError) as exc_info:
            format_slide(slide)

        assert exc_info.value.step == "layout_target_shapes"
        assert title_shape.text_frame.text == "Output Slide"
        assert chevron.text_frame.text == "moved"
        assert chevron.text_frame.paragraphs[0].runs[0].font.name is None
