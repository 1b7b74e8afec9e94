"""Tests for the timeline assembler and the end-to-end compile path.

WHY: The assembler is where parsing, re-slicing, dispatch and continuity
meet. A header field in the wrong position or a position that is not
threaded through breaks every caption in the file.

HOW: Header text is checked field by field, the fold is checked with a
deterministic RNG, and compile_srt is run end to end on the sample SRT.
"""

import logging

import pytest

from caption_timeline.core.assembler import (
    build_header,
    build_timeline,
    compile_srt,
    compile_timeline,
    vertical_margin,
)
from caption_timeline.core.ir import (
    AnimationMode,
    AnimationStyle,
    Event,
    Position,
    Segment,
    TextAlign,
    TextTransform,
    UnknownStyleError,
    WordMode,
)

from conftest import FixedRandom


class TestVerticalMargin:
    """Three discrete bands, no interpolation."""

    @pytest.mark.parametrize(
        "position, expected",
        [(100, 612), (80, 612), (79.9, 108), (55, 360), (50, 360), (45, 360), (56, 108), (44, 108), (0, 108)],
    )
    def test_bands(self, position, expected):
        assert vertical_margin(position) == expected


class TestHeader:
    """Script info and style line."""

    def test_style_line_fields(self, make_style):
        style = make_style(
            AnimationStyle.GIRLBOSS,
            font_family="Luckiest Guy",
            font_size=32,
            color="#FF1493",
            outline_width=4,
            vertical_position=18,
        )
        text = build_header(style).to_text()
        assert (
            "Style: Default,Luckiest Guy,32,&H009314FF&,&H000000FF&,&H00000000&,&H00000000&,"
            "0,0,0,0,100,100,0,0,1,4,0,2,10,10,108,1\n"
        ) in text

    def test_script_info(self, make_style):
        text = build_header(make_style()).to_text()
        assert text.startswith("[Script Info]\nScriptType: v4.00+\nPlayResX: 1280\nPlayResY: 720\n")
        assert text.endswith(
            "[Events]\nFormat: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
        )

    @pytest.mark.parametrize("align, expected", [(TextAlign.LEFT, 1), (TextAlign.CENTER, 2), (TextAlign.RIGHT, 3)])
    def test_alignment(self, make_style, align, expected):
        assert build_header(make_style(text_align=align)).alignment == expected

    def test_invalid_primary_color_falls_back_to_white(self, make_style, caplog):
        with caplog.at_level(logging.WARNING):
            header = build_header(make_style(color="rgb(1,2)"))
        assert header.primary_colour == "&H00FFFFFF&"
        assert "Invalid primary color" in caplog.text


class TestEventLine:
    """Dialogue line serialisation."""

    def test_to_line(self):
        event = Event(layer=1, start=1.5, end=2.25, text="{\\c&H00FFFFFF&}hi")
        assert event.to_line() == "Dialogue: 1,0:00:01.50,0:00:02.25,Default,,0,0,0,,{\\c&H00FFFFFF&}hi"


class TestBuildTimeline:
    """The fold over segments."""

    def test_zero_segments_is_header_only(self, make_style):
        style = make_style()
        timeline = build_timeline([], style)
        assert timeline.events == []
        assert timeline.to_ass() == build_header(style).to_text()

    def test_events_in_segment_order(self, make_style, sample_segments):
        style = make_style(AnimationStyle.IMPACT_FULL)
        timeline = build_timeline(sample_segments, style)
        texts = [e.text for e in timeline.events if e.layer == 1]
        assert [t.split("}", 1)[1] for t in texts] == [s.text for s in sample_segments]

    def test_invalid_segments_skipped_not_fatal(self, make_style):
        segments = [Segment("", 0.0, 1.0), Segment("bad", 2.0, 1.0), Segment("good", 3.0, 4.0)]
        timeline = build_timeline(segments, make_style(AnimationStyle.IMPACT_FULL))
        assert {e.text.split("}", 1)[1] for e in timeline.events} == {"good"}

    def test_position_threaded_between_segments(self, make_style):
        style = make_style(
            AnimationStyle.HORMOZI, animation=AnimationMode.SHAKE, vertical_position=50, shadow_strength=0
        )
        segments = [Segment("one", 0.0, 1.0), Segment("two", 1.0, 2.0), Segment("three", 2.0, 3.0)]
        timeline = build_timeline(segments, style, rng=FixedRandom(0.9, 0.1))
        moves = [e.text.split("\\c", 1)[0] for e in timeline.events]
        assert moves == [
            "{\\move(670,360,672,358)",
            "{\\move(672,358,674,356)",
            "{\\move(674,356,676,354)",
        ]

    def test_custom_seed_position(self, make_style):
        style = make_style(
            AnimationStyle.WHITE_IMPACT, animation=AnimationMode.SHAKE, vertical_position=0, shadow_strength=0
        )
        timeline = build_timeline(
            [Segment("x", 0.0, 1.0)], style, rng=FixedRandom(0.5), seed_position=Position(100.0, 10.0)
        )
        assert timeline.events[0].text.startswith("{\\move(100,10,100,10)")

    def test_to_ass_has_one_line_per_event(self, make_style, sample_segments):
        timeline = build_timeline(sample_segments, make_style(AnimationStyle.GIRLBOSS))
        document = timeline.to_ass()
        assert document.count("\nDialogue: ") == len(timeline.events)
        assert document.endswith("\n")


class TestCompileTimeline:
    """Text transform and word mode applied before the fold."""

    def test_uppercase(self, make_style):
        style = make_style(AnimationStyle.IMPACT_FULL, text_transform=TextTransform.UPPERCASE)
        timeline = compile_timeline([Segment("shout this", 0.0, 1.0)], style)
        assert timeline.events[-1].text.endswith("}SHOUT THIS")

    def test_lowercase(self, make_style):
        style = make_style(AnimationStyle.IMPACT_FULL, text_transform=TextTransform.LOWERCASE)
        timeline = compile_timeline([Segment("Quiet Please", 0.0, 1.0)], style)
        assert timeline.events[-1].text.endswith("}quiet please")

    def test_word_mode_applied(self, make_style):
        style = make_style(AnimationStyle.WHITE_IMPACT, word_mode=WordMode.SINGLE, shadow_strength=0)
        timeline = compile_timeline([Segment("a b c", 0.0, 3.0)], style)
        assert [e.text.split("}", 1)[1] for e in timeline.events] == ["a", "b", "c"]
        assert [e.to_line().split(",")[1] for e in timeline.events] == ["0:00:00.00", "0:00:01.00", "0:00:02.00"]

    def test_color_cycle_continues_across_lines(self, make_style):
        style = make_style(
            AnimationStyle.HORMOZI,
            colors=("#FF0000", "#00FF00", "#0000FF"),
            word_mode=WordMode.SINGLE,
            shadow_strength=0,
        )
        segments = [Segment("one two", 0.0, 2.0), Segment("three four", 2.0, 4.0)]
        texts = [e.text for e in compile_timeline(segments, style).events]
        assert [t[3:14] for t in texts] == ["&H000000FF&", "&H0000FF00&", "&H00FF0000&", "&H000000FF&"]


class TestCompileSrt:
    """End to end from SRT text."""

    def test_document_structure(self, sample_srt):
        document = compile_srt(sample_srt, "hormozi", rng=FixedRandom(0.3, 0.6))
        assert document.startswith("[Script Info]\n")
        assert "Style: Default,Luckiest Guy,50," in document
        assert "\nDialogue: 0,0:00:00.00," in document
        assert "\nDialogue: 1,0:00:00.00," in document

    def test_deterministic_with_same_seed(self, sample_srt):
        import random

        first = compile_srt(sample_srt, "girlboss", rng=random.Random(7))
        second = compile_srt(sample_srt, "girlboss", rng=random.Random(7))
        assert first == second

    def test_overrides_applied(self, sample_srt):
        document = compile_srt(sample_srt, "impactfull", {"fontSize": 60, "textAlign": "left"})
        assert "Style: Default,Impact,60," in document
        assert ",0,1,10,10," in document

    def test_unknown_style(self, sample_srt):
        with pytest.raises(UnknownStyleError):
            compile_srt(sample_srt, "nonexistent")

    def test_empty_input_is_header_only(self):
        document = compile_srt("", "girlboss")
        assert "Dialogue:" not in document
        assert document.endswith("Effect, Text\n")
