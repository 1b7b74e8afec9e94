"""Unit tests for SRT parsing and ASR word grouping.

WHY: Hand-edited SRT files are often slightly broken. One bad block must
cost exactly that block, never the whole caption track.

HOW: Parse the shared sample, then feed blocks with each kind of defect
and check what survives and what gets logged.
"""

import logging

import pytest

from caption_timeline.core.parser import MAX_WORDS_PER_SEGMENT, parse_srt, segments_from_words


class TestParseSrt:
    """Well-formed SRT input."""

    def test_sample_parses_all_blocks(self, sample_srt):
        segments = parse_srt(sample_srt)
        assert [s.text for s in segments] == ["hello world", "this is a two line caption", "goodbye"]

    def test_times_in_seconds(self, sample_srt):
        segments = parse_srt(sample_srt)
        assert segments[1].start == pytest.approx(2.5)
        assert segments[1].end == pytest.approx(4.0)

    def test_parser_segments_have_no_word_index(self, sample_srt):
        assert all(s.word_start_index is None for s in parse_srt(sample_srt))

    def test_crlf_line_endings(self, sample_srt):
        segments = parse_srt(sample_srt.replace("\n", "\r\n"))
        assert len(segments) == 3
        assert segments[1].text == "this is a two line caption"

    def test_order_is_preserved_not_sorted(self):
        content = (
            "1\n00:00:05,000 --> 00:00:06,000\nlater\n\n"
            "2\n00:00:01,000 --> 00:00:02,000\nearlier\n"
        )
        assert [s.text for s in parse_srt(content)] == ["later", "earlier"]

    def test_empty_input(self):
        assert parse_srt("") == []
        assert parse_srt("\n\n   \n") == []

    def test_blank_lines_with_whitespace_separate_blocks(self):
        content = "1\n00:00:00,000 --> 00:00:01,000\none\n  \n2\n00:00:01,000 --> 00:00:02,000\ntwo"
        assert len(parse_srt(content)) == 2


class TestMalformedBlocks:
    """Defective blocks are skipped with a warning."""

    def test_missing_arrow_is_skipped(self, caplog):
        content = (
            "1\n00:00:01,000 00:00:02,000\nBroken\n\n"
            "2\n00:00:03,000 --> 00:00:04,500\nValid line\n"
        )
        with caplog.at_level(logging.WARNING):
            segments = parse_srt(content)
        assert len(segments) == 1
        assert segments[0].text == "Valid line"
        assert segments[0].start == pytest.approx(3.0)
        assert segments[0].end == pytest.approx(4.5)
        assert "malformed time range" in caplog.text

    def test_too_few_lines_is_skipped(self):
        content = "1\n00:00:01,000 --> 00:00:02,000\n\n2\n00:00:03,000 --> 00:00:04,000\nok\n"
        assert [s.text for s in parse_srt(content)] == ["ok"]

    def test_reversed_time_range_is_skipped(self, caplog):
        content = "1\n00:00:05,000 --> 00:00:04,000\nbackwards\n"
        with caplog.at_level(logging.WARNING):
            assert parse_srt(content) == []
        assert "not before end" in caplog.text


class TestSegmentsFromWords:
    """ASR word lists grouped into phrase segments."""

    def test_breaks_on_punctuation(self):
        words = [
            {"text": "Hi", "start": 0.0, "end": 0.3},
            {"text": "there.", "start": 0.3, "end": 0.6},
            {"text": "How", "start": 1.0, "end": 1.2},
            {"text": "are", "start": 1.2, "end": 1.4},
            {"text": "you?", "start": 1.4, "end": 1.8},
        ]
        segments = segments_from_words(words)
        assert [s.text for s in segments] == ["Hi there.", "How are you?"]
        assert segments[0].start == pytest.approx(0.0)
        assert segments[0].end == pytest.approx(0.6)
        assert segments[1].start == pytest.approx(1.0)
        assert segments[1].end == pytest.approx(1.8)

    def test_breaks_after_max_words(self):
        words = [{"text": "w{}".format(i), "start": i, "end": i + 0.5} for i in range(12)]
        segments = segments_from_words(words)
        assert len(segments) == 2
        assert len(segments[0].text.split()) == MAX_WORDS_PER_SEGMENT
        assert segments[1].text == "w10 w11"

    def test_last_word_closes_segment(self):
        words = [{"text": "no", "start": 0, "end": 1}, {"text": "punctuation", "start": 1, "end": 2}]
        assert [s.text for s in segments_from_words(words)] == ["no punctuation"]

    def test_blank_words_ignored(self):
        words = [{"text": " ", "start": 0, "end": 1}, {"text": "word", "start": 1, "end": 2}]
        segments = segments_from_words(words)
        assert len(segments) == 1
        assert segments[0].start == pytest.approx(1.0)

    def test_empty_list(self):
        assert segments_from_words([]) == []
