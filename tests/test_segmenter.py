"""Unit tests for the word segmenter.

WHY: Color-cycling animations rely on word_start_index continuing across
the whole track, and every word-level animation relies on the re-sliced
times adding up to the original segment.

HOW: Re-slice the shared sample segments in each mode and check counts,
timing and the global index sequence.
"""

import pytest

from caption_timeline.core.ir import Segment, WordMode
from caption_timeline.core.segmenter import split_segments


class TestNormalMode:
    """normal mode is the identity."""

    def test_returns_segments_unchanged(self, sample_segments):
        assert split_segments(sample_segments, WordMode.NORMAL) == sample_segments

    def test_accepts_string_mode(self, sample_segments):
        assert split_segments(sample_segments, "normal") == sample_segments


class TestSingleMode:
    """One segment per word."""

    def test_two_words_two_seconds(self):
        result = split_segments([Segment("hello world", 0.0, 2.0)], WordMode.SINGLE)
        assert [s.text for s in result] == ["hello", "world"]
        assert result[0].start == pytest.approx(0.0)
        assert result[0].end == pytest.approx(1.0)
        assert result[1].start == pytest.approx(1.0)
        assert result[1].end == pytest.approx(2.0)
        assert [s.word_start_index for s in result] == [0, 1]

    def test_count_equals_word_count(self, sample_segments):
        result = split_segments(sample_segments, WordMode.SINGLE)
        assert len(result) == sum(len(s.text.split()) for s in sample_segments)

    def test_durations_sum_to_original(self, sample_segments):
        result = split_segments(sample_segments, WordMode.SINGLE)
        total = sum(s.end - s.start for s in result)
        assert total == pytest.approx(sum(s.end - s.start for s in sample_segments))

    def test_last_word_ends_exactly_at_segment_end(self):
        result = split_segments([Segment("a b c", 0.1, 0.4)], WordMode.SINGLE)
        assert result[-1].end == 0.4

    def test_global_index_continues_across_segments(self, sample_segments):
        result = split_segments(sample_segments, WordMode.SINGLE)
        assert [s.word_start_index for s in result] == list(range(len(result)))

    def test_blank_segment_dropped(self):
        segments = [Segment("   ", 0.0, 1.0), Segment("word", 1.0, 2.0)]
        result = split_segments(segments, WordMode.SINGLE)
        assert [s.text for s in result] == ["word"]
        assert result[0].word_start_index == 0


class TestMultipleMode:
    """Groups of words_per_group words."""

    def test_last_group_may_be_shorter(self):
        result = split_segments([Segment("a b c d e", 0.0, 5.0)], WordMode.MULTIPLE, 3)
        assert [s.text for s in result] == ["a b c", "d e"]
        assert result[0].end == pytest.approx(3.0)
        assert result[1].start == pytest.approx(3.0)
        assert result[1].end == pytest.approx(5.0)

    def test_index_advances_by_group_size(self, sample_segments):
        result = split_segments(sample_segments, WordMode.MULTIPLE, 2)
        # 2 words, 6 words, 1 word
        assert [s.word_start_index for s in result] == [0, 2, 4, 6, 8]

    def test_index_sequence_is_gap_free(self, sample_segments):
        result = split_segments(sample_segments, WordMode.MULTIPLE, 4)
        expected = 0
        for segment in result:
            assert segment.word_start_index == expected
            expected += len(segment.text.split())

    def test_words_per_group_clamped_to_one(self):
        result = split_segments([Segment("a b", 0.0, 1.0)], WordMode.MULTIPLE, 0)
        assert [s.text for s in result] == ["a", "b"]
