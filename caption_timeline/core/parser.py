"""Caption input parsing — SRT text and ASR word lists into Segments.

WHY: Captions arrive either as SRT files (edited by hand, so often
slightly broken) or as word-level ASR output. Both must become the same
ordered list of Segment values before the segmenter and generators run.

HOW: parse_srt() splits on blank lines and reads each block as
(index line, time-range line, text lines). segments_from_words() groups
ASR words into phrase-sized segments, closing a segment on trailing
punctuation, after MAX_WORDS_PER_SEGMENT words, or at the last word.

RULES:
- A malformed block (fewer than 3 lines, no time-range match, blank text,
  start >= end) is skipped with a warning; parsing continues
- Text lines are stripped and joined with single spaces
- Output keeps input order; the parser never sorts by start time
- Both CRLF and LF line endings are accepted
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping

from caption_timeline.core.ir import Segment

logger = logging.getLogger(__name__)

_BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")
_TIME_RANGE_RE = re.compile(
    r"(\d{2}):(\d{2}):(\d{2}),(\d{3})\s*-->\s*(\d{2}):(\d{2}):(\d{2}),(\d{3})"
)
_SEGMENT_END_RE = re.compile(r"[.!?,;:]$")

MAX_WORDS_PER_SEGMENT = 10
"""ASR words per segment before a break is forced."""


def _to_seconds(hours: str, minutes: str, seconds: str, millis: str) -> float:
    return int(hours) * 3600 + int(minutes) * 60 + int(seconds) + int(millis) / 1000.0


def parse_srt(content: str) -> List[Segment]:
    """Parse SRT text into an ordered list of Segments.

    Args:
        content: Raw SRT file content.

    Returns:
        One Segment per well-formed block, in input order. Malformed
        blocks are skipped (and logged), never fatal.
    """
    normalized = content.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not normalized:
        return []

    segments: List[Segment] = []
    for number, block in enumerate(_BLOCK_SPLIT_RE.split(normalized), start=1):
        lines = [line.strip() for line in block.strip().split("\n")]
        if len(lines) < 3:
            logger.warning("Skipping SRT block %d: expected at least 3 lines, got %d", number, len(lines))
            continue

        match = _TIME_RANGE_RE.search(lines[1])
        if not match:
            logger.warning("Skipping SRT block %d: malformed time range %r", number, lines[1])
            continue

        groups = match.groups()
        start = _to_seconds(*groups[0:4])
        end = _to_seconds(*groups[4:8])
        text = " ".join(line for line in lines[2:] if line)

        if not text:
            logger.warning("Skipping SRT block %d: no caption text", number)
            continue
        if start >= end:
            logger.warning("Skipping SRT block %d: start %.3fs is not before end %.3fs", number, start, end)
            continue

        segments.append(Segment(text=text, start=start, end=end))

    logger.debug("Parsed %d segments from SRT input", len(segments))
    return segments


def segments_from_words(words: Iterable[Mapping[str, Any]]) -> List[Segment]:
    """Group ASR words (``{"text", "start", "end"}`` mappings) into Segments.

    WHY: Transcription services return one entry per word. Captions need
    phrase-sized segments so the word segmenter and the per-word
    animations have a line of context to work with.

    RULES:
    - Words with blank text are ignored
    - A segment ends when a word ends in . ! ? , ; or :
    - A segment ends after MAX_WORDS_PER_SEGMENT words
    - The final word always closes the current segment
    - start is the first word's start, end is the last word's end
    """
    cleaned = [
        (str(word["text"]).strip(), float(word["start"]), float(word["end"]))
        for word in words
        if str(word.get("text", "")).strip()
    ]

    segments: List[Segment] = []
    current: list = []
    for index, entry in enumerate(cleaned):
        current.append(entry)
        is_last = index == len(cleaned) - 1
        if _SEGMENT_END_RE.search(entry[0]) or len(current) >= MAX_WORDS_PER_SEGMENT or is_last:
            segments.append(
                Segment(
                    text=" ".join(text for text, _, _ in current),
                    start=current[0][1],
                    end=current[-1][2],
                )
            )
            current = []

    return segments
