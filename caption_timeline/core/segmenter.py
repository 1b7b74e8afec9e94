"""Word segmenter — re-slice segments into single words or word groups.

WHY: Word-by-word captions need one segment per word (or per small
group) with its own timing, and color-cycling animations need to know
each word's position in the whole track so colors keep alternating
across subtitle lines instead of restarting at every line.

HOW: For ``single`` and ``multiple`` modes each segment's text is split
on whitespace and cut into groups of ``words_per_group`` words (1 for
single). The segment's duration is shared out in proportion to each
group's word count. A running counter, never reset between segments,
stamps each group with the global index of its first word.

RULES:
- ``normal`` returns the input unchanged
- word_start_index = counter before the group; counter += group size after
- The last group of a segment always ends exactly at segment.end
- Segments with no words are dropped silently
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Union

from caption_timeline.core.ir import Segment, WordMode

logger = logging.getLogger(__name__)


def split_segments(
    segments: Sequence[Segment],
    mode: Union[WordMode, str] = WordMode.NORMAL,
    words_per_group: int = 1,
) -> List[Segment]:
    """Re-slice segments according to the word mode.

    Args:
        segments: Ordered segments from the parser.
        mode: ``normal``, ``single`` or ``multiple``.
        words_per_group: Group size for ``multiple`` mode (clamped to >= 1).

    Returns:
        A new list of segments. For ``normal`` mode, the input segments.
    """
    mode = WordMode(mode)
    if mode == WordMode.NORMAL:
        return list(segments)

    group_size = 1 if mode == WordMode.SINGLE else max(1, int(words_per_group))

    result: List[Segment] = []
    counter = 0
    for segment in segments:
        words = segment.text.split()
        if not words:
            continue

        total = segment.end - segment.start
        word_count = len(words)
        for offset in range(0, word_count, group_size):
            group = words[offset:offset + group_size]
            consumed = offset + len(group)
            group_start = segment.start + total * offset / word_count
            if consumed == word_count:
                group_end = segment.end
            else:
                group_end = segment.start + total * consumed / word_count
            result.append(
                Segment(
                    text=" ".join(group),
                    start=group_start,
                    end=group_end,
                    word_start_index=counter,
                )
            )
            counter += len(group)

    logger.debug("Split %d segments into %d (%s mode)", len(segments), len(result), mode.value)
    return result
