"""Timeline assembler — fold segments through a generator into a Timeline.

WHY: Every caption track is built the same way regardless of animation:
one style header, then each segment's events in order, with the shake
position carried from one segment into the next. Keeping the fold here
means generators stay pure per-segment functions.

HOW: build_header() derives the style line once from the StyleConfig.
build_timeline() looks up the generator for the style, then folds over
the segments: each call receives the previous call's returned position
and contributes its events. compile_timeline() adds the text transform
and word-mode re-slicing in front; compile_srt() adds parsing and style
resolution, for callers that start from raw SRT text.

RULES:
- Segments are processed in list order; nothing is sorted
- Continuity starts at the seed (670, 0) and is never shared between calls
- Header MarginV uses three discrete bands, not interpolation:
  vp >= 80 -> top, 45 <= vp <= 55 -> center, otherwise bottom
- An invalid primary color in the header falls back to white
- Zero segments is a valid result: header with no events
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Any, List, Mapping, Optional, Sequence, Union

from caption_timeline import config
from caption_timeline.animations import get_animation
from caption_timeline.core.codec import color_to_ass, format_number
from caption_timeline.core.ir import (
    Event,
    InvalidColorFormat,
    Position,
    Segment,
    StyleConfig,
    StyleHeader,
    TextAlign,
    TextTransform,
    Timeline,
)
from caption_timeline.core.motion import SEED_POSITION
from caption_timeline.core.parser import parse_srt
from caption_timeline.core.segmenter import split_segments
from caption_timeline.models import StyleOverrides
from caption_timeline.styles import resolve_style

logger = logging.getLogger(__name__)

ALIGNMENT = {
    TextAlign.LEFT: 1,
    TextAlign.CENTER: 2,
    TextAlign.RIGHT: 3,
}


def vertical_margin(vertical_position: float) -> int:
    """Map a vertical position percentage to one of three header MarginV bands."""
    if vertical_position >= 80:
        return config.MARGIN_BAND_TOP
    if 45 <= vertical_position <= 55:
        return config.MARGIN_BAND_CENTER
    return config.MARGIN_BAND_BOTTOM


def build_header(style: StyleConfig) -> StyleHeader:
    try:
        primary = color_to_ass(style.color)
    except InvalidColorFormat:
        logger.warning("Invalid primary color %r in style header, using white", style.color)
        primary = color_to_ass("#FFFFFF")

    return StyleHeader(
        font_family=style.font_family,
        font_size=style.font_size,
        primary_colour=primary,
        outline_width=format_number(max(0.0, style.outline_width)),
        alignment=ALIGNMENT[style.text_align],
        margin_v=vertical_margin(style.vertical_position),
        play_res_x=config.PLAY_RES_X,
        play_res_y=config.PLAY_RES_Y,
        margin_l=config.HEADER_MARGIN_L,
        margin_r=config.HEADER_MARGIN_R,
    )


def apply_text_transform(segments: Sequence[Segment], transform: TextTransform) -> List[Segment]:
    if transform == TextTransform.UPPERCASE:
        return [replace(segment, text=segment.text.upper()) for segment in segments]
    if transform == TextTransform.LOWERCASE:
        return [replace(segment, text=segment.text.lower()) for segment in segments]
    return list(segments)


def build_timeline(
    segments: Sequence[Segment],
    style: StyleConfig,
    rng: Optional[random.Random] = None,
    seed_position: Optional[Position] = None,
) -> Timeline:
    """Fold segments through the style's generator into a Timeline.

    WHY: The shake animation needs each segment to start where the
    previous one ended. Threading the position explicitly through the
    loop replaces any shared mutable "current position".

    HOW: For every segment, call the generator with the position returned
    by the previous call, append its events, and keep its returned
    position. Segments are used exactly as given (no re-slicing).

    Args:
        segments: Ordered segments, already re-sliced if needed.
        style: Fully resolved style configuration.
        rng: Jitter source for shake mode. Defaults to a fresh
             random.Random (non-deterministic).
        seed_position: Starting continuity state. Defaults to (670, 0).

    Returns:
        Timeline with one header and every generated event in order.
    """
    generator = get_animation(style.animation_style)
    if rng is None:
        rng = random.Random()

    position = seed_position if seed_position is not None else SEED_POSITION
    events: List[Event] = []
    for segment in segments:
        result = generator.generate(segment, segment.start, segment.end, style, position, rng)
        events.extend(result.events)
        position = result.last_position

    logger.debug(
        "Assembled %d events from %d segments (%s)",
        len(events), len(segments), style.animation_style.value,
    )
    return Timeline(header=build_header(style), events=events)


def compile_timeline(
    segments: Sequence[Segment],
    style: StyleConfig,
    rng: Optional[random.Random] = None,
) -> Timeline:
    """Apply the style's text transform and word mode, then build the Timeline."""
    prepared = apply_text_transform(segments, style.text_transform)
    prepared = split_segments(prepared, style.word_mode, style.words_per_group)
    return build_timeline(prepared, style, rng=rng)


def compile_srt(
    srt_content: str,
    style_name: str,
    overrides: Optional[Union[StyleOverrides, Mapping[str, Any]]] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Compile raw SRT text into an ASS document in one call.

    Raises:
        UnknownStyleError: If *style_name* is not a registered template.
        pydantic.ValidationError: If *overrides* fail validation.
    """
    style = resolve_style(style_name, overrides)
    segments = parse_srt(srt_content)
    return compile_timeline(segments, style, rng=rng).to_ass()
