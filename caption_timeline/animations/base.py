"""Abstract base animation and the shared generator contract.

WHY: Nine caption animations share the same outer contract (skip blank
text and empty time ranges, never let one bad segment abort the whole
timeline, thread the shake position through) but differ entirely in
how they slice time and build override tags. The base class owns the
contract so each variant only implements its rendering.

HOW: BaseAnimation.generate() is a template method: it resolves the
continuity seed, rejects undrawable input with a warning, then calls the
variant's render() inside a try/except that logs and degrades to an
empty result. Helper functions cover what every variant repeats:
equal time slicing, color conversion with fallback, outline parameters
and per-slice shake tags.

RULES:
- Blank text or start >= end -> empty result, continuity unchanged
- Unexpected errors -> logger.exception + empty result, continuity unchanged
- Glow/shadow events use GLOW_LAYER (0), crisp text uses TEXT_LAYER (1)
- Variants never read a field without clamping numeric ranges first
- With shake off, the returned position equals the input position

To add a new animation:
1. Add a member to AnimationStyle in core/ir.py
2. Create a module in animations/ subclassing BaseAnimation
3. Implement render()
4. Register it in ANIMATIONS in animations/__init__.py
5. Add a template to STYLE_TEMPLATES in styles.py
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from caption_timeline.core.codec import color_to_ass, format_number
from caption_timeline.core.ir import (
    AnimationStyle,
    Event,
    InvalidColorFormat,
    Position,
    Segment,
    StyleConfig,
)
from caption_timeline.core.motion import SEED_POSITION, move_tag, next_position, shake_margin

logger = logging.getLogger(__name__)

GLOW_LAYER = 0
TEXT_LAYER = 1

WHITE = "&H00FFFFFF&"
BLACK = "#000000"


@dataclass
class AnimationResult:
    """Events emitted for one segment plus the continuity state to pass on."""

    events: List[Event] = field(default_factory=list)
    last_position: Position = SEED_POSITION


@dataclass(frozen=True)
class Outline:
    """Clamped outline parameters, pre-formatted for override tags."""

    width: str
    color: str
    blur: str


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def split_words(text: str) -> List[str]:
    """Whitespace-separated words, counted the same way as the word segmenter."""
    return text.split()


def time_slices(start: float, end: float, count: int) -> Iterator[Tuple[int, float, float]]:
    """Yield ``(index, slice_start, slice_end)`` for *count* equal slices.

    The final slice always ends exactly at *end*.
    """
    step = (end - start) / count
    for index in range(count):
        slice_end = end if index == count - 1 else start + (index + 1) * step
        yield index, start + index * step, slice_end


def chunk(items: Sequence[str], size: int) -> List[List[str]]:
    size = max(1, int(size))
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def resolve_color(color: Optional[str], fallback: str, label: str) -> str:
    """Convert *color* to an ASS token, substituting *fallback* when invalid.

    WHY: A malformed user color must not cost the segment its events. The
    variant's documented fallback is used instead and a warning is logged.
    """
    if color:
        try:
            return color_to_ass(color)
        except InvalidColorFormat:
            logger.warning("%s: invalid color %r, using %s", label, color, fallback)
    return color_to_ass(fallback)


def resolve_outline(style: StyleConfig, label: str, min_width: float = 0.0) -> Outline:
    return Outline(
        width=format_number(max(min_width, style.outline_width)),
        color=resolve_color(style.outline_color, BLACK, label + " outline"),
        blur=format_number(max(0.0, style.outline_blur)),
    )


class ShakeTrack:
    """Per-call shake state: yields one ``\\move`` tag per time slice.

    When shake is off every tag is empty and the position never changes.
    """

    def __init__(
        self,
        style: StyleConfig,
        position: Position,
        rng: random.Random,
        margin_v: Optional[int] = None,
    ) -> None:
        self.enabled = style.shake
        self.position = position
        self.rng = rng
        self.margin_v = shake_margin(style.vertical_position) if margin_v is None else margin_v

    def step(self, margin_v: Optional[int] = None) -> str:
        """Advance the anchor and return the move tag for this slice."""
        if not self.enabled:
            return ""
        target = next_position(self.position, self.rng)
        tag = move_tag(self.position, target, self.margin_v if margin_v is None else margin_v)
        self.position = target
        return tag


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


class BaseAnimation(ABC):
    """Abstract base for all animation generators.

    Subclasses set ``style`` and ``label`` and implement render(). Instances
    hold no state, so one instance may serve any number of timelines.
    """

    style: AnimationStyle
    label: str = "Animation"

    def generate(
        self,
        segment: Segment,
        start: float,
        end: float,
        style: StyleConfig,
        last_position: Optional[Position] = None,
        rng: Optional[random.Random] = None,
    ) -> AnimationResult:
        """Produce the events for one segment.

        Args:
            segment: The caption segment to animate.
            start: Start time in seconds (normally segment.start).
            end: End time in seconds (normally segment.end).
            style: Fully resolved style configuration.
            last_position: Continuity state from the previous call, or None
                           to start from the seed position.
            rng: Jitter source for shake mode. A fresh random.Random is
                 used when omitted.

        Returns:
            AnimationResult with the events (possibly none) and the
            position to pass into the next call.
        """
        position = last_position if last_position is not None else SEED_POSITION
        text = segment.text.strip() if segment.text else ""

        if not text:
            logger.warning("%s: skipping segment with blank text at %.2fs", self.label, start)
            return AnimationResult([], position)
        if start >= end:
            logger.warning(
                "%s: skipping segment %r, start %.3fs is not before end %.3fs",
                self.label, text, start, end,
            )
            return AnimationResult([], position)

        if rng is None:
            rng = random.Random()

        try:
            return self.render(segment, text, start, end, style, position, rng)
        except Exception:
            logger.exception("%s: failed to render segment %r", self.label, text)
            return AnimationResult([], position)

    @abstractmethod
    def render(
        self,
        segment: Segment,
        text: str,
        start: float,
        end: float,
        style: StyleConfig,
        position: Position,
        rng: random.Random,
    ) -> AnimationResult:
        """Build the events for validated input.

        *text* is the segment text with surrounding whitespace removed;
        *position* is never None.
        """
