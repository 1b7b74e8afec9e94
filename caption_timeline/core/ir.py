"""Intermediate representation dataclasses for caption timelines.

WHY: The parser, segmenter, generators and assembler all pass the same
handful of values around — caption segments, resolved styles, positions
and output events. Giving each a well-typed frozen dataclass means no
stage can mutate another stage's data and every field has one name.

HOW: Enums close the sets a style can pick from (animation variant,
motion mode, word mode, alignment, case transform). Frozen dataclasses
carry the data:
  Segment     — one time-bounded span of caption text
  Position    — the shake continuity state threaded between segments
  StyleConfig — a fully defaulted per-animation configuration
  Event       — one ``Dialogue:`` line of the output document
  StyleHeader — the script-info / style / events-format preamble
  Timeline    — header + ordered events, serialisable to ASS text

RULES:
- All times are float seconds; only Event.to_line() formats them
- Segments are never validated on construction; generators treat blank
  text or start >= end as "nothing to draw"
- StyleConfig is complete: every field has a default, generators never
  check for missing values (they still clamp numeric ranges)
- Timeline is built once and never mutated afterwards
- Python 3.9 compatible — no match/case, no runtime X | Y unions
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class CaptionTimelineError(Exception):
    """Base class for all errors raised by this package."""


class InvalidColorFormat(CaptionTimelineError, ValueError):
    """A color string is neither ``#RRGGBB`` hex nor ``rgb()``/``rgba()``."""


class UnknownStyleError(CaptionTimelineError, ValueError):
    """A style name has no registered template."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class AnimationStyle(str, Enum):
    """The nine animation variants a caption track can be rendered with.

    Values are the template names accepted by the style resolver.
    """

    GIRLBOSS = "girlboss"
    HORMOZI = "hormozi"
    TIKTOK = "tiktokstyle"
    THIN_TO_BOLD = "thintobold"
    WAVY_COLORS = "wavycolors"
    SHRINKING_PAIRS = "shrinkingpairs"
    REVEAL_ENLARGE = "revealenlarge"
    WHITE_IMPACT = "whiteimpact"
    IMPACT_FULL = "impactfull"


class AnimationMode(str, Enum):
    """Whether events carry a jittering ``\\move`` tag."""

    NONE = "none"
    SHAKE = "shake"


class WordMode(str, Enum):
    """How segments are re-sliced before animation."""

    NORMAL = "normal"
    SINGLE = "single"
    MULTIPLE = "multiple"


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextTransform(str, Enum):
    NONE = "none"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Segment:
    """One time-bounded span of caption text.

    RULES:
    - start / end: float seconds, expected start < end
    - word_start_index: global index of the first word, set by the word
      segmenter; None for segments straight from the parser
    """

    text: str
    start: float
    end: float
    word_start_index: Optional[int] = None


@dataclass(frozen=True)
class Position:
    """2D anchor on the 1280x720 canvas, threaded between shake segments."""

    x: float
    y: float


@dataclass(frozen=True)
class StyleConfig:
    """Fully resolved configuration for one animation variant.

    WHY: Generators must never branch on "is this field present". The style
    resolver fills every field from a template, applies overrides, and
    hands the result here.

    RULES:
    - color: primary/active color, ``#RRGGBB`` or ``rgb()/rgba()``
    - colors: ordered palette for color-cycling variants (may be empty,
      in which case the variant uses its built-in palette)
    - shadow_strength: nominally [0, 5]; generators clamp again
    - outline_width / outline_blur: nominally >= 0; generators clamp again
    - effect_outline_width: border of the highlighted chunk (WavyColors)
    - vertical_position: percent from the bottom, [0, 100]
    - words_per_group: >= 1, used by grouping variants and the segmenter
    """

    animation_style: AnimationStyle
    font_family: str = "Arial"
    font_size: int = 32
    color: str = "#FFFFFF"
    colors: Tuple[str, ...] = ()
    shadow_strength: float = 1.0
    outline_width: float = 2.0
    outline_color: str = "#000000"
    outline_blur: float = 0.0
    effect_outline_width: float = 2.0
    vertical_position: float = 20.0
    animation: AnimationMode = AnimationMode.NONE
    word_mode: WordMode = WordMode.NORMAL
    words_per_group: int = 1
    text_align: TextAlign = TextAlign.CENTER
    text_transform: TextTransform = TextTransform.NONE

    @property
    def shake(self) -> bool:
        return self.animation == AnimationMode.SHAKE


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Event:
    """One ``Dialogue:`` line.

    Lower layers render beneath higher ones: glow/shadow events use layer 0
    and the crisp text sits on layer 1.
    """

    layer: int
    start: float
    end: float
    text: str
    style: str = "Default"

    def to_line(self) -> str:
        # codec imports this module for its error types
        from caption_timeline.core.codec import format_timestamp

        return "Dialogue: {},{},{},{},,0,0,0,,{}".format(
            self.layer,
            format_timestamp(self.start),
            format_timestamp(self.end),
            self.style,
            self.text,
        )


@dataclass(frozen=True)
class StyleHeader:
    """Script info, the single ``Default`` style line and the events format.

    RULES:
    - primary_colour is already an ASS color token (``&HAABBGGRR&``)
    - alignment: 1 = left, 2 = center, 3 = right (bottom row numpad layout)
    - Secondary, outline and back colours, flags, scale, spacing, angle,
      border style, shadow and encoding are fixed by the output format
    """

    font_family: str
    font_size: int
    primary_colour: str
    outline_width: str
    alignment: int
    margin_v: int
    play_res_x: int = 1280
    play_res_y: int = 720
    margin_l: int = 10
    margin_r: int = 10

    def to_text(self) -> str:
        style_line = (
            "Style: Default,{font},{size},{colour},&H000000FF&,&H00000000&,"
            "&H00000000&,0,0,0,0,100,100,0,0,1,{outline},0,{align},"
            "{ml},{mr},{mv},1"
        ).format(
            font=self.font_family,
            size=self.font_size,
            colour=self.primary_colour,
            outline=self.outline_width,
            align=self.alignment,
            ml=self.margin_l,
            mr=self.margin_r,
            mv=self.margin_v,
        )
        return (
            "[Script Info]\n"
            "ScriptType: v4.00+\n"
            "PlayResX: {}\n"
            "PlayResY: {}\n"
            "ScaledBorderAndShadow: yes\n"
            "\n"
            "[V4+ Styles]\n"
            "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, "
            "OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, "
            "ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, "
            "Alignment, MarginL, MarginR, MarginV, Encoding\n"
            "{}\n"
            "\n"
            "[Events]\n"
            "Format: Layer, Start, End, Style, Name, MarginL, MarginR, "
            "MarginV, Effect, Text\n"
        ).format(self.play_res_x, self.play_res_y, style_line)


@dataclass(frozen=True)
class Timeline:
    """The compiled document: one header followed by every event in order."""

    header: StyleHeader
    events: List[Event] = field(default_factory=list)

    def to_ass(self) -> str:
        """Serialise to ASS text, one trailing newline per event line."""
        lines = "".join(event.to_line() + "\n" for event in self.events)
        return self.header.to_text() + lines
