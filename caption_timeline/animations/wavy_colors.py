"""WavyColors — character chunks that flash through a color wave.

WHY: A playful look for music and meme clips: each word is revealed a
few letters at a time, the highlighted letters flash in a bright color
and the whole word briefly stretches vertically.

HOW: One equal time slice per word, and within it one equal step per
chunk of up to CHUNK_SIZE characters. Each step emits a single event
showing the current word, with the active chunk drawn in the next
palette color and the other chunks in white. A pair of ``\\t``
transforms stretches the word to 150% height over the first quarter of
the step and relaxes it by the half-way point.

RULES:
- No glow/text layer split; every event is on layer 0
- No shake motion; the continuity position is returned unchanged
- Palette cycles green, cyan, yellow per chunk step within the segment
- Active chunk: effect outline width, blur 8, alpha 60, shadow 5
- Transform times are milliseconds relative to the event start
"""

from __future__ import annotations

import re

from caption_timeline.animations.base import (
    WHITE,
    AnimationResult,
    BaseAnimation,
    resolve_outline,
    split_words,
    time_slices,
)
from caption_timeline.core.codec import color_to_ass, format_number, round_half_up
from caption_timeline.core.ir import AnimationStyle, Event

CHUNK_SIZE = 4
WAVE_LAYER = 0
PALETTE = tuple(color_to_ass(color) for color in ("#00FF00", "#00FFFF", "#FFFF00"))

_CHUNK_RE = re.compile(r".{1,%d}" % CHUNK_SIZE)


def stretch_tags(duration: float) -> str:
    """Peak-then-relax vertical stretch for a step of *duration* seconds."""
    total_ms = round_half_up(duration * 1000)
    peak = round_half_up(total_ms * 0.25)
    relax = max(peak, round_half_up(total_ms * 0.5))
    return "{{\\t(0,{p},\\fscx100\\fscy150)}}{{\\t({p},{r},\\fscx100\\fscy100)}}".format(p=peak, r=relax)


class WavyColorsAnimation(BaseAnimation):
    style = AnimationStyle.WAVY_COLORS
    label = "WavyColors"

    def render(self, segment, text, start, end, style, position, rng):
        outline = resolve_outline(style, self.label)
        effect_width = format_number(max(0.0, style.effect_outline_width))
        normal = "{{\\c{c}\\bord{ow}\\3c{oc}\\blur{ob}\\alpha&H00&\\shad0}}".format(
            c=WHITE, ow=outline.width, oc=outline.color, ob=outline.blur
        )

        events = []
        step = 0
        words = split_words(text)
        for word_index, word_start, word_end in time_slices(start, end, len(words)):
            word = words[word_index]
            chunks = _CHUNK_RE.findall(word) or [word]
            for active, step_start, step_end in time_slices(word_start, word_end, len(chunks)):
                color = PALETTE[step % len(PALETTE)]
                highlight = "{{\\3c{c}\\bord{w}\\c{c}\\blur8\\alpha&H60&\\shad5}}".format(c=color, w=effect_width)
                body = "".join(
                    (highlight if i == active else normal) + part for i, part in enumerate(chunks)
                )
                events.append(
                    Event(WAVE_LAYER, step_start, step_end, stretch_tags(step_end - step_start) + body)
                )
                step += 1

        return AnimationResult(events, position)
