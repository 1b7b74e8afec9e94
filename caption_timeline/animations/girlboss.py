"""Girlboss — progressive word reveal in a single highlight color.

WHY: The signature "karaoke" look: words light up one by one and stay
lit, so by the end of the segment the whole line is colored.

HOW: The segment time is split into one equal slice per word. In slice
i, words 0..i are drawn in the highlight color and later words in white.
A glow layer beneath repeats the line with a soft border in the same
colors.

RULES:
- Shadow strength is clamped to [0, 5]; above 1 it is boosted by 0.2
- Glow alpha: 3a = clamp(50, 255, 133 - 24e), 4a = clamp(20, 255, 96 - 28e)
- Glow border = max(0.1, 0.1e), blur = max(1, 3e); no glow layer at 0
- The move tag goes on every glow word but only on colored text words
- Invalid highlight color falls back to #F361D8
"""

from __future__ import annotations

from caption_timeline.animations.base import (
    GLOW_LAYER,
    TEXT_LAYER,
    WHITE,
    AnimationResult,
    BaseAnimation,
    ShakeTrack,
    resolve_color,
    resolve_outline,
    split_words,
    time_slices,
)
from caption_timeline.core.codec import alpha_hex, clamp, format_number, round_half_up
from caption_timeline.core.ir import AnimationStyle, Event

FALLBACK_COLOR = "#F361D8"


class GirlbossAnimation(BaseAnimation):
    style = AnimationStyle.GIRLBOSS
    label = "Girlboss"

    def render(self, segment, text, start, end, style, position, rng):
        words = split_words(text)
        color = resolve_color(style.color, FALLBACK_COLOR, self.label)
        outline = resolve_outline(style, self.label)

        strength = clamp(style.shadow_strength, 0, 5)
        glow_enabled = strength > 0
        effective = strength + 0.2 if strength > 1 else strength
        shadow_alpha = alpha_hex(clamp(round_half_up(133 - effective * 24), 50, 255))
        blur_alpha = alpha_hex(clamp(round_half_up(96 - effective * 28), 20, 255))
        glow_border = format_number(max(0.1, 0.1 * effective))
        glow_blur = format_number(max(1, 3 * effective))

        track = ShakeTrack(style, position, rng)
        events = []
        for index, slice_start, slice_end in time_slices(start, end, len(words)):
            move = track.step()

            if glow_enabled:
                glow_words = []
                for i, word in enumerate(words):
                    glow_color = color if i <= index else WHITE
                    glow_words.append(
                        "{{{move}\\c{c}\\bord{b}\\blur{bl}\\3c{c}\\4c{c}\\4a&H{ba}&\\3a&H{sa}&}}{w}".format(
                            move=move, c=glow_color, b=glow_border, bl=glow_blur,
                            ba=blur_alpha, sa=shadow_alpha, w=word,
                        )
                    )
                events.append(Event(GLOW_LAYER, slice_start, slice_end, " ".join(glow_words)))

            text_words = []
            for i, word in enumerate(words):
                if i <= index:
                    prefix = move + "\\c" + color
                else:
                    prefix = "\\c" + WHITE
                text_words.append(
                    "{{{p}\\bord{ow}\\3c{oc}\\blur{ob}\\shad0}}{w}".format(
                        p=prefix, ow=outline.width, oc=outline.color, ob=outline.blur, w=word,
                    )
                )
            events.append(Event(TEXT_LAYER, slice_start, slice_end, " ".join(text_words)))

        return AnimationResult(events, track.position)
