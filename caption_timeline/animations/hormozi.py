"""Hormozi — one highlighted word at a time, cycling through a palette.

WHY: High-energy talking-head captions: the spoken word pops in a bright
color while the rest of the line stays white, and the color changes on
every word across the whole track.

HOW: One equal time slice per word. The word at the slice index takes
``palette[global_index % len(palette)]``, where the global index is the
segment's word_start_index plus the word's index in the segment. The
glow layer draws only the active word; other words are fully transparent
so the glow layer keeps the same text layout as the text layer.

RULES:
- Shadow strength is clamped to [0, 5]; no glow layer at 0
- Glow alpha: 3a = clamp(50, 255, 150 - 20s), 4a = clamp(20, 255, 120 - 20s)
- Glow border = max(0.1, 0.1s), blur = max(1, 2s), shadow offset (0, -1)
- An invalid palette entry falls back to #31F40B for that entry only
- An empty palette uses DEFAULT_PALETTE
"""

from __future__ import annotations

from typing import List, Optional

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
from caption_timeline.core.ir import AnimationStyle, Event, StyleConfig

FALLBACK_COLOR = "#31F40B"
DEFAULT_PALETTE = ("#31F40B", "#FF2121", "#FEE01D", "#00FFFF")


class HormoziAnimation(BaseAnimation):
    style = AnimationStyle.HORMOZI
    label = "Hormozi"

    def palette(self, style: StyleConfig) -> List[str]:
        colors = style.colors or DEFAULT_PALETTE
        return [resolve_color(color, FALLBACK_COLOR, self.label) for color in colors]

    def shadow_strength(self, style: StyleConfig) -> Optional[float]:
        """Clamped strength, or None when the glow layer is disabled."""
        strength = clamp(style.shadow_strength, 0, 5)
        return strength if strength > 0 else None

    def render(self, segment, text, start, end, style, position, rng):
        words = split_words(text)
        palette = self.palette(style)
        outline = resolve_outline(style, self.label)
        base_index = segment.word_start_index or 0

        strength = self.shadow_strength(style)
        if strength is not None:
            shadow_alpha = alpha_hex(clamp(round_half_up(150 - strength * 20), 50, 255))
            blur_alpha = alpha_hex(clamp(round_half_up(120 - strength * 20), 20, 255))
            glow_border = format_number(max(0.1, 0.1 * strength))
            glow_blur = format_number(max(1, 2 * strength))

        track = ShakeTrack(style, position, rng)
        events = []
        for index, slice_start, slice_end in time_slices(start, end, len(words)):
            move = track.step()
            color = palette[(base_index + index) % len(palette)]

            if strength is not None:
                glow_words = []
                for i, word in enumerate(words):
                    if i == index:
                        glow_words.append(
                            "{{{move}\\c{c}\\bord{b}\\blur{bl}\\3c{c}\\3a&H{sa}&\\4c{c}\\4a&H{ba}&"
                            "\\xshad0\\yshad-1}}{w}".format(
                                move=move, c=color, b=glow_border, bl=glow_blur,
                                sa=shadow_alpha, ba=blur_alpha, w=word,
                            )
                        )
                    else:
                        glow_words.append("{\\alpha&HFF&}" + word)
                events.append(Event(GLOW_LAYER, slice_start, slice_end, " ".join(glow_words)))

            text_words = []
            for i, word in enumerate(words):
                prefix = move + "\\c" + color if i == index else "\\c" + WHITE
                text_words.append(
                    "{{{p}\\bord{ow}\\3c{oc}\\blur{ob}\\shad0}}{w}".format(
                        p=prefix, ow=outline.width, oc=outline.color, ob=outline.blur, w=word,
                    )
                )
            events.append(Event(TEXT_LAYER, slice_start, slice_end, " ".join(text_words)))

        return AnimationResult(events, track.position)
