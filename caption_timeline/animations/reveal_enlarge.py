"""RevealEnlarge — the spoken word grows and takes the next palette color.

WHY: A bold, readable highlight: the whole line stays visible in white
and each word, as it is spoken, scales up to 120% in a cycling color
with a colored shadow beneath it.

HOW: One equal time slice per word. The active word uses
``palette[global_index % len(palette)]`` and a ``\\t`` transform from
100% to 120% over the first ENLARGE_MS. The shadow layer repeats the line
blurred; the active word's shadow takes the matching shadow-palette
color and the other words' shadows take the outline color.

RULES:
- Glow enabled when raw shadow strength > 0
- Effective strength: 0.8 x s when s > 1, else 0.5 x s (s clamped to [0, 5])
- Shadow alpha: 3a = clamp(0, 255, 150 - 20e), 4a = clamp(0, 255, 120 - 20e)
- Shadow blur = 1.5e, offset (0, -0.5)
- With a user palette the shadow palette equals the text palette
- Invalid palette entries fall back to #31F40B
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
from caption_timeline.animations.hormozi import DEFAULT_PALETTE
from caption_timeline.core.codec import alpha_hex, clamp, format_number, round_half_up
from caption_timeline.core.ir import AnimationStyle, Event

FALLBACK_COLOR = "#31F40B"
DEFAULT_SHADOW_PALETTE = ("#51FF2B", "#B31419", "#FEE01D", "#00FFFF")
ENLARGE_MS = 150


class RevealEnlargeAnimation(BaseAnimation):
    style = AnimationStyle.REVEAL_ENLARGE
    label = "RevealEnlarge"

    def render(self, segment, text, start, end, style, position, rng):
        words = split_words(text)
        if style.colors:
            text_palette = [resolve_color(c, FALLBACK_COLOR, self.label) for c in style.colors]
            shadow_palette = text_palette
        else:
            text_palette = [resolve_color(c, FALLBACK_COLOR, self.label) for c in DEFAULT_PALETTE]
            shadow_palette = [resolve_color(c, FALLBACK_COLOR, self.label) for c in DEFAULT_SHADOW_PALETTE]
        outline = resolve_outline(style, self.label)
        base_index = segment.word_start_index or 0

        raw = clamp(style.shadow_strength, 0, 5)
        glow_enabled = style.shadow_strength > 0
        effective = raw * 0.8 if raw > 1 else raw * 0.5
        shadow_alpha = alpha_hex(round_half_up(clamp(150 - effective * 20, 0, 255)))
        blur_alpha = alpha_hex(round_half_up(clamp(120 - effective * 20, 0, 255)))
        shadow_blur = format_number(1.5 * effective)

        enlarge = "\\fscx100\\fscy100\\t(0,{},\\fscx120\\fscy120)".format(ENLARGE_MS)

        track = ShakeTrack(style, position, rng)
        events = []
        for index, slice_start, slice_end in time_slices(start, end, len(words)):
            move = track.step()
            global_index = base_index + index
            color = text_palette[global_index % len(text_palette)]
            shadow_color = shadow_palette[global_index % len(shadow_palette)]

            if glow_enabled:
                shadow_words = []
                for i, word in enumerate(words):
                    if i == index:
                        prefix, fill = move + enlarge, shadow_color
                    else:
                        prefix, fill = "\\fscx100\\fscy100", outline.color
                    shadow_words.append(
                        "{{{p}\\c{c}\\bord{ow}\\blur{bl}\\3c{oc}\\3a&H{sa}&\\4c{oc}\\4a&H{ba}&"
                        "\\xshad0\\yshad-0.5}}{w}".format(
                            p=prefix, c=fill, ow=outline.width, bl=shadow_blur, oc=outline.color,
                            sa=shadow_alpha, ba=blur_alpha, w=word,
                        )
                    )
                events.append(Event(GLOW_LAYER, slice_start, slice_end, " ".join(shadow_words)))

            text_words = []
            for i, word in enumerate(words):
                if i == index:
                    prefix, fill = move + enlarge, color
                else:
                    prefix, fill = "\\fscx100\\fscy100", WHITE
                text_words.append(
                    "{{{p}\\c{c}\\bord{ow}\\3c{oc}}}{w}".format(
                        p=prefix, c=fill, ow=outline.width, oc=outline.color, w=word
                    )
                )
            events.append(Event(TEXT_LAYER, slice_start, slice_end, " ".join(text_words)))

        return AnimationResult(events, track.position)
