"""ShrinkingPairs — word groups that pop in large, shrink, then stack in white.

WHY: Each spoken group appears enlarged in the accent color and settles
to normal size; once the next group starts it turns white and stays on
screen on its own line, so the segment builds up as a stacked block.

HOW: Words are grouped ``words_per_group`` at a time, one equal time
slice per group. Group i sits LINE_SPACING px below group i-1. During its
own slice a group is drawn in the accent color, starting at 120% scale
and shrinking to 100% over SHRINK_MS. From the next group's start until
the segment ends it is drawn in white at 100%. Each phase has a matching
glow event beneath it.

RULES:
- Outline width is 0.75 x the style outline (clamped >= 0)
- Glow enabled when raw shadow strength > 0; effective strength = 0.7 x
  clamp(s, 0, 5)
- Glow alpha: 3a = clamp(0, 255, 140 - 0.5e), 4a = clamp(0, 255, 120 - 0.5e)
- Glow: alpha E0, border 3, blur 10e
- Shake: one ``\\move`` per group at the group's line offset;
  otherwise a static ``\\pos`` at the current x and the line offset
- Invalid accent color falls back to #31F40B
"""

from __future__ import annotations

from caption_timeline import config
from caption_timeline.animations.base import (
    GLOW_LAYER,
    TEXT_LAYER,
    WHITE,
    AnimationResult,
    BaseAnimation,
    ShakeTrack,
    chunk,
    resolve_color,
    resolve_outline,
    split_words,
    time_slices,
)
from caption_timeline.core.codec import alpha_hex, clamp, format_number, round_half_up
from caption_timeline.core.ir import AnimationStyle, Event
from caption_timeline.core.motion import pos_tag, shake_margin

FALLBACK_COLOR = "#31F40B"
START_SCALE = 120
END_SCALE = 100
SHRINK_MS = 450


class ShrinkingPairsAnimation(BaseAnimation):
    style = AnimationStyle.SHRINKING_PAIRS
    label = "ShrinkingPairs"

    def render(self, segment, text, start, end, style, position, rng):
        groups = [" ".join(group) for group in chunk(split_words(text), style.words_per_group)]
        accent = resolve_color(style.color, FALLBACK_COLOR, self.label)
        outline = resolve_outline(style, self.label)
        outline_width = format_number(max(0.0, style.outline_width) * 0.75)

        glow_enabled = style.shadow_strength > 0
        effective = clamp(style.shadow_strength, 0, 5) * 0.7
        shadow_alpha = alpha_hex(round_half_up(clamp(140 - effective * 0.5, 0, 255)))
        blur_alpha = alpha_hex(round_half_up(clamp(120 - effective * 0.5, 0, 255)))
        glow_blur = format_number(10 * effective)

        shrink = "\\fscx{s}\\fscy{s}\\t(0,{ms},\\fscx{e}\\fscy{e})".format(
            s=START_SCALE, e=END_SCALE, ms=SHRINK_MS
        )
        rest = "\\fscx{e}\\fscy{e}".format(e=END_SCALE)

        def glow(tag, color, scale, group):
            return (
                "{{{tag}\\alpha&HE0&\\c{c}\\bord3\\blur{bl}\\3c{c}\\3a&H{sa}&\\4c{c}\\4a&H{ba}&{scale}}}{g}"
            ).format(tag=tag, c=color, bl=glow_blur, sa=shadow_alpha, ba=blur_alpha, scale=scale, g=group)

        def body(tag, color, scale, group):
            return "{{{tag}\\c{c}\\3c{oc}\\bord{ow}{scale}}}{g}".format(
                tag=tag, c=color, oc=outline.color, ow=outline_width, scale=scale, g=group
            )

        base_margin = shake_margin(style.vertical_position)
        track = ShakeTrack(style, position, rng)
        events = []
        for index, slice_start, slice_end in time_slices(start, end, len(groups)):
            margin = base_margin + index * config.LINE_SPACING
            if track.enabled:
                tag = track.step(margin)
            else:
                tag = pos_tag(track.position.x, margin)

            if glow_enabled:
                events.append(Event(GLOW_LAYER, slice_start, slice_end, glow(tag, accent, shrink, groups[index])))
            events.append(Event(TEXT_LAYER, slice_start, slice_end, body(tag, accent, shrink, groups[index])))

            if index < len(groups) - 1 and slice_end < end:
                if glow_enabled:
                    events.append(Event(GLOW_LAYER, slice_end, end, glow(tag, WHITE, rest, groups[index])))
                events.append(Event(TEXT_LAYER, slice_end, end, body(tag, WHITE, rest, groups[index])))

        return AnimationResult(events, track.position)
