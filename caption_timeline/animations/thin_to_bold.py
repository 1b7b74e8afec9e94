"""ThinToBold — stacked word groups switching from thin to bold weight.

WHY: An understated look for interviews and voice-overs: every group of
words is visible at once, stacked one group per line, and the group
being spoken switches to the bold weight and grows slightly.

HOW: Words are grouped ``words_per_group`` at a time and the groups are
joined with ``\\N`` hard line breaks. One equal time slice per group; in
slice i, group i uses BOLD_FONT at 120% scale and every other group uses
THIN_FONT. The glow layer gives the active group a soft halo and draws
the other groups as plain outlined text.

RULES:
- words_per_group is clamped to >= 1
- Shadow strength is clamped to [0, 5]; above 1 it is boosted by 0.2
- Glow alpha: 3a = clamp(50, 255, 133 - 24e), 4a = clamp(20, 255, 96 - 28e)
- Glow border = max(0.1, 0.1e), blur = max(1, 4e); no glow layer at 0
- Invalid color falls back to white
"""

from __future__ import annotations

from caption_timeline.animations.base import (
    GLOW_LAYER,
    TEXT_LAYER,
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

FALLBACK_COLOR = "#FFFFFF"
BOLD_FONT = "Montserrat"
THIN_FONT = "Montserrat Thin"
ACTIVE_SCALE = 120


class ThinToBoldAnimation(BaseAnimation):
    style = AnimationStyle.THIN_TO_BOLD
    label = "ThinToBold"

    def render(self, segment, text, start, end, style, position, rng):
        groups = [" ".join(group) for group in chunk(split_words(text), style.words_per_group)]
        color = resolve_color(style.color, FALLBACK_COLOR, self.label)
        outline = resolve_outline(style, self.label)

        strength = clamp(style.shadow_strength, 0, 5)
        glow_enabled = strength > 0
        effective = strength + 0.2 if strength > 1 else strength
        shadow_alpha = alpha_hex(clamp(round_half_up(133 - effective * 24), 50, 255))
        blur_alpha = alpha_hex(clamp(round_half_up(96 - effective * 28), 20, 255))
        glow_border = format_number(max(0.1, 0.1 * effective))
        glow_blur = format_number(max(1, 4 * effective))

        bold = "\\fn{}\\fscx{s}\\fscy{s}".format(BOLD_FONT, s=ACTIVE_SCALE)
        thin = "\\fn" + THIN_FONT
        plain = "\\c{c}\\bord{ow}\\3c{oc}\\blur{ob}".format(
            c=color, ow=outline.width, oc=outline.color, ob=outline.blur
        )

        track = ShakeTrack(style, position, rng)
        events = []
        for index, slice_start, slice_end in time_slices(start, end, len(groups)):
            move = track.step()

            if glow_enabled:
                glow_lines = []
                for i, group in enumerate(groups):
                    if i == index:
                        glow_lines.append(
                            "{{{move}\\c{c}\\bord{b}\\blur{bl}\\3c{c}\\3a&H{sa}&\\4c{c}\\4a&H{ba}&"
                            "\\xshad0\\yshad-1{bold}}}{g}".format(
                                move=move, c=color, b=glow_border, bl=glow_blur,
                                sa=shadow_alpha, ba=blur_alpha, bold=bold, g=group,
                            )
                        )
                    else:
                        glow_lines.append("{" + plain + "\\shad0" + thin + "}" + group)
                events.append(Event(GLOW_LAYER, slice_start, slice_end, "\\N".join(glow_lines)))

            text_lines = []
            for i, group in enumerate(groups):
                if i == index:
                    text_lines.append("{" + move + plain + bold + "}" + group)
                else:
                    text_lines.append("{" + plain + thin + "}" + group)
            events.append(Event(TEXT_LAYER, slice_start, slice_end, "\\N".join(text_lines)))

        return AnimationResult(events, track.position)
