"""ImpactFull — the whole segment as one glowing block of text.

WHY: For content where the subtitle line should read exactly as written:
no per-word slicing, just the full line with a heavy outline and a soft
glow.

HOW: One glow event and one text event, both spanning the entire
segment. WhiteImpact reuses this class and only changes how shadow
strength maps to the glow.

RULES:
- Shadow strength clamped to [0.5, 5]; the glow is always drawn
- Outline width is at least 2
- Glow border = max(0.5, 0.5s), blur = max(1, 2s), offset (0, -1)
- Glow alpha: 3a = clamp(50, 255, 150 - 20s), 4a = clamp(20, 255, 120 - 20s)
- Invalid color falls back to white
"""

from __future__ import annotations

from typing import Optional

from caption_timeline.animations.base import (
    GLOW_LAYER,
    TEXT_LAYER,
    AnimationResult,
    BaseAnimation,
    ShakeTrack,
    resolve_color,
    resolve_outline,
)
from caption_timeline.core.codec import alpha_hex, clamp, format_number, round_half_up
from caption_timeline.core.ir import AnimationStyle, Event, StyleConfig

FALLBACK_COLOR = "#FFFFFF"
MIN_OUTLINE_WIDTH = 2.0


class ImpactFullAnimation(BaseAnimation):
    style = AnimationStyle.IMPACT_FULL
    label = "ImpactFull"

    def shadow_strength(self, style: StyleConfig) -> Optional[float]:
        """Clamped strength, or None when the glow layer is disabled."""
        return clamp(style.shadow_strength, 0.5, 5)

    def render(self, segment, text, start, end, style, position, rng):
        color = resolve_color(style.color, FALLBACK_COLOR, self.label)
        outline = resolve_outline(style, self.label, min_width=MIN_OUTLINE_WIDTH)
        strength = self.shadow_strength(style)

        track = ShakeTrack(style, position, rng)
        move = track.step()

        events = []
        if strength is not None:
            events.append(
                Event(
                    GLOW_LAYER,
                    start,
                    end,
                    "{{{move}\\c{c}\\bord{b}\\blur{bl}\\3c{oc}\\3a&H{sa}&\\4c{c}\\4a&H{ba}&"
                    "\\xshad0\\yshad-1}}{t}".format(
                        move=move,
                        c=color,
                        b=format_number(max(0.5, 0.5 * strength)),
                        bl=format_number(max(1, 2 * strength)),
                        oc=outline.color,
                        sa=alpha_hex(clamp(round_half_up(150 - strength * 20), 50, 255)),
                        ba=alpha_hex(clamp(round_half_up(120 - strength * 20), 20, 255)),
                        t=text,
                    ),
                )
            )
        events.append(
            Event(
                TEXT_LAYER,
                start,
                end,
                "{{{move}\\c{c}\\bord{ow}\\3c{oc}\\blur{ob}\\shad0}}{t}".format(
                    move=move, c=color, ow=outline.width, oc=outline.color, ob=outline.blur, t=text
                ),
            )
        )
        return AnimationResult(events, track.position)
