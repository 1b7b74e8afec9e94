"""TikTok style — single-color variant of the Hormozi highlight.

Same slicing and tag layout as Hormozi, but every highlighted word uses
the one style color (fallback #00FFFF), and a non-zero shadow strength is
clamped to [0.5, 5] so the glow never becomes invisible.
"""

from __future__ import annotations

from caption_timeline.animations.base import resolve_color
from caption_timeline.animations.hormozi import HormoziAnimation
from caption_timeline.core.codec import clamp
from caption_timeline.core.ir import AnimationStyle

FALLBACK_COLOR = "#00FFFF"


class TikTokAnimation(HormoziAnimation):
    style = AnimationStyle.TIKTOK
    label = "TikTok style"

    def palette(self, style):
        return [resolve_color(style.color, FALLBACK_COLOR, self.label)]

    def shadow_strength(self, style):
        if style.shadow_strength <= 0:
            return None
        return clamp(style.shadow_strength, 0.5, 5)
