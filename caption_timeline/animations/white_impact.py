"""WhiteImpact — ImpactFull with an optional glow.

Identical to ImpactFull except that shadow strength is clamped to [0, 5]
and a strength of 0 drops the glow event entirely. The template pairs it
with ``single`` word mode, so in practice each event is one word.
"""

from __future__ import annotations

from caption_timeline.animations.impact_full import ImpactFullAnimation
from caption_timeline.core.codec import clamp
from caption_timeline.core.ir import AnimationStyle


class WhiteImpactAnimation(ImpactFullAnimation):
    style = AnimationStyle.WHITE_IMPACT
    label = "WhiteImpact"

    def shadow_strength(self, style):
        strength = clamp(style.shadow_strength, 0, 5)
        return strength if strength > 0 else None
