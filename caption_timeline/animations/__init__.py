"""Animation generator registry — one generator per AnimationStyle.

WHY: The assembler must dispatch each segment to the right generator
without open-ended string matching. A dict keyed by the AnimationStyle
enum, checked for completeness on import, means a new variant without a
generator fails loudly at import time rather than silently rendering
nothing.

HOW: ANIMATIONS maps AnimationStyle members to generator *instances*
(generators are stateless). get_animation() is the single lookup.

RULES:
- Every AnimationStyle member has exactly one entry
- Values are BaseAnimation instances whose ``style`` matches their key
- Every generator listed here must be importable without side effects
"""

from __future__ import annotations

from typing import Dict, Union

from caption_timeline.animations.base import AnimationResult, BaseAnimation
from caption_timeline.animations.girlboss import GirlbossAnimation
from caption_timeline.animations.hormozi import HormoziAnimation
from caption_timeline.animations.impact_full import ImpactFullAnimation
from caption_timeline.animations.reveal_enlarge import RevealEnlargeAnimation
from caption_timeline.animations.shrinking_pairs import ShrinkingPairsAnimation
from caption_timeline.animations.thin_to_bold import ThinToBoldAnimation
from caption_timeline.animations.tiktok import TikTokAnimation
from caption_timeline.animations.wavy_colors import WavyColorsAnimation
from caption_timeline.animations.white_impact import WhiteImpactAnimation
from caption_timeline.core.ir import AnimationStyle

ANIMATIONS: Dict[AnimationStyle, BaseAnimation] = {
    AnimationStyle.GIRLBOSS: GirlbossAnimation(),
    AnimationStyle.HORMOZI: HormoziAnimation(),
    AnimationStyle.TIKTOK: TikTokAnimation(),
    AnimationStyle.THIN_TO_BOLD: ThinToBoldAnimation(),
    AnimationStyle.WAVY_COLORS: WavyColorsAnimation(),
    AnimationStyle.SHRINKING_PAIRS: ShrinkingPairsAnimation(),
    AnimationStyle.REVEAL_ENLARGE: RevealEnlargeAnimation(),
    AnimationStyle.WHITE_IMPACT: WhiteImpactAnimation(),
    AnimationStyle.IMPACT_FULL: ImpactFullAnimation(),
}

_missing = set(AnimationStyle) - set(ANIMATIONS)
if _missing:
    raise RuntimeError(
        "No generator registered for: {}".format(", ".join(sorted(s.value for s in _missing)))
    )


def get_animation(style: Union[AnimationStyle, str]) -> BaseAnimation:
    """Return the generator for *style* (enum member or its string value)."""
    return ANIMATIONS[AnimationStyle(style)]


__all__ = ["ANIMATIONS", "AnimationResult", "BaseAnimation", "get_animation"]
