"""Style templates and the style resolver.

WHY: Each animated caption look is a bundle of font, colors, glow
strength, motion and word-slicing choices that were tuned together.
Callers select a look by name and optionally tweak a few fields; the
generators then need every field filled in.

HOW: Each template is a plain dict with a display name, a description
and a ``style`` dict whose keys are StyleConfig field names. The
resolver deep-copies the template, merges validated overrides on top
(overrides always win) and builds a frozen StyleConfig.

RULES:
- Templates are frozen constants — never mutate them at runtime
- Template keys are the AnimationStyle values; every variant has one
- Unknown names raise UnknownStyleError listing the available styles
- Lookup is case-insensitive and ignores surrounding whitespace
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional, Union

from caption_timeline.core.ir import (
    AnimationMode,
    AnimationStyle,
    StyleConfig,
    UnknownStyleError,
    WordMode,
)
from caption_timeline.models import StyleOverrides

STYLE_TEMPLATES: Dict[str, Dict] = {
    "girlboss": {
        "name": "Girlboss",
        "description": "Bold, energetic style with shake animation and pink progressive highlight",
        "style": {
            "font_family": "Luckiest Guy",
            "font_size": 32,
            "color": "#FF1493",
            "shadow_strength": 1.0,
            "animation": AnimationMode.SHAKE,
            "vertical_position": 18,
            "outline_width": 4,
            "word_mode": WordMode.MULTIPLE,
            "words_per_group": 2,
        },
    },
    "hormozi": {
        "name": "Hormozi",
        "description": "High-energy multi-color style, one highlighted word at a time",
        "style": {
            "font_family": "Luckiest Guy",
            "font_size": 50,
            "colors": ("#00FF00", "#FF0000", "#0080FF", "#FFFF00"),
            "shadow_strength": 1.5,
            "animation": AnimationMode.SHAKE,
            "vertical_position": 15,
            "outline_width": 2,
            "word_mode": WordMode.MULTIPLE,
            "words_per_group": 4,
        },
    },
    "tiktokstyle": {
        "name": "TikTok Style",
        "description": "Bold, energetic style with shake animation and a yellow highlighted word",
        "style": {
            "font_family": "Luckiest Guy",
            "font_size": 32,
            "color": "#FFFF00",
            "shadow_strength": 1.0,
            "animation": AnimationMode.SHAKE,
            "vertical_position": 18,
            "outline_width": 4,
            "word_mode": WordMode.MULTIPLE,
            "words_per_group": 2,
        },
    },
    "thintobold": {
        "name": "Thin to Bold",
        "description": "Stacked word groups switching from thin to bold weight",
        "style": {
            "font_family": "Montserrat Thin",
            "font_size": 50,
            "color": "#FFFFFF",
            "shadow_strength": 1.8,
            "animation": AnimationMode.NONE,
            "vertical_position": 22,
            "outline_width": 1,
            "word_mode": WordMode.MULTIPLE,
            "words_per_group": 2,
        },
    },
    "wavycolors": {
        "name": "Wavy Colors",
        "description": "Rainbow-colored character chunks with a vertical stretch wave",
        "style": {
            "font_family": "Luckiest Guy",
            "font_size": 50,
            "effect_outline_width": 3,
            "vertical_position": 12,
            "outline_width": 3,
            "word_mode": WordMode.MULTIPLE,
            "words_per_group": 1,
        },
    },
    "shrinkingpairs": {
        "name": "Shrinking Pairs",
        "description": "Word groups that pop in enlarged, shrink, then stack in white",
        "style": {
            "font_family": "Luckiest Guy",
            "font_size": 36,
            "color": "#0BF431",
            "shadow_strength": 1.2,
            "animation": AnimationMode.SHAKE,
            "vertical_position": 20,
            "outline_width": 4,
            "word_mode": WordMode.MULTIPLE,
            "words_per_group": 4,
        },
    },
    "revealenlarge": {
        "name": "Reveal & Enlarge",
        "description": "Color-cycling words that grow as they are spoken",
        "style": {
            "font_family": "Luckiest Guy",
            "font_size": 50,
            "colors": ("#FF0000", "#00FF00", "#0080FF", "#FFFF00", "#FF1493"),
            "shadow_strength": 1.5,
            "animation": AnimationMode.SHAKE,
            "vertical_position": 16,
            "outline_width": 3,
            "word_mode": WordMode.MULTIPLE,
            "words_per_group": 4,
        },
    },
    "whiteimpact": {
        "name": "White Impact",
        "description": "Clean white Impact text, one word at a time",
        "style": {
            "font_family": "Impact",
            "font_size": 48,
            "color": "#FFFFFF",
            "shadow_strength": 1.0,
            "animation": AnimationMode.NONE,
            "vertical_position": 20,
            "outline_width": 1,
            "word_mode": WordMode.SINGLE,
            "words_per_group": 1,
        },
    },
    "impactfull": {
        "name": "Impact Full",
        "description": "Impact font displaying each subtitle line exactly as provided",
        "style": {
            "font_family": "Impact",
            "font_size": 42,
            "color": "#FFFFFF",
            "shadow_strength": 1.0,
            "animation": AnimationMode.NONE,
            "vertical_position": 25,
            "outline_width": 1,
            "word_mode": WordMode.NORMAL,
            "words_per_group": 1,
        },
    },
}


def list_styles() -> List[Dict[str, str]]:
    """Return ``{"key", "name", "description"}`` for every template, in registry order."""
    return [
        {"key": key, "name": template["name"], "description": template["description"]}
        for key, template in STYLE_TEMPLATES.items()
    ]


def resolve_style(
    name: str,
    overrides: Optional[Union[StyleOverrides, Mapping[str, Any]]] = None,
) -> StyleConfig:
    """Resolve a style name plus overrides into a complete StyleConfig.

    WHY: Generators receive one fully populated configuration and never
    need to know which values came from the template and which from the
    user.

    HOW: Looks up the template, deep-copies its ``style`` dict, validates
    overrides through StyleOverrides (a plain mapping is validated here)
    and applies every explicitly set override on top.

    Args:
        name: Template name, e.g. ``"hormozi"``.
        overrides: StyleOverrides instance or a mapping of field names
                   (snake_case or camelCase) to values.

    Returns:
        A frozen StyleConfig for the named animation variant.

    Raises:
        UnknownStyleError: If no template is registered under *name*.
        pydantic.ValidationError: If a mapping of overrides is invalid.
    """
    key = name.strip().lower() if isinstance(name, str) else ""
    if key not in STYLE_TEMPLATES:
        available = ", ".join(sorted(STYLE_TEMPLATES))
        raise UnknownStyleError("Unknown style '{}'. Available: {}".format(name, available))

    fields = copy.deepcopy(STYLE_TEMPLATES[key]["style"])

    if overrides is not None:
        if not isinstance(overrides, StyleOverrides):
            overrides = StyleOverrides.model_validate(dict(overrides))
        fields.update(overrides.changes())

    if "colors" in fields:
        fields["colors"] = tuple(fields["colors"])

    return StyleConfig(animation_style=AnimationStyle(key), **fields)
