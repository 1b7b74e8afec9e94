"""Pydantic model for user-supplied style overrides.

WHY: Overrides come from outside the compiler (CLI flags, a JSON file,
an upstream API request). They must be type-checked and range-checked
once, at the boundary, so that the style resolver can merge them into a
template without any further validation.

HOW: StyleOverrides is a BaseModel where every field is optional; a
field left unset keeps the template's value. Numeric ranges mirror the
limits the caption request API accepts. Field names are snake_case, and
camelCase aliases (``fontSize``, ``shadowStrength``) are accepted so the
same JSON an API client sends can be passed straight in.

RULES:
- Unknown keys are rejected (extra="forbid")
- Colors are NOT validated here; an invalid color reaches the generator,
  which substitutes its fallback and logs a warning
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from caption_timeline.core.ir import AnimationMode, TextAlign, TextTransform, WordMode


class StyleOverrides(BaseModel):
    """Per-field overrides applied on top of a style template."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    font_family: Optional[str] = Field(default=None, description="Font family name")
    font_size: Optional[int] = Field(default=None, ge=10, le=72, description="Font size in points")
    color: Optional[str] = Field(default=None, description="Primary/highlight color (#RRGGBB or rgb()/rgba())")
    colors: Optional[List[str]] = Field(default=None, description="Ordered palette for color-cycling styles")
    shadow_strength: Optional[float] = Field(default=None, ge=0, le=5, description="Glow/shadow strength")
    outline_width: Optional[float] = Field(default=None, ge=0, le=8, description="Text outline width")
    outline_color: Optional[str] = Field(default=None, description="Text outline color")
    outline_blur: Optional[float] = Field(default=None, ge=0, le=10, description="Text outline blur radius")
    effect_outline_width: Optional[float] = Field(
        default=None, ge=1, le=5, description="Outline width of the highlighted chunk (wavy colors)"
    )
    vertical_position: Optional[float] = Field(
        default=None, ge=0, le=100, description="Vertical position in percent from the bottom"
    )
    animation: Optional[AnimationMode] = Field(default=None, description="Motion mode: none or shake")
    word_mode: Optional[WordMode] = Field(default=None, description="Word re-slicing mode")
    words_per_group: Optional[int] = Field(default=None, ge=1, le=10, description="Words per group")
    text_align: Optional[TextAlign] = Field(default=None, description="Horizontal text alignment")
    text_transform: Optional[TextTransform] = Field(default=None, description="Case transform")

    def changes(self) -> Dict[str, Any]:
        """Return only the fields that were explicitly set, by field name."""
        return self.model_dump(exclude_none=True)
