"""Time and color conversions for the ASS output format.

WHY: ASS timestamps are ``H:MM:SS.cc`` with centisecond precision and
ASS colors are ``&HAABBGGRR&`` tokens with the channels reversed and the
alpha inverted (00 = opaque). Every generator needs both conversions, and
tests need to decode what was encoded.

HOW: Small pure functions. Timestamps truncate to the centisecond rather
than rounding. Colors accept ``#RRGGBB`` or ``rgb()/rgba()`` and raise
InvalidColorFormat for anything else, before producing any output.

RULES:
- format_timestamp truncates; a tiny epsilon absorbs float artefacts
  such as 0.29 * 100 == 28.999999999999996
- Negative or non-finite seconds are a caller error, not handled here
- Hex path always emits alpha 00; rgba alpha becomes 255 - round(a * 255)
- Output tokens are fixed width: ``&H`` + 8 uppercase hex digits + ``&``
- Rounding is half-up everywhere so .5 values match the reference presets
"""

from __future__ import annotations

import math
import re
from typing import Union

from caption_timeline.core.ir import InvalidColorFormat

_TIMESTAMP_RE = re.compile(r"^(\d+):(\d{2}):(\d{2})\.(\d{2})$")
_HEX_RE = re.compile(r"^[0-9A-Fa-f]{6}$")
_RGBA_RE = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*"
    r"(?:,\s*(\d*\.?\d+))?\s*\)$"
)
_ASS_TOKEN_RE = re.compile(r"^&H([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})&$")

Number = Union[int, float]


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 always rounding towards +inf."""
    return int(math.floor(value + 0.5))


def clamp(value: Number, low: Number, high: Number) -> Number:
    return max(low, min(high, value))


def format_number(value: Number) -> str:
    """Render a number the way override tags expect it.

    Values are rounded to 4 decimal places so float artefacts such as
    ``0.7 * 1.2 * 10`` print as ``8.4``. Integral values print without a
    decimal point (``3.0`` -> ``"3"``).
    """
    number = round(float(value), 4)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def alpha_hex(value: int) -> str:
    """Two-digit lowercase hex for ``\\3a`` / ``\\4a`` alpha values."""
    return "%02x" % int(value)


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


def format_timestamp(seconds: float) -> str:
    """Convert float seconds to an ASS ``H:MM:SS.cc`` timestamp.

    Args:
        seconds: Non-negative, finite time in seconds.

    Returns:
        Timestamp string with unpadded hours and truncated centiseconds,
        e.g. ``3725.678`` -> ``"1:02:05.67"``.
    """
    total_cs = int(math.floor(seconds * 100 + 1e-6))
    hours, remainder = divmod(total_cs, 360000)
    minutes, remainder = divmod(remainder, 6000)
    secs, centis = divmod(remainder, 100)
    return "%d:%02d:%02d.%02d" % (hours, minutes, secs, centis)


def parse_timestamp(value: str) -> float:
    """Inverse of format_timestamp. Raises ValueError on malformed input."""
    match = _TIMESTAMP_RE.match(value.strip())
    if not match:
        raise ValueError("Invalid ASS timestamp: {!r}".format(value))
    hours, minutes, secs, centis = (int(part) for part in match.groups())
    return hours * 3600 + minutes * 60 + secs + centis / 100.0


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------


def color_to_ass(color: str) -> str:
    """Convert ``#RRGGBB`` or ``rgb()/rgba()`` to an ``&HAABBGGRR&`` token.

    WHY: ASS stores colors blue-first and alpha as transparency, so a
    CSS-style color cannot be pasted into an override tag directly.

    HOW: The hex path reorders the channels and prefixes alpha 00. The
    rgb(a) path validates each channel (0-255) and alpha (0-1), then
    stores alpha inverted: 255 - round(a * 255).

    RULES:
    - Any other syntax raises InvalidColorFormat
    - Out-of-range channels or alpha raise InvalidColorFormat
    - Output hex digits are uppercase

    Args:
        color: The color string to convert.

    Returns:
        ASS color token, e.g. ``"#FF1493"`` -> ``"&H009314FF&"``.

    Raises:
        InvalidColorFormat: If the input matches neither syntax.
    """
    if not isinstance(color, str):
        raise InvalidColorFormat("Color must be a string, got {!r}".format(color))

    value = color.strip()
    if value.startswith("#"):
        hex_part = value[1:]
        if not _HEX_RE.match(hex_part):
            raise InvalidColorFormat("Invalid hex color: {!r}".format(color))
        red, green, blue = hex_part[0:2], hex_part[2:4], hex_part[4:6]
        return "&H00{}{}{}&".format(blue, green, red).upper()

    match = _RGBA_RE.match(value)
    if not match:
        raise InvalidColorFormat(
            "Unsupported color format: {!r} (expected #RRGGBB or rgb()/rgba())".format(color)
        )

    red, green, blue = (int(match.group(i)) for i in (1, 2, 3))
    if any(channel > 255 for channel in (red, green, blue)):
        raise InvalidColorFormat("Color channel out of range in {!r}".format(color))

    alpha = float(match.group(4)) if match.group(4) is not None else 1.0
    if not 0.0 <= alpha <= 1.0:
        raise InvalidColorFormat("Alpha out of range in {!r}".format(color))

    inverted = 255 - round_half_up(alpha * 255)
    return "&H{:02X}{:02X}{:02X}{:02X}&".format(inverted, blue, green, red)


def ass_to_color(token: str) -> str:
    """Decode an ASS color token back to ``#RRGGBB`` or ``rgba(...)``.

    Opaque tokens decode to hex, anything with transparency decodes to
    ``rgba(r, g, b, a)``. Six-digit tokens (no alpha byte) are accepted.
    """
    match = _ASS_TOKEN_RE.match(token.strip())
    if not match:
        raise InvalidColorFormat("Invalid ASS color token: {!r}".format(token))

    digits = match.group(1).upper()
    if len(digits) == 6:
        digits = "00" + digits
    inverted = int(digits[0:2], 16)
    blue, green, red = digits[2:4], digits[4:6], digits[6:8]

    if inverted == 0:
        return "#{}{}{}".format(red, green, blue)
    alpha = round((255 - inverted) / 255.0, 4)
    return "rgba({}, {}, {}, {})".format(
        int(red, 16), int(green, 16), int(blue, 16), format_number(alpha)
    )
