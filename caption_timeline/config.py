"""Configuration constants and .env loading.

WHY: Canvas size, the shake seed, margin bands and CLI defaults are shared
by the assembler, the generators and the CLI. Keeping them here as plain
module-level values means nobody has to hunt through generator code to
retune a preset.

HOW: python-dotenv loads the .env file on import. Values that an operator
may reasonably want to change per deployment read from environment
variables; geometry tied to the output format is fixed.

RULES:
- PLAY_RES_X / PLAY_RES_Y define the canvas every coordinate refers to
- SHAKE_INTENSITY is the full width of the jitter window (±intensity/2 px)
- Margin bands are alignment-relative MarginV values, not y coordinates
- All env-backed defaults can be overridden without code changes
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------

PLAY_RES_X = 1280
PLAY_RES_Y = 720

HEADER_MARGIN_L = 10
HEADER_MARGIN_R = 10

# ---------------------------------------------------------------------------
# Vertical-margin bands (header MarginV for a given verticalPosition %)
# ---------------------------------------------------------------------------

MARGIN_BAND_TOP = 612
"""verticalPosition >= 80 — caption near the top of the frame."""

MARGIN_BAND_CENTER = 360
"""45 <= verticalPosition <= 55 — caption centred."""

MARGIN_BAND_BOTTOM = 108
"""Everything else — caption near the bottom of the frame."""

# ---------------------------------------------------------------------------
# Motion
# ---------------------------------------------------------------------------

SEED_X = 670.0
SEED_Y = 0.0
"""Continuity seed used when no previous position exists."""

SHAKE_INTENSITY = float(os.getenv("CAPTION_SHAKE_INTENSITY", "5"))

LINE_SPACING = 35
"""Vertical distance in px between stacked ShrinkingPairs lines."""

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_STYLE = os.getenv("CAPTION_DEFAULT_STYLE", "girlboss")
LOG_LEVEL = os.getenv("CAPTION_LOG_LEVEL", "WARNING").upper()
