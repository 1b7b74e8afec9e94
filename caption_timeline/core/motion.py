"""Shake motion and static placement tags.

WHY: The shake animation makes captions drift slightly from one word to
the next. Each segment must start where the previous one stopped, so the
current anchor is explicit state that the assembler threads through its
fold. Tests need exact coordinates, so the jitter source is injected.

HOW: next_position() perturbs both axes by (U - 0.5) * intensity, U drawn
from the given random.Random. move_tag() renders a ``\\move`` from the
current to the next anchor, offset by the shake margin; pos_tag() renders
a static ``\\pos``.

RULES:
- Seed anchor is (670, 0) when no previous position exists
- Drift is unbounded over long tracks; positions are never clamped
- Shake margin = clamp(0, 720, round(720 * (100 - vp) / 100)), or 0 when
  vertical position is 0
- Coordinates in tags are rounded half-up to integers
"""

from __future__ import annotations

import random
from typing import Optional

from caption_timeline import config
from caption_timeline.core.codec import clamp, round_half_up
from caption_timeline.core.ir import Position

SEED_POSITION = Position(config.SEED_X, config.SEED_Y)


def next_position(
    current: Position,
    rng: random.Random,
    intensity: Optional[float] = None,
) -> Position:
    """Return a new anchor jittered from *current* by up to ±intensity/2 per axis."""
    if intensity is None:
        intensity = config.SHAKE_INTENSITY
    return Position(
        x=current.x + (rng.random() - 0.5) * intensity,
        y=current.y + (rng.random() - 0.5) * intensity,
    )


def shake_margin(vertical_position: float) -> int:
    if not vertical_position:
        return 0
    height = config.PLAY_RES_Y
    return int(clamp(round_half_up(height * (100 - vertical_position) / 100.0), 0, height))


def move_tag(current: Position, target: Position, margin_v: float = 0) -> str:
    return "\\move({},{},{},{})".format(
        round_half_up(current.x),
        round_half_up(current.y + margin_v),
        round_half_up(target.x),
        round_half_up(target.y + margin_v),
    )


def pos_tag(x: float, y: float) -> str:
    return "\\pos({},{})".format(round_half_up(x), round_half_up(y))
