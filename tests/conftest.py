"""Shared test fixtures for the caption_timeline test suite.

WHY: Parser, segmenter, generator and assembler tests all need the same
sample captions, and every test that touches shake mode needs a jitter
source that produces the same numbers on every run.

HOW: Pytest fixtures provide raw SRT text, pre-parsed segments, a
FixedRandom whose random() cycles through a fixed sequence, and a
factory for StyleConfig values with test-friendly defaults.

RULES:
- FixedRandom(0.9, 0.1) moves the anchor by (+2, -2) px per step at the
  default shake intensity of 5
- SHAKE_INTENSITY is pinned to 5 so a local .env cannot change results
"""

import random
from typing import List

import pytest

from caption_timeline import config
from caption_timeline.core.ir import AnimationMode, AnimationStyle, Segment, StyleConfig


SAMPLE_SRT = """1
00:00:00,000 --> 00:00:02,000
hello world

2
00:00:02,500 --> 00:00:04,000
this is a
two line caption

3
00:00:04,000 --> 00:00:05,000
goodbye
"""


class FixedRandom(random.Random):
    """random.Random whose random() cycles through a fixed sequence."""

    def __init__(self, *values: float) -> None:
        super().__init__(0)
        self._values = list(values) or [0.5]
        self._index = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


@pytest.fixture(autouse=True)
def pinned_shake_intensity(monkeypatch):
    monkeypatch.setattr(config, "SHAKE_INTENSITY", 5.0)


@pytest.fixture
def sample_srt() -> str:
    return SAMPLE_SRT


@pytest.fixture
def sample_segments() -> List[Segment]:
    return [
        Segment(text="hello world", start=0.0, end=2.0),
        Segment(text="this is a two line caption", start=2.5, end=4.0),
        Segment(text="goodbye", start=4.0, end=5.0),
    ]


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom(0.9, 0.1)


@pytest.fixture
def make_style():
    """Factory for StyleConfig with no motion and white text by default."""

    def _make(animation_style=AnimationStyle.HORMOZI, **fields) -> StyleConfig:
        fields.setdefault("animation", AnimationMode.NONE)
        return StyleConfig(animation_style=animation_style, **fields)

    return _make
