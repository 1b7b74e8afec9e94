"""Caption Timeline — animated subtitle timeline compiler.

WHY: Burned-in social-media captions need per-word color, glow, scale and
jitter effects that plain SRT cannot express. ffmpeg's subtitle filter can
render them, but only from an ASS document with inline override tags.
This package turns time-coded caption text into that document.

HOW: Four-stage pipeline — parse (SRT or ASR words into Segments),
re-slice (word segmenter), resolve (style template + overrides into a
StyleConfig), assemble (dispatch each segment to an animation generator
and concatenate a style header with every emitted event).

RULES:
- Every stage is a pure function of its inputs; the only randomness is the
  shake jitter, and its RNG is always injectable
- Adding an animation = one new module in animations/, one registry line
- The Timeline is the stable contract with the external renderer
"""

__version__ = "0.1.0"
