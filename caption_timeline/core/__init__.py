"""Core pipeline: IR dataclasses, codec, parser, segmenter, motion, assembler."""
