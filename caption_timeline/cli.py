"""Command-line interface for the caption timeline compiler.

WHY: Editors and render scripts need to turn an SRT file (or an ASR word
list) into an ASS file that ffmpeg's subtitle filter can burn in,
without writing Python. The CLI wires parsing, style resolution and
timeline assembly behind one command.

HOW: Uses argparse to accept an input path, a style name and per-field
style overrides (individual flags, or a JSON file of overrides). Flags
win over the JSON file. Overrides are validated by StyleOverrides; the
compiled document goes to --output or stdout, and status messages go to
stderr.

RULES:
- Positional argument: input path (.srt, .json word list, or - for stdin)
- A .json input must be a list of {"text", "start", "end"} objects,
  or an object with such a list under "words"
- --seed makes shake jitter reproducible
- --list-styles prints the available templates and exits
- Exit code 1 for unknown styles, invalid overrides or unreadable input
- Python 3.9 compatible — no match/case, no X | Y unions
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from caption_timeline import config
from caption_timeline.core.assembler import compile_timeline
from caption_timeline.core.ir import AnimationMode, Segment, UnknownStyleError, WordMode
from caption_timeline.core.parser import parse_srt, segments_from_words
from caption_timeline.models import StyleOverrides
from caption_timeline.styles import STYLE_TEMPLATES, list_styles, resolve_style


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed, so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8-sig")


def _load_segments(path: str) -> List[Segment]:
    """Read *path* and parse it as SRT or, for .json files, as ASR words."""
    content = _read_input(path)
    if path != "-" and Path(path).suffix.lower() == ".json":
        data = json.loads(content)
        words = data.get("words", []) if isinstance(data, dict) else data
        return segments_from_words(words)
    return parse_srt(content)


def _collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge the --overrides JSON file with individual flags (flags win).

    The file is validated on its own first so camelCase keys are normalised
    to field names before the snake_case flags are layered on top.
    """
    overrides: Dict[str, Any] = {}
    if args.overrides:
        loaded = json.loads(Path(args.overrides).read_text(encoding="utf-8"))
        if not isinstance(loaded, dict):
            raise ValueError("Overrides file must contain a JSON object")
        overrides.update(StyleOverrides.model_validate(loaded).changes())

    flags = {
        "word_mode": args.word_mode,
        "words_per_group": args.words_per_group,
        "color": args.color,
        "shadow_strength": args.shadow_strength,
        "animation": args.animation,
        "vertical_position": args.vertical_position,
        "font_size": args.font_size,
    }
    if args.colors:
        flags["colors"] = [c.strip() for c in args.colors.split(";") if c.strip()]
    overrides.update({key: value for key, value in flags.items() if value is not None})
    return overrides


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separated from main() so tests can inspect the parser directly.
    """
    parser = argparse.ArgumentParser(
        prog="caption_timeline",
        description="Compile SRT captions or ASR word lists into an animated "
                    "ASS subtitle timeline.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        help="SRT file, JSON word list (.json), or - to read SRT from stdin.",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write the ASS document here (default: stdout).",
    )
    parser.add_argument(
        "--style",
        default=config.DEFAULT_STYLE,
        help="Style template name (default: %(default)s). "
             "Available: {}.".format(", ".join(STYLE_TEMPLATES)),
    )
    parser.add_argument(
        "--word-mode",
        choices=[mode.value for mode in WordMode],
        default=None,
        help="Override the template's word mode.",
    )
    parser.add_argument("--words-per-group", type=int, default=None, help="Words per group in multiple mode.")
    parser.add_argument("--color", default=None, help="Primary/highlight color, e.g. '#FF1493'.")
    parser.add_argument(
        "--colors",
        default=None,
        help="Semicolon-separated palette for color-cycling styles, e.g. '#00FF00;#FF0000'.",
    )
    parser.add_argument("--shadow-strength", type=float, default=None, help="Glow strength, 0-5.")
    parser.add_argument(
        "--animation",
        choices=[mode.value for mode in AnimationMode],
        default=None,
        help="Override the template's motion mode.",
    )
    parser.add_argument("--vertical-position", type=float, default=None, help="Vertical position, 0-100.")
    parser.add_argument("--font-size", type=int, default=None, help="Font size, 10-72.")
    parser.add_argument(
        "--overrides",
        default=None,
        help="JSON file of style overrides (snake_case or camelCase keys).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible shake jitter.")
    parser.add_argument("--list-styles", action="store_true", help="List style templates and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m caption_timeline``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.list_styles:
        for entry in list_styles():
            print("{:<16} {:<18} {}".format(entry["key"], entry["name"], entry["description"]))
        return

    if not args.input_file:
        parser.error("input_file is required unless --list-styles is given")

    try:
        overrides = StyleOverrides.model_validate(_collect_overrides(args))
        style = resolve_style(args.style, overrides)
    except UnknownStyleError as exc:
        _status("Error: {}".format(exc))
        sys.exit(1)
    except (ValidationError, ValueError, OSError) as exc:
        _status("Error: invalid style overrides: {}".format(exc))
        sys.exit(1)

    try:
        segments = _load_segments(args.input_file)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        _status("Error: could not read {}: {}".format(args.input_file, exc))
        sys.exit(1)

    _status("Compiling {} segments with style '{}'".format(len(segments), style.animation_style.value))
    rng = random.Random(args.seed)
    document = compile_timeline(segments, style, rng=rng).to_ass()

    if args.output:
        Path(args.output).write_text(document, encoding="utf-8")
        _status("Saved: {}".format(args.output))
    else:
        sys.stdout.write(document)


if __name__ == "__main__":
    main()
