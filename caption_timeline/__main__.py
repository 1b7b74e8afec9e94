"""Package entry point for ``python -m caption_timeline``.

WHY: Users run the compiler as ``python -m caption_timeline captions.srt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package.

HOW: Delegates to the CLI's main() function.
"""

from caption_timeline.cli import main

if __name__ == "__main__":
    main()
