"""
Command-line entry point.

Reads standard input until end of file, translates all of it and prints
the translation. Useful for translating large volumes of text at once:

    $ echo 'Hello World!' | pig-latin
    Ellohay Orldway!

Input and output are UTF-8 regardless of the locale, and line endings
pass through untouched.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, Optional, Sequence

from pig_latin import __version__
from pig_latin.text import translate

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def read_all(stream: BinaryIO) -> str:
    """
    Read `stream` until EOF and decode it as UTF-8.

    Raises:
        UnicodeDecodeError: if the input is not valid UTF-8
    """
    return stream.read().decode(ENCODING)


def write_line(stream: BinaryIO, text: str) -> None:
    """Write `text` and a newline to `stream` as UTF-8."""
    stream.write((text + "\n").encode(ENCODING))
    stream.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Translate standard input to standard output; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="pig-latin",
        description="Translate English text from standard input into Pig Latin.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    try:
        english = read_all(sys.stdin.buffer)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read standard input: %s", e)
        return 1

    write_line(sys.stdout.buffer, translate(english))
    return 0


if __name__ == "__main__":
    sys.exit(main())
