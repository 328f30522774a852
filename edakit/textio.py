"""Echo a text file to a stream."""

from __future__ import annotations

import sys
from typing import TextIO


def read_text_file(filename: str, out: TextIO | None = None) -> str:
    """Write the file's contents followed by a newline to out and return them.

    Raises OSError when the file cannot be opened.
    """
    stream = sys.stdout if out is None else out
    with open(filename, encoding="utf-8", newline="") as handle:
        text = handle.read()
    stream.write(text)
    stream.write("\n")
    return text