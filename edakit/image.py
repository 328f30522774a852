"""Reading 8-bit BMP images into binary (thresholded) images."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_IMAGE = "images/image_1.bmp"
DEFAULT_THRESHOLD = 120
_HEADER_SIZE = 54


@dataclass
class Point2D:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0


class Image:
    """A row-major image whose pixels are 0 or 1 once thresholded."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        data: bytes | bytearray | None = None,
        threshold_value: int = DEFAULT_THRESHOLD,
    ) -> None:
        self.width = width
        self.height = height
        self.threshold_value = threshold_value
        self.data: bytearray | None = None if data is None else bytearray(data)
        if self.data is not None:
            self.threshold()

    def threshold(self) -> None:
        """Map every pixel below the threshold to 0 and every other to 1."""
        if self.data is not None:
            limit = self.threshold_value
            self.data[:] = bytes(0 if p < limit else 1 for p in self.data)

    def value(self, row: int, col: int) -> int:
        """Pixel at (row, col). Raises IndexError outside the image."""
        if self.data is None or not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"pixel ({row}, {col}) outside the image")
        return self.data[row * self.width + col]

    def render(self) -> str:
        """Size banner followed by the pixels as blanks and stars."""
        lines = [
            "----------------------",
            f"size [ (w: {self.width}) x   ( h:{self.height})]",
            "---------------------",
        ]
        lines.extend(
            "".join(" " if self.value(i, j) == 0 else "*" for j in range(self.width))
            for i in range(self.height)
        )
        return "\n".join(lines) + "\n"


def read_bmp(path: str | Path) -> Image:
    """Read an uncompressed 8-bit BMP without row padding, top row first.

    Raises ValueError when the file is not such a BMP, OSError when it
    cannot be read.
    """
    raw = Path(path).read_bytes()
    if len(raw) < _HEADER_SIZE:
        raise ValueError("file too short for a BMP header")
    if raw[:2] != b"BM":
        raise ValueError("not a BMP file")
    width, height = struct.unpack_from("<ii", raw, 18)
    (bits,) = struct.unpack_from("<h", raw, 28)
    (image_size,) = struct.unpack_from("<i", raw, 34)
    (num_colors,) = struct.unpack_from("<i", raw, 46)
    if bits != 8:
        raise ValueError(f"expected 8 bits per pixel, found {bits}")
    if num_colors < 0:
        raise ValueError("negative colour table size")
    if image_size != width * height:
        raise ValueError("image size does not match width times height")
    start = _HEADER_SIZE + num_colors * 4
    pixels = raw[start : start + image_size]
    if len(pixels) != image_size:
        raise ValueError("pixel data is truncated")
    rows = [pixels[width * i : width * (i + 1)] for i in range(height)]
    ordered = b"".join(reversed(rows))
    return Image(width, height, ordered)


def main(argv: list[str] | None = None) -> int:
    """Read a BMP and print it as text."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_IMAGE
    print(path)
    try:
        image = read_bmp(path)
    except (OSError, ValueError) as error:
        print(f"cannot read {path}: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(image.render())
    return 0