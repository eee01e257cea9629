from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from PIL import Image, ImageOps


class LumaImage:
    """Read-only grid of single-channel intensities (0..255), row-major."""

    def __init__(self, width: int, height: int, pixels: Sequence[int]):
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        if len(pixels) != width * height:
            raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
        for v in pixels:
            if not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError("intensities must be integers in 0..255")
        self._width = width
        self._height = height
        self._pixels = tuple(pixels)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height}")
        return self._pixels[y * self._width + x]

    def column(self, x: int) -> List[int]:
        return [self.pixel(x, y) for y in range(self._height)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "LumaImage":
        """Build from nested rows, e.g. [[0, 255], [128, 64]] (rows[y][x])."""
        if not rows or not rows[0]:
            raise ValueError("rows must be a non-empty 2-D list")
        w = len(rows[0])
        if any(len(r) != w for r in rows):
            raise ValueError("all rows must have the same length")
        return cls(w, len(rows), [v for r in rows for v in r])

    def __repr__(self):
        return f"LumaImage(width={self._width}, height={self._height})"

    def __eq__(self, other):
        if not isinstance(other, LumaImage):
            return NotImplemented
        return (self._width, self._height, self._pixels) == (other._width, other._height, other._pixels)


def read_image_luma(path: str | Path) -> LumaImage:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    try:
        with Image.open(p) as im:
            im = ImageOps.exif_transpose(im)
            im = im.convert("L")
            w, h = im.size
            pixels = list(im.getdata())
    except OSError as e:
        raise ValueError(f"Failed to open/read image: {p.name}") from e
    return LumaImage(w, h, pixels)
