from __future__ import annotations

import os

from PIL import Image


def make_gradient_png(
    output_path: str = "output/gradient.png",
    width: int = 16,
    height: int = 8,
) -> str:
    """
    Write a grayscale PNG to try the painter with.

    Brightness ramps from black in the left column to white in the right
    column, so the load grows over time. Every row is identical.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")

    step = 255 / (width - 1) if width > 1 else 0
    scanline = [int(round(x * step)) for x in range(width)]
    pixels = scanline * height

    img = Image.new("L", (width, height))
    img.putdata(pixels)

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    img.save(output_path, format="PNG")
    return output_path


if __name__ == "__main__":
    path = make_gradient_png()
    print(f"Wrote {path}")
