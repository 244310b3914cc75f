"""An in-memory screen that images are copied onto."""

from __future__ import annotations

from typing import Tuple

from .image import Image

OPAQUE_ALPHA = 128


class FrameBuffer:
    """A width x height screen of ARGB pixels stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"screen size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel {pos!r} outside {self.width}x{self.height} screen")
        return self.pixels[y * self.width + x]

    def blit(
        self,
        image: Image,
        dst_x: int,
        dst_y: int,
        src_x: int,
        src_y: int,
        width: int,
        height: int,
    ) -> None:
        """Copy a rectangle of ``image``; pixels with alpha below 128 are skipped.

        Parts of the rectangle that fall off the screen are clipped.
        """
        for y in range(height):
            ty = dst_y + y
            if not 0 <= ty < self.height:
                continue
            row = ty * self.width
            for x in range(width):
                tx = dst_x + x
                if not 0 <= tx < self.width:
                    continue
                pixel = image.pixel(src_x + x, src_y + y)
                if pixel >> 24 >= OPAQUE_ALPHA:
                    self.pixels[row + tx] = pixel