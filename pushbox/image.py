"""Uncompressed 32-bit DDS images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Tuple

HEADER_SIZE = 128
HEIGHT_OFFSET = 12
WIDTH_OFFSET = 16


def read_u32(data: bytes, offset: int) -> int:
    """Read a little-endian unsigned 32-bit integer at ``offset``."""
    if offset < 0 or offset + 4 > len(data):
        raise ValueError(f"no 4-byte value at offset {offset} in {len(data)} bytes")
    return int.from_bytes(data[offset:offset + 4], "little")


@dataclass(frozen=True)
class Image:
    """A width x height image of ARGB pixels stored row by row."""

    width: int
    height: int
    pixels: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"{len(self.pixels)} pixels do not fill a {self.width}x{self.height} image"
            )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Image":
        """Decode the contents of a DDS file holding 32-bit pixels."""
        height = read_u32(data, HEIGHT_OFFSET)
        width = read_u32(data, WIDTH_OFFSET)
        count = width * height
        if len(data) < HEADER_SIZE + 4 * count:
            raise ValueError(f"pixel data for a {width}x{height} image is truncated")
        pixels = struct.unpack_from(f"<{count}I", data, HEADER_SIZE)
        return cls(width, height, tuple(pixels))

    def pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]