"""Fixed-size two-dimensional storage and a small bit-flag set."""

from __future__ import annotations

from typing import Generic, Iterator, Tuple, TypeVar

T = TypeVar("T")

Position = Tuple[int, int]

_FLAG_BITS = 8


class Grid(Generic[T]):
    """A ``width`` x ``height`` grid addressed by ``(x, y)`` pairs."""

    def __init__(self, width: int, height: int, fill: T) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._cells = [fill] * (width * height)

    def _index(self, pos: Position) -> int:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"position {pos!r} lies outside the {self.width}x{self.height} grid"
            )
        return y * self.width + x

    def __getitem__(self, pos: Position) -> T:
        return self._cells[self._index(pos)]

    def __setitem__(self, pos: Position, value: T) -> None:
        self._cells[self._index(pos)] = value

    def __iter__(self) -> Iterator[T]:
        """Yield the values row by row."""
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)


class Flags:
    """Eight independent on/off flags packed into one byte."""

    def __init__(self, bits: int = 0) -> None:
        self._bits = bits & 0xFF

    @staticmethod
    def _mask(flag: int) -> int:
        if not 0 <= flag < _FLAG_BITS:
            raise ValueError(f"flag must be in 0..{_FLAG_BITS - 1}, got {flag}")
        return 1 << flag

    def check(self, flag: int) -> bool:
        return bool(self._bits & self._mask(flag))

    def set(self, flag: int) -> None:
        self._bits |= self._mask(flag)

    def reset(self, flag: int) -> None:
        self._bits &= ~self._mask(flag) & 0xFF

    def __int__(self) -> int:
        return self._bits

    def __repr__(self) -> str:
        return f"Flags(0b{self._bits:08b})"