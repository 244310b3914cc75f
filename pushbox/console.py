"""Text-mode box-pushing game played with single-letter commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from itertools import product
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from .grid import Grid

DEFAULT_STAGE = "########\n# .. p #\n#oo    #\n#      #\n########"
DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 5

PROMPT = "A: Left, S: RIght, W: Up, Z:Down. Command?"
WIN_MESSAGE = "Congratulation's you win!"

DIRECTIONS = {"a": (-1, 0), "s": (1, 0), "w": (0, -1), "z": (0, 1)}


class Cell(Enum):
    """One square of the board; the value is the glyph used in stage text."""

    SPACE = " "
    WALL = "#"
    GOAL = "."
    BLOCK = "o"
    BLOCK_ON_GOAL = "O"
    MAN = "p"
    MAN_ON_GOAL = "P"


def _glyph_cell(ch: str) -> Optional[Cell]:
    try:
        return Cell(ch)
    except ValueError:
        return None


def _measure(text: str) -> Tuple[int, int]:
    width = height = 0
    for row, line in enumerate(text.split("\n")):
        count = sum(1 for ch in line if _glyph_cell(ch) is not None)
        if count:
            width = max(width, count)
            height = row + 1
    return width, height


@dataclass
class Board:
    """The board of the text game."""

    cells: Grid

    @property
    def width(self) -> int:
        return self.cells.width

    @property
    def height(self) -> int:
        return self.cells.height

    @classmethod
    def parse(cls, text: str, width: Optional[int] = None, height: Optional[int] = None) -> "Board":
        """Build a board from stage text; the size is measured when not given."""
        if width is None or height is None:
            measured_width, measured_height = _measure(text)
            width = measured_width if width is None else width
            height = measured_height if height is None else height
        cells = Grid(width, height, Cell.SPACE)
        x = y = 0
        for ch in text:
            if ch == "\n":
                x = 0
                y += 1
                continue
            cell = _glyph_cell(ch)
            if cell is None:
                continue
            if x >= width or y >= height:
                raise ValueError(
                    f"stage square at ({x}, {y}) lies outside the {width}x{height} board"
                )
            cells[x, y] = cell
            x += 1
        return cls(cells)

    def render(self) -> str:
        """Return the board as text, one line per row."""
        return "".join(
            "".join(self.cells[x, y].value for x in range(self.width)) + "\n"
            for y in range(self.height)
        )

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _find_man(self) -> Optional[Tuple[int, int]]:
        return next(
            (
                (x, y)
                for y, x in product(range(self.height), range(self.width))
                if self.cells[x, y] in (Cell.MAN, Cell.MAN_ON_GOAL)
            ),
            None,
        )

    def _leave(self, x: int, y: int) -> None:
        self.cells[x, y] = Cell.GOAL if self.cells[x, y] is Cell.MAN_ON_GOAL else Cell.SPACE

    def move(self, command: str) -> None:
        """Apply one command: a left, s right, w up, z down; others do nothing."""
        dx, dy = DIRECTIONS.get(command, (0, 0))
        man = self._find_man()
        if man is None:
            return
        x, y = man
        tx, ty = x + dx, y + dy
        if not self._inside(tx, ty):
            return
        target = self.cells[tx, ty]
        if target in (Cell.SPACE, Cell.GOAL):
            self.cells[tx, ty] = Cell.MAN_ON_GOAL if target is Cell.GOAL else Cell.MAN
            self._leave(x, y)
        elif target in (Cell.BLOCK, Cell.BLOCK_ON_GOAL):
            bx, by = tx + dx, ty + dy
            if not self._inside(bx, by):
                return
            beyond = self.cells[bx, by]
            if beyond in (Cell.SPACE, Cell.GOAL):
                self.cells[bx, by] = Cell.BLOCK_ON_GOAL if beyond is Cell.GOAL else Cell.BLOCK
                self.cells[tx, ty] = (
                    Cell.MAN_ON_GOAL if target is Cell.BLOCK_ON_GOAL else Cell.MAN
                )
                self._leave(x, y)

    def is_cleared(self) -> bool:
        """True when no block is left off a goal."""
        return all(cell is not Cell.BLOCK for cell in self.cells)


def _commands(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from (ch for ch in line if not ch.isspace())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="pushbox", description="Push every block onto a goal."
    )
    parser.add_argument(
        "stage", nargs="?", help="stage file; the built-in stage is used when omitted"
    )
    args = parser.parse_args(argv)

    if args.stage:
        try:
            text = Path(args.stage).read_text(encoding="latin-1")
        except OSError as exc:
            print(f"stage file could not be read: {exc}", file=sys.stderr)
            return 1
        board = Board.parse(text)
    else:
        board = Board.parse(DEFAULT_STAGE, DEFAULT_WIDTH, DEFAULT_HEIGHT)

    commands = _commands(sys.stdin)
    while True:
        print(board.render(), end="")
        if board.is_cleared():
            break
        print(PROMPT)
        command = next(commands, None)
        if command is None:
            return 1
        board.move(command)
    print(WIN_MESSAGE)
    return 0