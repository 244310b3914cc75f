"""Graphical box-pushing stage with smooth player movement."""

from __future__ import annotations

from enum import Enum, IntEnum
from itertools import product
from pathlib import Path
from typing import Collection, Optional, Tuple, Union

from .grid import Grid
from .image import Image
from .video import FrameBuffer

TILE_SIZE = 32

STAGE_FILE = "stageData.txt"
IMAGE_FILE = "nimotsuKunImage2.dds"

UNREADABLE_MESSAGE = "stage file could not be read."
WIN_MESSAGE = "Congratulation! you win."


class Tile(Enum):
    SPACE = "space"
    WALL = "wall"
    BLOCK = "block"
    MAN = "man"


class _Sprite(IntEnum):
    """Position of each sprite, in tiles, along the sprite sheet."""

    PLAYER = 0
    WALL = 1
    BLOCK = 2
    GOAL = 3
    SPACE = 4


_LEFT, _RIGHT, _UP, _DOWN = 1, 2, 4, 8

_GLYPHS = {
    "#": (Tile.WALL, False),
    " ": (Tile.SPACE, False),
    "o": (Tile.BLOCK, False),
    "O": (Tile.BLOCK, True),
    ".": (Tile.SPACE, True),
    "p": (Tile.MAN, False),
    "P": (Tile.MAN, True),
}

# Checked in this order; a later key overrides an earlier one on the same axis.
_KEYS = (("s", 1, 0), ("a", -1, 0), ("w", 0, -1), ("z", 0, 1))


def _measure(text: str) -> Tuple[int, int]:
    width = height = x = 0
    for ch in text:
        if ch in _GLYPHS:
            x += 1
        elif ch == "\n":
            height += 1
            width = max(width, x)
            x = 0
    return width, height


class Stage:
    """The state of one stage: tiles, goals and the player's animation."""

    def __init__(self, tiles: Grid, goals: Grid) -> None:
        self.tiles = tiles
        self.goals = goals
        self.width = tiles.width
        self.height = tiles.height
        self.move_dir = 0
        self.move_count = 0
        self._previous = {key: False for key, _, _ in _KEYS}

    @classmethod
    def parse(cls, data: Union[str, bytes]) -> "Stage":
        """Build a stage from stage text.

        Only lines ended by a newline count; squares on an unterminated
        last line are left out.
        """
        text = data.decode("latin-1") if isinstance(data, (bytes, bytearray)) else data
        width, height = _measure(text)
        tiles = Grid(width, height, Tile.WALL)
        goals = Grid(width, height, False)
        x = y = 0
        for ch in text:
            if ch == "\n":
                x = 0
                y += 1
                continue
            entry = _GLYPHS.get(ch)
            if entry is None:
                continue
            if y < height:
                tiles[x, y], goals[x, y] = entry
            x += 1
        return cls(tiles, goals)

    def _find_man(self) -> Optional[Tuple[int, int]]:
        return next(
            (
                (x, y)
                for y, x in product(range(self.height), range(self.width))
                if self.tiles[x, y] is Tile.MAN
            ),
            None,
        )

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _start_move(self, dx: int, dy: int) -> None:
        if dx:
            self.move_dir = _LEFT if dx < 0 else _RIGHT
        if dy:
            self.move_dir = _UP if dy < 0 else _DOWN

    def update(self, keys: Collection[str]) -> None:
        """Advance one frame; ``keys`` holds the keys currently held down.

        A move starts whenever w, a, s or z changes state, on press as well
        as on release, and no new move starts while one is animating.
        """
        if self.move_dir:
            if self.move_count == TILE_SIZE:
                self.move_count = 0
                self.move_dir = 0
            else:
                self.move_count += 1
                return

        dx = dy = 0
        for key, kx, ky in _KEYS:
            pressed = key in keys
            if pressed != self._previous[key]:
                self._previous[key] = pressed
                if kx:
                    dx = kx
                if ky:
                    dy = ky

        man = self._find_man()
        if man is None:
            return
        x, y = man
        tx, ty = x + dx, y + dy
        if not self._inside(tx, ty):
            return
        target = self.tiles[tx, ty]
        if target is Tile.SPACE:
            self.tiles[tx, ty] = Tile.MAN
            self.tiles[x, y] = Tile.SPACE
            self._start_move(dx, dy)
        elif target is Tile.BLOCK:
            bx, by = tx + dx, ty + dy
            if not self._inside(bx, by):
                return
            if self.tiles[bx, by] is Tile.SPACE:
                self.tiles[bx, by] = Tile.BLOCK
                self.tiles[tx, ty] = Tile.MAN
                self.tiles[x, y] = Tile.SPACE
                self._start_move(dx, dy)

    def move_direction(self) -> Tuple[int, int]:
        """The ``(dx, dy)`` of the move being animated, or ``(0, 0)``."""
        dx = dy = 0
        horizontal = self.move_dir & (_LEFT | _RIGHT)
        vertical = self.move_dir & (_UP | _DOWN)
        if horizontal:
            dx = -1 if horizontal == _LEFT else 1
        if vertical:
            dy = -1 if vertical == _UP else 1
        return dx, dy

    def has_cleared(self) -> bool:
        """True when every block stands on a goal."""
        return all(goal for tile, goal in zip(self.tiles, self.goals) if tile is Tile.BLOCK)

    @staticmethod
    def _sprite(screen: FrameBuffer, image: Image, x: int, y: int, sprite: _Sprite) -> None:
        screen.blit(image, x, y, sprite * TILE_SIZE, 0, TILE_SIZE, TILE_SIZE)

    def draw(self, screen: FrameBuffer, image: Image) -> None:
        """Draw the stage onto ``screen`` using the sprite sheet ``image``."""
        for y, x in product(range(self.height), range(self.width)):
            px, py = x * TILE_SIZE, y * TILE_SIZE
            tile = self.tiles[x, y]
            if tile is Tile.WALL:
                self._sprite(screen, image, px, py, _Sprite.WALL)
                continue
            background = _Sprite.GOAL if self.goals[x, y] else _Sprite.SPACE
            self._sprite(screen, image, px, py, background)
            if tile is Tile.BLOCK:
                self._sprite(screen, image, px, py, _Sprite.BLOCK)
            elif tile is Tile.MAN:
                dx, dy = self.move_direction()
                self._sprite(
                    screen,
                    image,
                    (x - dx) * TILE_SIZE + dx * self.move_count,
                    (y - dy) * TILE_SIZE + dy * self.move_count,
                    _Sprite.PLAYER,
                )


class Game:
    """Runs stages frame by frame, reloading the stage after each win."""

    def __init__(self, stage_path=STAGE_FILE, image_path=IMAGE_FILE) -> None:
        self.stage_path = Path(stage_path)
        self.image_path = Path(image_path)
        self.stage: Optional[Stage] = None
        self.image: Optional[Image] = None

    def frame(self, screen: FrameBuffer, keys: Collection[str], end_requested: bool = False) -> None:
        """Run one frame: load the stage if needed, otherwise update and draw it."""
        if self.stage is None:
            try:
                data = self.stage_path.read_bytes()
            except OSError:
                print(UNREADABLE_MESSAGE)
                return
            stage = Stage.parse(data)
            self.image = Image.from_bytes(self.image_path.read_bytes())
            self.stage = stage
            stage.draw(screen, self.image)
            return

        cleared = self.stage.has_cleared()
        self.stage.update(keys)
        self.stage.draw(screen, self.image)

        if end_requested:
            self.stage = None
            return
        if cleared:
            print(WIN_MESSAGE)
            self.stage = None