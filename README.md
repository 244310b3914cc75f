# pushbox

A small box-pushing puzzle. Walk the player around a walled room and push
every box onto a goal square. Boxes can only be pushed, one at a time, and
never pulled.

## Installing

```
pip install .
```

## Playing in the terminal

```
pushbox
pushbox my_stage.txt
```

Without an argument the built-in 8×5 stage is played. With a file name, the
stage is read from that file and the board size is measured from its text.
If the file cannot be read, the command prints an error and exits with
status 1.

The board is drawn as text:

| Symbol | Meaning             |
|--------|---------------------|
| `#`    | wall                |
| ` `    | floor               |
| `.`    | goal                |
| `o`    | box                 |
| `O`    | box on a goal       |
| `p`    | player              |
| `P`    | player on a goal    |

Commands are read from standard input. Every character that is not
whitespace is one command, so `ss` followed by Enter moves right twice:

- `a`: left
- `s`: right
- `w`: up
- `z`: down

Any other character leaves the board unchanged. The board is redrawn after
each command. Once no box is off a goal, the game prints
`Congratulation's you win!` and exits with status 0; if input ends first,
it exits with status 1.

## Using the library

`pushbox.console.Board` holds the text game:

```python
from pushbox.console import Board

board = Board.parse("#####\n#p o.#\n#####", 6, 3)
board.move("s")
print(board.render())
print(board.is_cleared())
```

`Board.parse(text, width=None, height=None)` measures the size from the text
when it is not given, and raises `ValueError` if a square falls outside the
given size. Squares are `pushbox.console.Cell` members.

### Graphical stages

`pushbox.stage.Stage.parse` reads a stage (as `str` or `bytes`) into
`Tile` squares plus a separate grid of goal flags; only lines ended by a
newline are counted. `Stage.update(keys)` advances one frame given the set
of keys held down: a move starts whenever `w`, `a`, `s` or `z` changes
state, and while a move is animating no new move starts for 32 frames.
`Stage.move_direction()` gives the `(dx, dy)` of that animation and
`Stage.has_cleared()` reports whether every block stands on a goal.

`Stage.draw(screen, image)` paints 32×32 tiles from a sprite sheet into a
`pushbox.video.FrameBuffer`. The sprite sheet is a `pushbox.image.Image`,
decoded by `Image.from_bytes` from an uncompressed 32-bit DDS file
(height at byte 12, width at byte 16, pixels from byte 128). Sprites are
laid out left to right: player, wall, block, goal, floor.
`FrameBuffer.blit` skips pixels whose alpha is below 128 and clips what
falls off the screen.

`pushbox.stage.Game(stage_path, image_path)` ties these together; by default
it reads `stageData.txt` and `nimotsuKunImage2.dds` from the current
directory. Each call to `Game.frame(screen, keys, end_requested)` loads the
stage on first use (printing `stage file could not be read.` if the stage
file is missing), otherwise updates and draws it; after a win it prints
`Congratulation! you win.` and reloads the stage on the next frame.

### Helpers

`pushbox.grid` has `Grid`, a fixed-size two-dimensional array indexed by
`(x, y)` that raises `IndexError` outside its bounds, and `Flags`, an
eight-bit flag set with `check`, `set` and `reset`.

## What it does not do

The graphical stage only draws into an in-memory `FrameBuffer`. The package
opens no window and reads no keyboard: a program using `Game` or `Stage`
must supply the held keys each frame and show the frame buffer itself. The
only command is the text game, `pushbox`.

## Running the tests

```
pip install ".[test]"
pytest
```