# cubecast

A small first-person maze game drawn by raycasting. You walk a grid map
described in a `.cub` file, pick up a key, and use it to open doors.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
cubecast path/to/level.cub
```

The command takes exactly one argument, the path of a map file whose name
ends in `.cub`; any other number of arguments prints an error and exits with
status 1. Problems with the file are written to standard error as `Error`
followed by a description, and the command exits with status 1. Closing the
window or pressing Esc ends the game with status 0.

## Map files

A map file holds configuration lines followed by the map itself:

```
NO textures/north.xpm
SO textures/south.xpm
WE textures/west.xpm
EA textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE`, `EA` name the wall image for each side. Giving the same
  one twice is an error.
- `F` and `C` are the floor and ceiling colours: three whole numbers from 0
  to 255 separated by commas.
- Empty lines between configuration lines are skipped; any other line is an
  error.
- The map starts at the first line whose first non-blank character is `1`
  and ends at the first empty line or at the end of the file.
- The map is made of `1` (wall), `0` (floor) and spaces. Exactly one of
  `N`, `S`, `E`, `W` marks where the player starts and which way they face;
  that cell becomes floor.
- The map must have at least two lines and be closed by walls: the first and
  last lines hold only walls and spaces, every line starts with a wall once
  leading spaces are skipped, and no floor cell may touch a space or the end
  of a line, diagonals included.

All four textures, both colours, the map and a starting position are
required. The map is padded with spaces to at least 10 by 10 cells.

While the map is checked, every floor cell that has walls to its left and
right, floor above and below, and a wall on one of its right-hand diagonals
becomes a door (`D`). The first floor cell surrounded by floor on all eight
sides holds the key (`K`).

Besides the four wall images, the game reads `textures/door.xpm`,
`textures/key_left.xpm` and `textures/key_right.xpm`, relative to the
current directory. Images are loaded with pygame; a file it cannot load is
reported as an error.

## Playing

| Key          | Action                               |
|--------------|--------------------------------------|
| W / S        | walk forward / back                  |
| A / D        | step left / right                    |
| ← / →        | turn left / right by five degrees    |
| E            | open or close a door (needs the key) |
| Esc          | quit                                 |

Walking onto the key picks it up; until then it is drawn as a sprite that
switches between the two key images every 20 frames. Magenta (`0xFF00FF`)
pixels in the key images are transparent. An opened door closes itself once
you have walked more than 20 steps and are not standing in it, or when you
press E facing it again.

A minimap in the top-left corner shows walls, doors and open cells in a
10 by 10 cell window that follows you.

## Using it as a library

The pieces can be used on their own:

```python
from cubecast.game import Game
from cubecast.mapfile import check_map
from cubecast.app import prepare_game

game = Game()
check_map(game, "level.cub")   # raises cubecast.game.GameError on bad input
prepare_game(game)             # validates and sets the view direction
print(game.get_map_sym(int(game.px), int(game.py)))
```

- `cubecast.mapfile`: `is_valid_map`, `parse_rgb`, `parse_config`,
  `map_control`, `complete_to_rect` and `check_map` read and check scene
  files.
- `cubecast.controls`: `handle_key(game, key)` applies a `Key` code to a
  game and returns `False` for Esc; the single actions (`move_forward`,
  `strafe_left`, `rotate_right`, `use_door`, ...) are available too.
- `cubecast.raycast`: `raycast(game, frame, textures)` draws every column of
  a 1000 by 1000 `uint32` array from a `Textures` set of numpy images;
  call `init_sprite(game)` first so the key is drawn.
- `cubecast.minimap`: `render_minimap(game)` returns the minimap image as an
  array.
- `cubecast.app`: `render_frame(game, textures)` advances one frame and
  returns the finished picture; `run(game)` opens the window and plays.

Colours are 32-bit integers laid out as `0xTTRRGGBB`.

## What it does not do

There is no mouse look: turning is done with the arrow keys only. The
window size is fixed at 1000 by 1000 pixels.