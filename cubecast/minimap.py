"""Top-left overview map showing the walls and doors around the player."""

import numpy as np

from .game import HEIGHT, WIDTH, Game

MINIMAP_WIDTH = WIDTH // 5
MINIMAP_HEIGHT = HEIGHT // 5
GRID_COLOUR = 0xFF000000
WALL_COLOUR = 0x2202F2
DOOR_COLOUR = 0x038A30
EMPTY_COLOUR = 0x00000000
PLAYER_COLOUR = 0xFF110211

_CELL_W = WIDTH // 50
_CELL_H = HEIGHT // 50
_CELLS = 10
_MARKER_HALF = WIDTH // 250


def minimap_origin(game: Game) -> tuple[int, int]:
    """Return the (column, row) of the map cell shown in the top-left corner."""
    row = 0
    while (game.map_height > 11 and game.py > row + 6
           and game.map_height > row + 10):
        row += 1
    if game.map_width < 11 or game.px <= 4:
        col = 0.0
    elif game.map_width - game.px <= 6:
        col = game.map_width - 10
    else:
        col = game.px - 4
    return int(col), row


def _draw_cell(image: np.ndarray, i: int, j: int, colour: int) -> None:
    x0 = i * _CELL_W
    y0 = j * _CELL_H
    image[y0:y0 + _CELL_H + 1, x0:x0 + _CELL_W + 1] = colour
    image[y0, x0:x0 + _CELL_W + 1] = GRID_COLOUR
    image[y0:y0 + _CELL_H + 1, x0] = GRID_COLOUR


def _player_cell(game: Game) -> tuple[float, float]:
    """Where the player sits on the minimap, in cell units."""
    if game.px < 5:
        x = game.px
    elif game.map_width - game.px < 5:
        x = 10 - (game.map_width - game.px)
    else:
        x = 4 + (game.px - int(game.px))
    if game.py < 5:
        y = game.py
    elif game.map_height - game.py < 5:
        y = 10 - (game.map_height - game.py)
    else:
        y = 5 + (game.py - int(game.py))
    return x, y


def _draw_player(image: np.ndarray, x: float, y: float) -> None:
    offsets = np.arange(2 * _MARKER_HALF) + 0.5 - _MARKER_HALF
    cols = np.trunc(offsets + x * _CELL_W).astype(np.int64)
    rows = np.trunc(offsets + y * _CELL_H).astype(np.int64)
    cols = cols[(cols >= 0) & (cols < image.shape[1])]
    rows = rows[(rows >= 0) & (rows < image.shape[0])]
    image[np.ix_(rows, cols)] = PLAYER_COLOUR


def render_minimap(game: Game) -> np.ndarray:
    """Draw the 10 by 10 cell window around the player into a new image."""
    image = np.zeros((MINIMAP_HEIGHT, MINIMAP_WIDTH), dtype=np.uint32)
    col0, row0 = minimap_origin(game)
    for j, line in enumerate(game.grid[row0:row0 + _CELLS]):
        for i, cell in enumerate(line[col0:col0 + _CELLS]):
            if cell == "1":
                colour = WALL_COLOUR
            elif cell == "D":
                colour = DOOR_COLOUR
            else:
                colour = EMPTY_COLOUR
            _draw_cell(image, i, j, colour)
    _draw_player(image, *_player_cell(game))
    return image