import numpy as np

from cubecast.game import HEIGHT, WIDTH, Game
from cubecast.minimap import minimap_origin, render_minimap


def _small_game():
    grid = [
        "1111111111",
        "1D00000001",
        "1000000001",
        "1000000001",
        "1000000001",
        "1000000001",
        "1000000001",
        "1000000001",
        "1000000001",
        "1111111111",
    ]
    return Game(grid=grid, map_width=10, map_height=10, px=5.5, py=5.5)


def _large_game(px, py):
    return Game(grid=[" " * 30 for _ in range(30)], map_width=30,
                map_height=30, px=px, py=py)


def test_small_map_starts_at_top_left():
    col, row = minimap_origin(_small_game())
    assert (col, row) == (0, 0)


def test_origin_window_contains_player():
    game = _large_game(15.5, 15.5)
    col, row = minimap_origin(game)
    assert col <= int(game.px) < col + 10
    assert row <= int(game.py) < row + 10


def test_origin_clamps_at_right_edge():
    game = _large_game(28.5, 2.5)
    col, row = minimap_origin(game)
    assert col == game.map_width - 10
    assert row == 0


def test_image_size():
    image = render_minimap(_small_game())
    assert image.shape == (HEIGHT // 5, WIDTH // 5)


def test_cell_colours():
    image = render_minimap(_small_game())
    assert image[0, 0] == 0xFF000000
    assert image[10, 10] == 0x2202F2
    assert image[30, 30] == 0x038A30
    assert image[50, 50] == 0


def test_player_marker_drawn():
    image = render_minimap(_small_game())
    assert np.count_nonzero(image == 0xFF110211) == 64


def test_scrolled_window_shows_origin_cell_first():
    game = _large_game(15.5, 15.5)
    col, row = minimap_origin(game)
    rows = [list(line) for line in game.grid]
    rows[row][col] = "1"
    game.grid = ["".join(line) for line in rows]
    image = render_minimap(game)
    assert image[10, 10] == 0x2202F2
    assert image[30, 30] == 0