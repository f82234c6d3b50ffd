import pytest

from cubecast.game import Game, GameError
from cubecast.mapfile import (
    atoi,
    check_map,
    complete_to_rect,
    is_valid_map,
    map_control,
    parse_config,
    parse_rgb,
)

CONFIG = (
    "NO ./textures/north.xpm\n"
    "SO ./textures/south.xpm\n"
    "WE ./textures/west.xpm\n"
    "EA ./textures/east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
)
MAP_ROWS = ["111111", "100001", "10N001", "100001", "111111"]


def _scene(rows, tail=""):
    return CONFIG + "\n".join(rows) + "\n" + tail


def _lines(text):
    return text.splitlines(keepends=True)


def _loaded(rows=MAP_ROWS, tail=""):
    game = Game()
    parse_config(game, _lines(_scene(rows, tail)))
    return game


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.cub", True),
        (".cub", True),
        ("maps/level.ber", False),
        ("cub", False),
        ("level.cubx", False),
    ],
)
def test_is_valid_map(path, expected):
    assert is_valid_map(path, ".cub") is expected


@pytest.mark.parametrize(
    "text, expected",
    [("  -42abc", -42), ("+7", 7), ("\t\n 15 9", 15), ("abc", 0), ("", 0)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_to_int_range():
    assert atoi("2147483648") == -2147483648


def test_parse_rgb_reads_three_components():
    assert parse_rgb(" 10, 20 ,30\n") == [10, 20, 30]


def test_parse_rgb_empty_component_reads_as_zero():
    assert parse_rgb("5,,7") == [5, 0, 7]


@pytest.mark.parametrize("text", ["1,2", "1,2,3x", "1;2;3", "1,2,3,4", "-1,2,3"])
def test_parse_rgb_rejects_bad_format(text):
    with pytest.raises(GameError, match="RGB format is invalid"):
        parse_rgb(text)


def test_parse_rgb_rejects_out_of_range():
    with pytest.raises(GameError, match="between 0-255"):
        parse_rgb("300,0,0")


def test_parse_config_reads_textures_and_colours():
    game = _loaded()
    assert game.no == "./textures/north.xpm"
    assert game.so == "./textures/south.xpm"
    assert game.we == "./textures/west.xpm"
    assert game.ea == "./textures/east.xpm"
    assert game.floor == [220, 100, 0]
    assert game.ceiling == [225, 30, 0]


def test_parse_config_indented_west_texture():
    game = Game()
    parse_config(game, ["  WE west.xpm\n"])
    assert game.we == "west.xpm"


def test_parse_config_records_player():
    game = _loaded()
    assert game.player == "N"
    assert game.px == MAP_ROWS[2].index("N") + 0.5
    assert game.py == 2 + 0.5
    assert not any("N" in row for row in game.grid)


def test_parse_config_makes_rectangle():
    game = _loaded()
    assert game.map_width >= 10
    assert game.map_height >= 10
    assert len(game.grid) == game.map_height
    assert all(len(row) == game.map_width for row in game.grid)
    assert all(row.startswith(src.replace("N", "0")[:1]) for row, src in zip(game.grid, MAP_ROWS))
    assert game.grid[0].startswith("111111")


def test_parse_config_places_single_key():
    game = _loaded()
    assert game.is_key is True
    assert sum(row.count("K") for row in game.grid) == 1
    assert game.grid[int(game.key_py)][int(game.key_px)] == "K"


def test_lines_after_map_are_ignored():
    game = _loaded(tail="\ngarbage line\n")
    assert game.map_height >= len(MAP_ROWS)
    assert game.grid[len(MAP_ROWS) - 1].startswith("111111")


def test_duplicate_texture_is_rejected():
    game = Game()
    with pytest.raises(GameError, match="more than one picture"):
        parse_config(game, ["NO a.xpm\n", "NO b.xpm\n"])


def test_unknown_line_is_rejected():
    with pytest.raises(GameError, match="Map is invalid!"):
        parse_config(Game(), ["hello\n"])


def test_two_players_are_rejected():
    rows = ["111111", "1N0001", "100S01", "111111"]
    with pytest.raises(GameError, match="Only one player"):
        _loaded(rows)


def test_unknown_map_character_is_rejected():
    rows = ["11111", "10X01", "11111"]
    with pytest.raises(GameError, match="Unknown character"):
        _loaded(rows)


def test_map_control_places_door():
    grid = ["111111", "100001", "110111", "100101", "111111"]
    game = Game(grid=list(grid), map_width=6, map_height=5)
    map_control(game)
    assert game.grid[2][2] == "D"
    assert game.is_key is False
    assert len(game.grid) == len(grid)


def test_map_control_places_key_in_open_room():
    grid = ["11111", "10001", "10001", "10001", "11111"]
    game = Game(grid=list(grid), map_width=5, map_height=5)
    map_control(game)
    assert game.is_key is True
    assert game.grid[2][2] == "K"
    assert game.grid[int(game.key_py)][int(game.key_px)] == "K"


def test_map_control_without_open_area_has_no_key():
    grid = ["1111", "1001", "1001", "1111"]
    game = Game(grid=list(grid), map_width=4, map_height=4)
    map_control(game)
    assert game.is_key is False
    assert game.grid == grid


def test_map_control_rejects_single_row():
    game = Game(grid=["1111"], map_width=4, map_height=1)
    with pytest.raises(GameError, match="Map is invalid"):
        map_control(game)


def test_map_control_rejects_hole():
    game = Game(grid=["11111", "10 01", "11111"], map_width=5, map_height=3)
    with pytest.raises(GameError, match="Invalid Map!"):
        map_control(game)


def test_map_control_rejects_open_top_wall():
    game = Game(grid=["10001", "10001", "11111"], map_width=5, map_height=3)
    with pytest.raises(GameError, match="Map content is invalid"):
        map_control(game)


def test_map_control_rejects_row_wider_than_above():
    game = Game(grid=["1111", "100001", "111111"], map_width=6, map_height=3)
    with pytest.raises(GameError, match="Invalid Map!"):
        map_control(game)


def test_map_control_rejects_inner_row_not_starting_with_wall():
    game = Game(grid=["11111", "00001", "11111"], map_width=5, map_height=3)
    with pytest.raises(GameError, match="Map is invalid"):
        map_control(game)


def test_complete_to_rect_pads_small_map():
    game = Game(grid=["111", "101", "111"], map_width=3, map_height=3)
    complete_to_rect(game)
    assert game.map_width == 10
    assert game.map_height == 10
    assert game.grid[0] == "111".ljust(10)
    assert game.grid[-1] == " " * 10
    assert len(game.grid) == 10


def test_complete_to_rect_keeps_wide_map():
    game = Game(grid=["1" * 12, "1" * 12], map_width=12, map_height=2)
    complete_to_rect(game)
    assert game.map_width == 12
    assert game.grid[0] == "1" * 12
    assert all(len(row) == 12 for row in game.grid)


def test_check_map_loads_file(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(_scene(MAP_ROWS))
    game = Game()
    check_map(game, str(path))
    assert game.player == "N"
    assert game.get_map_sym(0, 0) == "1"
    assert game.grid[0].startswith("111111")


def test_check_map_missing_file(tmp_path):
    with pytest.raises(GameError, match="File could not found"):
        check_map(Game(), str(tmp_path / "absent.cub"))


def test_check_map_empty_file(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("")
    with pytest.raises(GameError, match="Map format is invalid"):
        check_map(Game(), str(path))


def test_check_map_without_grid(tmp_path):
    path = tmp_path / "nomap.cub"
    path.write_text(CONFIG)
    with pytest.raises(GameError, match="Given map rules are not valid"):
        check_map(Game(), str(path))