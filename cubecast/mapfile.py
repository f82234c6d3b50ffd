"""Reading and validating ``.cub`` scene files."""

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .game import Game, GameError

_EXTENSION_LENGTH = 4
_MIN_SIDE = 10
_ATOI = re.compile(r"[ \t\n\f\v\r]*([+-]?)([0-9]*)")
_RGB_FIELD = re.compile(r"[0-9 \t]*")
_PLAYERS = "NSEW"
_TEXTURE_ERROR = "Error! One texture has been assigned more than one picture."


def is_valid_map(path: str, extension: str) -> bool:
    """Tell whether the last four characters of ``path`` match ``extension``."""
    if len(path) < _EXTENSION_LENGTH or len(extension) < _EXTENSION_LENGTH:
        return False
    return path[-_EXTENSION_LENGTH:] == extension[:_EXTENSION_LENGTH]


def atoi(text: str) -> int:
    """Parse a leading signed decimal integer, wrapping to 32 bits; 0 if none."""
    sign, digits = _ATOI.match(text).groups()
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return (value + 2**31) % 2**32 - 2**31


def parse_rgb(text: str) -> list[int]:
    """Parse ``"R,G,B"`` as it follows the ``F`` or ``C`` identifier."""
    rest = text.lstrip(" \t")
    values = []
    for position in range(3):
        end = _RGB_FIELD.match(rest).end()
        stop = rest[end:end + 1]
        last = position == 2
        if not last and stop != ",":
            raise GameError("Error! RGB format is invalid.")
        if last and stop not in ("", "\n", " ", "\t"):
            raise GameError("Error! RGB format is invalid.")
        value = atoi(rest[:end])
        rest = rest[end + (1 if stop == "," else 0):]
        if not 0 <= value <= 255:
            raise GameError("Error! Colour value can be in between 0-255")
        values.append(value)
    return values


def _set_texture(game: Game, attribute: str, text: str) -> None:
    if getattr(game, attribute) is not None:
        raise GameError(_TEXTURE_ERROR)
    setattr(game, attribute, text.strip("\n").strip(" "))


def parse_config(game: Game, lines: Iterable[str]) -> None:
    """Apply scene lines to ``game``; the map block ends the reading."""
    remaining = iter(lines)
    for line in remaining:
        body = line.lstrip(" \t")
        identifier = body[:2]
        if identifier == "NO":
            _set_texture(game, "no", line[2:])
        elif identifier == "SO":
            _set_texture(game, "so", line[2:])
        elif identifier == "WE":
            _set_texture(game, "we", body[2:])
        elif identifier == "EA":
            _set_texture(game, "ea", body[2:])
        elif body.startswith("F"):
            game.floor = parse_rgb(body[1:])
        elif body.startswith("C"):
            game.ceiling = parse_rgb(body[1:])
        elif body.startswith("1"):
            _read_grid(game, line, remaining)
            return
        elif body and not body.startswith("\n"):
            raise GameError("Map is invalid!")


def _scan_row(game: Game, line: str) -> str:
    """Validate one map line, record the player and return the cleaned row."""
    cells = list(line.split("\n", 1)[0])
    for col, cell in enumerate(cells):
        if cell in _PLAYERS:
            if game.player:
                raise GameError("Error! Only one player is allowed in map file.")
            game.player = cell
            game.px = col + 0.5
            game.py = game.map_height + 0.5
            cells[col] = "0"
        elif cell not in " 10":
            raise GameError("Error! Unknown character is found in the map file.")
    return "".join(cells)


def _read_grid(game: Game, first: str, remaining: Iterator[str]) -> None:
    line: str | None = first
    while line is not None:
        if line.lstrip(" ")[:1] in ("", "\n"):
            break
        row = _scan_row(game, line)
        game.map_width = max(game.map_width, len(row))
        game.grid.append(row)
        game.map_height += 1
        line = next(remaining, None)
    map_control(game)
    complete_to_rect(game)


def _check_wall(row: list[str]) -> None:
    content = "".join(row).split("\n", 1)[0]
    body = content.lstrip(" ")
    if not body.startswith("1") or set(body) - {" ", "1"}:
        raise GameError("Error! Map content is invalid!")


def _at(row: list[str], col: int) -> str:
    return row[col] if 0 <= col < len(row) else ""


def _place_door_or_key(game: Game, above: list[str], row: list[str],
                       below: list[str], col: int) -> None:
    left, right = col - 1, col + 1
    around = (_at(row, left), _at(row, right), _at(above, left),
              _at(above, col), _at(above, right), _at(below, left),
              _at(below, col), _at(below, right))
    right_edge = (_at(row, right), _at(above, right), _at(below, right))
    if " " in around or any(cell in ("", "\n") for cell in right_edge):
        raise GameError("Invalid Map!")
    if (row[col] == "0" and row[right] == "1" and row[left] == "1"
            and above[col] == "0" and below[col] == "0"
            and (above[right] == "1" or below[right] == "1")):
        row[col] = "D"
    elif not game.is_key and row[col] == "0" and all(c == "0" for c in around):
        game.is_key = True
        row[col] = "K"
        game.key_px = col


def _check_inner_row(game: Game, above: list[str], row: list[str],
                     below: list[str]) -> None:
    if "".join(row).lstrip(" ")[:1] != "1":
        raise GameError("Error! Map is invalid.")
    for col, cell in enumerate(row):
        if cell == "\n":
            break
        if cell not in " 1":
            _place_door_or_key(game, above, row, below, col)


def map_control(game: Game) -> None:
    """Check that the map is closed and place the door and key cells."""
    rows = [list(row) for row in game.grid]
    if len(rows) < 2:
        raise GameError("Error! Map is invalid.")
    _check_wall(rows[0])
    for above, row, below in zip(rows, rows[1:], rows[2:]):
        _check_inner_row(game, above, row, below)
        if not game.is_key:
            game.key_py += 1
    _check_wall(rows[-1])
    game.grid = ["".join(row) for row in rows]


def complete_to_rect(game: Game) -> None:
    """Pad the map with spaces to a rectangle of at least 10 by 10 cells."""
    game.map_width = max(game.map_width, _MIN_SIDE)
    game.grid = [row.ljust(game.map_width) for row in game.grid]
    missing = _MIN_SIDE - game.map_height
    if missing > 0:
        game.grid.extend(" " * game.map_width for _ in range(missing))
        game.map_height += missing


def _split_lines(text: str) -> Iterator[str]:
    """Yield lines split on newline only, each keeping its newline."""
    parts = text.split("\n")
    for part in parts[:-1]:
        yield part + "\n"
    if parts[-1]:
        yield parts[-1]


def check_map(game: Game, path: str) -> None:
    """Load the scene file at ``path`` into ``game``."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise GameError("File could not found!") from exc
    lines = list(_split_lines(data.decode("utf-8", errors="surrogateescape")))
    if not lines:
        raise GameError("Map format is invalid!")
    parse_config(game, lines)
    if not game.grid:
        raise GameError("Given map rules are not valid!")