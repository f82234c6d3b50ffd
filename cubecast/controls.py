"""Keyboard actions: walking, turning, picking up the key and using doors."""

import math
from collections.abc import Callable
from enum import IntEnum

from .game import Game
from .mathutils import degree_to_radian, replace_angle_360

_PROBE = 0.2
_STEP = 0.1
_REACH = 0.5
_TURN = 5


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    E = 14
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124


def _walk(game: Game, dx: float, dy: float) -> None:
    """Step along (dx, dy) if the cell a little further ahead is free."""
    mx = int(game.px + dx * _PROBE)
    my = int(game.py + dy * _PROBE)
    cell = game.get_map_sym(mx, my)
    if cell not in ("0", "K"):
        return
    if cell == "K":
        game.is_key = True
        game.sprite = False
        game.put_map_sym(mx, my, "0")
    game.px += dx * _STEP
    game.py += dy * _STEP
    if game.step_num:
        game.step_num += 1


def _turn(game: Game, delta: float) -> None:
    game.pa = replace_angle_360(game.pa + delta)
    rad = degree_to_radian(game.pa)
    game.pdx = math.cos(rad)
    game.pdy = -math.sin(rad)


def move_forward(game: Game) -> None:
    """Walk one step in the viewing direction."""
    _walk(game, game.pdx, game.pdy)


def move_back(game: Game) -> None:
    """Walk one step away from the viewing direction."""
    _walk(game, -game.pdx, -game.pdy)


def strafe_left(game: Game) -> None:
    """Walk one step sideways to the left."""
    _walk(game, game.pdy, -game.pdx)


def strafe_right(game: Game) -> None:
    """Walk one step sideways to the right."""
    _walk(game, -game.pdy, game.pdx)


def rotate_left(game: Game) -> None:
    """Turn the view five degrees anticlockwise."""
    _turn(game, _TURN)


def rotate_right(game: Game) -> None:
    """Turn the view five degrees clockwise."""
    _turn(game, -_TURN)


def use_door(game: Game) -> None:
    """Open the door in front of the player, or close the one left open."""
    mx = int(game.px + game.pdx * _REACH)
    my = int(game.py + game.pdy * _REACH)
    if game.get_map_sym(mx, my) == "D" and game.is_key:
        game.d_x = mx
        game.d_y = my
        game.put_map_sym(mx, my, "0")
        game.is_open = True
        game.step_num = 1
    elif (mx == game.d_x and my == game.d_y and game.is_key
          and (int(game.px) != game.d_x or int(game.py) != game.d_y)):
        if game.is_open:
            game.is_open = False
            game.put_map_sym(mx, my, "D")


_ACTIONS: dict[Key, Callable[[Game], None]] = {
    Key.W: move_forward,
    Key.A: strafe_left,
    Key.S: move_back,
    Key.D: strafe_right,
    Key.E: use_door,
    Key.LEFT: rotate_left,
    Key.RIGHT: rotate_right,
}


def handle_key(game: Game, key: int) -> bool:
    """Apply the action bound to ``key``; return False when the game should quit."""
    try:
        code = Key(key)
    except ValueError:
        return True
    if code is Key.ESCAPE:
        return False
    _ACTIONS[code](game)
    return True