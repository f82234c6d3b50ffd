"""Wall and sprite rendering by casting one ray per screen column."""

import math
from dataclasses import dataclass

import numpy as np

from .game import HEIGHT, WIDTH, Game
from .mathutils import calc_dist, degree_to_radian, replace_angle_360

TILE = 64
NORTH = 2
SOUTH = 3
WEST = 4
EAST = 5
DOOR = 6
KEY = 7
KEY_ALT = 8
TRANSPARENT = 0x00FF00FF

_EPSILON = 0.0001
_NO_HIT = 1000000.0
_SPRITE_HEIGHT = 10
_PROJECTION = 800
# Keeps wall heights within int64 range when a ray hits right next to the eye.
_MAX_LINE = 1 << 40


@dataclass
class Ray:
    """State of the ray being cast for the current screen column."""

    ra: float = 0.0
    px: float = 0.0
    py: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    xo: float = 0.0
    yo: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    depth: int = 0
    zeros: int = 0
    zerosh: int = 0
    tan_ra: float = 0.0
    atan_ra: float = 0.0


@dataclass
class Textures:
    """Pixel arrays (rows by columns, 32-bit colours) for walls, door and key."""

    north: np.ndarray
    south: np.ndarray
    west: np.ndarray
    east: np.ndarray
    door: np.ndarray
    key: np.ndarray
    key_alt: np.ndarray

    def side(self, index: int) -> np.ndarray:
        """Return the texture for a wall side code (NORTH .. KEY_ALT)."""
        sides = {
            NORTH: self.north,
            SOUTH: self.south,
            WEST: self.west,
            EAST: self.east,
            DOOR: self.door,
            KEY: self.key,
            KEY_ALT: self.key_alt,
        }
        try:
            return sides[index]
        except KeyError:
            raise ValueError(f"no texture for side {index}") from None


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and RGB components into one 32-bit colour."""
    return t << 24 | r << 16 | g << 8 | b


def _cell(x: float, y: float) -> tuple[int, int]:
    return int(x) >> 6, int(y) >> 6


def _tile_start(value: float) -> int:
    return (int(value) >> 6) << 6


def vert_ray(game: Game, ray: Ray) -> None:
    """Cast ``ray`` against vertical grid lines and record any wall it hits."""
    rad = degree_to_radian(ray.ra)
    ray.tan_ra = math.tan(rad)
    ray.depth = 0
    cos_ra = math.cos(rad)
    if cos_ra > _EPSILON:
        ray.zeros = EAST
        ray.rx = _tile_start(ray.px) + TILE
        ray.ry = (ray.px - ray.rx) * ray.tan_ra + ray.py
        ray.xo = TILE
        ray.yo = -TILE * ray.tan_ra
    elif cos_ra < -_EPSILON:
        ray.zeros = WEST
        ray.rx = _tile_start(ray.px) - _EPSILON
        ray.ry = (ray.px - ray.rx) * ray.tan_ra + ray.py
        ray.xo = -TILE
        ray.yo = TILE * ray.tan_ra
    elif cos_ra == 0:
        ray.depth = game.map_width
        ray.rx = ray.px
        ray.ry = ray.py
    while ray.depth < game.map_width:
        cell = game.get_map_sym(*_cell(ray.rx, ray.ry))
        if cell in ("1", "D"):
            game.dist = calc_dist(ray.ra, ray.rx, ray.ry, ray.px, ray.py)
            game.zeros = DOOR if cell == "D" else ray.zeros
            ray.depth = game.map_width
        else:
            ray.rx += ray.xo
            ray.ry += ray.yo
            ray.depth += 1
    ray.vx = ray.rx
    ray.vy = ray.ry


def horizontal_ray(game: Game, ray: Ray) -> None:
    """Cast ``ray`` against horizontal grid lines, keeping the nearer hit."""
    rad = degree_to_radian(ray.ra)
    tan_ra = math.tan(rad)
    ray.atan_ra = 1.0 / tan_ra if tan_ra else math.inf
    ray.depth = 0
    sin_ra = math.sin(rad)
    if sin_ra > _EPSILON:
        ray.zerosh = NORTH
        ray.ry = _tile_start(ray.py) - _EPSILON
        ray.rx = (ray.py - ray.ry) * ray.atan_ra + ray.px
        ray.yo = -TILE
        ray.xo = TILE * ray.atan_ra
    elif sin_ra < -_EPSILON:
        ray.zerosh = SOUTH
        ray.ry = _tile_start(ray.py) + TILE
        ray.rx = (ray.py - ray.ry) * ray.atan_ra + ray.px
        ray.yo = TILE
        ray.xo = -TILE * ray.atan_ra
    else:
        ray.depth = game.map_height
        ray.rx = ray.px
        ray.ry = ray.py
    while ray.depth < game.map_height:
        cell = game.get_map_sym(*_cell(ray.rx, ray.ry))
        if cell in ("1", "D"):
            dist = calc_dist(ray.ra, ray.rx, ray.ry, ray.px, ray.py)
            if dist < game.dist:
                game.zeros = DOOR if cell == "D" else ray.zerosh
                game.dist = dist
            else:
                ray.rx = ray.vx
                ray.ry = ray.vy
            ray.depth = game.map_height
        else:
            ray.rx += ray.xo
            ray.ry += ray.yo
            ray.depth += 1


def draw_line(game: Game, frame: np.ndarray, textures: Textures,
              column: int) -> None:
    """Paint ceiling, textured wall slice and floor into one frame column."""
    if game.dist:
        lineh = int((HEIGHT << 5) / game.dist)
    else:
        lineh = _MAX_LINE
    lineh = max(-_MAX_LINE, min(lineh, _MAX_LINE))
    game.stepy = 0.0
    game.linelen = lineh
    if lineh > HEIGHT:
        game.stepy = float((lineh - HEIGHT) >> 1)
        lineh = HEIGHT
    lineoff = (HEIGHT - lineh) >> 1

    pixels = frame[:, column]
    ys = np.arange(HEIGHT)
    ceiling = ys < lineoff
    floor = ~ceiling & (ys > lineh + lineoff)
    pixels[floor] = create_trgb(0, *game.floor)
    pixels[ceiling] = create_trgb(0, *game.ceiling)
    if game.linelen == 0:
        return
    rows = ys[~ceiling & ~floor]
    if rows.size == 0:
        return
    texture = textures.side(game.zeros)
    k = np.trunc(rows - lineoff - 1 + game.stepy).astype(np.int64) * TILE
    j = np.where(k < 0, -((-k) // game.linelen), k // game.linelen)
    j = np.clip(j, 0, texture.shape[0] - 1)
    pixels[rows] = texture[j, game.ray % texture.shape[1]]


def init_sprite(game: Game) -> None:
    """Project the key sprite onto the screen for the coming frame."""
    if not game.sprite:
        return
    dx = (game.key_px - game.px) * TILE
    dy = (game.key_py - game.py) * TILE
    rad = degree_to_radian(game.pa)
    cos_pa = math.cos(rad)
    sin_pa = math.sin(rad)
    across = dy * cos_pa + dx * sin_pa
    ahead = dx * cos_pa - dy * sin_pa
    game.b = ahead
    if ahead == 0:
        game.spr_scale = 0.0
        return
    game.sx = across * _PROJECTION / ahead + WIDTH / 2
    game.sy = _SPRITE_HEIGHT * _PROJECTION / ahead + HEIGHT / 2
    game.spr_scale = min(max(5 * HEIGHT / ahead, 0.0), WIDTH // 2)
    game.t_x = 0.0
    if game.spr_scale:
        game.t_x_step = 63.0 / game.spr_scale
        game.t_y_step = 64.0 / game.spr_scale
    else:
        game.t_x_step = math.inf
        game.t_y_step = math.inf


def draw_sprite(game: Game, frame: np.ndarray, textures: Textures,
                column: int) -> None:
    """Draw the key sprite's slice for ``column`` if it is nearer than the wall."""
    if not game.sprite:
        return
    half = game.spr_scale / 2
    if not (game.sx - half <= column < game.sx + half
            and 0 < game.b < game.dist):
        return
    texture = textures.key if game.sprite_state == 1 else textures.key_alt
    count = math.ceil(game.spr_scale)
    steps = np.arange(count)
    t_y = np.maximum(62 - steps * game.t_y_step, 0.0)
    rows = np.trunc(game.sy - steps).astype(np.int64)
    tex_col = min(int(game.t_x), texture.shape[1] - 1)
    tex_rows = np.minimum(t_y.astype(np.int64), texture.shape[0] - 1)
    pixels = texture[tex_rows, tex_col]
    visible = (rows >= 0) & (rows < frame.shape[0]) & (pixels != TRANSPARENT)
    frame[rows[visible], column] = pixels[visible]
    game.t_y = max(62 - count * game.t_y_step, 0.0)
    game.t_x += game.t_x_step


def raycast(game: Game, frame: np.ndarray, textures: Textures) -> None:
    """Render every column of ``frame``; call ``init_sprite`` beforehand."""
    ray = Ray(ra=replace_angle_360(game.pa + 30),
              px=game.px * TILE, py=game.py * TILE)
    for column in range(WIDTH):
        game.dist = _NO_HIT
        vert_ray(game, ray)
        horizontal_ray(game, ray)
        game.dist *= math.cos(
            degree_to_radian(replace_angle_360(game.pa - ray.ra)))
        if game.zeros > SOUTH and game.zeros != DOOR:
            game.ray = int(ray.vy) % TILE
        else:
            game.ray = int(ray.rx) % TILE
        draw_line(game, frame, textures, column)
        draw_sprite(game, frame, textures, column)
        ray.ra = replace_angle_360(ray.ra - game.angle)