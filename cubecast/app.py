"""Game setup, the frame loop and the command-line entry point."""

import math
import sys
from collections.abc import Sequence

import numpy as np
import pygame

from .controls import Key, handle_key
from .game import HEIGHT, WIDTH, Game, GameError
from .mapfile import check_map, is_valid_map
from .mathutils import degree_to_radian
from .minimap import render_minimap
from .raycast import Textures, init_sprite, raycast

DOOR_TEXTURE = "textures/door.xpm"
KEY_TEXTURE = "textures/key_left.xpm"
KEY_ALT_TEXTURE = "textures/key_right.xpm"

_HIDDEN_ALPHA = 0xFF
_FRAME_RATE = 60
_PLAYER_ANGLES = {"E": 0.0, "N": 90.0, "W": 180.0, "S": 270.0}
_KEYMAP = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_e: Key.E,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def validate_game(game: Game) -> None:
    """Check that the scene is complete and face the player its start way."""
    for name, path in (("NO", game.no), ("EA", game.ea),
                       ("WE", game.we), ("SO", game.so)):
        if path is None:
            raise GameError(f"Error! Texture for '{name}' is not found!")
    if game.ceiling[0] < 0:
        raise GameError("Error! For ceiling RGB is not found!")
    if game.floor[0] < 0:
        raise GameError("Error! For floor RGB is not found!")
    if not game.grid:
        raise GameError("Error! Map is not found!")
    if not game.player:
        raise GameError("Error! Position of player is not found!")
    if game.player in _PLAYER_ANGLES:
        game.pa = _PLAYER_ANGLES[game.player]


def prepare_game(game: Game) -> None:
    """Validate the scene, set the view direction and show a placed key."""
    validate_game(game)
    rad = degree_to_radian(game.pa)
    game.pdx = math.cos(rad)
    game.pdy = -math.sin(rad)
    if game.is_key:
        game.sprite = True
        game.is_key = False
    game.key_px += 0.5
    game.key_py += 0.5


def _load_image(path: str) -> np.ndarray:
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        raise GameError("Error! Image file could not found!") from exc
    rgb = pygame.surfarray.array3d(surface).astype(np.uint32)
    pixels = rgb[..., 0] << 16 | rgb[..., 1] << 8 | rgb[..., 2]
    return np.ascontiguousarray(pixels.T)


def load_textures(game: Game) -> Textures:
    """Load the wall textures named in the scene plus the door and key images."""
    return Textures(
        north=_load_image(str(game.no)),
        south=_load_image(str(game.so)),
        west=_load_image(str(game.we)),
        east=_load_image(str(game.ea)),
        door=_load_image(DOOR_TEXTURE),
        key=_load_image(KEY_TEXTURE),
        key_alt=_load_image(KEY_ALT_TEXTURE),
    )


def _overlay(frame: np.ndarray, image: np.ndarray) -> None:
    """Copy ``image`` onto the top-left of ``frame``, skipping hidden pixels."""
    region = frame[:image.shape[0], :image.shape[1]]
    shown = (image >> 24) != _HIDDEN_ALPHA
    region[shown] = image[shown]


def render_frame(game: Game, textures: Textures) -> np.ndarray:
    """Advance one frame and return the rendered picture with the minimap."""
    game.tick()
    frame = np.zeros((HEIGHT, WIDTH), dtype=np.uint32)
    init_sprite(game)
    raycast(game, frame, textures)
    _overlay(frame, render_minimap(game))
    if (game.is_open and game.step_num > 20
            and (int(game.px) != game.d_x or int(game.py) != game.d_y)):
        game.put_map_sym(game.d_x, game.d_y, "D")
    return frame


def run(game: Game) -> None:
    """Open the window and play until the window is closed or Escape is hit."""
    prepare_game(game)
    pygame.init()
    try:
        textures = load_textures(game)
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("cubecast")
        canvas = pygame.Surface((WIDTH, HEIGHT), 0, 32)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    code = _KEYMAP.get(event.key)
                    if code is not None and not handle_key(game, code):
                        running = False
            if not running:
                break
            frame = render_frame(game, textures)
            pygame.surfarray.blit_array(canvas, (frame & 0xFFFFFF).T)
            screen.blit(canvas, (0, 0))
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file given as the only argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write("Error!\nProgramm accept only one argument!\n")
        return 1
    path = args[0]
    game = Game()
    try:
        if not is_valid_map(path, ".cub"):
            raise GameError("Map format is invalid!")
        check_map(game, path)
        run(game)
    except GameError as exc:
        sys.stderr.write(f"Error\n{exc.message}\n")
        return 1
    return 0