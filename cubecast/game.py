"""Game state shared by the map loader, the controls and the renderer."""

from dataclasses import dataclass, field

HEIGHT = 1000
WIDTH = 1000


class GameError(Exception):
    """Raised when the map file or the game setup is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class Game:
    """Everything the game knows: map, textures, colours, player and sprite."""

    # Texture paths for the four wall directions.
    no: str | None = None
    so: str | None = None
    we: str | None = None
    ea: str | None = None

    # Ceiling and floor colours; a first component of -1 means "not set".
    ceiling: list[int] = field(default_factory=lambda: [-1, 0, 0])
    floor: list[int] = field(default_factory=lambda: [-1, 0, 0])

    # Map rows, top to bottom, and their dimensions.
    grid: list[str] = field(default_factory=list)
    map_width: int = 0
    map_height: int = 0

    # Player orientation letter ("N", "S", "E", "W"), position and view.
    player: str = ""
    px: float = 0.0
    py: float = 0.0
    pdx: float = 0.0
    pdy: float = 0.0
    pa: float = 0.0

    # Per-column ray results.
    dist: float = 0.0
    zeros: int = 0
    ray: int = 0
    stepy: float = 0.0
    linelen: int = 0
    angle: float = 60.0 / WIDTH

    # Key, door and sprite state.
    is_key: bool = False
    sprite: bool = False
    sprite_state: int = 1
    key_px: float = 0.0
    key_py: float = 1.0
    d_x: int = -1
    d_y: int = -1
    step_num: int = 0
    is_open: bool = False
    loop: int = 0

    # Sprite projection.
    spr_scale: float = 0.0
    t_x: float = 0.0
    t_y: float = 0.0
    t_x_step: float = 0.0
    t_y_step: float = 0.0
    b: float = 0.0
    sx: float = 0.0
    sy: float = 0.0

    def get_map_sym(self, mx: int, my: int) -> str:
        """Return the map cell at (mx, my), or a space outside the map."""
        if mx < 0 or my < 0 or mx >= self.map_width or my >= self.map_height:
            return " "
        if my >= len(self.grid):
            return " "
        row = self.grid[my]
        if mx >= len(row):
            return " "
        return row[mx]

    def put_map_sym(self, mx: int, my: int, c: str) -> None:
        """Overwrite the map cell at (mx, my); negative coordinates are ignored."""
        if mx < 0 or my < 0:
            return
        row = self.grid[my]
        if mx >= len(row):
            raise IndexError(f"column {mx} is outside row {my}")
        self.grid[my] = row[:mx] + c + row[mx + 1:]

    def tick(self) -> None:
        """Advance the frame counter, flipping the key sprite every 20 frames."""
        self.loop += 1
        if self.loop % 20 == 0:
            self.sprite_state = 2 if self.sprite_state == 1 else 1
        if self.loop == 401:
            self.loop = 1