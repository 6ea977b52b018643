"""Game state: the map, the player, what is shown and how keys act on it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .canvas import Canvas
from .constants import HEIGHT, MAP_HEIGHT, MAP_WIDTH, WIDTH, Key
from .doors import DoorState, door_ahead, toggle_door
from .player import Player
from .render import SpriteAnimation, Textures, render_frame

_MOVE_FLAGS = {
    Key.W: "key_up",
    Key.S: "key_down",
    Key.A: "key_left",
    Key.D: "key_right",
    Key.LEFT: "left_rotate",
    Key.RIGHT: "right_rotate",
}
_QUIT_KEYS = frozenset({Key.ESC, Key.Q, Key.KEY_Q_MAC})


class QuitRequested(Exception):
    """Raised when the player asks to leave the game."""


@dataclass
class Game:
    """A running game: the map grid, the player, the images and display toggles."""

    grid: list[str]
    player: Player
    textures: Textures
    bonus: bool = False
    map_show: bool = False
    tex_show: bool = False
    canvas: Canvas = field(default_factory=lambda: Canvas(WIDTH, HEIGHT))
    minimap: Canvas = field(default_factory=lambda: Canvas(MAP_WIDTH, MAP_HEIGHT))
    animation: Optional[SpriteAnimation] = None

    def key_press(self, key: int) -> None:
        """React to a key going down.

        Movement keys are held until released; escape and Q raise
        QuitRequested; M and T toggle the minimap and the texture overview;
        with doors enabled, O opens or closes the door ahead.
        """
        flag = _MOVE_FLAGS.get(key)
        if flag is not None:
            setattr(self.player, flag, True)
        elif key in _QUIT_KEYS:
            raise QuitRequested()
        elif key == Key.M:
            self.map_show = not self.map_show
        elif key == Key.T:
            self.tex_show = not self.tex_show
        elif key == Key.O and self.bonus and door_ahead(self.grid, self.player) != DoorState.NONE:
            toggle_door(self.grid, self.player)

    def key_release(self, key: int) -> None:
        """React to a key coming up: stop the movement it drove."""
        flag = _MOVE_FLAGS.get(key)
        if flag is not None:
            setattr(self.player, flag, False)

    def tick(self) -> None:
        """Advance one frame: move the player and redraw the view and minimap."""
        render_frame(
            self.canvas,
            self.minimap,
            self.grid,
            self.player,
            self.textures,
            self.bonus,
            self.animation,
        )