"""The player: position, heading, held keys and collision with walls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .constants import FIX_MAP_X, FIX_MAP_Y, MARGIN, PI, PLAYER_SIZ, ROT_SPEED, SPEED
from .doors import _cell_at, is_door_closed
from .mapcheck import PlayerStart


def is_wall(grid: Sequence[Sequence[str]], x: float, y: float, bonus: bool = False) -> bool:
    """Tell whether the player cannot stand at ``(x, y)``.

    With ``bonus`` the player is wider and closed doors block as well.
    """
    if x < 0 or y < 0:
        return True
    if bonus and is_door_closed(grid, x, y):
        return True
    margin = PLAYER_SIZ if bonus else MARGIN
    points = (
        (x, y),
        (x - margin, y - margin),
        (x + margin, y - margin),
        (x + margin, y + margin),
        (x - margin, y + margin),
    )
    return any(_cell_at(grid, px, py) == "1" for px, py in points)


@dataclass
class Player:
    """Where the player stands, where it looks and which keys it holds."""

    x: float = -1.0
    y: float = -1.0
    angle: float = PI / 2
    x0: int = 0
    y0: int = 0
    key_up: bool = False
    key_down: bool = False
    key_left: bool = False
    key_right: bool = False
    left_rotate: bool = False
    right_rotate: bool = False

    @classmethod
    def from_start(cls, start: PlayerStart) -> "Player":
        """A player standing where the map puts it."""
        player = cls(x=start.x, y=start.y, angle=start.angle)
        player._recenter()
        return player

    def _recenter(self) -> None:
        self.x0 = max(0, int(self.x - FIX_MAP_X))
        self.y0 = max(0, int(self.y - FIX_MAP_Y))

    def update_angle(self) -> None:
        """Turn according to the held rotation keys."""
        if self.left_rotate:
            self.angle -= ROT_SPEED
        if self.right_rotate:
            self.angle += ROT_SPEED
        if self.angle > 2 * PI:
            self.angle -= 2 * PI
        elif self.angle < -2 * PI:
            self.angle += 2 * PI

    def next_position(self) -> tuple[float, float]:
        """Where one step with the held movement keys would lead."""
        cos_a = math.cos(self.angle) * SPEED
        sin_a = math.sin(self.angle) * SPEED
        if self.key_up:
            return self.x + cos_a, self.y + sin_a
        if self.key_left:
            return self.x + sin_a, self.y - cos_a
        if self.key_down:
            return self.x - cos_a, self.y - sin_a
        if self.key_right:
            return self.x - sin_a, self.y + cos_a
        return self.x, self.y

    def move(self, grid: Sequence[Sequence[str]], bonus: bool = False) -> bool:
        """Turn, then step unless a wall is in the way. Returns whether it stepped."""
        self.update_angle()
        x, y = self.next_position()
        if is_wall(grid, x, y, bonus):
            return False
        self.x = x
        self.y = y
        self._recenter()
        return True