"""Casting rays through the map grid to find walls, doors and sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .constants import BLOCK, PLAYER_SIZ, STEP
from .doors import _cell_at, _cell_index
from .player import Player

Trace = Callable[[float, float], None]


@dataclass
class Ray:
    """A ray marching from the player in small fixed steps."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    sidedist_x: float = 0.0
    sidedist_y: float = 0.0
    deltadist_x: float = 0.0
    deltadist_y: float = 0.0
    step_x: float = 0.0
    step_y: float = 0.0

    def advance(self) -> int:
        """Take one step; return 1 for a step along x, 0 for one along y."""
        if self.sidedist_x < self.sidedist_y:
            self.sidedist_x += self.deltadist_x
            self.x += self.step_x
            return 1
        self.sidedist_y += self.deltadist_y
        self.y += self.step_y
        return 0


@dataclass(frozen=True)
class Hit:
    """Where a ray stopped and along which axis it made its last step."""

    x: float
    y: float
    side: int
    sprite: bool = False


def distance(x: float, y: float) -> float:
    """Length of the vector ``(x, y)``."""
    return math.sqrt(x * x + y * y)


def fixed_dist(player: Player, x: float, y: float) -> float:
    """Distance to ``(x, y)`` projected on the player's heading."""
    delta_x = x - player.x
    delta_y = y - player.y
    angle = math.atan2(delta_y, delta_x) - player.angle
    return distance(delta_x, delta_y) * math.cos(angle)


def _delta(direction: float) -> float:
    return abs(BLOCK / direction) if direction else math.inf


def init_ray(player: Player, angle: float) -> Ray:
    """A ray leaving the centre of the player at ``angle``."""
    ray = Ray(
        x=player.x + PLAYER_SIZ // 2,
        y=player.y + PLAYER_SIZ // 2,
        dir_x=math.cos(angle),
        dir_y=math.sin(angle),
    )
    ray.deltadist_x = _delta(ray.dir_x)
    ray.deltadist_y = _delta(ray.dir_y)
    cell_x = player.x / BLOCK
    cell_y = player.y / BLOCK
    if ray.dir_x < 0:
        ray.step_x = -STEP
        ray.sidedist_x = (cell_x - math.floor(cell_x)) * ray.deltadist_x
    else:
        ray.step_x = STEP
        ray.sidedist_x = (math.ceil(cell_x) - cell_x) * ray.deltadist_x
    if ray.dir_y < 0:
        ray.step_y = -STEP
        ray.sidedist_y = (cell_y - math.floor(cell_y)) * ray.deltadist_y
    else:
        ray.step_y = STEP
        ray.sidedist_y = (math.ceil(cell_y) - cell_y) * ray.deltadist_y
    return ray


def touches(grid: Sequence[Sequence[str]], x: float, y: float, bonus: bool = False) -> bool:
    """Tell whether pixel ``(x, y)`` is inside a wall (or, with ``bonus``, a door)."""
    element = _cell_at(grid, x, y)
    return element == "1" or (bonus and element == "D")


def _outside(grid: Sequence[Sequence[str]], x: float, y: float) -> bool:
    row = _cell_index(y)
    col = _cell_index(x)
    widest = max((len(line) for line in grid), default=0)
    return row < 0 or row >= len(grid) or col < 0 or col >= widest


def _march(
    grid: Sequence[Sequence[str]],
    player: Player,
    angle: float,
    stop: Callable[[str], bool],
    trace: Optional[Trace] = None,
) -> tuple[Ray, int]:
    ray = init_ray(player, angle)
    while True:
        if trace is not None:
            trace(ray.x, ray.y)
        side = ray.advance()
        if stop(_cell_at(grid, ray.x, ray.y)) or _outside(grid, ray.x, ray.y):
            return ray, side


def cast_ray(
    grid: Sequence[Sequence[str]],
    player: Player,
    angle: float,
    bonus: bool = False,
    trace: Optional[Trace] = None,
) -> Hit:
    """March a ray until it enters a wall; ``trace`` sees every point on the way."""
    stoppers = "1D" if bonus else "1"
    ray, side = _march(grid, player, angle, lambda element: element != "" and element in stoppers, trace)
    return Hit(ray.x, ray.y, side)


def cast_sprite_ray(grid: Sequence[Sequence[str]], player: Player, angle: float) -> Hit:
    """March a ray until it meets a sprite, a wall or a closed door."""
    ray, side = _march(grid, player, angle, lambda element: element != "" and element in "P1D")
    return Hit(ray.x, ray.y, side, sprite=_cell_at(grid, ray.x, ray.y) == "P")


def wall_face(
    grid: Sequence[Sequence[str]], hit: Hit, angle: float, bonus: bool = False
) -> str:
    """Which texture the hit shows: ``NO``, ``SO``, ``WE``, ``EA`` or ``DOOR``."""
    if bonus and _cell_at(grid, hit.x, hit.y) == "D":
        return "DOOR"
    if hit.side == 1:
        return "EA" if math.cos(angle) >= 0 else "WE"
    return "SO" if math.sin(angle) >= 0 else "NO"


def texture_x(hit: Hit, width: int, cell: int = BLOCK) -> int:
    """Texture column struck by the hit, for a texture ``width`` pixels wide."""
    wall_x = (hit.x if hit.side == 0 else hit.y) / cell
    wall_x -= math.floor(wall_x)
    return int(wall_x * width)