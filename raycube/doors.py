"""Doors: cells marked ``D`` (closed) or ``O`` (open) that the player can toggle."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TYPE_CHECKING, MutableSequence, Sequence

from .constants import BLOCK, MARGIN_DOOR, PLAYER_SIZ, SPEED

if TYPE_CHECKING:
    from .player import Player

CLOSED_DOOR = "D"
OPEN_DOOR = "O"


class DoorState(IntEnum):
    """What lies in front of the player."""

    NONE = 0
    CLOSED = 1
    OPEN = 2


def _cell_index(value: float) -> int:
    """Grid index of a pixel coordinate, truncating toward zero."""
    whole = int(value)
    if whole >= 0:
        return whole // BLOCK
    return -(-whole // BLOCK)


def _cell_at(grid: Sequence[Sequence[str]], x: float, y: float) -> str:
    """The map element under pixel ``(x, y)``, or an empty string outside the map."""
    row = _cell_index(y)
    col = _cell_index(x)
    if row < 0 or row >= len(grid):
        return ""
    line = grid[row]
    if col < 0 or col >= len(line):
        return ""
    return line[col]


def _set_cell(grid: MutableSequence, row: int, col: int, element: str) -> None:
    line = grid[row]
    if isinstance(line, str):
        grid[row] = line[:col] + element + line[col + 1 :]
    else:
        line[col] = element


def _any_corner_is(grid: Sequence[Sequence[str]], x: float, y: float, element: str) -> bool:
    points = (
        (x, y),
        (x - PLAYER_SIZ, y - PLAYER_SIZ),
        (x + PLAYER_SIZ, y - PLAYER_SIZ),
        (x + PLAYER_SIZ, y + PLAYER_SIZ),
        (x - PLAYER_SIZ, y + PLAYER_SIZ),
    )
    return any(_cell_at(grid, px, py) == element for px, py in points)


def is_door_open(grid: Sequence[Sequence[str]], x: float, y: float) -> bool:
    """Tell whether an open door lies under the player-sized square at ``(x, y)``."""
    return _any_corner_is(grid, x, y, OPEN_DOOR)


def is_door_closed(grid: Sequence[Sequence[str]], x: float, y: float) -> bool:
    """Tell whether a closed door lies under the player-sized square at ``(x, y)``."""
    return _any_corner_is(grid, x, y, CLOSED_DOOR)


def _probe_points(player: "Player"):
    dx = math.cos(player.angle) * SPEED
    dy = math.sin(player.angle) * SPEED
    for step in range(MARGIN_DOOR):
        yield player.x + dx * step, player.y + dy * step


def door_ahead(grid: Sequence[Sequence[str]], player: "Player") -> DoorState:
    """Look a few steps ahead of the player for a door."""
    for x, y in _probe_points(player):
        if is_door_open(grid, x, y):
            return DoorState.OPEN
        if is_door_closed(grid, x, y):
            return DoorState.CLOSED
    return DoorState.NONE


def toggle_door(grid: MutableSequence, player: "Player") -> DoorState:
    """Open or close the first door straight ahead of the player.

    Returns the door's new state, or ``DoorState.NONE`` if nothing changed.
    """
    for x, y in _probe_points(player):
        element = _cell_at(grid, x, y)
        if element == CLOSED_DOOR:
            _set_cell(grid, _cell_index(y), _cell_index(x), OPEN_DOOR)
            return DoorState.OPEN
        if element == OPEN_DOOR:
            _set_cell(grid, _cell_index(y), _cell_index(x), CLOSED_DOOR)
            return DoorState.CLOSED
    return DoorState.NONE