"""Validation of the map grid and location of the player's start."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import BLOCK, PI, PLAYER_SIZ
from .scene import WHITESPACE, SceneError

_PLAYER_ELEMENTS = "NSEW"
_BONUS_ELEMENTS = " 01DP"
_ENCLOSING = " 1"
_DIRECTIONS = {"N": -PI / 2, "S": PI / 2, "E": 0.0, "W": PI}


@dataclass(frozen=True)
class PlayerStart:
    """The cell the player starts in, its pixel position and its heading."""

    row: int
    col: int
    x: float
    y: float
    angle: float


def direction_angle(element: str) -> float:
    """Heading in radians for a player element ``N``, ``S``, ``E`` or ``W``."""
    try:
        return _DIRECTIONS[element]
    except KeyError:
        raise ValueError(f"not a player direction: {element!r}") from None


def _is_null(grid: Sequence[Sequence[str]], i: int, j: int) -> bool:
    return i >= len(grid) or len(grid[i]) <= j


def _check_space(grid: Sequence[Sequence[str]], i: int, j: int) -> None:
    height = len(grid)
    neighbours = (
        (1, i < height - 1, i + 1, j),
        (2, i > 0, i - 1, j),
        (3, j > 0, i, j - 1),
        (4, True, i, j + 1),
    )
    for number, applies, row, col in neighbours:
        if applies and not _is_null(grid, row, col) and grid[row][col] not in _ENCLOSING:
            raise SceneError(f"The map is not closed ({number})")


def _check_element(
    cell: str, i: int, j: int, start: Optional[PlayerStart], bonus: bool
) -> Optional[PlayerStart]:
    if cell in _PLAYER_ELEMENTS:
        if start is not None:
            raise SceneError("There should be only one player")
        return PlayerStart(
            row=i,
            col=j,
            x=float(j * BLOCK + BLOCK // 2 - PLAYER_SIZ // 2),
            y=float(i * BLOCK + BLOCK // 2 - PLAYER_SIZ // 2),
            angle=direction_angle(cell),
        )
    if bonus:
        allowed = cell in _BONUS_ELEMENTS
    else:
        allowed = cell in "01" or cell in WHITESPACE
    if not allowed:
        raise SceneError("Unknown element in map")
    return start


def validate_map(grid: Sequence[Sequence[str]], bonus: bool = False) -> PlayerStart:
    """Check that the map is closed and holds exactly one player.

    With ``bonus`` the map may also hold doors (``D``) and sprites (``P``).
    Returns where and how the player starts.
    """
    height = len(grid)
    start: Optional[PlayerStart] = None
    for i, row in enumerate(grid):
        last = len(row) - 1
        for j, cell in enumerate(row):
            if cell == " ":
                _check_space(grid, i, j)
            on_border = i in (0, height - 1) or j in (0, last)
            if on_border and cell not in _ENCLOSING:
                raise SceneError("The map is not closed")
            if 0 < i < height - 1 and j > 0:
                start = _check_element(cell, i, j, start, bonus)
    if start is None:
        raise SceneError("There is no player")
    return start