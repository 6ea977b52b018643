"""Reading of ``.cub`` scene descriptions: textures, colours and the map."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile
from pathlib import Path
from typing import Iterator

WHITESPACE = " \t\n\v\f\r"
TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
COLOR_KEYS = ("F", "C")

_DIGITS = "0123456789"
_LLONG_MIN_TEXT = "-9223372036854775808"
_LLONG_MAX_TEXT = "9223372036854775807"
_COLOR_MESSAGE = "Wrong color format: expect (R,G,B) in range [0, 255]"


class SceneError(Exception):
    """Raised when a scene description cannot be used."""


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in [0, 255]."""

    r: int
    g: int
    b: int

    @property
    def rgb(self) -> int:
        """The colour packed as 0xRRGGBB."""
        return (self.r << 16) | (self.g << 8) | self.b


@dataclass
class Scene:
    """Everything a scene file declares."""

    north: str
    south: str
    west: str
    east: str
    floor: Color
    ceiling: Color
    grid: list[str]

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def widths(self) -> list[int]:
        return [len(row) for row in self.grid]


def is_long_long(text: str) -> bool:
    """Tell whether ``text`` is short enough, and small enough, for a 64-bit integer."""
    if len(text) > len(_LLONG_MIN_TEXT):
        return False
    if len(text) == len(_LLONG_MIN_TEXT):
        if text[0] == "+":
            return is_long_long(text[1:])
        if text[0] != "-":
            return False
        return text[1:] <= _LLONG_MIN_TEXT[1:]
    if len(text) == len(_LLONG_MAX_TEXT):
        return text <= _LLONG_MAX_TEXT
    return True


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` is an optionally signed decimal integer fitting 64 bits.

    Leading whitespace is allowed, trailing whitespace is not.
    """
    if not text:
        return False
    body = text.lstrip(WHITESPACE)
    if not is_long_long(body):
        return False
    if body.startswith(("+", "-")):
        body = body[1:]
    return all(char in _DIGITS for char in body)


def _atoi(text: str) -> int:
    body = text.lstrip(WHITESPACE)
    sign = -1 if body.startswith("-") else 1
    if body.startswith(("+", "-")):
        body = body[1:]
    digits = "".join(takewhile(lambda char: char in _DIGITS, body))
    return sign * int(digits) if digits else 0


def strip_element_line(line: str) -> str:
    """Drop the line break and surrounding whitespace from an element line."""
    if line.endswith("\n"):
        line = line[:-1]
    return line.strip(WHITESPACE)


def parse_color(line: str) -> Color:
    """Parse an element line such as ``F 220,100,0`` into a colour."""
    if line.count(",") != 2:
        raise SceneError(_COLOR_MESSAGE)
    parts = [part for part in line[2:].split(",") if part]
    if len(parts) != 3 or not all(is_numeric(part) for part in parts):
        raise SceneError(_COLOR_MESSAGE)
    red, green, blue = (_atoi(part) for part in parts)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise SceneError(_COLOR_MESSAGE)
    return Color(red, green, blue)


def _lines(text: str) -> Iterator[str]:
    pieces = text.split("\n")
    for piece in pieces[:-1]:
        yield piece + "\n"
    if pieces[-1]:
        yield pieces[-1]


def _handle_element(line: str, textures: dict[str, str], colors: dict[str, Color]) -> None:
    if not line:
        return
    if line[:3] in tuple(f"{key} " for key in TEXTURE_KEYS):
        name = line[:2]
        if name in textures:
            raise SceneError("Duplicate texture")
        if not line.endswith(".xpm"):
            raise SceneError("Not .xpm extension file")
        textures[name] = line[3:].lstrip(WHITESPACE)
    elif line[:2] in tuple(f"{key} " for key in COLOR_KEYS):
        name = line[0]
        if name in colors:
            raise SceneError("Duplicate color")
        colors[name] = parse_color(line)
    else:
        raise SceneError("Invalid element")


def parse_scene(text: str) -> Scene:
    """Parse the contents of a scene file.

    The six elements come first, in any order; every later line belongs to
    the map. Blank lines are allowed before the map but not inside or after it.
    """
    textures: dict[str, str] = {}
    colors: dict[str, Color] = {}
    grid: list[str] | None = None
    for line in _lines(text):
        if len(textures) < len(TEXTURE_KEYS) or len(colors) < len(COLOR_KEYS):
            _handle_element(strip_element_line(line), textures, colors)
            continue
        if grid is None:
            grid = []
        if line.strip(WHITESPACE):
            grid.append(line[:-1] if line.endswith("\n") else line)
        elif grid:
            raise SceneError("Invalid map")
    if any(key not in textures for key in TEXTURE_KEYS):
        raise SceneError("Missing texture")
    if any(key not in colors for key in COLOR_KEYS):
        raise SceneError("Missing color")
    if not grid:
        raise SceneError("No map in the file")
    return Scene(
        north=textures["NO"],
        south=textures["SO"],
        west=textures["WE"],
        east=textures["EA"],
        floor=colors["F"],
        ceiling=colors["C"],
        grid=grid,
    )


def read_scene(path: str | Path) -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise SceneError("Can't open file") from exc
    return parse_scene(text)