"""Drawing a frame: walls, sprites, the minimap and the texture overview."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .canvas import Canvas
from .constants import (
    BLOCK,
    BLUE,
    FOV,
    GREEN,
    GREY,
    PLAYER_SIZ,
    RED,
    SPRITE_SIZ,
    WALL_SIZ,
    WHITE,
)
from .player import Player
from .raycast import Hit, cast_ray, cast_sprite_ray, fixed_dist, texture_x, wall_face
from .scene import Color

_MIN_DISTANCE = 1e-6
_TRANSPARENT = (WHITE, GREY)


@dataclass
class Textures:
    """The images and colours a frame is painted with."""

    north: Canvas
    south: Canvas
    west: Canvas
    east: Canvas
    floor: Color
    ceiling: Color
    door: Optional[Canvas] = None
    sprite: Optional[Canvas] = None

    def _for_face(self, face: str) -> Canvas:
        if face == "DOOR":
            if self.door is None:
                raise ValueError("no door texture loaded")
            return self.door
        return {"NO": self.north, "SO": self.south, "WE": self.west, "EA": self.east}[face]


@dataclass
class SpriteAnimation:
    """A sprite sheet of frames laid out four per row, two rows high."""

    width: int = 512
    height: int = 256
    num_frames: int = 8
    num: int = 0

    def offsets(self) -> tuple[int, int]:
        """Pixel offset ``(x, y)`` of the current frame in the sheet."""
        add_h = self.height if self.num >= 4 else 0
        add_w = self.num % 4 * self.width
        return add_w, add_h

    def advance(self) -> None:
        """Move to the next frame, wrapping after the last one."""
        self.num += 1
        if self.num == self.num_frames:
            self.num = 0


def _projected_height(size: float, canvas: Canvas, hit: Hit, player: Player) -> float:
    dist = max(fixed_dist(player, hit.x, hit.y), _MIN_DISTANCE)
    return size / dist * (canvas.width // 2)


def draw_wall(canvas: Canvas, texture: Canvas, hit: Hit, player: Player, x: int) -> None:
    """Paint column ``x`` with the textured wall the ray hit."""
    height = _projected_height(WALL_SIZ, canvas, hit, player)
    start_y = int((canvas.height - height) / 2)
    end = int(start_y + height)
    step = texture.height / height
    column = texture_x(hit, texture.width)
    last_row = texture.height - 1
    for y in range(max(start_y, 0), min(end, canvas.height)):
        tex_y = min(int((y - start_y) * step), last_row)
        canvas.put_pixel(x, y, texture.get_pixel(column, tex_y))


def draw_player_marker(minimap: Canvas, x: float, y: float, color: int) -> None:
    """A small square for the player on the minimap."""
    left = int(x)
    top = int(y)
    for col in range(left, left + PLAYER_SIZ):
        for row in range(top, top + PLAYER_SIZ):
            if col < minimap.width and row < minimap.height:
                minimap.put_pixel(col, row, color)


def _draw_square(minimap: Canvas, x: int, y: int, color: int) -> None:
    for offset in range(BLOCK):
        minimap.put_pixel(x + offset, y, color)
        minimap.put_pixel(x, y + offset, color)
        minimap.put_pixel(x + BLOCK, y + offset, color)
        minimap.put_pixel(x + offset, y + BLOCK, color)


def _full_square(minimap: Canvas, x: int, y: int, color: int) -> None:
    for dy in range(BLOCK):
        for dx in range(BLOCK):
            minimap.put_pixel(x + dx, y + dy, color)


def draw_minimap(
    minimap: Canvas, grid: Sequence[Sequence[str]], player: Player, bonus: bool = False
) -> None:
    """Draw the walls around the player, and with ``bonus`` the closed doors."""
    x0 = player.x0
    y0 = player.y0
    draw_player_marker(minimap, player.x - x0, player.y - y0, GREEN)
    for i in range(y0 // BLOCK, len(grid)):
        row = grid[i]
        for j in range(x0 // BLOCK, len(row)):
            left = j * BLOCK - x0
            top = i * BLOCK - y0
            if row[j] == "1":
                _draw_square(minimap, left, top, BLUE)
            elif bonus and row[j] == "D":
                _full_square(minimap, left, top, GREY)


def draw_sprite_column(
    canvas: Canvas,
    texture: Canvas,
    animation: SpriteAnimation,
    hit: Hit,
    player: Player,
    x: int,
) -> None:
    """Paint column ``x`` with the current sprite frame if the ray met a sprite."""
    if not hit.sprite:
        return
    height = _projected_height(SPRITE_SIZ, canvas, hit, player)
    start_y = int((canvas.height - height) / 2)
    step = (animation.height - 1) / height
    add_w, add_h = animation.offsets()
    column = texture_x(replace(hit, side=0), texture.width, SPRITE_SIZ) % animation.width + add_w
    end = min(canvas.height, int((canvas.height - height) / 2 + int(height)))
    for y in range(max(start_y, 0), end):
        tex_y = add_h + (y - start_y) * step
        color = texture.get_pixel(column, int(tex_y))
        if color not in _TRANSPARENT:
            canvas.put_pixel(x, y, color)


def texture_layout(textures: Textures) -> dict[str, tuple[int, int]]:
    """Window positions of the four wall textures, arranged as a compass."""
    north, south, west, east = textures.north, textures.south, textures.west, textures.east
    width = max(north.width, south.width)
    height = max(east.height, west.height)
    return {
        "NO": (west.width, 0),
        "SO": (west.width, height + north.height),
        "EA": (width + west.width, north.height),
        "WE": (0, north.height),
    }


def render_frame(
    canvas: Canvas,
    minimap: Canvas,
    grid: Sequence[Sequence[str]],
    player: Player,
    textures: Textures,
    bonus: bool = False,
    animation: Optional[SpriteAnimation] = None,
) -> None:
    """Move the player, then draw the view and the minimap for one frame."""
    player.move(grid, bonus)
    canvas.clear()
    minimap.clear()
    canvas.fill_background(textures.floor, textures.ceiling)
    if not bonus:
        draw_minimap(minimap, grid, player, bonus)

    fraction = FOV / canvas.width if canvas.width else 0.0
    trace_every = max(1, canvas.width // 10)

    def trace(ray_x: float, ray_y: float) -> None:
        minimap.put_pixel(ray_x - player.x0, ray_y - player.y0, RED)

    ray_angle = player.angle - FOV / 2
    for x in range(canvas.width):
        hit = cast_ray(grid, player, ray_angle, bonus, trace if x % trace_every == 0 else None)
        face = wall_face(grid, hit, ray_angle, bonus)
        draw_wall(canvas, textures._for_face(face), hit, player, x)
        ray_angle += fraction

    if bonus:
        if textures.sprite is not None and animation is not None:
            ray_angle = player.angle - FOV / 2
            for x in range(canvas.width):
                hit = cast_sprite_ray(grid, player, ray_angle)
                draw_sprite_column(canvas, textures.sprite, animation, hit, player, x)
                ray_angle += fraction
        draw_minimap(minimap, grid, player, bonus)

    if animation is not None:
        animation.advance()