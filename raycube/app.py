"""Command line entry: check the argument, load the scene and run the window."""

from __future__ import annotations

import os
import sys
from array import array
from pathlib import Path
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .canvas import Canvas, load_texture  # noqa: E402
from .constants import HEIGHT, MAP_HEIGHT, WIDTH, Key  # noqa: E402
from .game import Game, QuitRequested  # noqa: E402
from .mapcheck import validate_map  # noqa: E402
from .player import Player  # noqa: E402
from .render import SpriteAnimation, Textures, texture_layout  # noqa: E402
from .scene import SceneError, read_scene  # noqa: E402

DOOR_TEXTURE = "./textures/door2.xpm"
SPRITE_TEXTURE = "./sprite/sprites-cat-running.xpm"
BONUS_FLAG = "--bonus"
TITLE = "raycube"
FRAME_RATE = 60

_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_m: Key.M,
    pygame.K_o: Key.O,
    pygame.K_q: Key.Q,
    pygame.K_t: Key.T,
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.TOP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.BOTTOM,
    pygame.K_PAGEUP: Key.PAGE_UP,
    pygame.K_PAGEDOWN: Key.PAGE_DOWN,
}


def check_arg(argv: Sequence[str]) -> Path:
    """Check that exactly one readable ``.cub`` file was given and return its path."""
    args = list(argv)
    if len(args) != 1:
        raise SceneError("Incorrect number of arguments")
    name = args[0]
    if not name.endswith(".cub"):
        raise SceneError("Wrong file format: a .cub is expected!")
    path = Path(name)
    if path.is_dir():
        raise SceneError("Can't read a directory")
    try:
        with open(path, "rb"):
            pass
    except IsADirectoryError as exc:
        raise SceneError("Can't read a directory") from exc
    except OSError as exc:
        raise SceneError("Can't open file") from exc
    return path


def _load_extra(path: str, label: str) -> Canvas:
    try:
        return load_texture(path)
    except SceneError as exc:
        raise SceneError(f"{label}: Failed XPM to image") from exc


def _load_game(path: Path, bonus: bool) -> Game:
    scene = read_scene(path)
    north, south, west, east = (
        load_texture(name) for name in (scene.north, scene.south, scene.west, scene.east)
    )
    start = validate_map(scene.grid, bonus)
    textures = Textures(
        north=north,
        south=south,
        west=west,
        east=east,
        floor=scene.floor,
        ceiling=scene.ceiling,
    )
    animation = None
    if bonus:
        textures.door = _load_extra(DOOR_TEXTURE, "DOOR")
        textures.sprite = _load_extra(SPRITE_TEXTURE, "SPRITE")
        animation = SpriteAnimation()
    return Game(
        grid=list(scene.grid),
        player=Player.from_start(start),
        textures=textures,
        bonus=bonus,
        animation=animation,
    )


def _surface(canvas: Canvas) -> "pygame.Surface":
    # 0xRRGGBB packed into 0xFFBBGGRR so that little-endian bytes read R, G, B, A.
    data = array(
        "I",
        (
            0xFF000000 | ((pixel & 0xFF) << 16) | (pixel & 0xFF00) | (pixel >> 16)
            for pixel in canvas.pixels
        ),
    )
    if sys.byteorder == "big":
        data.byteswap()
    surface = pygame.image.frombuffer(data.tobytes(), (canvas.width, canvas.height), "RGBA")
    return surface.copy()


def _run(game: Game) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        walls = game.textures
        overview = [
            (_surface(image), texture_layout(walls)[face])
            for face, image in (
                ("NO", walls.north),
                ("SO", walls.south),
                ("EA", walls.east),
                ("WE", walls.west),
            )
        ]
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                key = _KEYS.get(getattr(event, "key", None))
                if key is None:
                    continue
                if event.type == pygame.KEYDOWN:
                    game.key_press(key)
                elif event.type == pygame.KEYUP:
                    game.key_release(key)
            game.tick()
            screen.blit(_surface(game.canvas), (0, 0))
            if game.map_show:
                screen.blit(_surface(game.minimap), (0, HEIGHT - MAP_HEIGHT))
            if game.tex_show:
                for surface, position in overview:
                    screen.blit(surface, position)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    except QuitRequested:
        return 0
    finally:
        pygame.quit()


def _report(error: Exception) -> None:
    print("Error", file=sys.stderr)
    print(error, file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the scene file named on the command line.

    ``--bonus`` enables doors, sprites and the wider player.
    Returns the process exit status.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = BONUS_FLAG in args
    args = [arg for arg in args if arg != BONUS_FLAG]
    try:
        path = check_arg(args)
        game = _load_game(path, bonus)
    except SceneError as exc:
        _report(exc)
        return 1
    return _run(game)


if __name__ == "__main__":
    sys.exit(main())