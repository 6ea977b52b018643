"""Dimensions, speeds, colours and key codes used throughout the game."""

from enum import IntEnum

PI = 3.14159265359

# Window
WIDTH = 1000
HEIGHT = 750
WALL_SIZ = 32
MARGIN = 2
MARGIN_DOOR = 7
SPRITE_SIZ = 64

# Minimap
BLOCK = 16
MAP_WIDTH = 160
MAP_HEIGHT = 120
MAX_BLOCK_W = 10
MAX_BLOCK_H = 7.5
FIX_MAP_X = 80
FIX_MAP_Y = 80

# Player
SPEED = 4
ROT_SPEED = 0.1
PLAYER_SIZ = 3

# Camera
FOV = 1.047197551
STEP = 0.02

# Colours
YELLOW = 0xF8C436
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
LIGHT_BLUE = 0x3BB2FA
MAGENTA = 0xFF00FF
WHITE = 0xFFFFFF
BLACK = 0x000000
GREY = 0xDDDDDD
DEFAULT_COLOR = YELLOW


class Key(IntEnum):
    """X11 key symbols the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    M = 109
    O = 111
    Q = 113
    T = 116
    ESC = 65307
    SPACE = 32
    KEY_Q_MAC = 16781520
    ENTER = 65293
    NUM_7 = 65429
    NUM_4 = 65430
    NUM_8 = 65431
    NUM_6 = 65432
    NUM_2 = 65433
    NUM_9 = 65434
    NUM_3 = 65435
    NUM_1 = 65436
    LEFT = 65361
    TOP = 65362
    RIGHT = 65363
    BOTTOM = 65364
    PAGE_UP = 65365
    PAGE_DOWN = 65366


class MouseButton(IntEnum):
    """Mouse button numbers."""

    LEFT_CLICK = 1
    SCROLL_CLICK = 2
    RIGHT_CLICK = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5