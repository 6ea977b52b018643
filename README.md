# raycube

raycube renders a walkable first-person view of a flat grid map by
raycasting: a pygame window shows textured walls over a floor and a
ceiling, with an optional minimap and an overview of the wall textures.
Levels are described in plain-text `.cub` scene files.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
raycube maps/level.cub
raycube --bonus maps/level.cub
```

Apart from `--bonus`, exactly one argument must be given: a readable file
whose name ends in `.cub`. No argument, too many, a wrong extension, a
missing file or a directory, and any error in the scene file, make the
program print `Error` and the reason on standard error and exit with
status 1. Quitting the game exits with status 0.

`--bonus` turns on doors (`D`), animated sprites (`P`) and a wider player
that collides earlier. In bonus mode two extra images are loaded from the
current working directory, `./textures/door2.xpm` and
`./sprite/sprites-cat-running.xpm`; if either cannot be opened the program
stops with `DOOR: Failed XPM to image` or `SPRITE: Failed XPM to image`.

## Controls

| Key            | Action                                   |
|----------------|------------------------------------------|
| W / S          | move forward / backward                  |
| A / D          | strafe left / right                      |
| Left / Right   | turn                                     |
| M              | show or hide the minimap (bottom left)   |
| T              | show or hide the four wall textures      |
| O              | open or close a door ahead (bonus only)  |
| Esc or Q       | quit                                     |

Closing the window quits as well.

## Scene files

A scene file first lists six elements, in any order, one per line; blank
lines among them are ignored and surrounding whitespace is stripped:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

* `NO`, `SO`, `WE`, `EA` give the wall texture for each compass face. The
  path must end in `.xpm` and each key may appear only once. Images are
  opened with Pillow, so the file must be in a format Pillow can read.
* `F` and `C` give the floor and ceiling colours as `R,G,B`: exactly two
  commas, each component an integer from 0 to 255. Each may appear only
  once.

Every line after the sixth element belongs to the map:

```
        1111111111
        1000000001
111111111011000001
100000000000000001
1111111110N0000001
        1111111111
```

* `1` is a wall, `0` is floor, a space is outside the map.
* Exactly one of `N`, `S`, `E`, `W` marks the start cell and the direction
  the player faces.
* The map must be closed: the first and last rows and the ends of every
  row may only hold walls or spaces, and every space may only touch walls
  or other spaces.
* Blank lines may come before the map, but not inside it or after it.

With `--bonus` the map may also hold `D` (a closed door) and `P` (a
sprite).

## Using the library

The parsing and checking steps work without opening a window:

```python
from raycube.scene import SceneError, read_scene
from raycube.mapcheck import validate_map

try:
    scene = read_scene("maps/level.cub")
    start = validate_map(scene.grid, bonus=False)
except SceneError as err:
    print(f"invalid scene: {err}")
else:
    print(scene.floor.rgb, start.row, start.col, start.angle)
```

* `raycube.scene`: `read_scene`, `parse_scene` (for text already in
  memory), `parse_color` (a single `F`/`C` line), `Scene`, `Color` and
  `SceneError`.
* `raycube.mapcheck`: `validate_map` returns a `PlayerStart`;
  `direction_angle` maps `N`/`S`/`E`/`W` to a heading.
* `raycube.player`: `Player` (position, heading, held keys, `move`) and
  `is_wall`.
* `raycube.doors`: `door_ahead`, `toggle_door` and `DoorState`.
* `raycube.raycast`: `cast_ray`, `cast_sprite_ray`, `wall_face`,
  `texture_x`, `fixed_dist` and the `Ray` and `Hit` records.
* `raycube.canvas`: `Canvas`, an in-memory RGB image, and `load_texture`.
* `raycube.render`: `render_frame`, `draw_wall`, `draw_minimap`,
  `draw_sprite_column`, `texture_layout`, `Textures` and
  `SpriteAnimation`.
* `raycube.game`: `Game`, which turns key codes (`raycube.constants.Key`)
  into player actions with `key_press`/`key_release`, draws a frame with
  `tick`, and raises `QuitRequested` on Esc or Q.

## What it does not do

raycube has no sound, no enemies, no shooting and no saved games; it only
lets the player walk a map, open doors and look at animated sprites.