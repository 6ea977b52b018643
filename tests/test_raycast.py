import math

import pytest

from raycube.constants import BLOCK, PI, PLAYER_SIZ, SPRITE_SIZ, STEP
from raycube.player import Player
from raycube.raycast import (
    Hit,
    cast_ray,
    cast_sprite_ray,
    distance,
    fixed_dist,
    init_ray,
    texture_x,
    touches,
    wall_face,
)

GRID = ["11111", "10001", "10N01", "10001", "11111"]


def _player(angle=0.0):
    return Player(x=39.0, y=39.0, angle=angle)


def test_distance():
    assert distance(3.0, 4.0) == pytest.approx(5.0)
    assert distance(0.0, 0.0) == 0.0


def test_fixed_dist_straight_ahead_and_sideways():
    player = Player(x=0.0, y=0.0, angle=0.0)
    assert fixed_dist(player, 10.0, 0.0) == pytest.approx(10.0)
    assert fixed_dist(player, 0.0, 10.0) == pytest.approx(0.0, abs=1e-9)


def test_init_ray_east():
    player = _player()
    ray = init_ray(player, 0.0)
    assert ray.x == player.x + PLAYER_SIZ // 2
    assert ray.y == player.y + PLAYER_SIZ // 2
    assert ray.step_x == STEP
    assert ray.step_y == STEP
    assert ray.deltadist_x == pytest.approx(BLOCK)
    assert math.isinf(ray.deltadist_y)


def test_init_ray_west_steps_back():
    ray = init_ray(_player(), PI)
    assert ray.step_x == -STEP


def test_touches():
    assert touches(GRID, 8.0, 8.0)
    assert not touches(GRID, 24.0, 24.0)
    grid = ["1D1"]
    assert touches(grid, 24.0, 8.0, True)
    assert not touches(grid, 24.0, 8.0, False)


@pytest.mark.parametrize(
    "angle, face",
    [(0.0, "EA"), (PI, "WE"), (PI / 2, "SO"), (-PI / 2, "NO")],
)
def test_cast_ray_faces(angle, face):
    hit = cast_ray(GRID, _player(angle), angle)
    assert touches(GRID, hit.x, hit.y)
    assert wall_face(GRID, hit, angle) == face


@pytest.mark.parametrize("angle", [0.3, 1.2, 2.5, -0.7, -2.2])
def test_cast_ray_always_ends_in_wall(angle):
    hit = cast_ray(GRID, _player(angle), angle)
    assert touches(GRID, hit.x, hit.y)
    assert hit.side in (0, 1)


def test_trace_starts_at_ray_origin():
    points = []
    player = _player()
    cast_ray(GRID, player, 0.0, trace=lambda x, y: points.append((x, y)))
    assert points[0] == (player.x + PLAYER_SIZ // 2, player.y + PLAYER_SIZ // 2)
    assert all(b[0] > a[0] for a, b in zip(points, points[1:]))


def test_doors_stop_rays_only_in_bonus():
    grid = ["111111", "10N0D1", "111111"]
    player = Player(x=39.0, y=23.0, angle=0.0)
    plain = cast_ray(grid, player, 0.0)
    bonus = cast_ray(grid, player, 0.0, bonus=True)
    assert bonus.x < plain.x
    assert wall_face(grid, bonus, 0.0, bonus=True) == "DOOR"
    assert wall_face(grid, plain, 0.0, bonus=True) == "EA"


def test_sprite_ray():
    player = Player(x=39.0, y=23.0, angle=0.0)
    assert cast_sprite_ray(["111111", "100P01", "111111"], player, 0.0).sprite
    assert not cast_sprite_ray(["111111", "100001", "111111"], player, 0.0).sprite


def test_texture_x_on_cell_boundary_is_zero():
    assert texture_x(Hit(x=3.0 * BLOCK, y=5.0, side=0), 64) == 0


@pytest.mark.parametrize("side", [0, 1])
def test_texture_x_in_range(side):
    for value in (1.5, 17.25, 63.99, 100.0):
        hit = Hit(x=value, y=value, side=side)
        assert 0 <= texture_x(hit, 64) < 64
        assert 0 <= texture_x(hit, 512, SPRITE_SIZ) < 512