import math

import pytest

from raycube.constants import MARGIN, PI, PLAYER_SIZ, ROT_SPEED, SPEED
from raycube.mapcheck import PlayerStart, validate_map
from raycube.player import Player, is_wall

GRID = ["11111", "10001", "10N01", "10001", "11111"]


def test_from_start_copies_position_and_heading():
    start = validate_map(GRID)
    player = Player.from_start(start)
    assert (player.x, player.y, player.angle) == (start.x, start.y, start.angle)
    assert (player.x0, player.y0) == (0, 0)


def test_from_start_minimap_origin_follows_far_position():
    start = PlayerStart(row=0, col=0, x=200.0, y=50.0, angle=0.0)
    player = Player.from_start(start)
    assert player.x0 == 120
    assert player.y0 == 0


def test_default_player_is_unplaced():
    player = Player()
    assert player.x == -1.0 and player.y == -1.0
    assert player.angle == pytest.approx(PI / 2)


def test_next_position_without_keys_stays():
    player = Player(x=39.0, y=39.0, angle=0.0)
    assert player.next_position() == (39.0, 39.0)


def test_next_position_forward_and_back():
    player = Player(x=39.0, y=39.0, angle=0.0, key_up=True)
    x, y = player.next_position()
    assert x == pytest.approx(39.0 + SPEED)
    assert y == pytest.approx(39.0)
    player = Player(x=39.0, y=39.0, angle=0.0, key_down=True)
    x, _ = player.next_position()
    assert x == pytest.approx(39.0 - SPEED)


def test_forward_key_takes_priority():
    player = Player(x=39.0, y=39.0, angle=0.0, key_up=True, key_down=True)
    assert player.next_position()[0] == pytest.approx(39.0 + SPEED)


def test_strafe_is_perpendicular():
    player = Player(x=39.0, y=39.0, angle=0.0, key_left=True)
    x, y = player.next_position()
    assert x == pytest.approx(39.0)
    assert y == pytest.approx(39.0 - SPEED)


def test_update_angle_rotates():
    player = Player(angle=1.0, left_rotate=True)
    player.update_angle()
    assert player.angle == pytest.approx(1.0 - ROT_SPEED)
    player = Player(angle=1.0, right_rotate=True)
    player.update_angle()
    assert player.angle == pytest.approx(1.0 + ROT_SPEED)


def test_update_angle_wraps():
    player = Player(angle=2 * PI + 0.05)
    player.update_angle()
    assert player.angle == pytest.approx(0.05)
    player = Player(angle=-2 * PI - 0.05)
    player.update_angle()
    assert player.angle == pytest.approx(-0.05)


def test_is_wall_outside_and_inside():
    assert is_wall(GRID, -1.0, 39.0)
    assert is_wall(GRID, 39.0, -0.5)
    assert not is_wall(GRID, 39.0, 39.0)
    assert is_wall(GRID, 8.0, 8.0)


def test_is_wall_bonus_uses_wider_margin():
    x = 16 + PLAYER_SIZ - 1
    assert x - MARGIN >= 16
    assert not is_wall(GRID, x, 39.0, False)
    assert is_wall(GRID, x, 39.0, True)


def test_is_wall_bonus_closed_door_blocks():
    grid = ["11111", "10D01", "11111"]
    assert is_wall(grid, 40.0, 24.0, True)
    assert not is_wall(grid, 40.0, 24.0, False)


def test_move_steps_then_stops_at_wall():
    player = Player(x=23.0, y=39.0, angle=PI, key_up=True)
    assert player.move(GRID)
    assert player.x == pytest.approx(23.0 - SPEED)
    before = (player.x, player.y)
    assert not player.move(GRID)
    assert (player.x, player.y) == before


def test_move_updates_angle_even_when_blocked():
    player = Player(x=20.0, y=39.0, angle=PI, key_up=True, left_rotate=True)
    player.move(GRID)
    assert player.angle == pytest.approx(PI - ROT_SPEED)
    assert math.isfinite(player.x)