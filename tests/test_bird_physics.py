"""Tests for bird physics: gravity, flaps, tilt and the collision box."""

import pytest

from flappy.constants import GRAVITY, JUMP_VELOCITY, MIN_TILT, MAX_TILT
from flappy.data_models import Bird, Rect


class TestIntegration:
    """Gravity integration."""

    def test_one_tick_from_rest(self):
        """From rest, one tick adds exactly GRAVITY to velocity and position."""
        bird = Bird(y=100.0)
        bird.integrate()

        assert bird.velocity == GRAVITY
        assert bird.y == 100.0 + GRAVITY

    def test_position_accumulates_velocity(self):
        """Position follows the discrete sum of velocities."""
        bird = Bird(y=0.0)
        for _ in range(4):
            bird.integrate()

        # 0.5 + 1.0 + 1.5 + 2.0
        assert bird.velocity == pytest.approx(2.0)
        assert bird.y == pytest.approx(5.0)

    def test_x_never_changes(self):
        """The bird only moves vertically."""
        bird = Bird(y=100.0)
        x = bird.x
        bird.flap()
        bird.integrate()
        assert bird.x == x


class TestFlap:
    """Flap is an absolute override of velocity."""

    @pytest.mark.parametrize("prior", [-20.0, -8.5, 0.0, 3.25, 40.0])
    def test_flap_ignores_prior_velocity(self, prior):
        """Velocity equals the jump constant regardless of what it was."""
        bird = Bird(y=100.0, velocity=prior)
        bird.flap()
        assert bird.velocity == JUMP_VELOCITY

    def test_flap_does_not_move_bird(self):
        """Flap changes velocity only; position moves on the next tick."""
        bird = Bird(y=100.0)
        bird.flap()
        assert bird.y == 100.0
        bird.integrate()
        assert bird.y == 100.0 + JUMP_VELOCITY + GRAVITY


class TestTilt:
    """Tilt is clamp(velocity * 3, -30, 70) after each tick."""

    def _tilt_at(self, velocity):
        bird = Bird(y=100.0, velocity=velocity - GRAVITY)
        bird.integrate()
        assert bird.velocity == pytest.approx(velocity)
        return bird.tilt

    def test_extreme_fall_clamps_high(self):
        assert self._tilt_at(1000.0) == MAX_TILT

    def test_extreme_climb_clamps_low(self):
        assert self._tilt_at(-1000.0) == MIN_TILT

    @pytest.mark.parametrize("velocity,expected", [
        (0.0, 0.0),
        (5.0, 15.0),
        (-5.0, -15.0),
        (-10.0, -30.0),
        (23.5, 70.0),
    ])
    def test_linear_region(self, velocity, expected):
        assert self._tilt_at(velocity) == pytest.approx(expected)

    def test_tilt_stays_in_range_during_a_fall(self):
        """Tilt never leaves [-30, 70] over a long flap-and-fall sequence."""
        bird = Bird(y=0.0)
        for i in range(300):
            if i % 40 == 0:
                bird.flap()
            bird.integrate()
            assert MIN_TILT <= bird.tilt <= MAX_TILT


class TestBoundingBox:
    """The collision box is inset from the drawn circle."""

    def test_box_is_inset_by_four(self):
        bird = Bird(y=100.0)
        assert bird.bounding_box() == Rect(84, 104, 22, 22)

    def test_box_follows_position(self):
        bird = Bird(y=100.0)
        bird.integrate()
        box = bird.bounding_box()
        assert box.y == pytest.approx(104.5)
        assert box.width == bird.size - 8
