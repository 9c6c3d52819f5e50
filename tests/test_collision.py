"""Tests for rectangle intersection and run-ending collisions."""

import pytest

from flappy.data_models import Bird, GameState, Pipe, Rect


class TestRect:
    """Standard intersects semantics."""

    def test_overlap_intersects(self):
        assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))

    def test_containment_intersects(self):
        assert Rect(0, 0, 100, 100).intersects(Rect(10, 10, 5, 5))
        assert Rect(10, 10, 5, 5).intersects(Rect(0, 0, 100, 100))

    @pytest.mark.parametrize("other", [
        Rect(10, 0, 10, 10),   # touching right edge
        Rect(-10, 0, 10, 10),  # touching left edge
        Rect(0, 10, 10, 10),   # touching bottom edge
        Rect(10, 10, 10, 10),  # touching corner
    ])
    def test_touching_edges_do_not_intersect(self, other):
        assert not Rect(0, 0, 10, 10).intersects(other)

    def test_empty_rect_never_intersects(self):
        assert not Rect(0, 0, 0, 10).intersects(Rect(-5, -5, 20, 20))
        assert not Rect(-5, -5, 20, 20).intersects(Rect(0, 0, 10, -1))


class TestCheckCollision:
    """PhysicsCore.check_collision reasons."""

    def test_open_sky_is_safe(self, engine):
        assert engine.check_collision(Bird(y=200.0), []) is None

    def test_ground(self, engine):
        # ground_y = 530; bottom edge must pass it strictly
        assert engine.check_collision(Bird(y=500.0), []) is None
        assert engine.check_collision(Bird(y=500.5), []) == "ground"

    def test_ceiling(self, engine):
        assert engine.check_collision(Bird(y=0.0), []) is None
        assert engine.check_collision(Bird(y=-0.5), []) == "ceiling"

    def test_bounds_checked_before_pipes(self, engine):
        pipe = Pipe(x=80.0, gap_y=300.0)
        assert engine.check_collision(Bird(y=-5.0), [pipe]) == "ceiling"

    def test_top_pipe_hit(self, engine):
        pipe = Pipe(x=80.0, gap_y=350.0)
        assert engine.check_collision(Bird(y=285.0), [pipe]) == "pipe"

    def test_bottom_pipe_hit(self, engine):
        pipe = Pipe(x=80.0, gap_y=100.0)  # bottom half starts at 250
        assert engine.check_collision(Bird(y=285.0), [pipe]) == "pipe"

    def test_bird_inside_gap_is_safe(self, engine):
        pipe = Pipe(x=80.0, gap_y=250.0)  # gap 250..400, box 289..311
        assert engine.check_collision(Bird(y=285.0), [pipe]) is None

    def test_drawn_sprite_overlap_is_forgiven(self, engine):
        """The sprite may overlap a pipe by less than the hitbox inset."""
        # Sprite spans x 80..110, box 84..106. Pipe starts at 108.
        pipe = Pipe(x=108.0, gap_y=350.0)
        assert engine.check_collision(Bird(y=285.0), [pipe]) is None

    def test_box_touching_pipe_edge_is_safe(self, engine):
        pipe = Pipe(x=106.0, gap_y=350.0)
        assert engine.check_collision(Bird(y=285.0), [pipe]) is None


class TestCollisionInEngine:
    """A collision ends the run on the tick it happens."""

    def test_covering_top_pipe_ends_run(self, playing_engine, hold_bird):
        engine = playing_engine
        hold_bird(engine)
        engine.score = 4
        engine.best_score = 2
        # After advancing by 3 the top half spans x 80..140, y 0..350,
        # covering the bird box (84..106, 289.5..311.5).
        engine.pipes.append(Pipe(x=83.0, gap_y=350.0))

        engine.tick()

        assert engine.state is GameState.GAME_OVER
        assert engine.best_score == 4
        assert engine.flash_alpha == 200

    def test_best_score_never_decreases(self, playing_engine, hold_bird):
        engine = playing_engine
        hold_bird(engine)
        engine.score = 4
        engine.best_score = 9
        engine.pipes.append(Pipe(x=83.0, gap_y=350.0))

        engine.tick()

        assert engine.state is GameState.GAME_OVER
        assert engine.best_score == 9

    def test_edge_contact_after_move_is_not_a_hit(self, playing_engine, hold_bird):
        engine = playing_engine
        hold_bird(engine)
        # Lands at x=24, trailing edge 84 touches the box's left edge.
        engine.pipes.append(Pipe(x=27.0, gap_y=350.0))

        engine.tick()

        assert engine.state is GameState.PLAYING
        assert engine.pipes[0].scored is False

    def test_ceiling_ends_run(self, playing_engine, hold_bird):
        engine = playing_engine
        hold_bird(engine, y=-5.0)
        engine.tick()
        assert engine.state is GameState.GAME_OVER

    def test_falling_without_input_hits_ground(self, playing_engine):
        """One flap from the start position, then a free fall to the ground."""
        engine = playing_engine
        ticks = 0
        while engine.state is GameState.PLAYING:
            engine.tick()
            ticks += 1

        assert ticks == 51
        assert engine.state is GameState.GAME_OVER
        assert engine.bird.y == pytest.approx(514.5)
        assert engine.pipes == []
