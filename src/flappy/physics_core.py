"""
physics_core.py: Deterministic pipe generation, difficulty and collision logic.
"""

import logging
import random
from typing import Iterable, Optional, Tuple

from .constants import (
    GameConfig, MIN_GAP_Y, MAX_PIPE_SPEED, SPEED_STEP_SCORE,
    MIN_SPAWN_INTERVAL, SPAWN_STEP_SCORE, SPAWN_INTERVAL_STEP, MEDALS
)
from .data_models import Bird, Pipe

logger = logging.getLogger(__name__)


class PhysicsCore:
    """
    Shared rules used by the game engine. Subclasses provide `config` and `rng`.
    """

    config: GameConfig
    rng: random.Random

    def sample_gap_y(self) -> int:
        """Uniform gap top in [MIN_GAP_Y, screen_height - 200], both ends inclusive."""
        return self.rng.randint(MIN_GAP_Y, self.config.max_gap_y)

    def make_pipe(self) -> Pipe:
        """Creates a new pipe at the right edge of the screen."""
        gap_y = self.sample_gap_y()
        return Pipe(x=float(self.config.screen_width), gap_y=float(gap_y),
                    screen_height=self.config.screen_height)

    def step_difficulty(self, score: int, speed: int, interval: int) -> Tuple[int, int]:
        """
        Returns (speed, interval) after `score` was just reached.
        Speed and spawn interval step on independent multiples of the score.
        """
        if score % SPEED_STEP_SCORE == 0 and speed < MAX_PIPE_SPEED:
            speed += 1
            logger.debug("Score %d: pipe speed -> %d", score, speed)
        if score % SPAWN_STEP_SCORE == 0 and interval > MIN_SPAWN_INTERVAL:
            interval -= SPAWN_INTERVAL_STEP
            logger.debug("Score %d: spawn interval -> %d", score, interval)
        return speed, interval

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe]) -> Optional[str]:
        """Returns "ground", "ceiling" or "pipe" for the first hit, else None."""

        # 1. Ground / ceiling
        if bird.y + bird.size > self.config.ground_y:
            return "ground"
        if bird.y < 0:
            return "ceiling"

        # 2. Pipes
        bounds = bird.bounding_box()
        for pipe in pipes:
            if bounds.intersects(pipe.top_bounds()) or bounds.intersects(pipe.bottom_bounds()):
                return "pipe"

        return None

    @staticmethod
    def medal_for(score: int) -> Optional[str]:
        for threshold, name in MEDALS:
            if score >= threshold:
                return name
        return None
