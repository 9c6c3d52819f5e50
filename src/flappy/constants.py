"""
constants.py: Centralized configuration for game and client settings.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

# -------- Screen Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
GROUND_HEIGHT = 70              # Ground band at the bottom of the screen
GROUND_TILE = 24                # Period of the scrolling grass pattern

# -------- Bird Config --------
BIRD_X = 80                     # Fixed bird X position
BIRD_SIZE = 30                  # Bounding diameter of the drawn bird
BIRD_HITBOX_INSET = 4           # Collision box is inset this much on each side

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.5
JUMP_VELOCITY = -8.5            # Absolute velocity after a flap
TILT_FACTOR = 3.0
MIN_TILT = -30.0
MAX_TILT = 70.0

# -------- Pipe Config --------
PIPE_WIDTH = 60
PIPE_GAP = 150
MIN_GAP_Y = 80
GAP_BOTTOM_MARGIN = 200         # max gap top = screen height - margin

# -------- Difficulty Config --------
INITIAL_PIPE_SPEED = 3
MAX_PIPE_SPEED = 6
SPEED_STEP_SCORE = 5            # +1 speed every 5 points
INITIAL_SPAWN_INTERVAL = 100    # ticks
MIN_SPAWN_INTERVAL = 70
SPAWN_STEP_SCORE = 10           # -5 ticks every 10 points
SPAWN_INTERVAL_STEP = 5

# -------- Ambient Config --------
MENU_BOB_STEP = 0.05
MENU_BOB_AMPLITUDE = 15
MENU_GROUND_SPEED = 2
FLASH_ALPHA_MAX = 200
FLASH_DECAY = 15
CLOUD_WRAP_X = -80
# (x, y, speed, respawn offset past the right edge)
CLOUD_LAYOUT = (
    (50.0, 60.0, 0.5, 20.0),
    (200.0, 120.0, 0.3, 40.0),
    (340.0, 40.0, 0.4, 10.0),
)

# -------- Medal thresholds (score, name), highest first --------
MEDALS = (
    (30, "gold"),
    (20, "silver"),
    (10, "bronze"),
)

# -------- Client Config --------
RENDER_FPS = 60


@dataclass(frozen=True)
class GameConfig:
    """Per-engine settings. Validated on construction."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    seed: Optional[int] = None

    def __post_init__(self):
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ConfigurationError(
                f"Screen must be positive, got {self.screen_width}x{self.screen_height}")
        if self.max_gap_y < MIN_GAP_Y:
            raise ConfigurationError(
                f"Screen height {self.screen_height} leaves no room for a pipe gap")

    @property
    def ground_y(self) -> int:
        return self.screen_height - GROUND_HEIGHT

    @property
    def max_gap_y(self) -> int:
        return self.screen_height - GAP_BOTTOM_MARGIN

    @property
    def bird_start_y(self) -> float:
        return self.screen_height / 2 - BIRD_SIZE / 2

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Builds a config, taking the RNG seed from FLAPPY_SEED if set."""
        raw_seed = os.getenv("FLAPPY_SEED")
        if raw_seed is None or raw_seed == "":
            return cls()
        try:
            seed = int(raw_seed)
        except ValueError as e:
            raise ConfigurationError(f"FLAPPY_SEED must be an integer, got {raw_seed!r}") from e
        return cls(seed=seed)
