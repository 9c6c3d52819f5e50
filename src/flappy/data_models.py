"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .constants import (
    BIRD_X, BIRD_SIZE, BIRD_HITBOX_INSET, GRAVITY, JUMP_VELOCITY,
    TILT_FACTOR, MIN_TILT, MAX_TILT, PIPE_WIDTH, PIPE_GAP, SCREEN_HEIGHT,
    CLOUD_WRAP_X
)
from .exceptions import InvariantError


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle. Touching edges do not intersect."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersects(self, other: "Rect") -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return (self.x < other.right and other.x < self.right
                and self.y < other.bottom and other.y < self.bottom)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass
class Bird:
    """The player-controlled bird. Only `y`, `velocity` and `tilt` change."""
    y: float = SCREEN_HEIGHT / 2 - BIRD_SIZE / 2
    velocity: float = 0.0
    tilt: float = 0.0
    x: float = BIRD_X
    size: int = BIRD_SIZE

    def flap(self):
        """Sets the upward velocity. Overrides, never adds to, the current velocity."""
        self.velocity = JUMP_VELOCITY

    def integrate(self):
        """Advances one tick of gravity and recomputes the tilt."""
        self.velocity += GRAVITY
        self.y += self.velocity
        self.tilt = clamp(self.velocity * TILT_FACTOR, MIN_TILT, MAX_TILT)

    def bounding_box(self) -> Rect:
        # Smaller than the drawn circle so grazes are forgiven.
        inset = BIRD_HITBOX_INSET
        return Rect(self.x + inset, self.y + inset,
                    self.size - 2 * inset, self.size - 2 * inset)


@dataclass
class Pipe:
    """A scrolling pipe pair with a gap between `gap_y` and `gap_y + gap`."""
    x: float
    gap_y: float
    screen_height: int = SCREEN_HEIGHT
    scored: bool = False
    width: int = PIPE_WIDTH
    gap: int = PIPE_GAP

    def __post_init__(self):
        if self.gap_y < 0 or self.gap_y + self.gap > self.screen_height:
            raise InvariantError(
                f"Pipe gap [{self.gap_y}, {self.gap_y + self.gap}] "
                f"outside screen height {self.screen_height}")

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap

    def advance(self, speed: int):
        self.x -= speed

    def top_bounds(self) -> Rect:
        return Rect(self.x, 0, self.width, self.gap_y)

    def bottom_bounds(self) -> Rect:
        return Rect(self.x, self.gap_bottom, self.width,
                    self.screen_height - self.gap_bottom)

    def is_offscreen(self) -> bool:
        return self.x + self.width < 0


@dataclass
class Cloud:
    """Decorative cloud drifting left and wrapping past the right edge."""
    x: float
    y: float
    speed: float
    respawn_offset: float

    def drift(self, screen_width: int):
        self.x -= self.speed
        if self.x < CLOUD_WRAP_X:
            self.x = screen_width + self.respawn_offset


# ---------- Render snapshots ----------

@dataclass(frozen=True)
class BirdView:
    x: float
    y: float
    velocity: float
    tilt: float
    size: int
    bounds: Rect


@dataclass(frozen=True)
class PipeView:
    x: float
    gap_y: float
    width: int
    scored: bool
    top: Rect
    bottom: Rect


@dataclass(frozen=True)
class CloudView:
    x: float
    y: float


@dataclass(frozen=True)
class WorldSnapshot:
    """Immutable view of the world handed to the renderer."""
    state: GameState
    bird: BirdView
    pipes: Tuple[PipeView, ...]
    score: int
    best_score: int
    pipe_speed: int
    spawn_interval: int
    ground_offset: int
    flash_alpha: int
    menu_bob: float
    clouds: Tuple[CloudView, ...] = field(default_factory=tuple)
    medal: Optional[str] = None

    def to_client_state(self) -> dict:
        """Prepares a minimal, JSON-friendly dictionary of the snapshot."""
        return {
            "state": self.state.value,
            "bird": {
                "y": round(self.bird.y, 2),
                "v": round(self.bird.velocity, 2),
                "tilt": round(self.bird.tilt, 2),
            },
            "pipes": [
                {"x": round(p.x, 2), "gap_y": round(p.gap_y, 2), "scored": p.scored}
                for p in self.pipes
            ],
            "score": self.score,
            "best": self.best_score,
            "medal": self.medal,
        }
