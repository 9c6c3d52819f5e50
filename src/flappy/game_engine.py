"""
game_engine.py: The authoritative single-player world simulation.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .constants import (
    GameConfig, GROUND_TILE, INITIAL_PIPE_SPEED, INITIAL_SPAWN_INTERVAL,
    MENU_BOB_STEP, MENU_BOB_AMPLITUDE, MENU_GROUND_SPEED, FLASH_ALPHA_MAX,
    FLASH_DECAY, CLOUD_LAYOUT
)
from .data_models import (
    Bird, Pipe, Cloud, GameState, BirdView, PipeView, CloudView, WorldSnapshot
)
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


def _initial_clouds() -> List[Cloud]:
    return [Cloud(x, y, speed, offset) for x, y, speed, offset in CLOUD_LAYOUT]


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the bird, the pipes and all counters, and advances them one frame
    per `tick()`. Input arrives through `activate()`, whose meaning depends
    on the current state.
    """
    config: GameConfig = field(default_factory=GameConfig)
    rng: Optional[random.Random] = None

    state: GameState = GameState.MENU
    bird: Optional[Bird] = None
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    best_score: int = 0
    pipe_speed: int = INITIAL_PIPE_SPEED
    spawn_interval: int = INITIAL_SPAWN_INTERVAL
    spawn_timer: int = 0

    # Ambient presentation state, no gameplay effect
    ground_offset: int = 0
    clouds: List[Cloud] = field(default_factory=_initial_clouds)
    menu_bob: float = 0.0
    flash_alpha: int = 0
    tick_count: int = 0

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        if self.bird is None:
            self.bird = Bird(y=self.config.bird_start_y)

        self._tick_handlers: Dict[GameState, Callable[[], None]] = {
            GameState.MENU: self._tick_menu,
            GameState.PLAYING: self._tick_playing,
            GameState.GAME_OVER: self._tick_game_over,
        }
        self._activate_handlers: Dict[GameState, Callable[[], None]] = {
            GameState.MENU: self._activate_menu,
            GameState.PLAYING: self._activate_playing,
            GameState.GAME_OVER: self._activate_game_over,
        }

    # ---------- Public API ----------

    def tick(self):
        """Advances the world by exactly one frame."""
        self.tick_count += 1

        # Ambient updates run in every state
        for cloud in self.clouds:
            cloud.drift(self.config.screen_width)
        if self.flash_alpha > 0:
            self.flash_alpha = max(0, self.flash_alpha - FLASH_DECAY)

        self._tick_handlers[self.state]()

    def activate(self):
        """Handles a jump / confirm input."""
        self._activate_handlers[self.state]()

    def run(self, frames: int):
        """Advances `frames` ticks. Non-positive counts do nothing."""
        for _ in range(max(0, frames)):
            self.tick()

    def medal(self) -> Optional[str]:
        return self.medal_for(self.score)

    def snapshot(self) -> WorldSnapshot:
        """Returns an immutable copy of everything a renderer needs."""
        bird = self.bird
        return WorldSnapshot(
            state=self.state,
            bird=BirdView(x=bird.x, y=bird.y, velocity=bird.velocity,
                          tilt=bird.tilt, size=bird.size,
                          bounds=bird.bounding_box()),
            pipes=tuple(
                PipeView(x=p.x, gap_y=p.gap_y, width=p.width, scored=p.scored,
                         top=p.top_bounds(), bottom=p.bottom_bounds())
                for p in self.pipes
            ),
            score=self.score,
            best_score=self.best_score,
            pipe_speed=self.pipe_speed,
            spawn_interval=self.spawn_interval,
            ground_offset=self.ground_offset,
            flash_alpha=self.flash_alpha,
            menu_bob=self.menu_bob,
            clouds=tuple(CloudView(x=c.x, y=c.y) for c in self.clouds),
            medal=self.medal(),
        )

    # ---------- Run lifecycle ----------

    def _reset_run(self):
        self.bird = Bird(y=self.config.bird_start_y)
        self.pipes = []
        self.score = 0
        self.pipe_speed = INITIAL_PIPE_SPEED
        self.spawn_interval = INITIAL_SPAWN_INTERVAL
        self.spawn_timer = 0
        self.flash_alpha = 0

    def _reset_to_menu(self):
        self._reset_run()
        self.ground_offset = 0
        self.menu_bob = 0.0
        self.state = GameState.MENU

    def _game_over(self, reason: str):
        self.state = GameState.GAME_OVER
        self.flash_alpha = FLASH_ALPHA_MAX
        self.best_score = max(self.best_score, self.score)
        logger.info("Game over (%s) at tick %d: score=%d best=%d",
                    reason, self.tick_count, self.score, self.best_score)

    # ---------- Tick handlers ----------

    def _tick_menu(self):
        self.menu_bob += MENU_BOB_STEP
        self.bird.y = self.config.bird_start_y + math.sin(self.menu_bob) * MENU_BOB_AMPLITUDE
        self.ground_offset = (self.ground_offset + MENU_GROUND_SPEED) % GROUND_TILE

    def _tick_playing(self):
        # 1. Bird physics
        self.bird.integrate()
        self.ground_offset = (self.ground_offset + self.pipe_speed) % GROUND_TILE

        # 2. Spawn
        self.spawn_timer += 1
        if self.spawn_timer >= self.spawn_interval:
            pipe = self.make_pipe()
            self.pipes.append(pipe)
            self.spawn_timer = 0
            logger.debug("Spawned pipe gap_y=%s at tick %d", pipe.gap_y, self.tick_count)

        # 3. Move and score pipes, then drop the ones that left the screen
        for pipe in self.pipes:
            pipe.advance(self.pipe_speed)
            if not pipe.scored and pipe.x + pipe.width < self.bird.x:
                pipe.scored = True
                self.score += 1
                self.pipe_speed, self.spawn_interval = self.step_difficulty(
                    self.score, self.pipe_speed, self.spawn_interval)
        self.pipes = [p for p in self.pipes if not p.is_offscreen()]

        # 4. Collisions
        reason = self.check_collision(self.bird, self.pipes)
        if reason is not None:
            self._game_over(reason)

    def _tick_game_over(self):
        # Frozen world; only the flash fades.
        pass

    # ---------- Activate handlers ----------

    def _activate_menu(self):
        self._reset_run()
        self.state = GameState.PLAYING
        self.bird.flap()
        logger.info("Run started (best=%d)", self.best_score)

    def _activate_playing(self):
        self.bird.flap()

    def _activate_game_over(self):
        self._reset_to_menu()
        logger.info("Back to menu")
