"""
flappy: Single-player Flappy Bird simulation core with a pygame client.
"""

from .constants import GameConfig
from .data_models import Bird, Cloud, GameState, Pipe, Rect, WorldSnapshot
from .exceptions import ConfigurationError, FlappyError, InvariantError, SimulationError
from .game_engine import GameEngine
from .physics_core import PhysicsCore

__all__ = [
    "Bird",
    "Cloud",
    "ConfigurationError",
    "FlappyError",
    "GameConfig",
    "GameEngine",
    "GameState",
    "InvariantError",
    "PhysicsCore",
    "Pipe",
    "Rect",
    "SimulationError",
    "WorldSnapshot",
]
