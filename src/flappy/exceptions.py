"""
exceptions.py: Exception hierarchy for the game core.
"""


class FlappyError(Exception):
    """Root of all game exceptions."""


class ConfigurationError(FlappyError):
    """Invalid game configuration."""


class SimulationError(FlappyError):
    """Errors raised while advancing the simulation."""


class InvariantError(SimulationError):
    """A world invariant was broken (e.g. a pipe gap outside the screen)."""
