"""
errors.py — exception types raised by the maze generator.
"""


class MazeError(Exception):
    """Base class for every error the generator raises on purpose."""


class MazeConfigError(MazeError, ValueError):
    """Invalid construction parameters (dimensions, window, beta, braid p)."""


class MazeBoundsError(MazeError, IndexError):
    """A cell coordinate handed to a public call lies outside the maze."""


class MazeStateError(MazeError, RuntimeError):
    """Operation not allowed in the generator's current state."""
