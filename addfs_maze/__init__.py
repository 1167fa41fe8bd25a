"""
Anti-persistent DFS maze generator with braiding.
"""

from .config import PROFILE_CATALOG, AlgorithmProfile, MazeConfig
from .errors import MazeBoundsError, MazeConfigError, MazeError, MazeStateError
from .generator import AdDfsMaze, GeneratorState
from .grid import PASSAGE, WALL, Direction, Grid

__version__ = "1.0.0"

__all__ = [
    'AdDfsMaze',
    'GeneratorState',
    'Direction',
    'Grid',
    'WALL',
    'PASSAGE',
    'MazeConfig',
    'AlgorithmProfile',
    'PROFILE_CATALOG',
    'MazeError',
    'MazeConfigError',
    'MazeBoundsError',
    'MazeStateError',
]
