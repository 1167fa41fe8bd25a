"""
generator.py — anti-persistent DFS maze generator with braiding.

    maze = AdDfsMaze(20, 15, seed=42, history_window=50,
                     anti_persistence=0.8, braid_probability=0.08)
    maze.generate(0, 0)
    print(maze.render())

Random draws come from one random.Random owned by the instance, in this order
per carving step: sampler draw (only with 2+ candidates), braid trigger draw,
then the braid neighbor shuffle when the trigger fires.
"""

import logging
import math
import random
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .braid import BraidingPolicy
from .errors import MazeBoundsError, MazeConfigError, MazeStateError
from .grid import Direction, Grid
from .history import DirectionHistory
from .render import render_maze
from .sampler import AntiPersistenceSampler

logger = logging.getLogger(__name__)


class GeneratorState(Enum):
    READY = "ready"
    CARVING = "carving"
    BACKTRACK = "backtrack"
    DONE = "done"


class AdDfsMaze:
    def __init__(self, width: int, height: int, seed: int = 21,
                 history_window: int = 50, anti_persistence: float = 0.8,
                 braid_probability: float = 0.08):
        if width <= 0 or height <= 0:
            raise MazeConfigError("Dimensions must be positive")
        if history_window < 1:
            raise MazeConfigError("History window must be >= 1")
        if not math.isfinite(anti_persistence) or anti_persistence < 0:
            raise MazeConfigError("Anti-persistence must be non-negative")
        if not 0.0 <= braid_probability <= 1.0:
            raise MazeConfigError("Braid probability must be in [0, 1]")

        self.width = width
        self.height = height
        self.seed = seed
        self.history_window = history_window
        self.anti_persistence = anti_persistence
        self.braid_probability = braid_probability

        self.rng = random.Random(seed)
        self._grid = Grid(width, height)
        self.history = DirectionHistory(history_window)
        self.sampler = AntiPersistenceSampler(anti_persistence, self.history, self.rng)
        self.braider = BraidingPolicy(self._grid, self.rng)

        self.state = GeneratorState.READY
        self.entrance: Optional[Tuple[int, int]] = None
        self.exit: Optional[Tuple[int, int]] = None

    @classmethod
    def from_config(cls, config) -> "AdDfsMaze":
        return cls(config.width, config.height, config.seed,
                   config.history_window, config.anti_persistence,
                   config.braid_probability)

    # -------------------------
    # Generation
    # -------------------------

    def generate(self, start_x: int = 0, start_y: int = 0):
        if not self._grid.in_bounds(start_x, start_y):
            raise MazeBoundsError(f"Start position ({start_x}, {start_y}) out of bounds")
        if self.state is not GeneratorState.READY:
            raise MazeStateError("generate() may only be called once per maze")

        grid = self._grid
        grid.carve_cell(start_x, start_y)
        stack = [(start_x, start_y)]
        self.state = GeneratorState.CARVING

        while stack:
            x, y = stack[-1]
            candidates = grid.unvisited_directions(x, y)
            if not candidates:
                stack.pop()
                self.state = GeneratorState.BACKTRACK
                continue

            self.state = GeneratorState.CARVING
            d = self.sampler.choose(candidates)
            nx, ny = x + d.dx, y + d.dy
            grid.carve_passage(x, y, nx, ny)
            grid.carve_cell(nx, ny)
            stack.append((nx, ny))
            self.history.record(d)

            # braid at the leading edge of the walk, not the cell we came from
            if self.rng.random() < self.braid_probability:
                self.braider.attempt(nx, ny)

        self.state = GeneratorState.DONE
        logger.debug("generated %dx%d maze (seed=%s, braids=%d)",
                     self.width, self.height, self.seed, self.braider.opened)

    # -------------------------
    # Entrance / exit
    # -------------------------

    def set_entrance_exit(self, entrance_x: int, entrance_y: int, exit_x: int, exit_y: int):
        if not self._grid.in_bounds(entrance_x, entrance_y):
            raise MazeBoundsError(f"Entrance ({entrance_x}, {entrance_y}) out of bounds")
        if not self._grid.in_bounds(exit_x, exit_y):
            raise MazeBoundsError(f"Exit ({exit_x}, {exit_y}) out of bounds")
        self.entrance = (entrance_x, entrance_y)
        self.exit = (exit_x, exit_y)

    def open_boundary_entrance(self, cell_x: int, cell_y: int, direction) -> bool:
        """Open the outer wall beyond a border cell; silently ignored for inner cells."""
        if not self._grid.in_bounds(cell_x, cell_y):
            raise MazeBoundsError(f"Cell ({cell_x}, {cell_y}) out of bounds")
        direction = Direction.parse(direction)
        changed = self._grid.open_boundary(cell_x, cell_y, direction)
        if not changed:
            logger.debug("boundary (%d, %d) %s left unchanged", cell_x, cell_y, direction.name)
        return changed

    # -------------------------
    # Accessors
    # -------------------------

    @property
    def grid(self) -> np.ndarray:
        return self._grid.matrix

    def get_grid(self) -> np.ndarray:
        return self._grid.matrix

    @property
    def cells(self) -> Grid:
        return self._grid

    def is_visited(self, x: int, y: int) -> bool:
        return self._grid.is_visited(x, y)

    def visited_count(self) -> int:
        return self._grid.visited_count()

    def render(self, style="block", show_markers: bool = True) -> str:
        return render_maze(self, style=style, show_markers=show_markers)

    def __repr__(self):
        return (f"AdDfsMaze({self.width}x{self.height}, seed={self.seed}, "
                f"beta={self.anti_persistence}, k={self.history_window}, "
                f"p={self.braid_probability}, state={self.state.value})")
