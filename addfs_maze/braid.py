"""
braid.py — open one extra wall from a freshly carved cell to a visited neighbor.

A candidate wall is rejected when opening it would complete a fully open 2x2
block of matrix positions. The check only looks at the grid as it stands now.
"""

import logging
import random
from typing import Optional, Tuple

from .grid import PASSAGE, WALL, Grid

logger = logging.getLogger(__name__)


def creates_2x2_opening(matrix, wall_row: int, wall_col: int) -> bool:
    """Would opening (wall_row, wall_col) leave some 2x2 window all PASSAGE?"""
    rows, cols = matrix.shape
    for top in (wall_row - 1, wall_row):
        for left in (wall_col - 1, wall_col):
            if top < 0 or left < 0 or top + 1 >= rows or left + 1 >= cols:
                continue
            open_count = 0
            for r in (top, top + 1):
                for c in (left, left + 1):
                    if (r, c) == (wall_row, wall_col) or matrix[r, c] == PASSAGE:
                        open_count += 1
            if open_count == 4:
                return True
    return False


class BraidingPolicy:
    def __init__(self, grid: Grid, rng: random.Random):
        self.grid = grid
        self.rng = rng
        self.opened = 0

    def attempt(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """
        Try to open one wall between (x, y) and a visited neighbor.
        Returns the opened (row, col), or None when nothing qualified.
        """
        grid = self.grid
        dirs = grid.visited_directions(x, y)
        if not dirs:
            return None

        self.rng.shuffle(dirs)
        for d in dirs:
            row, col = grid.wall_between(x, y, x + d.dx, y + d.dy)
            if grid.matrix[row, col] != WALL:
                continue
            if creates_2x2_opening(grid.matrix, row, col):
                continue
            grid.open_wall(row, col)
            self.opened += 1
            return row, col

        logger.debug("braid at (%d, %d): no wall qualified", x, y)
        return None
