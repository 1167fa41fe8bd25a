"""
grid.py — wall/passage matrix and cell addressing.

Cell (x, y) lives at matrix position (row=2y+1, col=2x+1). The position
between two adjacent cells is the wall joining them; the outermost rows and
columns are the maze border.
"""

from enum import Enum
from typing import Iterator, List, Tuple

import numpy as np

WALL = 1
PASSAGE = 0


class Direction(Enum):
    # Iteration order is UP, DOWN, LEFT, RIGHT and fixes the candidate order.
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def __init__(self, dx: int, dy: int):
        self.dx = dx
        self.dy = dy

    @property
    def index(self) -> int:
        return _DIR_INDEX[self]

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept a Direction or a case-insensitive name such as 'up'."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            names = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"Unknown direction: {value!r}. Available: {names}") from None


DIR_ORDER: Tuple[Direction, ...] = tuple(Direction)
_DIR_INDEX = {d: i for i, d in enumerate(DIR_ORDER)}


class Grid:
    """(2*height+1) x (2*width+1) matrix of WALL/PASSAGE plus a visited mask."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.rows = 2 * height + 1
        self.cols = 2 * width + 1
        self.matrix = np.full((self.rows, self.cols), WALL, dtype=np.uint8)
        self.visited = np.zeros((height, width), dtype=bool)

    # -------------------------
    # Addressing
    # -------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def in_matrix(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @staticmethod
    def cell_pos(x: int, y: int) -> Tuple[int, int]:
        return 2 * y + 1, 2 * x + 1

    def wall_between(self, x1: int, y1: int, x2: int, y2: int) -> Tuple[int, int]:
        """Matrix (row, col) of the wall joining two 4-adjacent cells."""
        if abs(x1 - x2) + abs(y1 - y2) != 1:
            raise ValueError(f"Cells ({x1}, {y1}) and ({x2}, {y2}) are not adjacent")
        return y1 + y2 + 1, x1 + x2 + 1

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[Direction, int, int]]:
        """Yield (direction, nx, ny) for in-bounds neighbors in DIR_ORDER."""
        for d in DIR_ORDER:
            nx, ny = x + d.dx, y + d.dy
            if self.in_bounds(nx, ny):
                yield d, nx, ny

    def unvisited_directions(self, x: int, y: int) -> List[Direction]:
        return [d for d, nx, ny in self.neighbors(x, y) if not self.visited[ny, nx]]

    def visited_directions(self, x: int, y: int) -> List[Direction]:
        return [d for d, nx, ny in self.neighbors(x, y) if self.visited[ny, nx]]

    # -------------------------
    # Queries
    # -------------------------

    def is_wall(self, row: int, col: int) -> bool:
        return bool(self.matrix[row, col] == WALL)

    def is_passage(self, row: int, col: int) -> bool:
        return bool(self.matrix[row, col] == PASSAGE)

    def is_visited(self, x: int, y: int) -> bool:
        return bool(self.visited[y, x])

    def visited_count(self) -> int:
        return int(self.visited.sum())

    def copy_matrix(self) -> np.ndarray:
        return self.matrix.copy()

    # -------------------------
    # Mutation
    # -------------------------

    def carve_cell(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) out of bounds for {self.width}x{self.height}")
        self.matrix[2 * y + 1, 2 * x + 1] = PASSAGE
        self.visited[y, x] = True

    def carve_passage(self, x1: int, y1: int, x2: int, y2: int):
        row, col = self.wall_between(x1, y1, x2, y2)
        self.matrix[row, col] = PASSAGE

    def open_wall(self, row: int, col: int):
        self.matrix[row, col] = PASSAGE

    def open_boundary(self, x: int, y: int, direction: Direction) -> bool:
        """
        Open the border position just beyond (x, y) in `direction`.
        Only acts when (x, y) sits on the edge facing that way; otherwise a no-op.
        Returns True if the matrix changed.
        """
        at_edge = (
            (direction is Direction.UP and y == 0)
            or (direction is Direction.DOWN and y == self.height - 1)
            or (direction is Direction.LEFT and x == 0)
            or (direction is Direction.RIGHT and x == self.width - 1)
        )
        if not at_edge:
            return False
        row = 2 * y + 1 + direction.dy
        col = 2 * x + 1 + direction.dx
        if self.matrix[row, col] == PASSAGE:
            return False
        self.matrix[row, col] = PASSAGE
        return True
