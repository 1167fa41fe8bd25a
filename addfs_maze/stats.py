"""
stats.py — counts and structural checks read straight off the matrix.

Works on an AdDfsMaze or on a bare (2h+1) x (2w+1) matrix.
"""

from collections import deque
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .errors import MazeConfigError
from .grid import DIR_ORDER, PASSAGE, WALL

Cell = Tuple[int, int]


@dataclass
class MazeStats:
    grid_width: int
    grid_height: int
    maze_width: int
    maze_height: int
    total_cells: int
    wall_count: int
    passage_count: int
    sparsity: float  # percent of matrix positions that are open
    dead_end_count: int

    @property
    def connectivity(self) -> float:
        return 100.0 - self.dead_end_count / (self.maze_width * self.maze_height) * 100.0

    def to_dict(self) -> Dict:
        d = asdict(self)
        d["sparsity"] = round(self.sparsity, 4)
        d["connectivity"] = round(self.connectivity, 4)
        return d


def _as_matrix(maze_or_matrix) -> np.ndarray:
    if hasattr(maze_or_matrix, "get_grid"):
        return np.asarray(maze_or_matrix.get_grid())
    return np.asarray(maze_or_matrix)


def maze_dims(matrix: np.ndarray, width: Optional[int] = None,
              height: Optional[int] = None) -> Tuple[int, int]:
    """Cell dimensions of a matrix; explicit width/height must agree with its shape."""
    rows, cols = matrix.shape
    w, h = (cols - 1) // 2, (rows - 1) // 2
    if width is not None and width != w:
        raise MazeConfigError(f"width {width} does not match a {rows}x{cols} matrix")
    if height is not None and height != h:
        raise MazeConfigError(f"height {height} does not match a {rows}x{cols} matrix")
    return w, h


# -------------------------
# Counting
# -------------------------

def count_dead_ends(maze_or_matrix) -> int:
    """Open cell centers with exactly three of their four sides walled."""
    m = _as_matrix(maze_or_matrix)
    centers = m[1::2, 1::2]
    walls = (m[0:-1:2, 1::2] == WALL).astype(int)
    walls += m[2::2, 1::2] == WALL
    walls += m[1::2, 0:-1:2] == WALL
    walls += m[1::2, 2::2] == WALL
    return int(((centers == PASSAGE) & (walls == 3)).sum())


def count_internal_passages(maze_or_matrix) -> int:
    """Open wall positions between two cells (border openings excluded)."""
    m = _as_matrix(maze_or_matrix)
    horiz = m[1::2, 2:-1:2]
    vert = m[2:-1:2, 1::2]
    return int((horiz == PASSAGE).sum() + (vert == PASSAGE).sum())


def has_open_2x2(maze_or_matrix) -> bool:
    m = _as_matrix(maze_or_matrix) == PASSAGE
    return bool((m[:-1, :-1] & m[1:, :-1] & m[:-1, 1:] & m[1:, 1:]).any())


def calculate_stats(maze_or_matrix, width: Optional[int] = None,
                    height: Optional[int] = None) -> MazeStats:
    m = _as_matrix(maze_or_matrix)
    grid_height, grid_width = m.shape
    maze_width, maze_height = maze_dims(m, width, height)
    total = grid_width * grid_height
    walls = int((m == WALL).sum())
    passages = total - walls
    return MazeStats(
        grid_width=grid_width,
        grid_height=grid_height,
        maze_width=maze_width,
        maze_height=maze_height,
        total_cells=total,
        wall_count=walls,
        passage_count=passages,
        sparsity=passages / total * 100.0,
        dead_end_count=count_dead_ends(m),
    )


# -------------------------
# Graph view
# -------------------------

def cell_graph(maze_or_matrix) -> Dict[Cell, List[Cell]]:
    """Adjacency of (x, y) cells joined by an open wall."""
    m = _as_matrix(maze_or_matrix)
    width, height = maze_dims(m)
    G = {}
    for y in range(height):
        for x in range(width):
            nbrs = []
            for d in DIR_ORDER:
                nx, ny = x + d.dx, y + d.dy
                if 0 <= nx < width and 0 <= ny < height and m[2 * y + 1 + d.dy, 2 * x + 1 + d.dx] == PASSAGE:
                    nbrs.append((nx, ny))
            G[(x, y)] = nbrs
    return G


def shortest_path(graph, start: Cell, goal: Cell) -> List[Cell]:
    q = deque([start])
    parent = {start: None}
    while q:
        u = q.popleft()
        if u == goal:
            break
        for v in graph[u]:
            if v not in parent:
                parent[v] = u
                q.append(v)
    if goal not in parent:
        return []
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    return list(reversed(path))


def reachable_count(graph, start: Cell) -> int:
    seen = {start}
    q = deque([start])
    while q:
        u = q.popleft()
        for v in graph[u]:
            if v not in seen:
                seen.add(v)
                q.append(v)
    return len(seen)


def is_perfect(maze_or_matrix, width: Optional[int] = None, height: Optional[int] = None) -> bool:
    """Spanning tree check: every cell reachable and exactly cells-1 passages."""
    m = _as_matrix(maze_or_matrix)
    width, height = maze_dims(m, width, height)
    n = width * height
    if count_internal_passages(m) != n - 1:
        return False
    return reachable_count(cell_graph(m), (0, 0)) == n


# -------------------------
# Formatting
# -------------------------

def format_statistics(stats: MazeStats) -> str:
    return "\n".join([
        "Statistics:",
        f"  Grid size: {stats.grid_width} × {stats.grid_height}",
        f"  Maze cells: {stats.maze_width} × {stats.maze_height}",
        f"  Sparsity: {stats.sparsity:.1f}% open",
        f"  Dead ends: {stats.dead_end_count}",
        f"  Connectivity: {stats.connectivity:.1f}%",
    ])


def summarize(stats: MazeStats) -> str:
    return (f"{stats.maze_width}x{stats.maze_height} maze, "
            f"{stats.sparsity:.1f}% open, {stats.dead_end_count} dead ends")
