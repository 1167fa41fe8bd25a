import pytest

from addfs_maze import AdDfsMaze


@pytest.fixture
def make_maze():
    def _make(width=5, height=5, seed=42, k=10, beta=0.5, p=0.1, start=(0, 0)):
        maze = AdDfsMaze(width, height, seed, k, beta, p)
        maze.generate(*start)
        return maze
    return _make
