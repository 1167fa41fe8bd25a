import numpy as np
import pytest

from addfs_maze import (AdDfsMaze, Direction, GeneratorState, MazeBoundsError,
                        MazeConfigError, MazeStateError, PASSAGE, WALL)
from addfs_maze.config import MazeConfig
from addfs_maze.stats import (calculate_stats, cell_graph, count_dead_ends,
                              count_internal_passages, has_open_2x2, is_perfect,
                              reachable_count)


def test_basic_scenario(make_maze):
    maze = make_maze(5, 5, seed=42, k=10, beta=0.5, p=0.1)
    grid = maze.get_grid()
    assert grid.shape == (11, 11)
    assert maze.visited_count() == 25
    assert not has_open_2x2(grid)
    assert maze.state is GeneratorState.DONE

    again = make_maze(5, 5, seed=42, k=10, beta=0.5, p=0.1)
    assert np.array_equal(grid, again.get_grid())


def test_perfect_maze_scenario(make_maze):
    maze = make_maze(10, 10, seed=123, k=10, beta=0.0, p=0.0)
    grid = maze.get_grid()
    assert count_internal_passages(grid) == 99
    stats = calculate_stats(maze)
    assert stats.wall_count + stats.passage_count == 441
    assert is_perfect(grid)


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("width,height,start", [(1, 1, (0, 0)), (1, 7, (0, 3)), (9, 4, (8, 3)), (12, 12, (5, 6))])
def test_full_coverage_and_shape(make_maze, seed, width, height, start):
    maze = make_maze(width, height, seed=seed, k=7, beta=0.9, p=0.3, start=start)
    grid = maze.get_grid()
    assert grid.shape == (2 * height + 1, 2 * width + 1)
    assert maze.visited_count() == width * height
    assert all(maze.is_visited(x, y) for x in range(width) for y in range(height))
    assert not has_open_2x2(grid)
    assert reachable_count(cell_graph(grid), (0, 0)) == width * height
    stats = calculate_stats(maze)
    assert stats.wall_count + stats.passage_count == grid.size


def test_border_stays_closed_after_generation(make_maze):
    grid = make_maze(8, 6, seed=5, p=1.0).get_grid()
    assert (grid[0, :] == WALL).all() and (grid[-1, :] == WALL).all()
    assert (grid[:, 0] == WALL).all() and (grid[:, -1] == WALL).all()
    # structural corners between four cells are never opened
    assert (grid[::2, ::2] == WALL).all()


@pytest.mark.parametrize("seed", range(10))
def test_no_braid_gives_spanning_tree(make_maze, seed):
    maze = make_maze(9, 7, seed=seed, k=20, beta=1.2, p=0.0)
    assert count_internal_passages(maze.get_grid()) == 9 * 7 - 1
    assert is_perfect(maze.get_grid())


def test_braiding_adds_loops(make_maze):
    maze = make_maze(15, 15, seed=11, p=1.0)
    assert count_internal_passages(maze.get_grid()) > 15 * 15 - 1
    assert maze.braider.opened > 0
    assert not is_perfect(maze.get_grid())


def test_braiding_reduces_dead_ends_on_average():
    def mean_dead_ends(p):
        total = 0
        for seed in range(30):
            maze = AdDfsMaze(12, 12, seed, 10, 0.5, p)
            maze.generate(0, 0)
            total += count_dead_ends(maze)
        return total / 30

    assert mean_dead_ends(0.5) < mean_dead_ends(0.0)


def test_different_seeds_differ():
    a = AdDfsMaze(10, 10, 1, 10, 0.5, 0.1)
    b = AdDfsMaze(10, 10, 2, 10, 0.5, 0.1)
    a.generate(0, 0)
    b.generate(0, 0)
    assert not np.array_equal(a.get_grid(), b.get_grid())


@pytest.mark.parametrize("args", [
    (0, 5, 1, 10, 0.5, 0.1),
    (5, -5, 1, 10, 0.5, 0.1),
    (5, 5, 1, 0, 0.5, 0.1),
    (5, 5, 1, 10, -0.5, 0.1),
    (5, 5, 1, 10, float("nan"), 0.1),
    (5, 5, 1, 10, float("inf"), 0.1),
    (5, 5, 1, 10, 0.5, 1.5),
    (5, 5, 1, 10, 0.5, -0.01),
])
def test_invalid_construction(args):
    with pytest.raises(MazeConfigError):
        AdDfsMaze(*args)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        AdDfsMaze(0, 0)


@pytest.mark.parametrize("start", [(-1, 0), (5, 0), (0, 5), (2, -3)])
def test_generate_out_of_bounds_start(start):
    maze = AdDfsMaze(5, 5, 42, 10, 0.5, 0.1)
    with pytest.raises(MazeBoundsError):
        maze.generate(*start)
    assert (maze.get_grid() == WALL).all()
    assert maze.visited_count() == 0


def test_generate_twice_rejected(make_maze):
    maze = make_maze()
    with pytest.raises(MazeStateError):
        maze.generate(0, 0)


def test_set_entrance_exit(make_maze):
    maze = make_maze()
    maze.set_entrance_exit(0, 0, 4, 4)
    assert maze.entrance == (0, 0)
    assert maze.exit == (4, 4)
    rendered = maze.render()
    assert "S" in rendered and "E" in rendered


@pytest.mark.parametrize("coords", [(5, 0, 4, 4), (0, 0, 4, 5), (-1, 0, 0, 0)])
def test_set_entrance_exit_out_of_bounds(make_maze, coords):
    maze = make_maze()
    with pytest.raises(MazeBoundsError):
        maze.set_entrance_exit(*coords)
    assert maze.entrance is None and maze.exit is None


def test_open_boundary_entrance(make_maze):
    maze = make_maze()
    assert maze.open_boundary_entrance(0, 0, Direction.UP)
    assert maze.get_grid()[0, 1] == PASSAGE
    assert maze.open_boundary_entrance(4, 4, "down")
    assert maze.get_grid()[10, 9] == PASSAGE


@pytest.mark.parametrize("x,y,direction", [
    (2, 2, Direction.UP), (0, 0, Direction.DOWN), (0, 0, Direction.RIGHT),
    (4, 1, Direction.LEFT), (3, 4, Direction.UP),
])
def test_open_boundary_off_edge_is_noop(make_maze, x, y, direction):
    maze = make_maze()
    before = maze.get_grid().copy()
    assert not maze.open_boundary_entrance(x, y, direction)
    assert before.tobytes() == maze.get_grid().tobytes()


def test_open_boundary_out_of_bounds_cell(make_maze):
    with pytest.raises(MazeBoundsError):
        make_maze().open_boundary_entrance(7, 0, Direction.UP)


def test_from_config_matches_direct_construction():
    config = MazeConfig(width=6, height=4, seed=9, history_window=5,
                        anti_persistence=1.0, braid_probability=0.2)
    a = AdDfsMaze.from_config(config)
    b = AdDfsMaze(6, 4, 9, 5, 1.0, 0.2)
    a.generate(0, 0)
    b.generate(0, 0)
    assert np.array_equal(a.grid, b.grid)


def test_large_maze_has_no_recursion_limit():
    maze = AdDfsMaze(150, 150, 3, 50, 0.0, 0.0)
    maze.generate(0, 0)
    assert maze.visited_count() == 150 * 150
