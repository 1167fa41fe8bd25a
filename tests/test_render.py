import pytest

from addfs_maze import AdDfsMaze, Direction
from addfs_maze.render import RenderStyle, render_lines, render_maze, render_with_border


def test_render_dimensions(make_maze):
    maze = make_maze(4, 3)
    lines = render_lines(maze)
    assert len(lines) == 7
    assert all(len(line) == 18 for line in lines)
    assert render_maze(maze).endswith("\n")


def test_untouched_grid_renders_as_walls():
    maze = AdDfsMaze(2, 1, 1)
    assert render_maze(maze, style="hash") == ("#" * 10 + "\n") * 3


@pytest.mark.parametrize("style", list(RenderStyle))
def test_styles_use_their_wall_glyph(make_maze, style):
    out = render_maze(make_maze(), style=style)
    assert out.splitlines()[0] == style.wall * 11


def test_unknown_style():
    with pytest.raises(ValueError):
        RenderStyle.parse("neon")


def test_markers_only_when_set(make_maze):
    maze = make_maze()
    assert "S" not in render_maze(maze, style="hash")
    maze.set_entrance_exit(0, 0, 4, 4)
    lines = render_lines(maze, style="hash")
    assert lines[1][2:4] == "S "
    assert lines[9][18:20] == "E "
    assert "S" not in render_maze(maze, style="hash", show_markers=False)


def test_boundary_opening_shows_in_render(make_maze):
    maze = make_maze()
    maze.open_boundary_entrance(0, 0, Direction.UP)
    assert render_lines(maze, style="hash")[0][2:4] == "  "


def test_border_with_title(make_maze):
    out = render_with_border(make_maze(), title="demo", style="hash").splitlines()
    assert out[0] == "╔" + "═" * 22 + "╗"
    assert out[1].startswith("║") and "demo" in out[1] and len(out[1]) == 24
    assert out[2].startswith("╠")
    assert out[-1] == "╚" + "═" * 22 + "╝"
    assert len(out) == 11 + 4


def test_border_without_title(make_maze):
    out = render_with_border(make_maze(), style="plus").splitlines()
    assert len(out) == 11 + 2
    assert out[1] == "║" + "++" * 11 + "║"
