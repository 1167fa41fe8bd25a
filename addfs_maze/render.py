"""
render.py — text rendering of the wall/passage matrix.

Every matrix position becomes two characters so cells come out roughly square
in a terminal. Entrance/exit markers are drawn only on open cell centers.
"""

from enum import Enum
from typing import List, Optional

from .grid import WALL

PASSAGE_GLYPH = "  "
ENTRANCE_GLYPH = "S "
EXIT_GLYPH = "E "


class RenderStyle(Enum):
    BLOCK = "██"
    HASH = "##"
    BRACKET = "[]"
    SHADE = "▓▓"
    PLUS = "++"

    @property
    def wall(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> "RenderStyle":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            names = ", ".join(s.name.lower() for s in cls)
            raise ValueError(f"Unknown style: {value!r}. Available: {names}") from None


def _marker_positions(maze, show_markers: bool):
    marks = {}
    if not show_markers:
        return marks
    if maze.entrance is not None:
        ex, ey = maze.entrance
        marks[(2 * ey + 1, 2 * ex + 1)] = ENTRANCE_GLYPH
    if maze.exit is not None:
        xx, xy = maze.exit
        marks.setdefault((2 * xy + 1, 2 * xx + 1), EXIT_GLYPH)
    return marks


def render_lines(maze, style="block", show_markers: bool = True) -> List[str]:
    style = RenderStyle.parse(style)
    matrix = maze.get_grid()
    marks = _marker_positions(maze, show_markers)
    lines = []
    for r, row in enumerate(matrix):
        parts = []
        for c, v in enumerate(row):
            if v == WALL:
                parts.append(style.wall)
            else:
                parts.append(marks.get((r, c), PASSAGE_GLYPH))
        lines.append("".join(parts))
    return lines


def render_maze(maze, style="block", show_markers: bool = True) -> str:
    return "\n".join(render_lines(maze, style, show_markers)) + "\n"


def render_with_border(maze, title: Optional[str] = None, style="block",
                       show_markers: bool = True) -> str:
    """Frame the rendered maze in box-drawing characters, with an optional title row."""
    lines = render_lines(maze, style, show_markers)
    width = len(lines[0])
    out = ["╔" + "═" * width + "╗"]
    if title:
        title = title[:width]
        pad = max(0, (width - len(title)) // 2)
        out.append("║" + " " * pad + title + " " * max(0, width - len(title) - pad) + "║")
        out.append("╠" + "═" * width + "╣")
    out.extend("║" + line + "║" for line in lines)
    out.append("╚" + "═" * width + "╝")
    return "\n".join(out) + "\n"
