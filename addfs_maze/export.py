"""
export.py — text export of a single maze and JSONL datasets of many.

Dataset:
  records are one JSON object per line, one unique maze per record, seeded
  base_seed + idx so any record can be regenerated from its "seed" field.
"""

import hashlib
import json
import logging
import os
from datetime import datetime
from typing import List, Optional, Tuple

import numpy as np

from .config import MazeConfig
from .generator import AdDfsMaze
from .grid import Direction, WALL
from .render import render_maze
from .stats import calculate_stats, cell_graph, shortest_path

logger = logging.getLogger(__name__)

WALL_CHAR = "#"
PASSAGE_CHAR = "."


def _ensure_parent(path: str):
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)


def metadata_header(maze: AdDfsMaze) -> str:
    rows, cols = maze.get_grid().shape
    return "\n".join([
        "# AdDfsMaze Export",
        f"# Generated: {datetime.now().isoformat(timespec='seconds')}",
        f"# Dimensions: {maze.width} × {maze.height}",
        f"# Grid Size: {cols} × {rows}",
    ]) + "\n"


def export_text(maze: AdDfsMaze, path: str, include_metadata: bool = True, style="block"):
    content = ""
    if include_metadata:
        content += metadata_header(maze) + "\n"
    content += render_maze(maze, style=style)
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("exported %dx%d maze to %s", maze.width, maze.height, path)


def encode_maze(matrix) -> str:
    m = np.ascontiguousarray(matrix, dtype=np.uint8)
    return hashlib.sha256(m.tobytes()).hexdigest()


def matrix_to_strings(matrix) -> List[str]:
    return ["".join(WALL_CHAR if v == WALL else PASSAGE_CHAR for v in row) for row in matrix]


def build_maze(config: MazeConfig, open_boundaries: bool = True) -> AdDfsMaze:
    """Generate a maze from a config, with markers and the usual entrance/exit openings."""
    maze = AdDfsMaze.from_config(config)
    sx, sy = config.start
    ex, ey = config.exit
    maze.generate(sx, sy)
    maze.set_entrance_exit(sx, sy, ex, ey)
    if open_boundaries:
        maze.open_boundary_entrance(sx, sy, Direction.UP)
        maze.open_boundary_entrance(ex, ey, Direction.DOWN)
    return maze


def maze_record(maze: AdDfsMaze, index: int, config: MazeConfig) -> dict:
    path = shortest_path(cell_graph(maze), config.start, config.exit)
    return {
        "index": index,
        "seed": config.seed,
        "width": config.width,
        "height": config.height,
        "history_window": config.history_window,
        "anti_persistence": config.anti_persistence,
        "braid_probability": config.braid_probability,
        "start_pos": list(config.start),
        "end_pos": list(config.exit),
        "true_path": [[x, y] for (x, y) in path],
        "grid": matrix_to_strings(maze.get_grid()),
        "stats": calculate_stats(maze).to_dict(),
    }


def generate_dataset(count: int, width: int, height: int, out_jsonl: str,
                     base_seed: int = 20250924,
                     base_config: Optional[MazeConfig] = None,
                     txt_dir: Optional[str] = None,
                     max_attempts: Optional[int] = None) -> Tuple[int, int]:
    """
    Write `count` unique mazes to out_jsonl. Duplicate layouts (same matrix
    hash) are skipped. Returns (records written, unique layouts seen).
    """
    if base_config is None:
        base_config = MazeConfig(width=width, height=height)
    else:
        base_config = base_config.replace(width=width, height=height)
    if max_attempts is None:
        max_attempts = max(100, count * 20)

    seen = set()
    made = 0
    idx = 0
    if txt_dir:
        os.makedirs(txt_dir, exist_ok=True)
    _ensure_parent(out_jsonl)

    with open(out_jsonl, "w", encoding="utf-8") as f:
        while made < count and idx < max_attempts:
            config = base_config.replace(seed=base_seed + idx)
            idx += 1
            maze = build_maze(config)
            sig = encode_maze(maze.get_grid())
            if sig in seen:
                continue
            seen.add(sig)

            f.write(json.dumps(maze_record(maze, made, config)) + "\n")

            if txt_dir:
                export_text(maze, os.path.join(txt_dir, f"maze_{made:05d}.txt"))

            made += 1

    if made < count:
        logger.warning("only %d unique mazes found in %d attempts (wanted %d)", made, idx, count)
    logger.info("wrote %d records to %s", made, out_jsonl)
    return made, len(seen)
