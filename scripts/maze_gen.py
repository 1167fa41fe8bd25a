#!/usr/bin/env python3
"""
maze_gen.py — script entry point for the maze generator.

Maze:
  python scripts/maze_gen.py generate --width 20 --height 15 --seed 42
  # Optional: --profile winding --style hash --border -o maze.txt

Dataset (JSONL + optional text renders):
  python scripts/maze_gen.py dataset --count 5000 --width 10 --height 10 --out info_labels.jsonl --txt-dir mazes_out
"""

import sys

from addfs_maze.cli import main

if __name__ == "__main__":
    sys.exit(main())
