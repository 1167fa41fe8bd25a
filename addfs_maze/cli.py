"""
cli.py — command line front end.

Generate:
  addfs-maze generate --width 20 --height 15 --seed 42
  addfs-maze generate --profile winding --seed 7 --style hash --border -o maze.txt
  addfs-maze                      (no command: generate with defaults)

Dataset (JSONL + optional text renders):
  addfs-maze dataset --count 500 --width 10 --height 10 --out info_labels.jsonl --txt-dir mazes_out

Benchmark:
  addfs-maze benchmark --suite size --iterations 3

Profiles:
  addfs-maze profiles
"""

import argparse
import logging
import sys
import time
from typing import Optional, Sequence, Tuple

from .benchmark import BenchmarkRunner
from .config import (DEF_BETA, DEF_BRAID, DEF_HEIGHT, DEF_HISTORY, DEF_SEED,
                     DEF_WIDTH, PROFILE_CATALOG, MazeConfig)
from .errors import MazeError
from .export import build_maze, export_text, generate_dataset
from .render import RenderStyle, render_maze, render_with_border
from .stats import calculate_stats, format_statistics

logger = logging.getLogger(__name__)

VERSION = "1.0"


def _parse_pair(s: Optional[str], default_pair=None) -> Optional[Tuple[int, int]]:
    if s is None:
        return default_pair
    try:
        a, b = s.split(",")
        return int(a), int(b)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'x,y', got {s!r}") from None


def _add_shape_args(p: argparse.ArgumentParser):
    p.add_argument("-s", "--seed", type=int, default=None, help=f"Random seed (default: {DEF_SEED})")
    p.add_argument("-b", "--beta", type=float, default=None, help=f"Anti-persistence strength (default: {DEF_BETA})")
    p.add_argument("-k", "--history", type=int, default=None, help=f"History window size (default: {DEF_HISTORY})")
    p.add_argument("-p", "--braid", type=float, default=None, help=f"Braiding probability (default: {DEF_BRAID})")
    p.add_argument("--profile", type=str, default=None,
                   help="Preset: " + "/".join(PROFILE_CATALOG.list_profiles()))


def config_from_args(args) -> MazeConfig:
    """Defaults, then profile, then explicit flags."""
    start = _parse_pair(getattr(args, "start", None), (0, 0))
    exit_ = _parse_pair(getattr(args, "exit", None), None)
    config = MazeConfig(width=args.width, height=args.height, start=start, exit=exit_,
                        export_path=getattr(args, "output", None),
                        style=getattr(args, "style", "block"))
    if args.profile:
        config = config.with_profile(args.profile)

    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.beta is not None:
        overrides["anti_persistence"] = args.beta
    if args.history is not None:
        overrides["history_window"] = args.history
    if args.braid is not None:
        overrides["braid_probability"] = args.braid
    if overrides:
        config = config.replace(**overrides)
    return config


def print_header():
    print("=" * 60)
    print(f"  AdDfsMaze Generator v{VERSION}")
    print("=" * 60)
    print()


def print_configuration(config: MazeConfig):
    print("Configuration:")
    print(f"  Size: {config.width} × {config.height}")
    print(f"  Seed: {config.seed}")
    print(f"  Anti-Persistence: beta={config.anti_persistence}, k={config.history_window}")
    print(f"  Braiding: p={config.braid_probability}")
    print()


# -------------------------
# Commands
# -------------------------

def cmd_generate(args) -> int:
    config = config_from_args(args)
    print_header()
    if args.profile:
        print(f"Applied profile: {PROFILE_CATALOG.get_profile(args.profile)}")
        print()
    print_configuration(config)

    t0 = time.perf_counter()
    maze = build_maze(config)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    print("Generated Maze:")
    print()
    if args.border:
        print(render_with_border(maze, title=f"{config.width}x{config.height} seed {config.seed}",
                                 style=config.style), end="")
    else:
        print(render_maze(maze, style=config.style), end="")
    print()
    print(f"Generation time: {elapsed_ms:.3f} ms ({elapsed_ms / 1000.0:.6f} s)")

    if not args.no_stats:
        print()
        print(format_statistics(calculate_stats(maze)))

    if config.export_path:
        try:
            export_text(maze, config.export_path, style=config.style)
        except OSError as e:
            logger.warning("export to %s failed: %s", config.export_path, e)
            print(f"Export failed: {e}", file=sys.stderr)
            return 1
        print(f"\nExported to: {config.export_path}")
    return 0


def cmd_dataset(args) -> int:
    base = config_from_args(args)
    made, uniq = generate_dataset(
        count=args.count,
        width=args.width,
        height=args.height,
        out_jsonl=args.out,
        base_seed=args.base_seed,
        base_config=base,
        txt_dir=args.txt_dir,
    )
    print(f"Wrote {made} records to {args.out} (unique mazes: {uniq}).")
    if args.txt_dir:
        print(f"Text renders saved to {args.txt_dir}")
    return 0


def cmd_benchmark(args) -> int:
    runner = BenchmarkRunner(iterations=args.iterations)
    if args.suite == "full":
        runner.run_full_suite()
    elif args.suite == "size":
        runner.run_size_benchmark()
    elif args.suite == "params":
        runner.run_parameter_sensitivity()
    elif args.suite == "large":
        runner.run_large_maze_benchmark()
    return 0


def cmd_profiles(args) -> int:
    print("Profiles:")
    for profile in PROFILE_CATALOG:
        print(f"  {profile}  {profile.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Anti-persistent DFS maze generator with braiding.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd")

    p_gen = sub.add_parser("generate", help="Generate and print a single maze.")
    p_gen.add_argument("-w", "--width", type=int, default=DEF_WIDTH)
    p_gen.add_argument("-H", "--height", type=int, default=DEF_HEIGHT)
    _add_shape_args(p_gen)
    p_gen.add_argument("--start", type=str, default=None, help="start 'x,y' (default 0,0)")
    p_gen.add_argument("--exit", type=str, default=None, help="exit 'x,y' (default bottom-right)")
    p_gen.add_argument("--style", type=str, default="block",
                       choices=[s.name.lower() for s in RenderStyle])
    p_gen.add_argument("--border", action="store_true", help="Frame the maze with a titled border")
    p_gen.add_argument("--no-stats", action="store_true")
    p_gen.add_argument("-o", "--output", type=str, default=None, help="Export maze to a text file")
    p_gen.set_defaults(func=cmd_generate)

    p_ds = sub.add_parser("dataset", help="Generate a JSONL dataset of unique mazes.")
    p_ds.add_argument("--count", type=int, default=1000)
    p_ds.add_argument("-w", "--width", type=int, default=10)
    p_ds.add_argument("-H", "--height", type=int, default=10)
    _add_shape_args(p_ds)
    p_ds.add_argument("--out", type=str, default="info_labels.jsonl")
    p_ds.add_argument("--base-seed", type=int, default=20250924)
    p_ds.add_argument("--txt-dir", type=str, default=None, help="Directory to write per-maze text renders")
    p_ds.set_defaults(func=cmd_dataset)

    p_bench = sub.add_parser("benchmark", help="Run performance benchmarks.")
    p_bench.add_argument("--suite", choices=["full", "size", "params", "large"], default="full")
    p_bench.add_argument("--iterations", type=int, default=5)
    p_bench.set_defaults(func=cmd_benchmark)

    p_prof = sub.add_parser("profiles", help="List built-in parameter profiles.")
    p_prof.set_defaults(func=cmd_profiles)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(argv)
    if args.cmd is None:
        # no command: a default maze
        args = parser.parse_args(argv + ["generate"])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (MazeError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Use --help for usage information", file=sys.stderr)
        return 1
    except OSError as e:
        logger.warning("I/O failure: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
