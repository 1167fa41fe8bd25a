"""
benchmark.py — wall-clock timing of maze generation.

Only the public AdDfsMaze operations are used: construct, then generate(0, 0).
"""

import logging
import time
import tracemalloc
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from .config import DEF_BETA, DEF_BRAID, DEF_HISTORY
from .generator import AdDfsMaze

logger = logging.getLogger(__name__)

DEFAULT_SIZES = (5, 10, 25, 50, 100)
LARGE_SIZES = (100, 200, 500)
DEFAULT_ITERATIONS = 5
WARMUP_ITERATIONS = 3
SENSITIVITY_SIZE = 50
BETAS = (0.0, 0.4, 0.8, 1.2, 1.6)
BRAID_PROBS = (0.0, 0.05, 0.10, 0.15, 0.20)


@dataclass
class BenchmarkResult:
    width: int
    height: int
    time_ms: float
    memory_bytes: int = 0
    algorithm_name: str = "AdDfsMaze"

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def time_per_cell_us(self) -> float:
        return self.time_ms * 1000.0 / self.cell_count

    @property
    def memory_per_cell(self) -> float:
        return self.memory_bytes / self.cell_count

    @property
    def cells_per_ms(self) -> Optional[float]:
        # None when the run was below timer resolution
        return self.cell_count / self.time_ms if self.time_ms > 0 else None

    def __str__(self):
        return (f"{self.algorithm_name}[{self.width}x{self.height}: "
                f"{self.time_ms:.3f} ms, {self.memory_bytes // 1024} KB]")


@dataclass
class PerformanceMetrics:
    average_ms: float
    min_ms: float
    max_ms: float
    std_dev_ms: float
    median_ms: float

    @classmethod
    def compute(cls, results: Sequence[BenchmarkResult]) -> "PerformanceMetrics":
        if not results:
            return cls(0.0, 0.0, 0.0, 0.0, 0.0)
        times = np.array([r.time_ms for r in results], dtype=float)
        return cls(
            average_ms=float(times.mean()),
            min_ms=float(times.min()),
            max_ms=float(times.max()),
            std_dev_ms=float(times.std()),  # population stddev
            median_ms=float(np.median(times)),
        )

    def __str__(self):
        return (f"avg={self.average_ms:.3f} ms, min={self.min_ms:.3f} ms, "
                f"max={self.max_ms:.3f} ms, stddev={self.std_dev_ms:.3f} ms")


class BenchmarkRunner:
    def __init__(self, iterations: int = DEFAULT_ITERATIONS, warmup: int = WARMUP_ITERATIONS,
                 sizes: Sequence[int] = DEFAULT_SIZES, out=print):
        if iterations < 1:
            raise ValueError("iterations must be >= 1")
        self.iterations = iterations
        self.warmup_iterations = warmup
        self.sizes = tuple(sizes)
        self.out = out

    # -------------------------
    # Single runs
    # -------------------------

    def benchmark_single(self, width: int, height: int, seed: int,
                         anti_persistence: float = DEF_BETA,
                         braid_probability: float = DEF_BRAID,
                         history_window: int = DEF_HISTORY,
                         measure_memory: bool = False) -> BenchmarkResult:
        # an outer trace (python -X tracemalloc) is left running, only its peak is reset
        started = measure_memory and not tracemalloc.is_tracing()
        if started:
            tracemalloc.start()
        elif measure_memory:
            tracemalloc.reset_peak()
        try:
            base = tracemalloc.get_traced_memory()[0] if measure_memory else 0
            t0 = time.perf_counter()
            maze = AdDfsMaze(width, height, seed, history_window, anti_persistence, braid_probability)
            maze.generate(0, 0)
            elapsed_ms = (time.perf_counter() - t0) * 1000.0
            peak = tracemalloc.get_traced_memory()[1] - base if measure_memory else 0
        finally:
            if started:
                tracemalloc.stop()
        return BenchmarkResult(width, height, elapsed_ms, peak)

    def warmup(self, width: int, height: int):
        for i in range(self.warmup_iterations):
            AdDfsMaze(width, height, i, DEF_HISTORY, DEF_BETA, DEF_BRAID).generate(0, 0)

    def _repeat(self, width: int, height: int, **kwargs) -> PerformanceMetrics:
        self.warmup(width, height)
        results = [self.benchmark_single(width, height, i, **kwargs) for i in range(self.iterations)]
        return PerformanceMetrics.compute(results)

    # -------------------------
    # Suites
    # -------------------------

    def run_size_benchmark(self) -> List[Dict]:
        self.out("Size Benchmark (default parameters):")
        self.out(f"{'Size':<12} {'Avg (ms)':<15} {'Min (ms)':<15} {'Max (ms)':<15} {'StdDev (ms)':<15}")
        self.out("-" * 72)
        rows = []
        for size in self.sizes:
            m = self._repeat(size, size)
            self.out(f"{f'{size}×{size}':<12} {m.average_ms:<15.3f} {m.min_ms:<15.3f} "
                     f"{m.max_ms:<15.3f} {m.std_dev_ms:<15.3f}")
            rows.append({"size": size, "metrics": m})
        return rows

    def run_parameter_sensitivity(self, size: int = SENSITIVITY_SIZE) -> Dict[str, List[Dict]]:
        self.out(f"Parameter Sensitivity ({size}×{size} maze):")
        self.out("")
        self.out("Anti-Persistence (beta) Impact:")
        self.out(f"{'Beta':<10} {'Avg (ms)':<15} {'StdDev (ms)':<15}")
        self.out("-" * 40)
        beta_rows = []
        for beta in BETAS:
            m = self._repeat(size, size, anti_persistence=beta)
            self.out(f"{beta:<10.1f} {m.average_ms:<15.3f} {m.std_dev_ms:<15.3f}")
            beta_rows.append({"beta": beta, "metrics": m})

        self.out("")
        self.out("Braiding Probability Impact:")
        self.out(f"{'Braid p':<10} {'Avg (ms)':<15} {'StdDev (ms)':<15}")
        self.out("-" * 40)
        braid_rows = []
        for p in BRAID_PROBS:
            m = self._repeat(size, size, braid_probability=p)
            self.out(f"{p:<10.2f} {m.average_ms:<15.3f} {m.std_dev_ms:<15.3f}")
            braid_rows.append({"braid_probability": p, "metrics": m})
        return {"beta": beta_rows, "braid": braid_rows}

    def run_large_maze_benchmark(self, sizes: Sequence[int] = LARGE_SIZES) -> List[BenchmarkResult]:
        self.out("Large Maze Benchmark:")
        self.out(f"{'Size':<12} {'Time (ms)':<15} {'Peak (KB)':<12} {'Cells/ms':<20}")
        self.out("-" * 62)
        results = []
        for size in sizes:
            self.warmup(size, size)
            r = self.benchmark_single(size, size, 42, measure_memory=True)
            rate = "n/a" if r.cells_per_ms is None else f"{r.cells_per_ms:.0f}"
            self.out(f"{f'{size}×{size}':<12} {r.time_ms:<15.3f} {r.memory_bytes // 1024:<12} {rate:<20}")
            results.append(r)
        return results

    def run_full_suite(self) -> Dict:
        self.out("=" * 70)
        self.out("  BENCHMARK SUITE: AdDfsMaze Generator")
        self.out("=" * 70)
        self.out("")
        sizes = self.run_size_benchmark()
        self.out("")
        params = self.run_parameter_sensitivity()
        logger.info("benchmark suite finished (%d sizes)", len(sizes))
        return {"size": sizes, "params": params}
