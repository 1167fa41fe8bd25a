"""
config.py — MazeConfig and named parameter profiles.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import MazeConfigError

DEF_WIDTH = 11
DEF_HEIGHT = 11
DEF_SEED = 21
DEF_HISTORY = 50
DEF_BETA = 0.8
DEF_BRAID = 0.08


@dataclass
class MazeConfig:
    """Validated bundle of everything one generation run needs."""

    width: int = DEF_WIDTH
    height: int = DEF_HEIGHT
    seed: int = DEF_SEED
    history_window: int = DEF_HISTORY
    anti_persistence: float = DEF_BETA
    braid_probability: float = DEF_BRAID

    start: Tuple[int, int] = (0, 0)
    exit: Optional[Tuple[int, int]] = None  # None -> bottom-right cell

    export_path: Optional[str] = None
    style: str = "block"

    def __post_init__(self):
        if self.exit is None:
            self.exit = (self.width - 1, self.height - 1)
        self.start = tuple(self.start)
        self.exit = tuple(self.exit)
        self.validate()

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise MazeConfigError("Dimensions must be positive")
        if self.history_window < 1:
            raise MazeConfigError("History window must be >= 1")
        if not math.isfinite(self.anti_persistence) or self.anti_persistence < 0:
            raise MazeConfigError("Beta must be non-negative")
        if not 0.0 <= self.braid_probability <= 1.0:
            raise MazeConfigError("Braid probability must be in [0, 1]")
        sx, sy = self.start
        if not (0 <= sx < self.width and 0 <= sy < self.height):
            raise MazeConfigError(f"Start position {self.start} out of bounds")
        ex, ey = self.exit
        if not (0 <= ex < self.width and 0 <= ey < self.height):
            raise MazeConfigError(f"Exit position {self.exit} out of bounds")

    def with_profile(self, name: str) -> MazeConfig:
        return PROFILE_CATALOG.get_profile(name).apply_to(self)

    def replace(self, **changes) -> MazeConfig:
        # a bottom-right exit follows the new dimensions
        resized = "width" in changes or "height" in changes
        if resized and "exit" not in changes and self.exit == (self.width - 1, self.height - 1):
            changes["exit"] = None
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict:
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "history_window": self.history_window,
            "anti_persistence": self.anti_persistence,
            "braid_probability": self.braid_probability,
            "start": list(self.start),
            "exit": list(self.exit),
        }

    def __str__(self):
        return (f"MazeConfig[{self.width}x{self.height}, seed={self.seed}, "
                f"beta={self.anti_persistence:.2f}, k={self.history_window}, "
                f"p={self.braid_probability:.2f}]")


# -------------------------
# Profiles
# -------------------------

@dataclass(frozen=True)
class AlgorithmProfile:
    """A preset of the three shape parameters (beta, k, braid p)."""

    name: str
    description: str
    anti_persistence: float
    history_window: int
    braid_probability: float

    def apply_to(self, config: MazeConfig) -> MazeConfig:
        return config.replace(
            anti_persistence=self.anti_persistence,
            history_window=self.history_window,
            braid_probability=self.braid_probability,
        )

    def create_config(self, width: int, height: int, seed: int = DEF_SEED) -> MazeConfig:
        return self.apply_to(MazeConfig(width=width, height=height, seed=seed))

    def __str__(self):
        return (f"{self.name} (beta={self.anti_persistence:.1f}, "
                f"k={self.history_window}, p={self.braid_probability:.2f})")


class ProfileCatalog:
    """Registry mapping lower-case names to profiles."""

    def __init__(self):
        self._profiles: Dict[str, AlgorithmProfile] = {}

    def register(self, profile: AlgorithmProfile):
        self._profiles[profile.name.lower()] = profile

    def get_profile(self, name: str) -> AlgorithmProfile:
        profile = self._profiles.get(name.strip().lower())
        if profile is None:
            available = ", ".join(self.list_profiles())
            raise MazeConfigError(f"Unknown profile: {name}. Available: {available}")
        return profile

    def list_profiles(self) -> List[str]:
        return list(self._profiles)

    def __iter__(self):
        return iter(self._profiles.values())

    def __len__(self):
        return len(self._profiles)


CLASSIC = AlgorithmProfile("classic", "Plain DFS, long straight corridors, no loops.", 0.0, 10, 0.0)
WINDING = AlgorithmProfile("winding", "Strong anti-persistence, highly twisting paths.", 1.2, 80, 0.05)
OPEN = AlgorithmProfile("open", "Many loops and few dead ends.", 0.5, 40, 0.15)
COMPLEX = AlgorithmProfile("complex", "Balanced twistiness and loops.", 0.8, 50, 0.12)
SPARSE = AlgorithmProfile("sparse", "Moderate anti-persistence, minimal braiding.", 0.6, 30, 0.03)

PROFILE_CATALOG = ProfileCatalog()
for _profile in (CLASSIC, WINDING, OPEN, COMPLEX, SPARSE):
    PROFILE_CATALOG.register(_profile)
