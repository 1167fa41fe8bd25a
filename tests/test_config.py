import pytest

from addfs_maze.config import (CLASSIC, PROFILE_CATALOG, WINDING, AlgorithmProfile,
                               MazeConfig, ProfileCatalog)
from addfs_maze.errors import MazeConfigError


def test_defaults():
    c = MazeConfig()
    assert (c.width, c.height, c.seed) == (11, 11, 21)
    assert c.history_window == 50
    assert c.anti_persistence == 0.8
    assert c.braid_probability == 0.08
    assert c.start == (0, 0)
    assert c.exit == (10, 10)


def test_exit_follows_dimensions():
    c = MazeConfig(width=20, height=15)
    assert c.exit == (19, 14)
    assert c.replace(width=6, height=4).exit == (5, 3)
    assert MazeConfig(exit=(2, 3)).replace(width=8).exit == (2, 3)


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -1},
    {"history_window": 0},
    {"anti_persistence": -0.1},
    {"anti_persistence": float("nan")},
    {"anti_persistence": float("inf")},
    {"braid_probability": 1.01},
    {"start": (11, 0)},
    {"exit": (0, 11)},
])
def test_validation(kwargs):
    with pytest.raises(MazeConfigError):
        MazeConfig(**kwargs)


def test_builtin_profiles():
    assert PROFILE_CATALOG.list_profiles() == ["classic", "winding", "open", "complex", "sparse"]
    assert len(PROFILE_CATALOG) == 5
    p = PROFILE_CATALOG.get_profile("WINDING")
    assert p is WINDING
    assert (p.anti_persistence, p.history_window, p.braid_probability) == (1.2, 80, 0.05)


def test_unknown_profile_lists_available():
    with pytest.raises(MazeConfigError, match="classic, winding"):
        PROFILE_CATALOG.get_profile("spiral")


def test_with_profile_keeps_size_and_seed():
    c = MazeConfig(width=30, height=20, seed=7).with_profile("classic")
    assert (c.width, c.height, c.seed) == (30, 20, 7)
    assert c.anti_persistence == CLASSIC.anti_persistence
    assert c.history_window == CLASSIC.history_window
    assert c.braid_probability == 0.0


def test_create_config():
    c = WINDING.create_config(12, 8, seed=3)
    assert (c.width, c.height, c.seed, c.history_window) == (12, 8, 3, 80)


def test_custom_catalog():
    cat = ProfileCatalog()
    cat.register(AlgorithmProfile("Twisty", "", 2.0, 5, 0.0))
    assert cat.get_profile("twisty").anti_persistence == 2.0
    assert [p.name for p in cat] == ["Twisty"]


def test_str_and_dict():
    c = MazeConfig(width=4, height=3, seed=1)
    assert str(c) == "MazeConfig[4x3, seed=1, beta=0.80, k=50, p=0.08]"
    assert c.to_dict()["exit"] == [3, 2]
    assert str(CLASSIC) == "classic (beta=0.0, k=10, p=0.00)"
