import numpy as np
import pytest

from arenaforge.config.schema import ArenaConfig
from arenaforge.types import ArenaIndex, Point3


@pytest.fixture
def cfg():
    return ArenaConfig(arena_size=20.0, ground_percentage=0.7, safe_zone_percentage=0.8, min_goal_distance=1.5)


@pytest.fixture
def impossible_cfg():
    """Obstacle clearance far larger than the arena itself."""
    return ArenaConfig(arena_size=20.0, min_obstacle_distance=100.0, max_attempts=10)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def center():
    return Point3(0.0, 0.0, 0.0)


@pytest.fixture
def arena0():
    return ArenaIndex(linear_index=0, x=0, z=0)
