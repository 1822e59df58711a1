import math

import pytest

from arenaforge.config.schema import ArenaConfig
from arenaforge.geometry import (
    arena_radius,
    describe,
    ground_footprint_scale,
    ground_radius,
    is_within_arena_bounds,
    is_within_safe_zone,
    safe_zone_radius,
)
from arenaforge.types import Point3


def test_derived_radii(cfg):
    assert math.isclose(arena_radius(cfg), 10.0)
    assert math.isclose(ground_radius(cfg), 7.0)
    assert math.isclose(safe_zone_radius(cfg), 5.6)
    assert safe_zone_radius(cfg) <= ground_radius(cfg)


def test_full_percentages_collapse_to_arena_radius():
    c = ArenaConfig(arena_size=8.0, ground_percentage=1.0, safe_zone_percentage=1.0)
    assert math.isclose(ground_radius(c), 4.0)
    assert math.isclose(safe_zone_radius(c), ground_radius(c))


def test_safe_zone_is_square_around_center(cfg):
    c = Point3(40.0, 0.0, -20.0)
    assert is_within_safe_zone(Point3(45.5, 3.0, -25.5), c, cfg)
    assert not is_within_safe_zone(Point3(45.7, 0.0, -20.0), c, cfg)
    assert not is_within_safe_zone(Point3(40.0, 0.0, -14.3), c, cfg)


def test_arena_bounds_use_square_not_disc(cfg):
    c = Point3(0.0, 0.0, 0.0)
    corner = Point3(6.9, 0.0, -6.9)
    assert math.hypot(corner.x, corner.z) > ground_radius(cfg)
    assert is_within_arena_bounds(corner, c, cfg)
    assert not is_within_arena_bounds(Point3(7.1, 0.0, 0.0), c, cfg)


def test_height_is_ignored_by_containment(cfg):
    c = Point3(0.0, 0.0, 0.0)
    assert is_within_arena_bounds(Point3(1.0, 1000.0, 1.0), c, cfg)


def test_ground_footprint_scale(cfg):
    assert math.isclose(ground_footprint_scale(cfg), 1.4)
    assert math.isclose(ground_footprint_scale(cfg, primitive_size=1.0), 14.0)
    with pytest.raises(ValueError):
        ground_footprint_scale(cfg, primitive_size=0.0)


def test_describe_mentions_derived_values(cfg):
    text = describe(cfg)
    assert "ground_radius=7.00" in text
    assert "safe_zone_radius=5.60" in text
    assert "max_attempts=20" in text
