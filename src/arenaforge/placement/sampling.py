"""Random-source plumbing for placement.

Every placement function takes an explicit :class:`numpy.random.Generator`.
Grids get one generator per arena from :func:`make_rng_factory`, so results do
not depend on the order (or thread) in which arenas are processed.
"""
from __future__ import annotations

from typing import Callable, Tuple

import numpy as np

RngFactory = Callable[[int], np.random.Generator]


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def make_rng_factory(seed: int | None = None) -> RngFactory:
    """Return ``linear_index -> Generator`` with one independent stream per arena.

    Streams are derived from ``SeedSequence(seed)`` with the arena index as the
    spawn key.  With ``seed=None`` fresh OS entropy is drawn once, so the
    factory is still self-consistent for its lifetime.
    """
    entropy = np.random.SeedSequence(seed).entropy

    def _factory(linear_index: int) -> np.random.Generator:
        if linear_index < 0:
            raise ValueError("linear_index must be >= 0")
        ss = np.random.SeedSequence(entropy=entropy, spawn_key=(int(linear_index),))
        return np.random.default_rng(ss)

    return _factory


def uniform_square_offset(rng: np.random.Generator, half_extent: float) -> Tuple[float, float]:
    """Draw ``(dx, dz)`` uniformly from ``[-half_extent, half_extent]^2`` (x first)."""
    dx = float(rng.uniform(-half_extent, half_extent))
    dz = float(rng.uniform(-half_extent, half_extent))
    return dx, dz


__all__ = ["RngFactory", "make_rng", "make_rng_factory", "uniform_square_offset"]
