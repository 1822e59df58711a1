"""Exceptions raised by arenaforge.

Only configuration problems are raised.  Placement exhaustion and bounds
failures are reported as :class:`arenaforge.types.ConstraintViolation` data.
"""
from __future__ import annotations

from pydantic import ValidationError


class ConfigError(ValueError):
    """Invalid arena/grid configuration, detected before any placement runs."""

    @classmethod
    def from_validation_error(cls, exc: ValidationError, prefix: str = "") -> "ConfigError":
        lines = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err.get("loc", ()))
            if prefix:
                loc = f"{prefix}.{loc}" if loc else prefix
            lines.append(f"{loc or '<root>'}: {err.get('msg', 'invalid value')}")
        return cls("invalid configuration:\n  " + "\n  ".join(lines))


__all__ = ["ConfigError"]
