"""Layout configuration loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from arenaforge.errors import ConfigError
from .presets import preset_cfg
from .schema import LayoutConfig
from .utils import merge

__all__ = ["load_layout_config", "load_layout_defaults", "dump_effective_config"]

DEFAULT_LAYOUT_PATH = "configs/layout.yaml"


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"layout config not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML at {path} must be a mapping")
    return data


def _check_top_level(d: Mapping[str, Any], where: str) -> None:
    extra = set(d) - set(LayoutConfig.model_fields) - {"preset"}
    if extra:
        raise ConfigError(f"unexpected top-level keys in {where}: {sorted(extra)}")


def load_layout_config(
    path: str | Path | None = None,
    *,
    preset: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> LayoutConfig:
    """Build a :class:`LayoutConfig` from preset, YAML file and overrides.

    Layers apply in that order, later ones winning.  The preset is taken from
    ``overrides["preset"]``, else the ``preset`` argument, else a top-level
    ``preset:`` key in the file.  ``custom`` contributes
    no base values; the grid and obstacle count then come from the other layers.
    """
    file_cfg = _read_yaml(path) if path is not None else {}
    overrides = dict(overrides or {})
    _check_top_level(file_cfg, str(path))
    _check_top_level(overrides, "overrides")

    file_preset = file_cfg.pop("preset", None)
    name = overrides.pop("preset", None) or preset or file_preset
    cfg: Dict[str, Any] = {}
    if name and str(name).strip().lower() != "custom":
        cfg = preset_cfg(name).model_dump(mode="json")

    return LayoutConfig.model_validate(merge(cfg, file_cfg, overrides))


def load_layout_defaults(path: str = DEFAULT_LAYOUT_PATH) -> LayoutConfig:
    """Read ``configs/layout.yaml`` and return a validated :class:`LayoutConfig`."""
    return load_layout_config(path)


def dump_effective_config(cfg: LayoutConfig, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(cfg.model_dump(mode="json"), f, sort_keys=False)
    return p
