# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys, pathlib
from typing import Any, Dict

from .api import generate_layout
from .config.loader import load_layout_config
from .config.schema import LayoutConfig
from .diagnostics import LoggingSink
from .errors import ConfigError
from .geometry import describe
from .logging import init_logging_from_cfg


def _dump_json(p: str, obj):
    pathlib.Path(p).parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)


def _load_cfg(args) -> LayoutConfig:
    overrides: Dict[str, Any] = {}
    if getattr(args, "seed", None) is not None:
        overrides["seed"] = args.seed
    if getattr(args, "strategy", None):
        overrides["goal_strategy"] = args.strategy
    if getattr(args, "workers", None) is not None:
        overrides["workers"] = args.workers
    return load_layout_config(args.config, preset=args.preset, overrides=overrides)


def cmd_layout(args):
    cfg = _load_cfg(args)
    init_logging_from_cfg(cfg)
    result = generate_layout(cfg, sink=LoggingSink())

    payload = result.to_dict()
    _dump_json(args.out, payload)
    if args.print:
        print(json.dumps(payload, ensure_ascii=False))
    return 0


def cmd_describe(args):
    cfg = _load_cfg(args)
    print(describe(cfg.arena))
    print(f"Grid {cfg.grid.x}x{cfg.grid.z} | obstacles/arena={cfg.obstacles_per_arena} | goal={cfg.goal_strategy.value}")
    return 0


def _add_config_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", default=None, help="layout YAML (optional)")
    p.add_argument("--preset", default=None, help="single | training | large | custom")


def make_parser():
    p = argparse.ArgumentParser(prog="arenaforge")
    sub = p.add_subparsers(dest="cmd", required=True)

    pl = sub.add_parser("layout", help="Place every arena of a grid and write JSON")
    _add_config_args(pl)
    pl.add_argument("--seed", type=int, default=None, help="top-level RNG seed")
    pl.add_argument("--strategy", choices=["rejecting", "distributed"], default=None, help="goal placement strategy")
    pl.add_argument("--workers", type=int, default=None, help="thread-pool size for arena fan-out")
    pl.add_argument("--out", default="out/layout.json")
    pl.add_argument("--print", action="store_true", help="print JSON result to stdout")
    pl.set_defaults(func=cmd_layout)

    pd = sub.add_parser("describe", help="Print derived arena geometry")
    _add_config_args(pd)
    pd.set_defaults(func=cmd_describe)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    try:
        return ns.func(ns)
    except ConfigError as exc:
        print(f"arenaforge: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
