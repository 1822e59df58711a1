import json
import logging

from arenaforge.config.schema import GridSize
from arenaforge.diagnostics import CollectingSink, LoggingSink, iter_violations, report, summarize
from arenaforge.grid import place_grid
from arenaforge.logging_util import get_logger
from arenaforge.placement.sampling import make_rng_factory
from arenaforge.types import ArenaIndex, ConstraintViolation, EntityKind, ViolationKind


def _degraded(impossible_cfg):
    return place_grid(impossible_cfg, GridSize(x=2, z=1), make_rng_factory(0), obstacle_count=2)


def test_collecting_sink_receives_every_violation(impossible_cfg):
    outcomes = _degraded(impossible_cfg)
    sink = CollectingSink()
    n = report(outcomes, sink)
    assert n == 4
    assert sink.violations == list(iter_violations(outcomes))


def test_clean_layout_reports_nothing(cfg):
    outcomes = place_grid(cfg, GridSize(x=2, z=2), make_rng_factory(42), obstacle_count=1)
    sink = CollectingSink()
    assert report(outcomes, sink) == 0
    assert sink.violations == []


def test_summarize(impossible_cfg, cfg):
    s = summarize(_degraded(impossible_cfg))
    assert s["arenas"] == 2
    assert s["clean"] == 0
    assert s["degraded"] == [0, 1]
    assert s["obstacles_placed"] == 0
    assert s["violations"] == {"placement_exhausted": 4, "bounds_violation": 0}

    clean = summarize(place_grid(cfg, GridSize(x=2, z=1), make_rng_factory(4), obstacle_count=2))
    assert clean["clean"] == 2 and clean["degraded"] == []
    assert clean["obstacles_placed"] == 4


def test_logging_sink_levels(caplog):
    sink = LoggingSink()
    arena = ArenaIndex(linear_index=3, x=1, z=1)
    with caplog.at_level(logging.WARNING, logger="arenaforge"):
        sink.emit(ConstraintViolation(arena, EntityKind.GOAL, ViolationKind.PLACEMENT_EXHAUSTED, "goal too close"))
        sink.emit(ConstraintViolation(arena, EntityKind.AGENT, ViolationKind.BOUNDS_VIOLATION, "agent outside"))
    levels = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "arenaforge.diagnostics"]
    assert levels == [
        (logging.WARNING, "Arena 3: goal too close"),
        (logging.ERROR, "Arena 3: agent outside"),
    ]
    assert caplog.records[-1].extra["kind"] == "bounds_violation"


def test_json_logger_carries_violation_fields(capsys, monkeypatch):
    monkeypatch.delenv("ARENAFORGE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ARENAFORGE_LOG_FORMAT", raising=False)
    log = get_logger("arenaforge.test.json_sink", fmt="json", level="WARNING")
    log.propagate = False
    v = ConstraintViolation(
        ArenaIndex(linear_index=0, x=0, z=0),
        EntityKind.OBSTACLE,
        ViolationKind.PLACEMENT_EXHAUSTED,
        "obstacle 1 could not clear 1.5 after 20 attempts",
        slot=1,
    )
    LoggingSink(log).emit(v)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    rec = json.loads(line)
    assert rec["level"] == "WARNING"
    assert rec["arena"] == 0
    assert rec["slot"] == 1
    assert rec["entity"] == "obstacle"


def test_get_logger_env_override(capsys, monkeypatch):
    monkeypatch.setenv("ARENAFORGE_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("ARENAFORGE_LOG_FORMAT", "text")
    log = get_logger("arenaforge.test.env_override", fmt="json", level="DEBUG")
    log.propagate = False
    assert log.level == logging.ERROR
    log.warning("hidden")
    log.error("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[ERROR] arenaforge.test.env_override: shown" in out
    # second call reuses the handler
    assert get_logger("arenaforge.test.env_override") is log
    assert len(log.handlers) == 1
