import json

from arenaforge import generate_layout
from arenaforge.config.presets import custom_cfg, large_training_cfg, training_cfg
from arenaforge.diagnostics import CollectingSink
from arenaforge.placement.sampling import make_rng_factory


def test_generate_layout_defaults_to_config_seed():
    lc = training_cfg(seed=42)
    a = generate_layout(lc)
    b = generate_layout(lc, rng_factory=make_rng_factory(42))
    assert a.outcomes == b.outcomes
    assert a.config is lc
    assert a.summary["arenas"] == 4


def test_large_training_layout():
    res = generate_layout(large_training_cfg(seed=1, workers=4))
    assert len(res.outcomes) == 36
    assert [o.arena.linear_index for o in res.outcomes] == list(range(36))
    assert res.summary["violations"]["bounds_violation"] == 0


def test_sink_and_json_payload():
    lc = custom_cfg(2, 1, 3, arena={"min_obstacle_distance": 100.0, "max_attempts": 5}, seed=0)
    sink = CollectingSink()
    res = generate_layout(lc, sink=sink)
    assert len(sink.violations) == 6
    payload = json.loads(json.dumps(res.to_dict()))
    assert payload["summary"]["degraded"] == [0, 1]
    arena = payload["arenas"][1]
    assert set(arena) == {"arena", "center", "agent", "goal", "obstacles", "ok", "violations"}
    assert arena["ok"] is False
    assert arena["center"] == [20.0, 0.0, 0.0]
    assert payload["config"]["grid"] == {"x": 2, "z": 1}
