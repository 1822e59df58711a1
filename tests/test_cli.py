import json

from arenaforge.cli import main


def test_layout_writes_json(tmp_path, capsys):
    out = tmp_path / "layout.json"
    rc = main(["layout", "--preset", "training", "--seed", "42", "--out", str(out), "--print"])
    assert rc == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["arenas"]) == 4
    assert data["summary"]["arenas"] == 4
    assert data["config"]["seed"] == 42
    printed = capsys.readouterr().out.strip().splitlines()[-1]
    assert json.loads(printed) == data


def test_layout_is_reproducible(tmp_path):
    a, b = tmp_path / "a.json", tmp_path / "b.json"
    main(["layout", "--preset", "single", "--seed", "9", "--strategy", "rejecting", "--out", str(a)])
    main(["layout", "--preset", "single", "--seed", "9", "--strategy", "rejecting", "--workers", "3", "--out", str(b)])
    assert json.loads(a.read_text())["arenas"] == json.loads(b.read_text())["arenas"]


def test_layout_from_config_file(tmp_path):
    cfg = tmp_path / "layout.yaml"
    cfg.write_text("preset: custom\ngrid: {x: 3, z: 1}\nobstacles_per_arena: 1\nseed: 1\n", encoding="utf-8")
    out = tmp_path / "out.json"
    assert main(["layout", "--config", str(cfg), "--out", str(out)]) == 0
    data = json.loads(out.read_text())
    assert [a["arena"]["linear_index"] for a in data["arenas"]] == [0, 1, 2]
    assert data["config"]["goal_strategy"] == "distributed"


def test_describe(capsys):
    assert main(["describe", "--preset", "large"]) == 0
    out = capsys.readouterr().out
    assert "ground_radius=7.00" in out
    assert "Grid 6x6" in out
    assert "obstacles/arena=8" in out


def test_config_errors_exit_2(tmp_path, capsys):
    assert main(["describe", "--preset", "huge"]) == 2
    assert "arenaforge:" in capsys.readouterr().err
    assert main(["layout", "--preset", "single", "--workers", "0", "--out", str(tmp_path / "x.json")]) == 2


def test_malformed_config_file_exits_2(tmp_path, capsys):
    bad = tmp_path / "bad.yaml"
    bad.write_text("arena: {arena_size: 20\n", encoding="utf-8")
    assert main(["describe", "--config", str(bad)]) == 2
    assert "invalid YAML" in capsys.readouterr().err
