import csv
import json

import pytest

from trailsketch.config import PopulationConfig, SketchConfig
from trailsketch.headless import run_headless


def _read_csv(path):
    with path.open(newline="") as handle:
        return list(csv.reader(handle))


def test_headless_log_header_and_rows(tmp_path):
    log_path = tmp_path / "walkers.csv"
    run_headless(steps=3, seed=1, log_path=log_path, deterministic_log=True)
    rows = _read_csv(log_path)

    assert len(rows) == 4
    assert rows[0] == [
        "tick",
        "population",
        "pair_checks",
        "interactions",
        "avg_speed",
        "max_speed",
        "max_trail",
        "tick_ms",
    ]
    idx = {name: i for i, name in enumerate(rows[0])}
    for tick, row in enumerate(rows[1:], start=1):
        population = int(row[idx["population"]])
        assert int(row[idx["tick"]]) == tick
        assert int(row[idx["pair_checks"]]) == population * (population - 1) // 2
        assert int(row[idx["interactions"]]) <= int(row[idx["pair_checks"]])
        assert int(row[idx["max_trail"]]) == tick + 1
        assert float(row[idx["max_speed"]]) <= 5.0
        assert float(row[idx["tick_ms"]]) == 0.0


def test_headless_is_deterministic_per_seed(tmp_path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"
    run_headless(steps=20, seed=9, log_path=first, deterministic_log=True)
    run_headless(steps=20, seed=9, log_path=second, deterministic_log=True)

    assert first.read_text() == second.read_text()


def test_headless_summary_and_snapshot_output(tmp_path):
    summary_path = tmp_path / "summary.json"
    snapshot_path = tmp_path / "snapshot.json"
    config = SketchConfig(population=PopulationConfig(min_walkers=5, max_walkers=5, max_path_length=3))

    run_headless(
        steps=4,
        seed=3,
        log_path=None,
        deterministic_log=True,
        summary_path=summary_path,
        summary_window=2,
        snapshot_path=snapshot_path,
        config=config,
    )

    summary = json.loads(summary_path.read_text())
    assert summary["steps"] == 4
    assert summary["seed"] == 3
    assert summary["population"] == 5
    assert summary["tail_window"]["window"] == 2
    assert "avg_speed" in summary

    snapshot = json.loads(snapshot_path.read_text())
    assert snapshot["tick"] == 4
    assert len(snapshot["walkers"]) == 5
    assert all(len(walker["trail"]) == 3 for walker in snapshot["walkers"])


def test_headless_seed_does_not_change_shared_config():
    config = SketchConfig(seed=None)

    first = run_headless(steps=1, seed=11, log_path=None, config=config)
    second = run_headless(steps=1, seed=12, log_path=None, config=config)

    assert config.seed is None
    assert first.config.seed == 11
    assert second.config.seed == 12


def test_headless_rejects_negative_steps():
    with pytest.raises(ValueError):
        run_headless(steps=-1, seed=None, log_path=None)
