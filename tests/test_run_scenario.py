import pytest

from conftest import run
from petlift import ConfigError
from run_scenario import build_engine, build_requests, load_config, run_scenario

FAST_ENGINE = {
    "ticks": {"loading_tick": 0.001, "travel_tick": 0.002, "idle_poll": 0.001, "cycle_delay": 0.001}
}


def test_random_requests_are_valid_and_reproducible():
    config = {"random_requests": {"count": 20, "seed": 3, "interval": 0.5}}

    first = build_requests(config, num_floors=5)
    second = build_requests(config, num_floors=5)

    assert first == second
    assert len(first) == 20
    for request in first:
        assert 1 <= request["origin"] <= 5
        assert 1 <= request["destination"] <= 5
        assert request["origin"] != request["destination"]
        assert 0 <= request["category"] <= 3


def test_requests_sorted_by_time():
    config = {
        "requests": [
            {"at": 2.0, "origin": 1, "destination": 2, "category": 0},
            {"at": 0.5, "origin": 3, "destination": 1, "category": 1},
        ]
    }
    assert [r["at"] for r in build_requests(config, num_floors=5)] == [0.5, 2.0]


def test_incomplete_request_is_a_config_error():
    with pytest.raises(ConfigError):
        build_requests({"requests": [{"origin": 1, "destination": 2}]}, num_floors=5)


def test_scenario_runs_to_offline():
    config = {
        "engine": FAST_ENGINE,
        "requests": [
            {"at": 0.0, "origin": 1, "destination": 3, "category": 0},
            {"at": 0.0, "origin": 4, "destination": 2, "category": 3},
            {"at": 0.0, "origin": 2, "destination": 2, "category": 3},
        ],
        "stop_after": 0.3,
        "timeout": 5.0,
    }
    engine = build_engine(config)

    results = run(run_scenario(engine, config))

    assert results["submitted"] == 3
    assert results["rejected"] == 1
    assert not results["timed_out"]
    assert results["final_state"]["status"] == "OFFLINE"
    assert results["final_state"]["onboard"] == []
    assert results["discarded"] == results["final_state"]["total_waiting"]
    assert "Elevator state: OFFLINE" in results["final_report"]


def test_load_config_reads_scenario(tmp_path):
    path = tmp_path / "scenario.json"
    path.write_text('{"name": "tiny", "stop_after": 1.0}')
    assert load_config(path) == {"name": "tiny", "stop_after": 1.0}


@pytest.mark.parametrize("text", ["{not json", "[1, 2]"])
def test_load_config_rejects_bad_files(tmp_path, text):
    path = tmp_path / "scenario.json"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(path)


def test_non_numeric_tick_is_a_config_error():
    with pytest.raises(ConfigError):
        build_engine({"engine": {"ticks": {"loading_tick": "slow"}}})
