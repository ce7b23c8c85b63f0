import pytest

from petlift import ConfigError, ElevatorConstraints, EngineConfig, TickConfig


def test_defaults():
    config = EngineConfig()
    assert config.constraints == ElevatorConstraints(num_floors=5, max_capacity=5, max_weight=50)
    assert config.ticks.loading_tick == 1.0
    assert config.ticks.travel_tick == 2.0


def test_from_dict_overrides_selected_fields():
    config = EngineConfig.from_dict({"constraints": {"num_floors": 8}, "ticks": {"travel_tick": 0.5}})
    assert config.constraints.num_floors == 8
    assert config.constraints.max_weight == 50
    assert config.ticks.travel_tick == 0.5
    assert config.as_dict()["constraints"]["num_floors"] == 8


@pytest.mark.parametrize(
    "data",
    [
        {"elevators": 2},
        {"constraints": {"floors": 3}},
        {"ticks": {"travel_tick": -1}},
        {"constraints": {"num_floors": 1}},
        {"ticks": [1, 2]},
        {"ticks": {"travel_tick": "fast"}},
        {"constraints": {"max_capacity": "5"}},
        {"constraints": {"max_weight": 10}},
    ],
)
def test_bad_config_raises(data):
    with pytest.raises(ConfigError):
        EngineConfig.from_dict(data)


def test_negative_tick_rejected():
    with pytest.raises(ConfigError):
        TickConfig(cycle_delay=-0.1)


def test_weight_limit_must_fit_heaviest_pet():
    with pytest.raises(ConfigError):
        ElevatorConstraints(max_weight=15)
    assert ElevatorConstraints(max_weight=16).max_weight == 16
