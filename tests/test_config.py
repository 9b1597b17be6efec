# tests/test_config.py

import json

import pytest

from models.config import SimulationConfig, DEFAULT_CAPACITIES
from models.errors import InvalidConfiguration
from models.states import SpreadMode


def test_defaults_match_board_game():
    config = SimulationConfig.default()
    assert config.population == 100
    assert config.infected == 2
    assert config.group_capacities == DEFAULT_CAPACITIES
    assert config.spread_mode is SpreadMode.INFECT_ONE
    assert config.healthy == 98


def test_capacities_are_frozen_into_tuple():
    caps = [3, 4]
    config = SimulationConfig(population=5, group_capacities=caps, spread_mode="all")
    caps.append(10)
    assert config.group_capacities == (3, 4)
    assert config.spread_mode is SpreadMode.INFECT_ALL


def test_empty_capacities_allowed():
    config = SimulationConfig(population=5, infected=1)
    assert config.group_capacities == ()


@pytest.mark.parametrize("kwargs", [
    dict(population=-1),
    dict(population=10, infected=-1),
    dict(population=10, vaccinated=-2),
    dict(population=10, high_risk=-3),
    dict(population=10, infected=4, vaccinated=4, high_risk=3),
    dict(population=10, group_capacities=[3, 0]),
    dict(population=10, group_capacities=[3, -1]),
    dict(population=10, group_capacities=[2.5]),
    dict(population=10, group_capacities=5),
    dict(population=10.0),
    dict(population=10, spread_mode="nearest"),
])
def test_invalid_configuration(kwargs):
    with pytest.raises(InvalidConfiguration):
        SimulationConfig(**kwargs)


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        SimulationConfig(population=1, infected=2)


def test_from_dict_rejects_unknown_and_missing_keys():
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_dict({"population": 10, "buildings": [3]})
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_dict({"infected": 1})


def test_from_json_round_trip(tmp_path):
    path = tmp_path / "config.json"
    original = SimulationConfig(population=20, infected=2, vaccinated=3, high_risk=4,
                                group_capacities=(5, 6), spread_mode=SpreadMode.INFECT_ALL)
    path.write_text(json.dumps(original.as_dict()), encoding="utf-8")
    assert SimulationConfig.from_json(path) == original


def test_from_json_invalid(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{population: 3", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_json(path)
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_json(path)


def test_from_json_missing_file(tmp_path):
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_json(tmp_path / "missing.json")


@pytest.mark.parametrize("kwargs", [
    dict(population=5, stage2=-1),
    dict(population=5, infected=2, stage3=2, symptomatic=2),
])
def test_invalid_starting_stages(kwargs):
    with pytest.raises(InvalidConfiguration):
        SimulationConfig(**kwargs)


def test_default_board_with_closed_venues():
    config = SimulationConfig.default(closed=["colegio", "gimnasio"])
    assert config.group_capacities == (20, 4, 4, 12, 4, 8)
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.default(closed=["estadio"])
