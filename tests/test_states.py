# tests/test_states.py

import pytest

from models.states import HealthState, SpreadMode


@pytest.mark.parametrize("state, expected", [
    (HealthState.STAGE1, HealthState.STAGE2),
    (HealthState.STAGE2, HealthState.STAGE3),
    (HealthState.STAGE3, HealthState.SYMPTOMATIC),
    (HealthState.SYMPTOMATIC, HealthState.SYMPTOMATIC),
    (HealthState.VACCINATED, HealthState.VACCINATED),
    (HealthState.HEALTHY, HealthState.HEALTHY),
    (HealthState.HIGH_RISK_HEALTHY, HealthState.HIGH_RISK_HEALTHY),
])
def test_advanced(state, expected):
    assert state.advanced() is expected


def test_advancing_never_lowers_rank():
    for state in HealthState:
        assert state.advanced().rank >= state.rank


def test_categories():
    assert [st for st in HealthState if st.is_susceptible] == [
        HealthState.HIGH_RISK_HEALTHY, HealthState.HEALTHY]
    assert [st for st in HealthState if st.is_incubating] == [
        HealthState.STAGE1, HealthState.STAGE2, HealthState.STAGE3]
    assert HealthState.VACCINATED.is_healthy
    assert not HealthState.VACCINATED.is_susceptible
    assert not HealthState.SYMPTOMATIC.is_healthy


@pytest.mark.parametrize("raw, expected", [
    ("infect_all", SpreadMode.INFECT_ALL),
    ("Infect-One", SpreadMode.INFECT_ONE),
    ("all", SpreadMode.INFECT_ALL),
    ("ONE", SpreadMode.INFECT_ONE),
    (SpreadMode.INFECT_ALL, SpreadMode.INFECT_ALL),
])
def test_spread_mode_parse(raw, expected):
    assert SpreadMode.parse(raw) is expected


def test_spread_mode_parse_unknown():
    with pytest.raises(ValueError):
        SpreadMode.parse("nearest")
