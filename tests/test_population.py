# tests/test_population.py

from models.config import SimulationConfig
from models.population import Population
from models.states import HealthState


def test_generate_counts():
    config = SimulationConfig(population=20, infected=3, vaccinated=4, high_risk=5)
    population = Population.generate(config)
    counts = population.counts()

    assert len(population) == 20
    assert counts[HealthState.STAGE1] == 3
    assert counts[HealthState.VACCINATED] == 4
    assert counts[HealthState.HIGH_RISK_HEALTHY] == 5
    assert counts[HealthState.HEALTHY] == 8
    assert counts[HealthState.SYMPTOMATIC] == 0


def test_generate_empty_population():
    population = Population.generate(SimulationConfig(population=0))
    assert len(population) == 0
    assert population.eligible_indices() == []


def test_eligible_indices_skip_symptomatic():
    population = Population([HealthState.HEALTHY, HealthState.SYMPTOMATIC,
                             HealthState.STAGE3, HealthState.SYMPTOMATIC,
                             HealthState.VACCINATED])
    assert population.eligible_indices() == [0, 2, 4]


def test_snapshot_is_independent_copy():
    population = Population([HealthState.HEALTHY, HealthState.STAGE1])
    snap = population.snapshot()
    population[0] = HealthState.STAGE1
    assert snap == (HealthState.HEALTHY, HealthState.STAGE1)


def test_generate_later_stages():
    config = SimulationConfig(population=10, infected=1, stage2=2, stage3=3, symptomatic=1)
    counts = Population.generate(config).counts()
    assert counts[HealthState.STAGE2] == 2
    assert counts[HealthState.STAGE3] == 3
    assert counts[HealthState.SYMPTOMATIC] == 1
    assert counts[HealthState.HEALTHY] == 3
