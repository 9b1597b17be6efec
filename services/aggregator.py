# services/aggregator.py

from dataclasses import dataclass, field
from typing import Dict, Optional

from models.states import HealthState

BUCKETS = ("healthy_high_risk", "total_healthy", "infected_asymptomatic", "symptomatic")


@dataclass(frozen=True)
class RoundSummary:
    round: int
    healthy_high_risk: int
    total_healthy: int
    infected_asymptomatic: int
    symptomatic: int
    newly_infected: int = 0
    newly_infected_high_risk: Optional[int] = None
    state_counts: Dict[HealthState, int] = field(default_factory=dict, compare=False)

    @property
    def buckets(self):
        return tuple(getattr(self, name) for name in BUCKETS)

    def as_dict(self):
        row = {"round": self.round}
        row.update(zip(BUCKETS, self.buckets))
        row["newly_infected"] = self.newly_infected
        row["newly_infected_high_risk"] = self.newly_infected_high_risk
        return row


def classify(counts):
    """
    Agrupa los conteos por estado en los cuatro totales reportados.
    """
    healthy_high_risk = counts[HealthState.HIGH_RISK_HEALTHY]
    total_healthy = (counts[HealthState.VACCINATED] + healthy_high_risk
                     + counts[HealthState.HEALTHY])
    infected = (counts[HealthState.STAGE1] + counts[HealthState.STAGE2]
                + counts[HealthState.STAGE3])
    return healthy_high_risk, total_healthy, infected, counts[HealthState.SYMPTOMATIC]


class StateAggregator:
    """
    Resume cada ronda y detecta sanos de alto riesgo recién infectados
    comparando contra el último conteo observado.
    """
    def __init__(self, initial_high_risk, logger=None):
        self.high_risk_baseline = initial_high_risk
        self.logger = logger

    def summarize(self, round_number, population, newly_infected=0):
        """
        'newly_infected' es lo que retornó step() para la ronda (0 en la ronda 0).
        """
        counts = population.counts()
        healthy_high_risk, total_healthy, infected, symptomatic = classify(counts)

        newly_infected_high_risk = None
        if healthy_high_risk < self.high_risk_baseline:
            newly_infected_high_risk = self.high_risk_baseline - healthy_high_risk
            self.high_risk_baseline = healthy_high_risk
            if self.logger is not None:
                self.logger.info(
                    f"Ronda {round_number}: {newly_infected_high_risk} individuos de alto riesgo "
                    f"infectados en esta ronda."
                )

        return RoundSummary(
            round=round_number,
            healthy_high_risk=healthy_high_risk,
            total_healthy=total_healthy,
            infected_asymptomatic=infected,
            symptomatic=symptomatic,
            newly_infected=newly_infected,
            newly_infected_high_risk=newly_infected_high_risk,
            state_counts=counts,
        )
