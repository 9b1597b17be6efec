# services/simulation_service.py

import random

from models.config import ROUNDS
from models.population import Population
from services.aggregator import StateAggregator
from services.partitioner import GroupPartitioner
from services.propagator import InfectionPropagator
from utils.logger import get_logger


class SimulationService:
    def __init__(self, config, rng=None, logger=None):
        """
        Crea la población inicial a partir de 'config'.
        'rng' es cualquier objeto con randrange (random.Random sembrado en pruebas).
        """
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.logger = logger if logger is not None else get_logger()

        self.population = Population.generate(config)
        self.partitioner = GroupPartitioner(self.rng)
        self.propagator = InfectionPropagator(config.spread_mode, logger=self.logger)
        self.aggregator = StateAggregator(config.high_risk, logger=self.logger)

    def step(self, current_round):
        """
        Un día de simulación:
          1. Pool de elegibles (no sintomáticos)
          2. Copia de las capacidades configuradas
          3. Formar grupos y propagar dentro de cada uno
          4. Progresión sin contagio para el remanente
        Retorna cuántos individuos se infectaron en el día.
        """
        pool = self.population.eligible_indices()
        capacities = list(self.config.group_capacities)

        newly_infected = 0
        groups = 0
        for capacity, group in self.partitioner.iter_groups(pool, capacities):
            outcome = self.propagator.propagate_group(self.population, group)
            newly_infected += len(outcome.newly_infected)
            groups += 1
            self.logger.debug(f"Ronda {current_round}: grupo {groups} ({len(group)}/{capacity}).")

        # 'pool' quedó con quienes no entraron en ningún grupo
        self.propagator.progress_remainder(self.population, pool)

        self.logger.debug(
            f"Ronda {current_round}: {groups} grupos, {len(pool)} sin grupo, "
            f"{newly_infected} nuevos infectados."
        )
        return newly_infected

    def run(self):
        """
        Ejecuta las rondas y retorna el resumen de la ronda 0 (población
        inicial) y de cada ronda posterior.
        """
        summaries = [self.aggregator.summarize(0, self.population)]
        for current_round in range(1, ROUNDS + 1):
            newly_infected = self.step(current_round)
            summary = self.aggregator.summarize(current_round, self.population, newly_infected)
            summaries.append(summary)
            self.logger.info(
                f"Ronda {current_round} => Sanos={summary.total_healthy} "
                f"(alto riesgo={summary.healthy_high_risk}), "
                f"Asintomáticos={summary.infected_asymptomatic}, "
                f"Sintomáticos={summary.symptomatic}, "
                f"Nuevos infectados={summary.newly_infected}"
            )
        return summaries

    def run_final(self):
        """
        Igual que run() pero sin guardar el historial: sólo la última ronda.
        """
        summary = self.aggregator.summarize(0, self.population)
        for current_round in range(1, ROUNDS + 1):
            newly_infected = self.step(current_round)
            summary = self.aggregator.summarize(current_round, self.population, newly_infected)
        return summary
