# services/batch_service.py

import random
from dataclasses import dataclass, field
from multiprocessing import Pool, cpu_count
from typing import Optional

import numpy as np
from scipy.stats import sem

from models.config import DEFAULT_RUNS
from models.errors import InvalidConfiguration
from services.aggregator import BUCKETS
from services.simulation_service import SimulationService
from utils.logger import get_logger


def _simulate_run(args):
    """
    Una réplica completa. Vive a nivel de módulo para que Pool pueda serializarla.
    """
    config, seed, keep_history = args
    service = SimulationService(config, rng=random.Random(seed))
    if keep_history:
        summaries = service.run()
        return summaries[-1].buckets, [s.buckets for s in summaries]
    return service.run_final().buckets, None


@dataclass
class BatchSummary:
    runs: int
    mean_healthy_high_risk: float
    mean_total_healthy: float
    mean_infected: float
    mean_symptomatic: float
    stderr_healthy_high_risk: float = 0.0
    stderr_total_healthy: float = 0.0
    stderr_infected: float = 0.0
    stderr_symptomatic: float = 0.0
    # (runs, rondas + 1, 4) si se pidió el historial
    history: Optional[np.ndarray] = field(default=None, repr=False, compare=False)

    @property
    def mean_infected_total(self):
        """
        Asintomáticos + sintomáticos, como lo muestra la tabla de resultados.
        """
        return round(self.mean_infected + self.mean_symptomatic, 2)

    def as_dict(self):
        return {
            "runs": self.runs,
            "mean_healthy_high_risk": self.mean_healthy_high_risk,
            "mean_total_healthy": self.mean_total_healthy,
            "mean_infected": self.mean_infected,
            "mean_symptomatic": self.mean_symptomatic,
            "mean_infected_total": self.mean_infected_total,
            "stderr_healthy_high_risk": self.stderr_healthy_high_risk,
            "stderr_total_healthy": self.stderr_total_healthy,
            "stderr_infected": self.stderr_infected,
            "stderr_symptomatic": self.stderr_symptomatic,
        }


class BatchRunner:
    """
    Repite la simulación completa 'runs' veces y promedia los resultados de la
    última ronda.
    """
    def __init__(self, config, runs=DEFAULT_RUNS, seed=None, processes=None,
                 keep_history=False, logger=None):
        if isinstance(runs, bool) or not isinstance(runs, int) or runs < 1:
            raise InvalidConfiguration(f"El número de corridas debe ser un entero positivo ({runs!r})")
        self.config = config
        self.runs = runs
        self.seed = seed
        self.processes = processes
        self.keep_history = keep_history
        self.logger = logger if logger is not None else get_logger()

    def _run_seeds(self):
        # Una semilla independiente por corrida: mismos resultados en serie o en paralelo
        children = np.random.SeedSequence(self.seed).spawn(self.runs)
        return [int(child.generate_state(1)[0]) for child in children]

    def run(self):
        args_list = [(self.config, seed, self.keep_history) for seed in self._run_seeds()]

        if self.processes is not None and self.processes > 1 and self.runs > 1:
            num_workers = min(self.processes, cpu_count(), self.runs)
            self.logger.info(f"Ejecutando {self.runs} corridas con {num_workers} procesos...")
            with Pool(num_workers) as pool:
                results = pool.map(_simulate_run, args_list)
        else:
            results = []
            for i, args in enumerate(args_list, start=1):
                results.append(_simulate_run(args))
                if i % 100 == 0 or i == self.runs:
                    self.logger.info(f"Corrida {i}/{self.runs} completada.")

        finals = np.array([final for final, _ in results], dtype=float)  # (runs, 4)
        means = finals.mean(axis=0)
        if self.runs > 1:
            errors = sem(finals, axis=0)
        else:
            errors = np.zeros(len(BUCKETS))

        history = None
        if self.keep_history:
            history = np.array([h for _, h in results], dtype=float)

        summary = BatchSummary(
            runs=self.runs,
            mean_healthy_high_risk=round(float(means[0]), 2),
            mean_total_healthy=round(float(means[1]), 2),
            mean_infected=round(float(means[2]), 2),
            mean_symptomatic=round(float(means[3]), 2),
            stderr_healthy_high_risk=round(float(errors[0]), 2),
            stderr_total_healthy=round(float(errors[1]), 2),
            stderr_infected=round(float(errors[2]), 2),
            stderr_symptomatic=round(float(errors[3]), 2),
            history=history,
        )
        self.logger.info(
            f"Promedios tras {self.runs} corridas => Sanos={summary.mean_total_healthy}, "
            f"Alto riesgo={summary.mean_healthy_high_risk}, Asintomáticos={summary.mean_infected}, "
            f"Sintomáticos={summary.mean_symptomatic}"
        )
        return summary
