# main.py

import argparse
import csv
import logging
import random
import sys

from models.config import SimulationConfig, DEFAULT_RUNS
from models.errors import InvalidConfiguration
from services.aggregator import BUCKETS
from services.batch_service import BatchRunner
from services.simulation_service import SimulationService
from utils.logger import get_logger


def build_parser():
    parser = argparse.ArgumentParser(description="Simulación de contagio por grupos (Virus Alert).")
    parser.add_argument("--config", default=None, type=str,
                        help="Archivo JSON con la configuración.")
    parser.add_argument("--population", default=None, type=int, help="Tamaño de la población.")
    parser.add_argument("--infected", default=0, type=int, help="Infectados iniciales.")
    parser.add_argument("--vaccinated", default=0, type=int, help="Vacunados.")
    parser.add_argument("--high-risk", default=0, type=int, help="Sanos de alto riesgo.")
    parser.add_argument("--stage2", default=0, type=int, help="Infectados en el día 2 de incubación.")
    parser.add_argument("--stage3", default=0, type=int, help="Infectados en el día 3 de incubación.")
    parser.add_argument("--symptomatic", default=0, type=int, help="Enfermos al inicio.")
    parser.add_argument("--capacities", default=None, type=int, nargs="*",
                        help="Capacidades de los lugares habilitados.")
    parser.add_argument("--spread-mode", default="infect_one", type=str,
                        help="infect_all | infect_one")
    parser.add_argument("--close", default=[], action="append",
                        help="Cerrar un lugar del tablero por defecto (repetible).")
    parser.add_argument("--runs", default=None, type=int,
                        help=f"Corridas Monte Carlo (p.ej. {DEFAULT_RUNS}). Sin este flag: corrida individual.")
    parser.add_argument("--seed", default=None, type=int, help="Semilla aleatoria.")
    parser.add_argument("--processes", default=None, type=int,
                        help="Procesos para las corridas Monte Carlo.")
    parser.add_argument("--csv", default=None, type=str, help="Exportar resultados a CSV.")
    parser.add_argument("--plot", action="store_true", help="Mostrar gráficos.")
    parser.add_argument("--verbose", "-v", action="count", default=0)
    return parser


def load_config(args):
    if args.config:
        return SimulationConfig.from_json(args.config)
    if args.population is None:
        return SimulationConfig.default(closed=args.close)
    return SimulationConfig(
        population=args.population,
        infected=args.infected,
        vaccinated=args.vaccinated,
        high_risk=args.high_risk,
        stage2=args.stage2,
        stage3=args.stage3,
        symptomatic=args.symptomatic,
        group_capacities=tuple(args.capacities or ()),
        spread_mode=args.spread_mode,
    )


def write_rounds_csv(path, summaries):
    with open(path, "w", newline='') as csvfile:
        fieldnames = ["round", *BUCKETS, "newly_infected", "newly_infected_high_risk"]
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()
        for summary in summaries:
            writer.writerow(summary.as_dict())


def write_batch_csv(path, summary):
    row = summary.as_dict()
    with open(path, "w", newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=list(row))
        writer.writeheader()
        writer.writerow(row)


def run_single(config, args, logger):
    service = SimulationService(config, rng=random.Random(args.seed), logger=logger)
    summaries = service.run()

    print(f"{'Ronda':>5} {'AltoRiesgo':>10} {'Sanos':>6} {'Asint.':>6} {'Sint.':>6} {'Nuevos':>6}")
    for s in summaries:
        note = ""
        if s.newly_infected_high_risk:
            note = f"  ({s.newly_infected_high_risk} de alto riesgo recién infectados)"
        print(f"{s.round:>5} {s.healthy_high_risk:>10} {s.total_healthy:>6} "
              f"{s.infected_asymptomatic:>6} {s.symptomatic:>6} {s.newly_infected:>6}{note}")

    if args.csv:
        write_rounds_csv(args.csv, summaries)
    if args.plot:
        from visualization.plot_matplotlib import plot_rounds
        from visualization.plot_plotly import plot_interactive
        import matplotlib.pyplot as plt
        plot_rounds(summaries)
        plot_interactive(summaries)
        plt.show()


def run_batch(config, args, logger):
    runner = BatchRunner(config, runs=args.runs, seed=args.seed, processes=args.processes,
                         keep_history=args.plot, logger=logger)
    summary = runner.run()

    print(f"Promedios sobre {summary.runs} corridas (ronda final):")
    print(f"  Sanos alto riesgo:  {summary.mean_healthy_high_risk:.2f} ± {summary.stderr_healthy_high_risk:.2f}")
    print(f"  Sanos (total):      {summary.mean_total_healthy:.2f} ± {summary.stderr_total_healthy:.2f}")
    print(f"  Infectados:         {summary.mean_infected_total:.2f}")
    print(f"    asintomáticos:    {summary.mean_infected:.2f} ± {summary.stderr_infected:.2f}")
    print(f"    sintomáticos:     {summary.mean_symptomatic:.2f} ± {summary.stderr_symptomatic:.2f}")

    if args.csv:
        write_batch_csv(args.csv, summary)
    if args.plot:
        from visualization.plot_matplotlib import plot_batch
        import matplotlib.pyplot as plt
        plot_batch(summary.history)
        plt.show()


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING
    logger = get_logger(level)

    try:
        config = load_config(args)
        if args.runs is None:
            run_single(config, args, logger)
        else:
            run_batch(config, args, logger)
    except InvalidConfiguration as exc:
        print(f"Configuración inválida: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
