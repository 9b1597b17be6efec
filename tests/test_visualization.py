# tests/test_visualization.py

import random

import matplotlib
matplotlib.use("Agg")  # headless
import matplotlib.pyplot as plt

from models.config import SimulationConfig, ROUNDS
from models.states import HealthState
from services.batch_service import BatchRunner
from services.simulation_service import SimulationService
from visualization.plot_matplotlib import plot_rounds, plot_batch
from visualization.plot_plotly import plot_interactive

CONFIG = SimulationConfig(population=20, infected=2, high_risk=4, group_capacities=(5, 5))


def test_plot_rounds_and_batch(tmp_path):
    summaries = SimulationService(CONFIG, rng=random.Random(0)).run()
    fig = plot_rounds(summaries, output=tmp_path / "rounds.png")
    assert len(fig.axes[0].lines) == 4
    assert (tmp_path / "rounds.png").exists()

    history = BatchRunner(CONFIG, runs=3, seed=0, keep_history=True).run().history
    fig = plot_batch(history)
    assert len(fig.axes[0].lines) == 4
    plt.close("all")


def test_plot_interactive_stacks_every_state():
    summaries = SimulationService(CONFIG, rng=random.Random(1)).run()
    fig = plot_interactive(summaries, show=False)
    assert [trace.name for trace in fig.data] == [st.name for st in HealthState]
    assert all(sum(y) == CONFIG.population
               for y in zip(*(trace.y for trace in fig.data)))
    assert len(fig.data[0].x) == ROUNDS + 1
