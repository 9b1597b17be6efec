# visualization/plot_matplotlib.py

import matplotlib.pyplot as plt
import numpy as np

LABELS = ["Sanos alto riesgo", "Sanos (total)", "Infectados asintomáticos", "Sintomáticos"]


def plot_rounds(summaries, output=None):
    """
    Evolución de los cuatro totales en una corrida individual.
    """
    rounds = [s.round for s in summaries]
    buckets = np.array([s.buckets for s in summaries])

    fig, ax = plt.subplots(figsize=(12, 6))
    for i, label in enumerate(LABELS):
        ax.plot(rounds, buckets[:, i], marker='o', label=label)

    ax.set_title("Simulación Virus Alert (corrida individual)")
    ax.set_xlabel("Ronda (días)")
    ax.set_ylabel("Número de individuos")
    ax.set_xticks(rounds)
    ax.legend(loc='upper right')
    ax.grid(True)
    fig.tight_layout()
    if output:
        fig.savefig(output)
    return fig


def plot_batch(history, output=None):
    """
    Media e intervalo 2.5-97.5% por ronda sobre todas las corridas.
    'history' tiene forma (corridas, rondas + 1, 4).
    """
    history = np.asarray(history)
    rounds = np.arange(history.shape[1])

    fig, ax = plt.subplots(figsize=(12, 6))
    for i, label in enumerate(LABELS):
        all_counts = history[:, :, i]
        mean = all_counts.mean(axis=0)
        lower = np.percentile(all_counts, 2.5, axis=0)
        upper = np.percentile(all_counts, 97.5, axis=0)
        ax.plot(rounds, mean, label=f"Media {label}")
        ax.fill_between(rounds, lower, upper, alpha=0.2)

    ax.set_title(f"Simulación Virus Alert ({history.shape[0]} corridas)")
    ax.set_xlabel("Ronda (días)")
    ax.set_ylabel("Número de individuos")
    ax.legend(loc='upper right')
    ax.grid(True)
    fig.tight_layout()
    if output:
        fig.savefig(output)
    return fig
