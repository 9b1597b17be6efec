# visualization/plot_plotly.py

import plotly.graph_objects as go

from models.states import HealthState

COLORS = {
    HealthState.VACCINATED: "#2ca02c",
    HealthState.HIGH_RISK_HEALTHY: "#17becf",
    HealthState.HEALTHY: "#1f77b4",
    HealthState.STAGE1: "#ffdd57",
    HealthState.STAGE2: "#ffb347",
    HealthState.STAGE3: "#ff7f0e",
    HealthState.SYMPTOMATIC: "#d62728",
}


def plot_interactive(summaries, show=True):
    """
    Barras apiladas con el conteo de cada estado por ronda.
    """
    rounds = [s.round for s in summaries]
    fig = go.Figure()
    for state in HealthState:
        fig.add_trace(go.Bar(
            x=rounds,
            y=[s.state_counts.get(state, 0) for s in summaries],
            name=state.name,
            marker=dict(color=COLORS[state])
        ))
    fig.update_layout(
        barmode="stack",
        title="Estados de salud por ronda",
        xaxis=dict(title="Ronda", dtick=1),
        yaxis_title="Individuos",
        showlegend=True
    )
    if show:
        fig.show()
    return fig
