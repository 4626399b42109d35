from __future__ import annotations

import plotly.graph_objects as go
import pandas as pd
from typing import Callable, Mapping, Optional

from .synthetic import DaySeries

COLORS = {
    "actual": "#1e293b",
    "ensemble": "#2563eb",
    "ensemble_fill": "rgba(37,99,235,0.1)",
    "rf": "#fb923c",
    "lr": "#818cf8",
    "persistence": "#cbd5e1",
    "scatter": "rgba(37,99,235,0.5)",
}

# Trace order of the main chart; DashboardState relies on it.
MAIN_TRACES = ("actual", "ensemble", "rf")


def timeseries_figure(view: DaySeries, tr: Optional[Callable[[str], str]] = None) -> go.Figure:
    """Line chart of actual, ensemble and random forest (hidden until toggled in the legend)."""
    tr = tr or (lambda k, **_: k)
    labels = list(view.labels)
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=labels, y=view.actual, name=tr("actual_name"), mode="lines",
                             line=dict(color=COLORS["actual"], width=2)))
    fig.add_trace(go.Scatter(x=labels, y=view.ensemble, name=tr("ensemble_name"), mode="lines",
                             line=dict(color=COLORS["ensemble"], width=2, shape="spline", smoothing=0.3),
                             fill="tozeroy", fillcolor=COLORS["ensemble_fill"]))
    fig.add_trace(go.Scatter(x=labels, y=view.rf, name=tr("rf_name"), mode="lines",
                             line=dict(color=COLORS["rf"], width=1, dash="dash"), visible="legendonly"))
    fig.update_layout(title=tr("main_chart_title"), hovermode="x unified", template="plotly_white",
                      yaxis_title=tr("rain_axis"))
    fig.update_yaxes(rangemode="tozero")
    fig.update_xaxes(showgrid=False)
    return fig


def error_comparison_figure(errors: Mapping[str, float], tr: Optional[Callable[[str], str]] = None) -> go.Figure:
    """Horizontal bar chart; keys of ``errors`` are model codes (persistence, lr, rf, ensemble)."""
    tr = tr or (lambda k, **_: k)
    models = list(errors)
    fig = go.Figure(go.Bar(
        x=[errors[m] for m in models],
        y=[tr(f"{m}_name") for m in models],
        orientation="h",
        marker_color=[COLORS.get(m, "#94a3b8") for m in models],
    ))
    fig.update_layout(title=tr("error_chart_title"), xaxis_title=tr("error_axis"), showlegend=False,
                      template="plotly_white")
    fig.update_yaxes(autorange="reversed")
    return fig


def scatter_figure(points: pd.DataFrame, tr: Optional[Callable[[str], str]] = None) -> go.Figure:
    tr = tr or (lambda k, **_: k)
    fig = go.Figure(go.Scatter(
        x=points["actual"], y=points["ensemble"], mode="markers",
        marker=dict(color=COLORS["scatter"], size=6),
    ))
    fig.update_layout(title=tr("scatter_title"), xaxis_title=tr("scatter_x"), yaxis_title=tr("scatter_y"),
                      showlegend=False, template="plotly_white")
    return fig
