# src/sortscope/plotting.py
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import numpy as np
import plotly.graph_objects as go

from .sorts import ALGORITHM_NAMES

# one color per algorithm, in canonical order
ALGORITHM_COLORS = {
    "Bubble Sort": '#ea4335',
    "Insertion Sort": '#fbbc04',
    "Merge Sort": '#34a853',
    "Quick Sort": '#4285f4',
}

_AXIS_STYLE = dict(
    title_font=dict(size=14, color='#1e293b', family="Inter, sans-serif"),
    tickfont=dict(size=12, color='#64748b', family="Inter, sans-serif"),
    gridcolor='rgba(66, 133, 244, 0.1)',
    linecolor='rgba(66, 133, 244, 0.3)',
    showgrid=True,
    gridwidth=1,
)


def _base_layout(fig: go.Figure, title: str, y_title: str, log_y: bool) -> go.Figure:
    fig.update_layout(
        barmode="group",
        title=dict(
            text=title,
            font=dict(size=20, color='#1e293b', family="Inter, sans-serif"),
            x=0.5,
        ),
        margin=dict(l=80, r=40, t=90, b=60),
        height=500,
        template="plotly_white",
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        font=dict(family="Inter, sans-serif", size=12, color='#374151'),
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="center",
            x=0.5,
            bgcolor='rgba(255,255,255,0.9)',
            bordercolor='rgba(66, 133, 244, 0.2)',
            borderwidth=2,
        ),
    )
    fig.update_xaxes(title="Dataset", **_AXIS_STYLE)
    fig.update_yaxes(title=y_title, type="log" if log_y else "linear", **_AXIS_STYLE)
    return fig


def _all_positive(fig: go.Figure) -> bool:
    """True when every plotted value can sit on a log axis (zeros cannot)."""
    values = [v for trace in fig.data for v in (trace.y or ()) if v is not None and not np.isnan(v)]
    return bool(values) and min(values) > 0


def _dataset_labels(reports) -> List[str]:
    return [f"{r.dataset.name} (n={r.n})" for r in reports]


def _series(reports, attr: str, algo: str) -> List[float]:
    """Per-dataset values for one algorithm; NaN where it was skipped."""
    values: List[float] = []
    for rep in reports:
        found = next((r for r in rep.results if r.name == algo), None)
        if found is None or found.skipped:
            values.append(float("nan"))
        else:
            values.append(float(getattr(found, attr)))
    return values


def _error_bars(reports, algo: str) -> Optional[Dict[str, List[float]]]:
    plus: List[float] = []
    minus: List[float] = []
    for rep in reports:
        summary = rep.timings.get(algo)
        if summary is None or summary.time_ci is None:
            return None
        ci = summary.time_ci
        plus.append(max(0.0, ci.upper - ci.mean))
        minus.append(max(0.0, ci.mean - ci.lower))
    return dict(type="data", symmetric=False, array=plus, arrayminus=minus)


def runtime_bar_figure(reports, title: str = "Sorting Benchmark", algorithms: Sequence[str] = ALGORITHM_NAMES) -> go.Figure:
    """Grouped bars of elapsed time (ms) per dataset and algorithm."""
    x = _dataset_labels(reports)
    fig = go.Figure()
    for algo in algorithms:
        y = _series(reports, "time_ms", algo)
        if all(np.isnan(y)):
            continue
        error_y = _error_bars(reports, algo) if reports else None
        if error_y is not None:
            # bars show the repeated-run mean when confidence intervals exist
            y = [rep.timings[algo].time_ci.mean for rep in reports]
        fig.add_trace(go.Bar(
            x=x,
            y=y,
            name=algo,
            error_y=error_y,
            marker=dict(color=ALGORITHM_COLORS.get(algo), line=dict(width=2, color='white'), opacity=0.85),
            hovertemplate=f"<b>{algo}</b><br>%{{x}}<br>Time: %{{y:.3f}} ms<extra></extra>",
        ))
    return _base_layout(fig, title + " — Runtime", "Time (ms)", log_y=_all_positive(fig))


def comparisons_bar_figure(reports, title: str = "Sorting Benchmark", algorithms: Sequence[str] = ALGORITHM_NAMES) -> go.Figure:
    """Grouped bars of comparison counts per dataset and algorithm."""
    x = _dataset_labels(reports)
    fig = go.Figure()
    for algo in algorithms:
        y = _series(reports, "comparisons", algo)
        if all(np.isnan(y)):
            continue
        fig.add_trace(go.Bar(
            x=x,
            y=y,
            name=algo,
            marker=dict(color=ALGORITHM_COLORS.get(algo), line=dict(width=2, color='white'), opacity=0.85),
            hovertemplate=f"<b>{algo}</b><br>%{{x}}<br>Comparisons: %{{y:,.0f}}<extra></extra>",
        ))
    return _base_layout(fig, title + " — Comparisons", "Comparisons", log_y=_all_positive(fig))
