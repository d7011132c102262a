"""Plotly rendering of the Hot vs Crazy zone map."""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import plotly.graph_objects as go

from models import ScoredEntity

Point = Tuple[float, float]

# Outline vertices and label anchor for each zone, in (hot, crazy) units.
ZONE_OUTLINES: Dict[str, Dict[str, object]] = {
    "No Go Zone": {"path": [(0, 0), (5, 0), (5, 10), (0, 10)], "label": (2.5, 5)},
    "Danger Zone": {"path": [(5, 5), (5, 10), (10, 10)], "label": (6.7, 8.3)},
    "Fun Zone": {"path": [(5, 0), (8, 0), (8, 8), (5, 5)], "label": (6.5, 3)},
    "Date Zone": {"path": [(8, 5), (10, 5), (10, 10), (8, 8)], "label": (9, 7)},
    "Wife Zone": {"path": [(8, 1), (10, 1), (10, 5), (8, 5)], "label": (9, 3)},
    "Chromosome Mismatch": {"path": [(8, 0), (10, 0), (10, 1), (8, 1)], "label": (9, 0.5)},
}

OUTLINE_COLOR = "#9ca3af"
MARKER_COLOR = "#3b82f6"
MARKER_LINE_COLOR = "#1e40af"


def _closed(path: List[Point]) -> Tuple[List[float], List[float]]:
    xs = [p[0] for p in path] + [path[0][0]]
    ys = [p[1] for p in path] + [path[0][1]]
    return xs, ys


def zone_map_figure(people: Sequence[ScoredEntity], height: int = 600) -> go.Figure:
    fig = go.Figure()

    for name, outline in ZONE_OUTLINES.items():
        xs, ys = _closed(outline["path"])
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                line=dict(color=OUTLINE_COLOR, width=1),
                hoverinfo="skip",
                showlegend=False,
                name=name,
            )
        )
        lx, ly = outline["label"]
        fig.add_annotation(
            x=lx, y=ly, text=f"<b>{name}</b>", showarrow=False, font=dict(size=13, color="#374151")
        )

    fig.add_trace(
        go.Scatter(
            x=[p.hot_score for p in people],
            y=[p.crazy_score for p in people],
            mode="markers+text",
            text=[p.name for p in people],
            textposition="top center",
            customdata=[p.zone for p in people],
            hovertemplate="%{text}<br>Hot %{x:.1f}, Crazy %{y:.1f}<br>%{customdata}<extra></extra>",
            marker=dict(size=12, color=MARKER_COLOR, line=dict(color=MARKER_LINE_COLOR, width=2)),
            showlegend=False,
            name="People",
        )
    )

    fig.update_xaxes(range=[0, 10], title_text="Hot Score", dtick=1, showgrid=False)
    fig.update_yaxes(range=[0, 10], title_text="Crazy Score", dtick=1, showgrid=False)
    fig.update_layout(height=height, margin=dict(l=40, r=20, t=20, b=40), plot_bgcolor="white")
    return fig
