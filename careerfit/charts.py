from __future__ import annotations

from typing import Mapping

import pandas as pd
import plotly.graph_objects as go

RADAR_COLOR = "#10954b"


def dimension_label(key: str) -> str:
    return " ".join(word.capitalize() for word in key.split("_"))


def dimension_frame(wiscar_scores: Mapping[str, int]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Dimension": dimension_label(key), "Score": value} for key, value in wiscar_scores.items()]
    )


def build_radar_chart(wiscar_scores: Mapping[str, int]) -> go.Figure:
    labels = [dimension_label(key) for key in wiscar_scores]
    values = list(wiscar_scores.values())
    fig = go.Figure()
    fig.add_trace(
        go.Scatterpolar(
            # repeat the first point so the outline closes
            r=values + values[:1],
            theta=labels + labels[:1],
            fill="toself",
            name="Score",
            line=dict(color=RADAR_COLOR, width=2),
            opacity=0.8,
        )
    )
    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, 100], tickfont=dict(size=10))),
        showlegend=False,
        height=360,
        margin=dict(l=40, r=40, t=30, b=30),
    )
    return fig
