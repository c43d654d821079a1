"""Plotly chart builders for the Trainee Distribution Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd

from config.defaults import CATEGORY_COLORS, INSTRUCTOR_BAR_COLOR, TRAINEE_BAR_COLOR
from models.allocation import AllocationResult


def trainees_vs_instructors_bar(
    result: AllocationResult,
    title: str = "Specialization Comparison",
) -> go.Figure:
    """Bar chart comparing assigned trainees and instructors per specialization."""
    df = pd.DataFrame([
        {"Specialization": c.label, "Trainees": c.share, "Instructors": c.weight}
        for c in result.categories
    ])
    fig = px.bar(
        df, x="Specialization", y=["Trainees", "Instructors"],
        barmode="group",
        labels={"value": "Count", "variable": ""},
        title=title,
        color_discrete_map={"Trainees": TRAINEE_BAR_COLOR, "Instructors": INSTRUCTOR_BAR_COLOR},
    )
    fig.update_layout(legend_title_text="", height=400)
    return fig


def share_donut(result: AllocationResult, title: str = "Admission Share") -> go.Figure:
    """Donut chart of each specialization's share, with the total in the centre."""
    colors = [CATEGORY_COLORS[i % len(CATEGORY_COLORS)] for i in range(len(result.categories))]
    fig = go.Figure(data=[go.Pie(
        labels=[c.label for c in result.categories],
        values=[c.share for c in result.categories],
        hole=0.6,
        marker_colors=colors,
        textinfo="percent+label",
        sort=False,
    )])
    fig.update_layout(
        title=title,
        height=400,
        showlegend=True,
        annotations=[dict(text=f"{result.total} seats", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def efficiency_gauge(score: int, title: str = "Efficiency Score") -> go.Figure:
    """Gauge for the advisory efficiency score (0-100)."""
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        number={"suffix": "%"},
        gauge={"axis": {"range": [0, 100]}, "bar": {"color": "#4f46e5"}},
        title={"text": title},
    ))
    fig.update_layout(height=250)
    return fig
