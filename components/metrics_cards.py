"""Reusable KPI metric card widgets."""

import streamlit as st

from config.defaults import RATIO_GAUGE_SCALE
from models.allocation import AllocationResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            delta = m.get("delta")
            delta_color = m.get("delta_color", "normal")
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=delta,
                delta_color=delta_color,
            )


def category_metrics(result: AllocationResult) -> list[dict]:
    """One card per specialization: seats, percentage and instructor basis."""
    return [
        {
            "label": c.label,
            "value": f"{c.share} seats",
            "delta": f"{c.percentage}% · {c.weight} instructors",
            "delta_color": "off",
        }
        for c in result.categories
    ]


def render_category_cards(result: AllocationResult, per_row: int = 3):
    metrics = category_metrics(result)
    for start in range(0, len(metrics), per_row):
        render_metric_row(metrics[start:start + per_row])


def render_ratio_card(result: AllocationResult):
    """Average trainees per instructor, with a progress bar."""
    st.metric(label="Distribution Efficiency", value=f"{result.average_ratio:.1f} trainees/instructor")
    st.progress(min(int(result.average_ratio * RATIO_GAUGE_SCALE), 100))


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
