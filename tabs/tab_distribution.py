"""Tab 1: Distribution: seats per specialization, charts and explanations."""

import streamlit as st

from components.charts import share_donut, trainees_vs_instructors_bar
from components.metrics_cards import (
    render_alert_card, render_category_cards, render_metric_row, render_ratio_card,
)
from components.report import result_to_df
from components.tables import render_load_table
from data.session_store import get_result_slot
from engine.allocation_engine import summarize_allocation
from engine.explainer import explain_allocation


def render(sidebar_state):
    """Render the Distribution tab."""
    st.header("Trainee Distribution")

    snapshot = get_result_slot().snapshot()
    if snapshot.error:
        if snapshot.result is not None:
            render_alert_card(f"Cannot compute a new distribution: {snapshot.error} "
                              "Showing the last valid result.", level="error")
        else:
            render_alert_card(f"Cannot compute a distribution: {snapshot.error}", level="error")

    result = snapshot.result
    if result is None:
        st.info("Add at least one specialization with instructors to see the distribution.")
        return

    summary = summarize_allocation(result)
    render_metric_row([
        {"label": "Total Seats", "value": f"{summary['total']:,}"},
        {"label": "Total Instructors", "value": f"{summary['total_weight']:,}"},
        {"label": "Specializations", "value": str(summary["category_count"])},
        {"label": "Load Spread", "value": f"{summary['load_spread']:.2f}",
         "delta": "trainees/instructor", "delta_color": "off"},
    ])

    st.divider()
    col1, col2 = st.columns([3, 1])
    with col1:
        render_category_cards(result)
    with col2:
        render_ratio_card(result)

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(trainees_vs_instructors_bar(result), use_container_width=True)
    with col2:
        st.plotly_chart(share_donut(result), use_container_width=True)

    st.subheader("Distribution Table")
    render_load_table(result_to_df(result), average=result.average_ratio)
    if summary["percentage_sum"] != 100:
        st.caption(
            f"Percentages are rounded per specialization and add up to {summary['percentage_sum']}%."
        )

    with st.expander("How was this calculated?"):
        explanations = explain_allocation(result)
        for c in result.categories:
            st.markdown(f"**{c.label}**")
            for step in explanations[c.id]:
                st.markdown(f"- {step}")
