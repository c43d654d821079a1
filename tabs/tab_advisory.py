"""Tab 2: Smart Advisory: narrative review of the distribution by Gemini."""

import asyncio

import streamlit as st

from components.charts import efficiency_gauge
from data.session_store import get_result_slot
from engine.advisory import GeminiAdvisoryClient
from config.settings import get_settings


def request_advisory(client=None) -> bool:
    """Fetch a report for the current result and attach it unless superseded."""
    slot = get_result_slot()
    generation, result = slot.begin_advisory()
    if result is None:
        return False
    client = client or GeminiAdvisoryClient()
    report = asyncio.run(client.get_advisory(result))
    return slot.attach_advisory(generation, report)


def render(sidebar_state):
    """Render the Smart Advisory tab."""
    st.header("Strategic Analysis")
    st.caption("Use AI to review the seat distribution and safeguard training quality.")

    if not get_settings().is_configured:
        st.info("No advisory API key configured; a generic local report will be shown.")

    snapshot = get_result_slot().snapshot()
    if snapshot.result is None:
        st.info("No distribution available yet.")
        return

    if st.button("Request Gemini consultation", type="primary"):
        with st.spinner("Analyzing distribution..."):
            attached = request_advisory()
        if not attached:
            st.warning("The distribution changed while the analysis was running; please request it again.")
        snapshot = get_result_slot().snapshot()

    advisory = snapshot.advisory
    if advisory is None:
        return

    if advisory.is_fallback:
        st.warning("The advisory service was unavailable; showing a locally generated report.")

    col1, col2 = st.columns([2, 1])
    with col1:
        st.subheader("Smart Technical Report")
        st.write(advisory.summary)
    with col2:
        st.plotly_chart(efficiency_gauge(advisory.efficiency_score), use_container_width=True)

    st.subheader("Recommendations")
    for idx, rec in enumerate(advisory.recommendations, start=1):
        st.markdown(f"**{idx}.** {rec}")
