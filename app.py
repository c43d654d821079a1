"""Trainee Distribution Planner: Streamlit entry point."""

import logging
import os
import sys

import streamlit as st

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from config.defaults import DEFAULT_LOG_LEVEL, DEPARTMENT_NAME
from data.session_store import initialize_session_state
from tabs import (
    tab_distribution,
    tab_advisory,
    tab_report,
)


def main():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(
        page_title="Trainee Distribution",
        page_icon="🎓",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    st.title("Trainee Distribution System")
    st.caption(DEPARTMENT_NAME)

    tab1, tab2, tab3 = st.tabs([
        "📊 Distribution",
        "✨ Smart Advisory",
        "🖨️ Report",
    ])

    with tab1:
        tab_distribution.render(sidebar_state)
    with tab2:
        tab_advisory.render(sidebar_state)
    with tab3:
        tab_report.render(sidebar_state)


if __name__ == "__main__":
    main()
