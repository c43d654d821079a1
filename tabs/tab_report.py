"""Tab 3: Report: printable and downloadable exports of the distribution."""

import streamlit as st
import streamlit.components.v1 as st_components

from components.report import build_excel_report, build_html_report
from data.loader import categories_to_df
from data.sample_data import generate_categories_df
from data.session_store import get_categories, get_result_slot


def render(sidebar_state):
    """Render the Report tab."""
    st.header("Report & Export")

    snapshot = get_result_slot().snapshot()
    result = snapshot.result
    if result is None:
        st.info("No distribution available to export.")
        return

    html_report = build_html_report(result, snapshot.advisory)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.download_button(
            "Download printable report (HTML)",
            data=html_report,
            file_name="trainee_distribution.html",
            mime="text/html",
        )
    with col2:
        st.download_button(
            "Download workbook (XLSX)",
            data=build_excel_report(result, snapshot.advisory),
            file_name="trainee_distribution.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
    with col3:
        st.download_button(
            "Download current inputs (CSV)",
            data=categories_to_df(get_categories()).to_csv(index=False),
            file_name="specializations.csv",
            mime="text/csv",
        )

    st.download_button(
        "Download upload template (CSV)",
        data=generate_categories_df().to_csv(index=False),
        file_name="specializations_template.csv",
        mime="text/csv",
    )

    st.divider()
    st.subheader("Preview")
    st_components.html(html_report, height=900, scrolling=True)
