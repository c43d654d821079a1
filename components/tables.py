"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd


def render_load_table(df: pd.DataFrame, load_column: str = "Trainees / Instructor", average: float = 0.0):
    """Render the results table, highlighting loads above or below the average."""
    def color_load(val):
        try:
            v = float(val)
        except (ValueError, TypeError):
            return ""
        if v > average * 1.1:
            return "color: #cc0000; font-weight: bold"
        elif v < average * 0.9:
            return "color: #856404; font-weight: bold"
        return "color: #155724"

    if load_column in df.columns:
        styled = df.style.map(color_load, subset=[load_column]).format({load_column: "{:.2f}"})
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
