"""Sidebar controls: total intake and the specialization editor."""

import streamlit as st
from dataclasses import dataclass

from config.defaults import MAX_INSTRUCTORS, MAX_TOTAL_TRAINEES, MIN_INSTRUCTORS
from data.loader import load_file, parse_categories
from data.session_store import (
    add_category, get_categories, get_total, recompute, remove_category,
    replace_categories, set_total, update_category,
)
from data.validator import validate_categories


@dataclass
class SidebarState:
    total: int
    category_count: int


def _render_upload():
    with st.expander("Import specializations (CSV / XLSX)"):
        uploaded = st.file_uploader("Specializations file", type=["csv", "xlsx"], key="sidebar_upload")
        if uploaded is None or not st.button("Load file", key="sidebar_load_file"):
            return
        try:
            df = load_file(uploaded)
        except ValueError as exc:
            st.error(str(exc))
            return

        validation = validate_categories(df)
        for w in validation.warnings:
            st.warning(w)
        if not validation.is_valid:
            for e in validation.errors:
                st.error(e)
            return

        replace_categories(parse_categories(df))
        recompute()
        st.success(f"Loaded {len(df)} specializations")


def render_sidebar() -> SidebarState:
    """Render the distribution settings and return current state."""
    with st.sidebar:
        st.title("Distribution Settings")
        st.divider()

        total = st.number_input(
            "Target total admissions",
            min_value=0,
            max_value=MAX_TOTAL_TRAINEES,
            value=get_total(),
            step=1,
            key="sidebar_total",
        )
        if total != get_total():
            set_total(int(total))

        if st.button("➕ Add specialization", use_container_width=True):
            add_category()

        for idx, category in enumerate(get_categories()):
            with st.container(border=True):
                st.caption(f"Specialization {idx + 1} · {category.weight} instructors")
                label = st.text_input("Name", value=category.label, key=f"label_{category.id}")
                weight = st.slider(
                    "Instructors",
                    min_value=MIN_INSTRUCTORS,
                    max_value=max(MAX_INSTRUCTORS, category.weight),
                    value=max(category.weight, MIN_INSTRUCTORS),
                    key=f"weight_{category.id}",
                )
                if label != category.label or weight != category.weight:
                    update_category(category.id, label=label, weight=weight)
                if st.button("Remove", key=f"remove_{category.id}", disabled=len(get_categories()) <= 1):
                    remove_category(category.id)
                    st.rerun()

        _render_upload()

        # Recompute on every edit; the button forces a fresh generation
        if st.button("Recalculate distribution", type="primary", use_container_width=True):
            recompute(force=True)

    recompute()
    return SidebarState(total=get_total(), category_count=len(get_categories()))
