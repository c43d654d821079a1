"""Typed wrapper around st.session_state for application data."""

import logging
from dataclasses import replace
from typing import List, Optional

import streamlit as st

from config.defaults import DEFAULT_TOTAL_TRAINEES, NEW_SPECIALIZATION_INSTRUCTORS
from data.result_slot import ResultSlot
from data.sample_data import default_categories
from engine.allocation_engine import AllocationError, run_allocation
from models.allocation import AllocationRequest
from models.category import Category

logger = logging.getLogger(__name__)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "categories": default_categories(),
        "total_trainees": DEFAULT_TOTAL_TRAINEES,
        "result_slot": ResultSlot(),
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_categories() -> List[Category]:
    return st.session_state.get("categories", [])


def get_total() -> int:
    return st.session_state.get("total_trainees", DEFAULT_TOTAL_TRAINEES)


def get_result_slot() -> ResultSlot:
    return st.session_state["result_slot"]


# --- Setters ---

def set_total(total: int):
    st.session_state["total_trainees"] = total


def replace_categories(categories: List[Category]):
    st.session_state["categories"] = list(categories)


# --- Category Management ---

def add_category(label: Optional[str] = None, weight: int = NEW_SPECIALIZATION_INSTRUCTORS) -> Category:
    categories = get_categories()
    category = Category(label=label or f"Specialization {len(categories) + 1}", weight=weight)
    st.session_state["categories"] = categories + [category]
    return category


def remove_category(category_id: str) -> bool:
    """Remove a specialization; the last remaining one cannot be removed."""
    categories = get_categories()
    if len(categories) <= 1:
        return False
    st.session_state["categories"] = [c for c in categories if c.id != category_id]
    return True


def update_category(category_id: str, label: Optional[str] = None, weight: Optional[int] = None):
    updated = []
    for c in get_categories():
        if c.id == category_id:
            c = Category(
                label=c.label if label is None else label,
                weight=c.weight if weight is None else weight,
                id=c.id,
            )
        updated.append(c)
    st.session_state["categories"] = updated


# --- Allocation ---

def current_request() -> AllocationRequest:
    """Immutable snapshot of the inputs for one allocation run."""
    return AllocationRequest(
        categories=tuple(replace(c) for c in get_categories()),
        total=get_total(),
    )


def recompute(force: bool = False) -> bool:
    """Recompute the distribution when the inputs changed (or when forced).

    On failure the previous valid result is kept and the error is recorded.
    """
    request = current_request()
    if not force and st.session_state.get("last_request") == request:
        return True
    st.session_state["last_request"] = request

    slot = get_result_slot()
    try:
        result = run_allocation(request)
    except AllocationError as exc:
        logger.warning("Allocation rejected: %s", exc)
        slot.reject(str(exc))
        return False
    slot.publish(result)
    return True
