"""Tests for the session-state wrapper and the advisory request flow."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from data import session_store
from data.session_store import (
    add_category, get_categories, get_result_slot, initialize_session_state,
    recompute, remove_category, replace_categories, set_total, update_category,
)
from engine.advisory import AdvisoryClient
from engine.allocation_engine import allocate
from models.advisory import AdvisoryReport
from models.category import Category
from tabs import tab_advisory


@pytest.fixture(autouse=True)
def session(monkeypatch):
    state = {}
    monkeypatch.setattr(session_store.st, "session_state", state)
    initialize_session_state()
    return state


def make_report(summary="Looks balanced."):
    return AdvisoryReport(summary=summary, recommendations=("Keep going.",), efficiency_score=75)


class FakeClient(AdvisoryClient):
    def __init__(self, report=None, during_call=None):
        self.report = report or make_report()
        self.during_call = during_call
        self.calls = []

    async def get_advisory(self, result):
        self.calls.append(result)
        if self.during_call is not None:
            self.during_call()
        return self.report


class TestCategoryManagement:
    def test_defaults(self):
        assert [c.label for c in get_categories()] == ["Engines & Vehicles", "Manufacturing"]

    def test_initialize_keeps_existing_state(self, session):
        set_total(40)
        initialize_session_state()
        assert session["total_trainees"] == 40

    def test_add_category_default_label(self):
        category = add_category()
        assert category.label == "Specialization 3"
        assert category.weight == 10
        assert get_categories()[-1] == category

    def test_remove_category(self):
        first, second = get_categories()
        assert remove_category(first.id)
        assert get_categories() == [second]

    def test_last_category_cannot_be_removed(self):
        replace_categories([Category("Only", 4, "only")])
        assert not remove_category("only")
        assert [c.id for c in get_categories()] == ["only"]

    def test_update_category_keeps_id(self):
        first = get_categories()[0]
        update_category(first.id, weight=20)
        updated = get_categories()[0]
        assert updated.id == first.id
        assert updated.label == first.label
        assert updated.weight == 20


class TestRecompute:
    def test_publishes_result(self):
        assert recompute()
        snap = get_result_slot().snapshot()
        assert [c.share for c in snap.result.categories] == [48, 72]
        assert snap.generation == 1
        assert snap.error is None

    def test_unchanged_inputs_skip_run(self):
        recompute()
        assert recompute()
        assert get_result_slot().snapshot().generation == 1

    def test_force_runs_again(self):
        recompute()
        recompute(force=True)
        assert get_result_slot().snapshot().generation == 2

    def test_changed_total_runs_again(self):
        recompute()
        set_total(60)
        recompute()
        snap = get_result_slot().snapshot()
        assert snap.generation == 2
        assert snap.result.total == 60

    def test_invalid_input_keeps_previous_result(self):
        recompute()
        before = get_result_slot().snapshot()

        replace_categories([])
        assert not recompute()

        after = get_result_slot().snapshot()
        assert after.result == before.result
        assert after.generation == before.generation
        assert "At least one specialization" in after.error

    def test_zero_weight_rejected(self):
        recompute()
        update_category(get_categories()[0].id, weight=0)
        assert not recompute()
        assert "invalid instructor count" in get_result_slot().snapshot().error

    def test_valid_recompute_clears_error(self):
        recompute()
        replace_categories([])
        recompute()
        replace_categories([Category("A", 1, "a")])
        assert recompute()
        assert get_result_slot().snapshot().error is None


class TestRequestAdvisory:
    def test_no_result_yet(self):
        client = FakeClient()
        assert not tab_advisory.request_advisory(client)
        assert client.calls == []

    def test_attaches_report(self):
        recompute()
        client = FakeClient()
        assert tab_advisory.request_advisory(client)

        snap = get_result_slot().snapshot()
        assert snap.advisory == client.report
        assert client.calls == [snap.result]

    def test_report_for_superseded_result_is_discarded(self):
        recompute()
        newer = allocate([Category("A", 1, "a")], 7)
        client = FakeClient(during_call=lambda: get_result_slot().publish(newer))

        assert not tab_advisory.request_advisory(client)

        snap = get_result_slot().snapshot()
        assert snap.result == newer
        assert snap.advisory is None

    def test_rejected_recompute_does_not_discard_report(self):
        recompute()

        def reject_mid_flight():
            replace_categories([])
            recompute()

        client = FakeClient(during_call=reject_mid_flight)
        assert tab_advisory.request_advisory(client)
        assert get_result_slot().snapshot().advisory == client.report


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
