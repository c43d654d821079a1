"""Tests for the advisory client."""

import sys
import os
import asyncio
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import httpx
import pytest

from config.defaults import DEFAULT_ADVISORY_TIMEOUT
from config.settings import AdvisorySettings, get_settings
from engine.advisory import (
    AdvisoryResponseFormatError,
    GeminiAdvisoryClient,
    build_advisory_prompt,
    fallback_report,
    parse_advisory_payload,
)
from engine.allocation_engine import allocate
from models.category import Category


def make_result():
    cats = [Category("Engines & Vehicles", 12, "1"), Category("Manufacturing", 18, "2")]
    return allocate(cats, 120)


def make_settings(api_key="test-key"):
    return AdvisorySettings(
        api_key=api_key,
        model="test-model",
        base_url="https://advisory.test/v1beta",
        request_timeout=5.0,
    )


def gemini_body(payload):
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def make_client(handler, api_key="test-key"):
    calls = []

    def recording_handler(request):
        calls.append(request)
        return handler(request)

    client = GeminiAdvisoryClient(make_settings(api_key), transport=httpx.MockTransport(recording_handler))
    return client, calls


def run(client, result=None):
    return asyncio.run(client.get_advisory(result or make_result()))


GOOD_PAYLOAD = {
    "summary": "Balanced load across specializations.",
    "recommendations": ["Keep the ratio under 5.", "Review workshop capacity."],
    "efficiencyScore": 82.6,
}


def assert_fallback(report):
    assert report.is_fallback
    assert report.efficiency_score == 0
    assert len(report.recommendations) >= 1
    assert report.summary


class TestSuccessfulAdvisory:
    def test_parses_structured_reply(self):
        client, calls = make_client(lambda request: httpx.Response(200, json=gemini_body(GOOD_PAYLOAD)))
        report = run(client)

        assert report.summary == "Balanced load across specializations."
        assert report.recommendations == ("Keep the ratio under 5.", "Review workshop capacity.")
        assert report.efficiency_score == 83
        assert not report.is_fallback

    def test_sends_exactly_one_request(self):
        client, calls = make_client(lambda request: httpx.Response(200, json=gemini_body(GOOD_PAYLOAD)))
        run(client)

        assert len(calls) == 1
        request = calls[0]
        assert request.method == "POST"
        assert request.url.path == "/v1beta/models/test-model:generateContent"
        assert request.headers["x-goog-api-key"] == "test-key"

        body = json.loads(request.content)
        assert body["generationConfig"]["responseMimeType"] == "application/json"
        assert set(body["generationConfig"]["responseSchema"]["required"]) == {
            "summary", "recommendations", "efficiencyScore",
        }
        assert "Manufacturing" in body["contents"][0]["parts"][0]["text"]

    def test_result_not_mutated(self):
        result = make_result()
        client, _ = make_client(lambda request: httpx.Response(200, json=gemini_body(GOOD_PAYLOAD)))
        before = result
        run(client, result)
        assert result == before
        assert [c.share for c in result.categories] == [48, 72]


class TestFallback:
    def test_missing_credential_skips_request(self):
        client, calls = make_client(lambda request: httpx.Response(200), api_key="")
        report = run(client)

        assert calls == []
        assert_fallback(report)
        assert report == fallback_report(not_configured=True)

    def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, calls = make_client(handler)
        report = run(client)

        assert len(calls) == 1
        assert_fallback(report)
        assert report == fallback_report()

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client, _ = make_client(handler)
        assert_fallback(run(client))

    def test_http_error_status(self):
        client, _ = make_client(lambda request: httpx.Response(500, json={"error": "boom"}))
        assert_fallback(run(client))

    def test_non_json_body(self):
        client, _ = make_client(lambda request: httpx.Response(200, content=b"<html>oops</html>"))
        assert_fallback(run(client))

    def test_no_candidates(self):
        client, _ = make_client(lambda request: httpx.Response(200, json={"candidates": []}))
        assert_fallback(run(client))

    def test_content_not_json(self):
        client, _ = make_client(lambda request: httpx.Response(200, json=gemini_body("not json at all")))
        assert_fallback(run(client))

    @pytest.mark.parametrize("payload", [
        {"recommendations": ["a"], "efficiencyScore": 50},
        {"summary": "ok", "recommendations": "a", "efficiencyScore": 50},
        {"summary": "ok", "recommendations": ["a", 3], "efficiencyScore": 50},
        {"summary": "ok", "recommendations": ["a"], "efficiencyScore": "50"},
        {"summary": "ok", "recommendations": ["a"], "efficiencyScore": 150},
        {"summary": "ok", "recommendations": ["a"], "efficiencyScore": True},
        ["summary", "recommendations"],
    ])
    def test_schema_violations(self, payload):
        client, _ = make_client(lambda request: httpx.Response(200, json=gemini_body(payload)))
        assert_fallback(run(client))


class TestParseAdvisoryPayload:
    def test_integer_score(self):
        report = parse_advisory_payload({"summary": "s", "recommendations": [], "efficiencyScore": 70})
        assert report.efficiency_score == 70
        assert report.recommendations == ()

    def test_boundary_scores(self):
        for score in (0, 100):
            report = parse_advisory_payload({"summary": "s", "recommendations": [], "efficiencyScore": score})
            assert report.efficiency_score == score

    def test_half_scores_round_up(self):
        for score, expected in ((82.5, 83), (0.5, 1), (99.5, 100)):
            report = parse_advisory_payload({"summary": "s", "recommendations": [], "efficiencyScore": score})
            assert report.efficiency_score == expected

    def test_recommendations_are_immutable(self):
        report = parse_advisory_payload({"summary": "s", "recommendations": ["a", "b"], "efficiencyScore": 10})
        assert isinstance(report.recommendations, tuple)
        assert isinstance(fallback_report().recommendations, tuple)

    def test_negative_score_rejected(self):
        with pytest.raises(AdvisoryResponseFormatError):
            parse_advisory_payload({"summary": "s", "recommendations": [], "efficiencyScore": -1})


class TestSettings:
    @pytest.mark.parametrize("raw", ["thirty", "0", "-5", "nan", "inf"])
    def test_bad_timeout_falls_back_to_default(self, monkeypatch, raw):
        monkeypatch.setenv("GEMINI_TIMEOUT", raw)
        assert AdvisorySettings(api_key="k").request_timeout == DEFAULT_ADVISORY_TIMEOUT

    def test_valid_timeout_from_env(self, monkeypatch):
        monkeypatch.setenv("GEMINI_TIMEOUT", "12.5")
        assert AdvisorySettings(api_key="k").request_timeout == 12.5

    def test_malformed_timeout_still_yields_report(self, monkeypatch):
        monkeypatch.setenv("GEMINI_TIMEOUT", "thirty")
        monkeypatch.setenv("GEMINI_API_KEY", "k")
        get_settings.cache_clear()
        try:
            client = GeminiAdvisoryClient(
                transport=httpx.MockTransport(lambda request: httpx.Response(200, json=gemini_body(GOOD_PAYLOAD)))
            )
            report = run(client)
        finally:
            get_settings.cache_clear()

        assert not report.is_fallback
        assert report.efficiency_score == 83


class TestBuildAdvisoryPrompt:
    def test_prompt_describes_distribution(self):
        prompt = build_advisory_prompt(make_result())

        assert "Target total trainees: 120" in prompt
        assert "Total instructors: 30" in prompt
        assert "4.00 trainees" in prompt
        assert "Engines & Vehicles: 12 instructors, 48 proposed trainees (40%)" in prompt
        assert "Manufacturing: 18 instructors, 72 proposed trainees (60%)" in prompt


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
