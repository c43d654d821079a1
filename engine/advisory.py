"""Advisory client: asks a Gemini model to review a trainee distribution."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Dict, List, Optional

import httpx

from config.defaults import (
    ADVISORY_TEMPERATURE,
    DEPARTMENT_NAME,
    FALLBACK_ERROR_RECOMMENDATIONS,
    FALLBACK_ERROR_SUMMARY,
    FALLBACK_NOT_CONFIGURED_RECOMMENDATIONS,
    FALLBACK_NOT_CONFIGURED_SUMMARY,
)
from config.settings import AdvisorySettings, get_settings
from models.advisory import AdvisoryReport
from models.allocation import AllocationResult

logger = logging.getLogger(__name__)


class AdvisoryUnavailable(RuntimeError):
    """Raised when the advisory service cannot produce a usable report."""


class AdvisoryNotConfigured(AdvisoryUnavailable):
    """Raised when no API key is available for the advisory service."""


class AdvisoryResponseFormatError(AdvisoryUnavailable):
    """Raised when the service reply does not match the expected schema."""


RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING", "description": "Short summary of the analysis"},
        "recommendations": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "List of practical recommendations",
        },
        "efficiencyScore": {
            "type": "NUMBER",
            "description": "Expected efficiency score from 0 to 100",
        },
    },
    "required": ["summary", "recommendations", "efficiencyScore"],
}


def fallback_report(*, not_configured: bool = False) -> AdvisoryReport:
    """Locally generated report used whenever the service cannot be used."""
    if not_configured:
        return AdvisoryReport(
            summary=FALLBACK_NOT_CONFIGURED_SUMMARY,
            recommendations=tuple(FALLBACK_NOT_CONFIGURED_RECOMMENDATIONS),
            efficiency_score=0,
            is_fallback=True,
        )
    return AdvisoryReport(
        summary=FALLBACK_ERROR_SUMMARY,
        recommendations=tuple(FALLBACK_ERROR_RECOMMENDATIONS),
        efficiency_score=0,
        is_fallback=True,
    )


def build_advisory_prompt(result: AllocationResult) -> str:
    """Render the distribution as a natural-language request."""
    lines = [
        f"- Specialization {c.label}: {c.weight} instructors, "
        f"{c.share} proposed trainees ({c.percentage}%)."
        for c in result.categories
    ]
    specs_description = "\n".join(lines)
    return (
        "As an expert in academic and technical administration, analyze the following "
        f"trainee distribution for the {DEPARTMENT_NAME}:\n\n"
        f"Target total trainees: {result.total}\n"
        f"Total instructors: {result.total_weight}\n"
        f"Average load per instructor: {result.average_ratio:.2f} trainees.\n\n"
        "Specialization details:\n"
        f"{specs_description}\n\n"
        "Analyze the training load and give advice on improving educational quality and "
        "fairness of the distribution based on these numbers."
    )


def parse_advisory_payload(data: Any) -> AdvisoryReport:
    """Validate the structured reply and build a report from it."""
    if not isinstance(data, dict):
        raise AdvisoryResponseFormatError("Advisory reply is not a JSON object")

    summary = data.get("summary")
    if not isinstance(summary, str):
        raise AdvisoryResponseFormatError("Advisory reply has no string 'summary'")

    recommendations = data.get("recommendations")
    if not isinstance(recommendations, list) or not all(isinstance(r, str) for r in recommendations):
        raise AdvisoryResponseFormatError("Advisory 'recommendations' must be a list of strings")

    score = data.get("efficiencyScore")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise AdvisoryResponseFormatError("Advisory 'efficiencyScore' must be a number")
    if not 0 <= score <= 100:
        raise AdvisoryResponseFormatError(f"Advisory 'efficiencyScore' out of range: {score}")

    return AdvisoryReport(
        summary=summary,
        recommendations=tuple(recommendations),
        efficiency_score=math.floor(score + 0.5),
    )


class AdvisoryClient:
    """Capability interface: turn an allocation result into an advisory report.

    Implementations must always return a report and never raise.
    """

    async def get_advisory(self, result: AllocationResult) -> AdvisoryReport:
        raise NotImplementedError


class GeminiAdvisoryClient(AdvisoryClient):
    """Client for the Gemini ``generateContent`` REST endpoint.

    Sends exactly one request per call, with no retries and no caching.
    """

    def __init__(
        self,
        settings: Optional[AdvisorySettings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport

    async def get_advisory(self, result: AllocationResult) -> AdvisoryReport:
        try:
            return await self._request_advisory(result)
        except AdvisoryNotConfigured:
            logger.warning("Advisory service not configured; returning fallback report")
            return fallback_report(not_configured=True)
        except (AdvisoryUnavailable, httpx.HTTPError) as exc:
            logger.warning("Advisory service unavailable: %s", exc)
            return fallback_report()
        except Exception:
            logger.exception("Unexpected advisory client failure")
            return fallback_report()

    async def _request_advisory(self, result: AllocationResult) -> AdvisoryReport:
        if not self._settings.is_configured:
            raise AdvisoryNotConfigured("Missing advisory service API key")

        prompt = build_advisory_prompt(result)
        response = await self._post(prompt=prompt)
        return self._parse_response(response)

    async def _post(self, *, prompt: str) -> Dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self._settings.api_key,
        }
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
                "temperature": ADVISORY_TEMPERATURE,
            },
        }

        logger.info("Requesting advisory from model %s", self._settings.model)
        async with httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(self._settings.endpoint, json=payload, headers=headers)
            response.raise_for_status()
            try:
                return response.json()
            except ValueError as exc:
                raise AdvisoryResponseFormatError("Advisory service returned non-JSON body") from exc

    def _parse_response(self, response: Dict[str, Any]) -> AdvisoryReport:
        text = _extract_text(response)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise AdvisoryResponseFormatError("Advisory content is not valid JSON") from exc
        return parse_advisory_payload(data)


def _extract_text(response: Dict[str, Any]) -> str:
    candidates = response.get("candidates") if isinstance(response, dict) else None
    if not candidates or not isinstance(candidates, list):
        raise AdvisoryResponseFormatError("Advisory reply has no candidates")

    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    if not isinstance(content, dict):
        raise AdvisoryResponseFormatError("Advisory reply has no content")
    parts: List[Any] = content.get("parts") or []
    texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
    if not texts:
        raise AdvisoryResponseFormatError("Advisory reply has no text content")
    return "".join(texts)
