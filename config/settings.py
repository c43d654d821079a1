"""Runtime settings for the advisory service, loaded from environment variables."""

from __future__ import annotations

import functools
import logging
import math
import os
from typing import Optional

from dotenv import load_dotenv

from config.defaults import (
    DEFAULT_ADVISORY_BASE_URL,
    DEFAULT_ADVISORY_MODEL,
    DEFAULT_ADVISORY_TIMEOUT,
)

load_dotenv()

logger = logging.getLogger(__name__)


def _timeout_from_env() -> float:
    """GEMINI_TIMEOUT in seconds; malformed or out-of-range values fall back to the default."""
    timeout_env = os.getenv("GEMINI_TIMEOUT")
    if not timeout_env:
        return DEFAULT_ADVISORY_TIMEOUT
    try:
        timeout = float(timeout_env)
    except ValueError:
        logger.warning("Ignoring malformed GEMINI_TIMEOUT %r", timeout_env)
        return DEFAULT_ADVISORY_TIMEOUT
    if not (timeout > 0 and math.isfinite(timeout)):
        logger.warning("Ignoring out-of-range GEMINI_TIMEOUT %r", timeout_env)
        return DEFAULT_ADVISORY_TIMEOUT
    return timeout


class AdvisorySettings:
    """Advisory service configuration. Only the API key is required."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        request_timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else (
            os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or ""
        )
        self.model = model or os.getenv("GEMINI_MODEL", DEFAULT_ADVISORY_MODEL)
        self.base_url = base_url or os.getenv("GEMINI_BASE_URL", DEFAULT_ADVISORY_BASE_URL)
        self.request_timeout = request_timeout or _timeout_from_env()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


@functools.lru_cache(maxsize=1)
def get_settings() -> AdvisorySettings:
    """Return cached settings instance."""

    return AdvisorySettings()
