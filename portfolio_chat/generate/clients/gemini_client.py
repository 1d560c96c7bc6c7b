# Client for the Gemini generateContent endpoint.
# One synchronous POST per call, key passed as the `key` query parameter.

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from ..types import GenerationRequest
from ...errors import UpstreamFailure

LOGGER = logging.getLogger("portfolio_chat.gemini")

DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gemini-2.5-flash",
        api_base: str = DEFAULT_API_BASE,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def generate(self, request: GenerationRequest) -> Tuple[str, Dict[str, Any]]:
        resp = requests.post(
            self.url,
            params={"key": self.api_key},
            json=request.to_payload(),
            timeout=self.timeout,
        )
        if not 200 <= resp.status_code < 300:
            err = UpstreamFailure(upstream_status=resp.status_code, upstream_body=resp.text)
            log = LOGGER.warning if err.transient else LOGGER.error
            log("Gemini API error (status=%s, transient=%s): %s", resp.status_code, err.transient, resp.text)
            raise err
        data = resp.json()
        return self._extract_text(data), {"engine": "gemini", "model": self.model}

    @staticmethod
    def _extract_text(data: Any) -> str:
        """Return candidates[0].content.parts[0].text, or "" when the path is absent."""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return ""
        return text if isinstance(text, str) else ""
