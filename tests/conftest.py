"""Pytest fixtures: a TestClient with the model client and settings overridden."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient

from portfolio_chat.app import app, get_model_client, get_settings
from portfolio_chat.generate import GenerationRequest
from portfolio_chat.settings import Settings


class FakeModelClient:
    """Records every outbound request and answers with a canned reply."""

    def __init__(self, text: str = "Hello from Gemini", exc: Exception | None = None) -> None:
        self.text = text
        self.exc = exc
        self.requests: List[GenerationRequest] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def generate(self, request: GenerationRequest) -> Tuple[str, Dict[str, Any]]:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.text, {"engine": "fake", "model": "fake-model"}


def make_settings(api_key: str | None = "test-key") -> Settings:
    return Settings(_env_file=None, GEMINI_API_KEY=api_key)


@pytest.fixture
def fake_client():
    return FakeModelClient()


@pytest.fixture
def api_key():
    return "test-key"


@pytest.fixture
def client(fake_client, api_key):
    app.dependency_overrides[get_settings] = lambda: make_settings(api_key)
    app.dependency_overrides[get_model_client] = lambda: fake_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
