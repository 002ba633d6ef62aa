"""Shared pytest fixtures for the requirements generator tests."""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from services.requirements_service import RequirementsService

FAKE_API_KEY = "sk-test-not-a-real-key"
FAKE_BASE_URL = "https://llm.test/v1"


class FakeCompletionService:
    """Stand-in for the chat-completion endpoint.

    Records every request it receives and answers with a configurable status
    and body.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.response_json: Optional[Any] = None
        self.response_text: Optional[str] = None
        self.error: Optional[Exception] = None

    def reply_with_content(self, content: Optional[str]):
        self.status_code = 200
        self.response_json = {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }

    def reply_with_error(self, status_code: int, text: str):
        self.status_code = status_code
        self.response_json = None
        self.response_text = text

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.response_json is not None:
            return httpx.Response(self.status_code, json=self.response_json)
        return httpx.Response(self.status_code, text=self.response_text or "")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_body(self) -> Dict[str, Any]:
        assert self.requests, "completion service was never called"
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Factory for settings with fake credentials and explicit defaults."""

    def _make(**overrides) -> Settings:
        values = {
            "openai_api_key": FAKE_API_KEY,
            "openai_base_url": FAKE_BASE_URL,
            "openai_model": "gpt-5",
            "openai_timeout": 5.0,
            "schema_variant": "strict",
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def test_settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def fake_llm() -> FakeCompletionService:
    """Fake completion service that answers with an empty bundle by default."""
    service = FakeCompletionService()
    service.reply_with_content('{"userStories": []}')
    return service


@pytest.fixture
def requirements_service(test_settings, fake_llm) -> RequirementsService:
    return RequirementsService(test_settings, transport=fake_llm.transport)


@pytest.fixture
def test_client(requirements_service):
    """TestClient whose generate route uses the fake completion service."""
    from app import app
    from api.v1.generate import get_requirements_service

    app.dependency_overrides[get_requirements_service] = lambda: requirements_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
