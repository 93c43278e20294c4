"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from llm_gateway.app import app, get_generator
from llm_gateway.generate import ChatGenerator
from llm_gateway.settings import settings

TEST_API_KEY = "test-key"


class FakeModelClient:
    """Stands in for OpenAIClient; records every call it receives."""

    def __init__(self, text="hello", raw=None, error=None):
        self.model = "fake"
        self.text = text
        self.raw = raw if raw is not None else {
            "id": "chatcmpl-fake",
            "object": "chat.completion",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": text}}],
        }
        self.error = error
        self.calls = []

    def generate(self, messages, params):
        self.calls.append((messages, params))
        if self.error is not None:
            raise self.error
        return self.text, self.raw


class ProviderError(Exception):
    """Mimics an SDK exception carrying a provider error code."""

    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def auth_headers(api_key):
    return {"x-api-key": api_key}


@pytest.fixture
def fake_client():
    return FakeModelClient()


@pytest.fixture
def client(fake_client):
    app.dependency_overrides[get_generator] = lambda: ChatGenerator(model_client=fake_client)
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
