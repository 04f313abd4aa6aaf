import pytest
from fastapi.testclient import TestClient

from complaint_vision.core.config import Settings
from complaint_vision.main import create_app
from complaint_vision.services.ai_models.language import qwen_adapter


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, reason="OK", text=""):
        self.status_code = status_code
        self._json = json_data
        self.reason = reason
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return self._json


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class FakeProvider:
    """Stands in for requests.post and records every outbound call."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse(json_data=completion(""))
        self.error = None

    def reply(self, content):
        self.response = FakeResponse(json_data=completion(content))

    def __call__(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def provider(monkeypatch):
    fake = FakeProvider()
    monkeypatch.setattr(qwen_adapter.requests, "post", fake)
    return fake


@pytest.fixture
def settings():
    return Settings(openrouter_api_key="test-key")


@pytest.fixture
def client(settings, provider):
    return TestClient(create_app(settings))
