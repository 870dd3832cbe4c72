from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any

import pytest
import requests

from promptforge.models import GenerationRequest, Provider, Scene
from promptforge.services import ProviderStrategy


def scene_dict(number: int) -> dict[str, Any]:
    return {
        "number": number,
        "styleLock": "Classic 2D Bangladeshi Cartoon Style - No 3D",
        "characters": f"Rahim in a checked lungi, grinning (scene {number})",
        "setup": "He slips on the mud path and squashes into a puddle",
        "movement": "Slow pan left, then quick zoom on his face",
        "background": "Jute fields and a bamboo hut in soft watercolor",
        "lighting": "Overcast monsoon afternoon, cool tones",
        "mood": "Playful",
        "finalCheck": "Flat colors, thick outlines, no 3D",
    }


@pytest.fixture
def scene_dicts() -> list[dict[str, Any]]:
    return [scene_dict(n) for n in (1, 2, 3)]


def make_response(status_code: int = 200, body: Any = None, text: str | None = None) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    r = requests.Response()
    r.status_code = status_code
    if text is not None:
        r._content = text.encode("utf-8")
    elif body is not None:
        r._content = json.dumps(body).encode("utf-8")
    else:
        r._content = b""
    r.encoding = "utf-8"
    return r


def chat_body(content: str) -> dict[str, Any]:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class FakeSession:
    """Stands in for requests.Session and records every call."""

    def __init__(self, response: requests.Response | None = None, error: Exception | None = None):
        self.response = response if response is not None else make_response(200, {})
        self.error = error
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _handle(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def post(self, url: str, **kwargs: Any) -> requests.Response:
        return self._handle("POST", url, **kwargs)

    def get(self, url: str, **kwargs: Any) -> requests.Response:
        return self._handle("GET", url, **kwargs)


class FakeGeminiModels:
    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def generate_content(self, **kwargs: Any) -> SimpleNamespace:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeGeminiFactory:
    """Client factory handing out one shared fake client."""

    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.models = FakeGeminiModels(text=text, error=error)
        self.api_keys: list[str] = []

    def __call__(self, api_key: str) -> SimpleNamespace:
        self.api_keys.append(api_key)
        return SimpleNamespace(models=self.models)


class FakeStrategy(ProviderStrategy):
    """Strategy with canned results and call counters."""

    def __init__(
        self,
        provider: Provider,
        scenes: list[Scene] | None = None,
        valid: bool = True,
        error: Exception | None = None,
    ):
        self._provider = provider
        self.scenes = scenes or []
        self.valid = valid
        self.error = error
        self.generate_calls: list[tuple[GenerationRequest, str]] = []
        self.validate_calls: list[str] = []

    @property
    def provider(self) -> Provider:
        return self._provider

    def generate(self, request: GenerationRequest, credential: str) -> list[Scene]:
        self.generate_calls.append((request, credential))
        if self.error is not None:
            raise self.error
        return self.scenes

    def validate_credential(self, credential: str) -> bool:
        self.validate_calls.append(credential)
        if self.error is not None:
            raise self.error
        return self.valid


@pytest.fixture
def fake_strategies() -> dict[Provider, FakeStrategy]:
    return {p: FakeStrategy(p) for p in Provider}


@pytest.fixture
def make_request():
    def _make(provider: Provider = Provider.OPENAI, credential: str = "sk-test", **overrides: Any) -> GenerationRequest:
        fields: dict[str, Any] = {
            "provider": provider,
            "credential": credential,
            "model": "gpt-4o",
            "title": "Monsoon Day",
            "scene_count": 3,
        }
        fields.update(overrides)
        return GenerationRequest(**fields)

    return _make
