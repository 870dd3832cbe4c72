"""OpenAI-compatible chat-completion strategy (OpenAI, DeepSeek)."""

import logging
from typing import Any, List, Optional

import requests

from ..models import GenerationRequest, Provider, Scene
from ..prompts import SYSTEM_INSTRUCTION, build_prompt
from .base import (
    EmptyResponseError,
    ProviderResponseError,
    ProviderStrategy,
    SceneDecodeError,
    TransportError,
    decode_scene_payload,
)

logger = logging.getLogger(__name__)

OPENAI_BASE_URL = "https://api.openai.com/v1"
DEEPSEEK_BASE_URL = "https://api.deepseek.com/v1"


def _error_message(data: Any) -> Optional[str]:
    """Return the message of an ``{"error": {"message": ...}}`` body, if any."""
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return None


def _is_success(r: requests.Response) -> bool:
    return 200 <= r.status_code < 300


def _message_content(data: Any) -> Optional[str]:
    """Return ``choices[0].message.content`` or None when absent."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None


class ChatCompletionStrategy(ProviderStrategy):
    """Chat-completion providers that only offer a JSON-object response mode.

    The model is asked for JSON, but the array may come back wrapped in a
    ``scenes`` property or bare; both shapes are accepted.
    """

    def __init__(
        self,
        provider: Provider,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize the strategy.

        Args:
            provider: Provider this instance represents.
            base_url: API root, e.g. ``https://api.openai.com/v1``.
            session: HTTP session. When omitted each call goes through
                requests.post/requests.get, which use a fresh session.
            timeout: Request timeout in seconds. None leaves requests' default.
        """
        self._provider = provider
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = timeout

    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def _http(self) -> Any:
        return self._session if self._session is not None else requests

    @property
    def completions_url(self) -> str:
        return f"{self._base_url}/chat/completions"

    @property
    def models_url(self) -> str:
        return f"{self._base_url}/models"

    def generate(self, request: GenerationRequest, credential: str) -> List[Scene]:
        payload = {
            "model": request.model,
            "messages": [
                {"role": "system", "content": SYSTEM_INSTRUCTION},
                {"role": "user", "content": build_prompt(request)},
            ],
            "response_format": {"type": "json_object"},
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {credential}",
        }

        logger.debug(f"POST {self.completions_url} (model: {request.model})")
        try:
            r = self._http.post(
                self.completions_url, json=payload, headers=headers, timeout=self._timeout
            )
        except (requests.RequestException, ValueError) as e:
            # requests raises ValueError for an invalid timeout
            logger.error(f"{self._provider.value} request failed: {e}")
            raise TransportError(
                f"Failed to reach {self._provider.value} at {self.completions_url}: {e}"
            ) from e

        try:
            data = r.json()
        except ValueError:
            data = None

        message = _error_message(data)
        if message:
            logger.error(f"{self._provider.value} error {r.status_code}: {message}")
            raise ProviderResponseError(message, status_code=r.status_code)

        if not _is_success(r):
            raise TransportError(
                f"{self._provider.value} error {r.status_code}: {r.text[:500]}",
                status_code=r.status_code,
            )

        if data is None:
            if not r.content:
                raise EmptyResponseError(f"{self._provider.value} returned an empty body")
            raise SceneDecodeError(f"{self._provider.value} returned a non-JSON body")

        content = _message_content(data)
        if not content or not content.strip():
            raise EmptyResponseError(
                f"{self._provider.value} response missing choices[0].message.content"
            )

        scenes = decode_scene_payload(content)
        logger.info(f"{self._provider.value} returned {len(scenes)} scenes")
        return scenes

    def validate_credential(self, credential: str) -> bool:
        r = self._http.get(
            self.models_url,
            headers={"Authorization": f"Bearer {credential}"},
            timeout=self._timeout,
        )
        return _is_success(r)
