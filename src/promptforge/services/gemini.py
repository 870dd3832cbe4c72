"""Google Gemini strategy via the google-genai SDK."""

import logging
from typing import Any, Callable, List

from google import genai
from google.genai import types, errors as genai_errors

from ..models import GenerationRequest, Provider, Scene
from ..prompts import SCENE_RESPONSE_SCHEMA, SYSTEM_INSTRUCTION, build_prompt
from .base import (
    EmptyResponseError,
    ProviderResponseError,
    ProviderStrategy,
    TransportError,
    decode_scene_list,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], Any]


def _default_client_factory(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


class GeminiStrategy(ProviderStrategy):
    """Gemini generation with a schema-constrained JSON array response."""

    DEFAULT_VALIDATION_MODEL = "gemini-3-flash-preview"

    def __init__(
        self,
        validation_model: str = DEFAULT_VALIDATION_MODEL,
        client_factory: ClientFactory = _default_client_factory,
    ) -> None:
        """Initialize the strategy.

        Args:
            validation_model: Lightweight model used for credential checks.
            client_factory: Builds a genai client from an API key.
        """
        self._validation_model = validation_model
        self._client_factory = client_factory

    @property
    def provider(self) -> Provider:
        return Provider.GEMINI

    def generate(self, request: GenerationRequest, credential: str) -> List[Scene]:
        client = self._client_factory(credential)
        logger.debug(f"Sending Gemini request (model: {request.model})")

        try:
            response = client.models.generate_content(
                model=request.model,
                contents=build_prompt(request),
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    response_mime_type="application/json",
                    response_schema=SCENE_RESPONSE_SCHEMA,
                ),
            )
        except genai_errors.APIError as e:
            logger.error(f"Gemini API error: {e}")
            raise ProviderResponseError(e.message or str(e), status_code=e.code) from e
        except Exception as e:
            logger.error(f"Gemini request failed: {e}")
            raise TransportError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text:
            raise EmptyResponseError("Empty response from Gemini")

        scenes = decode_scene_list(text)
        logger.info(f"Gemini returned {len(scenes)} scenes")
        return scenes

    def validate_credential(self, credential: str) -> bool:
        client = self._client_factory(credential)
        client.models.generate_content(
            model=self._validation_model,
            contents="test",
            config=types.GenerateContentConfig(max_output_tokens=1),
        )
        return True
