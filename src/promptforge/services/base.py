"""Provider strategy abstraction, error types and scene decoding."""

import json
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ..models import GenerationRequest, Provider, Scene, SceneEnvelope

logger = logging.getLogger(__name__)

_SCENE_LIST = TypeAdapter(List[Scene])


class GenerationError(RuntimeError):
    """Base class for every failure of a generation call."""


class MissingCredentialError(GenerationError):
    """No API key was available, so no request was sent."""


class TransportError(GenerationError):
    """The request never produced a usable provider response."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderResponseError(GenerationError):
    """The provider answered with an error message.

    ``str(error)`` is the provider's message, unchanged.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(GenerationError):
    """The provider answered without any content."""


class SceneDecodeError(GenerationError):
    """The response content is not a valid list of scenes."""


# Provider output is matched on the camelCase keys only, with no type coercion
_WIRE = {"strict": True, "by_alias": True, "by_name": False}


def decode_scene_list(text: str) -> List[Scene]:
    """Decode JSON text that must be an array of scenes.

    Raises:
        SceneDecodeError: If the text is not JSON or any scene is invalid.
    """
    try:
        return _SCENE_LIST.validate_json(text, **_WIRE)
    except ValidationError as e:
        raise SceneDecodeError(f"Response is not a valid scene array: {e}") from e


def decode_scene_payload(text: str) -> List[Scene]:
    """Decode JSON text that is either ``{"scenes": [...]}`` or ``[...]``.

    The object form is tried first, then the bare array.

    Raises:
        SceneDecodeError: If the text is not JSON or matches neither shape.
    """
    try:
        json.loads(text)
    except json.JSONDecodeError as e:
        raise SceneDecodeError(f"Invalid JSON in response: {e}") from e

    try:
        return SceneEnvelope.model_validate_json(text, **_WIRE).scenes
    except ValidationError:
        logger.debug("Response is not a scenes object, trying bare array")

    try:
        return _SCENE_LIST.validate_json(text, **_WIRE)
    except ValidationError as e:
        raise SceneDecodeError(
            f"Response is neither a scenes object nor a scene array: {e}"
        ) from e


class ProviderStrategy(ABC):
    """One remote provider behind the generate/validate contract.

    Strategies hold no per-request state, so a single instance may serve
    any number of calls.
    """

    @property
    @abstractmethod
    def provider(self) -> Provider:
        """Return the provider this strategy talks to."""
        ...

    @abstractmethod
    def generate(self, request: GenerationRequest, credential: str) -> List[Scene]:
        """Issue one generation call and decode the scenes.

        Args:
            request: Generation parameters.
            credential: Resolved, non-empty API key.

        Returns:
            Scenes in the order the provider returned them.

        Raises:
            GenerationError: On any failure; nothing is retried.
        """
        ...

    @abstractmethod
    def validate_credential(self, credential: str) -> bool:
        """Check a credential with a cheap authenticated call.

        May raise on transport errors; the adapter turns those into ``False``.
        """
        ...
