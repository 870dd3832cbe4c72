"""External service integrations."""

from .adapter import ProviderAdapter, default_strategies
from .base import (
    EmptyResponseError,
    GenerationError,
    MissingCredentialError,
    ProviderResponseError,
    ProviderStrategy,
    SceneDecodeError,
    TransportError,
)
from .chat import ChatCompletionStrategy
from .gemini import GeminiStrategy

__all__ = [
    "ProviderAdapter",
    "default_strategies",
    "ProviderStrategy",
    "GeminiStrategy",
    "ChatCompletionStrategy",
    "GenerationError",
    "MissingCredentialError",
    "TransportError",
    "ProviderResponseError",
    "EmptyResponseError",
    "SceneDecodeError",
]
