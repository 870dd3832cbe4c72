"""Provider adapter: one generate/validate contract over every provider."""

import logging
from typing import Dict, List, Mapping, Optional

from ..models import GenerationRequest, Provider, Scene
from .base import MissingCredentialError, ProviderStrategy
from .chat import DEEPSEEK_BASE_URL, OPENAI_BASE_URL, ChatCompletionStrategy
from .gemini import GeminiStrategy

logger = logging.getLogger(__name__)


def default_strategies(
    validation_model: str = GeminiStrategy.DEFAULT_VALIDATION_MODEL,
    timeout: Optional[float] = None,
) -> Dict[Provider, ProviderStrategy]:
    """Build the standard strategy table, one entry per provider."""
    return {
        Provider.GEMINI: GeminiStrategy(validation_model=validation_model),
        Provider.OPENAI: ChatCompletionStrategy(
            Provider.OPENAI, OPENAI_BASE_URL, timeout=timeout
        ),
        Provider.DEEPSEEK: ChatCompletionStrategy(
            Provider.DEEPSEEK, DEEPSEEK_BASE_URL, timeout=timeout
        ),
    }


class ProviderAdapter:
    """Dispatches generation and credential checks to provider strategies.

    The adapter keeps no per-call state. Credentials travel with each call;
    the only configured value is the fallback credential, which is used for
    Gemini when the per-call credential is empty.
    """

    def __init__(
        self,
        strategies: Optional[Mapping[Provider, ProviderStrategy]] = None,
        fallback_credential: str = "",
    ) -> None:
        """Initialize the adapter.

        Args:
            strategies: Strategy per provider. Defaults to default_strategies().
            fallback_credential: Gemini key used when a call brings none.

        Raises:
            ValueError: If a provider has no strategy.
        """
        self._strategies = dict(strategies) if strategies is not None else default_strategies()
        missing = [p.value for p in Provider if p not in self._strategies]
        if missing:
            raise ValueError(f"No strategy registered for: {', '.join(missing)}")
        self._fallback_credential = fallback_credential

    def strategy_for(self, provider: Provider) -> ProviderStrategy:
        """Return the strategy handling a provider."""
        return self._strategies[provider]

    def resolve_credential(self, provider: Provider, credential: str) -> str:
        """Return the key a call will use, applying the Gemini fallback."""
        if not credential and provider == Provider.GEMINI:
            return self._fallback_credential
        return credential

    def generate(self, request: GenerationRequest) -> List[Scene]:
        """Generate scenes for one request.

        Args:
            request: Generation parameters including provider and credential.

        Returns:
            Scenes exactly as the provider numbered and ordered them.

        Raises:
            MissingCredentialError: If no credential is available.
            GenerationError: On transport, provider, empty or decode failures.
        """
        credential = self.resolve_credential(request.provider, request.credential)
        if not credential:
            raise MissingCredentialError(f"No API key provided for {request.provider.value}")

        logger.info(
            f"Generating {request.scene_count} scenes for '{request.title}' "
            f"({request.provider.value}, model: {request.model})"
        )
        return self.strategy_for(request.provider).generate(request, credential)

    def validate_credential(self, provider: Provider, credential: str) -> bool:
        """Check that a credential is accepted by the provider.

        Never raises: an empty credential or any failure yields False.
        """
        if not credential:
            return False

        try:
            valid = self.strategy_for(provider).validate_credential(credential)
        except Exception as e:
            logger.warning(f"{provider.value} credential check failed: {e}")
            return False

        logger.info(f"{provider.value} credential {'accepted' if valid else 'rejected'}")
        return bool(valid)
