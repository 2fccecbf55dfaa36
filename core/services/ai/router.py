"""
AI Router - Main entry point for AI services in Arivu.
"""

import logging
import time
from typing import Iterable, List, Optional, Union

from core.services.exceptions import AIServiceUnavailable, ServiceNotConfigured
from core.services.integrations import AsyncHTTPClient, IntegrationError
from .anthropic_provider import AnthropicProvider
from .base_provider import BaseProvider
from .config import AIConfiguration
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider
from .schemas import AIResult, DEFAULT_PROVIDER, ProviderType, SUCCESS_MESSAGE

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ORDER = (
    ProviderType.ANTHROPIC,
    ProviderType.OPENAI,
    ProviderType.GEMINI,
)


class AIRouter:
    """
    AI Router for sending one prompt through an ordered chain of providers.

    The chain starts at the caller's preferred provider, continues along the
    router's fallback order and always ends at Gemini. Providers are tried
    one at a time and each at most once per call:

    - a non-final provider without an API key is skipped before any request
    - a transport error, HTTP error or malformed body moves on to the next one
    - a failure of the final provider raises AIServiceUnavailable
    """

    # Provider class mapping
    PROVIDER_CLASSES = {
        ProviderType.GEMINI: GeminiProvider,
        ProviderType.OPENAI: OpenAIProvider,
        ProviderType.ANTHROPIC: AnthropicProvider,
    }

    def __init__(
        self,
        config: Optional[AIConfiguration] = None,
        fallback_order: Iterable[Union[ProviderType, str]] = DEFAULT_FALLBACK_ORDER,
        system_prompt: Optional[str] = None,
        http_client: Optional[AsyncHTTPClient] = None,
    ):
        """
        Initialize the AI Router.

        Args:
            config: Provider configuration (defaults to Django settings)
            fallback_order: Providers to walk after the preferred one
            system_prompt: System message for providers that support one
            http_client: Transport shared by all providers of this router

        Raises:
            ServiceNotConfigured: If fallback_order names an unknown provider
        """
        self.config = config or AIConfiguration.from_settings()
        self.system_prompt = system_prompt
        self.http_client = http_client or AsyncHTTPClient(timeout=self.config.timeout)

        try:
            self.fallback_order = tuple(ProviderType(p) for p in fallback_order)
        except ValueError as e:
            raise ServiceNotConfigured(f"Unknown provider in fallback order: {e}") from e

    def _get_provider_instance(self, provider_type: ProviderType) -> BaseProvider:
        """
        Create a provider instance from the router configuration.

        Args:
            provider_type: Provider to instantiate

        Returns:
            Initialized provider instance
        """
        provider_class = self.PROVIDER_CLASSES[provider_type]

        kwargs = {}
        if provider_type == ProviderType.OPENAI:
            kwargs['model'] = self.config.openai_model
            kwargs['system_prompt'] = self.system_prompt
        elif provider_type == ProviderType.ANTHROPIC:
            kwargs['model'] = self.config.anthropic_model
            kwargs['api_version'] = self.config.anthropic_version

        return provider_class(
            api_key=self.config.api_key_for(provider_type),
            url=self.config.url_for(provider_type),
            http_client=self.http_client,
            **kwargs
        )

    def _resolve_preferred(self, preferred: Optional[Union[ProviderType, str]]) -> ProviderType:
        """Map a caller-supplied provider name to a ProviderType (default: Gemini)."""
        if not preferred:
            return DEFAULT_PROVIDER

        try:
            return ProviderType(str(preferred).strip().lower())
        except ValueError:
            logger.warning(
                f"Unknown AI provider '{preferred}' requested, using {DEFAULT_PROVIDER.label}"
            )
            return DEFAULT_PROVIDER

    def build_chain(self, preferred: Optional[Union[ProviderType, str]] = None) -> List[ProviderType]:
        """
        Build the ordered provider chain for one call.

        Args:
            preferred: Provider the caller wants to use first

        Returns:
            List of distinct providers ending with the default provider
        """
        first = self._resolve_preferred(preferred)

        if first in self.fallback_order:
            candidates = list(self.fallback_order[self.fallback_order.index(first):])
        else:
            candidates = [first, *self.fallback_order]

        chain = []
        for provider_type in candidates:
            if provider_type != DEFAULT_PROVIDER and provider_type not in chain:
                chain.append(provider_type)
        chain.append(DEFAULT_PROVIDER)

        return chain

    async def generate(
        self,
        prompt: str,
        preferred: Optional[Union[ProviderType, str]] = None,
    ) -> AIResult:
        """
        Generate text for a prompt, falling back along the provider chain.

        Args:
            prompt: Fully formed prompt text (sent unchanged)
            preferred: Provider to try first

        Returns:
            AIResult from the first provider that answered

        Raises:
            AIServiceUnavailable: If the final provider also failed
        """
        chain = self.build_chain(preferred)

        for index, provider_type in enumerate(chain):
            is_final = index == len(chain) - 1
            next_label = None if is_final else chain[index + 1].label

            if not self.config.is_configured(provider_type):
                if not is_final:
                    logger.warning(
                        f"{provider_type.label} API key not configured, "
                        f"falling back to {next_label}"
                    )
                    continue
                logger.warning(
                    f"{provider_type.label} API key not configured; "
                    f"attempting it as the final fallback"
                )

            provider = self._get_provider_instance(provider_type)
            start_time = time.time()

            try:
                response = await provider.generate(prompt)
            except IntegrationError as e:
                duration_ms = int((time.time() - start_time) * 1000)
                logger.error(
                    f"{provider.label} API error after {duration_ms}ms: "
                    f"{e.__class__.__name__}: {e}"
                    + (f" (HTTP {e.status_code})" if e.status_code else "")
                )

                if is_final:
                    logger.error(
                        f"All AI providers failed ({', '.join(p.label for p in chain)})"
                    )
                    raise AIServiceUnavailable() from None

                logger.warning(
                    f"Falling back to {next_label} API after {provider.label} failure"
                )
                continue

            duration_ms = int((time.time() - start_time) * 1000)
            logger.info(f"{provider.label} generated a response in {duration_ms}ms")

            return AIResult(
                success=True,
                message=SUCCESS_MESSAGE,
                response=response.text,
                model=provider.label,
            )

        # Unreachable: the final provider either returns or raises
        raise AIServiceUnavailable()
