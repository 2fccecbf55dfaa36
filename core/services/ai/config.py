"""
Immutable AI provider configuration.

Keys and endpoints are read from Django settings once, when a router is
wired, and then shared read-only by every call made through that router.

No key has a built-in value. Gemini, the last link of every chain, is still
called when its key is empty so the caller gets the usual failure result.
"""

from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from .schemas import ProviderType


@dataclass(frozen=True)
class AIConfiguration:
    """Endpoint URLs, API keys and request-shaping values for all providers."""
    gemini_api_key: str = ''
    openai_api_key: str = ''
    anthropic_api_key: str = ''
    gemini_url: str = 'https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent'
    openai_url: str = 'https://api.openai.com/v1/chat/completions'
    anthropic_url: str = 'https://api.anthropic.com/v1/messages'
    openai_model: str = 'gpt-4-turbo'
    anthropic_model: str = 'claude-3-opus-20240229'
    anthropic_version: str = '2023-06-01'
    timeout: float = 30.0

    @classmethod
    def from_settings(cls) -> 'AIConfiguration':
        """
        Build the configuration from Django settings.
        
        Missing settings fall back to the dataclass defaults; missing keys
        become empty strings, which marks the provider as unconfigured.
        
        Returns:
            AIConfiguration instance
        """
        defaults = cls()
        return cls(
            gemini_api_key=getattr(settings, 'GEMINI_API_KEY', '') or '',
            openai_api_key=getattr(settings, 'OPENAI_API_KEY', '') or '',
            anthropic_api_key=getattr(settings, 'ANTHROPIC_API_KEY', '') or '',
            gemini_url=getattr(settings, 'GEMINI_API_URL', defaults.gemini_url),
            openai_url=getattr(settings, 'OPENAI_API_URL', defaults.openai_url),
            anthropic_url=getattr(settings, 'ANTHROPIC_API_URL', defaults.anthropic_url),
            openai_model=getattr(settings, 'OPENAI_MODEL', defaults.openai_model),
            anthropic_model=getattr(settings, 'ANTHROPIC_MODEL', defaults.anthropic_model),
            anthropic_version=getattr(settings, 'ANTHROPIC_API_VERSION', defaults.anthropic_version),
            timeout=float(getattr(settings, 'AI_HTTP_TIMEOUT', defaults.timeout)),
        )

    def api_key_for(self, provider: ProviderType) -> str:
        return {
            ProviderType.GEMINI: self.gemini_api_key,
            ProviderType.OPENAI: self.openai_api_key,
            ProviderType.ANTHROPIC: self.anthropic_api_key,
        }[provider]

    def url_for(self, provider: ProviderType) -> str:
        return {
            ProviderType.GEMINI: self.gemini_url,
            ProviderType.OPENAI: self.openai_url,
            ProviderType.ANTHROPIC: self.anthropic_url,
        }[provider]

    def is_configured(self, provider: ProviderType) -> bool:
        """Return True if an API key is present for the provider."""
        return bool(self.api_key_for(provider))
