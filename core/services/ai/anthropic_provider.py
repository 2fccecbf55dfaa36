"""
Anthropic provider implementation.
"""

from .base_provider import BaseProvider, DEFAULT_TEMPERATURE
from .schemas import ProviderType


class AnthropicProvider(BaseProvider):
    """Anthropic Messages API provider implementation."""
    
    def __init__(self, api_key, url, http_client, **kwargs):
        """
        Initialize Anthropic provider.
        
        Args:
            api_key: Anthropic API key
            url: Messages endpoint
            http_client: Transport used to send the request
            **kwargs: model and api_version (anthropic-version header)
        """
        super().__init__(api_key, url, http_client, **kwargs)
        self.model = self.config.get('model') or 'claude-3-opus-20240229'
        self.api_version = self.config.get('api_version') or '2023-06-01'
    
    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.ANTHROPIC
    
    def build_request(self, prompt):
        headers = {
            'Content-Type': 'application/json',
            'x-api-key': self.api_key,
            'anthropic-version': self.api_version,
        }
        body = {
            'model': self.model,
            'messages': [
                {'role': 'user', 'content': prompt},
            ],
            'temperature': DEFAULT_TEMPERATURE,
            'max_tokens': 4096,
        }
        return headers, None, body
