"""
OpenAI provider implementation.
"""

from .base_provider import BaseProvider, DEFAULT_TEMPERATURE
from .schemas import ProviderType

DEFAULT_SYSTEM_PROMPT = 'You are a helpful assistant.'


class OpenAIProvider(BaseProvider):
    """OpenAI chat completions API provider implementation."""
    
    def __init__(self, api_key, url, http_client, **kwargs):
        """
        Initialize OpenAI provider.
        
        Args:
            api_key: OpenAI API key
            url: Chat completions endpoint
            http_client: Transport used to send the request
            **kwargs: model (e.g. 'gpt-4-turbo') and system_prompt
        """
        super().__init__(api_key, url, http_client, **kwargs)
        self.model = self.config.get('model') or 'gpt-4-turbo'
        self.system_prompt = self.config.get('system_prompt') or DEFAULT_SYSTEM_PROMPT
    
    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.OPENAI
    
    def build_request(self, prompt):
        headers = {
            'Content-Type': 'application/json',
            'Authorization': f'Bearer {self.api_key}',
        }
        body = {
            'model': self.model,
            'messages': [
                {'role': 'system', 'content': self.system_prompt},
                {'role': 'user', 'content': prompt},
            ],
            'temperature': DEFAULT_TEMPERATURE,
            'max_tokens': 2048,
        }
        return headers, None, body
