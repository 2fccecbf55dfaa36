"""
Google Gemini provider implementation.
"""

from .base_provider import BaseProvider, DEFAULT_TEMPERATURE
from .schemas import ProviderType


class GeminiProvider(BaseProvider):
    """Gemini generateContent REST API; the key travels as a query parameter."""
    
    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.GEMINI
    
    def build_request(self, prompt):
        headers = {'Content-Type': 'application/json'}
        params = {'key': self.api_key}
        body = {
            'contents': [
                {
                    'parts': [
                        {'text': prompt}
                    ]
                }
            ],
            'generationConfig': {
                'temperature': DEFAULT_TEMPERATURE,
                'topK': 40,
                'topP': 0.95,
                'maxOutputTokens': 2048,
            },
        }
        return headers, params, body
