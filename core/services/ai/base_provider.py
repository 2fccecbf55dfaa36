"""
Base provider interface for AI providers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from core.services.integrations import AsyncHTTPClient, IntegrationInvalidResponse
from .extractors import extract_text
from .schemas import ProviderResponse, ProviderType

# Shared sampling temperature for all providers
DEFAULT_TEMPERATURE = 0.7


class BaseProvider(ABC):
    """Abstract base class for AI providers."""
    
    def __init__(self, api_key: str, url: str, http_client: AsyncHTTPClient, **kwargs):
        """
        Initialize the provider.
        
        Args:
            api_key: API key for the provider
            url: Endpoint URL for text generation
            http_client: Transport used to send the request
            **kwargs: Additional provider-specific configuration
        """
        self.api_key = api_key
        self.url = url
        self.http_client = http_client
        self.config = kwargs
    
    @property
    @abstractmethod
    def provider_type(self) -> ProviderType:
        """Return the provider type identifier."""
        pass
    
    @property
    def label(self) -> str:
        """Human-readable provider label reported to API clients."""
        return ProviderType(self.provider_type).label
    
    @abstractmethod
    def build_request(
        self, prompt: str
    ) -> Tuple[Dict[str, str], Optional[Dict[str, Any]], Dict[str, Any]]:
        """
        Shape the HTTP request for a prompt.
        
        Args:
            prompt: Fully formed prompt text
            
        Returns:
            Tuple of (headers, query params, JSON body)
        """
        pass
    
    async def generate(self, prompt: str) -> ProviderResponse:
        """
        Send the prompt and extract the generated text.
        
        Args:
            prompt: Fully formed prompt text
            
        Returns:
            ProviderResponse with text and raw JSON body
            
        Raises:
            IntegrationError: On transport or HTTP errors
            IntegrationInvalidResponse: If the body has no generated text
        """
        headers, params, body = self.build_request(prompt)
        data = await self.http_client.post(self.url, headers=headers, params=params, json=body)
        
        text = extract_text(self.provider_type, data)
        if text is None:
            raise IntegrationInvalidResponse(
                f"Invalid response structure from {self.label} API"
            )
        
        return ProviderResponse(text=text, raw=data)
