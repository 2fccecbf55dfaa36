"""
Integration Base Package

Provides the HTTP transport and exception hierarchy used for outbound calls
to external services (AI providers).

Key Components:
- errors.py: Integration-specific exceptions
- http.py: Async HTTP client with error mapping
"""

from .errors import (
    IntegrationError,
    IntegrationAuthError,
    IntegrationRateLimited,
    IntegrationTemporaryError,
    IntegrationPermanentError,
    IntegrationInvalidResponse,
)
from .http import AsyncHTTPClient

__all__ = [
    # Exceptions
    'IntegrationError',
    'IntegrationAuthError',
    'IntegrationRateLimited',
    'IntegrationTemporaryError',
    'IntegrationPermanentError',
    'IntegrationInvalidResponse',
    # Classes
    'AsyncHTTPClient',
]
