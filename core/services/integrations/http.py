"""
Async HTTP client wrapper for integration services.

Provides consistent error handling and timeouts for outbound HTTP requests.

Logging Guidelines:
- Logs method + host + path (no query string, no tokens/keys)
- On errors: status code + truncated response (max 500 chars)
- Never logs Authorization headers or API keys

Retry Strategy:
- None. Every request is sent exactly once; callers that want another
  attempt (e.g. the AI router's provider fallback) decide that themselves.
"""

import logging
from typing import Optional, Dict, Any
from urllib.parse import urlparse

import httpx

from .errors import (
    IntegrationAuthError,
    IntegrationRateLimited,
    IntegrationTemporaryError,
    IntegrationPermanentError,
)

logger = logging.getLogger(__name__)

# Maximum response text length to include in error messages
MAX_ERROR_RESPONSE_LENGTH = 500

DEFAULT_TIMEOUT = 30.0


class AsyncHTTPClient:
    """
    Non-blocking HTTP client with consistent error handling for integrations.

    Features:
    - Timeout configuration (30 seconds by default)
    - Error mapping to integration-specific exceptions
    - Request/response logging without secrets
    """

    def __init__(
        self,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize HTTP client.

        Args:
            headers: Default headers to include in all requests
            timeout: Request timeout in seconds
        """
        self.default_headers = headers or {}
        self.timeout = timeout

    def _sanitize_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """
        Remove sensitive headers for logging.

        Args:
            headers: Original headers

        Returns:
            Sanitized headers safe for logging
        """
        sensitive_keys = {'authorization', 'x-api-key', 'api-key', 'token'}
        return {
            k: '***' if k.lower() in sensitive_keys else v
            for k, v in headers.items()
        }

    def _truncate_response(self, text: str) -> str:
        """
        Truncate response text for error messages.

        Args:
            text: Response text

        Returns:
            Truncated text (max MAX_ERROR_RESPONSE_LENGTH chars)
        """
        if len(text) > MAX_ERROR_RESPONSE_LENGTH:
            return text[:MAX_ERROR_RESPONSE_LENGTH] + "..."
        return text

    def _handle_response_error(self, response: httpx.Response):
        """
        Map HTTP errors to integration exceptions.

        - 401/403 → IntegrationAuthError
        - 429 → IntegrationRateLimited (with retry_after)
        - 5xx → IntegrationTemporaryError
        - 4xx → IntegrationPermanentError

        Args:
            response: HTTP response object

        Raises:
            IntegrationAuthError: For 401/403 errors
            IntegrationRateLimited: For 429 errors
            IntegrationTemporaryError: For 5xx errors
            IntegrationPermanentError: For other 4xx errors
        """
        status = response.status_code
        truncated_text = self._truncate_response(response.text)

        if status in (401, 403):
            raise IntegrationAuthError(
                f"Authentication failed (HTTP {status}): {truncated_text}",
                status_code=status
            )

        if status == 429:
            retry_after = response.headers.get('Retry-After')
            try:
                retry_after = int(retry_after) if retry_after else None
            except (ValueError, TypeError):
                retry_after = None

            raise IntegrationRateLimited(
                f"Rate limit exceeded: {truncated_text}",
                retry_after=retry_after
            )

        if status >= 500:
            raise IntegrationTemporaryError(
                f"Server error (HTTP {status}): {truncated_text}",
                status_code=status
            )

        if status >= 400:
            raise IntegrationPermanentError(
                f"Client error (HTTP {status}): {truncated_text}",
                status_code=status
            )

    async def _request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send a single HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute URL
            headers: Additional headers for this request
            params: Query parameters
            json: JSON body

        Returns:
            HTTP response object (status < 400)

        Raises:
            IntegrationError: On HTTP errors or connection issues
        """
        parsed = urlparse(url)

        request_headers = {**self.default_headers}
        if headers:
            request_headers.update(headers)

        logger.debug(
            f"{method} {parsed.scheme}://{parsed.netloc}{parsed.path} "
            f"headers={self._sanitize_headers(request_headers)}"
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=request_headers,
                    params=params,
                    json=json,
                )
        except httpx.TimeoutException as e:
            raise IntegrationTemporaryError(
                f"Request to {parsed.netloc} timed out after {self.timeout}s"
            ) from e
        except httpx.TransportError as e:
            raise IntegrationTemporaryError(
                f"Connection to {parsed.netloc} failed: {e.__class__.__name__}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # Redirect loops, undecodable bodies, malformed URLs
            raise IntegrationTemporaryError(
                f"Request to {parsed.netloc} failed: {e.__class__.__name__}"
            ) from e

        if response.status_code >= 400:
            self._handle_response_error(response)

        return response

    async def request_json(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make HTTP request and return the decoded JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute URL
            headers: Optional headers
            params: Optional query parameters
            json: Optional JSON body

        Returns:
            Parsed JSON response

        Raises:
            IntegrationPermanentError: If the body is not valid JSON
        """
        response = await self._request(method, url, headers=headers, params=params, json=json)
        try:
            return response.json()
        except ValueError as e:
            raise IntegrationPermanentError(
                f"Invalid JSON response: {self._truncate_response(response.text)}",
                status_code=response.status_code
            ) from e

    async def post(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make POST request and return JSON response."""
        return await self.request_json('POST', url, headers=headers, params=params, json=json)
