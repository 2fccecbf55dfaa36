"""
Failure categories for outbound calls to AI providers.

The AI router treats every IntegrationError the same way (log it, move to the
next provider in the chain); the subclasses only make the log line say what
went wrong. Messages never carry API keys or bearer tokens.
"""


class IntegrationError(Exception):
    """
    A provider call did not produce a usable response.

    Attributes:
        status_code: HTTP status of the provider response, or None when no
            response was received (timeouts, refused connections, redirect
            loops, undecodable bodies)
    """

    def __init__(self, message='', status_code=None):
        super().__init__(message)
        self.status_code = status_code


class IntegrationAuthError(IntegrationError):
    """Provider rejected the API key (HTTP 401/403)."""
    pass


class IntegrationRateLimited(IntegrationError):
    """
    Provider quota exhausted (HTTP 429).

    retry_after is kept for logging only; the router does not wait and retry
    the same provider.
    """

    def __init__(self, message="Rate limit exceeded", retry_after=None, status_code=429):
        super().__init__(message, status_code=status_code)
        self.retry_after = retry_after


class IntegrationTemporaryError(IntegrationError):
    """Provider outage or network failure (5xx, timeout, connection, transport)."""
    pass


class IntegrationPermanentError(IntegrationError):
    """Provider refused the request (4xx other than 429) or answered with non-JSON."""
    pass


class IntegrationInvalidResponse(IntegrationPermanentError):
    """A 2xx response whose body has no generated text at the expected path."""
    pass
