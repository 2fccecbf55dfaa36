"""
Errors raised by the Arivu service layer.

Each class maps to one HTTP status in core.views_api:
    ResourceNotFound 404, ResourceConflict 409, InvalidStateTransition 400,
    AuthenticationFailed 401, AIServiceUnavailable and ServiceNotConfigured 500.
"""


class ServiceError(Exception):
    """Common base; views catch this to build a JSON error body."""
    pass


class ServiceNotConfigured(ServiceError):
    """A required setting (e.g. JWT_SECRET) is empty."""
    pass


class AIServiceUnavailable(ServiceError):
    """
    Raised when every provider in an AI fallback chain has failed.
    
    The message is deliberately generic; provider-specific error details
    are logged by the router and never attached to this exception.
    """
    
    default_message = 'Failed to generate AI response'
    
    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class ResourceNotFound(ServiceError):
    """
    Raised when a requested or referenced record does not exist.
    
    Example:
        Creating a user with a role_id that has no matching Role.
    """
    pass


class ResourceConflict(ServiceError):
    """
    Raised when a write would violate a uniqueness rule.
    
    Example:
        Registering a second user with an email that is already in use.
    """
    pass


class InvalidStateTransition(ServiceError):
    """
    Raised when a record cannot move to the requested status.
    
    Example:
        Approving a gate pass that was already rejected.
    """
    pass


class AuthenticationFailed(ServiceError):
    """Raised for unknown users, wrong passwords and invalid or expired tokens."""
    pass
