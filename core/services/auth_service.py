"""
Token authentication for the Arivu API.

Access tokens are HS256 JWTs signed with settings.JWT_SECRET. The payload
carries the user id ('sub'), email and role name so that the API middleware
can authorize requests without a database lookup.
"""

import logging
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Any, Dict

import jwt
from django.conf import settings

from core.services.exceptions import AuthenticationFailed, ResourceNotFound, ServiceNotConfigured
from core.services.user_service import UserService

logger = logging.getLogger(__name__)


def _secret() -> str:
    secret = getattr(settings, 'JWT_SECRET', '')
    if not secret:
        raise ServiceNotConfigured('JWT_SECRET is not configured')
    return secret


def issue_token(user) -> str:
    """
    Create a signed access token for a user.

    Args:
        user: Authenticated User instance

    Returns:
        Encoded JWT string
    """
    now = datetime.now(dt_timezone.utc)
    payload = {
        'sub': str(user.id),
        'email': user.email,
        'role': user.role.name if user.role else None,
        'iat': now,
        'exp': now + timedelta(minutes=settings.JWT_EXPIRATION_MINUTES),
    }
    return jwt.encode(payload, _secret(), algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """
    Verify a token and return its payload.

    Raises:
        AuthenticationFailed: If the token is expired, malformed or badly signed
    """
    try:
        return jwt.decode(
            token,
            _secret(),
            algorithms=[settings.JWT_ALGORITHM],
            options={'require': ['exp', 'sub']},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationFailed('Token has expired')
    except jwt.InvalidTokenError as e:
        logger.debug(f"Rejected token: {e.__class__.__name__}")
        raise AuthenticationFailed('Invalid token')


def login(email: str, password: str) -> Dict[str, Any]:
    """
    Check credentials and issue an access token.

    Returns:
        {'access_token': ..., 'token_type': 'Bearer', 'user': {...}}

    Raises:
        AuthenticationFailed: If the email is unknown or the password is wrong
    """
    service = UserService()
    try:
        user = service.find_by_email(email)
    except ResourceNotFound:
        logger.info(f"Login failed for unknown email {email}")
        raise AuthenticationFailed('Invalid credentials')

    if not user.is_active or not user.check_password(password):
        logger.info(f"Login failed for user {user.id}")
        raise AuthenticationFailed('Invalid credentials')

    logger.info(f"User {user.id} logged in")
    return {
        'access_token': issue_token(user),
        'token_type': 'Bearer',
        'user': service.find_one(user.id),
    }
