"""
API Authentication Middleware for the Arivu JSON API.

This middleware enforces bearer-token authentication for every endpoint
under /api/ except the login endpoint.
"""
import logging
from django.http import JsonResponse

from core.services.auth_service import decode_token
from core.services.exceptions import AuthenticationFailed, ServiceNotConfigured

logger = logging.getLogger(__name__)

API_PREFIX = '/api/'

# Endpoints reachable without a token
PUBLIC_API_PATHS = (
    '/api/auth/login',
)


class JWTAuthMiddleware:
    """
    Middleware that enforces Authorization: Bearer <jwt> for API endpoints.

    On success the decoded token payload is attached to the request as
    request.jwt_payload. The database is not touched here.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.jwt_payload = None

        if self._requires_token(request.path):
            header = request.META.get('HTTP_AUTHORIZATION', '')
            scheme, _, token = header.partition(' ')

            if scheme.lower() != 'bearer' or not token.strip():
                logger.warning(
                    f"Unauthenticated API request to {request.path} from {request.META.get('REMOTE_ADDR', 'unknown')}"
                )
                return JsonResponse(
                    {'error': 'Unauthorized. Missing bearer token.'},
                    status=401
                )

            try:
                request.jwt_payload = decode_token(token.strip())
            except ServiceNotConfigured:
                logger.error("JWT_SECRET not configured")
                return JsonResponse(
                    {'error': 'API authentication not configured'},
                    status=500
                )
            except AuthenticationFailed as e:
                # Never log the token itself
                logger.warning(f"Rejected API request to {request.path}: {e}")
                return JsonResponse({'error': f'Unauthorized. {e}.'}, status=401)

        response = self.get_response(request)
        return response

    def _requires_token(self, path):
        """
        Check if the path is an API endpoint that requires authentication.

        Args:
            path: Request path

        Returns:
            True if a valid token is required, False otherwise
        """
        if not path.startswith(API_PREFIX):
            return False
        return path.rstrip('/') not in PUBLIC_API_PATHS
