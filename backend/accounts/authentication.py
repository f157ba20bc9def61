"""
Bearer-token authentication for the CRMS API.

Wraps SimpleJWT's ``JWTAuthentication`` so that a *present but unusable*
token (bad signature, malformed, expired, sent under a scheme other
than ``Bearer``, or naming a user that no longer exists) is answered
with **403** ``Invalid or expired token.``, while a *missing* token
still falls through to DRF's ``NotAuthenticated`` (401, rendered as
``Access denied. No token provided.`` by the exception handler).

``TokenRejected`` deliberately extends ``APIException`` rather than
``AuthenticationFailed``: DRF rewrites the status of any
``AuthenticationFailed`` to 401 when an authenticator is configured.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed, InvalidToken

INVALID_TOKEN_MESSAGE = "Invalid or expired token."


class TokenRejected(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = INVALID_TOKEN_MESSAGE
    default_code = "token_rejected"


class BearerTokenAuthentication(JWTAuthentication):
    """
    ``Authorization: Bearer <token>`` authentication with CRMS semantics.

    The token carries ``user_id``, ``username`` and ``role_id`` claims.
    The role claim is informational only; permission gates always
    re-read the user's current role from the database.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        try:
            result = super().authenticate(request)
        except (InvalidToken, AuthenticationFailed):
            raise TokenRejected()
        if result is None and header and header.strip():
            # Credentials under another scheme, e.g. ``Token abc``
            raise TokenRejected()
        return result
