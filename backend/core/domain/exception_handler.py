"""
core.domain.exception_handler — DRF-compatible global exception handler.

Maps domain exceptions from ``core.domain.exceptions`` and DRF's own
exceptions to ``{"error": "<message>"}`` responses so that views don't
need per-endpoint try/except boilerplate.

Anything else is an unexpected failure: the traceback is logged and the
client gets a 500 with a generic message.  Views may name that message
per action through a ``failure_messages`` mapping, e.g.::

    class CaseViewSet(viewsets.ViewSet):
        failure_messages = {
            "list": "Failed to fetch cases",
            "update": "Failed to update case",
        }

Register in ``settings.py``::

    REST_FRAMEWORK = {
        ...
        'EXCEPTION_HANDLER': 'core.domain.exception_handler.domain_exception_handler',
    }
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_default_handler

from core.domain.exceptions import (
    AuthenticationFailed,
    Conflict,
    DomainError,
    NotFound,
    PermissionDenied,
)

logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = "Access denied. No token provided."
DEFAULT_FAILURE_MESSAGE = "Internal server error"

# Domain exception → HTTP status code
_STATUS_MAP: dict[type, int] = {
    AuthenticationFailed: 401,
    PermissionDenied:     403,
    NotFound:             404,
    Conflict:             400,
    DomainError:          400,  # catch-all base class last
}


def _first_message(data: Any) -> str:
    """
    Reduce a DRF error payload (dict / list / string) to one message.

    Field errors are prefixed with the field name; ``detail`` and
    ``non_field_errors`` are returned as-is.
    """
    if isinstance(data, dict):
        for key, value in data.items():
            message = _first_message(value)
            if key in ("detail", "non_field_errors", "error"):
                return message
            return f"{key}: {message}"
        return ""
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ""
    return str(data)


def _failure_message(context: dict) -> str:
    view = context.get("view")
    request = context.get("request")
    messages = getattr(view, "failure_messages", None) or {}
    key = getattr(view, "action", None)
    if key is None and request is not None:
        key = request.method.lower()
    return messages.get(key, DEFAULT_FAILURE_MESSAGE)


def domain_exception_handler(exc: Exception, context: dict) -> Response:
    """
    DRF exception handler that also handles ``core.domain.exceptions``.

    The default DRF handler is called first.  If it recognises the
    exception, its payload is flattened into the ``error`` envelope.
    Otherwise domain exceptions are mapped through ``_STATUS_MAP``, and
    anything left is logged and returned as a 500.
    """
    # Let DRF handle its own exceptions (ValidationError, AuthN, etc.)
    response = drf_default_handler(exc, context)
    if response is not None:
        if isinstance(exc, NotAuthenticated):
            message = NO_TOKEN_MESSAGE
        else:
            message = _first_message(response.data)
        response.data = {"error": message}
        return response

    # Check domain exceptions (order matters — most specific first)
    for exc_class, status_code in _STATUS_MAP.items():
        if isinstance(exc, exc_class):
            logger.warning(
                "Domain exception [%s] in %s: %s",
                exc_class.__name__,
                context.get("view", "unknown"),
                exc,
            )
            return Response({"error": str(exc)}, status=status_code)

    logger.error(
        "Unhandled exception in %s",
        context.get("view", "unknown"),
        exc_info=exc,
    )
    return Response(
        {"error": _failure_message(context)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
