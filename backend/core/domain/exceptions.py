"""
core.domain.exceptions — Domain-specific exception hierarchy.

These exceptions represent business-rule violations inside service layers.
They are deliberately **not** DRF exceptions so that the domain layer stays
framework-agnostic.  The global DRF exception handler
(``core.domain.exception_handler``) maps them to HTTP responses whose body
is always ``{"error": "<message>"}``.

Mapping cheatsheet
------------------
┌───────────────────────┬──────────────────────────────────┬──────┐
│ Domain Exception      │ Meaning                          │ Code │
├───────────────────────┼──────────────────────────────────┼──────┤
│ DomainError           │ missing / malformed input        │ 400  │
│ Conflict              │ duplicate unique key, taken slot │ 400  │
│ AuthenticationFailed  │ bad login credentials            │ 401  │
│ PermissionDenied      │ role or permission mismatch      │ 403  │
│ NotFound              │ unknown resource id              │ 404  │
└───────────────────────┴──────────────────────────────────┴──────┘

Recommended usage inside a service::

    from core.domain.exceptions import Conflict

    if Staff.objects.filter(badge_number=badge).exists():
        raise Conflict("Badge number already exists")
"""

from __future__ import annotations


class DomainError(Exception):
    """
    Base class for all domain / business-rule errors.

    Catch this at the view boundary and convert to a 400 Bad Request.
    """

    def __init__(self, message: str = "A business rule was violated.") -> None:
        self.message = message
        super().__init__(self.message)


class Conflict(DomainError):
    """
    The operation conflicts with data already stored.

    Typical usage: duplicate FIR number, badge number or username, a case
    that already has a primary accused or an investigation.  The API
    reports these as validation failures, so this maps to HTTP 400.
    """

    def __init__(self, message: str = "The operation conflicts with the current state.") -> None:
        super().__init__(message)


class AuthenticationFailed(DomainError):
    """
    Login credentials were rejected.

    The message is intentionally generic so that an unknown username and
    a wrong password are indistinguishable.  Maps to HTTP 401.
    """

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class PermissionDenied(DomainError):
    """
    The authenticated user does not have the required role or permission
    for this operation.

    Maps to HTTP 403.
    """

    def __init__(self, message: str = "Access denied. Insufficient permissions.") -> None:
        super().__init__(message)


class NotFound(DomainError):
    """
    The requested resource does not exist.

    Maps to HTTP 404.
    """

    def __init__(self, message: str = "The requested resource was not found.") -> None:
        super().__init__(message)
