"""
core.domain.inputs — Required-field checks shared by the service layers.

Serializers in each app handle *typing* (dates, integers, decimals) with
every field optional; the services then enforce which fields are
required and report them with one resource-specific message, e.g.::

    require_fields(data, ("name", "gender"), "Name and gender are required")
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from core.domain.exceptions import DomainError


def is_blank(value: Any) -> bool:
    """True for missing, empty, ``False`` or zero inputs."""
    return value is None or value == "" or value is False or value == 0


def require_fields(data: Mapping[str, Any], fields: Iterable[str], message: str) -> None:
    """Raise ``DomainError(message)`` if any of ``fields`` is blank."""
    if any(is_blank(data.get(field)) for field in fields):
        raise DomainError(message)
