"""
core.domain.transactions — Helpers for row-locking inside atomic blocks.

Service methods that read a row, check it, and then write based on what
they read (e.g. "link this criminal only if the case has no primary
accused yet") lock the row first so two concurrent requests cannot both
pass the check.

Usage::

    from django.db import transaction
    from core.domain.transactions import lock_for_update

    with transaction.atomic():
        case = lock_for_update(Case, case_id, message="Linked case not found")
        if case.primary_accused_id is not None:
            raise Conflict("Case already has a primary accused")
        ...
"""

from __future__ import annotations

from typing import Any, TypeVar

from django.db import models

from core.domain.exceptions import DomainError, NotFound

M = TypeVar("M", bound=models.Model)


def lock_for_update(
    model_class: type[M],
    pk: Any,
    *,
    message: str | None = None,
    missing_is_validation_error: bool = False,
) -> M:
    """
    Acquire a row-level lock on the given model instance.

    Convenience wrapper around ``select_for_update().get(pk=pk)``
    that must be called inside an ``atomic()`` block.

    Args:
        model_class: The Django model class.
        pk:          Primary key value.
        message:     Error message when the row does not exist.
        missing_is_validation_error:
                     Raise ``DomainError`` (400) instead of ``NotFound``
                     (404).  Used when the id came from the request body
                     rather than the URL.

    Returns:
        The locked model instance.

    Raises:
        NotFound / DomainError: If no row with that PK exists.
    """
    try:
        return model_class.objects.select_for_update().get(pk=pk)
    except model_class.DoesNotExist:
        text = message or f"{model_class.__name__} with pk={pk} does not exist."
        if missing_is_validation_error:
            raise DomainError(text)
        raise NotFound(text)
