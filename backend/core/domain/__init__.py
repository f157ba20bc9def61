"""
core.domain — Shared domain utilities for cross-app service layers.

Modules
-------
exceptions         Domain-specific exceptions that map cleanly to HTTP responses.
exception_handler  DRF handler rendering every error as ``{"error": ...}``.
transactions       ``select_for_update`` helper for check-then-write sequences.
access             Role allow-list and permission-table gates.
inputs             Required-field checks with per-resource messages.

Usage from any app::

    from core.domain.exceptions import Conflict, NotFound
    from core.domain.transactions import lock_for_update
    from core.domain.access import require_permission, require_role
"""
