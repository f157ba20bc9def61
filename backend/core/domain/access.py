"""
core.domain.access — Role and permission gates shared by every service.

╔══════════════════════════════════════════════════════════════════╗
║  IMPORTANT — the caller's role is re-read from the database on ║
║  every check.  The bearer token only carries the role id, so a ║
║  role change takes effect on the very next request.            ║
║  This module provides:                                         ║
║    1) ``get_user_role_name`` — current role name lookup.       ║
║    2) ``require_permission`` — static permission-table gate.   ║
║    3) ``require_role``       — role allow-list gate.           ║
║    4) ``ActionGate``         — DRF permission running 2) and 3)║
║       before a view validates its request body.                ║
╚══════════════════════════════════════════════════════════════════╝

Architecture overview
---------------------

    ┌─────────┐      ┌────────────────┐      ┌──────────────────┐
    │  View   │─────▶│  App service   │─────▶│ core.domain      │
    │ (thin)  │      │ (owns logic)   │      │   .access        │
    └─────────┘      └────────────────┘      │ (shared gates)   │
                                             └──────────────────┘

Usage in an app's service layer::

    from core.domain.access import require_permission
    from core.permissions_constants import CRMSPerms

    class CaseService:
        @staticmethod
        def update_case(case_id, data, performed_by):
            require_permission(performed_by, CRMSPerms.EDIT_CASE)
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework.permissions import BasePermission

from core.domain.exceptions import PermissionDenied
from core.permissions_constants import role_has_permission

if TYPE_CHECKING:
    from accounts.models import User


def get_user_role_name(user: User) -> str | None:
    """
    Return the caller's current role name, or ``None`` if the user row
    (or its role) no longer exists.

    Always hits the database; never trusts ``user.role`` loaded earlier
    in the request.
    """
    from accounts.models import Role

    return (
        Role.objects
        .filter(users__pk=user.pk)
        .values_list("name", flat=True)
        .first()
    )


def require_permission(user: User, permission: str) -> str:
    """
    Guard that raises ``PermissionDenied`` unless the caller's role
    holds ``permission`` (or the ``all`` wildcard).

    Args:
        user:       Authenticated user.
        permission: One permission string from ``CRMSPerms``.

    Returns:
        The caller's role name, for services that want to log it.

    Raises:
        core.domain.exceptions.PermissionDenied: If the user has no role
            or the role lacks the permission.

    Example::

        require_permission(user, CRMSPerms.CREATE_FIR)
    """
    role_name = get_user_role_name(user)
    if role_name is None:
        raise PermissionDenied("User not found")

    if not role_has_permission(role_name, permission):
        raise PermissionDenied(
            f"Access denied. {role_name} role does not have permission: {permission}"
        )
    return role_name


def require_role(user: User, *allowed_roles: str) -> str:
    """
    Guard that raises ``PermissionDenied`` if the caller's current role
    is not among ``allowed_roles``.

    Returns:
        The caller's role name.
    """
    role_name = get_user_role_name(user)
    if role_name is None or role_name not in allowed_roles:
        raise PermissionDenied("Access denied. Insufficient permissions.")
    return role_name


class ActionGate(BasePermission):
    """
    DRF permission that runs the gates above before the view body.

    A view declares its gates per action (ViewSets) or per lowercase
    HTTP method (APIViews)::

        permission_classes = [IsAuthenticated, ActionGate]
        required_permissions = {"create": CRMSPerms.CREATE_FIR}
        required_roles = {"create": (RoleNames.ADMIN, RoleNames.SUPERINTENDENT)}

    Denials raise ``PermissionDenied`` so the caller gets the same 403
    message the service layer would produce, before the request body is
    validated.  List ``IsAuthenticated`` first so that anonymous callers
    still get a 401.
    """

    def has_permission(self, request, view) -> bool:
        key = getattr(view, "action", None) or request.method.lower()
        permission = getattr(view, "required_permissions", {}).get(key)
        if permission:
            require_permission(request.user, permission)
        roles = getattr(view, "required_roles", {}).get(key)
        if roles:
            require_role(request.user, *roles)
        return True
