"""
Accounts Service Layer.

This module is the **single source of truth** for all business logic
within the ``accounts`` app.  Views must remain *thin*: they read the
request body, call a service method, and return the result wrapped in
a DRF ``Response``.

Architecture
------------
- ``AuthenticationService``  — username/password login + token issuance.
- ``UserManagementService``  — list, create, update, deactivate users.
- ``StaffService``           — police staff roster.
- ``RoleService``            — role listing and the static permission table.

Every mutating method records an audit entry through
``core.audit.AuditRecorder`` once its own write has succeeded.
"""

from __future__ import annotations

import logging
from typing import Any

from django.contrib.auth import authenticate as django_authenticate
from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login
from django.db import IntegrityError, transaction
from django.db.models import F, QuerySet
from rest_framework_simplejwt.tokens import AccessToken

from core.audit import AuditRecorder, AuditTables
from core.domain.access import require_permission, require_role
from core.domain.exceptions import AuthenticationFailed, Conflict, DomainError
from core.domain.inputs import is_blank, require_fields
from core.domain.transactions import lock_for_update
from core.models import AuditAction
from core.permissions_constants import CRMSPerms, RoleNames
from core.permissions_constants import permission_table as build_permission_table

from .models import Role, Staff

User = get_user_model()
logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Authentication Service
# ═══════════════════════════════════════════════════════════════════


class AuthenticationService:
    """
    Handles username/password login and bearer-token generation.
    """

    @staticmethod
    def authenticate(username: Any, password: Any) -> User:
        """
        Validate credentials and return the user.

        Parameters
        ----------
        username : str
        password : str

        Returns
        -------
        User
            The authenticated user, with ``role`` and ``staff`` loaded.

        Raises
        ------
        DomainError
            If either field is missing.
        AuthenticationFailed
            If the username is unknown, the password is wrong, or the
            linked staff member is inactive.  The three cases share one
            message.
        """
        if is_blank(username) or is_blank(password):
            raise DomainError("Username and password are required")

        user = django_authenticate(username=str(username), password=str(password))
        if user is None:
            logger.warning("Failed login attempt for username %r", username)
            raise AuthenticationFailed("Invalid credentials")
        return user

    @staticmethod
    def issue_token(user: User) -> str:
        """
        Issue a signed access token for ``user``.

        The token carries ``user_id``, ``username`` and ``role_id`` and
        expires after ``SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]`` (8 hours
        unless overridden).
        """
        token = AccessToken.for_user(user)
        token["username"] = user.username
        token["role_id"] = user.role_id
        return str(token)

    @staticmethod
    def login(username: Any, password: Any) -> tuple[str, User]:
        """
        Full login flow: authenticate, stamp ``last_login``, issue a
        token and record a ``LOGIN`` audit entry.

        Returns
        -------
        tuple[str, User]
            The encoded token and the authenticated user.
        """
        user = AuthenticationService.authenticate(username, password)
        update_last_login(None, user)
        token = AuthenticationService.issue_token(user)
        AuditRecorder.record(user, AuditAction.LOGIN, AuditTables.USERS, user.pk)
        logger.info("User %s logged in (role=%s)", user.username, user.role.name)
        return token, user


# ═══════════════════════════════════════════════════════════════════
#  User Management Service
# ═══════════════════════════════════════════════════════════════════


class UserManagementService:
    """
    Administrative operations on login accounts.

    Every method requires the ``manage_users`` permission.  Users are
    never deleted: deactivation flips the linked staff member's
    ``is_active`` flag, which blocks future logins.
    """

    @staticmethod
    def list_users(performed_by: User) -> QuerySet[User]:
        """Return all users, newest first, with role and staff joined."""
        require_permission(performed_by, CRMSPerms.MANAGE_USERS)
        return User.objects.select_related("role", "staff").order_by("-created_at", "-pk")

    @staticmethod
    def create_user(data: dict[str, Any], performed_by: User) -> User:
        """
        Create a login account for an existing staff member.

        Parameters
        ----------
        data : dict
            ``username``, ``password``, ``role_id``, ``staff_id``.
        performed_by : User

        Raises
        ------
        DomainError
            Missing fields, unknown role or staff id.
        Conflict
            Username taken, or the staff member already has an account.
        """
        require_permission(performed_by, CRMSPerms.MANAGE_USERS)

        require_fields(
            data,
            ("username", "password", "role_id", "staff_id"),
            "Username, password, role and staff are required",
        )
        username = data["username"]

        if User.objects.filter(username=username).exists():
            raise Conflict("Username already exists")

        try:
            role = Role.objects.get(pk=data["role_id"])
        except Role.DoesNotExist:
            raise DomainError("Role not found")
        try:
            staff = Staff.objects.get(pk=data["staff_id"])
        except Staff.DoesNotExist:
            raise DomainError("Staff member not found")
        if User.objects.filter(staff=staff).exists():
            raise Conflict("Staff member already has a user account")

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=str(username),
                    password=str(data["password"]),
                    role=role,
                    staff=staff,
                )
        except IntegrityError:
            raise Conflict("Username already exists")

        AuditRecorder.record(performed_by, AuditAction.CREATE, AuditTables.USERS, user.pk)
        logger.info("User %s created by %s", user.username, performed_by.username)
        return user

    @staticmethod
    def update_user(user_id: int, data: dict[str, Any], performed_by: User) -> User:
        """
        Change a user's role and/or the linked staff member's active
        flag.  Both writes happen in one transaction.

        Raises
        ------
        NotFound
            Unknown user id.
        DomainError
            Neither field supplied, or unknown role id.
        """
        require_permission(performed_by, CRMSPerms.MANAGE_USERS)

        has_role = "role_id" in data and data["role_id"] not in (None, "")
        has_active = "is_active" in data and data["is_active"] is not None
        if not has_role and not has_active:
            raise DomainError("No valid fields to update")

        with transaction.atomic():
            user = lock_for_update(User, user_id, message="User not found")
            if has_role:
                try:
                    user.role = Role.objects.get(pk=data["role_id"])
                except Role.DoesNotExist:
                    raise DomainError("Role not found")
                user.save(update_fields=["role"])
            if has_active:
                staff = lock_for_update(Staff, user.staff_id)
                staff.is_active = bool(data["is_active"])
                staff.save(update_fields=["is_active"])
                user.staff = staff

        AuditRecorder.record(performed_by, AuditAction.UPDATE, AuditTables.USERS, user.pk)
        return user

    @staticmethod
    def deactivate_user(user_id: int, performed_by: User) -> User:
        """
        Deactivate the staff member linked to ``user_id``.  The user row
        itself is kept.
        """
        require_permission(performed_by, CRMSPerms.MANAGE_USERS)

        with transaction.atomic():
            user = lock_for_update(User, user_id, message="User not found")
            Staff.objects.filter(pk=user.staff_id).update(is_active=False)

        AuditRecorder.record(performed_by, AuditAction.DEACTIVATE, AuditTables.USERS, user.pk)
        logger.info("User %s deactivated by %s", user.username, performed_by.username)
        user.staff.refresh_from_db(fields=["is_active"])
        return user


# ═══════════════════════════════════════════════════════════════════
#  Staff Service
# ═══════════════════════════════════════════════════════════════════


class StaffService:
    """Police staff roster."""

    @staticmethod
    def list_staff() -> QuerySet[Staff]:
        # Staff without a join date sort after everyone else
        return Staff.objects.order_by(F("join_date").desc(nulls_last=True), "-pk")

    @staticmethod
    def create_staff(data: dict[str, Any], performed_by: User) -> Staff:
        """
        Add a staff member.  Restricted to the Admin and Superintendent
        roles.

        Raises
        ------
        DomainError
            Name, rank or badge number missing.
        Conflict
            Badge number already in use (active or inactive staff).
        """
        require_role(performed_by, RoleNames.ADMIN, RoleNames.SUPERINTENDENT)

        require_fields(
            data,
            ("name", "pol_rank", "badge_number"),
            "Name, rank, and badge number are required",
        )
        badge_number = data["badge_number"]

        if Staff.objects.filter(badge_number=badge_number).exists():
            raise Conflict("Badge number already exists")

        try:
            with transaction.atomic():
                staff = Staff.objects.create(
                    name=data["name"],
                    pol_rank=data["pol_rank"],
                    badge_number=badge_number,
                    contact=data.get("contact") or None,
                    department=data.get("department") or None,
                    join_date=data.get("join_date") or None,
                    is_active=True,
                )
        except IntegrityError:
            raise Conflict("Badge number already exists")

        AuditRecorder.record(performed_by, AuditAction.CREATE, AuditTables.STAFF, staff.pk)
        return staff


# ═══════════════════════════════════════════════════════════════════
#  Role Service
# ═══════════════════════════════════════════════════════════════════


class RoleService:

    @staticmethod
    def list_roles() -> QuerySet[Role]:
        return Role.objects.order_by("name")

    @staticmethod
    def permission_table() -> dict[str, dict[str, Any]]:
        return build_permission_table()
