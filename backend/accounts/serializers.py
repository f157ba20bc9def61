"""
Accounts app serializers.

Contains the Request and Response serializers for the accounts API.
Request serializers only coerce types; every field is optional so that
the service layer can report missing required fields with its own
message.  **No business logic** lives here.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from core.permissions_constants import ROLE_PERMISSIONS
from core.serializers import OptionalDateField, OptionalIntegerField

from .models import Role, Staff

User = get_user_model()


# ═══════════════════════════════════════════════════════════════════
#  Authentication Serializers
# ═══════════════════════════════════════════════════════════════════


class LoginRequestSerializer(serializers.Serializer):
    """Documents the login body; the view passes raw values through."""

    username = serializers.CharField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )


class LoginUserSerializer(serializers.ModelSerializer):
    """
    The ``user`` object returned by login.

    ``permissions`` is the caller's row of the static permission table so
    the client can render navigation without a second request.
    """

    user_id = serializers.IntegerField(source="pk", read_only=True)
    role_name = serializers.CharField(source="role.name", read_only=True)
    staff_name = serializers.CharField(source="staff.name", read_only=True)
    badge_number = serializers.CharField(source="staff.badge_number", read_only=True)
    department = serializers.CharField(source="staff.department", read_only=True, allow_null=True)
    pol_rank = serializers.CharField(source="staff.pol_rank", read_only=True)
    permissions = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "user_id",
            "username",
            "role_id",
            "role_name",
            "staff_id",
            "staff_name",
            "badge_number",
            "department",
            "pol_rank",
            "permissions",
        ]

    def get_permissions(self, obj) -> list[str]:
        return list(ROLE_PERMISSIONS.get(obj.role.name, []))


class LoginResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    user = LoginUserSerializer()


# ═══════════════════════════════════════════════════════════════════
#  User Management Serializers
# ═══════════════════════════════════════════════════════════════════


class UserListSerializer(serializers.ModelSerializer):
    """Row of the user-management table (joins role and staff)."""

    user_id = serializers.IntegerField(source="pk", read_only=True)
    role_name = serializers.CharField(source="role.name", read_only=True)
    staff_name = serializers.CharField(source="staff.name", read_only=True)
    badge_number = serializers.CharField(source="staff.badge_number", read_only=True)
    is_active = serializers.BooleanField(source="staff.is_active", read_only=True)

    class Meta:
        model = User
        fields = [
            "user_id",
            "username",
            "created_at",
            "last_login",
            "role_id",
            "role_name",
            "staff_id",
            "staff_name",
            "badge_number",
            "is_active",
        ]


class UserCreateSerializer(serializers.Serializer):
    username = serializers.CharField(required=False, allow_blank=True, max_length=150)
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        write_only=True,
        style={"input_type": "password"},
    )
    role_id = OptionalIntegerField()
    staff_id = OptionalIntegerField()


class UserUpdateSerializer(serializers.Serializer):
    role_id = OptionalIntegerField()
    is_active = serializers.BooleanField(required=False, allow_null=True)


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()


class CreatedUserSerializer(MessageSerializer):
    user_id = serializers.IntegerField()


# ═══════════════════════════════════════════════════════════════════
#  Staff Serializers
# ═══════════════════════════════════════════════════════════════════


class StaffSerializer(serializers.ModelSerializer):
    staff_id = serializers.IntegerField(source="pk", read_only=True)

    class Meta:
        model = Staff
        fields = [
            "staff_id",
            "name",
            "pol_rank",
            "badge_number",
            "department",
            "contact",
            "is_active",
            "join_date",
        ]


class StaffCreateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, max_length=100)
    pol_rank = serializers.CharField(required=False, allow_blank=True, max_length=50)
    badge_number = serializers.CharField(required=False, allow_blank=True, max_length=30)
    department = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    contact = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=30)
    join_date = OptionalDateField()


class CreatedStaffSerializer(MessageSerializer):
    staff_id = serializers.IntegerField()


# ═══════════════════════════════════════════════════════════════════
#  Role Serializers
# ═══════════════════════════════════════════════════════════════════


class RoleSerializer(serializers.ModelSerializer):
    role_id = serializers.IntegerField(source="pk", read_only=True)
    role_name = serializers.CharField(source="name", read_only=True)

    class Meta:
        model = Role
        fields = ["role_id", "role_name", "description"]
