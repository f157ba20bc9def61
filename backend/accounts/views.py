"""
Accounts app views.

All views follow the **Thin View** pattern: coerce input via
serializers, delegate to the service layer, and return the result
wrapped in a DRF ``Response``.  **No business logic** resides here.

View Map
--------
- ``LoginView``    — POST /auth/login
- ``UserViewSet``  — /users  (list, create, update, deactivate)
- ``StaffViewSet`` — /staff  (list, create)
- ``RoleViewSet``  — /roles  (list, permissions)
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.domain.access import ActionGate
from core.permissions_constants import CRMSPerms, RoleNames

from .serializers import (
    CreatedStaffSerializer,
    CreatedUserSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
    LoginUserSerializer,
    MessageSerializer,
    RoleSerializer,
    StaffCreateSerializer,
    StaffSerializer,
    UserCreateSerializer,
    UserListSerializer,
    UserUpdateSerializer,
)
from .services import (
    AuthenticationService,
    RoleService,
    StaffService,
    UserManagementService,
)


# ═══════════════════════════════════════════════════════════════════
#  Authentication View
# ═══════════════════════════════════════════════════════════════════


class LoginView(APIView):
    """
    POST /api/auth/login

    Public endpoint.  Exchanges ``username`` + ``password`` for a bearer
    token and the caller's profile.

    Authentication classes are disabled so that a stale token sent by
    the client does not turn a login attempt into a 403.
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    failure_messages = {"post": "Login failed"}

    @extend_schema(
        summary="Log in",
        request=LoginRequestSerializer,
        responses={
            200: OpenApiResponse(response=LoginResponseSerializer, description="Token and user profile."),
            400: OpenApiResponse(description="Username or password missing."),
            401: OpenApiResponse(description="Invalid credentials."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        # A JSON array or scalar body carries no credentials
        body = request.data if isinstance(request.data, dict) else {}
        token, user = AuthenticationService.login(
            body.get("username"),
            body.get("password"),
        )
        return Response(
            {"token": token, "user": LoginUserSerializer(user).data},
            status=status.HTTP_200_OK,
        )


# ═══════════════════════════════════════════════════════════════════
#  User Management ViewSet
# ═══════════════════════════════════════════════════════════════════


class UserViewSet(viewsets.ViewSet):
    """
    /api/users

    Administrative user management.  Every action requires the
    ``manage_users`` permission, enforced by ``UserManagementService``.
    ``DELETE`` deactivates the linked staff member; no row is removed.
    """

    permission_classes = [IsAuthenticated, ActionGate]
    required_permissions = {
        "list": CRMSPerms.MANAGE_USERS,
        "create": CRMSPerms.MANAGE_USERS,
        "update": CRMSPerms.MANAGE_USERS,
        "destroy": CRMSPerms.MANAGE_USERS,
    }
    lookup_value_regex = r"\d+"
    failure_messages = {
        "list": "Failed to fetch users",
        "create": "Failed to create user",
        "update": "Failed to update user",
        "destroy": "Failed to deactivate user",
    }

    @extend_schema(
        summary="List users",
        responses={200: UserListSerializer(many=True)},
        tags=["Users"],
    )
    def list(self, request: Request) -> Response:
        users = UserManagementService.list_users(request.user)
        return Response(UserListSerializer(users, many=True).data)

    @extend_schema(
        summary="Create a user",
        request=UserCreateSerializer,
        responses={
            201: CreatedUserSerializer,
            400: OpenApiResponse(description="Missing field, duplicate username, unknown role or staff."),
            403: OpenApiResponse(description="Caller lacks manage_users."),
        },
        tags=["Users"],
    )
    def create(self, request: Request) -> Response:
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserManagementService.create_user(serializer.validated_data, request.user)
        return Response(
            {"message": "User created successfully", "user_id": user.pk},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        summary="Change a user's role and/or active flag",
        request=UserUpdateSerializer,
        responses={
            200: MessageSerializer,
            400: OpenApiResponse(description="No valid fields, or unknown role."),
            404: OpenApiResponse(description="User not found."),
        },
        tags=["Users"],
    )
    def update(self, request: Request, pk: str = None) -> Response:
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        UserManagementService.update_user(int(pk), serializer.validated_data, request.user)
        return Response({"message": "User updated successfully"})

    @extend_schema(
        summary="Deactivate a user",
        responses={200: MessageSerializer, 404: OpenApiResponse(description="User not found.")},
        tags=["Users"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        UserManagementService.deactivate_user(int(pk), request.user)
        return Response({"message": "User deactivated successfully"})


# ═══════════════════════════════════════════════════════════════════
#  Staff ViewSet
# ═══════════════════════════════════════════════════════════════════


class StaffViewSet(viewsets.ViewSet):
    """
    /api/staff

    Any authenticated user may list staff; only Admin and
    Superintendent may add staff members.
    """

    permission_classes = [IsAuthenticated, ActionGate]
    required_roles = {"create": (RoleNames.ADMIN, RoleNames.SUPERINTENDENT)}
    failure_messages = {
        "list": "Failed to fetch staff",
        "create": "Failed to create police staff",
    }

    @extend_schema(
        summary="List police staff",
        responses={200: StaffSerializer(many=True)},
        tags=["Staff"],
    )
    def list(self, request: Request) -> Response:
        return Response(StaffSerializer(StaffService.list_staff(), many=True).data)

    @extend_schema(
        summary="Add a staff member",
        request=StaffCreateSerializer,
        responses={
            201: CreatedStaffSerializer,
            400: OpenApiResponse(description="Missing field or duplicate badge number."),
            403: OpenApiResponse(description="Caller is not Admin or Superintendent."),
        },
        tags=["Staff"],
    )
    def create(self, request: Request) -> Response:
        serializer = StaffCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        staff = StaffService.create_staff(serializer.validated_data, request.user)
        return Response(
            {"message": "Police staff created successfully", "staff_id": staff.pk},
            status=status.HTTP_201_CREATED,
        )


# ═══════════════════════════════════════════════════════════════════
#  Role ViewSet
# ═══════════════════════════════════════════════════════════════════


class RoleViewSet(viewsets.ViewSet):
    """
    /api/roles

    Read-only.  The four roles are fixed; ``/roles/permissions``
    publishes the static role → permission table the client uses to
    filter its navigation.
    """

    permission_classes = [IsAuthenticated]
    failure_messages = {
        "list": "Failed to fetch roles",
        "permission_table": "Failed to fetch role permissions",
    }

    @extend_schema(
        summary="List roles",
        responses={200: RoleSerializer(many=True)},
        tags=["Roles"],
    )
    def list(self, request: Request) -> Response:
        return Response(RoleSerializer(RoleService.list_roles(), many=True).data)

    @extend_schema(
        summary="Role → permission table",
        responses={200: OpenApiResponse(description="Mapping of role name to display name and permissions.")},
        tags=["Roles"],
    )
    @action(detail=False, methods=["get"], url_path="permissions")
    def permission_table(self, request: Request) -> Response:
        return Response(RoleService.permission_table())
