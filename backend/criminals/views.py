"""
Criminals app views.

- ``CriminalViewSet`` — list, create, update (wanted flag only).
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from core.domain.access import ActionGate
from core.permissions_constants import CRMSPerms

from .serializers import (
    CreatedCriminalSerializer,
    CriminalCreateSerializer,
    CriminalSerializer,
    CriminalWantedSerializer,
)
from .services import CriminalService


class CriminalViewSet(viewsets.ViewSet):
    """
    /api/criminals

    Records are never deleted.  ``create_criminal`` / ``edit_criminal``
    are checked inside ``CriminalService``.
    """

    permission_classes = [IsAuthenticated, ActionGate]
    required_permissions = {
        "create": CRMSPerms.CREATE_CRIMINAL,
        "update": CRMSPerms.EDIT_CRIMINAL,
    }
    lookup_value_regex = r"\d+"
    failure_messages = {
        "list": "Failed to fetch criminals",
        "create": "Failed to create criminal record",
        "update": "Failed to update criminal wanted status",
    }

    @extend_schema(
        summary="List criminal records",
        description="Newest record first.",
        responses={200: CriminalSerializer(many=True)},
        tags=["Criminals"],
    )
    def list(self, request: Request) -> Response:
        criminals = CriminalService.list_criminals()
        return Response(CriminalSerializer(criminals, many=True).data)

    @extend_schema(
        summary="Create a criminal record",
        request=CriminalCreateSerializer,
        responses={
            201: CreatedCriminalSerializer,
            400: OpenApiResponse(description="Missing name/gender, or the linked case is unknown or already has a primary accused."),
            403: OpenApiResponse(description="Caller lacks create_criminal."),
        },
        tags=["Criminals"],
    )
    def create(self, request: Request) -> Response:
        """
        POST /api/criminals

        With ``linked_case_id`` the new record becomes that case's
        primary accused.
        """
        serializer = CriminalCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        criminal = CriminalService.create_criminal(serializer.validated_data, request.user)
        return Response(
            {"message": "Criminal record created successfully", "criminal_id": criminal.pk},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        summary="Set or clear the wanted flag",
        request=CriminalWantedSerializer,
        responses={
            200: OpenApiResponse(description="Criminal wanted status updated successfully."),
            403: OpenApiResponse(description="Caller lacks edit_criminal."),
            404: OpenApiResponse(description="Criminal not found."),
        },
        tags=["Criminals"],
    )
    def update(self, request: Request, pk: str = None) -> Response:
        serializer = CriminalWantedSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        CriminalService.set_wanted(int(pk), serializer.validated_data, request.user)
        return Response({"message": "Criminal wanted status updated successfully"})
