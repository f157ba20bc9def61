"""
Investigations app views.

- ``InvestigationViewSet`` — list, create, update.
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
    CreatedInvestigationSerializer,
    InvestigationSerializer,
    InvestigationWriteSerializer,
)
from .services import InvestigationService


class InvestigationViewSet(viewsets.ViewSet):
    """/api/investigations"""

    permission_classes = [IsAuthenticated, ActionGate]
    required_permissions = {
        "create": CRMSPerms.CREATE_INVESTIGATION,
        "update": CRMSPerms.EDIT_INVESTIGATION,
    }
    lookup_value_regex = r"\d+"
    failure_messages = {
        "list": "Failed to fetch investigations",
        "create": "Failed to create investigation",
        "update": "Failed to update investigation",
    }

    @extend_schema(
        summary="List investigations",
        description="Most recently updated first, joined with FIR number, crime and officer.",
        responses={200: InvestigationSerializer(many=True)},
        tags=["Investigations"],
    )
    def list(self, request: Request) -> Response:
        investigations = InvestigationService.list_investigations()
        return Response(InvestigationSerializer(investigations, many=True).data)

    @extend_schema(
        summary="Open an investigation",
        request=InvestigationWriteSerializer,
        responses={
            201: CreatedInvestigationSerializer,
            400: OpenApiResponse(description="Missing ids, unknown case, inactive officer, or duplicate investigation."),
            403: OpenApiResponse(description="Caller lacks create_investigation."),
        },
        tags=["Investigations"],
    )
    def create(self, request: Request) -> Response:
        serializer = InvestigationWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        investigation = InvestigationService.create_investigation(
            serializer.validated_data, request.user,
        )
        return Response(
            {"message": "Investigation created successfully", "investigation_id": investigation.pk},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        summary="Update an investigation",
        request=InvestigationWriteSerializer,
        responses={
            200: OpenApiResponse(description="Investigation updated successfully."),
            400: OpenApiResponse(description="Inactive officer or invalid status."),
            403: OpenApiResponse(description="Caller lacks edit_investigation."),
            404: OpenApiResponse(description="Investigation not found."),
        },
        tags=["Investigations"],
    )
    def update(self, request: Request, pk: str = None) -> Response:
        serializer = InvestigationWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        InvestigationService.update_investigation(int(pk), serializer.validated_data, request.user)
        return Response({"message": "Investigation updated successfully"})
