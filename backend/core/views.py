"""
Core app views — **Thin Views**.

Each view delegates to ``core.services`` and only serialises the
result.  ``ClientAppView`` serves the single-page client.
"""

from __future__ import annotations

from django.views.generic import TemplateView
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from .domain.access import ActionGate
from .permissions_constants import CRMSPerms, permission_table
from .serializers import AuditLogEntrySerializer, DashboardStatsSerializer
from .services import AuditLogQueryService, DashboardStatsService


class DashboardStatsView(APIView):
    """
    **GET /api/dashboard/stats**

    Return the four dashboard counters.

    **Authentication**: Required (``IsAuthenticated``).

    **Response** (``200 OK``):
        Serialised by ``DashboardStatsSerializer``.
    """

    permission_classes = [IsAuthenticated]
    failure_messages = {"get": "Failed to fetch statistics"}

    @extend_schema(
        summary="Dashboard statistics",
        responses={200: OpenApiResponse(response=DashboardStatsSerializer, description="Dashboard stats.")},
        tags=["Dashboard"],
    )
    def get(self, request: Request) -> Response:
        data = DashboardStatsService.get_stats()
        return Response(DashboardStatsSerializer(data).data, status=status.HTTP_200_OK)


class AuditLogView(APIView):
    """
    **GET /api/audit-logs**

    The latest 500 audit entries, newest first.  Requires
    ``view_audit_logs`` (Admin via ``all``, Superintendent).
    """

    permission_classes = [IsAuthenticated, ActionGate]
    required_permissions = {"get": CRMSPerms.VIEW_AUDIT_LOGS}
    failure_messages = {"get": "Failed to fetch audit logs"}

    @extend_schema(
        summary="Audit log",
        responses={
            200: AuditLogEntrySerializer(many=True),
            403: OpenApiResponse(description="Caller lacks view_audit_logs."),
        },
        tags=["Audit"],
    )
    def get(self, request: Request) -> Response:
        entries = AuditLogQueryService.latest_entries(request.user)
        return Response(AuditLogEntrySerializer(entries, many=True).data)


class ClientAppView(TemplateView):
    """
    Serves the browser client.

    The role → permission table is rendered into the page with
    ``json_script`` so the client filters its navigation from the same
    table the API enforces.
    """

    template_name = "core/index.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["role_permissions"] = permission_table()
        return context
