"""
Cases app views.

Architecture: views are intentionally thin.  Every view follows the
three-step pattern:

    1. Parse / coerce input via a serializer.
    2. Delegate all business logic to the appropriate service class.
    3. Serialize the result and return a DRF ``Response``.

Views
-----
- ``CaseViewSet``          — list, active, retrieve, update.
- ``CrimeCategoryViewSet`` — list.
- ``FIRRegistrationView``  — POST /fir (opens a case).
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.domain.access import ActionGate
from core.permissions_constants import CRMSPerms

from .serializers import (
    ActiveCaseSerializer,
    CaseFilterSerializer,
    CaseSerializer,
    CaseUpdateSerializer,
    CreatedCaseSerializer,
    CrimeCategorySerializer,
    FIRCreateSerializer,
)
from .services import (
    CaseQueryService,
    CaseUpdateService,
    CrimeCategoryService,
    FIRRegistrationService,
)


class CaseViewSet(viewsets.ViewSet):
    """
    /api/cases

    Uses ``viewsets.ViewSet`` (not ``ModelViewSet``) so every action is
    explicitly defined.  There is no create or delete here: cases are
    opened through ``POST /api/fir`` and never removed.

    Permission Strategy
    -------------------
    The base permission is ``IsAuthenticated``.  The ``edit_case`` check
    for updates is enforced inside ``CaseUpdateService``.
    """

    permission_classes = [IsAuthenticated, ActionGate]
    required_permissions = {"update": CRMSPerms.EDIT_CASE}
    lookup_value_regex = r"\d+"
    failure_messages = {
        "list": "Failed to fetch cases",
        "active": "Failed to fetch active cases",
        "retrieve": "Failed to fetch case",
        "update": "Failed to update case",
    }

    @extend_schema(
        summary="List cases",
        parameters=[
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Substring of FIR number, city or crime name."),
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="Exact case status."),
        ],
        responses={200: CaseSerializer(many=True)},
        tags=["Cases"],
    )
    def list(self, request: Request) -> Response:
        """
        GET /api/cases

        Newest ``date_reported`` first.
        """
        filter_serializer = CaseFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        qs = CaseQueryService.list_cases(filter_serializer.validated_data)
        return Response(CaseSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="List active cases",
        description="Cases whose status is Open or Under Investigation, with a primary-accused flag.",
        responses={200: ActiveCaseSerializer(many=True)},
        tags=["Cases"],
    )
    @action(detail=False, methods=["get"], url_path="active")
    def active(self, request: Request) -> Response:
        rows = CaseQueryService.active_cases()
        return Response(ActiveCaseSerializer(rows, many=True).data)

    @extend_schema(
        summary="Retrieve a case",
        responses={
            200: CaseSerializer,
            404: OpenApiResponse(description="Case not found."),
        },
        tags=["Cases"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        case = CaseQueryService.get_case(int(pk))
        return Response(CaseSerializer(case).data)

    @extend_schema(
        summary="Update case status and/or description",
        request=CaseUpdateSerializer,
        responses={
            200: OpenApiResponse(description="Case updated successfully."),
            400: OpenApiResponse(description="Invalid status, or no valid fields."),
            403: OpenApiResponse(description="Caller lacks edit_case."),
            404: OpenApiResponse(description="Case not found."),
        },
        tags=["Cases"],
    )
    def update(self, request: Request, pk: str = None) -> Response:
        """
        PUT /api/cases/{id}

        Only ``status`` and ``description`` are writable; any other key
        in the body is ignored.
        """
        serializer = CaseUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        CaseUpdateService.update_case(int(pk), serializer.validated_data, request.user)
        return Response({"message": "Case updated successfully"})


class CrimeCategoryViewSet(viewsets.ViewSet):
    """/api/crime-categories — ordered by crime name."""

    permission_classes = [IsAuthenticated]
    failure_messages = {"list": "Failed to fetch crime categories"}

    @extend_schema(
        summary="List crime categories",
        responses={200: CrimeCategorySerializer(many=True)},
        tags=["Cases"],
    )
    def list(self, request: Request) -> Response:
        categories = CrimeCategoryService.list_categories()
        return Response(CrimeCategorySerializer(categories, many=True).data)


class FIRRegistrationView(APIView):
    """
    POST /api/fir

    Registers a First Information Report and opens its case (status
    ``Open``) in a single transaction.  Requires ``create_fir``.
    """

    permission_classes = [IsAuthenticated, ActionGate]
    required_permissions = {"post": CRMSPerms.CREATE_FIR}
    failure_messages = {"post": "Failed to register FIR"}

    @extend_schema(
        summary="Register an FIR",
        request=FIRCreateSerializer,
        responses={
            201: CreatedCaseSerializer,
            400: OpenApiResponse(description="Missing fields, duplicate FIR number, or unknown crime category."),
            403: OpenApiResponse(description="Caller lacks create_fir."),
        },
        tags=["Cases"],
    )
    def post(self, request: Request) -> Response:
        serializer = FIRCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        case = FIRRegistrationService.register(serializer.validated_data, request.user)
        return Response(
            {"message": "FIR registered successfully", "case_id": case.pk},
            status=status.HTTP_201_CREATED,
        )
