"""
Cases app service layer.

All business logic for cases, crime categories and FIR registration
lives here.  Views call these services and never touch the ORM
directly.

Permission matrix (``core.permissions_constants``)
--------------------------------------------------
  - list / retrieve / active cases   → any authenticated user
  - update case (status/description) → ``edit_case``
  - register FIR                     → ``create_fir``
  - crime categories                 → any authenticated user

Atomicity
---------
FIR registration writes a ``Case`` and its ``FIR`` in one transaction:
a failure on the second insert must not leave an orphan case behind.
The audit entry is written after the transaction commits.
"""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING, Any

from django.db import IntegrityError, transaction
from django.db.models import Case as SQLCase
from django.db.models import CharField, Q, QuerySet, Value, When
from django.utils import timezone

from core.audit import AuditRecorder, AuditTables
from core.domain.access import require_permission
from core.domain.exceptions import Conflict, DomainError, NotFound
from core.domain.inputs import require_fields
from core.models import AuditAction
from core.permissions_constants import CRMSPerms

from .models import ACTIVE_CASE_STATUSES, FIR, Case, CaseStatus, CrimeCategory

if TYPE_CHECKING:
    from accounts.models import User

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Case Query Service
# ═══════════════════════════════════════════════════════════════════


class CaseQueryService:
    """
    Read-side queries for cases.  Any authenticated user may read.
    """

    @staticmethod
    def _base_queryset() -> QuerySet[Case]:
        return Case.objects.select_related("crime_type", "primary_accused")

    @staticmethod
    def list_cases(filters: dict[str, Any]) -> QuerySet[Case]:
        """
        Return cases, newest ``date_reported`` first.

        Parameters
        ----------
        filters : dict
            - ``search`` : substring matched against FIR number, city and
              crime name.
            - ``status`` : exact status value.
        """
        qs = CaseQueryService._base_queryset()

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(fir_number__icontains=search)
                | Q(city__icontains=search)
                | Q(crime_type__crime_name__icontains=search)
            )

        status = filters.get("status")
        if status:
            qs = qs.filter(status=status)

        return qs.order_by("-date_reported", "-pk")

    @staticmethod
    def active_cases() -> QuerySet:
        """
        Return the short list of Open / Under Investigation cases used by
        the client's "link to case" pickers.

        Each row is a dict with ``accused_status`` telling whether a
        primary accused is already set.
        """
        return (
            Case.objects
            .filter(status__in=ACTIVE_CASE_STATUSES)
            .annotate(
                accused_status=SQLCase(
                    When(primary_accused__isnull=False, then=Value("Has Primary Accused")),
                    default=Value("No Primary Accused"),
                    output_field=CharField(),
                ),
            )
            .order_by("-date_reported", "-pk")
            .values(
                "pk",
                "fir_number",
                "crime_type__crime_name",
                "city",
                "district",
                "date_reported",
                "accused_status",
            )
        )

    @staticmethod
    def get_case(case_id: int) -> Case:
        try:
            return CaseQueryService._base_queryset().get(pk=case_id)
        except Case.DoesNotExist:
            raise NotFound("Case not found")


# ═══════════════════════════════════════════════════════════════════
#  Case Update Service
# ═══════════════════════════════════════════════════════════════════


class CaseUpdateService:

    @staticmethod
    def update_case(case_id: int, data: dict[str, Any], performed_by: User) -> Case:
        """
        Update a case's ``status`` and/or ``description``.

        Any of the four statuses may be set at any time; no transition
        order is enforced.  ``description`` is applied whenever the key
        is present, even if empty.

        Raises
        ------
        PermissionDenied
            Caller lacks ``edit_case``.
        DomainError
            Unknown status value, or neither field supplied.
        NotFound
            Unknown case id.
        """
        require_permission(performed_by, CRMSPerms.EDIT_CASE)

        new_status = data.get("status")
        if new_status and new_status not in CaseStatus.values:
            raise DomainError("Invalid status value")

        try:
            case = Case.objects.get(pk=case_id)
        except Case.DoesNotExist:
            raise NotFound("Case not found")

        update_fields = []
        if new_status:
            case.status = new_status
            update_fields.append("status")
        if "description" in data:
            case.description = data["description"]
            update_fields.append("description")

        if not update_fields:
            raise DomainError("No valid fields to update")

        case.save(update_fields=update_fields)
        AuditRecorder.record(performed_by, AuditAction.UPDATE, AuditTables.CASES, case.pk)
        return case


# ═══════════════════════════════════════════════════════════════════
#  Crime Category Service
# ═══════════════════════════════════════════════════════════════════


class CrimeCategoryService:

    @staticmethod
    def list_categories() -> QuerySet[CrimeCategory]:
        return CrimeCategory.objects.order_by("crime_name")


# ═══════════════════════════════════════════════════════════════════
#  FIR Registration Service
# ═══════════════════════════════════════════════════════════════════


class FIRRegistrationService:
    """
    Opens a new case from a First Information Report.
    """

    #: Fields that must be present and non-empty.
    REQUIRED_FIELDS = ("FIR_number", "complainant_name", "crime_type_id", "date_reported")

    @staticmethod
    def register(data: dict[str, Any], performed_by: User) -> Case:
        """
        Register an FIR and open its case.

        Parameters
        ----------
        data : dict
            Validated request body.  FIR fields: ``FIR_number``,
            ``complainant_name``, ``complainant_contact``,
            ``complainant_address``, ``place_of_offence``,
            ``police_station``, ``date_filed``.  Case fields:
            ``crime_type_id``, ``city``, ``district``,
            ``police_station_code``, ``latitude``, ``longitude``,
            ``description``, ``date_reported``.
        performed_by : User

        Returns
        -------
        Case
            The new case, status ``Open``, with its ``fir`` attached.

        Raises
        ------
        PermissionDenied
            Caller lacks ``create_fir``.
        DomainError
            A required field is missing, or the crime category is unknown.
        Conflict
            The FIR number is already used by a case or an FIR.
        """
        require_permission(performed_by, CRMSPerms.CREATE_FIR)
        require_fields(
            data,
            FIRRegistrationService.REQUIRED_FIELDS,
            "Missing required FIR or case fields",
        )

        fir_number = data["FIR_number"]
        if (
            Case.objects.filter(fir_number=fir_number).exists()
            or FIR.objects.filter(fir_number=fir_number).exists()
        ):
            raise Conflict("FIR number already exists")

        try:
            crime_type = CrimeCategory.objects.get(pk=data["crime_type_id"])
        except CrimeCategory.DoesNotExist:
            raise DomainError("Crime category not found")

        try:
            with transaction.atomic():
                case = Case.objects.create(
                    fir_number=fir_number,
                    crime_type=crime_type,
                    primary_accused=None,
                    city=data.get("city") or None,
                    district=data.get("district") or None,
                    police_station_code=data.get("police_station_code") or None,
                    latitude=data.get("latitude"),
                    longitude=data.get("longitude"),
                    description=data.get("description") or None,
                    date_reported=data["date_reported"],
                    status=CaseStatus.OPEN,
                )
                fir_fields = {
                    "fir_number": fir_number,
                    "case": case,
                    "complainant_name": data["complainant_name"],
                    "complainant_contact": data.get("complainant_contact") or None,
                    "complainant_address": data.get("complainant_address") or None,
                    "place_of_offence": data.get("place_of_offence") or None,
                    "police_station": data.get("police_station") or None,
                }
                if data.get("date_filed"):
                    fir_fields["date_filed"] = timezone.make_aware(
                        datetime.datetime.combine(data["date_filed"], datetime.time.min)
                    )
                FIR.objects.create(**fir_fields)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same number
            raise Conflict("FIR number already exists")

        AuditRecorder.record(performed_by, AuditAction.CREATE, AuditTables.FIR, case.pk)
        logger.info(
            "FIR %s registered as case %s by %s",
            fir_number, case.pk, performed_by.username,
        )
        return case
