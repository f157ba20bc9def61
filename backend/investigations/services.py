"""
Investigations app service layer.

Permission matrix
-----------------
  - list investigations   → any authenticated user
  - open an investigation → ``create_investigation``
  - update/reassign       → ``edit_investigation``

Notes that still arrive with a ``[Status: X]`` prefix (older clients)
are split with ``split_legacy_status`` so the prefix never lands in
``progress_notes``; an explicit ``status`` in the body wins over it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from accounts.models import Staff
from cases.models import Case
from core.audit import AuditRecorder, AuditTables
from core.domain.access import require_permission
from core.domain.exceptions import DomainError, NotFound
from core.domain.inputs import require_fields
from core.models import AuditAction
from core.permissions_constants import CRMSPerms

from .models import Investigation, InvestigationStatus, split_legacy_status

if TYPE_CHECKING:
    from accounts.models import User

logger = logging.getLogger(__name__)


def _active_officer(staff_id: int) -> Staff:
    try:
        return Staff.objects.get(pk=staff_id, is_active=True)
    except Staff.DoesNotExist:
        raise DomainError("Officer not found or inactive")


def _resolve_status_and_notes(data: dict[str, Any]) -> tuple[str | None, str | None]:
    """
    Return ``(status, notes)`` from the request body.

    ``status`` is ``None`` when neither the body nor a notes prefix
    names one.
    """
    legacy_status, notes = split_legacy_status(data.get("investigation_notes") or None)
    status = data.get("status") or legacy_status
    if status and status not in InvestigationStatus.values:
        raise DomainError("Invalid status value")
    return status, notes


class InvestigationService:

    @staticmethod
    def list_investigations() -> QuerySet[Investigation]:
        return (
            Investigation.objects
            .select_related("case__crime_type", "assigned_to")
            .order_by("-last_updated", "-pk")
        )

    @staticmethod
    def create_investigation(data: dict[str, Any], performed_by: User) -> Investigation:
        """
        Open the investigation of a case.

        Raises
        ------
        PermissionDenied
            Caller lacks ``create_investigation``.
        DomainError
            Missing ids, unknown case, unknown or inactive officer,
            invalid status, or the case already has an investigation.
        """
        require_permission(performed_by, CRMSPerms.CREATE_INVESTIGATION)
        require_fields(
            data,
            ("case_id", "assigned_to"),
            "Case ID and assigned officer are required",
        )

        try:
            case = Case.objects.get(pk=data["case_id"])
        except Case.DoesNotExist:
            raise DomainError("Case not found")

        officer = _active_officer(data["assigned_to"])

        if Investigation.objects.filter(case=case).exists():
            raise DomainError("Investigation already exists for this case")

        status, notes = _resolve_status_and_notes(data)

        try:
            with transaction.atomic():
                investigation = Investigation.objects.create(
                    case=case,
                    assigned_to=officer,
                    status=status or InvestigationStatus.OPEN,
                    progress_notes=notes,
                )
        except IntegrityError:
            raise DomainError("Investigation already exists for this case")

        AuditRecorder.record(
            performed_by, AuditAction.CREATE, AuditTables.INVESTIGATIONS, investigation.pk,
        )
        logger.info(
            "Investigation %s opened on case %s by %s",
            investigation.pk, case.pk, performed_by.username,
        )
        return investigation

    @staticmethod
    def update_investigation(
        investigation_id: int,
        data: dict[str, Any],
        performed_by: User,
    ) -> Investigation:
        """
        Update status, notes and/or the assigned officer.

        ``investigation_notes`` replaces the stored notes whenever the key
        is present.  A body with none of the three fields is accepted and
        leaves the row as it was.
        """
        require_permission(performed_by, CRMSPerms.EDIT_INVESTIGATION)

        try:
            investigation = Investigation.objects.get(pk=investigation_id)
        except Investigation.DoesNotExist:
            raise NotFound("Investigation not found")

        update_fields = []
        if data.get("assigned_to"):
            investigation.assigned_to = _active_officer(data["assigned_to"])
            update_fields.append("assigned_to")

        status, notes = _resolve_status_and_notes(data)
        if status:
            investigation.status = status
            update_fields.append("status")
        if "investigation_notes" in data:
            investigation.progress_notes = notes
            update_fields.append("progress_notes")

        if update_fields:
            update_fields.append("last_updated")
            investigation.save(update_fields=update_fields)

        AuditRecorder.record(
            performed_by, AuditAction.UPDATE, AuditTables.INVESTIGATIONS, investigation.pk,
        )
        return investigation
