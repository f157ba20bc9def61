"""
Criminals app service layer.

Permission matrix
-----------------
  - list criminals            → any authenticated user
  - create criminal record    → ``create_criminal``
  - toggle wanted flag        → ``edit_criminal``

Linking
-------
A new record may name a ``linked_case_id``.  The case is locked, checked
for an existing primary accused, and only then is the criminal inserted
and linked, all inside one transaction: a rejected link leaves neither a
new criminal nor a modified case behind.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from django.db import transaction
from django.db.models import QuerySet

from cases.models import Case
from core.audit import AuditRecorder, AuditTables
from core.domain.access import require_permission
from core.domain.exceptions import DomainError, NotFound
from core.domain.inputs import require_fields
from core.domain.transactions import lock_for_update
from core.models import AuditAction
from core.permissions_constants import CRMSPerms

from .models import Criminal, Gender

if TYPE_CHECKING:
    from accounts.models import User

logger = logging.getLogger(__name__)

#: Request key → model field.  Keys not listed here are accepted by the
#: client form but have no column and are dropped.
FIELD_MAP = {
    "name": "name",
    "alias": "alias",
    "gender": "gender",
    "date_of_birth": "dob",
    "height": "height_cm",
    "weight": "weight_kg",
    "distinguishing_marks": "identifying_marks",
    "address": "address",
}


class CriminalService:

    @staticmethod
    def list_criminals() -> QuerySet[Criminal]:
        return Criminal.objects.order_by("-pk")

    @staticmethod
    def create_criminal(data: dict[str, Any], performed_by: User) -> Criminal:
        """
        Create a criminal record, optionally as primary accused of a case.

        Parameters
        ----------
        data : dict
            Validated request body.  ``name`` and ``gender`` are
            required; ``linked_case_id`` is optional.
        performed_by : User

        Raises
        ------
        PermissionDenied
            Caller lacks ``create_criminal``.
        DomainError
            Missing name/gender, unknown gender, unknown linked case, or
            the linked case already has a primary accused.
        """
        require_permission(performed_by, CRMSPerms.CREATE_CRIMINAL)
        require_fields(data, ("name", "gender"), "Name and gender are required")

        if data["gender"] not in Gender.values:
            raise DomainError("Invalid gender value")

        fields = {
            column: data.get(key) or None
            for key, column in FIELD_MAP.items()
        }
        fields["is_wanted"] = bool(data.get("is_wanted"))
        linked_case_id = data.get("linked_case_id")

        with transaction.atomic():
            case = None
            if linked_case_id:
                case = lock_for_update(
                    Case,
                    linked_case_id,
                    message="Linked case not found",
                    missing_is_validation_error=True,
                )
                if case.primary_accused_id is not None:
                    raise DomainError("Case already has a primary accused")

            criminal = Criminal.objects.create(
                total_cases=1 if case is not None else 0,
                **fields,
            )
            if case is not None:
                case.primary_accused = criminal
                case.save(update_fields=["primary_accused"])

        if case is not None:
            AuditRecorder.record(performed_by, AuditAction.LINK, AuditTables.CASES, case.pk)
        AuditRecorder.record(performed_by, AuditAction.CREATE, AuditTables.CRIMINALS, criminal.pk)

        logger.info(
            "Criminal %s created by %s%s",
            criminal.pk,
            performed_by.username,
            f" and linked to case {case.pk}" if case is not None else "",
        )
        return criminal

    @staticmethod
    def set_wanted(criminal_id: int, data: dict[str, Any], performed_by: User) -> Criminal:
        """
        Persist the wanted flag.  An absent ``is_wanted`` clears it.

        ``wanted_reason`` is accepted from the client but there is no
        column for it, so it is not stored.
        """
        require_permission(performed_by, CRMSPerms.EDIT_CRIMINAL)

        try:
            criminal = Criminal.objects.get(pk=criminal_id)
        except Criminal.DoesNotExist:
            raise NotFound("Criminal not found")

        criminal.is_wanted = bool(data.get("is_wanted"))
        criminal.save(update_fields=["is_wanted"])
        AuditRecorder.record(performed_by, AuditAction.UPDATE, AuditTables.CRIMINALS, criminal.pk)
        return criminal
