"""
core.audit — Best-effort audit trail writer.

Every mutating service calls ``AuditRecorder.record`` *after* its own
write has succeeded.  The audit insert runs in its own savepoint so a
failing insert never poisons an enclosing transaction, and the failure
is logged instead of propagated: losing an audit row must never undo or
block the action it describes.

Usage::

    from core.audit import AuditRecorder, AuditTables
    from core.models import AuditAction

    AuditRecorder.record(user, AuditAction.UPDATE, AuditTables.CASES, case.pk)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.db import DatabaseError, transaction

if TYPE_CHECKING:
    from accounts.models import User
    from core.models import AuditLogEntry

logger = logging.getLogger(__name__)


class AuditTables:
    """Table names written to ``AuditLogEntry.table_name``."""

    USERS = "Users"
    CASES = "Cases"
    CRIMINALS = "Criminals"
    INVESTIGATIONS = "Investigations"
    STAFF = "Police_Staff"
    FIR = "FIR"


class AuditRecorder:
    """Appends rows to the audit log without ever raising."""

    @staticmethod
    def record(
        user: User,
        action: str,
        table_name: str,
        record_id: int | str | None,
    ) -> AuditLogEntry | None:
        """
        Append one audit entry.

        Args:
            user:       The acting user (``request.user``).
            action:     One of ``core.models.AuditAction``.
            table_name: One of ``AuditTables``.
            record_id:  Primary key of the affected row.

        Returns:
            The created entry, or ``None`` if the write failed.
        """
        from core.models import AuditLogEntry

        try:
            with transaction.atomic():
                return AuditLogEntry.objects.create(
                    user_id=user.pk,
                    action=action,
                    table_name=table_name,
                    record_id=int(record_id) if record_id is not None else None,
                )
        except DatabaseError:
            logger.error(
                "Audit log write failed: user=%s action=%s table=%s record=%s",
                getattr(user, "pk", None), action, table_name, record_id,
                exc_info=True,
            )
            return None
