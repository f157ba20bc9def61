"""
Core app services — **Service Layer**.

Cross-app read models: the dashboard counters and the audit-log view.

╔══════════════════════════════════════════════════════════════════════╗
║  CROSS-APP IMPORT RULE                                              ║
║                                                                    ║
║  ``core`` is imported by every other app (audit, access gates,     ║
║  exceptions).  To keep that one-way, models from other apps are    ║
║  resolved lazily with ``django.apps.apps.get_model`` inside the    ║
║  methods that need them, never imported at module level.           ║
╚══════════════════════════════════════════════════════════════════════╝
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.apps import apps
from django.db.models import QuerySet

from core.domain.access import require_permission
from core.permissions_constants import CRMSPerms

from .models import AuditLogEntry

if TYPE_CHECKING:
    from accounts.models import User


# ════════════════════════════════════════════════════════════════════
#  Dashboard
# ════════════════════════════════════════════════════════════════════

class DashboardStatsService:
    """
    Four independent headline counts.  Any authenticated user may read
    them; nothing is scoped by role.
    """

    @staticmethod
    def get_stats() -> dict[str, Any]:
        from cases.models import CaseStatus

        Case = apps.get_model("cases", "Case")
        Criminal = apps.get_model("criminals", "Criminal")
        Staff = apps.get_model("accounts", "Staff")

        return {
            "total_cases": Case.objects.count(),
            "open_cases": Case.objects.filter(status=CaseStatus.OPEN).count(),
            "wanted_criminals": Criminal.objects.filter(is_wanted=True).count(),
            "active_staff": Staff.objects.filter(is_active=True).count(),
        }


# ════════════════════════════════════════════════════════════════════
#  Audit Log
# ════════════════════════════════════════════════════════════════════

class AuditLogQueryService:

    #: The audit view only ever shows the most recent entries.
    LIMIT = 500

    @staticmethod
    def latest_entries(requesting_user: User) -> QuerySet[AuditLogEntry]:
        """
        Return the newest ``LIMIT`` entries with user, staff and role
        loaded.  Requires ``view_audit_logs``.
        """
        require_permission(requesting_user, CRMSPerms.VIEW_AUDIT_LOGS)
        return (
            AuditLogEntry.objects
            .select_related("user__staff", "user__role")
            .order_by("-timestamp", "-log_id")[: AuditLogQueryService.LIMIT]
        )
