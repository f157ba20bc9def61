"""
Core app serializers.

Two groups live here:

1. **Lenient input fields** used by request serializers across the
   apps.  HTML forms submit ``""`` for an untouched date or number
   input; these fields read that as ``None`` instead of rejecting it.
2. **Response-only** serializers for the dashboard and audit-log
   endpoints served by the core app.
"""

from __future__ import annotations

from rest_framework import serializers


# ════════════════════════════════════════════════════════════════════
#  Lenient input fields
# ════════════════════════════════════════════════════════════════════

class EmptyAsNullMixin:
    """Treat an empty or whitespace-only string as ``None``."""

    def validate_empty_values(self, data):
        if isinstance(data, str) and not data.strip():
            data = None
        return super().validate_empty_values(data)


class OptionalDateField(EmptyAsNullMixin, serializers.DateField):
    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)


class OptionalIntegerField(EmptyAsNullMixin, serializers.IntegerField):
    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)


class OptionalDecimalField(EmptyAsNullMixin, serializers.DecimalField):
    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        super().__init__(**kwargs)


# ════════════════════════════════════════════════════════════════════
#  Dashboard Statistics
# ════════════════════════════════════════════════════════════════════

class DashboardStatsSerializer(serializers.Serializer):
    """
    Four headline counters shown on the dashboard.

    Example::

        {"total_cases": 42, "open_cases": 17,
         "wanted_criminals": 5, "active_staff": 23}
    """

    total_cases = serializers.IntegerField(help_text="All cases ever registered.")
    open_cases = serializers.IntegerField(help_text="Cases whose status is 'Open'.")
    wanted_criminals = serializers.IntegerField(help_text="Criminals flagged as wanted.")
    active_staff = serializers.IntegerField(help_text="Staff members currently active.")


# ════════════════════════════════════════════════════════════════════
#  Audit Log
# ════════════════════════════════════════════════════════════════════

class AuditLogEntrySerializer(serializers.Serializer):
    """
    One audit entry joined with the acting user's name, staff name and
    current role.
    """

    log_id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    action = serializers.CharField()
    table_name = serializers.CharField()
    record_id = serializers.IntegerField(allow_null=True)
    timestamp = serializers.DateTimeField()
    username = serializers.CharField(source="user.username")
    staff_name = serializers.CharField(source="user.staff.name")
    role_name = serializers.CharField(source="user.role.name")
