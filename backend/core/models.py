"""
Core app models.

Holds the append-only audit trail shared by every other app.
"""

from django.conf import settings
from django.db import models


class AuditAction(models.TextChoices):
    LOGIN = "LOGIN", "Login"
    CREATE = "CREATE", "Create"
    UPDATE = "UPDATE", "Update"
    LINK = "LINK", "Link"
    DEACTIVATE = "DEACTIVATE", "Deactivate"


class AuditLogEntry(models.Model):
    """
    One immutable record of a mutating action.

    ``table_name`` keeps the historical table names (``Users``, ``Cases``,
    ``Criminals``, ``Investigations``, ``Police_Staff``, ``FIR``) so that
    log readers and reports written against the old schema keep working.
    ``record_id`` is a plain integer rather than a foreign key because it
    may point into any of those tables.

    Rows are written once by ``core.audit.AuditRecorder`` and never
    updated or deleted; both ``save()`` on an existing row and
    ``delete()`` raise.
    """

    log_id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="audit_entries",
        verbose_name="User",
    )
    action = models.CharField(
        max_length=20,
        choices=AuditAction.choices,
        verbose_name="Action",
    )
    table_name = models.CharField(max_length=50, verbose_name="Table")
    record_id = models.BigIntegerField(null=True, blank=True, verbose_name="Record ID")
    timestamp = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        verbose_name="Timestamp",
    )

    class Meta:
        verbose_name = "Audit Log Entry"
        verbose_name_plural = "Audit Log"
        ordering = ["-timestamp", "-log_id"]

    def __str__(self):
        return f"{self.action} {self.table_name}#{self.record_id} by user {self.user_id}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Audit log entries are append-only and cannot be modified.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Audit log entries are append-only and cannot be deleted.")
