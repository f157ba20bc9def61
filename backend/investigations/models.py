"""
Investigations app models.

One investigation per case, assigned to a police staff member.  Status
is a real column; earlier data kept it as a ``[Status: X]`` prefix on
the notes text, which ``split_legacy_status`` strips off.
"""

from __future__ import annotations

import re

from django.db import models


class InvestigationStatus(models.TextChoices):
    OPEN = "Open", "Open"
    IN_PROGRESS = "In Progress", "In Progress"
    SUSPENDED = "Suspended", "Suspended"
    CLOSED = "Closed", "Closed"


_LEGACY_STATUS_PREFIX = re.compile(r"^\s*\[Status:\s*([^\]]*)\]\s*")


def split_legacy_status(notes: str | None) -> tuple[str | None, str | None]:
    """
    Split a ``[Status: X] rest`` notes string into ``(X, rest)``.

    Returns ``(None, notes)`` when there is no prefix.  The remaining
    notes come back as ``None`` if nothing is left after the prefix.
    Only the four known statuses are recognised; an unknown value inside
    the brackets is left in the notes untouched.

    >>> split_legacy_status("[Status: Closed] suspect charged")
    ('Closed', 'suspect charged')
    >>> split_legacy_status("no prefix")
    (None, 'no prefix')
    """
    if not notes:
        return None, notes
    match = _LEGACY_STATUS_PREFIX.match(notes)
    if match is None:
        return None, notes
    status = match.group(1).strip()
    if status not in InvestigationStatus.values:
        return None, notes
    rest = notes[match.end():].strip()
    return status, rest or None


class Investigation(models.Model):
    case = models.OneToOneField(
        "cases.Case",
        on_delete=models.PROTECT,
        related_name="investigation",
        verbose_name="Case",
    )
    assigned_to = models.ForeignKey(
        "accounts.Staff",
        on_delete=models.PROTECT,
        related_name="investigations",
        verbose_name="Assigned Officer",
    )
    status = models.CharField(
        max_length=20,
        choices=InvestigationStatus.choices,
        default=InvestigationStatus.OPEN,
        db_index=True,
        verbose_name="Status",
    )
    progress_notes = models.TextField(blank=True, null=True, verbose_name="Progress Notes")
    last_updated = models.DateTimeField(auto_now=True, verbose_name="Last Updated")

    class Meta:
        verbose_name = "Investigation"
        verbose_name_plural = "Investigations"
        ordering = ["-last_updated"]

    def __str__(self):
        return f"Investigation #{self.pk} on {self.case_id} [{self.status}]"
