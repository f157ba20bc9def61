"""
Cases app models.

A case is opened by registering a First Information Report (FIR): the
``Case`` row and its ``FIR`` row are written together and share the same
FIR number.  Cases reference a crime category and, optionally, one
criminal as primary accused.
"""

from django.db import models
from django.utils import timezone


# ────────────────────────────────────────────────────────────────────
# Choice enumerations
# ────────────────────────────────────────────────────────────────────

class Severity(models.TextChoices):
    LOW = "Low", "Low"
    MEDIUM = "Medium", "Medium"
    HIGH = "High", "High"
    CRITICAL = "Critical", "Critical"


class CaseStatus(models.TextChoices):
    """
    Case status.

    By convention a case moves Open → Under Investigation → Closed or
    Chargesheeted, but no ordering is enforced: any value may be set at
    any time.
    """

    OPEN = "Open", "Open"
    UNDER_INVESTIGATION = "Under Investigation", "Under Investigation"
    CLOSED = "Closed", "Closed"
    CHARGESHEETED = "Chargesheeted", "Chargesheeted"


#: Statuses counted as "active" by ``GET /api/cases/active``.
ACTIVE_CASE_STATUSES = (CaseStatus.OPEN, CaseStatus.UNDER_INVESTIGATION)


# ────────────────────────────────────────────────────────────────────
# Models
# ────────────────────────────────────────────────────────────────────

class CrimeCategory(models.Model):
    """Reference list of offences (seeded by ``seed_crms``)."""

    crime_name = models.CharField(max_length=100, unique=True, verbose_name="Crime")
    ipc_section = models.CharField(max_length=20, blank=True, null=True, verbose_name="IPC Section")
    severity_level = models.CharField(
        max_length=10,
        choices=Severity.choices,
        default=Severity.MEDIUM,
        verbose_name="Severity",
    )

    class Meta:
        verbose_name = "Crime Category"
        verbose_name_plural = "Crime Categories"
        ordering = ["crime_name"]

    def __str__(self):
        if self.ipc_section:
            return f"{self.crime_name} (IPC {self.ipc_section})"
        return self.crime_name


class Case(models.Model):
    """
    A police case.

    ``primary_accused`` is set at most once, when a new criminal record is
    created with this case as its linked case.
    """

    fir_number = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="FIR Number",
    )
    crime_type = models.ForeignKey(
        CrimeCategory,
        on_delete=models.PROTECT,
        related_name="cases",
        verbose_name="Crime Type",
    )
    primary_accused = models.ForeignKey(
        "criminals.Criminal",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="accused_in_cases",
        verbose_name="Primary Accused",
    )
    city = models.CharField(max_length=100, blank=True, null=True, verbose_name="City")
    district = models.CharField(max_length=100, blank=True, null=True, verbose_name="District")
    police_station_code = models.CharField(
        max_length=30,
        blank=True,
        null=True,
        verbose_name="Police Station Code",
    )
    latitude = models.DecimalField(
        max_digits=10,
        decimal_places=8,
        null=True,
        blank=True,
        verbose_name="Latitude",
    )
    longitude = models.DecimalField(
        max_digits=11,
        decimal_places=8,
        null=True,
        blank=True,
        verbose_name="Longitude",
    )
    description = models.TextField(blank=True, null=True, verbose_name="Description")
    date_reported = models.DateField(db_index=True, verbose_name="Date Reported")
    status = models.CharField(
        max_length=30,
        choices=CaseStatus.choices,
        default=CaseStatus.OPEN,
        db_index=True,
        verbose_name="Status",
    )

    class Meta:
        verbose_name = "Case"
        verbose_name_plural = "Cases"
        ordering = ["-date_reported", "-id"]

    def __str__(self):
        return f"{self.fir_number} [{self.status}]"


class FIR(models.Model):
    """
    First Information Report: the complainant's statement that opened a
    case.  One FIR per case, sharing the case's FIR number.
    """

    fir_number = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="FIR Number",
    )
    case = models.OneToOneField(
        Case,
        on_delete=models.PROTECT,
        related_name="fir",
        verbose_name="Case",
    )
    complainant_name = models.CharField(max_length=100, verbose_name="Complainant")
    complainant_contact = models.CharField(
        max_length=30,
        blank=True,
        null=True,
        verbose_name="Complainant Contact",
    )
    complainant_address = models.TextField(blank=True, null=True, verbose_name="Complainant Address")
    place_of_offence = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        verbose_name="Place of Offence",
    )
    police_station = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        verbose_name="Police Station",
    )
    date_filed = models.DateTimeField(default=timezone.now, verbose_name="Date Filed")

    class Meta:
        verbose_name = "FIR"
        verbose_name_plural = "FIRs"
        ordering = ["-date_filed"]

    def __str__(self):
        return f"FIR {self.fir_number}"
