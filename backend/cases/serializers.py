"""
Cases app serializers.

Response serializers expose the historical column names the client
expects (``case_id``, ``FIR_number``, ``crime_type_id`` …).  Request
serializers only coerce types; required-field rules live in
``cases.services``.
"""

from __future__ import annotations

from rest_framework import serializers

from core.serializers import (
    OptionalDateField,
    OptionalDecimalField,
    OptionalIntegerField,
)

from .models import Case, CrimeCategory


# ═══════════════════════════════════════════════════════════════════
#  Crime Category
# ═══════════════════════════════════════════════════════════════════


class CrimeCategorySerializer(serializers.ModelSerializer):
    crime_type_id = serializers.IntegerField(source="pk", read_only=True)

    class Meta:
        model = CrimeCategory
        fields = ["crime_type_id", "crime_name", "ipc_section", "severity_level"]


# ═══════════════════════════════════════════════════════════════════
#  Case — Response Serializers
# ═══════════════════════════════════════════════════════════════════


class CaseSerializer(serializers.ModelSerializer):
    """
    Case joined with its crime category and primary accused name.

    Used for both the list and the detail endpoint.
    """

    case_id = serializers.IntegerField(source="pk", read_only=True)
    FIR_number = serializers.CharField(source="fir_number", read_only=True)
    crime_type_id = serializers.IntegerField(read_only=True)
    primary_accused_id = serializers.IntegerField(read_only=True, allow_null=True)
    crime_name = serializers.CharField(source="crime_type.crime_name", read_only=True)
    ipc_section = serializers.CharField(source="crime_type.ipc_section", read_only=True, allow_null=True)
    severity_level = serializers.CharField(source="crime_type.severity_level", read_only=True)
    primary_accused_name = serializers.SerializerMethodField()

    class Meta:
        model = Case
        fields = [
            "case_id",
            "FIR_number",
            "crime_type_id",
            "primary_accused_id",
            "city",
            "district",
            "police_station_code",
            "latitude",
            "longitude",
            "description",
            "date_reported",
            "status",
            "crime_name",
            "ipc_section",
            "severity_level",
            "primary_accused_name",
        ]

    def get_primary_accused_name(self, obj) -> str | None:
        return obj.primary_accused.name if obj.primary_accused_id else None


class ActiveCaseSerializer(serializers.Serializer):
    """Row of ``CaseQueryService.active_cases()`` (a ``values()`` dict)."""

    case_id = serializers.IntegerField(source="pk")
    FIR_number = serializers.CharField(source="fir_number")
    crime_name = serializers.CharField(source="crime_type__crime_name")
    city = serializers.CharField(allow_null=True)
    district = serializers.CharField(allow_null=True)
    date_reported = serializers.DateField()
    accused_status = serializers.CharField()


# ═══════════════════════════════════════════════════════════════════
#  Case — Request Serializers
# ═══════════════════════════════════════════════════════════════════


class CaseFilterSerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(required=False, allow_blank=True)


class CaseUpdateSerializer(serializers.Serializer):
    status = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class FIRCreateSerializer(serializers.Serializer):
    """
    Body of ``POST /api/fir``: the FIR itself plus the case fields.
    """

    # ── FIR ──────────────────────────────────────────────────────────
    FIR_number = serializers.CharField(required=False, allow_blank=True, max_length=50)
    complainant_name = serializers.CharField(required=False, allow_blank=True, max_length=100)
    complainant_contact = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=30)
    complainant_address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    place_of_offence = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    police_station = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    date_filed = OptionalDateField()

    # ── Case ─────────────────────────────────────────────────────────
    crime_type_id = OptionalIntegerField()
    city = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    district = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    police_station_code = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=30)
    latitude = OptionalDecimalField(max_digits=10, decimal_places=8)
    longitude = OptionalDecimalField(max_digits=11, decimal_places=8)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    date_reported = OptionalDateField()


class CreatedCaseSerializer(serializers.Serializer):
    message = serializers.CharField()
    case_id = serializers.IntegerField()
