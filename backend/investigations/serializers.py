"""
Investigations app serializers.

The list payload keeps both ``progress_notes`` and its older alias
``investigation_notes`` so either client field name reads the notes.
"""

from __future__ import annotations

from rest_framework import serializers

from core.serializers import OptionalIntegerField

from .models import Investigation


class InvestigationSerializer(serializers.ModelSerializer):
    investigation_id = serializers.IntegerField(source="pk", read_only=True)
    case_id = serializers.IntegerField(read_only=True)
    assigned_to = serializers.IntegerField(source="assigned_to_id", read_only=True)
    FIR_number = serializers.CharField(source="case.fir_number", read_only=True)
    crime_name = serializers.CharField(source="case.crime_type.crime_name", read_only=True)
    officer_name = serializers.CharField(source="assigned_to.name", read_only=True)
    investigation_notes = serializers.CharField(source="progress_notes", read_only=True, allow_null=True)

    class Meta:
        model = Investigation
        fields = [
            "investigation_id",
            "case_id",
            "assigned_to",
            "progress_notes",
            "last_updated",
            "FIR_number",
            "crime_name",
            "officer_name",
            "status",
            "investigation_notes",
        ]


class InvestigationWriteSerializer(serializers.Serializer):
    """Body of both ``POST`` and ``PUT``; the service decides what is required."""

    case_id = OptionalIntegerField()
    assigned_to = OptionalIntegerField()
    status = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    investigation_notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class CreatedInvestigationSerializer(serializers.Serializer):
    message = serializers.CharField()
    investigation_id = serializers.IntegerField()
