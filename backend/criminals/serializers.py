from __future__ import annotations

from rest_framework import serializers

from core.serializers import OptionalDateField, OptionalIntegerField

from .models import Criminal


class CriminalSerializer(serializers.ModelSerializer):
    criminal_id = serializers.IntegerField(source="pk", read_only=True)

    class Meta:
        model = Criminal
        fields = [
            "criminal_id",
            "name",
            "alias",
            "dob",
            "gender",
            "address",
            "height_cm",
            "weight_kg",
            "identifying_marks",
            "is_wanted",
            "total_cases",
        ]


class CriminalCreateSerializer(serializers.Serializer):
    """
    Body of ``POST /api/criminals``.

    ``eye_color``, ``hair_color``, ``contact_number`` and
    ``wanted_reason`` are sent by the client form but are not declared
    here, so they are ignored.
    """

    name = serializers.CharField(required=False, allow_blank=True, max_length=100)
    alias = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    gender = serializers.CharField(required=False, allow_blank=True)
    date_of_birth = OptionalDateField()
    height = OptionalIntegerField(min_value=0)
    weight = OptionalIntegerField(min_value=0)
    distinguishing_marks = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    is_wanted = serializers.BooleanField(required=False, allow_null=True)
    linked_case_id = OptionalIntegerField()


class CriminalWantedSerializer(serializers.Serializer):
    is_wanted = serializers.BooleanField(required=False, allow_null=True)
    wanted_reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class CreatedCriminalSerializer(serializers.Serializer):
    message = serializers.CharField()
    criminal_id = serializers.IntegerField()
