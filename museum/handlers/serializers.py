"""Serializers for validating requests and rendering domain models."""

from rest_framework import serializers

from museum.domain import Exhibit, Patron


class ExhibitSerializer(serializers.Serializer):
    """Serializer for Exhibit domain model."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(max_length=255)
    cost = serializers.IntegerField(min_value=0)


class PatronSerializer(serializers.Serializer):
    """Serializer for Patron domain model."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(max_length=255)
    spending_money = serializers.IntegerField(min_value=0)
    interests = serializers.ListField(
        child=serializers.CharField(max_length=255),
        default=list,
    )


class MuseumSerializer(serializers.Serializer):
    """Serializer for Museum aggregate."""

    id = serializers.CharField(read_only=True)
    name = serializers.CharField(max_length=255)
    revenue = serializers.IntegerField(read_only=True)
    exhibits = ExhibitSerializer(many=True, read_only=True)
    patrons = PatronSerializer(many=True, read_only=True)


class ExhibitPatronsSerializer(serializers.Serializer):
    """One exhibit with the patrons associated with it."""

    exhibit = ExhibitSerializer()
    patrons = PatronSerializer(many=True)


def exhibit_patrons(mapping: dict[Exhibit, list[Patron]]) -> list[dict]:
    """Flatten an exhibit -> patrons mapping, keeping key order."""
    return [
        {"exhibit": exhibit, "patrons": patrons}
        for exhibit, patrons in mapping.items()
    ]
