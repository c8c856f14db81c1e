"""
Serializers for the cars app.
"""
from rest_framework import serializers

from .models import Car, UserCar


class CarSerializer(serializers.ModelSerializer):
    """Serializer for Car model."""

    class Meta:
        model = Car
        fields = [
            'id', 'name', 'price', 'size', 'image',
            'is_currently_rented', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class UserCarSerializer(serializers.ModelSerializer):
    """Serializer for UserCar (rental) model."""

    class Meta:
        model = UserCar
        fields = [
            'id', 'user', 'car', 'rent_started_at', 'rent_ended_at',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class RentCarSerializer(serializers.Serializer):
    """Validates the body of a rental request."""

    rent_started_at = serializers.DateTimeField()
    rent_ended_at = serializers.DateTimeField(required=False, allow_null=True)

    def validate(self, attrs):
        """Validate that the rental does not end before it starts."""
        ended_at = attrs.get('rent_ended_at')
        if ended_at is not None and ended_at < attrs['rent_started_at']:
            raise serializers.ValidationError({
                'rent_ended_at': 'Rental cannot end before it starts.'
            })
        return attrs
