from rest_framework import serializers
from .models import Cafe


# =============================================================================
# Input Serializers
# =============================================================================

class CafeCreateSerializer(serializers.Serializer):
    """
    Validate input for creating a cafe.

    Fields:
        name (str): Display name (required)
        address, city (str): Optional location text
        place_id (str): Maps provider place reference, used for deduplication
        photo_reference (str): Maps provider photo reference
        lat, lng (float): Optional coordinates
    """

    name = serializers.CharField(max_length=200)
    address = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(max_length=200, required=False, allow_blank=True, allow_null=True)
    place_id = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    photo_reference = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)
    lat = serializers.FloatField(required=False, allow_null=True, min_value=-90, max_value=90)
    lng = serializers.FloatField(required=False, allow_null=True, min_value=-180, max_value=180)


# =============================================================================
# Output Serializers
# =============================================================================

class CafeSerializer(serializers.ModelSerializer):
    """Cafe with visit statistics (present when the queryset is annotated)."""

    drink_count = serializers.IntegerField(read_only=True)
    last_visit = serializers.DateTimeField(read_only=True, allow_null=True)

    class Meta:
        model = Cafe
        fields = [
            'id',
            'name',
            'address',
            'city',
            'place_id',
            'photo_reference',
            'lat',
            'lng',
            'created_at',
            'drink_count',
            'last_visit',
        ]
        read_only_fields = fields


class CafeMinimalSerializer(serializers.ModelSerializer):
    """Minimal cafe info for nested serialization."""

    class Meta:
        model = Cafe
        fields = ['id', 'name', 'address', 'city']
        read_only_fields = fields


class ErrorSerializer(serializers.Serializer):
    """Standard error response serializer."""
    error = serializers.CharField()
