from rest_framework import serializers
from .models import WishlistItem


# =============================================================================
# Input Serializers
# =============================================================================

class WishlistItemCreateSerializer(serializers.Serializer):
    """
    Validate input for adding a wishlist item.

    Free-text fields are not length-checked here; they are sanitized and
    clipped by the service.
    """

    name = serializers.CharField()
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    place_id = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    photo_reference = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)
    lat = serializers.FloatField(required=False, allow_null=True, min_value=-90, max_value=90)
    lng = serializers.FloatField(required=False, allow_null=True, min_value=-180, max_value=180)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================

class WishlistItemSerializer(serializers.ModelSerializer):

    class Meta:
        model = WishlistItem
        fields = [
            'id',
            'name',
            'address',
            'city',
            'place_id',
            'photo_reference',
            'lat',
            'lng',
            'notes',
            'created_at',
        ]
        read_only_fields = fields
