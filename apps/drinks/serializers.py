from rest_framework import serializers
from .models import Drink, FlavorTag
from .services import SORTABLE_FIELDS


# =============================================================================
# Input Serializers
# =============================================================================

class DrinkFilterSerializer(serializers.Serializer):
    """Query parameters for listing drinks."""

    cafe_id = serializers.UUIDField(required=False)
    sort = serializers.ChoiceField(choices=SORTABLE_FIELDS, default='logged_at')
    order = serializers.ChoiceField(choices=['asc', 'desc'], default='desc')


class DrinkCreateSerializer(serializers.Serializer):
    """
    Validate input for logging a drink.

    Fields:
        cafe_id (UUID): One of the caller's cafes (required)
        drink_type (str): Free-text label (required)
        rating (decimal): 0-5, one decimal place (required)
        notes (str): Tasting notes
        price (decimal): Price paid, non-negative
        flavor_tags (list): Tags from the flavor vocabulary
        logged_at (datetime): Defaults to now
    """

    cafe_id = serializers.UUIDField()
    drink_type = serializers.CharField(max_length=100)
    rating = serializers.DecimalField(max_digits=2, decimal_places=1, min_value=0, max_value=5)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price = serializers.DecimalField(max_digits=6, decimal_places=2, min_value=0, required=False, allow_null=True)
    flavor_tags = serializers.ListField(
        child=serializers.ChoiceField(choices=FlavorTag.choices),
        required=False,
        allow_empty=True,
    )
    logged_at = serializers.DateTimeField(required=False, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================

class DrinkSerializer(serializers.ModelSerializer):
    """Drink joined with the fields of its cafe."""

    cafe_id = serializers.UUIDField(read_only=True)
    cafe_name = serializers.CharField(source='cafe.name', read_only=True)
    cafe_address = serializers.CharField(source='cafe.address', read_only=True)
    cafe_city = serializers.CharField(source='cafe.city', read_only=True)

    class Meta:
        model = Drink
        fields = [
            'id',
            'cafe_id',
            'drink_type',
            'rating',
            'notes',
            'price',
            'flavor_tags',
            'logged_at',
            'created_at',
            'cafe_name',
            'cafe_address',
            'cafe_city',
        ]
        read_only_fields = fields
