from rest_framework import serializers
from apps.drinks.models import FlavorTag


MAX_TEXT_LENGTH = 1000


# =============================================================================
# Input Serializers
# =============================================================================

class ParseInputSerializer(serializers.Serializer):
    """Free-text drink description, 1-1000 characters."""

    text = serializers.CharField(
        max_length=MAX_TEXT_LENGTH,
        trim_whitespace=True,
        error_messages={
            'required': 'Text input is required',
            'null': 'Text input is required',
            'blank': 'Text input is required',
            'invalid': 'Text input is required',
            'max_length': f'Text input must be under {MAX_TEXT_LENGTH} characters',
        },
    )

    def to_internal_value(self, data):
        if isinstance(data, dict) and 'text' in data and not isinstance(data['text'], str):
            raise serializers.ValidationError({'text': ['Text input is required']})
        return super().to_internal_value(data)


# =============================================================================
# Output Serializers
# =============================================================================

class ParsedDrinkSerializer(serializers.Serializer):
    drink_type = serializers.CharField(allow_null=True)
    cafe_name = serializers.CharField(allow_null=True)
    cafe_id = serializers.UUIDField(allow_null=True)
    matched_cafe_name = serializers.CharField(allow_null=True)
    location_hint = serializers.CharField(allow_null=True)
    places_search_query = serializers.CharField(allow_null=True)
    flavor_tags = serializers.ListField(child=serializers.ChoiceField(choices=FlavorTag.choices))
    price = serializers.FloatField(allow_null=True)
    rating = serializers.IntegerField(allow_null=True)
    notes = serializers.CharField(allow_null=True)


class ParseResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    data = ParsedDrinkSerializer()
    raw_interpretation = serializers.CharField()


class RecommendationSerializer(serializers.Serializer):
    suggestion = serializers.CharField()
    reasoning = serializers.CharField()
    recommended_tags = serializers.ListField(child=serializers.CharField())
    try_next_drink = serializers.CharField(allow_null=True)


class TasteProfileSerializer(serializers.Serializer):
    favorite_tags = serializers.ListField(child=serializers.CharField())
    high_rated_tags = serializers.ListField(child=serializers.CharField(), required=False)
    unexplored_tags = serializers.ListField(child=serializers.CharField(), required=False)
    total_drinks_analyzed = serializers.IntegerField()


class RecommendationResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    recommendation = RecommendationSerializer()
    user_profile = TasteProfileSerializer()


class AIErrorSerializer(serializers.Serializer):
    success = serializers.BooleanField(default=False)
    error = serializers.CharField()
