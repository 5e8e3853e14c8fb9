from rest_framework import serializers


# =============================================================================
# Response Serializers (schema only)
# =============================================================================

class DrinkTypeCountSerializer(serializers.Serializer):
    drink_type = serializers.CharField()
    count = serializers.IntegerField()


class TopCafeSerializer(serializers.Serializer):
    cafe_id = serializers.CharField()
    cafe_name = serializers.CharField()
    visit_count = serializers.IntegerField()


class RatingTrendSerializer(serializers.Serializer):
    week = serializers.DateField(help_text='Monday of the week')
    avg_rating = serializers.FloatField(allow_null=True)
    drink_count = serializers.IntegerField()


class DayRatingSerializer(serializers.Serializer):
    day = serializers.CharField()
    day_of_week = serializers.IntegerField(help_text='0=Sunday .. 6=Saturday')
    avg_rating = serializers.FloatField()
    drink_count = serializers.IntegerField()


class BestDaySerializer(DayRatingSerializer):
    all_days = DayRatingSerializer(many=True)


class TimeRatingSerializer(serializers.Serializer):
    time = serializers.ChoiceField(choices=['morning', 'afternoon', 'evening'])
    avg_rating = serializers.FloatField()
    drink_count = serializers.IntegerField()


class BestTimeSerializer(TimeRatingSerializer):
    all_times = TimeRatingSerializer(many=True)


class CafeStreakSerializer(serializers.Serializer):
    cafe_id = serializers.CharField()
    cafe_name = serializers.CharField()
    count = serializers.IntegerField()


class MilestoneSerializer(serializers.Serializer):
    metric = serializers.CharField()
    threshold = serializers.IntegerField()
    label = serializers.CharField()


class CafeSpendingSerializer(serializers.Serializer):
    cafe_id = serializers.CharField()
    cafe_name = serializers.CharField()
    drink_count = serializers.IntegerField()
    total_spent = serializers.FloatField()
    average_price = serializers.FloatField()


class SpendingSerializer(serializers.Serializer):
    total_spent = serializers.FloatField()
    spent_this_month = serializers.FloatField()
    average_price = serializers.FloatField()
    priced_drinks = serializers.IntegerField()
    by_cafe = CafeSpendingSerializer(many=True)


class FlavorTagCountSerializer(serializers.Serializer):
    tag = serializers.CharField()
    count = serializers.IntegerField()


class StatsResponseSerializer(serializers.Serializer):
    """Response body of GET /api/stats."""

    total_drinks = serializers.IntegerField()
    average_rating = serializers.FloatField()
    unique_cafes = serializers.IntegerField()
    unique_drink_types = serializers.IntegerField()
    drinks_this_week = serializers.IntegerField()
    drinks_this_month = serializers.IntegerField()
    drink_type_breakdown = DrinkTypeCountSerializer(many=True)
    top_cafes = TopCafeSerializer(many=True)
    rating_trends = RatingTrendSerializer(many=True)
    best_day = BestDaySerializer(allow_null=True)
    best_time = BestTimeSerializer(allow_null=True)
    daily_streak = serializers.IntegerField()
    longest_daily_streak = serializers.IntegerField()
    current_streak = CafeStreakSerializer(allow_null=True)
    longest_streak = CafeStreakSerializer(allow_null=True)
    milestones = MilestoneSerializer(many=True)
    spending = SpendingSerializer()
    flavor_tags = FlavorTagCountSerializer(many=True)
