from django.contrib import admin
from apps.drinks.models import Drink


@admin.register(Drink)
class DrinkAdmin(admin.ModelAdmin):
    """Admin interface for Drinks."""

    list_display = [
        'drink_type',
        'cafe',
        'rating',
        'price',
        'user_id',
        'logged_at'
    ]
    list_filter = ['rating', 'logged_at']
    search_fields = ['drink_type', 'notes', 'user_id', 'cafe__name']
    readonly_fields = ['id', 'created_at']
    raw_id_fields = ['cafe']
    ordering = ['-logged_at']
