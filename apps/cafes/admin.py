from django.contrib import admin
from apps.cafes.models import Cafe


@admin.register(Cafe)
class CafeAdmin(admin.ModelAdmin):
    """Admin interface for Cafes."""

    list_display = [
        'name',
        'city',
        'user_id',
        'place_id',
        'created_at'
    ]
    list_filter = [
        'city',
        'created_at'
    ]
    search_fields = [
        'name',
        'address',
        'city',
        'user_id',
        'place_id'
    ]
    readonly_fields = ['id', 'created_at']
    ordering = ['-created_at']
