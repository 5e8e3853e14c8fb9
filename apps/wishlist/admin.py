from django.contrib import admin
from apps.wishlist.models import WishlistItem


@admin.register(WishlistItem)
class WishlistItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'city', 'user_id', 'created_at']
    search_fields = ['name', 'city', 'user_id', 'place_id']
    readonly_fields = ['id', 'created_at']
    ordering = ['-created_at']
