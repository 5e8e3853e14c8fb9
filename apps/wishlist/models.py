from django.db import models
from django.db.models import Q
import uuid


class WishlistItem(models.Model):
    """A cafe the user wants to visit but has not been to yet."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=255, db_index=True)
    name = models.CharField(max_length=200)
    address = models.CharField(max_length=500, blank=True)
    city = models.CharField(max_length=200, blank=True)
    place_id = models.CharField(max_length=255, blank=True)
    photo_reference = models.CharField(max_length=1000, blank=True)
    lat = models.FloatField(null=True, blank=True)
    lng = models.FloatField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'wishlist'
        constraints = [
            models.UniqueConstraint(
                fields=['user_id', 'place_id'],
                condition=~Q(place_id=''),
                name='unique_wishlist_place_per_user',
            ),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name
