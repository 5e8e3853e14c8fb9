from django.db import models
from django.db.models import Q
import uuid


class Cafe(models.Model):
    """A cafe the user has visited (or promoted from the wishlist)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.CharField(max_length=255, db_index=True)
    name = models.CharField(max_length=200)
    address = models.CharField(max_length=500, blank=True)
    city = models.CharField(max_length=200, blank=True)

    # External place reference (maps provider)
    place_id = models.CharField(max_length=255, blank=True)
    photo_reference = models.CharField(max_length=1000, blank=True)
    lat = models.FloatField(null=True, blank=True)
    lng = models.FloatField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'cafes'
        constraints = [
            models.UniqueConstraint(
                fields=['user_id', 'place_id'],
                condition=~Q(place_id=''),
                name='unique_cafe_place_per_user',
            ),
        ]
        indexes = [
            models.Index(fields=['user_id', 'name'], name='cafes_user_id_4f7c1e_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.city})" if self.city else self.name
