from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils import timezone
import uuid


class FlavorTag(models.TextChoices):
    """Closed flavor vocabulary shared by drinks and the parsing adapter."""

    FRUITY = 'Fruity', 'Fruity'
    NUTTY = 'Nutty', 'Nutty'
    CHOCOLATEY = 'Chocolatey', 'Chocolatey'
    CARAMEL = 'Caramel', 'Caramel'
    FLORAL = 'Floral', 'Floral'
    BRIGHT = 'Bright', 'Bright'
    SMOOTH = 'Smooth', 'Smooth'
    BOLD = 'Bold', 'Bold'
    BITTER = 'Bitter', 'Bitter'
    SWEET = 'Sweet', 'Sweet'
    EARTHY = 'Earthy', 'Earthy'
    SPICY = 'Spicy', 'Spicy'
    CITRUS = 'Citrus', 'Citrus'
    BERRY = 'Berry', 'Berry'
    CREAMY = 'Creamy', 'Creamy'


class Drink(models.Model):
    """A logged drink, i.e. one visit event at a cafe."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    cafe = models.ForeignKey('cafes.Cafe', on_delete=models.CASCADE, related_name='drinks')
    user_id = models.CharField(max_length=255, db_index=True)
    drink_type = models.CharField(max_length=100)
    rating = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        validators=[MinValueValidator(0), MaxValueValidator(5)]
    )
    notes = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )
    flavor_tags = models.JSONField(default=list, blank=True)

    # Authoritative event time for every statistic
    logged_at = models.DateTimeField(default=timezone.now, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'drinks'
        indexes = [
            models.Index(fields=['user_id', 'logged_at'], name='drinks_user_logged_idx'),
            models.Index(fields=['user_id', 'drink_type'], name='drinks_user_type_idx'),
        ]
        ordering = ['-logged_at']

    def __str__(self):
        return f"{self.drink_type} at {self.cafe.name} ({self.rating}★)"
