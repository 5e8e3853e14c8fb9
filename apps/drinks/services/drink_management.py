"""Drink CRUD operations service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.db.models import Count, QuerySet
from django.utils import timezone

from apps.cafes.models import Cafe
from ..models import Drink, FlavorTag
from .exceptions import (
    DrinkNotFoundError,
    InvalidCafeReferenceError,
    InvalidRatingError,
)

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ('logged_at', 'rating', 'created_at')
MIN_RATING = Decimal('0')
MAX_RATING = Decimal('5')


def get_user_drinks(
    *,
    user_id: str,
    cafe_id: Optional[UUID] = None,
    sort: str = 'logged_at',
    order: str = 'desc',
) -> QuerySet:
    """
    List a user's drinks joined with their cafe.

    Args:
        user_id: Identity-provider subject of the caller
        cafe_id: Only drinks logged at this cafe
        sort: One of SORTABLE_FIELDS
        order: 'asc' or 'desc'

    Returns:
        QuerySet of Drink instances with cafe selected
    """
    if sort not in SORTABLE_FIELDS:
        sort = 'logged_at'
    prefix = '' if order == 'asc' else '-'

    queryset = Drink.objects.filter(user_id=user_id).select_related('cafe')
    if cafe_id:
        queryset = queryset.filter(cafe_id=cafe_id)

    # Stable order among equal sort keys
    return queryset.order_by(f'{prefix}{sort}', f'{prefix}created_at', 'id')


def get_drink_types(*, user_id: str) -> List[str]:
    """Distinct drink types, most frequent first, then alphabetically."""
    rows = (
        Drink.objects
        .filter(user_id=user_id)
        .values('drink_type')
        .annotate(count=Count('id'))
        .order_by('-count', 'drink_type')
    )
    return [row['drink_type'] for row in rows]


def get_last_drink(*, user_id: str) -> Drink:
    """
    Most recently logged drink, used for quick re-logging.

    Raises:
        DrinkNotFoundError: If the user has no drinks
    """
    drink = (
        Drink.objects
        .filter(user_id=user_id)
        .select_related('cafe')
        .order_by('-logged_at', '-created_at')
        .first()
    )
    if drink is None:
        raise DrinkNotFoundError("No drinks found")
    return drink


def get_drink_by_id(*, user_id: str, drink_id: UUID) -> Drink:
    """
    Get one of the user's drinks.

    Raises:
        DrinkNotFoundError: If drink doesn't exist or is owned by someone else
    """
    try:
        return Drink.objects.select_related('cafe').get(id=drink_id, user_id=user_id)
    except Drink.DoesNotExist:
        raise DrinkNotFoundError("Drink not found")


def create_drink(
    *,
    user_id: str,
    cafe_id: UUID,
    drink_type: str,
    rating: Decimal,
    notes: str = '',
    price: Optional[Decimal] = None,
    flavor_tags: Optional[List[str]] = None,
    logged_at: Optional[datetime] = None,
) -> Drink:
    """
    Log a drink at one of the user's cafes.

    Args:
        user_id: Identity-provider subject of the caller
        cafe_id: Cafe the drink was had at (must belong to the caller)
        drink_type: Free-text label, e.g. "Flat White"
        rating: 0-5 in steps of 0.1
        notes: Tasting notes
        price: Price paid, optional
        flavor_tags: Tags from the closed flavor vocabulary
        logged_at: When the drink was had (defaults to now)

    Returns:
        Created Drink instance

    Raises:
        InvalidRatingError: If rating is outside 0-5
        InvalidCafeReferenceError: If cafe doesn't exist or is owned by someone else
    """
    rating = Decimal(str(rating))
    if rating < MIN_RATING or rating > MAX_RATING:
        raise InvalidRatingError("Rating must be between 0 and 5")

    if not Cafe.objects.filter(id=cafe_id, user_id=user_id).exists():
        raise InvalidCafeReferenceError("Invalid cafe_id")

    # Keep vocabulary order, drop unknown and repeated tags
    requested = set(flavor_tags or [])
    tags = [tag for tag in FlavorTag.values if tag in requested]

    drink = Drink.objects.create(
        user_id=user_id,
        cafe_id=cafe_id,
        drink_type=drink_type.strip(),
        rating=rating,
        notes=notes or '',
        price=price,
        flavor_tags=tags,
        logged_at=logged_at or timezone.now(),
    )
    logger.debug("Logged drink %s for user %s", drink.id, user_id)
    return drink


def delete_drink(*, user_id: str, drink_id: UUID) -> None:
    """
    Delete one of the user's drinks.

    Raises:
        DrinkNotFoundError: If drink doesn't exist or is owned by someone else
    """
    deleted, _ = Drink.objects.filter(id=drink_id, user_id=user_id).delete()
    if not deleted:
        raise DrinkNotFoundError("Drink not found")
