"""Wishlist operations service."""

import logging
import re
from typing import Optional, Tuple
from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.cafes.models import Cafe
from apps.cafes.services import find_cafe_by_place
from ..models import WishlistItem
from .exceptions import (
    WishlistItemNotFoundError,
    InvalidWishlistItemError,
    DuplicateWishlistItemError,
    AlreadyVisitedError,
)

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 1000
TAG_PATTERN = re.compile(r'<[^>]*>')


def sanitize_text(text: Optional[str], max_length: int = MAX_TEXT_LENGTH) -> str:
    """Strip HTML tags and clip to ``max_length`` characters."""
    if not text:
        return ''
    return TAG_PATTERN.sub('', text)[:max_length]


def _field_length(name: str) -> int:
    return WishlistItem._meta.get_field(name).max_length


def get_wishlist(*, user_id: str) -> QuerySet:
    """List a user's wishlist, newest first."""
    return WishlistItem.objects.filter(user_id=user_id).order_by('-created_at', 'id')


def add_wishlist_item(
    *,
    user_id: str,
    name: str,
    address: Optional[str] = None,
    city: Optional[str] = None,
    place_id: Optional[str] = None,
    photo_reference: Optional[str] = None,
    lat: Optional[float] = None,
    lng: Optional[float] = None,
    notes: Optional[str] = None,
) -> WishlistItem:
    """
    Add a place to the wishlist.

    Free-text fields are sanitized before storage. When a ``place_id`` is
    given the place must be neither on the wishlist already nor one of the
    user's cafes.

    Args:
        user_id: Identity-provider subject of the caller
        name: Display name (required)
        address: Street address
        city: City
        place_id: Maps provider place reference
        photo_reference: Maps provider photo reference
        lat: Latitude
        lng: Longitude
        notes: Why the user wants to go

    Returns:
        Created WishlistItem instance

    Raises:
        InvalidWishlistItemError: If name is blank after sanitizing
        DuplicateWishlistItemError: If place is already on the wishlist
        AlreadyVisitedError: If place is already one of the user's cafes
    """
    name = sanitize_text(name, _field_length('name')).strip()
    if not name:
        raise InvalidWishlistItemError("name is required")

    place_id = place_id or ''
    if place_id:
        if WishlistItem.objects.filter(user_id=user_id, place_id=place_id).exists():
            raise DuplicateWishlistItemError("Already in wishlist")
        if find_cafe_by_place(user_id=user_id, place_id=place_id):
            raise AlreadyVisitedError("Already visited this cafe")

    try:
        with transaction.atomic():
            return WishlistItem.objects.create(
                user_id=user_id,
                name=name,
                address=sanitize_text(address, _field_length('address')),
                city=sanitize_text(city, _field_length('city')),
                place_id=place_id,
                photo_reference=photo_reference or '',
                lat=lat,
                lng=lng,
                notes=sanitize_text(notes),
            )
    except IntegrityError:
        raise DuplicateWishlistItemError("Already in wishlist")


def remove_wishlist_item(*, user_id: str, item_id: UUID) -> None:
    """
    Remove an item from the wishlist.

    Raises:
        WishlistItemNotFoundError: If item doesn't exist or is owned by someone else
    """
    deleted, _ = WishlistItem.objects.filter(id=item_id, user_id=user_id).delete()
    if not deleted:
        raise WishlistItemNotFoundError("Wishlist item not found")


@transaction.atomic
def convert_to_cafe(*, user_id: str, item_id: UUID) -> Tuple[Cafe, bool]:
    """
    Move a wishlist item to the user's cafes.

    The cafe insert and the wishlist delete commit together. The item row
    is locked for the duration so two concurrent conversions cannot both
    create a cafe. If the user already has a cafe for the same place that
    cafe is reused.

    Args:
        user_id: Identity-provider subject of the caller
        item_id: Wishlist item to convert

    Returns:
        Tuple of (cafe, created)

    Raises:
        WishlistItemNotFoundError: If item doesn't exist or is owned by someone else
    """
    try:
        item = WishlistItem.objects.select_for_update().get(id=item_id, user_id=user_id)
    except WishlistItem.DoesNotExist:
        raise WishlistItemNotFoundError("Wishlist item not found")

    cafe = find_cafe_by_place(user_id=user_id, place_id=item.place_id)
    created = cafe is None
    if created:
        cafe = Cafe.objects.create(
            user_id=user_id,
            name=item.name,
            address=item.address,
            city=item.city,
            place_id=item.place_id,
            photo_reference=item.photo_reference,
            lat=item.lat,
            lng=item.lng,
        )

    item.delete()
    logger.info(
        "Converted wishlist item %s to cafe %s for user %s (created=%s)",
        item_id, cafe.id, user_id, created
    )
    return cafe, created
