"""Cafe CRUD operations service."""

from django.db import transaction, IntegrityError
from django.db.models import Count, Max, F, QuerySet
from typing import Optional, Tuple
from uuid import UUID

from ..models import Cafe
from .exceptions import CafeNotFoundError, InvalidCafeError


def get_user_cafes(*, user_id: str) -> QuerySet:
    """
    List a user's cafes with visit statistics.

    Each cafe is annotated with ``drink_count`` and ``last_visit`` (the
    latest ``logged_at`` among its drinks). Ordered by most recent visit,
    never-visited cafes last, then by name.

    Args:
        user_id: Identity-provider subject of the caller

    Returns:
        QuerySet of annotated Cafe instances
    """
    return (
        Cafe.objects
        .filter(user_id=user_id)
        .annotate(
            drink_count=Count('drinks'),
            last_visit=Max('drinks__logged_at'),
        )
        .order_by(F('last_visit').desc(nulls_last=True), 'name')
    )


def get_cafe_by_id(*, user_id: str, cafe_id: UUID) -> Cafe:
    """
    Get one of the user's cafes.

    Raises:
        CafeNotFoundError: If cafe doesn't exist or is owned by someone else
    """
    try:
        return Cafe.objects.get(id=cafe_id, user_id=user_id)
    except Cafe.DoesNotExist:
        raise CafeNotFoundError("Cafe not found")


def find_cafe_by_place(*, user_id: str, place_id: str) -> Optional[Cafe]:
    """Return the user's cafe with this external place reference, if any."""
    if not place_id:
        return None
    return Cafe.objects.filter(user_id=user_id, place_id=place_id).first()


def create_cafe(
    *,
    user_id: str,
    name: str,
    address: str = '',
    city: str = '',
    place_id: str = '',
    photo_reference: str = '',
    lat: Optional[float] = None,
    lng: Optional[float] = None,
) -> Tuple[Cafe, bool]:
    """
    Create a cafe, deduplicated by external place reference.

    If the user already has a cafe with the same ``place_id`` that cafe is
    returned instead of creating a second one.

    Args:
        user_id: Identity-provider subject of the caller
        name: Display name (required)
        address: Street address
        city: City
        place_id: Maps provider place reference
        photo_reference: Maps provider photo reference
        lat: Latitude
        lng: Longitude

    Returns:
        Tuple of (cafe, created)

    Raises:
        InvalidCafeError: If name is blank
    """
    name = (name or '').strip()
    if not name:
        raise InvalidCafeError("Cafe name is required")

    place_id = place_id or ''

    existing = find_cafe_by_place(user_id=user_id, place_id=place_id)
    if existing:
        return existing, False

    try:
        with transaction.atomic():
            cafe = Cafe.objects.create(
                user_id=user_id,
                name=name,
                address=address or '',
                city=city or '',
                place_id=place_id,
                photo_reference=photo_reference or '',
                lat=lat,
                lng=lng,
            )
    except IntegrityError:
        # Concurrent request created the same place first
        existing = find_cafe_by_place(user_id=user_id, place_id=place_id)
        if existing is None:
            raise
        return existing, False

    return cafe, True
