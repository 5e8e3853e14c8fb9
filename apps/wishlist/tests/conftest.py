import pytest
from apps.cafes.models import Cafe
from apps.wishlist.models import WishlistItem


@pytest.fixture
def wishlist_item(db, user_id):
    """Create a wishlist item with full location details."""
    return WishlistItem.objects.create(
        user_id=user_id,
        name='Tartine',
        address='600 Guerrero St',
        city='San Francisco',
        place_id='place_tartine',
        photo_reference='photo_tartine',
        lat=37.76,
        lng=-122.42,
        notes='Try the morning bun',
    )


@pytest.fixture
def foreign_wishlist_item(db, other_user_id):
    """Create a wishlist item owned by the second user."""
    return WishlistItem.objects.create(user_id=other_user_id, name='Secret Spot')


@pytest.fixture
def visited_cafe(db, user_id):
    """Create a cafe the main user already visited."""
    return Cafe.objects.create(user_id=user_id, name='Sightglass', place_id='place_sightglass')
