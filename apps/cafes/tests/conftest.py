import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from apps.cafes.models import Cafe
from apps.drinks.models import Drink


# =============================================================================
# Cafes
# =============================================================================

@pytest.fixture
def cafe(db, user_id):
    """Create a cafe owned by the main user."""
    return Cafe.objects.create(
        user_id=user_id,
        name='Blue Bottle',
        address='1 Mint Plaza',
        city='San Francisco',
        place_id='place_blue_bottle',
        lat=37.78,
        lng=-122.41,
    )


@pytest.fixture
def unvisited_cafe(db, user_id):
    """Create a cafe with no drinks."""
    return Cafe.objects.create(
        user_id=user_id,
        name='Aroma Corner',
        city='Oakland',
    )


@pytest.fixture
def recent_cafe(db, user_id):
    """Create a cafe visited more recently than ``cafe``."""
    return Cafe.objects.create(
        user_id=user_id,
        name='Zebra Roasters',
        city='Berkeley',
        place_id='place_zebra',
    )


@pytest.fixture
def foreign_cafe(db, other_user_id):
    """Create a cafe owned by the second user."""
    return Cafe.objects.create(
        user_id=other_user_id,
        name='Bob Brews',
        place_id='place_blue_bottle',
    )


@pytest.fixture
def visits(db, user_id, cafe, recent_cafe):
    """Two drinks at ``cafe`` five days ago, one at ``recent_cafe`` yesterday."""
    now = timezone.now()
    return [
        Drink.objects.create(
            user_id=user_id, cafe=cafe, drink_type='Latte',
            rating=Decimal('4.0'), logged_at=now - timedelta(days=5),
        ),
        Drink.objects.create(
            user_id=user_id, cafe=cafe, drink_type='Cortado',
            rating=Decimal('4.5'), logged_at=now - timedelta(days=5, hours=2),
        ),
        Drink.objects.create(
            user_id=user_id, cafe=recent_cafe, drink_type='Drip',
            rating=Decimal('3.0'), logged_at=now - timedelta(days=1),
        ),
    ]
