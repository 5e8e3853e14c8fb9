import pytest
from datetime import timedelta
from decimal import Decimal
from django.utils import timezone
from apps.cafes.models import Cafe
from apps.drinks.models import Drink


@pytest.fixture
def cafe(db, user_id):
    """Create a cafe owned by the main user."""
    return Cafe.objects.create(user_id=user_id, name='Four Barrel', address='375 Valencia St', city='San Francisco')


@pytest.fixture
def second_cafe(db, user_id):
    """Create another cafe owned by the main user."""
    return Cafe.objects.create(user_id=user_id, name='Ritual', city='San Francisco')


@pytest.fixture
def foreign_cafe(db, other_user_id):
    """Create a cafe owned by the second user."""
    return Cafe.objects.create(user_id=other_user_id, name='Elsewhere')


@pytest.fixture
def drinks(db, user_id, cafe, second_cafe):
    """
    Four drinks over four days.

    Latte twice, Mocha and Drip once; the Drip is the most recent.
    """
    now = timezone.now()
    specs = [
        (cafe, 'Latte', '5.0', '4.50', 4),
        (cafe, 'Latte', '5.0', None, 3),
        (second_cafe, 'Mocha', '3.0', '5.25', 2),
        (second_cafe, 'Drip', '1.0', '2.00', 1),
    ]
    return [
        Drink.objects.create(
            user_id=user_id,
            cafe=drink_cafe,
            drink_type=drink_type,
            rating=Decimal(rating),
            price=Decimal(price) if price else None,
            logged_at=now - timedelta(days=days_ago),
        )
        for drink_cafe, drink_type, rating, price, days_ago in specs
    ]


@pytest.fixture
def foreign_drink(db, other_user_id, foreign_cafe):
    """Create a drink owned by the second user."""
    return Drink.objects.create(
        user_id=other_user_id,
        cafe=foreign_cafe,
        drink_type='Espresso',
        rating=Decimal('4.0'),
    )
