import itertools
import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from apps.stats.aggregation import DrinkEvent


# Wednesday afternoon
NOW = datetime(2026, 3, 4, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_event():
    """
    Factory for drink events relative to ``NOW``.

    ``cafe`` doubles as cafe id and name; ``days_ago`` and ``hour`` place
    the event on the calendar.
    """
    ids = itertools.count(1)

    def factory(cafe='A', days_ago=0, hour=9, minute=0, rating='4.0', drink_type='Latte',
                price=None, tags=(), cafe_name=None, at=None):
        if at is None:
            day = (NOW - timedelta(days=days_ago)).date()
            at = datetime(day.year, day.month, day.day, hour, minute, tzinfo=timezone.utc)
        return DrinkEvent(
            id=next(ids),
            cafe_id=cafe,
            cafe_name=cafe_name or cafe,
            drink_type=drink_type,
            rating=Decimal(rating) if isinstance(rating, str) else rating,
            logged_at=at,
            price=Decimal(price) if price is not None else None,
            flavor_tags=tuple(tags),
        )

    return factory
