"""
Loading a user's drinks for the statistics engine.

The statistics themselves are computed in Python by
:func:`apps.stats.aggregation.compute_statistics`; this module only turns
Drink rows into :class:`~apps.stats.aggregation.DrinkEvent` values.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from django.utils import timezone

from apps.drinks.models import Drink
from .aggregation import DrinkEvent, compute_statistics


class StatsQueries:
    """
    Read-only queries behind ``GET /api/stats``.

    Methods:
        drink_events: All of a user's drinks as engine events.
        user_statistics: Full statistics payload for a user.
    """

    @staticmethod
    def drink_events(user_id: str) -> List[DrinkEvent]:
        rows = (
            Drink.objects
            .filter(user_id=user_id)
            .values_list(
                'id',
                'cafe_id',
                'cafe__name',
                'drink_type',
                'rating',
                'logged_at',
                'created_at',
                'price',
                'flavor_tags',
            )
        )
        return [
            DrinkEvent(
                id=drink_id,
                cafe_id=cafe_id,
                cafe_name=cafe_name,
                drink_type=drink_type,
                rating=rating,
                logged_at=logged_at,
                created_at=created_at,
                price=price,
                flavor_tags=tuple(flavor_tags or ()),
            )
            for (
                drink_id, cafe_id, cafe_name, drink_type, rating,
                logged_at, created_at, price, flavor_tags,
            ) in rows
        ]

    @staticmethod
    def user_statistics(user_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Compute the statistics page for a user.

        Args:
            user_id (str): Identity-provider subject of the caller.
            now (datetime, optional): Reference time; defaults to the
                current time in the server's ``TIME_ZONE``.

        Returns:
            dict: See :func:`~apps.stats.aggregation.compute_statistics`.
        """
        if now is None:
            now = timezone.localtime()
        return compute_statistics(StatsQueries.drink_events(user_id), now)
