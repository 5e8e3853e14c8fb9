"""Account management service - bulk operations over a user's journal."""

import logging

from django.db import transaction

from apps.cafes.models import Cafe
from apps.drinks.models import Drink

logger = logging.getLogger(__name__)


@transaction.atomic
def delete_user_data(*, user_id: str) -> dict:
    """
    Irreversibly delete all of a user's drinks and cafes.

    Drinks are removed first so no drink is ever left pointing at a
    deleted cafe. Wishlist items are kept.

    Args:
        user_id: Identity-provider subject of the caller

    Returns:
        Dictionary with the number of deleted drinks and cafes
    """
    drinks_deleted, _ = Drink.objects.filter(user_id=user_id).delete()
    cafes_deleted, _ = Cafe.objects.filter(user_id=user_id).delete()

    logger.info(
        "Deleted journal data for user %s: %d drinks, %d cafes",
        user_id, drinks_deleted, cafes_deleted
    )

    return {
        'drinks_deleted': drinks_deleted,
        'cafes_deleted': cafes_deleted,
    }
