"""
Drinks services - Business logic layer.

A drink may only reference a cafe owned by the same user; a foreign cafe
is rejected as invalid input rather than surfacing as a database error.
"""

from .drink_management import (
    SORTABLE_FIELDS,
    get_user_drinks,
    get_drink_types,
    get_last_drink,
    get_drink_by_id,
    create_drink,
    delete_drink,
)

from .exceptions import (
    DrinksServiceError,
    DrinkNotFoundError,
    InvalidCafeReferenceError,
    InvalidRatingError,
)

__all__ = [
    # Drink Management Services
    'SORTABLE_FIELDS',
    'get_user_drinks',
    'get_drink_types',
    'get_last_drink',
    'get_drink_by_id',
    'create_drink',
    'delete_drink',
    # Exceptions
    'DrinksServiceError',
    'DrinkNotFoundError',
    'InvalidCafeReferenceError',
    'InvalidRatingError',
]
