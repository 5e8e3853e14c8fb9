"""
Cafes services - Business logic layer.

All operations are scoped to the caller's identifier; a cafe owned by
another user behaves exactly like a missing one.
"""

from .cafe_management import (
    get_user_cafes,
    get_cafe_by_id,
    find_cafe_by_place,
    create_cafe,
)

from .exceptions import (
    CafesServiceError,
    CafeNotFoundError,
    InvalidCafeError,
)

__all__ = [
    # Cafe Management Services
    'get_user_cafes',
    'get_cafe_by_id',
    'find_cafe_by_place',
    'create_cafe',
    # Exceptions
    'CafesServiceError',
    'CafeNotFoundError',
    'InvalidCafeError',
]
