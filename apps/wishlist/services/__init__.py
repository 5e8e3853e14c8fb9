"""
Wishlist services - Business logic layer.

Converting an item to a cafe is a move: the cafe is created and the item
deleted in one transaction.
"""

from .wishlist_management import (
    sanitize_text,
    get_wishlist,
    add_wishlist_item,
    remove_wishlist_item,
    convert_to_cafe,
)

from .exceptions import (
    WishlistServiceError,
    WishlistItemNotFoundError,
    InvalidWishlistItemError,
    DuplicateWishlistItemError,
    AlreadyVisitedError,
)

__all__ = [
    # Wishlist Management Services
    'sanitize_text',
    'get_wishlist',
    'add_wishlist_item',
    'remove_wishlist_item',
    'convert_to_cafe',
    # Exceptions
    'WishlistServiceError',
    'WishlistItemNotFoundError',
    'InvalidWishlistItemError',
    'DuplicateWishlistItemError',
    'AlreadyVisitedError',
]
