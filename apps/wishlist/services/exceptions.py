"""Domain-specific exceptions for wishlist services."""


class WishlistServiceError(Exception):
    """Base exception for wishlist services."""
    pass


class WishlistItemNotFoundError(WishlistServiceError):
    """Raised when wishlist item does not exist or belongs to another user."""
    pass


class InvalidWishlistItemError(WishlistServiceError):
    """Raised when wishlist item data fails validation."""
    pass


class DuplicateWishlistItemError(WishlistServiceError):
    """Raised when the place is already on the wishlist."""
    pass


class AlreadyVisitedError(WishlistServiceError):
    """Raised when the place is already one of the user's cafes."""
    pass
