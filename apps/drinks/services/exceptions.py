"""Domain-specific exceptions for drinks services."""


class DrinksServiceError(Exception):
    """Base exception for drinks services."""
    pass


class DrinkNotFoundError(DrinksServiceError):
    """Raised when drink does not exist or belongs to another user."""
    pass


class InvalidCafeReferenceError(DrinksServiceError):
    """Raised when a drink references a cafe the caller does not own."""
    pass


class InvalidRatingError(DrinksServiceError):
    """Raised when rating is outside the 0-5 range."""
    pass
