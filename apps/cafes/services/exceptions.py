"""Domain-specific exceptions for cafes services."""


class CafesServiceError(Exception):
    """Base exception for cafes services."""
    pass


class CafeNotFoundError(CafesServiceError):
    """Raised when cafe does not exist or belongs to another user."""
    pass


class InvalidCafeError(CafesServiceError):
    """Raised when cafe data fails validation."""
    pass
