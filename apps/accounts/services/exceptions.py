"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidCredentialError(AccountsServiceError):
    """Raised when a bearer token is malformed, expired or badly signed."""
    pass


class MissingSubjectError(InvalidCredentialError):
    """Raised when a verified token carries no subject claim."""
    pass


class SigningKeyUnavailableError(InvalidCredentialError):
    """Raised when the identity provider's signing key cannot be resolved."""
    pass
