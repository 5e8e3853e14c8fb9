"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialError,
    MissingSubjectError,
    SigningKeyUnavailableError,
)
from .account_management import delete_user_data

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialError',
    'MissingSubjectError',
    'SigningKeyUnavailableError',
    # Services
    'delete_user_data',
]
