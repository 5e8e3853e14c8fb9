"""
Bearer-token authentication against a hosted identity provider.

Every API request carries ``Authorization: Bearer <token>``. The token is
verified here and its ``sub`` claim becomes the caller's identifier; all
row-sets are filtered by that identifier. Requests without a resolvable
identifier are rejected with 401 before any view code runs.

Classes:
    TokenVerifier: Verifies a raw token and returns its claims.
    ProviderJWTAuthentication: DRF authentication class using the verifier.
"""

import logging
from functools import partial
from typing import Any, Dict, Optional, Union

import jwt
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken

from .services.exceptions import (
    InvalidCredentialError,
    MissingSubjectError,
    SigningKeyUnavailableError,
)
from .signing_keys import SigningKeyCache, fetch_jwks

logger = logging.getLogger(__name__)


class TokenVerifier:
    """
    Verify identity-provider tokens.

    With a ``key_cache`` tokens must be RS256-signed by one of the
    provider's published keys. Without one they must be HS256-signed with
    ``signing_secret`` (local development and tests).

    Args:
        signing_secret: Shared secret for HS256 tokens.
        key_cache: SigningKeyCache holding the provider's public keys.
        leeway: Clock skew tolerated on ``exp``/``nbf``, in seconds.
    """

    def __init__(
        self,
        *,
        signing_secret: Optional[str] = None,
        key_cache: Optional[SigningKeyCache] = None,
        leeway: int = 30,
    ):
        if key_cache is None and not signing_secret:
            raise ValueError("Either a key cache or a signing secret is required")
        self.signing_secret = signing_secret
        self.key_cache = key_cache
        self.leeway = leeway

    def verify(self, raw_token: Union[str, bytes]) -> Dict[str, Any]:
        """
        Verify ``raw_token`` and return its claims.

        Raises:
            InvalidCredentialError: Malformed, expired or badly signed token.
            SigningKeyUnavailableError: Provider key could not be resolved.
            MissingSubjectError: Token is valid but has no ``sub`` claim.
        """
        try:
            if self.key_cache is not None:
                header = jwt.get_unverified_header(raw_token)
                key = self.key_cache.get(header.get('kid'))
                algorithms = ['RS256']
            else:
                key = self.signing_secret
                algorithms = ['HS256']

            claims = jwt.decode(
                raw_token,
                key,
                algorithms=algorithms,
                leeway=self.leeway,
                options={'require': ['exp'], 'verify_aud': False},
            )
        except jwt.PyJWTError as e:
            raise InvalidCredentialError(str(e)) from e

        if not claims.get('sub'):
            raise MissingSubjectError("Token is missing the subject claim")

        return claims


def build_token_verifier(settings) -> TokenVerifier:
    """
    Create the process-wide verifier from Django settings.

    Raises:
        ImproperlyConfigured: If neither a JWKS URL nor a signing secret is set.
    """
    if not settings.AUTH_JWKS_URL and not settings.AUTH_SIGNING_SECRET:
        raise ImproperlyConfigured(
            "Token verification needs AUTH_ISSUER_DOMAIN, AUTH_JWKS_URL or AUTH_SIGNING_SECRET"
        )

    key_cache = None
    if settings.AUTH_JWKS_URL:
        key_cache = SigningKeyCache(
            jwks_url=settings.AUTH_JWKS_URL,
            ttl_seconds=settings.AUTH_JWKS_CACHE_TTL,
            fetcher=partial(fetch_jwks, timeout=settings.AUTH_JWKS_TIMEOUT),
        )
    return TokenVerifier(
        signing_secret=settings.AUTH_SIGNING_SECRET,
        key_cache=key_cache,
    )


class ProviderJWTAuthentication(JWTStatelessUserAuthentication):
    """
    Authenticate requests with identity-provider bearer tokens.

    Header parsing and the stateless ``TokenUser`` come from simplejwt;
    signature verification is delegated to the ``TokenVerifier`` held by
    the accounts app config, so the signing-key cache lives as long as the
    process and can be swapped in tests.
    """

    www_authenticate_realm = 'api'

    def get_verifier(self) -> TokenVerifier:
        return apps.get_app_config('accounts').token_verifier

    def get_validated_token(self, raw_token):
        try:
            return self.get_verifier().verify(raw_token)
        except SigningKeyUnavailableError as e:
            logger.warning("Signing key unavailable: %s", e)
            raise InvalidToken({'detail': 'Token verification failed'})
        except MissingSubjectError:
            raise InvalidToken({'detail': 'Invalid token: missing user ID'})
        except InvalidCredentialError as e:
            logger.warning("Rejected bearer token: %s", e)
            raise InvalidToken({'detail': 'Invalid or expired token'})
