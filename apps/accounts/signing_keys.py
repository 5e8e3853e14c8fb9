"""
Signing key cache for identity-provider tokens.

The identity provider publishes its public signing keys as a JSON Web Key
Set. Keys are fetched once, kept for a fixed time-to-live and looked up by
key id (``kid``). An unknown ``kid`` triggers a single early refresh so a
provider key rotation is picked up without waiting for the TTL.

Classes:
    SigningKeyCache: Keyed key-set cache with TTL.

Example:
    Verifying a token header::

        cache = SigningKeyCache(
            jwks_url='https://clerk.example.com/.well-known/jwks.json',
            ttl_seconds=600,
        )
        key = cache.get(jwt.get_unverified_header(token)['kid'])
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Optional

import jwt
import requests

from .services.exceptions import SigningKeyUnavailableError

logger = logging.getLogger(__name__)


def fetch_jwks(url: str, timeout: int = 10) -> Dict[str, Any]:
    """Download a JSON Web Key Set document."""
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.json()


class SigningKeyCache:
    """
    Cache of public signing keys keyed by ``kid``, refreshed after a TTL.

    The fetcher and clock are injectable so the cache can be exercised
    without network access.

    Args:
        jwks_url: URL of the provider's JWKS document.
        ttl_seconds: How long a fetched key set stays valid.
        fetcher: Callable returning the parsed JWKS dict for a URL.
        clock: Monotonic clock returning seconds.
    """

    def __init__(
        self,
        *,
        jwks_url: str,
        ttl_seconds: int = 600,
        fetcher: Optional[Callable[[str], Dict[str, Any]]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.jwks_url = jwks_url
        self.ttl_seconds = ttl_seconds
        self._fetcher = fetcher or fetch_jwks
        self._clock = clock
        self._keys: Dict[str, Any] = {}
        self._fetched_at: Optional[float] = None
        self._lock = threading.Lock()

    def is_expired(self) -> bool:
        if self._fetched_at is None:
            return True
        return self._clock() - self._fetched_at >= self.ttl_seconds

    def get(self, kid: Optional[str]) -> Any:
        """
        Return the public key for ``kid``.

        Raises:
            SigningKeyUnavailableError: If the key set cannot be fetched or
                does not contain ``kid`` even after a refresh.
        """
        with self._lock:
            if self.is_expired():
                self._refresh()
            elif kid not in self._keys:
                # Possible key rotation
                self._refresh()

            try:
                return self._keys[kid]
            except KeyError:
                raise SigningKeyUnavailableError(f"No signing key found for kid {kid!r}")

    def clear(self) -> None:
        with self._lock:
            self._keys = {}
            self._fetched_at = None

    def _refresh(self) -> None:
        try:
            document = self._fetcher(self.jwks_url)
            key_set = jwt.PyJWKSet.from_dict(document)
        except (requests.RequestException, ValueError, jwt.PyJWTError) as e:
            raise SigningKeyUnavailableError("Could not load signing keys") from e

        self._keys = {key.key_id: key.key for key in key_set.keys}
        self._fetched_at = self._clock()
        logger.info("Loaded %d signing keys from %s", len(self._keys), self.jwks_url)
