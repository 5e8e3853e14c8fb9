import time
import jwt
import pytest
from types import SimpleNamespace
from unittest.mock import Mock, patch
from django.core.exceptions import ImproperlyConfigured
from rest_framework_simplejwt.exceptions import InvalidToken
from apps.accounts.authentication import (
    ProviderJWTAuthentication,
    TokenVerifier,
    build_token_verifier,
)
from apps.accounts.services import (
    InvalidCredentialError,
    MissingSubjectError,
    SigningKeyUnavailableError,
)
from apps.accounts.signing_keys import SigningKeyCache


def rs256_token(private_key, kid='key-1', **claims):
    payload = {'sub': 'user_rsa', 'exp': int(time.time()) + 600, **claims}
    return jwt.encode(payload, private_key, algorithm='RS256', headers={'kid': kid})


@pytest.fixture
def rsa_verifier(jwks_document, clock):
    cache = SigningKeyCache(
        jwks_url='https://auth.example.com/.well-known/jwks.json',
        fetcher=Mock(return_value=jwks_document),
        clock=clock,
    )
    return TokenVerifier(key_cache=cache)


class TestTokenVerifier:
    """Tests for TokenVerifier."""

    def test_requires_key_source(self):
        with pytest.raises(ValueError):
            TokenVerifier()

    def test_hs256_token(self):
        verifier = TokenVerifier(signing_secret='secret')
        token = jwt.encode({'sub': 'user_1', 'exp': int(time.time()) + 60}, 'secret', algorithm='HS256')

        assert verifier.verify(token)['sub'] == 'user_1'

    def test_exp_required(self):
        verifier = TokenVerifier(signing_secret='secret')
        token = jwt.encode({'sub': 'user_1'}, 'secret', algorithm='HS256')

        with pytest.raises(InvalidCredentialError):
            verifier.verify(token)

    def test_leeway_tolerates_small_skew(self):
        verifier = TokenVerifier(signing_secret='secret', leeway=30)
        token = jwt.encode({'sub': 'user_1', 'exp': int(time.time()) - 10}, 'secret', algorithm='HS256')

        assert verifier.verify(token)['sub'] == 'user_1'

    def test_missing_subject(self):
        verifier = TokenVerifier(signing_secret='secret')
        token = jwt.encode({'exp': int(time.time()) + 60}, 'secret', algorithm='HS256')

        with pytest.raises(MissingSubjectError):
            verifier.verify(token)

    def test_rs256_token(self, rsa_verifier, rsa_private_key):
        claims = rsa_verifier.verify(rs256_token(rsa_private_key))

        assert claims['sub'] == 'user_rsa'

    def test_rs256_rejects_hs256(self, rsa_verifier):
        """With a key set configured, shared-secret tokens are refused."""
        token = jwt.encode(
            {'sub': 'user_1', 'exp': int(time.time()) + 60},
            'secret',
            algorithm='HS256',
            headers={'kid': 'key-1'},
        )

        with pytest.raises(InvalidCredentialError):
            rsa_verifier.verify(token)

    def test_rs256_unknown_kid(self, rsa_verifier, rsa_private_key):
        with pytest.raises(SigningKeyUnavailableError):
            rsa_verifier.verify(rs256_token(rsa_private_key, kid='rotated-away'))


class TestBuildTokenVerifier:
    """Tests for build_token_verifier."""

    def test_without_jwks_url(self):
        settings = SimpleNamespace(
            AUTH_JWKS_URL='',
            AUTH_SIGNING_SECRET='secret',
            AUTH_JWKS_CACHE_TTL=600,
            AUTH_JWKS_TIMEOUT=10,
        )
        verifier = build_token_verifier(settings)

        assert verifier.key_cache is None
        assert verifier.signing_secret == 'secret'

    def test_with_jwks_url(self):
        settings = SimpleNamespace(
            AUTH_JWKS_URL='https://auth.example.com/.well-known/jwks.json',
            AUTH_SIGNING_SECRET='secret',
            AUTH_JWKS_CACHE_TTL=300,
            AUTH_JWKS_TIMEOUT=10,
        )
        verifier = build_token_verifier(settings)

        assert verifier.key_cache.jwks_url == settings.AUTH_JWKS_URL
        assert verifier.key_cache.ttl_seconds == 300

    def test_unconfigured_refuses_to_start(self):
        settings = SimpleNamespace(
            AUTH_JWKS_URL='',
            AUTH_SIGNING_SECRET='',
            AUTH_JWKS_CACHE_TTL=600,
            AUTH_JWKS_TIMEOUT=10,
        )

        with pytest.raises(ImproperlyConfigured):
            build_token_verifier(settings)


class TestProviderJWTAuthentication:
    """Tests for mapping verifier failures to 401 responses."""

    @pytest.mark.parametrize('error, message', [
        (SigningKeyUnavailableError('down'), 'Token verification failed'),
        (MissingSubjectError('no sub'), 'Invalid token: missing user ID'),
        (InvalidCredentialError('bad'), 'Invalid or expired token'),
    ])
    def test_error_mapping(self, error, message):
        verifier = Mock()
        verifier.verify.side_effect = error
        auth = ProviderJWTAuthentication()

        with patch.object(ProviderJWTAuthentication, 'get_verifier', return_value=verifier):
            with pytest.raises(InvalidToken) as excinfo:
                auth.get_validated_token('token')

        assert excinfo.value.detail['detail'] == message

    def test_user_identifier_is_subject(self, rsa_verifier, rsa_private_key):
        auth = ProviderJWTAuthentication()
        request = SimpleNamespace(
            META={'HTTP_AUTHORIZATION': f'Bearer {rs256_token(rsa_private_key)}'}
        )

        with patch.object(ProviderJWTAuthentication, 'get_verifier', return_value=rsa_verifier):
            user, claims = auth.authenticate(request)

        assert user.id == 'user_rsa'
        assert user.is_authenticated
        assert claims['sub'] == 'user_rsa'
