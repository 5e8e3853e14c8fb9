import time

import jwt
import pytest
from django.conf import settings
from rest_framework.test import APIClient


def make_token(sub='user_alice', *, expires_in=3600, secret=None, **claims):
    """Mint an HS256 bearer token the way the identity provider would."""
    payload = {'exp': int(time.time()) + expires_in, **claims}
    if sub is not None:
        payload['sub'] = sub
    return jwt.encode(payload, secret or settings.AUTH_SIGNING_SECRET, algorithm='HS256')


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def user_id():
    """Identity-provider subject of the main test user."""
    return 'user_alice'


@pytest.fixture
def other_user_id():
    """Identity-provider subject of a second, unrelated user."""
    return 'user_bob'


@pytest.fixture
def auth_client(user_id):
    """Return API client authenticated as the main user."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {make_token(user_id)}')
    return client


@pytest.fixture
def other_client(other_user_id):
    """Return API client authenticated as the second user."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {make_token(other_user_id)}')
    return client
