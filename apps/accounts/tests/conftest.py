import pytest
from decimal import Decimal
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import RSAAlgorithm
from apps.cafes.models import Cafe
from apps.drinks.models import Drink
from apps.wishlist.models import WishlistItem


# =============================================================================
# Signing keys
# =============================================================================

@pytest.fixture(scope='session')
def rsa_private_key():
    """RSA key pair standing in for the identity provider's signing key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope='session')
def jwks_document(rsa_private_key):
    """JWKS document publishing the public half under kid ``key-1``."""
    jwk = RSAAlgorithm.to_jwk(rsa_private_key.public_key(), as_dict=True)
    jwk.update({'kid': 'key-1', 'use': 'sig', 'alg': 'RS256'})
    return {'keys': [jwk]}


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


# =============================================================================
# Journal data
# =============================================================================

@pytest.fixture
def journal(db, user_id, other_user_id):
    """Two cafes with three drinks and one wishlist item for the main user, one cafe and drink for the other."""
    cafe = Cafe.objects.create(user_id=user_id, name='Verve')
    second = Cafe.objects.create(user_id=user_id, name='Philz')
    for target, drink_type in ((cafe, 'Latte'), (cafe, 'Espresso'), (second, 'Mint Mojito')):
        Drink.objects.create(user_id=user_id, cafe=target, drink_type=drink_type, rating=Decimal('4.0'))
    WishlistItem.objects.create(user_id=user_id, name='Andytown')

    foreign = Cafe.objects.create(user_id=other_user_id, name='Elsewhere')
    Drink.objects.create(user_id=other_user_id, cafe=foreign, drink_type='Drip', rating=Decimal('3.0'))
