"""
Management command to create a sample coffee journal.

Usage:
    python manage.py create_sample_data --user <subject>

This creates, for the given identity-provider subject:
- 5 cafes
- 40 drinks spread over the last 60 days
- 3 wishlist items
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone
from decimal import Decimal
from datetime import timedelta
import random

from apps.accounts.services import delete_user_data
from apps.cafes.models import Cafe
from apps.drinks.models import Drink, FlavorTag
from apps.wishlist.models import WishlistItem


CAFES = [
    {'name': 'Blue Bottle Coffee', 'address': '66 Mint St', 'city': 'San Francisco',
     'place_id': 'sample_blue_bottle', 'lat': 37.7825, 'lng': -122.4074},
    {'name': 'Sightglass', 'address': '270 7th St', 'city': 'San Francisco',
     'place_id': 'sample_sightglass', 'lat': 37.7770, 'lng': -122.4085},
    {'name': 'Ritual Coffee Roasters', 'address': '1026 Valencia St', 'city': 'San Francisco',
     'place_id': 'sample_ritual', 'lat': 37.7564, 'lng': -122.4214},
    {'name': 'Four Barrel', 'address': '375 Valencia St', 'city': 'San Francisco',
     'place_id': 'sample_four_barrel', 'lat': 37.7670, 'lng': -122.4220},
    {'name': 'Philz Coffee', 'address': '3101 24th St', 'city': 'San Francisco',
     'place_id': 'sample_philz', 'lat': 37.7527, 'lng': -122.4149},
]

WISHLIST = [
    {'name': 'Tartine Manufactory', 'address': '595 Alabama St', 'city': 'San Francisco',
     'place_id': 'sample_tartine', 'notes': 'Try the cortado'},
    {'name': 'Andytown', 'address': '3655 Lawton St', 'city': 'San Francisco',
     'place_id': 'sample_andytown', 'notes': 'Snowy plover'},
    {'name': 'Verve', 'city': 'Santa Cruz', 'place_id': 'sample_verve'},
]

DRINK_TYPES = ['Latte', 'Cortado', 'Pour Over', 'Flat White', 'Espresso', 'Cold Brew', 'Cappuccino']
RATINGS = [Decimal(r) for r in ('3.0', '3.5', '4.0', '4.0', '4.5', '4.5', '5.0')]


class Command(BaseCommand):
    help = 'Create a sample coffee journal for one user'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user',
            required=True,
            help='Identity-provider subject (sub claim) that owns the data',
        )
        parser.add_argument(
            '--clear',
            action='store_true',
            help="Delete the user's existing journal first",
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=42,
            help='Random seed for reproducible data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        user_id = options['user']
        rng = random.Random(options['seed'])

        if options['clear']:
            self.stdout.write('Clearing existing data...')
            delete_user_data(user_id=user_id)
            WishlistItem.objects.filter(user_id=user_id).delete()

        self.stdout.write('Creating sample data...')

        cafes = self.create_cafes(user_id)
        drinks = self.create_drinks(user_id, cafes, rng)
        wishlist = self.create_wishlist(user_id)

        self.stdout.write(self.style.SUCCESS(
            f'Created {len(cafes)} cafes, {drinks} drinks and {wishlist} wishlist items for {user_id}'
        ))

    def create_cafes(self, user_id):
        """Create cafes, reusing ones that already exist."""
        self.stdout.write('  Creating cafes...')

        cafes = []
        for data in CAFES:
            cafe, _ = Cafe.objects.get_or_create(
                user_id=user_id,
                place_id=data['place_id'],
                defaults=data,
            )
            cafes.append(cafe)
        return cafes

    def create_drinks(self, user_id, cafes, rng):
        """Log drinks over the last 60 days, favoring the first two cafes."""
        self.stdout.write('  Creating drinks...')

        now = timezone.now()
        weights = [5, 4, 2, 2, 1]
        tags = list(FlavorTag.values)

        drinks = []
        for _ in range(40):
            picked = set(rng.sample(tags, 2))
            logged_at = now - timedelta(
                days=rng.randint(0, 59),
                hours=rng.randint(0, 10),
                minutes=rng.randint(0, 59),
            )
            drinks.append(Drink(
                user_id=user_id,
                cafe=rng.choices(cafes, weights=weights)[0],
                drink_type=rng.choice(DRINK_TYPES),
                rating=rng.choice(RATINGS),
                price=Decimal(rng.randint(300, 700)) / 100,
                flavor_tags=[t for t in tags if t in picked],
                logged_at=logged_at,
            ))

        Drink.objects.bulk_create(drinks)
        return len(drinks)

    def create_wishlist(self, user_id):
        """Add wishlist items not already saved or visited."""
        self.stdout.write('  Creating wishlist...')

        created = 0
        for data in WISHLIST:
            if Cafe.objects.filter(user_id=user_id, place_id=data['place_id']).exists():
                continue
            _, was_created = WishlistItem.objects.get_or_create(
                user_id=user_id,
                place_id=data['place_id'],
                defaults=data,
            )
            created += was_created
        return created
