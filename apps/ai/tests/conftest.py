import anthropic
import httpx
import pytest
from datetime import timedelta
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import patch
from django.utils import timezone
from apps.cafes.models import Cafe
from apps.drinks.models import Drink


def tool_response(name, tool_input):
    """Build a fake messages API result carrying one tool call."""
    return SimpleNamespace(
        content=[
            SimpleNamespace(type='text', text='Sure.'),
            SimpleNamespace(type='tool_use', id='toolu_1', name=name, input=tool_input),
        ],
        stop_reason='tool_use',
    )



def upstream_request():
    return httpx.Request('POST', 'https://llm.test/v1/messages')


def api_timeout():
    return anthropic.APITimeoutError(request=upstream_request())


def api_status_error(status_code, message='Overloaded'):
    response = httpx.Response(status_code, request=upstream_request())
    return anthropic.APIStatusError(message, response=response, body=None)

@pytest.fixture
def llm_sdk():
    """Patch the SDK client class used by the LLM client."""
    with patch('apps.ai.client.anthropic.Anthropic') as sdk:
        yield sdk


@pytest.fixture
def llm(llm_sdk):
    """The patched ``messages.create`` call."""
    return llm_sdk.return_value.messages.create


@pytest.fixture
def cafes(db, user_id):
    """Two cafes owned by the main user."""
    return [
        Cafe.objects.create(user_id=user_id, name='Blue Bottle Coffee', city='Oakland'),
        Cafe.objects.create(user_id=user_id, name='Sightglass', city='San Francisco'),
    ]


@pytest.fixture
def tasting_history(db, user_id, cafes):
    """
    Four drinks with flavor tags.

    Fruity appears three times and is rated highest; the Drip is the
    only drink rated below 4.
    """
    blue_bottle, sightglass = cafes
    now = timezone.now()
    specs = [
        (blue_bottle, 'Pour Over', '5.0', ['Fruity', 'Bright'], 4),
        (blue_bottle, 'Pour Over', '4.0', ['Fruity', 'Floral'], 3),
        (sightglass, 'Cortado', '4.5', ['Fruity', 'Chocolatey'], 2),
        (sightglass, 'Drip', '2.0', ['Bitter'], 1),
    ]
    return [
        Drink.objects.create(
            user_id=user_id,
            cafe=cafe,
            drink_type=drink_type,
            rating=Decimal(rating),
            flavor_tags=tags,
            logged_at=now - timedelta(days=days_ago),
        )
        for cafe, drink_type, rating, tags, days_ago in specs
    ]
