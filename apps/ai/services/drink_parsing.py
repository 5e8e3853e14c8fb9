"""Natural-language drink logging: text in, validated drink draft out."""

import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional

from apps.cafes.models import Cafe
from apps.drinks.models import FlavorTag
from ..client import LLMClient
from .cafe_matching import find_matching_cafe

logger = logging.getLogger(__name__)

MIN_PARSED_RATING = 1
MAX_PARSED_RATING = 5
MIN_PRICE = 0.0
MAX_PRICE = 100.0

PARSE_DRINK_TOOL = {
    'name': 'parse_drink',
    'description': 'Parse natural language coffee drink description into structured data',
    'input_schema': {
        'type': 'object',
        'properties': {
            'drink_type': {
                'type': 'string',
                'description': 'The type of coffee drink, properly capitalized (e.g., "Cortado", "Pour Over", "Flat White", "Latte")',
            },
            'cafe_name': {
                'type': 'string',
                'description': 'The name of the cafe, capitalized as a business name (e.g., "Blue Bottle")',
            },
            'location_hint': {
                'type': 'string',
                'description': 'Any location info mentioned (city, neighborhood, landmark, address) to help find the cafe',
            },
            'flavor_tags': {
                'type': 'array',
                'items': {'type': 'string'},
                'description': 'Flavor descriptors from: ' + ', '.join(FlavorTag.values),
            },
            'price': {
                'type': 'number',
                'description': 'The price in dollars if mentioned',
            },
            'rating': {
                'type': 'number',
                'description': 'Rating 1-5 inferred from sentiment. 5=amazing, 4=great, 3=good, 2=mediocre, 1=bad',
            },
            'notes': {
                'type': 'string',
                'description': 'Only extra context not captured by the other fields. Empty if nothing to add.',
            },
            'interpretation': {
                'type': 'string',
                'description': 'Brief explanation of how the input was interpreted',
            },
        },
        'required': ['interpretation'],
    },
}

PARSE_PROMPT = """You are parsing a coffee drink log entry. Extract all available information from the user's natural language input.

FORMATTING RULES:
1. Capitalize drink_type properly: "Cortado", "Pour Over", "Flat White", "Cold Brew".
2. Capitalize cafe_name as a proper business name: "Blue Bottle", "Stumptown Coffee".
3. Put any location info (city, neighborhood, landmark, street) into location_hint.
4. Only put truly extra info in notes; do not repeat drink type, cafe, location, price, sentiment or flavors.

{cafe_list}

Valid flavor tags (only use these exact values): {flavor_tags}

Rating inference guide:
- "amazing", "incredible", "perfect", "loved it" -> 5
- "great", "really good", "enjoyed", "solid" -> 4
- "good", "decent", "fine", "nice" -> 3
- "mediocre", "meh", "not great", "disappointing" -> 2
- "bad", "terrible", "awful", "couldn't finish" -> 1

If no sentiment is expressed, do not include a rating.

Parse this text: "{text}\""""


def _as_number(value) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def clamp_rating(value) -> Optional[int]:
    """Round half up to a whole star and clamp to 1-5; None if absent or not numeric."""
    number = _as_number(value)
    if number is None:
        return None
    rounded = int(number.quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    return max(MIN_PARSED_RATING, min(MAX_PARSED_RATING, rounded))


def clamp_price(value) -> Optional[float]:
    """Clamp to 0-100; None if absent or not numeric."""
    number = _as_number(value)
    if number is None:
        return None
    return max(MIN_PRICE, min(MAX_PRICE, float(number)))


def filter_flavor_tags(tags) -> List[str]:
    """Keep only vocabulary tags, first occurrence order."""
    if not isinstance(tags, (list, tuple)):
        return []
    valid = set(FlavorTag.values)
    result = []
    for tag in tags:
        if tag in valid and tag not in result:
            result.append(tag)
    return result


def _text_or_none(value) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def build_parse_prompt(text: str, cafe_names: Iterable[str]) -> str:
    names = list(cafe_names)
    cafe_list = (
        f"User's existing cafes: {', '.join(names)}"
        if names else
        'User has no existing cafes yet.'
    )
    return PARSE_PROMPT.format(
        cafe_list=cafe_list,
        flavor_tags=', '.join(FlavorTag.values),
        text=text,
    )


def parse_drink_text(*, user_id: str, text: str, client: Optional[LLMClient] = None) -> Dict[str, Any]:
    """
    Turn a free-text drink description into a drink draft.

    The user's cafes are listed in the prompt and the extracted cafe name
    is matched against them, so the draft can point at an existing cafe.
    Model output is never trusted as-is: rating, price and flavor tags are
    validated here.

    Args:
        user_id: Identity-provider subject of the caller
        text: What the user typed (1-1000 characters)
        client: LLM client (defaults to one built from settings)

    Returns:
        Dictionary with ``success``, ``data`` (the draft) and
        ``raw_interpretation``

    Raises:
        AIServiceNotConfiguredError: If no API key is configured
        UpstreamServiceError: If the LLM call fails
    """
    client = client or LLMClient.from_settings()
    cafes = list(Cafe.objects.filter(user_id=user_id).order_by('name').only('id', 'name'))

    parsed = client.call_tool(
        prompt=build_parse_prompt(text, (cafe.name for cafe in cafes)),
        tool=PARSE_DRINK_TOOL,
    )

    cafe_name = _text_or_none(parsed.get('cafe_name'))
    location_hint = _text_or_none(parsed.get('location_hint'))
    matched = find_matching_cafe(cafe_name, cafes)

    places_search_query = None
    if cafe_name and matched is None:
        places_search_query = f'{cafe_name} {location_hint}' if location_hint else cafe_name

    logger.debug("Parsed drink text for user %s (matched cafe: %s)", user_id, matched and matched.id)

    return {
        'success': True,
        'data': {
            'drink_type': _text_or_none(parsed.get('drink_type')),
            'cafe_name': cafe_name,
            'cafe_id': str(matched.id) if matched else None,
            'matched_cafe_name': matched.name if matched else None,
            'location_hint': location_hint,
            'places_search_query': places_search_query,
            'flavor_tags': filter_flavor_tags(parsed.get('flavor_tags')),
            'price': clamp_price(parsed.get('price')),
            'rating': clamp_rating(parsed.get('rating')),
            'notes': _text_or_none(parsed.get('notes')),
        },
        'raw_interpretation': _text_or_none(parsed.get('interpretation')) or 'Parsed coffee drink entry',
    }
