"""Personalized flavor recommendations from a user's drinking history."""

import logging
from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from apps.drinks.models import Drink, FlavorTag
from ..client import LLMClient
from .drink_parsing import filter_flavor_tags

logger = logging.getLogger(__name__)

MIN_DRINKS_FOR_RECOMMENDATIONS = 3
HIGH_RATING = Decimal('4')
RECENT_HIGH_RATED_LIMIT = 5
TOP_DRINK_TYPES_LIMIT = 5

STARTER_RECOMMENDATION = {
    'suggestion': (
        "Log a few more drinks to get personalized recommendations! "
        "Try different flavor profiles to help us understand your preferences."
    ),
    'reasoning': 'You need at least 3 logged drinks for personalized recommendations.',
    'recommended_tags': ['Smooth', 'Chocolatey', 'Caramel'],
    'try_next_drink': None,
}

RECOMMENDATION_TOOL = {
    'name': 'generate_recommendation',
    'description': 'Generate a personalized coffee recommendation based on user preferences',
    'input_schema': {
        'type': 'object',
        'properties': {
            'suggestion': {
                'type': 'string',
                'description': 'A friendly, personalized recommendation (1-2 sentences)',
            },
            'reasoning': {
                'type': 'string',
                'description': 'Brief explanation of why this recommendation fits the user',
            },
            'recommended_tags': {
                'type': 'array',
                'items': {'type': 'string'},
                'description': 'Flavor tags to try next, from: ' + ', '.join(FlavorTag.values),
            },
            'try_next_drink': {
                'type': 'string',
                'description': 'A specific drink type suggestion (e.g., "cortado", "pour over")',
            },
        },
        'required': ['suggestion', 'reasoning', 'recommended_tags'],
    },
}

RECOMMENDATION_PROMPT = """Based on this coffee drinker's profile, generate a personalized recommendation. Be encouraging and specific. Either suggest exploring new flavor profiles they haven't tried, or doubling down on what they love.

{profile}

Generate a friendly recommendation that feels personal to their tastes."""


def _avg(values: List[Decimal]) -> float:
    mean = sum(values, Decimal('0')) / len(values)
    return float(mean.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


def build_taste_profile(*, user_id: str) -> Dict[str, Any]:
    """
    Summarize a user's drinks for the recommendation prompt.

    Returns:
        Dictionary containing:
            - total_drinks (int)
            - flavor_stats (list): ``{tag, count, avg_rating}``, most used first
            - drink_stats (list): top drink types ``{drink_type, count, avg_rating}``
            - recent_high_rated (list): latest drinks rated 4 or more
            - favorite_tags, high_rated_tags, unexplored_tags (list)
    """
    drinks = list(
        Drink.objects
        .filter(user_id=user_id)
        .select_related('cafe')
        .order_by('-logged_at', '-created_at')
    )

    tag_ratings = defaultdict(list)
    type_ratings = defaultdict(list)
    for drink in drinks:
        type_ratings[drink.drink_type].append(drink.rating)
        for tag in set(drink.flavor_tags or ()):
            tag_ratings[tag].append(drink.rating)

    flavor_stats = sorted(
        (
            {'tag': tag, 'count': len(ratings), 'avg_rating': _avg(ratings)}
            for tag, ratings in tag_ratings.items()
        ),
        key=lambda row: (-row['count'], row['tag']),
    )
    drink_stats = sorted(
        (
            {'drink_type': drink_type, 'count': len(ratings), 'avg_rating': _avg(ratings)}
            for drink_type, ratings in type_ratings.items()
        ),
        key=lambda row: (-row['count'], row['drink_type']),
    )[:TOP_DRINK_TYPES_LIMIT]

    recent_high_rated = [
        {
            'drink_type': drink.drink_type,
            'cafe_name': drink.cafe.name,
            'rating': float(drink.rating),
            'flavor_tags': list(drink.flavor_tags or ()),
        }
        for drink in drinks
        if drink.rating >= HIGH_RATING
    ][:RECENT_HIGH_RATED_LIMIT]

    used = {row['tag'] for row in flavor_stats}
    return {
        'total_drinks': len(drinks),
        'flavor_stats': flavor_stats,
        'drink_stats': drink_stats,
        'recent_high_rated': recent_high_rated,
        'favorite_tags': [row['tag'] for row in flavor_stats[:3]],
        'high_rated_tags': [row['tag'] for row in flavor_stats if row['avg_rating'] >= 4],
        'unexplored_tags': [tag for tag in FlavorTag.values if tag not in used],
    }


def format_profile(profile: Dict[str, Any]) -> str:
    """Render the taste profile as prompt text."""
    most_used = ', '.join(
        f"{row['tag']} ({row['count']}x, avg {row['avg_rating']})"
        for row in profile['flavor_stats'][:5]
    )
    favorite_types = ', '.join(
        f"{row['drink_type']} ({row['count']}x)" for row in profile['drink_stats'][:3]
    )
    recent = ', '.join(
        f"{row['drink_type']} at {row['cafe_name']} ({row['rating']}/5)"
        for row in profile['recent_high_rated']
    )
    return '\n'.join([
        'User Coffee Profile:',
        f"- Total drinks logged: {profile['total_drinks']}",
        f"- Most used flavor tags: {most_used or 'None yet'}",
        f"- Highest rated tags: {', '.join(profile['high_rated_tags'][:3]) or 'Not enough data'}",
        f"- Tags not yet explored: {', '.join(profile['unexplored_tags'][:5]) or 'All explored!'}",
        f"- Favorite drink types: {favorite_types or 'Varied'}",
        f"- Recent highly-rated drinks: {recent or 'None recently'}",
    ])


def get_recommendation(*, user_id: str, client: Optional[LLMClient] = None) -> Dict[str, Any]:
    """
    Suggest what to try next.

    With fewer than three drinks a fixed starter suggestion is returned
    and the LLM is not called.

    Args:
        user_id: Identity-provider subject of the caller
        client: LLM client (defaults to one built from settings)

    Returns:
        Dictionary with ``success``, ``recommendation`` and ``user_profile``

    Raises:
        AIServiceNotConfiguredError: If no API key is configured
        UpstreamServiceError: If the LLM call fails
    """
    profile = build_taste_profile(user_id=user_id)

    if profile['total_drinks'] < MIN_DRINKS_FOR_RECOMMENDATIONS:
        return {
            'success': True,
            'recommendation': {
                **STARTER_RECOMMENDATION,
                'recommended_tags': list(STARTER_RECOMMENDATION['recommended_tags']),
            },
            'user_profile': {
                'favorite_tags': [],
                'total_drinks_analyzed': profile['total_drinks'],
            },
        }

    client = client or LLMClient.from_settings()
    answer = client.call_tool(
        prompt=RECOMMENDATION_PROMPT.format(profile=format_profile(profile)),
        tool=RECOMMENDATION_TOOL,
    )

    return {
        'success': True,
        'recommendation': {
            'suggestion': answer.get('suggestion') or '',
            'reasoning': answer.get('reasoning') or '',
            'recommended_tags': filter_flavor_tags(answer.get('recommended_tags')),
            'try_next_drink': answer.get('try_next_drink') or None,
        },
        'user_profile': {
            'favorite_tags': profile['favorite_tags'],
            'high_rated_tags': profile['high_rated_tags'][:5],
            'unexplored_tags': profile['unexplored_tags'],
            'total_drinks_analyzed': profile['total_drinks'],
        },
    }
