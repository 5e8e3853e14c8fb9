"""
AI services - natural-language parsing and recommendations.

Both operations call the hosted LLM through :class:`apps.ai.client.LLMClient`
and validate whatever comes back before it reaches the client.
"""

from .cafe_matching import find_matching_cafe
from .drink_parsing import (
    clamp_rating,
    clamp_price,
    filter_flavor_tags,
    parse_drink_text,
)
from .recommendations import (
    build_taste_profile,
    get_recommendation,
)

from .exceptions import (
    AIServiceError,
    AIServiceNotConfiguredError,
    UpstreamServiceError,
)

__all__ = [
    # Parsing
    'find_matching_cafe',
    'clamp_rating',
    'clamp_price',
    'filter_flavor_tags',
    'parse_drink_text',
    # Recommendations
    'build_taste_profile',
    'get_recommendation',
    # Exceptions
    'AIServiceError',
    'AIServiceNotConfiguredError',
    'UpstreamServiceError',
]
