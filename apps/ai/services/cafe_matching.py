"""Match a free-text cafe name against the user's cafes."""

import re
from typing import Iterable, Optional, TypeVar

T = TypeVar('T')

MIN_WORD_LENGTH = 3


def _name(cafe) -> str:
    return cafe['name'] if isinstance(cafe, dict) else cafe.name


def find_matching_cafe(cafe_name: Optional[str], cafes: Iterable[T]) -> Optional[T]:
    """
    Return the first cafe whose name matches ``cafe_name``.

    Three passes over ``cafes``, in this order, first hit wins:

    1. exact name, ignoring case;
    2. one name contains the other;
    3. a word of three or more letters from the input overlaps a word of
       three or more letters from the cafe name (either contains the other).

    Within a pass the earliest cafe in ``cafes`` wins.

    Args:
        cafe_name: Name as written by the user or extracted by the model.
        cafes: Cafe instances or dicts with a ``name`` key.

    Returns:
        The matching cafe, or None.
    """
    needle = (cafe_name or '').strip().lower()
    if not needle:
        return None

    candidates = [(cafe, _name(cafe).strip().lower()) for cafe in cafes]

    for cafe, name in candidates:
        if name == needle:
            return cafe

    for cafe, name in candidates:
        if name and (needle in name or name in needle):
            return cafe

    words = [w for w in re.split(r'\s+', needle) if len(w) >= MIN_WORD_LENGTH]
    for cafe, name in candidates:
        cafe_words = [w for w in re.split(r'\s+', name) if len(w) >= MIN_WORD_LENGTH]
        if any(w in cw or cw in w for w in words for cw in cafe_words):
            return cafe

    return None
