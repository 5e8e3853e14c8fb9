"""
Generic run detection over an ordered sequence.

A *run* is a maximal stretch of consecutive items in which every item
continues the one before it according to a caller-supplied predicate.
Daily streaks (each date is the day after the previous one) and cafe
loyalty streaks (each drink is at the same cafe as the previous one) are
both runs; only the predicate differs.

Example:
    Longest stretch of consecutive integers::

        scan = scan_runs([1, 2, 3, 7, 8], lambda prev, item: item == prev + 1)
        scan.longest.length   # 3
        scan.last.length      # 2
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, NamedTuple, Optional


@dataclass(frozen=True)
class Run:
    """A run of ``length`` items, ``first`` and ``last`` inclusive, starting at ``start``."""

    start: int
    length: int
    first: Any
    last: Any


class StreakScan(NamedTuple):
    longest: Optional[Run]
    last: Optional[Run]


def scan_runs(items: Iterable[Any], continues: Callable[[Any, Any], bool]) -> StreakScan:
    """
    Walk ``items`` once and report the longest and the final run.

    Args:
        items: Items already in sequence order.
        continues: ``continues(previous, item)`` is True when ``item``
            extends the run ending at ``previous``.

    Returns:
        StreakScan: ``longest`` is the first run of maximal length,
        ``last`` the run containing the final item. Both are None for an
        empty sequence.
    """
    longest = None
    current = None

    for index, item in enumerate(items):
        if current is not None and continues(current.last, item):
            current = Run(current.start, current.length + 1, current.first, item)
        else:
            current = Run(index, 1, item, item)

        # Strict comparison keeps the earliest run on ties
        if longest is None or current.length > longest.length:
            longest = current

    return StreakScan(longest, current)
