"""
Journal Statistics Engine
=========================

Computes every figure shown on the statistics page from a user's drink
events. The engine is a pure function of the event list and the current
time: it performs no queries and keeps no state, so it can be exercised
with hand-built events and a fixed ``now``.

Conventions:
    - ``logged_at`` is the event time for every statistic; ``created_at``
      only breaks ties between events logged at the same instant.
    - Calendar bucketing (days, weeks, months, hours) happens in the
      timezone of ``now``.
    - Weeks start on Monday. Days of week are numbered 0=Sunday through
      6=Saturday.
    - Events with a missing timestamp, a missing rating or a rating
      outside 0-5 are left out of every statistic.

Example:
    Statistics for two drinks::

        from apps.stats.aggregation import DrinkEvent, compute_statistics

        stats = compute_statistics(
            [
                DrinkEvent(id=1, cafe_id='a', cafe_name='Ritual', drink_type='Latte',
                           rating=Decimal('4.5'), logged_at=yesterday),
                DrinkEvent(id=2, cafe_id='a', cafe_name='Ritual', drink_type='Drip',
                           rating=Decimal('3.0'), logged_at=today),
            ],
            now=timezone.localtime(),
        )
        stats['daily_streak']    # 2
        stats['current_streak']  # {'cafe_id': 'a', 'cafe_name': 'Ritual', 'count': 2}
"""

import logging
from collections import Counter, defaultdict
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence

from .streaks import Run, scan_runs

logger = logging.getLogger(__name__)

MIN_RATING = Decimal('0')
MAX_RATING = Decimal('5')
TOP_CAFES_LIMIT = 5
SPENDING_BY_CAFE_LIMIT = 5
TREND_WEEKS = 12

DAY_NAMES = ('Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')

# (name, first hour, end hour exclusive)
TIME_BUCKETS = (
    ('morning', 0, 12),
    ('afternoon', 12, 17),
    ('evening', 17, 24),
)


class Milestone(NamedTuple):
    metric: str
    threshold: int
    label: str


MILESTONES = (
    Milestone('total_drinks', 1, 'First Sip'),
    Milestone('total_drinks', 10, 'Regular'),
    Milestone('total_drinks', 50, 'Coffee Enthusiast'),
    Milestone('total_drinks', 100, 'Centurion'),
    Milestone('total_drinks', 500, 'Caffeine Legend'),
    Milestone('unique_cafes', 5, 'Explorer'),
    Milestone('unique_cafes', 10, 'Cafe Hopper'),
    Milestone('unique_cafes', 25, 'Globetrotter'),
    Milestone('unique_drink_types', 5, 'Adventurous Palate'),
    Milestone('unique_drink_types', 10, 'Connoisseur'),
    Milestone('longest_daily_streak', 7, 'Week Streak'),
    Milestone('longest_daily_streak', 30, 'Month Streak'),
)


@dataclass(frozen=True)
class DrinkEvent:
    """One logged drink, reduced to the fields the engine reads."""

    id: Any
    cafe_id: Any
    cafe_name: str
    drink_type: str
    rating: Optional[Decimal]
    logged_at: Optional[datetime]
    created_at: Optional[datetime] = None
    price: Optional[Decimal] = None
    flavor_tags: Sequence[str] = ()


def _to_decimal(value) -> Optional[Decimal]:
    if value is None or isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def _rounded(value: Decimal, places: str) -> float:
    return float(value.quantize(Decimal(places), rounding=ROUND_HALF_UP))


def _mean(values: Sequence[Decimal]) -> Decimal:
    return sum(values, Decimal('0')) / len(values)


def _clean(events: Iterable[DrinkEvent]) -> List[DrinkEvent]:
    """Normalize numeric fields and drop events that cannot be placed or rated."""
    valid = []
    skipped = 0

    for event in events:
        rating = _to_decimal(event.rating)
        if (
            event.logged_at is None
            or rating is None
            or not rating.is_finite()
            or not MIN_RATING <= rating <= MAX_RATING
        ):
            skipped += 1
            continue

        price = _to_decimal(event.price)
        if price is not None and (not price.is_finite() or price < 0):
            price = None

        valid.append(replace(event, rating=rating, price=price))

    if skipped:
        logger.warning("Skipped %d malformed drink events", skipped)
    return valid


def _sequence_key(event: DrinkEvent):
    return (event.logged_at, event.created_at or event.logged_at, str(event.id))


def _week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def _time_bucket(hour: int) -> int:
    for index, (_, first, end) in enumerate(TIME_BUCKETS):
        if first <= hour < end:
            return index
    raise ValueError(f"Hour out of range: {hour}")


def _rank_groups(groups: Dict[int, List[Decimal]]) -> List[tuple]:
    """(key, mean, count) rows ordered by mean descending, lower key first on ties."""
    rows = [(key, _mean(ratings), len(ratings)) for key, ratings in groups.items()]
    return sorted(rows, key=lambda row: (-row[1], row[0]))


def _money(value: Decimal) -> float:
    return _rounded(value, '0.01')


def _cafe_sort_name(name: Optional[str]) -> str:
    return (name or '').casefold()


def _loyalty_streak(run: Optional[Run]) -> Optional[Dict[str, Any]]:
    if run is None:
        return None
    return {
        'cafe_id': str(run.first.cafe_id),
        'cafe_name': run.first.cafe_name,
        'count': run.length,
    }


def compute_statistics(events: Iterable[DrinkEvent], now: datetime) -> Dict[str, Any]:
    """
    Compute all journal statistics for one user's drinks.

    Args:
        events: The user's drink events in any order.
        now: Current time (timezone-aware). Its timezone defines calendar
            days, weeks and months.

    Returns:
        dict: A dictionary containing:
            - total_drinks (int), average_rating (float, 1 dp, 0 if none)
            - unique_cafes (int), unique_drink_types (int)
            - drinks_this_week (int), drinks_this_month (int)
            - drink_type_breakdown (list): ``{drink_type, count}``, count
              descending then type ascending.
            - top_cafes (list): up to 5 ``{cafe_id, cafe_name, visit_count}``.
            - rating_trends (list): exactly 12 ``{week, avg_rating,
              drink_count}`` oldest first; ``avg_rating`` is None for
              weeks without drinks.
            - best_day, best_time (dict | None): the best group plus the
              full ranking under ``all_days`` / ``all_times``.
            - daily_streak (int): consecutive days ending today, or
              yesterday while today has no drink yet.
            - longest_daily_streak (int)
            - current_streak, longest_streak (dict | None): consecutive
              drinks at one cafe, ``{cafe_id, cafe_name, count}``.
            - milestones (list): every ``{metric, threshold, label}`` met.
            - spending (dict): totals over drinks with a price.
            - flavor_tags (list): ``{tag, count}``, count descending.

    Raises:
        ValueError: If ``now`` is naive.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    tz = now.tzinfo
    today = now.date()
    drinks = sorted(_clean(events), key=_sequence_key)
    moments = [
        (d.logged_at if d.logged_at.tzinfo else d.logged_at.replace(tzinfo=tz)).astimezone(tz)
        for d in drinks
    ]
    ratings = [d.rating for d in drinks]

    # Totals
    total_drinks = len(drinks)
    average_rating = _rounded(_mean(ratings), '0.1') if drinks else 0.0
    unique_cafes = len({d.cafe_id for d in drinks})
    unique_drink_types = len({d.drink_type for d in drinks})

    week_start = _week_start(today)
    week_end = week_start + timedelta(days=7)
    drinks_this_week = sum(1 for m in moments if week_start <= m.date() < week_end)
    drinks_this_month = sum(1 for m in moments if (m.year, m.month) == (today.year, today.month))

    # Breakdowns
    type_counts = Counter(d.drink_type for d in drinks)
    drink_type_breakdown = [
        {'drink_type': drink_type, 'count': count}
        for drink_type, count in sorted(type_counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]

    cafe_names = {d.cafe_id: d.cafe_name for d in drinks}
    visits = Counter(d.cafe_id for d in drinks)
    top_cafes = [
        {'cafe_id': str(cafe_id), 'cafe_name': cafe_names[cafe_id], 'visit_count': count}
        for cafe_id, count in sorted(
            visits.items(),
            key=lambda kv: (-kv[1], _cafe_sort_name(cafe_names[kv[0]]), str(kv[0])),
        )[:TOP_CAFES_LIMIT]
    ]

    # Weekly trend
    by_week = defaultdict(list)
    for drink, moment in zip(drinks, moments):
        by_week[_week_start(moment.date())].append(drink.rating)

    rating_trends = []
    for offset in range(TREND_WEEKS - 1, -1, -1):
        week = week_start - timedelta(weeks=offset)
        week_ratings = by_week.get(week, [])
        rating_trends.append({
            'week': week.isoformat(),
            'avg_rating': _rounded(_mean(week_ratings), '0.01') if week_ratings else None,
            'drink_count': len(week_ratings),
        })

    # Best day / time
    by_day = defaultdict(list)
    by_bucket = defaultdict(list)
    for drink, moment in zip(drinks, moments):
        by_day[(moment.weekday() + 1) % 7].append(drink.rating)
        by_bucket[_time_bucket(moment.hour)].append(drink.rating)

    all_days = [
        {
            'day': DAY_NAMES[day],
            'day_of_week': day,
            'avg_rating': _rounded(mean, '0.01'),
            'drink_count': count,
        }
        for day, mean, count in _rank_groups(by_day)
    ]
    best_day = {**all_days[0], 'all_days': all_days} if all_days else None

    all_times = [
        {
            'time': TIME_BUCKETS[bucket][0],
            'avg_rating': _rounded(mean, '0.01'),
            'drink_count': count,
        }
        for bucket, mean, count in _rank_groups(by_bucket)
    ]
    best_time = {**all_times[0], 'all_times': all_times} if all_times else None

    # Daily streaks count distinct days
    def next_day(previous, day):
        return day - previous == timedelta(days=1)

    days = sorted({m.date() for m in moments})
    longest_run = scan_runs(days, next_day).longest
    longest_daily_streak = longest_run.length if longest_run else 0

    tail = scan_runs([d for d in days if d <= today], next_day).last
    if tail is not None and tail.last >= today - timedelta(days=1):
        daily_streak = tail.length
    else:
        daily_streak = 0

    # Cafe loyalty follows the event sequence, not the calendar
    loyalty = scan_runs(drinks, lambda previous, drink: previous.cafe_id == drink.cafe_id)

    # Milestones
    metrics = {
        'total_drinks': total_drinks,
        'unique_cafes': unique_cafes,
        'unique_drink_types': unique_drink_types,
        'longest_daily_streak': longest_daily_streak,
    }
    milestones = [
        milestone._asdict()
        for milestone in MILESTONES
        if metrics[milestone.metric] >= milestone.threshold
    ]

    return {
        'total_drinks': total_drinks,
        'average_rating': average_rating,
        'unique_cafes': unique_cafes,
        'unique_drink_types': unique_drink_types,
        'drinks_this_week': drinks_this_week,
        'drinks_this_month': drinks_this_month,
        'drink_type_breakdown': drink_type_breakdown,
        'top_cafes': top_cafes,
        'rating_trends': rating_trends,
        'best_day': best_day,
        'best_time': best_time,
        'daily_streak': daily_streak,
        'longest_daily_streak': longest_daily_streak,
        'current_streak': _loyalty_streak(loyalty.last),
        'longest_streak': _loyalty_streak(loyalty.longest),
        'milestones': milestones,
        'spending': _spending(drinks, moments, today),
        'flavor_tags': _flavor_tags(drinks),
    }


def _spending(drinks: List[DrinkEvent], moments: List[datetime], today: date) -> Dict[str, Any]:
    """Spending over drinks with a price; unpriced drinks are ignored."""
    priced = [(d, m) for d, m in zip(drinks, moments) if d.price is not None]
    zero = Decimal('0')

    total = sum((d.price for d, _ in priced), zero)
    this_month = sum(
        (d.price for d, m in priced if (m.year, m.month) == (today.year, today.month)),
        zero,
    )

    per_cafe = defaultdict(list)
    names = {}
    for drink, _ in priced:
        per_cafe[drink.cafe_id].append(drink.price)
        names[drink.cafe_id] = drink.cafe_name

    rows = sorted(
        (
            (cafe_id, len(prices), sum(prices, zero))
            for cafe_id, prices in per_cafe.items()
        ),
        key=lambda row: (-row[1], -row[2], _cafe_sort_name(names[row[0]]), str(row[0])),
    )

    return {
        'total_spent': _money(total),
        'spent_this_month': _money(this_month),
        'average_price': _money(total / len(priced)) if priced else 0.0,
        'priced_drinks': len(priced),
        'by_cafe': [
            {
                'cafe_id': str(cafe_id),
                'cafe_name': names[cafe_id],
                'drink_count': count,
                'total_spent': _money(spent),
                'average_price': _money(spent / count),
            }
            for cafe_id, count, spent in rows[:SPENDING_BY_CAFE_LIMIT]
        ],
    }


def _flavor_tags(drinks: List[DrinkEvent]) -> List[Dict[str, Any]]:
    counts = Counter(tag for d in drinks for tag in set(d.flavor_tags or ()))
    return [
        {'tag': tag, 'count': count}
        for tag, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]
