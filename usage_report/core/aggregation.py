"""
Day aggregation and totals.

Sums priced records per date and reduces the daily sums to a grand total.
Rounding and display formatting live in usage_report.core.money.
"""

from typing import Dict, Iterable, Tuple

from usage_report.storage.models import DailyTotal, UsageRecord


def aggregate_by_day(records: Iterable[UsageRecord]) -> Tuple[DailyTotal, ...]:
    """Sum record prices into one total per date.

    Dates keep the order in which they first appear in the input; they
    are not sorted chronologically.

    Args:
        records: Priced usage records

    Returns:
        Daily totals in first-seen date order

    Raises:
        ValueError: If a record has not been priced
    """
    buckets: Dict[str, float] = {}
    for record in records:
        if record.price is None:
            raise ValueError(f"Record at line {record.line} has no price")
        # dict keeps insertion order, so the first occurrence fixes the position
        buckets[record.date] = buckets.get(record.date, 0.0) + record.price

    return tuple(DailyTotal(date=day, price=price) for day, price in buckets.items())


def total_price(daily_totals: Iterable[DailyTotal]) -> float:
    """Grand total across all days."""
    return sum((t.price for t in daily_totals), 0.0)
