from __future__ import annotations

from datetime import date
from typing import Optional


def trip_days(start_date: Optional[date], end_date: Optional[date]) -> int:
    """Inclusive number of days between the trip dates, at least 1."""
    if start_date is None or end_date is None:
        return 1
    if end_date < start_date:
        return 1
    return max(1, (end_date - start_date).days + 1)


def effective_days(days_in_trip: Optional[int], trip_duration: int) -> int:
    if days_in_trip is not None:
        return max(1, days_in_trip)
    return trip_duration
