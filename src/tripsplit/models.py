from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(slots=True)
class Trip:
    id: str
    code: str
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None


@dataclass(slots=True)
class Participant:
    id: str
    trip_id: str
    name: str
    nickname: Optional[str] = None
    days_in_trip: Optional[int] = None

    @property
    def display_name(self) -> str:
        return self.nickname or self.name


@dataclass(slots=True)
class Payment:
    id: str
    trip_id: str
    paid_by_id: str
    amount_cents: int
    description: Optional[str] = None
    note: Optional[str] = None
    paid_at: Optional[datetime] = None
