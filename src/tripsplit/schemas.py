from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tripsplit.models import Participant, Payment, Trip
from tripsplit.services.money import to_cents


class TripFileError(ValueError):
    pass


class TripIn(BaseModel):
    id: str
    code: str = ""
    name: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ParticipantIn(BaseModel):
    id: str
    name: str
    nickname: Optional[str] = None
    days_in_trip: Optional[int] = Field(None, ge=1)


class PaymentIn(BaseModel):
    id: str
    paid_by_id: str
    amount: Decimal = Field(..., ge=0)
    description: Optional[str] = None
    note: Optional[str] = None
    paid_at: Optional[datetime] = None


class TripDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    trip: TripIn
    participants: List[ParticipantIn] = Field(default_factory=list)
    payments: List[PaymentIn] = Field(default_factory=list)

    def to_records(self) -> tuple[Trip, list[Participant], list[Payment]]:
        trip = Trip(
            id=self.trip.id,
            code=self.trip.code,
            name=self.trip.name,
            start_date=self.trip.start_date,
            end_date=self.trip.end_date,
        )
        participants = [
            Participant(
                id=p.id,
                trip_id=trip.id,
                name=p.name,
                nickname=p.nickname,
                days_in_trip=p.days_in_trip,
            )
            for p in self.participants
        ]
        payments = [
            Payment(
                id=p.id,
                trip_id=trip.id,
                paid_by_id=p.paid_by_id,
                amount_cents=to_cents(p.amount),
                description=p.description,
                note=p.note,
                paid_at=p.paid_at,
            )
            for p in self.payments
        ]
        return trip, participants, payments


def load_trip_document(path: Path) -> TripDocument:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TripFileError(f"Cannot read trip file {path}: {exc.strerror or exc}") from exc

    try:
        return TripDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise TripFileError(f"Invalid trip file {path}: {exc.error_count()} error(s)\n{exc}") from exc
