from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from tripsplit.models import Participant, Payment, Trip
from tripsplit.services.balance import ParticipantBalance, ParticipantShare, compute_balances
from tripsplit.services.money import divide_half_up, format_money
from tripsplit.services.settlement import Settlement, compute_settlements
from tripsplit.services.weights import effective_days, trip_days


@dataclass(slots=True)
class TripSummary:
    trip: Trip
    total_cents: int
    participant_count: int
    average_per_person_cents: int
    balances: list[ParticipantBalance] = field(default_factory=list)
    settlements: list[Settlement] = field(default_factory=list)
    orphan_payment_ids: list[str] = field(default_factory=list)

    @property
    def is_settled(self) -> bool:
        return not self.settlements

    def to_dict(self) -> dict[str, Any]:
        return {
            "trip": {
                "id": self.trip.id,
                "name": self.trip.name,
                "code": self.trip.code,
                "startDate": self.trip.start_date.isoformat() if self.trip.start_date else None,
                "endDate": self.trip.end_date.isoformat() if self.trip.end_date else None,
            },
            "total": float(format_money(self.total_cents)),
            "participantCount": self.participant_count,
            "averagePerPerson": float(format_money(self.average_per_person_cents)),
            "balances": [
                {
                    "participantId": b.participant_id,
                    "name": b.name,
                    "nickname": b.nickname,
                    "paid": float(b.paid),
                    "expected": float(b.expected),
                    "diff": float(b.diff),
                }
                for b in self.balances
            ],
            "settlements": [
                {
                    "fromId": s.from_id,
                    "fromName": s.from_name,
                    "toId": s.to_id,
                    "toName": s.to_name,
                    "amount": float(s.amount),
                }
                for s in self.settlements
            ],
        }


def collect_shares(
    trip: Trip,
    participants: Sequence[Participant],
    payments: Sequence[Payment],
) -> list[ParticipantShare]:
    """Turn trip records into core inputs.

    Payments by someone outside ``participants`` credit nobody; see
    ``find_orphan_payments``.
    """
    duration = trip_days(trip.start_date, trip.end_date)
    paid: dict[str, int] = {p.id: 0 for p in participants}

    for payment in payments:
        if payment.paid_by_id in paid:
            paid[payment.paid_by_id] += payment.amount_cents

    return [
        ParticipantShare(
            participant_id=p.id,
            name=p.name,
            nickname=p.nickname,
            paid_cents=paid[p.id],
            weight=effective_days(p.days_in_trip, duration),
        )
        for p in participants
    ]


def find_orphan_payments(participants: Sequence[Participant], payments: Sequence[Payment]) -> list[str]:
    known = {p.id for p in participants}
    return [payment.id for payment in payments if payment.paid_by_id not in known]


def build_trip_summary(
    trip: Trip,
    participants: Sequence[Participant],
    payments: Sequence[Payment],
) -> TripSummary:
    total_cents = sum(payment.amount_cents for payment in payments)
    shares = collect_shares(trip, participants, payments)

    balances = compute_balances(total_cents, shares)
    settlements = compute_settlements(balances)

    count = len(participants)
    average = divide_half_up(total_cents, count) if count else 0

    return TripSummary(
        trip=trip,
        total_cents=total_cents,
        participant_count=count,
        average_per_person_cents=average,
        balances=balances,
        settlements=settlements,
        orphan_payment_ids=find_orphan_payments(participants, payments),
    )


def format_summary(summary: TripSummary, currency: str) -> str:
    lines = [
        f"Trip summary: {summary.trip.name}",
        f"Total spent: {format_money(summary.total_cents)} {currency}",
        f"Participants: {summary.participant_count}",
        f"Average per person: {format_money(summary.average_per_person_cents)} {currency}",
        "",
    ]
    if summary.settlements:
        lines.append("Debts to settle:")
        for s in summary.settlements:
            lines.append(f"• {s.from_name} owes {s.to_name} {format_money(s.amount_cents)} {currency}")
    else:
        lines.append("All balanced, nothing to settle")
    return "\n".join(lines)
