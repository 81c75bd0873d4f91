from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence

from tripsplit.services.money import from_cents


@dataclass(slots=True)
class ParticipantShare:
    participant_id: str
    name: str
    paid_cents: int
    weight: Optional[int] = 1
    nickname: Optional[str] = None


@dataclass(slots=True)
class ParticipantBalance:
    participant_id: str
    name: str
    nickname: Optional[str]
    paid_cents: int
    expected_cents: int
    diff_cents: int  # positive = owed money, negative = owes money

    @property
    def display_name(self) -> str:
        return self.nickname or self.name

    @property
    def paid(self) -> Decimal:
        return from_cents(self.paid_cents)

    @property
    def expected(self) -> Decimal:
        return from_cents(self.expected_cents)

    @property
    def diff(self) -> Decimal:
        return from_cents(self.diff_cents)


def effective_weight(weight: Optional[int]) -> int:
    return max(1, weight or 1)


def apportion(total_cents: int, weights: Sequence[int]) -> list[int]:
    """Split ``total_cents`` pro rata to ``weights``.

    Every share is rounded down, then the leftover cents go one each to the
    shares with the largest remainders. On equal remainders the later
    participant gets the cent. Each share stays within one cent of the exact
    value and the shares add up to the total.
    """
    if not weights:
        return []

    total_weight = sum(weights)
    shares = [total_cents * weight // total_weight for weight in weights]
    remainders = [total_cents * weight % total_weight for weight in weights]

    leftover = total_cents - sum(shares)
    order = sorted(range(len(weights)), key=lambda i: (remainders[i], i), reverse=True)
    for index in order[:leftover]:
        shares[index] += 1
    return shares


def compute_balances(total_cents: int, participants: Sequence[ParticipantShare]) -> List[ParticipantBalance]:
    weights = [effective_weight(p.weight) for p in participants]
    expected = apportion(total_cents, weights)

    return [
        ParticipantBalance(
            participant_id=p.participant_id,
            name=p.name,
            nickname=p.nickname,
            paid_cents=p.paid_cents,
            expected_cents=expected_cents,
            diff_cents=p.paid_cents - expected_cents,
        )
        for p, expected_cents in zip(participants, expected)
    ]
