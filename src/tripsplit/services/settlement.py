from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from tripsplit.services.balance import ParticipantBalance
from tripsplit.services.money import TOLERANCE_CENTS, from_cents


@dataclass(slots=True)
class Settlement:
    from_id: str
    from_name: str
    to_id: str
    to_name: str
    amount_cents: int

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)


@dataclass(slots=True)
class _Party:
    participant_id: str
    name: str
    remaining_cents: int


def compute_settlements(balances: Iterable[ParticipantBalance]) -> List[Settlement]:
    """Match debtors to creditors in list order.

    This is a plain two-pointer walk: neither side is sorted by amount, so the
    result follows the order of ``balances``. Differences within one cent of
    zero count as settled.
    """
    debtors: list[_Party] = []
    creditors: list[_Party] = []

    for balance in balances:
        if balance.diff_cents < -TOLERANCE_CENTS:
            debtors.append(_Party(balance.participant_id, balance.display_name, -balance.diff_cents))
        elif balance.diff_cents > TOLERANCE_CENTS:
            creditors.append(_Party(balance.participant_id, balance.display_name, balance.diff_cents))

    settlements: list[Settlement] = []
    i, j = 0, 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        amount = min(debtor.remaining_cents, creditor.remaining_cents)
        if amount >= TOLERANCE_CENTS:
            settlements.append(
                Settlement(
                    from_id=debtor.participant_id,
                    from_name=debtor.name,
                    to_id=creditor.participant_id,
                    to_name=creditor.name,
                    amount_cents=amount,
                )
            )
            debtor.remaining_cents -= amount
            creditor.remaining_cents -= amount

        if debtor.remaining_cents < TOLERANCE_CENTS:
            i += 1
        if creditor.remaining_cents < TOLERANCE_CENTS:
            j += 1

    return settlements
