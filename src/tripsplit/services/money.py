from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

CENT = Decimal("0.01")
TOLERANCE_CENTS = 1

MoneyLike = Union[Decimal, int, float, str]


def to_cents(value: MoneyLike) -> int:
    amount = Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    return int(amount * 100)


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(CENT)


def divide_half_up(numerator: int, denominator: int) -> int:
    """Integer division rounding .5 away from zero."""
    if denominator == 0:
        raise ZeroDivisionError("denominator must not be zero")
    quotient = Decimal(numerator) / Decimal(denominator)
    return int(quotient.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_money(cents: int) -> str:
    return f"{from_cents(cents):.2f}"
