import pytest

from tripsplit.services.balance import ParticipantBalance, ParticipantShare, compute_balances
from tripsplit.services.settlement import Settlement, compute_settlements


def _balance(participant_id: str, diff_cents: int, nickname: str | None = None) -> ParticipantBalance:
    return ParticipantBalance(
        participant_id=participant_id,
        name=participant_id.upper(),
        nickname=nickname,
        paid_cents=max(diff_cents, 0),
        expected_cents=max(-diff_cents, 0),
        diff_cents=diff_cents,
    )


def _apply(balances, settlements):
    after = {b.participant_id: b.diff_cents for b in balances}
    for s in settlements:
        after[s.from_id] += s.amount_cents
        after[s.to_id] -= s.amount_cents
    return after


def test_settle_single_creditor():
    balances = [_balance("a", 20000), _balance("b", -10000), _balance("c", -10000)]

    settlements = compute_settlements(balances)

    assert settlements == [
        Settlement(from_id="b", from_name="B", to_id="a", to_name="A", amount_cents=10000),
        Settlement(from_id="c", from_name="C", to_id="a", to_name="A", amount_cents=10000),
    ]
    assert all(abs(value) <= 1 for value in _apply(balances, settlements).values())


def test_balanced_trip_needs_no_transfers():
    assert compute_settlements([_balance("a", 0), _balance("b", 0)]) == []


def test_tolerance_band_is_settled():
    assert compute_settlements([_balance("a", 1), _balance("b", -1)]) == []

    settlements = compute_settlements([_balance("a", 2), _balance("b", -2)])
    assert [s.amount_cents for s in settlements] == [2]


def test_only_one_side_does_not_crash():
    assert compute_settlements([_balance("a", 500), _balance("b", 300)]) == []
    assert compute_settlements([_balance("a", -500)]) == []
    assert compute_settlements([]) == []


def test_greedy_follows_list_order():
    balances = [_balance("a", -500), _balance("b", -300), _balance("c", 300), _balance("d", 500)]

    settlements = compute_settlements(balances)

    assert [(s.from_id, s.to_id, s.amount_cents) for s in settlements] == [
        ("a", "c", 300),
        ("a", "d", 200),
        ("b", "d", 300),
    ]


def test_uses_nickname_for_names():
    settlements = compute_settlements([_balance("a", 700, nickname="Avi"), _balance("b", -700)])

    assert settlements[0].from_name == "B"
    assert settlements[0].to_name == "Avi"


def test_cent_left_within_tolerance():
    balances = [_balance("a", 1001), _balance("b", -1000), _balance("c", -1)]

    settlements = compute_settlements(balances)

    assert [(s.from_id, s.to_id, s.amount_cents) for s in settlements] == [("b", "a", 1000)]


def test_rounded_scenario_moves_whole_total():
    shares = [
        ParticipantShare(participant_id="a", name="A", paid_cents=10000),
        ParticipantShare(participant_id="b", name="B", paid_cents=0),
        ParticipantShare(participant_id="c", name="C", paid_cents=0),
    ]
    balances = compute_balances(10000, shares)

    settlements = compute_settlements(balances)

    assert [(s.from_id, s.to_id, str(s.amount)) for s in settlements] == [
        ("b", "a", "33.33"),
        ("c", "a", "33.34"),
    ]
    assert sum(s.amount_cents for s in settlements) == balances[0].diff_cents == 6667
    assert all(value == 0 for value in _apply(balances, settlements).values())


@pytest.mark.parametrize(
    "paid_and_weights",
    [
        [(12345, 1), (0, 2), (678, 3), (9, 1)],
        [(0, 1), (0, 1), (100000, 5), (333, 2), (4000, 1)],
        [(50, 1), (50, 1), (1, 1)],
    ],
)
def test_settlements_zero_out_balances(paid_and_weights):
    shares = [
        ParticipantShare(participant_id=f"p{i}", name=f"P{i}", paid_cents=paid, weight=weight)
        for i, (paid, weight) in enumerate(paid_and_weights)
    ]
    balances = compute_balances(sum(paid for paid, _ in paid_and_weights), shares)

    settlements = compute_settlements(balances)

    assert all(s.amount_cents > 0 for s in settlements)
    assert all(s.from_id != s.to_id for s in settlements)
    assert all(abs(value) <= 1 for value in _apply(balances, settlements).values())
