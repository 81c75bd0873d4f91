from __future__ import annotations

import csv
import io
from typing import Mapping, Sequence

from tripsplit.models import Payment
from tripsplit.services.money import format_money
from tripsplit.services.summary import TripSummary

BOM = "\ufeff"


def export_csv(
    summary: TripSummary,
    payments: Sequence[Payment],
    payer_names: Mapping[str, str],
    currency: str,
    *,
    bom: bool = True,
) -> str:
    """Render a summary as a spreadsheet-friendly CSV document.

    ``payer_names`` maps participant ids to display names for the itemised
    payments section; unknown payers are shown as ``?``.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\r\n")

    writer.writerow(["Trip summary"])
    writer.writerow([f"Total spent ({currency})", "Participants", f"Average per person ({currency})"])
    writer.writerow(
        [
            format_money(summary.total_cents),
            summary.participant_count,
            format_money(summary.average_per_person_cents),
        ]
    )
    writer.writerow([])

    writer.writerow(["Participants"])
    writer.writerow(["Name", f"Paid ({currency})", f"Expected ({currency})", f"Difference ({currency})"])
    for b in summary.balances:
        writer.writerow(
            [
                b.display_name,
                format_money(b.paid_cents),
                format_money(b.expected_cents),
                format_money(b.diff_cents),
            ]
        )
    writer.writerow([])

    writer.writerow(["Payments"])
    writer.writerow(["#", "Date", f"Amount ({currency})", "Paid by", "Description", "Note"])
    for index, payment in enumerate(payments, start=1):
        writer.writerow(
            [
                index,
                payment.paid_at.date().isoformat() if payment.paid_at else "",
                format_money(payment.amount_cents),
                payer_names.get(payment.paid_by_id, "?"),
                payment.description or "",
                payment.note or "",
            ]
        )
    writer.writerow([])

    writer.writerow(["Transfers"])
    writer.writerow(["From", "To", f"Amount ({currency})"])
    for s in summary.settlements:
        writer.writerow([s.from_name, s.to_name, format_money(s.amount_cents)])

    text = buffer.getvalue()
    return BOM + text if bom else text
