from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from tripsplit.config import get_settings
from tripsplit.logging import configure_logging, get_logger
from tripsplit.schemas import TripFileError, load_trip_document
from tripsplit.services.export import export_csv
from tripsplit.services.summary import build_trip_summary, format_summary

FORMATS = ("text", "json", "csv")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tripsplit",
        description="Show who owes whom for a trip described in a JSON file.",
    )
    parser.add_argument("trip_file", type=Path, help="path to the trip JSON document")
    parser.add_argument("--format", choices=FORMATS, default="text", dest="output_format")
    parser.add_argument("--currency", default=None, help="currency label used in the output")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    log = get_logger(__name__)

    args = build_parser().parse_args(argv)
    currency = args.currency or settings.currency
    log.info("cli.start", trip_file=str(args.trip_file), output_format=args.output_format)

    try:
        document = load_trip_document(args.trip_file)
    except TripFileError as exc:
        log.error("cli.load_failed", trip_file=str(args.trip_file))
        print(str(exc), file=sys.stderr)
        return 1

    trip, participants, payments = document.to_records()
    summary = build_trip_summary(trip, participants, payments)
    for payment_id in summary.orphan_payment_ids:
        log.warning("summary.orphan_payment", trip_id=trip.id, payment_id=payment_id)
    log.info(
        "summary.built",
        trip_id=trip.id,
        participants=summary.participant_count,
        payments=len(payments),
        settlements=len(summary.settlements),
    )

    if args.output_format == "json":
        output = json.dumps(summary.to_dict(), ensure_ascii=False, indent=2)
    elif args.output_format == "csv":
        payer_names = {p.id: p.display_name for p in participants}
        output = export_csv(summary, payments, payer_names, currency, bom=settings.csv_bom)
    else:
        output = format_summary(summary, currency)

    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0
