from __future__ import annotations

import csv
from argparse import ArgumentParser
from pathlib import Path
from typing import Optional, Sequence

from tripshare.logging import configure_logging, get_logger
from tripshare.models import ExpenseCategory
from tripshare.services.summary import format_trip_summary
from tripshare.state import TripStateManager
from tripshare.utils.parse import parse_amount, parse_expense_date, parse_participants


def load_expenses(manager: TripStateManager, trip_id: str, path: Path) -> int:
    """Add every row of an expenses CSV to the trip.

    Expected columns: ``date``, ``amount``, ``category``, ``paid_by`` and an
    optional ``description``.
    """
    count = 0
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            try:
                manager.add_expense(
                    trip_id,
                    amount=parse_amount(row["amount"] or ""),
                    category=ExpenseCategory((row["category"] or "").strip()),
                    paid_by=(row["paid_by"] or "").strip(),
                    expense_date=parse_expense_date(row["date"] or ""),
                    description=(row.get("description") or "").strip(),
                )
            except KeyError as exc:
                raise ValueError(f"Fila {reader.line_num}: falta la columna {exc}") from exc
            except ValueError as exc:
                raise ValueError(f"Fila {reader.line_num}: {exc}") from exc
            count += 1
    return count


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = ArgumentParser(description="Print who owes whom for a trip.")
    parser.add_argument("expenses", type=Path, help="CSV file with the trip expenses")
    parser.add_argument("--name", default="Viaje", help="Trip name")
    parser.add_argument("--participants", required=True, help="Comma separated participant names")
    args = parser.parse_args(argv)

    configure_logging()
    log = get_logger(__name__)

    manager = TripStateManager()
    try:
        trip = manager.create_trip(args.name, parse_participants(args.participants))
        count = load_expenses(manager, trip.id, args.expenses)
    except ValueError as exc:
        log.error("expenses.rejected", error=str(exc))
        parser.error(str(exc))
    log.info("expenses.loaded", trip_id=trip.id, count=count)

    print(format_trip_summary(trip, manager.summary(trip.id)))


if __name__ == "__main__":
    main()
