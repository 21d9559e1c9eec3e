from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from tripshare.config import get_settings
from tripshare.models import CATEGORIES, Expense, ExpenseCategory, SettledPayment, Trip
from tripshare.services.aggregate import aggregate_by_category, aggregate_by_participant, total_cost
from tripshare.services.settlement import compute_settlement


@dataclass(slots=True)
class TripSummary:
    total_cost: float
    expense_count: int
    by_participant: dict[str, float] = field(default_factory=dict)
    by_category: dict[ExpenseCategory, float] = field(default_factory=dict)
    payments: list[SettledPayment] = field(default_factory=list)


def format_currency(amount: float, currency: Optional[str] = None) -> str:
    """Format an amount the way es-ES renders currency, e.g. ``12.345,67 €``.

    Thousands are only grouped from five integer digits up, so ``1234,56 €``
    stays ungrouped.
    """
    settings = get_settings()
    symbol = settings.currency_symbol if currency is None else currency

    formatted = str(Decimal(repr(abs(amount))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
    sign = "-" if amount < 0 and formatted != "0.00" else ""
    integer_part, decimal_part = formatted.split(".")
    if len(integer_part) > 4:
        groups = []
        while integer_part:
            groups.insert(0, integer_part[-3:])
            integer_part = integer_part[:-3]
        integer_part = ".".join(groups)

    return f"{sign}{integer_part},{decimal_part} {symbol}"


def build_trip_summary(trip: Trip, expenses: Sequence[Expense]) -> TripSummary:
    participants = trip.participant_names
    by_participant = aggregate_by_participant(expenses, participants)
    return TripSummary(
        total_cost=total_cost(expenses),
        expense_count=len(expenses),
        by_participant=by_participant,
        by_category=aggregate_by_category(expenses, CATEGORIES),
        payments=compute_settlement(by_participant, participants),
    )


def format_payment(payment: SettledPayment) -> str:
    return f"{payment.from_participant} paga a {payment.to_participant}: {format_currency(payment.amount)}"


def format_trip_summary(trip: Trip, summary: TripSummary) -> str:
    lines = [f"Resumen del Viaje: {trip.name}", ""]

    lines.append("Resumen General")
    lines.append(f"Costo Total: {format_currency(summary.total_cost)}")
    lines.append(f"Total de gastos: {summary.expense_count}")
    lines.append("")

    lines.append("Gastos por Participante")
    for name, amount in summary.by_participant.items():
        lines.append(f"{name}: {format_currency(amount)}")
    lines.append("")

    lines.append("Gastos por Categoría")
    for category, amount in summary.by_category.items():
        if amount > 0:
            label = category.value if isinstance(category, ExpenseCategory) else str(category)
            lines.append(f"{label}: {format_currency(amount)}")

    if summary.payments:
        lines.append("")
        lines.append("Liquidación de Cuentas")
        lines.extend(format_payment(payment) for payment in summary.payments)
    elif len(trip.participants) > 1 and summary.expense_count > 0:
        lines.append("")
        lines.append("Liquidación de Cuentas")
        lines.append("Todas las cuentas están saldadas o no hay suficientes participantes para calcular.")

    return "\n".join(lines)
