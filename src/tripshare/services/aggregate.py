from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Hashable, Iterable, Mapping, Sequence, TypeVar

from tripshare.models import CATEGORIES, Expense, ExpenseCategory


K = TypeVar("K", bound=Hashable)

CHART_COLORS = [
    "#2dd4bf",
    "#38bdf8",
    "#fbbf24",
    "#f472b6",
    "#a78bfa",
    "#4ade80",
    "#fb923c",
]


@dataclass(slots=True)
class CategoryChart:
    labels: list[str]
    data: list[float]
    background_colors: list[str]


def _running_totals(keys: Iterable[K], pairs: Iterable[tuple[K, float]]) -> dict[K, float]:
    totals: dict[K, float] = {key: 0.0 for key in keys}
    for key, amount in pairs:
        totals[key] = totals.get(key, 0.0) + amount
    return totals


def aggregate_by_category(
    expenses: Iterable[Expense],
    categories: Sequence[ExpenseCategory] = CATEGORIES,
) -> dict[ExpenseCategory, float]:
    """Sum expense amounts per category.

    Every category of ``categories`` is present in the result, at zero when
    nothing was spent on it.
    """
    return _running_totals(categories, ((expense.category, expense.amount) for expense in expenses))


def aggregate_by_participant(expenses: Iterable[Expense], participants: Sequence[str]) -> dict[str, float]:
    """Sum expense amounts per payer, with every participant present."""
    return _running_totals(participants, ((expense.paid_by, expense.amount) for expense in expenses))


def total_cost(expenses: Iterable[Expense]) -> float:
    return sum((expense.amount for expense in expenses), 0.0)


def group_by_date(expenses: Iterable[Expense]) -> dict[date, list[Expense]]:
    grouped: dict[date, list[Expense]] = {}
    for expense in sorted(expenses, key=lambda e: e.date):
        grouped.setdefault(expense.date, []).append(expense)
    return grouped


def category_chart(totals: Mapping[ExpenseCategory, float]) -> CategoryChart:
    chart = CategoryChart(labels=[], data=[], background_colors=[])
    for category in CATEGORIES:
        amount = totals.get(category, 0.0)
        if amount <= 0:
            continue
        color = CHART_COLORS[len(chart.labels) % len(CHART_COLORS)]
        chart.labels.append(category.value)
        chart.data.append(amount)
        chart.background_colors.append(color)
    return chart
