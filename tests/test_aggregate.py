from datetime import date

from tripshare.models import CATEGORIES, Expense, ExpenseCategory
from tripshare.services.aggregate import (
    CHART_COLORS,
    aggregate_by_category,
    aggregate_by_participant,
    category_chart,
    group_by_date,
    total_cost,
)


def _expense(expense_id, amount, category, paid_by, day=1):
    return Expense(
        id=expense_id,
        trip_id="trip-1",
        date=date(2025, 7, day),
        amount=amount,
        category=category,
        paid_by=paid_by,
    )


EXPENSES = [
    _expense("exp-1", 120.0, ExpenseCategory.ALOJAMIENTO, "Alice", day=2),
    _expense("exp-2", 30.5, ExpenseCategory.COMIDA, "Bob", day=1),
    _expense("exp-3", 19.5, ExpenseCategory.COMIDA, "Alice", day=2),
]


def test_aggregate_by_category_covers_every_category():
    totals = aggregate_by_category(EXPENSES, CATEGORIES)

    assert tuple(totals) == CATEGORIES
    assert totals[ExpenseCategory.ALOJAMIENTO] == 120.0
    assert totals[ExpenseCategory.COMIDA] == 50.0
    assert totals[ExpenseCategory.TRANSPORTE] == 0.0


def test_aggregate_by_participant_includes_non_payers():
    totals = aggregate_by_participant(EXPENSES, ["Alice", "Bob", "Carol"])

    assert totals == {"Alice": 139.5, "Bob": 30.5, "Carol": 0.0}


def test_aggregate_without_expenses():
    assert aggregate_by_participant([], ["Alice", "Bob"]) == {"Alice": 0.0, "Bob": 0.0}
    assert all(amount == 0.0 for amount in aggregate_by_category([], CATEGORIES).values())
    assert len(aggregate_by_category([], CATEGORIES)) == len(CATEGORIES)
    assert total_cost([]) == 0.0


def test_aggregate_is_repeatable():
    first = aggregate_by_participant(EXPENSES, ["Alice", "Bob"])
    second = aggregate_by_participant(EXPENSES, ["Alice", "Bob"])

    assert first == second
    assert first is not second


def test_unknown_payer_gets_its_own_entry():
    totals = aggregate_by_participant([_expense("exp-9", 10.0, ExpenseCategory.OTROS, "Zoe")], ["Alice"])

    assert totals == {"Alice": 0.0, "Zoe": 10.0}


def test_total_cost():
    assert total_cost(EXPENSES) == 170.0


def test_group_by_date():
    grouped = group_by_date(EXPENSES)

    assert list(grouped) == [date(2025, 7, 1), date(2025, 7, 2)]
    assert [e.id for e in grouped[date(2025, 7, 2)]] == ["exp-1", "exp-3"]


def test_category_chart_skips_empty_categories():
    chart = category_chart(aggregate_by_category(EXPENSES, CATEGORIES))

    assert chart.labels == ["Alojamiento", "Comida"]
    assert chart.data == [120.0, 50.0]
    assert chart.background_colors == CHART_COLORS[:2]


def test_categories_cannot_be_modified():
    assert isinstance(CATEGORIES, tuple)
    assert CATEGORIES[0] is ExpenseCategory.ALOJAMIENTO
    assert CATEGORIES[-1] is ExpenseCategory.OTROS
