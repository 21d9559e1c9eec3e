"""In-memory trip and expense ledger."""

from __future__ import annotations

import itertools
import secrets
from datetime import date
from typing import Optional, Sequence

from tripshare.config import get_settings
from tripshare.logging import get_logger
from tripshare.models import Expense, ExpenseCategory, Participant, PaymentMethod, Trip
from tripshare.services.summary import TripSummary, build_trip_summary


class TripNotFoundError(LookupError):
    pass


class ExpenseNotFoundError(LookupError):
    pass


def generate_trip_code(prefix: Optional[str] = None) -> str:
    if prefix is None:
        prefix = get_settings().trip_code_prefix
    return f"{prefix}-{secrets.token_hex(2).upper()}-{secrets.token_hex(2).upper()}"


class TripStateManager:
    def __init__(self) -> None:
        self._trips: dict[str, Trip] = {}
        self._expenses: dict[str, Expense] = {}
        self._trip_ids = itertools.count(1)
        self._expense_ids = itertools.count(1)
        self._log = get_logger(__name__)

    def create_trip(self, name: str, participant_names: Sequence[str]) -> Trip:
        name = name.strip()
        names = [participant.strip() for participant in participant_names]
        if not name or not names or any(not participant for participant in names):
            raise ValueError("El nombre del viaje y los nombres de los participantes no pueden estar vacíos.")
        if len(set(names)) != len(names):
            raise ValueError("Los nombres de los participantes deben ser únicos.")

        trip = Trip(
            id=f"trip-{next(self._trip_ids)}",
            name=name,
            trip_code=self._unique_trip_code(),
            participants=[Participant(name=participant) for participant in names],
        )
        self._trips[trip.id] = trip
        self._log.info("trip.created", trip_id=trip.id, participants=len(names))
        return trip

    def get_trip(self, trip_id: str) -> Trip:
        trip = self._trips.get(trip_id)
        if trip is None:
            raise TripNotFoundError(f"Viaje no encontrado: {trip_id}")
        return trip

    def list_trips(self) -> list[Trip]:
        return list(self._trips.values())

    def join_trip(self, trip_code: str) -> Trip:
        code = trip_code.strip()
        for trip in self._trips.values():
            if trip.trip_code == code:
                return trip
        raise TripNotFoundError("Viaje no encontrado con este código.")

    def delete_trip(self, trip_id: str) -> None:
        self.get_trip(trip_id)
        del self._trips[trip_id]
        self._expenses = {
            expense_id: expense for expense_id, expense in self._expenses.items() if expense.trip_id != trip_id
        }
        self._log.info("trip.deleted", trip_id=trip_id)

    def add_expense(
        self,
        trip_id: str,
        *,
        amount: float,
        category: ExpenseCategory,
        paid_by: str,
        expense_date: date,
        description: str = "",
        payment_method: Optional[PaymentMethod] = None,
        proof_image: Optional[str] = None,
    ) -> Expense:
        trip = self.get_trip(trip_id)
        if amount <= 0:
            raise ValueError("La cantidad es obligatoria y debe ser mayor que cero.")
        if not paid_by or paid_by not in trip.participant_names:
            raise ValueError("Por favor, selecciona quién pagó.")

        expense = Expense(
            id=f"exp-{next(self._expense_ids)}",
            trip_id=trip_id,
            date=expense_date,
            amount=amount,
            category=ExpenseCategory(category),
            paid_by=paid_by,
            description=description,
            payment_method=payment_method,
            proof_image=proof_image,
        )
        self._expenses[expense.id] = expense
        self._log.info("expense.added", trip_id=trip_id, expense_id=expense.id, amount=amount)
        return expense

    def delete_expense(self, expense_id: str) -> None:
        expense = self._expenses.pop(expense_id, None)
        if expense is None:
            raise ExpenseNotFoundError(f"Gasto no encontrado: {expense_id}")
        self._log.info("expense.deleted", trip_id=expense.trip_id, expense_id=expense_id)

    def get_expenses(self, trip_id: str) -> tuple[Expense, ...]:
        self.get_trip(trip_id)
        return tuple(expense for expense in self._expenses.values() if expense.trip_id == trip_id)

    def summary(self, trip_id: str) -> TripSummary:
        return build_trip_summary(self.get_trip(trip_id), self.get_expenses(trip_id))

    def _unique_trip_code(self) -> str:
        codes = {trip.trip_code for trip in self._trips.values()}
        code = generate_trip_code()
        while code in codes:
            code = generate_trip_code()
        return code
