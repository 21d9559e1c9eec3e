from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class ExpenseCategory(str, Enum):
    ALOJAMIENTO = "Alojamiento"
    ACTIVIDADES = "Actividades"
    COMIDA = "Comida"
    TRANSPORTE = "Transporte"
    ENTRADAS = "Entradas"
    COMPRAS = "Compras"
    OTROS = "Otros"


CATEGORIES: tuple[ExpenseCategory, ...] = tuple(ExpenseCategory)


class PaymentMethod(str, Enum):
    TARJETA = "tarjeta"
    EFECTIVO = "efectivo"


@dataclass(slots=True, frozen=True)
class Participant:
    name: str


@dataclass(slots=True)
class Trip:
    id: str
    name: str
    trip_code: str
    participants: list[Participant] = field(default_factory=list)

    @property
    def participant_names(self) -> list[str]:
        return [participant.name for participant in self.participants]


@dataclass(slots=True, frozen=True)
class Expense:
    id: str
    trip_id: str
    date: date
    amount: float
    category: ExpenseCategory
    paid_by: str
    description: str = ""
    payment_method: Optional[PaymentMethod] = None
    proof_image: Optional[str] = None


@dataclass(slots=True, frozen=True)
class SettledPayment:
    from_participant: str
    to_participant: str
    amount: float
