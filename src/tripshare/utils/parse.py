from __future__ import annotations

import math
import re
from datetime import date, datetime


def parse_amount(text: str) -> float:
    """
    Parse an expense amount typed into a form. A decimal comma is accepted:
    "12,50" == "12.50".
    """
    value = str(text).strip().replace(",", ".")
    if not value:
        raise ValueError("La cantidad es obligatoria y debe ser mayor que cero.")

    try:
        amount = float(value)
    except ValueError as exc:
        raise ValueError("La cantidad debe ser un número válido.") from exc

    if not math.isfinite(amount):
        raise ValueError("La cantidad debe ser un número válido.")
    if amount <= 0:
        raise ValueError("La cantidad es obligatoria y debe ser mayor que cero.")
    return amount


def parse_expense_date(text: str) -> date:
    """
    Supported formats:
    - 2025-12-20
    - 20/12/2025
    - 20.12.2025
    - 20-12-2025
    """
    text = text.strip()

    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        pass

    match = re.fullmatch(r"(\d{1,2})[\.\-/](\d{1,2})[\.\-/](\d{4})", text)
    if match:
        day = int(match.group(1))
        month = int(match.group(2))
        year = int(match.group(3))
        try:
            return date(year, month, day)
        except ValueError as exc:
            raise ValueError("Fecha no válida.") from exc

    raise ValueError("No se pudo reconocer la fecha.")


def parse_participants(text: str) -> list[str]:
    names = [part.strip() for part in re.split(r"[,\n]", text)]
    if not names or any(not name for name in names):
        raise ValueError("Los nombres de los participantes no pueden estar vacíos.")
    return names
