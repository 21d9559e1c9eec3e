from __future__ import annotations

from typing import List, Mapping, Sequence

from tripshare.logging import get_logger
from tripshare.models import SettledPayment


# Half a cent; absorbs float round-off in every comparison against zero.
SETTLEMENT_EPSILON = 0.005

log = get_logger(__name__)


def compute_balances(totals_by_participant: Mapping[str, float], participants: Sequence[str]) -> dict[str, float]:
    """Net position of each participant against an equal split.

    Positive means the participant is owed money, negative means they owe.
    Participants missing from ``totals_by_participant`` paid nothing. The
    average is taken over every amount in the mapping.
    """
    if not participants:
        return {}

    total = sum(totals_by_participant.values())
    average = total / len(participants)
    return {name: totals_by_participant.get(name, 0.0) - average for name in participants}


def compute_settlement(totals_by_participant: Mapping[str, float], participants: Sequence[str]) -> List[SettledPayment]:
    """Pair the largest debtor with the largest creditor until one side runs out.

    The greedy pairing is deterministic (ties keep participant order) but not
    guaranteed to use the fewest possible transfers.
    """
    total = sum(totals_by_participant.values())
    if len(participants) < 2 or total == 0:
        return []

    balances = compute_balances(totals_by_participant, participants)

    debtors = [[name, amount] for name, amount in balances.items() if amount < -SETTLEMENT_EPSILON]
    creditors = [[name, amount] for name, amount in balances.items() if amount > SETTLEMENT_EPSILON]

    debtors.sort(key=lambda x: x[1])
    creditors.sort(key=lambda x: x[1], reverse=True)

    payments: list[SettledPayment] = []
    i, j = 0, 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        transfer = min(-debtor[1], creditor[1])
        if transfer > SETTLEMENT_EPSILON:
            payments.append(SettledPayment(from_participant=debtor[0], to_participant=creditor[0], amount=transfer))

        debtor[1] += transfer
        creditor[1] -= transfer

        if abs(debtor[1]) < SETTLEMENT_EPSILON:
            i += 1
        if abs(creditor[1]) < SETTLEMENT_EPSILON:
            j += 1

    log.debug(
        "settlement.computed",
        participants=len(participants),
        debtors=len(debtors),
        creditors=len(creditors),
        payments=len(payments),
    )
    return payments
