"""Summary engine: aggregate totals over a ledger snapshot."""

from decimal import Decimal
from typing import Iterable

from riskas.domain.models import Transaction, TransactionType
from riskas.domain.views import LedgerSummary

CENTS = Decimal("0.01")


def summarize(transactions: Iterable[Transaction]) -> LedgerSummary:
    """
    Compute income, expense and net totals.

    Pure function of its input: the result is the same for any ordering
    of the same records and is always recomputed from the full list.
    """
    total_income = Decimal("0")
    total_expenses = Decimal("0")

    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
        elif txn.type == TransactionType.EXPENSE:
            total_expenses += txn.amount

    return LedgerSummary(
        total_income=total_income.quantize(CENTS),
        total_expenses=total_expenses.quantize(CENTS),
        net_balance=(total_income - total_expenses).quantize(CENTS),
    )
