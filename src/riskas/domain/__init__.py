"""Domain layer - pure business models with no external dependencies."""

from riskas.domain.models import Transaction, TransactionType
from riskas.domain.views import LedgerSummary

__all__ = [
    "Transaction",
    "TransactionType",
    "LedgerSummary",
]
