"""Domain models package."""

from riskas.domain.models.enums import TransactionType
from riskas.domain.models.transaction import Transaction

__all__ = [
    "TransactionType",
    "Transaction",
]
