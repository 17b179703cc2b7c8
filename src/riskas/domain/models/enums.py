"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a ledger entry. Amounts are always positive."""

    INCOME = "income"
    EXPENSE = "expense"
