"""Repository protocol definitions (interfaces)."""

from riskas.repositories.protocols.transaction_repo import TransactionRepository

__all__ = [
    "TransactionRepository",
]
