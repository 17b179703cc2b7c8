"""Repository layer - data access abstractions and implementations."""

from riskas.repositories.protocols import TransactionRepository

__all__ = [
    "TransactionRepository",
]
