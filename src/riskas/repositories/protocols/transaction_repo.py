"""Transaction repository protocol."""

from typing import Protocol, Optional

from riskas.domain.models import Transaction


class TransactionRepository(Protocol):
    """Interface for transaction (ledger) data access.

    Implementations raise ``StoreFailure`` when the backing store fails.
    """

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction; the store assigns id and timestamps."""
        ...

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        ...

    def list_all(self) -> list[Transaction]:
        """List all transactions, most recent first."""
        ...

    def delete(self, transaction_id: int) -> bool:
        """Hard delete a transaction. Returns False if it did not exist."""
        ...
