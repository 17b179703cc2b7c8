"""Ledger service for transaction management."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from riskas.core.exceptions import ValidationError, NotFoundError
from riskas.domain.models import Transaction, TransactionType
from riskas.domain.views import LedgerSummary
from riskas.repositories.protocols import TransactionRepository
from riskas.services.summary_engine import CENTS, summarize

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 255
AMOUNT_MAX_DIGITS = 12
AMOUNT_DECIMAL_PLACES = 2
AMOUNT_LIMIT = Decimal(10) ** (AMOUNT_MAX_DIGITS - AMOUNT_DECIMAL_PLACES)


class LedgerService:
    """
    Service for managing the transaction ledger.

    Validates create/delete requests and delegates persistence to the
    repository. Holds no state between calls; every operation reads or
    writes the store afresh. There is intentionally no update operation:
    corrections are made by deleting and recreating an entry.
    """

    def __init__(self, transaction_repo: TransactionRepository):
        self._transaction_repo = transaction_repo

    def list_transactions(self) -> list[Transaction]:
        """List all transactions, most recent first."""
        return self._transaction_repo.list_all()

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID."""
        transaction = self._transaction_repo.get_by_id(transaction_id)
        if not transaction:
            raise NotFoundError("Transaction", str(transaction_id))
        return transaction

    def create_transaction(
        self,
        description: Any,
        amount: Any,
        type: Any,
    ) -> Transaction:
        """
        Add a new entry to the ledger.

        Returns the stored record, including the id and timestamps assigned
        by the store. Nothing is persisted if validation fails.
        """
        transaction = Transaction(
            id=None,
            description=self._validate_description(description),
            amount=self._validate_amount(amount),
            type=self._validate_type(type),
        )
        created = self._transaction_repo.create(transaction)
        logger.info(
            "Created transaction %s (%s %s)", created.id, created.type.value, created.amount
        )
        return created

    def delete_transaction(self, transaction_id: int) -> bool:
        """
        Permanently delete a transaction.

        Raises NotFoundError when the id does not exist, including when it
        was already deleted.
        """
        if not self._transaction_repo.delete(transaction_id):
            raise NotFoundError("Transaction", str(transaction_id))
        logger.info("Deleted transaction %s", transaction_id)
        return True

    def summary(self) -> LedgerSummary:
        """Totals over the current ledger."""
        return summarize(self.list_transactions())

    @staticmethod
    def _validate_description(description: Any) -> str:
        if not isinstance(description, str) or not description.strip():
            raise ValidationError("Description is required")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
            )
        return description

    @staticmethod
    def _validate_type(value: Any) -> TransactionType:
        if isinstance(value, TransactionType):
            return value
        if isinstance(value, str):
            try:
                return TransactionType(value)
            except ValueError:
                pass
        raise ValidationError('Type must be either "income" or "expense"')

    @staticmethod
    def _validate_amount(value: Any) -> Decimal:
        """Parse amount into an exact two-place Decimal."""
        if isinstance(value, bool) or value is None:
            raise ValidationError("Amount must be a positive number")

        try:
            if isinstance(value, Decimal):
                amount = value
            elif isinstance(value, (int, float)):
                # str() keeps the shortest repr, so 0.1 stays 0.1
                amount = Decimal(str(value))
            elif isinstance(value, str):
                amount = Decimal(value.strip())
            else:
                raise ValidationError("Amount must be a positive number")
        except InvalidOperation:
            raise ValidationError("Amount must be a positive number")

        if not amount.is_finite() or amount <= 0:
            raise ValidationError("Amount must be a positive number")

        # NUMERIC(12, 2): checked before quantize, which fails on huge values
        if amount >= AMOUNT_LIMIT:
            raise ValidationError(f"Amount must be less than {AMOUNT_LIMIT}")

        quantized = amount.quantize(CENTS)
        if quantized != amount:
            raise ValidationError(
                f"Amount must have at most {AMOUNT_DECIMAL_PLACES} decimal places"
            )
        return quantized
