"""SQLAlchemy implementation of TransactionRepository."""

import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from riskas.core.exceptions import StoreFailure
from riskas.core.timezone import now_utc, to_utc
from riskas.domain.models import Transaction
from riskas.repositories.sqlalchemy.orm_models import TransactionORM

logger = logging.getLogger(__name__)


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed transaction repository."""

    def __init__(self, db: Session):
        self._db = db

    @contextmanager
    def _store_operation(self, operation: str) -> Iterator[None]:
        """Roll back and translate driver errors into StoreFailure."""
        try:
            yield
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.exception("Ledger store failed during %s", operation)
            raise StoreFailure(operation) from exc

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        with self._store_operation("create"):
            orm_txn = self._to_orm(transaction)
            self._db.add(orm_txn)
            self._db.commit()
            self._db.refresh(orm_txn)
            return self._to_domain(orm_txn)

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Retrieve transaction by ID."""
        with self._store_operation("get"):
            orm_txn = self._db.query(TransactionORM).filter(
                TransactionORM.id == transaction_id
            ).first()
            return self._to_domain(orm_txn) if orm_txn else None

    def list_all(self) -> list[Transaction]:
        """List all transactions, most recent first."""
        with self._store_operation("list"):
            query = self._db.query(TransactionORM).order_by(
                TransactionORM.created_at.desc(),
                TransactionORM.id.desc(),
            )
            return [self._to_domain(t) for t in query.all()]

    def delete(self, transaction_id: int) -> bool:
        """Hard delete a transaction. Returns False if it did not exist."""
        with self._store_operation("delete"):
            deleted = self._db.query(TransactionORM).filter(
                TransactionORM.id == transaction_id
            ).delete(synchronize_session=False)
            self._db.commit()
            return deleted > 0

    @staticmethod
    def _to_orm(txn: Transaction) -> TransactionORM:
        """Convert domain model to ORM model. The id is always store-assigned."""
        created_at = txn.created_at or now_utc()
        return TransactionORM(
            description=txn.description,
            amount=txn.amount,
            type=txn.type.value,
            date=txn.date or created_at,
            created_at=created_at,
        )

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            id=orm.id,
            description=orm.description,
            amount=Decimal(str(orm.amount)).quantize(Decimal("0.01")),
            type=orm.type,
            date=to_utc(orm.date),
            created_at=to_utc(orm.created_at),
        )
