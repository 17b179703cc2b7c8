"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from riskas.repositories.sqlalchemy import get_db, SqlAlchemyTransactionRepository
from riskas.services import LedgerService
from riskas.csv import CsvExporter


def get_transaction_repo(db: Session = Depends(get_db)) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(db)


def get_ledger_service(
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
) -> LedgerService:
    """Provide a LedgerService bound to this request's session."""
    return LedgerService(transaction_repo=transaction_repo)


def get_csv_exporter(
    ledger_service: LedgerService = Depends(get_ledger_service),
) -> CsvExporter:
    """Provide CsvExporter instance."""
    return CsvExporter(ledger_service=ledger_service)
