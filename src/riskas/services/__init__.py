"""Service layer - business logic orchestration."""

from riskas.services.ledger_service import LedgerService
from riskas.services.summary_engine import summarize

__all__ = [
    "LedgerService",
    "summarize",
]
