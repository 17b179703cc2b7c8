"""Transaction endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import Response

from riskas.api.deps import get_ledger_service, get_csv_exporter
from riskas.api.schemas import (
    TransactionCreateRequest,
    TransactionResponse,
    DeleteResponse,
    ID_MIN,
    ID_MAX,
)
from riskas.csv import CsvExporter
from riskas.services import LedgerService

router = APIRouter(prefix="/api/transactions", tags=["transactions"])

TransactionId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX, description="Transaction ID")]


@router.get("", response_model=list[TransactionResponse])
def list_transactions(
    ledger: LedgerService = Depends(get_ledger_service),
):
    """List all transactions, newest first."""
    return ledger.list_transactions()


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: TransactionCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Create a new transaction and return the stored record."""
    return ledger.create_transaction(
        description=data.description,
        amount=data.amount,
        type=data.type,
    )


@router.get("/export")
def export_transactions(
    exporter: CsvExporter = Depends(get_csv_exporter),
):
    """Download the ledger and its totals as a CSV file."""
    return Response(
        content=exporter.render(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="transactions.csv"'},
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: TransactionId,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Get a single transaction."""
    return ledger.get_transaction(transaction_id)


@router.delete("/{transaction_id}", response_model=DeleteResponse)
def delete_transaction(
    transaction_id: TransactionId,
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Permanently delete a transaction. Deleting twice returns 404."""
    ledger.delete_transaction(transaction_id)
    return DeleteResponse()
