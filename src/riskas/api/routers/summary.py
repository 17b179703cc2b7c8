"""Summary endpoint."""

from fastapi import APIRouter, Depends

from riskas.api.deps import get_ledger_service
from riskas.api.schemas import SummaryResponse
from riskas.services import LedgerService

router = APIRouter(prefix="/api/summary", tags=["summary"])


@router.get("", response_model=SummaryResponse)
def get_summary(
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Total income, total expenses and net balance over the whole ledger."""
    return ledger.summary()
