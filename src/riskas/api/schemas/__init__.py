"""Pydantic schemas for API request/response."""

from riskas.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionResponse,
    DeleteResponse,
    ID_MIN,
    ID_MAX,
)
from riskas.api.schemas.summary import SummaryResponse

__all__ = [
    "TransactionCreateRequest",
    "TransactionResponse",
    "DeleteResponse",
    "ID_MIN",
    "ID_MAX",
    "SummaryResponse",
]
