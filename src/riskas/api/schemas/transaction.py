"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from riskas.domain.models.enums import TransactionType

# Range of a SQLite INTEGER primary key
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class TransactionCreateRequest(BaseModel):
    """
    Request schema for creating a transaction.

    Only checks shape; business rules (positive amount, allowed types,
    non-blank description) are enforced by the ledger service.
    """

    description: str = Field(..., max_length=255, description="What the entry is for")
    amount: Decimal = Field(..., description="Positive amount, at most two decimal places")
    type: str = Field(..., description='Either "income" or "expense"')


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    description: str
    amount: Decimal
    type: TransactionType
    date: datetime
    created_at: datetime = Field(serialization_alias="createdAt")


class DeleteResponse(BaseModel):
    """Acknowledgement returned after a delete."""

    message: str = "Transaction deleted successfully"
