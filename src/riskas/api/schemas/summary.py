"""Pydantic schemas for summary endpoints."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class SummaryResponse(BaseModel):
    """Ledger totals as exact decimal strings."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    total_income: Decimal = Field(serialization_alias="totalIncome")
    total_expenses: Decimal = Field(serialization_alias="totalExpenses")
    net_balance: Decimal = Field(serialization_alias="netBalance")
