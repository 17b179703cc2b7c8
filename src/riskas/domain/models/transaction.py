"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from riskas.domain.models.enums import TransactionType


@dataclass
class Transaction:
    """
    Ledger entry (income or expense).

    - id is assigned by the store and never reused
    - amount is a positive Decimal with two decimal places
    - direction is carried by type, never by the sign of amount
    - records are never edited in place
    """

    id: Optional[int]
    description: str
    amount: Decimal
    type: TransactionType
    date: Optional[datetime] = field(default=None)
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.type, str):
            self.type = TransactionType(self.type)

    @property
    def is_income(self) -> bool:
        """Return True if this entry adds to the balance."""
        return self.type == TransactionType.INCOME

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by type (expenses negative)."""
        return self.amount if self.is_income else -self.amount
