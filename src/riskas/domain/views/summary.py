"""View models for derived ledger outputs."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class LedgerSummary:
    """Aggregate totals over a ledger snapshot."""

    total_income: Decimal = field(default_factory=lambda: Decimal("0.00"))
    total_expenses: Decimal = field(default_factory=lambda: Decimal("0.00"))
    net_balance: Decimal = field(default_factory=lambda: Decimal("0.00"))
