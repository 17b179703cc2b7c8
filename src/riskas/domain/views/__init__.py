"""View models for service outputs."""

from riskas.domain.views.summary import LedgerSummary

__all__ = [
    "LedgerSummary",
]
