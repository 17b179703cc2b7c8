"""API routers package."""

from riskas.api.routers.transactions import router as transactions_router
from riskas.api.routers.summary import router as summary_router

__all__ = [
    "transactions_router",
    "summary_router",
]
