"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, Integer, String, DateTime, Numeric

from riskas.repositories.sqlalchemy.database import Base
from riskas.core.timezone import now_utc


class TransactionORM(Base):
    """SQLAlchemy model for Transaction (ledger entry)."""

    __tablename__ = "transactions"
    # AUTOINCREMENT keeps SQLite from handing out a deleted max id again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(255), nullable=False)
    amount = Column(Numeric(precision=12, scale=2, asdecimal=True), nullable=False)
    type = Column(String(10), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
