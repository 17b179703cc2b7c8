#!/usr/bin/env python3
"""
Seed the ledger with a realistic month of income and expenses.
Uses the configured database (DATABASE_URL or DATA_DIR env vars).
"""

import random
from decimal import Decimal

from riskas.config.logging_config import setup_logging
from riskas.repositories.sqlalchemy import get_session_factory, init_db, SqlAlchemyTransactionRepository
from riskas.services import LedgerService


# (description, low, high) ranges in dollars
INCOME = [
    ("Paycheck", 2400, 2600),
    ("Freelance invoice", 300, 900),
    ("Interest", 1, 15),
]

EXPENSES = [
    ("Rent", 1200, 1200),
    ("Groceries", 40, 160),
    ("Utilities", 80, 140),
    ("Transit pass", 90, 90),
    ("Dining out", 15, 75),
    ("Phone bill", 45, 45),
    ("Gym membership", 35, 35),
]


def _amount(low: int, high: int) -> Decimal:
    return Decimal(str(round(random.uniform(low, high), 2))).quantize(Decimal("0.01"))


def seed(seed_value: int = 42) -> None:
    """Create two paychecks, a few side incomes and a month of expenses."""
    random.seed(seed_value)
    init_db()

    session = get_session_factory()()
    try:
        ledger = LedgerService(SqlAlchemyTransactionRepository(session))

        paycheck, low, high = INCOME[0]
        entries = [(paycheck, _amount(low, high), "income") for _ in range(2)]
        entries += [(d, _amount(lo, hi), "income") for d, lo, hi in INCOME[1:]]
        for description, low, high in EXPENSES:
            repeats = 4 if low != high else 1
            entries += [(description, _amount(low, high), "expense") for _ in range(repeats)]
        random.shuffle(entries)

        print(f"Seeding {len(entries)} transactions")
        print("=" * 60)
        for description, amount, txn_type in entries:
            txn = ledger.create_transaction(description, amount, txn_type)
            print(f"✓ #{txn.id:<4} {txn_type:<8} {description:<20} ${amount:>10,.2f}")

        summary = ledger.summary()
        print("=" * 60)
        print(f"Total income:   ${summary.total_income:>12,.2f}")
        print(f"Total expenses: ${summary.total_expenses:>12,.2f}")
        print(f"Net balance:    ${summary.net_balance:>12,.2f}")
    finally:
        session.close()


if __name__ == "__main__":
    setup_logging()
    seed()
