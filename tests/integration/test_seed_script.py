"""Integration test for the demo seeding script against a file database."""

from decimal import Decimal

import pytest

from riskas.config.settings import Settings, set_settings, reset_settings
from riskas.repositories.sqlalchemy import get_session_factory, reset_database, SqlAlchemyTransactionRepository
from riskas.services import LedgerService

from scripts.seed_demo_data import seed, EXPENSES


@pytest.fixture
def file_database(tmp_path):
    """Point the global engine at a throwaway SQLite file."""
    reset_database()
    set_settings(Settings(database_url=f"sqlite:///{tmp_path / 'seed.db'}"))
    yield tmp_path / "seed.db"
    reset_database()
    reset_settings()


def test_seed_creates_balanced_ledger(file_database, capsys):
    seed(seed_value=1)

    assert file_database.exists()
    session = get_session_factory()()
    try:
        ledger = LedgerService(SqlAlchemyTransactionRepository(session))
        transactions = ledger.list_transactions()
        summary = ledger.summary()
    finally:
        session.close()

    descriptions = {t.description for t in transactions}
    assert {name for name, _, _ in EXPENSES} <= descriptions
    assert sum(1 for t in transactions if t.description == "Paycheck") == 2
    assert summary.net_balance == summary.total_income - summary.total_expenses
    assert summary.total_income > Decimal("0")
    assert "Net balance" in capsys.readouterr().out
