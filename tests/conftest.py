"""
Pytest configuration and fixtures for ledger tests.

This module provides:
- In-memory SQLite database fixtures
- Repository and service fixtures
- A factory helper for transactions
- A FastAPI test client bound to the test database
- A broken session for store failure paths
"""

import os
from decimal import Decimal
from typing import Callable, Union
from unittest.mock import MagicMock

# Keep the app's own startup away from the user's data directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from riskas.main import app
from riskas.repositories.sqlalchemy.database import Base, get_db
# Import ORM models to register them with Base before creating tables
from riskas.repositories.sqlalchemy import orm_models  # noqa: F401
from riskas.repositories.sqlalchemy import SqlAlchemyTransactionRepository
from riskas.services import LedgerService
from riskas.csv import CsvExporter
from riskas.domain.models import Transaction
from riskas.config.settings import reset_settings


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def broken_session() -> MagicMock:
    """Session whose every query fails like an unreachable database."""
    error = OperationalError("SELECT 1", {}, Exception("database is locked"))
    session = MagicMock(spec=Session)
    session.query.side_effect = error
    session.commit.side_effect = error
    return session


# =============================================================================
# REPOSITORY / SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyTransactionRepository:
    """Provide test TransactionRepository."""
    return SqlAlchemyTransactionRepository(test_session)


@pytest.fixture
def ledger_service(transaction_repo) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(transaction_repo=transaction_repo)


@pytest.fixture
def csv_exporter(ledger_service) -> CsvExporter:
    """Provide test CsvExporter."""
    return CsvExporter(ledger_service=ledger_service)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def transaction_factory(ledger_service) -> Callable[..., Transaction]:
    """Factory for creating transactions through the service."""

    def _create_transaction(
        description: str = "Groceries",
        amount: Union[Decimal, str] = Decimal("10.00"),
        type: str = "expense",
    ) -> Transaction:
        return ledger_service.create_transaction(
            description=description,
            amount=amount,
            type=type,
        )

    return _create_transaction


# =============================================================================
# API CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def client(test_engine) -> TestClient:
    """Provide FastAPI test client with test database."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(broken_session) -> TestClient:
    """Provide FastAPI test client whose database always fails."""

    def override_get_db():
        yield broken_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
