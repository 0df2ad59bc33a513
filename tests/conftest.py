"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from goal_optimizer.api.main import create_app
from goal_optimizer.infrastructure.database.models import Base
from goal_optimizer.infrastructure.database.session import get_db
from goal_optimizer.domain.models import Goal, Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

AS_OF = date(2025, 1, 15)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def as_of() -> date:
    """Fixed evaluation date so projections are reproducible"""
    return AS_OF


@pytest.fixture
def sample_goals() -> list[Goal]:
    """Emergency fund (8 months out) and vacation (12 months out)"""
    return [
        Goal(
            id="emergency",
            name="Emergency Fund",
            target_amount=10000.0,
            current_amount=3000.0,
            deadline=AS_OF + timedelta(days=240),
        ),
        Goal(
            id="vacation",
            name="Vacation Fund",
            target_amount=3000.0,
            current_amount=500.0,
            deadline=AS_OF + timedelta(days=360),
        ),
    ]


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Trailing month: $5000 salary, $3000 of spending, plus an old paycheck outside the window"""
    return [
        Transaction(
            transaction_id="salary_current",
            date=AS_OF - timedelta(days=10),
            amount=5000.0,
            type="credit",
            description="Salary Deposit",
            category="income",
        ),
        Transaction(
            transaction_id="rent",
            date=AS_OF - timedelta(days=9),
            amount=2000.0,
            type="debit",
            description="Rent",
            category="housing",
        ),
        Transaction(
            transaction_id="groceries",
            date=AS_OF - timedelta(days=3),
            amount=1000.0,
            type="debit",
            description="Groceries",
            category="groceries",
        ),
        Transaction(
            transaction_id="salary_old",
            date=AS_OF - timedelta(days=45),
            amount=5000.0,
            type="credit",
            description="Salary Deposit",
            category="income",
        ),
    ]
