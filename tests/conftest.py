"""Pytest fixtures for testing"""

import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="bizbooks-uploads-"))

import pytest  # noqa: E402
from datetime import date, datetime, timedelta  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Callable, Generator  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker, Session  # noqa: E402
from bizbooks.api.main import create_app  # noqa: E402
from bizbooks.api.dependencies import get_photo_store, get_today  # noqa: E402
from bizbooks.infrastructure.database.models import Base  # noqa: E402
from bizbooks.infrastructure.database.session import get_db  # noqa: E402
from bizbooks.infrastructure.storage.photos import PhotoStore  # noqa: E402
from bizbooks.domain.models import Transaction, TransactionType  # noqa: E402


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TODAY = date(2024, 1, 15)
BASE_CREATED_AT = datetime(2024, 1, 15, 9, 0, 0)


@pytest.fixture
def today() -> date:
    return TODAY


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
def photo_store(tmp_path) -> PhotoStore:
    return PhotoStore(upload_dir=tmp_path / "uploads", url_prefix="/uploads", max_bytes=1024)


@pytest.fixture
def client(db: Session, photo_store: PhotoStore) -> TestClient:
    """Create FastAPI test client with test database, fixed clock and temp photo dir"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    app.dependency_overrides[get_photo_store] = lambda: photo_store
    return TestClient(app)


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for domain transactions with sensible defaults"""

    def _make(
        id: int,
        type: TransactionType = TransactionType.INCOME,
        amount: str = "10.00",
        date: date = TODAY,
        description: str = "Sale",
        category: str = "sales",
        created_at: datetime | None = None,
        photo_url: str | None = None,
    ) -> Transaction:
        return Transaction(
            id=id,
            type=type,
            amount=Decimal(amount),
            description=description,
            category=category,
            date=date,
            created_at=created_at or BASE_CREATED_AT + timedelta(minutes=id),
            photo_url=photo_url,
        )

    return _make


@pytest.fixture
def sample_transactions(make_transaction) -> list[Transaction]:
    """A week of mixed shop activity ending on TODAY"""
    return [
        make_transaction(1, TransactionType.INCOME, "250.00", TODAY - timedelta(days=6), "Widget sales", "sales"),
        make_transaction(2, TransactionType.EXPENSE, "1200.00", TODAY - timedelta(days=5), "Office Rent", "rent"),
        make_transaction(3, TransactionType.EXPENSE, "45.50", TODAY - timedelta(days=3), "Courier", "shipping"),
        make_transaction(4, TransactionType.INCOME, "80.25", TODAY - timedelta(days=1), "Consulting call", "services"),
        make_transaction(5, TransactionType.INCOME, "100.10", TODAY, "Market stall", "sales"),
        make_transaction(6, TransactionType.EXPENSE, "30.05", TODAY, "Facebook ads", "marketing"),
        make_transaction(7, TransactionType.INCOME, "19.99", TODAY, "Refund from supplier", "refunds"),
    ]
