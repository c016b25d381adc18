"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from fastapi.testclient import TestClient
from card_billing.api.main import create_app
from card_billing.api.dependencies import get_clock
from card_billing.domain.models import CardTransaction, PaymentStatus, ReferenceMonth


FIXED_NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_now() -> datetime:
    """Evaluation instant shared by status tests"""
    return FIXED_NOW


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a frozen clock"""
    app = create_app()
    app.dependency_overrides[get_clock] = lambda: FIXED_NOW
    return TestClient(app)


@pytest.fixture
def sample_transactions() -> list[CardTransaction]:
    """A month of mixed card and account transactions"""
    march = ReferenceMonth(2025, 3)
    april = ReferenceMonth(2025, 4)

    return [
        # Card "nubank", March invoice
        CardTransaction(
            amount=Decimal("120.50"),
            reference_month=march,
            card_id="nubank",
            status=PaymentStatus.PENDING,
            due_date=date(2025, 3, 20),
            description="Groceries",
        ),
        CardTransaction(
            amount=Decimal("33.34"),
            reference_month=march,
            card_id="nubank",
            status=PaymentStatus.PENDING,
            due_date=date(2025, 3, 20),
            description="Headphones (3/3)",
        ),
        # Card "inter", March invoice
        CardTransaction(
            amount=Decimal("80.00"),
            reference_month=march,
            card_id="inter",
            status=PaymentStatus.SETTLED,
            due_date=date(2025, 3, 15),
            description="Fuel",
        ),
        # Account debit sharing the March token, no card
        CardTransaction(
            amount=Decimal("999.99"),
            reference_month=march,
            card_id=None,
            status=PaymentStatus.SETTLED,
            description="Rent",
        ),
        # Card "nubank", April invoice
        CardTransaction(
            amount=Decimal("45.00"),
            reference_month=april,
            card_id="nubank",
            status=PaymentStatus.PENDING,
            due_date=date(2025, 4, 20),
            description="Books",
        ),
    ]
