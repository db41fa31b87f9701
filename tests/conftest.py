"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from fee_gateway.api.main import create_app
from fee_gateway.domain.models import FeeCharge, FeeStatus


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def due_date() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def sample_fees() -> list[FeeCharge]:
    """A student's fee list spanning every status"""
    return [
        FeeCharge(
            amount=Decimal(5000),
            due_date=date(2024, 1, 10),
            status=FeeStatus.PAID,
            month="January 2024",
        ),
        FeeCharge(
            amount=Decimal(5000),
            due_date=date(2024, 2, 10),
            status=FeeStatus.PAID,
            amount_paid=Decimal(5660),  # Paid late, fine included
        ),
        FeeCharge(
            amount=Decimal(5000),
            due_date=date(2024, 3, 10),
            status=FeeStatus.PENDING,
            amount_paid=Decimal(2000),
        ),
        FeeCharge(
            amount=Decimal(4500),
            due_date=date(2023, 12, 10),
            status=FeeStatus.OVERDUE,
        ),
    ]
