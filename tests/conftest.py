"""
Test configuration for the rewards server.
"""
import pytest
import os
import django


def pytest_configure():
    """Configure Django settings for testing."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'rewards_server.settings.test')
    django.setup()


@pytest.fixture
def api_user(db):
    """A user allowed to call the API."""
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def api_client(api_user):
    """DRF client authenticated as api_user."""
    from rest_framework.test import APIClient
    client = APIClient()
    client.force_authenticate(user=api_user)
    return client


@pytest.fixture
def customer_c001(db):
    """Customer C001 with two June 2025 purchases of 120 and 80."""
    from datetime import date
    from decimal import Decimal
    from tests.factories import CustomerFactory, TransactionFactory

    customer = CustomerFactory(id='C001', name='Test User')
    TransactionFactory(customer=customer, amount=Decimal('120.00'), transaction_date=date(2025, 6, 1))
    TransactionFactory(customer=customer, amount=Decimal('80.00'), transaction_date=date(2025, 6, 2))
    return customer
