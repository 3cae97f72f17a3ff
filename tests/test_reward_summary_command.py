"""
Tests for the reward_summary management command.
"""
import json
from io import StringIO
from unittest.mock import patch

import pytest
import requests
from django.core.management import call_command
from django.core.management.base import CommandError


def run_command(*args, **options):
    out = StringIO()
    call_command('reward_summary', *args, stdout=out, **options)
    return json.loads(out.getvalue())


@pytest.mark.django_db
class TestRewardSummaryCommand:

    def test_all_customers(self, customer_c001):
        data = run_command()

        assert [item['customer_id'] for item in data] == ['C001']
        assert data[0]['total_points'] == 120

    def test_single_customer_window(self, customer_c001):
        data = run_command('C001', start='2025-06-01', end='2025-06-30')

        assert data['customer_name'] == 'Test User'
        assert data['monthly_points'] == {'2025-06': 120}
        assert data['monthly_breakdown'] == [{'year': 2025, 'month': 'June', 'points': 120}]

    def test_with_multiplier_falls_back_when_service_down(self, customer_c001):
        with patch('apps.rewards.services.multiplier_client.requests.get',
                   side_effect=requests.Timeout('read timed out')):
            data = run_command('C001', start='2025-06-01', end='2025-06-30', with_multiplier=True)

        assert data['total_points'] == 120

    def test_window_required_for_customer(self, customer_c001):
        with pytest.raises(CommandError, match='--start and --end'):
            run_command('C001', start='2025-06-01')

    def test_malformed_date(self, customer_c001):
        with pytest.raises(CommandError, match='YYYY-MM-DD'):
            run_command('C001', start='06/01/2025', end='2025-06-30')

    def test_inverted_window(self, customer_c001):
        with pytest.raises(CommandError, match='Start date cannot be after end date.'):
            run_command('C001', start='2025-06-30', end='2025-06-01')

    def test_unknown_customer(self, db):
        with pytest.raises(CommandError, match='Customer not found with ID: NOPE'):
            run_command('NOPE', start='2025-06-01', end='2025-06-30')

    def test_multiplier_needs_customer(self, db):
        with pytest.raises(CommandError):
            run_command(with_multiplier=True)
