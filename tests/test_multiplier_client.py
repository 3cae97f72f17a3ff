"""
Tests for the rule service HTTP client and its best-effort wrapper.
"""
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
import requests

from apps.common.exceptions import ExternalServiceUnavailable
from apps.customers.models import Transaction
from apps.rewards.services import BestEffortMultiplier, MonthKey, MultiplierClient

JUNE = MonthKey(2025, 6)


def json_response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def client():
    return MultiplierClient(base_url='http://rules.local/', timeout=1.5, verify_ssl=True)


class TestMultiplierClient:

    def test_returns_multiplier(self, client):
        with patch('apps.rewards.services.multiplier_client.requests.get',
                   return_value=json_response({'multiplier': 3})) as mock_get:
            assert client.get_multiplier(JUNE) == 3

        mock_get.assert_called_once_with(
            'http://rules.local/multipliers/2025-06', timeout=1.5, verify=True
        )

    def test_settings_used_by_default(self, settings):
        settings.REWARDS_MULTIPLIER_SERVICE_URL = 'http://configured.local'
        settings.REWARDS_MULTIPLIER_TIMEOUT = 0.25

        default_client = MultiplierClient()

        assert default_client.base_url == 'http://configured.local'
        assert default_client.timeout == 0.25

    @pytest.mark.parametrize('error', [
        requests.Timeout('read timed out'),
        requests.ConnectionError('connection refused'),
    ])
    def test_network_failures_raise_unavailable(self, client, error):
        with patch('apps.rewards.services.multiplier_client.requests.get', side_effect=error):
            with pytest.raises(ExternalServiceUnavailable):
                client.get_multiplier(JUNE)

    def test_error_status_raises_unavailable(self, client):
        with patch('apps.rewards.services.multiplier_client.requests.get',
                   return_value=json_response({}, status_code=503)):
            with pytest.raises(ExternalServiceUnavailable):
                client.get_multiplier(JUNE)

    def test_undecodable_body_raises_unavailable(self, client):
        response = json_response(None)
        response.json.side_effect = ValueError('No JSON object could be decoded')

        with patch('apps.rewards.services.multiplier_client.requests.get', return_value=response):
            with pytest.raises(ExternalServiceUnavailable):
                client.get_multiplier(JUNE)

    @pytest.mark.parametrize('payload', [
        {},
        {'multiplier': '2'},
        {'multiplier': 1.5},
        {'multiplier': -1},
        {'multiplier': True},
        [2],
    ])
    def test_invalid_payload_raises_unavailable(self, client, payload):
        with patch('apps.rewards.services.multiplier_client.requests.get',
                   return_value=json_response(payload)):
            with pytest.raises(ExternalServiceUnavailable):
                client.get_multiplier(JUNE)

    def test_accepts_month_key_string(self, client):
        with patch('apps.rewards.services.multiplier_client.requests.get',
                   return_value=json_response({'multiplier': 2})) as mock_get:
            assert client.get_multiplier('2024-12') == 2

        assert mock_get.call_args[0][0] == 'http://rules.local/multipliers/2024-12'

    @pytest.mark.parametrize('value', ['2024-1', 'December', '2024/12'])
    def test_malformed_month_key_rejected_without_request(self, client, value):
        with patch('apps.rewards.services.multiplier_client.requests.get') as mock_get:
            with pytest.raises(ValueError):
                client.get_multiplier(value)

        mock_get.assert_not_called()

    def test_unconfigured_url_raises_without_request(self):
        with patch('apps.rewards.services.multiplier_client.requests.get') as mock_get:
            with pytest.raises(ExternalServiceUnavailable):
                MultiplierClient(base_url='').get_multiplier(JUNE)

        mock_get.assert_not_called()


class TestBestEffortMultiplier:

    def test_passes_through_successful_lookup(self):
        rule_client = MagicMock()
        rule_client.get_multiplier.return_value = 4

        multipliers = BestEffortMultiplier(rule_client)

        assert multipliers.multiplier_for(JUNE) == 4
        assert multipliers.failed_months == set()

    def test_failure_defaults_to_one(self):
        rule_client = MagicMock()
        rule_client.get_multiplier.side_effect = ExternalServiceUnavailable('down')

        multipliers = BestEffortMultiplier(rule_client)

        assert multipliers.multiplier_for(JUNE) == 1
        assert multipliers.failed_months == {JUNE}

    def test_unexpected_error_defaults_to_one(self):
        rule_client = MagicMock()
        rule_client.get_multiplier.side_effect = TimeoutError('slow')

        multipliers = BestEffortMultiplier(rule_client)

        assert multipliers.multiplier_for(JUNE) == 1
        assert multipliers.failed_months == {JUNE}

    def test_lookups_cached_per_month(self):
        rule_client = MagicMock()
        rule_client.get_multiplier.return_value = 2

        multipliers = BestEffortMultiplier(rule_client)
        multipliers.multiplier_for(JUNE)
        multipliers.multiplier_for(JUNE)
        multipliers.multiplier_for(MonthKey(2025, 7))

        assert rule_client.get_multiplier.call_count == 2

    def test_points_with_multiplier(self):
        rule_client = MagicMock()
        rule_client.get_multiplier.return_value = 2
        transaction = Transaction(amount=Decimal('120.00'), transaction_date=date(2025, 6, 1))

        multipliers = BestEffortMultiplier(rule_client)

        assert multipliers.points_with_multiplier(transaction, JUNE) == 180

    def test_timeout_through_real_client_degrades_quietly(self, client):
        transaction = Transaction(amount=Decimal('80.00'), transaction_date=date(2025, 6, 2))

        with patch('apps.rewards.services.multiplier_client.requests.get',
                   side_effect=requests.Timeout('read timed out')):
            multipliers = BestEffortMultiplier(client)
            assert multipliers.points_with_multiplier(transaction, JUNE) == 30
