"""
Client for the external multiplier rule service and the best-effort lookup built on it.
"""
import logging

import requests
from django.conf import settings

from apps.common.exceptions import ExternalServiceUnavailable
from .points_calculator import calculate_reward_points
from .summary_aggregator import MonthKey

logger = logging.getLogger(__name__)

DEFAULT_MULTIPLIER = 1


class MultiplierClient:
    """
    HTTP client for the rule service.

    ``GET {base_url}/multipliers/{YYYY-MM}`` answers ``{"multiplier": <int>}``.
    Every failure is raised as ExternalServiceUnavailable; there are no retries.
    """

    def __init__(self, base_url=None, timeout=None, verify_ssl=None):
        if base_url is None:
            base_url = settings.REWARDS_MULTIPLIER_SERVICE_URL
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout if timeout is not None else settings.REWARDS_MULTIPLIER_TIMEOUT
        self.verify_ssl = verify_ssl if verify_ssl is not None else settings.REWARDS_MULTIPLIER_VERIFY_SSL

    def get_multiplier(self, month_key):
        """
        Fetch the integer multiplier for a month.

        Args:
            month_key: MonthKey (or its 'YYYY-MM' string)

        Raises:
            ExternalServiceUnavailable: On timeout, network error, bad status or bad payload
            ValueError: If a string month key is not YYYY-MM
        """
        if not isinstance(month_key, MonthKey):
            month_key = MonthKey.parse(month_key)

        if not self.base_url:
            raise ExternalServiceUnavailable("Multiplier service URL is not configured")

        url = f"{self.base_url}/multipliers/{month_key}"

        try:
            response = requests.get(url, timeout=self.timeout, verify=self.verify_ssl)
            response.raise_for_status()
            data = response.json()
        except requests.Timeout as e:
            raise ExternalServiceUnavailable(f"Multiplier lookup timed out: {e}") from e
        except requests.RequestException as e:
            raise ExternalServiceUnavailable(f"Network error: {e}") from e
        except ValueError as e:
            raise ExternalServiceUnavailable("Invalid response from multiplier service") from e

        multiplier = data.get('multiplier') if isinstance(data, dict) else None
        # bool is an int subclass; reject it explicitly
        if isinstance(multiplier, bool) or not isinstance(multiplier, int) or multiplier < 0:
            raise ExternalServiceUnavailable(f"Invalid multiplier in response: {multiplier!r}")

        return multiplier


class BestEffortMultiplier:
    """
    Per-request multiplier lookup that never fails.

    Each distinct month is fetched once. Any failed lookup, whatever the
    client raised, falls back to a multiplier of 1 for that month only and
    is logged, not raised.
    """

    def __init__(self, client):
        self.client = client
        self.failed_months = set()
        self._multipliers = {}

    def multiplier_for(self, month_key):
        if month_key not in self._multipliers:
            self._multipliers[month_key] = self._fetch(month_key)
        return self._multipliers[month_key]

    def points_with_multiplier(self, transaction, month_key):
        """Base points of a transaction scaled by the multiplier of its month"""
        return calculate_reward_points(transaction.amount) * self.multiplier_for(month_key)

    def _fetch(self, month_key):
        try:
            return self.client.get_multiplier(month_key)
        except ExternalServiceUnavailable as e:
            logger.warning(
                f"Multiplier lookup for {month_key} failed, using {DEFAULT_MULTIPLIER}: {e.message}"
            )
            self.failed_months.add(month_key)
            return DEFAULT_MULTIPLIER
        except Exception as e:
            logger.error(
                f"Unexpected error looking up multiplier for {month_key}, using {DEFAULT_MULTIPLIER}: {e}",
                exc_info=True
            )
            self.failed_months.add(month_key)
            return DEFAULT_MULTIPLIER
