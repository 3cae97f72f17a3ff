"""
Property-based tests for the tiered reward points rule.
"""
import math
from decimal import Decimal

import pytest
from hypothesis import given, strategies as st, settings

from apps.rewards.services import calculate_reward_points


def amounts(min_value, max_value):
    return st.decimals(min_value=Decimal(min_value), max_value=Decimal(max_value), places=2)


class TestPointsCalculationProperties:
    """Property tests for each tier of the points rule"""

    @given(amount=amounts('0', '50'))
    @settings(max_examples=100, deadline=None)
    def test_no_points_up_to_fifty(self, amount):
        assert calculate_reward_points(amount) == 0

    @given(amount=amounts('50.01', '100'))
    @settings(max_examples=100, deadline=None)
    def test_one_point_per_dollar_between_fifty_and_hundred(self, amount):
        assert calculate_reward_points(amount) == math.floor(amount) - 50

    @given(amount=amounts('100.01', '1000000'))
    @settings(max_examples=100, deadline=None)
    def test_two_points_per_dollar_over_hundred(self, amount):
        assert calculate_reward_points(amount) == 50 + 2 * (math.floor(amount) - 100)

    @given(amount=amounts('0', '1000000'))
    @settings(max_examples=100, deadline=None)
    def test_points_are_non_negative_integers(self, amount):
        points = calculate_reward_points(amount)
        assert isinstance(points, int)
        assert points >= 0

    @given(lower=amounts('0', '100000'), delta=amounts('0', '1000'))
    @settings(max_examples=100, deadline=None)
    def test_points_never_decrease_with_amount(self, lower, delta):
        assert calculate_reward_points(lower + delta) >= calculate_reward_points(lower)


@pytest.mark.parametrize('amount, expected', [
    (40, 0),
    (50, 0),
    (80, 30),
    (100, 50),
    (120, 90),
    (130, 110),
])
def test_reference_amounts(amount, expected):
    assert calculate_reward_points(amount) == expected


@pytest.mark.parametrize('amount, expected', [
    (Decimal('50.99'), 0),
    (Decimal('51.99'), 1),
    (Decimal('100.50'), 50),
    (Decimal('120.99'), 90),
])
def test_cents_are_truncated(amount, expected):
    assert calculate_reward_points(amount) == expected


def test_accepts_floats_and_strings():
    assert calculate_reward_points(120.0) == 90
    assert calculate_reward_points('80.75') == 30
