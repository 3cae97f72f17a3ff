"""
Tiered reward points rule.
"""
from decimal import Decimal, ROUND_DOWN

LOWER_THRESHOLD = Decimal('50')
UPPER_THRESHOLD = Decimal('100')


def _whole_units(amount):
    return int(amount.to_integral_value(rounding=ROUND_DOWN))


def calculate_reward_points(amount):
    """
    Points earned by a single purchase amount.

    - amount <= 50: 0
    - 50 < amount <= 100: floor(amount) - 50
    - amount > 100: 50 + 2 * (floor(amount) - 100)

    Thresholds compare the exact amount; cents are truncated only when
    counting whole dollars.
    """
    amount = Decimal(str(amount))

    if amount <= LOWER_THRESHOLD:
        return 0
    if amount <= UPPER_THRESHOLD:
        return _whole_units(amount) - 50
    return 50 + 2 * (_whole_units(amount) - 100)
