"""
Reward views module.

All views are exported from this module.
"""
from .summary_views import (
    get_all_reward_summaries, get_customer_rewards, get_customer_rewards_with_multiplier
)

__all__ = [
    'get_all_reward_summaries',
    'get_customer_rewards',
    'get_customer_rewards_with_multiplier',
]
