"""
Reward services module.

All services are exported from this module.
"""
from .points_calculator import calculate_reward_points
from .summary_aggregator import MonthKey, MonthlyPoints, RewardSummary, aggregate, base_points
from .multiplier_client import BestEffortMultiplier, MultiplierClient
from .reward_service import RewardService

__all__ = [
    'calculate_reward_points',
    'MonthKey',
    'MonthlyPoints',
    'RewardSummary',
    'aggregate',
    'base_points',
    'BestEffortMultiplier',
    'MultiplierClient',
    'RewardService',
]
