"""
Reward serializers module.

All serializers are exported from this module.
"""
from .summary_serializers import MonthlyPointsSerializer, RewardSummarySerializer
from .query_serializers import DateRangeQuerySerializer

__all__ = [
    'MonthlyPointsSerializer',
    'RewardSummarySerializer',
    'DateRangeQuerySerializer',
]
