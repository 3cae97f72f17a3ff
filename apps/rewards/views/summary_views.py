"""
Reward summary query views.
"""
import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..serializers import DateRangeQuerySerializer, RewardSummarySerializer
from ..services import RewardService

logger = logging.getLogger(__name__)


def _date_range(request):
    serializer = DateRangeQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data['start'], serializer.validated_data['end']


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_all_reward_summaries(request):
    """Get reward summaries for all customers over all their transactions"""
    logger.info("API called: get_all_reward_summaries")
    summaries = RewardService.get_all_summaries()
    serializer = RewardSummarySerializer(summaries, many=True)
    return success_response(serializer.data, 'Reward summaries retrieved successfully')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_customer_rewards(request, customer_id):
    """Get one customer's reward summary for ?start=YYYY-MM-DD&end=YYYY-MM-DD"""
    logger.info(f"API called: get_customer_rewards for {customer_id}")
    start_date, end_date = _date_range(request)
    summary = RewardService.get_customer_summary(customer_id, start_date, end_date)
    serializer = RewardSummarySerializer(summary)
    return success_response(serializer.data, 'Reward summary retrieved successfully')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_customer_rewards_with_multiplier(request, customer_id):
    """Same as get_customer_rewards, scaled by the rule service's monthly multipliers"""
    logger.info(f"API called: get_customer_rewards_with_multiplier for {customer_id}")
    start_date, end_date = _date_range(request)
    summary = RewardService.get_customer_summary_with_external_multiplier(
        customer_id, start_date, end_date
    )
    serializer = RewardSummarySerializer(summary)
    return success_response(serializer.data, 'Reward summary retrieved successfully')
