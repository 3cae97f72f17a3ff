"""
Reward summary serializers (read-only, built from RewardSummary objects).
"""
from rest_framework import serializers

from apps.customers.serializers import TransactionSerializer


class MonthlyPointsSerializer(serializers.Serializer):
    """One month of the breakdown: year, English month name and points"""
    year = serializers.IntegerField(read_only=True)
    month = serializers.CharField(read_only=True)
    points = serializers.IntegerField(read_only=True)


class RewardSummarySerializer(serializers.Serializer):
    """
    Serializer for reward summaries.
    Used for: GET /api/rewards/, GET /api/rewards/{customer_id}/
    """
    customer_id = serializers.CharField(read_only=True)
    customer_name = serializers.CharField(read_only=True)
    monthly_points = serializers.DictField(
        child=serializers.IntegerField(), source='monthly_points_by_key', read_only=True
    )
    monthly_breakdown = MonthlyPointsSerializer(many=True, read_only=True)
    total_points = serializers.IntegerField(read_only=True)
    transactions = TransactionSerializer(many=True, read_only=True)
