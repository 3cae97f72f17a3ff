"""
Monetary amount validators.
"""
from rest_framework import serializers


def validate_transaction_amount(value, min_value=0, max_value=None):
    """
    Validate a transaction amount is within the accepted range.

    Args:
        value: Amount decimal
        min_value: Minimum allowed amount (default: 0)
        max_value: Maximum allowed amount (optional)

    Raises:
        serializers.ValidationError: If the amount is outside the valid range

    Returns:
        decimal.Decimal: Validated amount
    """
    if value < min_value:
        raise serializers.ValidationError("Amount must not be negative.")

    if max_value is not None and value > max_value:
        raise serializers.ValidationError(f"Amount must not exceed {max_value}.")

    return value
