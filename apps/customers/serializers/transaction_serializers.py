"""
Transaction serializers for list, detail, create and update operations.
"""
from rest_framework import serializers

from apps.common.validators import validate_transaction_amount
from ..models import Transaction


class TransactionSerializer(serializers.ModelSerializer):
    """
    Serializer for transactions.
    Used for: /api/transactions/ and nested inside customer and reward summary payloads.

    The owning customer is carried as a plain id so that serialization never
    walks back from a transaction to its customer.
    """
    customer_id = serializers.CharField(
        max_length=64,
        error_messages={'required': 'Customer ID must be provided'}
    )
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    transaction_date = serializers.DateField(
        error_messages={'required': 'Transaction date is required'}
    )

    class Meta:
        model = Transaction
        fields = ['id', 'customer_id', 'amount', 'transaction_date']
        read_only_fields = ['id']

    def validate_amount(self, value):
        return validate_transaction_amount(value)
