"""
Customer serializers module.

All serializers are exported from this module.
"""
from .customer_serializers import (
    CustomerListSerializer, CustomerSerializer, CustomerUpdateSerializer
)
from .transaction_serializers import TransactionSerializer

__all__ = [
    'CustomerListSerializer',
    'CustomerSerializer',
    'CustomerUpdateSerializer',
    'TransactionSerializer',
]
