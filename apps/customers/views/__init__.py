"""
Customer views module.

All views are exported from this module.
"""
from .customer_views import CustomerViewSet
from .transaction_views import TransactionViewSet

__all__ = [
    'CustomerViewSet',
    'TransactionViewSet',
]
