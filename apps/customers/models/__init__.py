"""
Customer models module.

All models are exported from this module.
"""
from .customer import Customer
from .transaction import Transaction

__all__ = [
    'Customer',
    'Transaction',
]
