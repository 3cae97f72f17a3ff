"""
Common validators module.

All validators are exported from this module.
"""
from .amount_validators import validate_transaction_amount
from .text_validators import validate_not_blank
from .date_validators import validate_date_range

__all__ = [
    'validate_transaction_amount',
    'validate_not_blank',
    'validate_date_range',
]
