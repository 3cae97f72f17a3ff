"""
Date range validators.
"""
from apps.common.exceptions import InvalidRangeError


def validate_date_range(start_date, end_date):
    """
    Ensure an inclusive date window is well ordered.

    Raises:
        InvalidRangeError: If start_date falls after end_date
    """
    if start_date > end_date:
        raise InvalidRangeError()
    return start_date, end_date
