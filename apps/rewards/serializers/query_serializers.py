"""
Query parameter serializers for reward endpoints.
"""
from rest_framework import serializers

DATE_FORMAT_MESSAGE = 'Invalid date input provided. Please use yyyy-MM-dd format.'


class DateRangeQuerySerializer(serializers.Serializer):
    """Validates the ?start=&end= window of a customer summary request"""
    start = serializers.DateField(
        input_formats=['%Y-%m-%d'],
        error_messages={'required': 'Missing required input: start', 'invalid': DATE_FORMAT_MESSAGE}
    )
    end = serializers.DateField(
        input_formats=['%Y-%m-%d'],
        error_messages={'required': 'Missing required input: end', 'invalid': DATE_FORMAT_MESSAGE}
    )
