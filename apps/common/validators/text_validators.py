"""
Text field validators.
"""
from rest_framework import serializers


def validate_not_blank(value, field_label='Value'):
    """Reject strings that are empty once surrounding whitespace is stripped"""
    if value is None or not str(value).strip():
        raise serializers.ValidationError(f"{field_label} is mandatory.")
    return value.strip()
