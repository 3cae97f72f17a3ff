"""
Customer serializers for list, detail and update operations.
"""
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from apps.common.validators import validate_not_blank
from ..models import Customer
from .transaction_serializers import TransactionSerializer


class CustomerListSerializer(serializers.ModelSerializer):
    """
    Serializer for customer list view - id and name only.
    Used for: GET /api/customers/
    """

    class Meta:
        model = Customer
        fields = ['id', 'name']
        read_only_fields = fields


class CustomerSerializer(serializers.ModelSerializer):
    """
    Serializer for customer create and detail views.
    Used for: POST /api/customers/, GET /api/customers/{id}/
    """
    id = serializers.CharField(
        max_length=64,
        validators=[UniqueValidator(
            queryset=Customer.objects.all(),
            message='A customer with this ID already exists.'
        )]
    )
    transactions = TransactionSerializer(many=True, read_only=True)

    class Meta:
        model = Customer
        fields = ['id', 'name', 'transactions']

    def validate_id(self, value):
        return validate_not_blank(value, 'Customer ID')

    def validate_name(self, value):
        return validate_not_blank(value, 'Customer name')


class CustomerUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for customer updates - only the name can change.
    Used for: PUT/PATCH /api/customers/{id}/
    """

    class Meta:
        model = Customer
        fields = ['id', 'name']
        read_only_fields = ['id']

    def validate_name(self, value):
        return validate_not_blank(value, 'Customer name')
