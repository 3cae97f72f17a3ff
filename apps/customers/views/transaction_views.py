"""
Transaction management views with RESTful API design.
"""
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..models import Transaction
from ..serializers import TransactionSerializer
from ..services import CustomerService


class TransactionViewSet(viewsets.ModelViewSet):
    """
    RESTful API for transaction management.

    Endpoints:
    - GET /transactions/ - List transactions (optionally ?customer_id=)
    - POST /transactions/ - Create new transaction for an existing customer
    - GET /transactions/{id}/ - Get transaction detail
    - PUT /transactions/{id}/ - Update transaction (full)
    - PATCH /transactions/{id}/ - Update transaction (partial)
    - DELETE /transactions/{id}/ - Delete transaction
    """
    serializer_class = TransactionSerializer
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        queryset = Transaction.objects.all()
        customer_id = self.request.query_params.get('customer_id')
        if customer_id:
            queryset = queryset.filter(customer_id=customer_id)
        return queryset

    def get_object(self):
        """Resolve the transaction through the service so a miss raises NotFoundError"""
        transaction = CustomerService.get_transaction(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, transaction)
        return transaction

    def perform_create(self, serializer):
        CustomerService.save_transaction(serializer)

    def perform_update(self, serializer):
        CustomerService.save_transaction(serializer)

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return success_response(serializer.data, 'Transaction list retrieved successfully')

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return success_response(serializer.data, 'Transaction created successfully', status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance)
        return success_response(serializer.data, 'Transaction retrieved successfully')

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return success_response(serializer.data, 'Transaction updated successfully')

    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return success_response(None, 'Transaction has been deleted successfully')
