"""
Customer management views with RESTful API design.
"""
from rest_framework import viewsets, status
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..models import Customer
from ..serializers import CustomerListSerializer, CustomerSerializer, CustomerUpdateSerializer
from ..services import CustomerService


class CustomerViewSet(viewsets.ModelViewSet):
    """
    RESTful API for customer management.

    Endpoints:
    - GET /customers/ - List all customers (id and name)
    - POST /customers/ - Create new customer
    - GET /customers/{id}/ - Get customer detail with transactions
    - PUT /customers/{id}/ - Update customer name (full)
    - PATCH /customers/{id}/ - Update customer name (partial)
    - DELETE /customers/{id}/ - Delete customer and its transactions
    """
    queryset = Customer.objects.all()
    permission_classes = [IsAuthenticated]
    # ids are caller-supplied and may contain dots
    lookup_value_regex = '[^/]+'

    def get_serializer_class(self):
        if self.action == 'list':
            return CustomerListSerializer
        if self.action in ('update', 'partial_update'):
            return CustomerUpdateSerializer
        return CustomerSerializer

    def get_object(self):
        """Resolve the customer through the service so a miss raises NotFoundError"""
        customer = CustomerService.get_customer_with_transactions(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, customer)
        return customer

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return success_response(serializer.data, 'Customer list retrieved successfully')

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return success_response(serializer.data, 'Customer created successfully', status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance)
        return success_response(serializer.data, 'Customer retrieved successfully')

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return success_response(serializer.data, 'Customer updated successfully')

    def partial_update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        CustomerService.delete_customer(instance)
        return success_response(None, 'Customer has been deleted successfully')
