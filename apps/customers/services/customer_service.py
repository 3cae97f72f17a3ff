"""
Customer and transaction storage operations used by the API and the reward engine.
"""
import logging

from apps.common.exceptions import NotFoundError
from ..models import Customer, Transaction

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for looking up and persisting customers and their transactions"""

    @staticmethod
    def get_customer(customer_id):
        """Get a customer by id or raise NotFoundError"""
        customer = Customer.objects.filter(pk=customer_id).first()
        if customer is None:
            raise NotFoundError(f"Customer not found with ID: {customer_id}")
        return customer

    @staticmethod
    def get_customer_with_transactions(customer_id):
        """Get a customer with its transactions prefetched"""
        customer = Customer.objects.prefetch_related('transactions').filter(pk=customer_id).first()
        if customer is None:
            raise NotFoundError(f"Customer not found with ID: {customer_id}")
        return customer

    @staticmethod
    def get_all_customers_with_transactions():
        """All customers, each populated with its transactions in a single extra query"""
        return Customer.objects.prefetch_related('transactions').order_by('id')

    @staticmethod
    def get_transaction(transaction_id):
        """Get a transaction by id or raise NotFoundError"""
        transaction = Transaction.objects.filter(pk=transaction_id).first()
        if transaction is None:
            raise NotFoundError(f"Transaction not found with ID: {transaction_id}")
        return transaction

    @staticmethod
    def get_transactions_in_range(customer_id, start_date, end_date):
        """Transactions of a customer within the inclusive date window"""
        return list(Transaction.find_by_customer_and_date_range(customer_id, start_date, end_date))

    @staticmethod
    def save_transaction(serializer):
        """
        Persist a validated transaction serializer after checking its owner exists.

        Raises:
            NotFoundError: If the referenced customer does not exist
        """
        customer_id = serializer.validated_data.get(
            'customer_id', getattr(serializer.instance, 'customer_id', None)
        )
        customer = CustomerService.get_customer(customer_id)
        transaction = serializer.save()
        logger.info(f"Saved transaction {transaction.id} for customer {customer.id}")
        return transaction

    @staticmethod
    def delete_customer(customer):
        """Delete a customer together with all of its transactions"""
        customer_id = customer.id
        deleted, per_model = customer.delete()
        logger.info(
            f"Deleted customer {customer_id} and "
            f"{per_model.get(Transaction._meta.label, 0)} transaction(s)"
        )
        return deleted
