"""
Reward summary service: reads current storage state, scores and buckets transactions.
"""
import logging

from apps.common.validators import validate_date_range
from apps.customers.services import CustomerService
from .multiplier_client import BestEffortMultiplier, MultiplierClient
from .summary_aggregator import aggregate

logger = logging.getLogger(__name__)


class RewardService:
    """Service for building reward summaries"""

    @staticmethod
    def get_all_summaries():
        """One summary per customer over all of its transactions"""
        logger.info("Fetching reward summaries for all customers")
        customers = CustomerService.get_all_customers_with_transactions()
        return [
            aggregate(customer, customer.transactions.all())
            for customer in customers
        ]

    @staticmethod
    def get_customer_summary(customer_id, start_date, end_date):
        """
        Summary for one customer over an inclusive date window.

        Raises:
            InvalidRangeError: If start_date is after end_date (checked before any query)
            NotFoundError: If the customer does not exist
        """
        validate_date_range(start_date, end_date)
        logger.info(f"Calculating rewards for customer {customer_id} from {start_date} to {end_date}")

        customer = CustomerService.get_customer(customer_id)
        transactions = CustomerService.get_transactions_in_range(customer.id, start_date, end_date)
        summary = aggregate(customer, transactions)

        logger.info(
            f"Customer {customer_id}: {len(transactions)} transaction(s), "
            f"{len(summary.monthly_points)} month(s), {summary.total_points} points"
        )
        return summary

    @staticmethod
    def get_customer_summary_with_external_multiplier(customer_id, start_date, end_date, client=None):
        """
        Same as get_customer_summary, with base points scaled by the rule
        service's multiplier for each month. Lookup failures degrade that
        month to a multiplier of 1 and are never raised.
        """
        validate_date_range(start_date, end_date)
        logger.info(
            f"Calculating multiplied rewards for customer {customer_id} from {start_date} to {end_date}"
        )

        customer = CustomerService.get_customer(customer_id)
        transactions = CustomerService.get_transactions_in_range(customer.id, start_date, end_date)

        multipliers = BestEffortMultiplier(client or MultiplierClient())
        summary = aggregate(customer, transactions, transaction_points=multipliers.points_with_multiplier)

        if multipliers.failed_months:
            logger.warning(
                f"Customer {customer_id}: default multiplier used for "
                f"{', '.join(str(key) for key in sorted(multipliers.failed_months))}"
            )
        return summary
