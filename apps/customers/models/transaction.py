from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal


class Transaction(models.Model):
    """A purchase made by a customer; the unit that earns reward points"""
    customer = models.ForeignKey('Customer', on_delete=models.CASCADE, related_name='transactions')
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    transaction_date = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'transactions'
        ordering = ['transaction_date', 'id']
        indexes = [
            models.Index(fields=['customer', 'transaction_date'], name='txn_customer_date_idx'),
        ]
        verbose_name = 'Transaction'
        verbose_name_plural = 'Transactions'

    def __str__(self):
        return f"{self.customer_id} - {self.amount} on {self.transaction_date}"

    @classmethod
    def find_by_customer_and_date_range(cls, customer_id, start_date, end_date):
        """Transactions of one customer dated within [start_date, end_date], both inclusive"""
        return cls.objects.filter(
            customer_id=customer_id,
            transaction_date__range=(start_date, end_date)
        )
