from django.db import models


class Customer(models.Model):
    """A loyalty programme member, identified by a caller-supplied id"""
    id = models.CharField(max_length=64, primary_key=True)
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        ordering = ['id']
        verbose_name = 'Customer'
        verbose_name_plural = 'Customers'

    def __str__(self):
        return f"{self.id} - {self.name}"
