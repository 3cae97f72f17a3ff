from django.contrib import admin
from .models import Customer, Transaction


class TransactionInline(admin.TabularInline):
    model = Transaction
    extra = 0
    fields = ['amount', 'transaction_date', 'created_at']
    readonly_fields = ['created_at']


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'created_at', 'updated_at']
    search_fields = ['id', 'name']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [TransactionInline]


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ['id', 'customer', 'amount', 'transaction_date', 'created_at']
    list_filter = ['transaction_date']
    search_fields = ['customer__id', 'customer__name']
    date_hierarchy = 'transaction_date'
    readonly_fields = ['created_at']
