from django.conf import settings
from django.db import models
from django.utils import timezone

from inventory.models import Customer, Product, generate_code


def generate_invoice_no():
    return generate_code(settings.STOCK_CONFIG['INVOICE_PREFIX'])


class SalesMaster(models.Model):
    """Invoice header: one per sale."""

    invoice_no = models.CharField(max_length=40, default=generate_invoice_no)
    customer = models.ForeignKey(
        Customer,
        on_delete=models.SET_NULL,
        null=True,
        related_name='sales',
    )
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    date = models.DateTimeField(default=timezone.now, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date', '-id']
        verbose_name = 'Sale'
        verbose_name_plural = 'Sales'

    def __str__(self):
        return f"{self.invoice_no} ({self.customer or 'Unknown'})"


class SalesDetails(models.Model):
    """One invoice line; ``amount`` is ``quantity * price``."""

    sales_master = models.ForeignKey(
        SalesMaster,
        on_delete=models.CASCADE,
        related_name='details',
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        related_name='sales_details',
    )
    quantity = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=12, decimal_places=2)
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = 'Sale line'
        verbose_name_plural = 'Sale lines'

    def __str__(self):
        return f"{self.product or 'Unknown'} x {self.quantity}"
