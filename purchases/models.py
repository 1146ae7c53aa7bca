from django.db import models
from django.utils import timezone

from inventory.models import Product, Supplier


class PurchaseMaster(models.Model):
    """Bill header: one per purchase."""

    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.SET_NULL,
        null=True,
        related_name='purchases',
    )
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    date = models.DateTimeField(default=timezone.now, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date', '-id']
        verbose_name = 'Purchase'
        verbose_name_plural = 'Purchases'

    def __str__(self):
        return f"Bill {self.bill_no} ({self.supplier or 'Unknown'})"

    @property
    def bill_no(self):
        """Last six digits of the zero-padded id."""
        if self.pk is None:
            return ''
        return str(self.pk).zfill(6)[-6:]


class PurchaseDetails(models.Model):
    """One bill line; ``total`` is ``quantity * rate``."""

    purchase_master = models.ForeignKey(
        PurchaseMaster,
        on_delete=models.CASCADE,
        related_name='details',
    )
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        related_name='purchase_details',
    )
    quantity = models.PositiveIntegerField()
    rate = models.DecimalField(max_digits=12, decimal_places=2)
    total = models.DecimalField(max_digits=14, decimal_places=2)
    purchase_inward = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        verbose_name = 'Purchase line'
        verbose_name_plural = 'Purchase lines'

    def __str__(self):
        return f"{self.product or 'Unknown'} x {self.quantity}"
