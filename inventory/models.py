import time

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


def _stock_config(key):
    return settings.STOCK_CONFIG[key]


def generate_code(prefix):
    """Return a display code such as ``PROD-1718000000000`` (epoch milliseconds)."""
    return f"{prefix}-{int(time.time() * 1000)}"


def generate_customer_code():
    return generate_code(_stock_config('CUSTOMER_PREFIX'))


def generate_product_code():
    return generate_code(_stock_config('PRODUCT_PREFIX'))


class Supplier(models.Model):
    """Supplier of products; referenced by products and purchases."""

    sr_no = models.PositiveIntegerField(default=0, db_index=True)
    supplier_name = models.CharField(max_length=200)
    contact_number = models.CharField(max_length=20)
    email = models.EmailField()
    address = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['sr_no', 'id']

    def __str__(self):
        return self.supplier_name

    def save(self, *args, **kwargs):
        # Serial numbers follow creation order
        if not self.pk and not self.sr_no:
            self.sr_no = Supplier.objects.count() + 1
        super().save(*args, **kwargs)


class Customer(models.Model):
    """Customer referenced by sales."""

    customer_code = models.CharField(max_length=40, default=generate_customer_code, editable=False)
    customer_name = models.CharField(max_length=200)
    contact_number = models.CharField(max_length=20)
    email = models.EmailField()
    address = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['customer_name', 'id']

    def __str__(self):
        return self.customer_name


class Product(models.Model):
    """
    Stocked product.

    ``qty`` is the opening quantity the closing stock is computed from.
    ``stock`` counts units received through purchases.
    """

    product_code = models.CharField(max_length=40, default=generate_product_code, editable=False)
    product_name = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    category = models.CharField(max_length=100, blank=True, default='')
    cost_price = models.DecimalField(
        max_digits=12, decimal_places=2, default=0,
        validators=[MinValueValidator(0)],
    )
    selling_price = models.DecimalField(
        max_digits=12, decimal_places=2, default=0,
        validators=[MinValueValidator(0)],
    )
    qty = models.PositiveIntegerField(default=0)
    stock = models.IntegerField(default=0)
    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.product_name} ({self.product_code})"

    @property
    def profit_margin(self):
        return self.selling_price - self.cost_price
