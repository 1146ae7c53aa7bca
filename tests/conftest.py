import datetime
from decimal import Decimal

import pytest
from django.core.cache import cache
from django.utils import timezone
from rest_framework.test import APIClient

from inventory.models import Customer, Product, Supplier
from purchases.services import purchase_writer
from sales.services import sale_writer


def at(year, month, day, hour=10):
    """Aware datetime in the current timezone."""
    return timezone.make_aware(datetime.datetime(year, month, day, hour, 0))


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def supplier(db):
    return Supplier.objects.create(
        supplier_name='Acme Wholesale',
        contact_number='0712345678',
        email='acme@example.com',
        address='Industrial Area',
    )


@pytest.fixture
def customer(db):
    return Customer.objects.create(
        customer_name='Jane Buyer',
        contact_number='0722000111',
        email='jane@example.com',
        address='Main Street 1',
    )


@pytest.fixture
def other_customer(db):
    return Customer.objects.create(
        customer_name='Bob Retail',
        contact_number='0733000222',
        email='bob@example.com',
        address='Market Road 4',
    )


@pytest.fixture
def make_product(db, supplier):
    def _make(name='USB Cable', qty=0, cost_price='40.00', selling_price='100.00', category='Accessories'):
        return Product.objects.create(
            product_name=name,
            category=category,
            cost_price=Decimal(cost_price),
            selling_price=Decimal(selling_price),
            qty=qty,
            supplier=supplier,
        )
    return _make


@pytest.fixture
def product(make_product):
    return make_product(qty=50)


@pytest.fixture
def make_sale(db):
    def _make(customer, lines, date=None):
        return sale_writer.create(
            customer,
            [
                {'product': product, 'quantity': quantity, 'price': Decimal(str(price))}
                for product, quantity, price in lines
            ],
            date=date,
        )
    return _make


@pytest.fixture
def make_purchase(db):
    def _make(supplier, lines, date=None):
        return purchase_writer.create(
            supplier,
            [
                {'product': product, 'quantity': quantity, 'rate': Decimal(str(rate))}
                for product, quantity, rate in lines
            ],
            date=date,
        )
    return _make
