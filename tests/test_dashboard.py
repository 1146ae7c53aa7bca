from decimal import Decimal

import pytest
from django.urls import reverse

from reports.services import dashboard_summary, monthly_sales, stock_distribution, top_products

from .conftest import at

pytestmark = pytest.mark.django_db


def test_summary_totals(make_product, customer, supplier, make_sale, make_purchase):
    cable = make_product(name='Cable', qty=10)
    make_product(name='Empty', qty=0)
    make_sale(customer, [(cable, 2, 50)])
    make_sale(customer, [(cable, 1, 25)])
    make_purchase(supplier, [(cable, 4, 10)])

    assert dashboard_summary() == {
        'totalProducts': 2,
        'totalSales': Decimal('125.00'),
        'totalPurchase': Decimal('40.00'),
        'closingStock': 10,
    }


def test_summary_of_empty_store(db):
    assert dashboard_summary() == {
        'totalProducts': 0,
        'totalSales': 0,
        'totalPurchase': 0,
        'closingStock': 0,
    }


def test_monthly_sales_fold_years_together(customer, product, make_sale):
    make_sale(customer, [(product, 1, 10)], date=at(2023, 3, 5))
    make_sale(customer, [(product, 1, 15)], date=at(2024, 3, 20))
    make_sale(customer, [(product, 1, 7)], date=at(2024, 1, 2))

    assert monthly_sales() == [
        {'month': 'Jan', 'total': Decimal('7.00')},
        {'month': 'Mar', 'total': Decimal('25.00')},
    ]


def test_top_products_ranked_and_limited(make_product, customer, make_sale):
    products = [make_product(name=f'Item {n}') for n in range(8)]
    for rank, product in enumerate(products):
        make_sale(customer, [(product, 1, 10 * (rank + 1))])

    top = top_products()

    assert len(top) == 6
    assert top[0] == {'product': 'Item 7', 'totalSales': Decimal('80.00')}
    assert [row['totalSales'] for row in top] == sorted((row['totalSales'] for row in top), reverse=True)


def test_top_products_skip_unknown_before_limiting(make_product, customer, make_sale):
    unknown = make_product(name='Unknown')
    removed = make_product(name='Removed')
    kept = make_product(name='Kept')
    make_sale(customer, [(unknown, 1, 500), (removed, 1, 400), (kept, 1, 1)])
    removed.delete()

    assert top_products(limit=1) == [{'product': 'Kept', 'totalSales': Decimal('1.00')}]


def test_stock_distribution(make_product):
    make_product(name='Cable', qty=5)
    make_product(name='Empty', qty=0)
    make_product(name='Unknown', qty=3)
    make_product(name='', qty=4)

    assert stock_distribution() == [{'product': 'Cable', 'stockQty': 5}]


def test_dashboard_endpoints(api_client, customer, product, make_sale):
    make_sale(customer, [(product, 2, 10)], date=at(2024, 2, 1))

    summary = api_client.get(reverse('reports:summary')).json()
    monthly = api_client.get(reverse('reports:monthly-sales')).json()
    top = api_client.get(reverse('reports:top-products')).json()
    distribution = api_client.get(reverse('reports:stock-distribution')).json()

    assert summary['totalProducts'] == 1
    assert summary['closingStock'] == 50
    assert monthly == [{'month': 'Feb', 'total': 20}]
    assert top == [{'product': 'USB Cable', 'totalSales': 20}]
    assert distribution == [{'product': 'USB Cable', 'stockQty': 50}]
