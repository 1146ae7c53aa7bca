"""
Closing stock per product.

    closing = opening qty + sum(purchase detail quantities) - sum(sales detail quantities)

Purchase inward and sales outward are summed by the database, grouped by
product, so the whole-inventory view costs two aggregate queries.
"""

import logging

from django.db.models import Sum
from rest_framework.exceptions import NotFound

from inventory.models import Product
from purchases.models import PurchaseDetails
from sales.models import SalesDetails

logger = logging.getLogger(__name__)


def _quantity_totals(detail_model, product_ids=None):
    """Return ``{product_id: total quantity}`` for one detail model."""
    queryset = detail_model.objects.filter(product__isnull=False)
    if product_ids is not None:
        queryset = queryset.filter(product_id__in=product_ids)
    totals = queryset.order_by().values('product_id').annotate(total=Sum('quantity'))
    return {row['product_id']: row['total'] or 0 for row in totals}


def inward_totals(product_ids=None):
    return _quantity_totals(PurchaseDetails, product_ids)


def outward_totals(product_ids=None):
    return _quantity_totals(SalesDetails, product_ids)


def closing_stock(opening, inward, outward):
    return (opening or 0) + (inward or 0) - (outward or 0)


def get_product_stock(product_id):
    """
    Available stock for one product.

    Raises ``NotFound`` when the product does not exist.
    """
    try:
        product = Product.objects.get(pk=product_id)
    except (Product.DoesNotExist, ValueError, TypeError):
        raise NotFound('Product not found')

    inward = inward_totals([product.pk]).get(product.pk, 0)
    outward = outward_totals([product.pk]).get(product.pk, 0)

    return {
        'productId': product.pk,
        'product_name': product.product_name,
        'availableStock': closing_stock(product.qty, inward, outward),
    }


def get_stock_view():
    """Opening, inward, outward and closing stock for every product, numbered from 1."""
    products = list(Product.objects.order_by('id'))
    inward = inward_totals()
    outward = outward_totals()

    rows = []
    for index, product in enumerate(products, start=1):
        purchase_inward = inward.get(product.pk, 0)
        sales_outward = outward.get(product.pk, 0)
        rows.append({
            'srNo': index,
            'productId': product.pk,
            'product_name': product.product_name,
            'openingStock': product.qty or 0,
            'purchaseInward': purchase_inward,
            'salesOutward': sales_outward,
            'closingStock': closing_stock(product.qty, purchase_inward, sales_outward),
        })

    logger.info(f"[STOCK VIEW] Computed closing stock for {len(rows)} products")
    return rows
