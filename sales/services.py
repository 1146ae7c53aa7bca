import logging
from collections import defaultdict

from django.conf import settings
from django.db.models import Sum
from rest_framework.exceptions import ValidationError

from inventory.services.orchestrator import MasterDetailWriter
from inventory.services.stock import closing_stock, inward_totals, outward_totals
from .models import SalesMaster, SalesDetails

logger = logging.getLogger(__name__)


class SaleWriter(MasterDetailWriter):
    master_model = SalesMaster
    detail_model = SalesDetails
    detail_master_field = 'sales_master'
    counterparty_field = 'customer'
    price_field = 'price'
    line_total_field = 'amount'
    label = 'sale'

    def validate_lines(self, lines, master=None):
        super().validate_lines(lines, master)
        if settings.STOCK_CONFIG.get('ENFORCE_AVAILABLE_STOCK'):
            self.check_available_stock(lines, master)

    def check_available_stock(self, lines, master=None):
        """
        Reject lines that sell more than the closing stock.

        When updating, the lines being replaced are added back first.
        """
        requested = defaultdict(int)
        products = {}
        for line in lines:
            product = line['product']
            requested[product.pk] += line['quantity']
            products[product.pk] = product

        product_ids = list(requested)
        inward = inward_totals(product_ids)
        outward = outward_totals(product_ids)

        released = {}
        if master is not None:
            try:
                rows = (
                    SalesDetails.objects
                    .filter(sales_master_id=master, product_id__in=product_ids)
                    .order_by()
                    .values('product_id')
                    .annotate(total=Sum('quantity'))
                )
                released = {row['product_id']: row['total'] for row in rows}
            except (ValueError, TypeError):
                released = {}

        for product_id, quantity in requested.items():
            product = products[product_id]
            available = closing_stock(
                product.qty, inward.get(product_id, 0), outward.get(product_id, 0)
            ) + released.get(product_id, 0)
            if quantity > available:
                logger.warning(
                    f"[SALE REJECTED] {product.product_name}: requested {quantity}, available {available}"
                )
                raise ValidationError({
                    'items': [f'Only {available} units of {product.product_name} available']
                })


sale_writer = SaleWriter()
