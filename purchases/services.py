import logging

from django.db.models import F

from inventory.models import Product
from inventory.services.orchestrator import MasterDetailWriter
from .models import PurchaseMaster, PurchaseDetails

logger = logging.getLogger(__name__)


class PurchaseWriter(MasterDetailWriter):
    master_model = PurchaseMaster
    detail_model = PurchaseDetails
    detail_master_field = 'purchase_master'
    counterparty_field = 'supplier'
    price_field = 'rate'
    line_total_field = 'total'
    label = 'purchase'

    def detail_values(self, line):
        values = super().detail_values(line)
        values['purchase_inward'] = line['quantity']
        return values

    def after_create_line(self, detail):
        """Add the received quantity to the product's stock counter."""
        updated = Product.objects.filter(pk=detail.product_id).update(
            stock=F('stock') + detail.quantity
        )
        if updated:
            logger.info(
                f"[STOCK INCREMENT] Product #{detail.product_id} | +{detail.quantity} "
                f"(purchase #{detail.purchase_master_id})"
            )


purchase_writer = PurchaseWriter()
