# purchases/signals.py - DELETE AUDIT

from django.db.models.signals import post_delete
from django.dispatch import receiver
import logging

from purchases.models import PurchaseMaster

logger = logging.getLogger(__name__)


@receiver(post_delete, sender=PurchaseMaster)
def log_purchase_deletion(sender, instance, **kwargs):
    """
    Deleting a purchase removes its lines but leaves Product.stock as it is.
    Record the bill so stock can be corrected by hand if needed.
    """
    logger.warning(
        f"[PURCHASE DELETED] Bill {instance.bill_no} | "
        f"Supplier: {instance.supplier_id} | Total: {instance.total_amount} | "
        f"Stock increments from this purchase were not reversed"
    )
