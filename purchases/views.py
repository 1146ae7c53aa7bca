from inventory.views import MasterDetailViewSet
from .models import PurchaseMaster
from .serializers import PurchaseMasterSerializer, PurchaseWriteSerializer
from .services import purchase_writer


class PurchaseViewSet(MasterDetailViewSet):
    """API endpoint for purchases (bill header plus lines)"""

    serializer_class = PurchaseMasterSerializer
    write_serializer_class = PurchaseWriteSerializer
    writer = purchase_writer
    counterparty_field = 'supplier'
    record_label = 'Purchase'

    def get_queryset(self):
        queryset = (
            PurchaseMaster.objects
            .select_related('supplier')
            .prefetch_related('details__product')
            .order_by('-date', '-id')
        )

        supplier_id = self.request.query_params.get('supplier', None)
        if supplier_id:
            queryset = queryset.filter(supplier_id=supplier_id)

        return queryset
