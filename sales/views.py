from inventory.views import MasterDetailViewSet
from .models import SalesMaster
from .serializers import SalesMasterSerializer, SaleWriteSerializer
from .services import sale_writer


class SaleViewSet(MasterDetailViewSet):
    """API endpoint for sales (invoice header plus lines)"""

    serializer_class = SalesMasterSerializer
    write_serializer_class = SaleWriteSerializer
    writer = sale_writer
    counterparty_field = 'customer'
    record_label = 'Sale'

    def get_queryset(self):
        queryset = (
            SalesMaster.objects
            .select_related('customer')
            .prefetch_related('details__product')
            .order_by('-date', '-id')
        )

        customer_id = self.request.query_params.get('customer', None)
        if customer_id:
            queryset = queryset.filter(customer_id=customer_id)

        return queryset
