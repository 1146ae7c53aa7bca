from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.views import APIView
import logging

from .models import Customer, Supplier, Product
from .serializers import CustomerSerializer, SupplierSerializer, ProductSerializer
from .services.stock import get_product_stock, get_stock_view


logger = logging.getLogger(__name__)


class MessageOnWriteMixin:
    """Wrap create/update/destroy responses in the ``{ok, message, data}`` envelope."""

    record_label = 'Record'

    def create(self, request, *args, **kwargs):
        response = super().create(request, *args, **kwargs)
        logger.info(f"[{self.record_label.upper()} CREATED] id={response.data.get('id')}")
        response.data = {
            'ok': True,
            'message': f'{self.record_label} added successfully',
            'data': response.data,
        }
        return response

    def update(self, request, *args, **kwargs):
        response = super().update(request, *args, **kwargs)
        logger.info(f"[{self.record_label.upper()} UPDATED] id={response.data.get('id')}")
        response.data = {
            'ok': True,
            'message': f'{self.record_label} updated successfully',
            'data': response.data,
        }
        return response

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        pk = instance.pk
        self.perform_destroy(instance)
        logger.info(f"[{self.record_label.upper()} DELETED] id={pk}")
        return Response(
            {'ok': True, 'message': f'{self.record_label} deleted successfully'},
            status=status.HTTP_200_OK,
        )


# ====================================
# REST API VIEWSETS
# ====================================

class CustomerViewSet(MessageOnWriteMixin, viewsets.ModelViewSet):
    """API endpoint for customers"""
    queryset = Customer.objects.all().order_by('customer_name', 'id')
    serializer_class = CustomerSerializer
    record_label = 'Customer'


class SupplierViewSet(MessageOnWriteMixin, viewsets.ModelViewSet):
    """API endpoint for suppliers"""
    queryset = Supplier.objects.all().order_by('sr_no', 'id')
    serializer_class = SupplierSerializer
    record_label = 'Supplier'


class ProductViewSet(MessageOnWriteMixin, viewsets.ModelViewSet):
    """API endpoint for products"""
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    record_label = 'Product'

    def get_queryset(self):
        """Filter products based on query parameters"""
        queryset = Product.objects.select_related('supplier').order_by('id')

        category = self.request.query_params.get('category', None)
        if category:
            queryset = queryset.filter(category__iexact=category)

        supplier_id = self.request.query_params.get('supplier', None)
        if supplier_id:
            queryset = queryset.filter(supplier_id=supplier_id)

        search = self.request.query_params.get('search', None)
        if search:
            queryset = queryset.filter(product_name__icontains=search)

        return queryset


# ====================================
# STOCK VIEWS
# ====================================

class StockView(APIView):
    """Opening, inward, outward and closing stock for every product."""

    def get(self, request):
        return Response(get_stock_view())


class ProductStockView(APIView):
    """Available stock for a single product."""

    def get(self, request, pk):
        return Response(get_product_stock(pk))


# ====================================
# MASTER / DETAIL TRANSACTIONS
# ====================================

class MasterDetailViewSet(viewsets.ModelViewSet):
    """
    Read endpoints serve the master with its details; writes go through a
    ``MasterDetailWriter`` so the master and its lines are saved atomically.
    """

    writer = None
    write_serializer_class = None
    counterparty_field = None
    record_label = 'Record'
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def _write_arguments(self, request):
        serializer = self.write_serializer_class(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        counterparty = data.pop(self.counterparty_field)
        lines = [dict(line) for line in data.pop('items')]
        extra = {key: value for key, value in data.items() if value not in (None, '')}
        return counterparty, lines, extra

    def _respond(self, master, message, status_code=status.HTTP_200_OK):
        master = self.get_queryset().get(pk=master.pk)
        return Response(
            {'ok': True, 'message': message, 'data': self.get_serializer(master).data},
            status=status_code,
        )

    def create(self, request, *args, **kwargs):
        counterparty, lines, extra = self._write_arguments(request)
        master = self.writer.create(counterparty, lines, **extra)
        return self._respond(master, f'{self.record_label} added successfully', status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        counterparty, lines, extra = self._write_arguments(request)
        master = self.writer.update(kwargs['pk'], counterparty, lines, **extra)
        return self._respond(master, f'{self.record_label} updated successfully')

    def destroy(self, request, *args, **kwargs):
        removed = self.writer.delete(kwargs['pk'])
        return Response({
            'ok': True,
            'message': f'{self.record_label} deleted successfully',
            'detailsRemoved': removed,
        })
