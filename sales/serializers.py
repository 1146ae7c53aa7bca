from decimal import Decimal

from rest_framework import serializers

from inventory.models import Customer, Product
from inventory.serializers import MasterDetailWriteSerializer
from inventory.services.orchestrator import MAX_LINE_QUANTITY
from .models import SalesMaster, SalesDetails


class SalesDetailsSerializer(serializers.ModelSerializer):
    productId = serializers.IntegerField(source='product_id', read_only=True)
    product_name = serializers.CharField(source='product.product_name', read_only=True)

    class Meta:
        model = SalesDetails
        fields = ['id', 'productId', 'product_name', 'quantity', 'price', 'amount']


class SalesMasterSerializer(serializers.ModelSerializer):
    """Sale header with its lines, as listed and printed on the bill."""

    customerId = serializers.IntegerField(source='customer_id', read_only=True)
    customer_name = serializers.CharField(source='customer.customer_name', read_only=True)
    details = SalesDetailsSerializer(many=True, read_only=True)

    class Meta:
        model = SalesMaster
        fields = [
            'id',
            'invoice_no',
            'customerId',
            'customer_name',
            'total_amount',
            'date',
            'details',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SaleLineSerializer(serializers.Serializer):
    productId = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        source='product',
        error_messages={'required': 'Product required', 'does_not_exist': 'Product not found'},
    )
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=MAX_LINE_QUANTITY,
        error_messages={'min_value': 'Quantity must be greater than 0', 'max_value': 'Quantity is too large'},
    )
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        error_messages={'min_value': 'Price must be greater than 0'},
    )


class SaleWriteSerializer(MasterDetailWriteSerializer):
    """Payload of ``POST /sales`` and ``PUT /sales/<id>``; totals are computed server-side."""

    customerId = serializers.PrimaryKeyRelatedField(
        queryset=Customer.objects.all(),
        source='customer',
        error_messages={'required': 'Customer is required', 'does_not_exist': 'Customer not found'},
    )
    invoiceNo = serializers.CharField(source='invoice_no', max_length=40, required=False, allow_blank=True)
    items = SaleLineSerializer(many=True, error_messages={'required': 'At least one product required'})
