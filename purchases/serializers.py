from decimal import Decimal

from rest_framework import serializers

from inventory.models import Product, Supplier
from inventory.serializers import MasterDetailWriteSerializer
from inventory.services.orchestrator import MAX_LINE_QUANTITY
from .models import PurchaseMaster, PurchaseDetails


class PurchaseDetailsSerializer(serializers.ModelSerializer):
    productId = serializers.IntegerField(source='product_id', read_only=True)
    product_name = serializers.CharField(source='product.product_name', read_only=True)

    class Meta:
        model = PurchaseDetails
        fields = ['id', 'productId', 'product_name', 'quantity', 'rate', 'total', 'purchase_inward']


class PurchaseMasterSerializer(serializers.ModelSerializer):
    """Purchase bill with its lines"""

    supplierId = serializers.IntegerField(source='supplier_id', read_only=True)
    supplier_name = serializers.CharField(source='supplier.supplier_name', read_only=True)
    bill_no = serializers.CharField(read_only=True)
    details = PurchaseDetailsSerializer(many=True, read_only=True)

    class Meta:
        model = PurchaseMaster
        fields = [
            'id',
            'bill_no',
            'supplierId',
            'supplier_name',
            'total_amount',
            'date',
            'details',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PurchaseLineSerializer(serializers.Serializer):
    productId = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        source='product',
        error_messages={'required': 'Product required', 'does_not_exist': 'Product not found'},
    )
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=MAX_LINE_QUANTITY,
        error_messages={'min_value': 'Qty > 0', 'max_value': 'Quantity is too large'},
    )
    rate = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        error_messages={'min_value': 'Rate > 0'},
    )


class PurchaseWriteSerializer(MasterDetailWriteSerializer):
    """Payload of ``POST /purchases`` and ``PUT /purchases/<id>``"""

    supplierId = serializers.PrimaryKeyRelatedField(
        queryset=Supplier.objects.all(),
        source='supplier',
        error_messages={'required': 'Supplier is required', 'does_not_exist': 'Supplier not found'},
    )
    items = PurchaseLineSerializer(many=True, error_messages={'required': 'At least one product required'})
