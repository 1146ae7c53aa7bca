import datetime
from decimal import Decimal

from rest_framework import serializers
from .models import Customer, Supplier, Product


class SupplierSerializer(serializers.ModelSerializer):
    """Serializer for Supplier model"""

    supplier_name = serializers.CharField(
        max_length=200,
        error_messages={'blank': 'Supplier name is required', 'required': 'Supplier name is required'},
    )
    contact_number = serializers.CharField(
        min_length=10,
        max_length=20,
        error_messages={
            'blank': 'Contact number must be at least 10 digits',
            'min_length': 'Contact number must be at least 10 digits',
        },
    )
    email = serializers.EmailField(error_messages={'invalid': 'Invalid email format'})
    address = serializers.CharField(error_messages={'blank': 'Address is required', 'required': 'Address is required'})

    class Meta:
        model = Supplier
        fields = [
            'id',
            'sr_no',
            'supplier_name',
            'contact_number',
            'email',
            'address',
            'created_at',
        ]
        read_only_fields = ['id', 'sr_no', 'created_at']


class CustomerSerializer(serializers.ModelSerializer):
    """Serializer for Customer model"""

    customer_name = serializers.CharField(
        min_length=2,
        max_length=200,
        error_messages={
            'blank': 'Customer name is required',
            'required': 'Customer name is required',
            'min_length': 'Customer name is required',
        },
    )
    contact_number = serializers.CharField(
        min_length=10,
        max_length=15,
        error_messages={
            'blank': 'Contact number must be at least 10 digits',
            'min_length': 'Contact number must be at least 10 digits',
            'max_length': 'Contact number too long',
        },
    )
    email = serializers.EmailField(error_messages={'invalid': 'Invalid email format'})
    address = serializers.CharField(
        min_length=2,
        error_messages={
            'blank': 'Address is required',
            'required': 'Address is required',
            'min_length': 'Address is required',
        },
    )

    class Meta:
        model = Customer
        fields = [
            'id',
            'customer_code',
            'customer_name',
            'contact_number',
            'email',
            'address',
            'created_at',
        ]
        read_only_fields = ['id', 'customer_code', 'created_at']


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for product records"""

    product_name = serializers.CharField(
        max_length=200,
        error_messages={'blank': 'Product name is required', 'required': 'Product name is required'},
    )
    category = serializers.CharField(
        max_length=100,
        error_messages={'blank': 'Category is required', 'required': 'Category is required'},
    )
    cost_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0'),
        error_messages={'min_value': 'Cost price cannot be negative'},
    )
    selling_price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0'),
        error_messages={'min_value': 'Selling price cannot be negative'},
    )
    qty = serializers.IntegerField(
        min_value=0,
        error_messages={'min_value': 'Quantity cannot be negative'},
    )
    supplier = serializers.PrimaryKeyRelatedField(
        queryset=Supplier.objects.all(),
        error_messages={'required': 'Supplier ID is required', 'null': 'Supplier ID is required'},
    )
    supplier_name = serializers.CharField(source='supplier.supplier_name', read_only=True)
    profit_margin = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'product_code',
            'product_name',
            'description',
            'category',
            'cost_price',
            'selling_price',
            'profit_margin',
            'qty',
            'stock',
            'supplier',
            'supplier_name',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'product_code', 'stock', 'created_at', 'updated_at']
        extra_kwargs = {
            'description': {'required': False, 'allow_blank': True},
        }


class TransactionDateField(serializers.DateTimeField):
    """Accepts full ISO datetimes and plain ``YYYY-MM-DD`` dates (taken as local midnight)."""

    def to_internal_value(self, value):
        if isinstance(value, str) and len(value.strip()) == 10:
            date_value = serializers.DateField().to_internal_value(value.strip())
            value = datetime.datetime.combine(date_value, datetime.time.min)
        return super().to_internal_value(value)


class MasterDetailWriteSerializer(serializers.Serializer):
    """Common payload of sale and purchase writes: date plus a non-empty item list."""

    date = TransactionDateField(required=False, allow_null=True)

    def validate_items(self, value):
        if not value:
            raise serializers.ValidationError('At least one product required')
        return value
