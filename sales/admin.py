from django.contrib import admin

from inventory.admin import export_to_csv
from .models import SalesMaster, SalesDetails


class SalesDetailsInline(admin.TabularInline):
    model = SalesDetails
    extra = 0
    fields = ['product', 'quantity', 'price', 'amount']
    readonly_fields = ['amount']


@admin.register(SalesMaster)
class SalesMasterAdmin(admin.ModelAdmin):
    """
    Back-office view of sales. Adding or editing here would bypass the API
    writer, so sales are view-only.
    """

    inlines = [SalesDetailsInline]
    list_display = ['invoice_no', 'customer', 'item_count', 'total_amount', 'date']
    list_filter = ['date']
    search_fields = ['invoice_no', 'customer__customer_name']
    readonly_fields = ['invoice_no', 'total_amount', 'created_at', 'updated_at']
    date_hierarchy = 'date'
    actions = [export_to_csv]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('customer').prefetch_related('details')

    def item_count(self, obj):
        return len(obj.details.all())
    item_count.short_description = 'Lines'

    def has_change_permission(self, request, obj=None):
        return False

    def has_add_permission(self, request):
        return False
