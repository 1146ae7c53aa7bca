from django.contrib import admin

from inventory.admin import export_to_csv
from .models import PurchaseMaster, PurchaseDetails


class PurchaseDetailsInline(admin.TabularInline):
    model = PurchaseDetails
    extra = 0
    fields = ['product', 'quantity', 'rate', 'total', 'purchase_inward']
    readonly_fields = ['total', 'purchase_inward']


@admin.register(PurchaseMaster)
class PurchaseMasterAdmin(admin.ModelAdmin):
    inlines = [PurchaseDetailsInline]
    list_display = ['bill_no', 'supplier', 'item_count', 'total_amount', 'date']
    list_filter = ['date']
    search_fields = ['supplier__supplier_name']
    readonly_fields = ['total_amount', 'created_at', 'updated_at']
    date_hierarchy = 'date'
    actions = [export_to_csv]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('supplier').prefetch_related('details')

    def item_count(self, obj):
        return len(obj.details.all())
    item_count.short_description = 'Lines'

    def has_change_permission(self, request, obj=None):
        return False

    def has_add_permission(self, request):
        return False
