from django.contrib import admin
from django.http import HttpResponse
import csv

from .models import Customer, Supplier, Product

# ============================================
# CUSTOM ACTIONS
# ============================================

def export_to_csv(modeladmin, request, queryset):
    """Export selected items to CSV"""
    opts = modeladmin.model._meta
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename={opts.verbose_name_plural}.csv'

    writer = csv.writer(response)
    fields = [field for field in opts.get_fields() if field.concrete and not field.many_to_many]

    # Write headers
    writer.writerow([field.verbose_name for field in fields])

    # Write data
    for obj in queryset:
        writer.writerow([getattr(obj, field.name) for field in fields])

    return response
export_to_csv.short_description = "Export to CSV"


# ============================================
# CUSTOMER / SUPPLIER ADMIN
# ============================================

@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['customer_code', 'customer_name', 'contact_number', 'email', 'created_at']
    search_fields = ['customer_name', 'customer_code', 'contact_number', 'email']
    readonly_fields = ['customer_code', 'created_at']
    actions = [export_to_csv]


class ProductInline(admin.TabularInline):
    model = Product
    extra = 0
    fields = ['product_code', 'product_name', 'category', 'qty', 'stock']
    readonly_fields = ['product_code', 'stock']
    show_change_link = True


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ['sr_no', 'supplier_name', 'contact_number', 'email']
    search_fields = ['supplier_name', 'contact_number', 'email']
    readonly_fields = ['sr_no', 'created_at']
    inlines = [ProductInline]
    actions = [export_to_csv]


# ============================================
# PRODUCT ADMIN
# ============================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = [
        'product_code',
        'product_name',
        'category',
        'supplier',
        'cost_price',
        'selling_price',
        'qty',
        'stock',
    ]
    list_filter = ['category', 'supplier']
    search_fields = ['product_name', 'product_code', 'category']
    readonly_fields = ['product_code', 'stock', 'created_at', 'updated_at']
    fieldsets = (
        ('Basic Information', {'fields': ('product_code', 'product_name', 'description', 'category', 'supplier')}),
        ('Pricing', {'fields': ('cost_price', 'selling_price')}),
        ('Stock', {'fields': ('qty', 'stock')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )
    actions = [export_to_csv]
