"""
Report rows for sales and purchases.

Detailed reports produce one row per detail line, grouped by
``(date, counterparty name)`` with a subtotal row closing each group.
Groups are keyed by day and counterparty, not by invoice or bill: two
transactions on the same day for the same customer share one subtotal.
Groups appear in the order their first row was met; masters are read
newest first.
"""

import logging
from decimal import Decimal

from django.conf import settings
from django.db.models import Count, Sum
from django.db.models.functions import ExtractMonth
from django.utils import timezone

from inventory.models import Product
from purchases.models import PurchaseMaster
from sales.models import SalesDetails, SalesMaster

logger = logging.getLogger(__name__)

MONTH_LABELS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

SALES_REPORT_COLUMNS = [
    'Date', 'InvoiceNo', 'CustomerName', 'ProductName', 'Category', 'Quantity',
    'SellingPrice', 'CostPrice', 'ProfitPerUnit', 'TotalProfit', 'TotalAmount',
]
PURCHASE_REPORT_COLUMNS = [
    'Date', 'BillNo', 'SupplierName', 'ProductName', 'Category', 'Quantity',
    'Rate', 'TotalAmount',
]
SALES_SUMMARY_COLUMNS = ['InvoiceNo', 'CustomerName', 'ProductCount', 'TotalAmount', 'Date']
PURCHASE_SUMMARY_COLUMNS = ['BillNo', 'SupplierName', 'ProductCount', 'TotalAmount', 'Date']

SUBTOTAL_SUFFIX = ' (Subtotal)'


def _unknown():
    return settings.STOCK_CONFIG['UNKNOWN_LABEL']


def _report_date(value):
    return timezone.localtime(value).date().isoformat()


def _in_range(queryset, date_from=None, date_to=None):
    """Restrict to ``[date_from, date_to]`` inclusive when both bounds are given."""
    if date_from and date_to:
        queryset = queryset.filter(date__date__gte=date_from, date__date__lte=date_to)
    return queryset


# ============================================
# GROUPING
# ============================================

def group_with_subtotals(rows, counterparty_column, columns):
    """
    Group rows by ``(Date, counterparty)`` and append a subtotal row per group.

    The subtotal row carries the group's date, ``"<name> (Subtotal)"`` in the
    counterparty column, the sum of ``TotalAmount`` and blanks elsewhere.
    """
    groups = {}
    for row in rows:
        key = (row['Date'], row[counterparty_column])
        groups.setdefault(key, []).append(row)

    flattened = []
    for (date, counterparty), group_rows in groups.items():
        flattened.extend(group_rows)

        subtotal = {column: '' for column in columns}
        subtotal['Date'] = date
        subtotal[counterparty_column] = f"{counterparty}{SUBTOTAL_SUFFIX}"
        subtotal['TotalAmount'] = sum((r['TotalAmount'] for r in group_rows), Decimal('0'))
        flattened.append(subtotal)

    return flattened


def is_subtotal_row(row, counterparty_column):
    return str(row.get(counterparty_column, '')).endswith(SUBTOTAL_SUFFIX)


# ============================================
# DETAILED REPORTS
# ============================================

def sales_report_lines(date_from=None, date_to=None):
    """One row per sale line with profit columns, masters newest first."""
    masters = _in_range(
        SalesMaster.objects
        .select_related('customer')
        .prefetch_related('details__product')
        .order_by('-date', '-id'),
        date_from, date_to,
    )

    unknown = _unknown()
    unknown_category = settings.STOCK_CONFIG['UNKNOWN_CATEGORY']
    rows = []
    for master in masters:
        customer_name = master.customer.customer_name if master.customer else unknown
        for item in master.details.all():
            product = item.product
            cost_price = product.cost_price if product else Decimal('0')
            profit_per_unit = item.price - cost_price
            rows.append({
                'Date': _report_date(master.date),
                'InvoiceNo': master.invoice_no,
                'CustomerName': customer_name,
                'ProductName': product.product_name if product else unknown,
                'Category': (product.category if product else '') or unknown_category,
                'Quantity': item.quantity,
                'SellingPrice': item.price,
                'CostPrice': cost_price,
                'ProfitPerUnit': profit_per_unit,
                'TotalProfit': profit_per_unit * item.quantity,
                'TotalAmount': item.quantity * item.price,
            })
    return rows


def purchase_report_lines(date_from=None, date_to=None):
    """One row per purchase line, masters newest first."""
    masters = _in_range(
        PurchaseMaster.objects
        .select_related('supplier')
        .prefetch_related('details__product')
        .order_by('-date', '-id'),
        date_from, date_to,
    )

    unknown = _unknown()
    unknown_category = settings.STOCK_CONFIG['UNKNOWN_CATEGORY']
    rows = []
    for master in masters:
        supplier_name = master.supplier.supplier_name if master.supplier else unknown
        for item in master.details.all():
            product = item.product
            rows.append({
                'Date': _report_date(master.date),
                'BillNo': master.bill_no,
                'SupplierName': supplier_name,
                'ProductName': product.product_name if product else unknown,
                'Category': (product.category if product else '') or unknown_category,
                'Quantity': item.quantity,
                'Rate': item.rate,
                'TotalAmount': item.quantity * item.rate,
            })
    return rows


def sales_report(date_from=None, date_to=None):
    rows = group_with_subtotals(
        sales_report_lines(date_from, date_to), 'CustomerName', SALES_REPORT_COLUMNS
    )
    logger.info(f"[SALES REPORT] {date_from or '*'} .. {date_to or '*'} | {len(rows)} rows")
    return rows


def purchase_report(date_from=None, date_to=None):
    rows = group_with_subtotals(
        purchase_report_lines(date_from, date_to), 'SupplierName', PURCHASE_REPORT_COLUMNS
    )
    logger.info(f"[PURCHASE REPORT] {date_from or '*'} .. {date_to or '*'} | {len(rows)} rows")
    return rows


# ============================================
# SUMMARY REPORTS (one row per master)
# ============================================

def sales_summary(date_from=None, date_to=None):
    masters = _in_range(
        SalesMaster.objects
        .select_related('customer')
        .annotate(product_count=Count('details'))
        .order_by('-date', '-id'),
        date_from, date_to,
    )
    unknown = _unknown()
    return [
        {
            'InvoiceNo': sale.invoice_no,
            'CustomerName': sale.customer.customer_name if sale.customer else unknown,
            'ProductCount': sale.product_count,
            'TotalAmount': sale.total_amount,
            'Date': _report_date(sale.date),
        }
        for sale in masters
    ]


def purchase_summary(date_from=None, date_to=None):
    masters = _in_range(
        PurchaseMaster.objects
        .select_related('supplier')
        .annotate(product_count=Count('details'))
        .order_by('-date', '-id'),
        date_from, date_to,
    )
    unknown = _unknown()
    return [
        {
            'BillNo': purchase.bill_no,
            'SupplierName': purchase.supplier.supplier_name if purchase.supplier else unknown,
            'ProductCount': purchase.product_count,
            'TotalAmount': purchase.total_amount,
            'Date': _report_date(purchase.date),
        }
        for purchase in masters
    ]


# ============================================
# DASHBOARD
# ============================================

def dashboard_summary():
    """Totals for the dashboard cards."""
    total_sales = SalesMaster.objects.aggregate(total=Sum('total_amount'))['total'] or 0
    total_purchase = PurchaseMaster.objects.aggregate(total=Sum('total_amount'))['total'] or 0
    closing = Product.objects.filter(qty__gt=0).aggregate(total=Sum('qty'))['total'] or 0

    return {
        'totalProducts': Product.objects.count(),
        'totalSales': total_sales,
        'totalPurchase': total_purchase,
        'closingStock': closing,
    }


def monthly_sales():
    """Sales totals bucketed by calendar month (1-12), years folded together."""
    buckets = (
        SalesMaster.objects
        .annotate(month=ExtractMonth('date'))
        .values('month')
        .annotate(total=Sum('total_amount'))
        .order_by('month')
    )
    return [
        {'month': MONTH_LABELS[bucket['month'] - 1], 'total': bucket['total']}
        for bucket in buckets
    ]


def top_products(limit=None):
    """Best-selling products by line amount, unnamed and ``Unknown`` products excluded."""
    if limit is None:
        limit = settings.STOCK_CONFIG['TOP_PRODUCTS_LIMIT']

    totals = (
        SalesDetails.objects
        .filter(product__isnull=False)
        .exclude(product__product_name='')
        .exclude(product__product_name=_unknown())
        .order_by()
        .values('product__product_name')
        .annotate(total_sales=Sum('amount'))
        .order_by('-total_sales')[:limit]
    )
    return [
        {'product': row['product__product_name'], 'totalSales': row['total_sales']}
        for row in totals
    ]


def stock_distribution():
    """Opening quantity per named product with positive stock."""
    products = (
        Product.objects
        .filter(qty__gt=0)
        .exclude(product_name='')
        .exclude(product_name=_unknown())
        .order_by('id')
    )
    return [{'product': p.product_name, 'stockQty': p.qty} for p in products]
