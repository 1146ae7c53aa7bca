from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    # ============================================
    # SALES REPORTS
    # ============================================
    path('sales-report/', views.SalesReportView.as_view(), name='sales-report'),
    path('sales-report/export/', views.SalesReportExportView.as_view(), name='sales-report-export'),
    path('sales-summary/', views.SalesSummaryView.as_view(), name='sales-summary'),
    path('sales-summary/export/', views.SalesSummaryExportView.as_view(), name='sales-summary-export'),

    # ============================================
    # PURCHASE REPORTS
    # ============================================
    path('purchase-report/', views.PurchaseReportView.as_view(), name='purchase-report'),
    path('purchase-report/export/', views.PurchaseReportExportView.as_view(), name='purchase-report-export'),
    path('purchase-summary/', views.PurchaseSummaryView.as_view(), name='purchase-summary'),
    path('purchase-summary/export/', views.PurchaseSummaryExportView.as_view(), name='purchase-summary-export'),

    # ============================================
    # DASHBOARD
    # ============================================
    path('summary/', views.DashboardSummaryView.as_view(), name='summary'),
    path('monthly-sales/', views.MonthlySalesView.as_view(), name='monthly-sales'),
    path('top-products/', views.TopProductsView.as_view(), name='top-products'),
    path('stock-distribution/', views.StockDistributionView.as_view(), name='stock-distribution'),
]
