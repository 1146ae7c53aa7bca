from django.apps import AppConfig


class ReportsConfig(AppConfig):
    """
    Configuration for the Reports application.

    Read-only views over sales, purchases and products:
    - Detailed sales/purchase reports with per-day subtotals
    - Per-invoice / per-bill summaries
    - Dashboard rollups (totals, monthly sales, top products, stock distribution)
    - CSV export of any report
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'reports'
    verbose_name = 'Reports'
