from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .exports import export_rows_to_csv
from .serializers import ReportRangeSerializer


# ====================================
# DATE-RANGE REPORTS
# ====================================

class ReportView(APIView):
    """Runs ``report(date_from, date_to)`` and returns ``{ok, data}``."""

    report = None
    columns = None
    filename = 'report'

    def get_rows(self, request):
        serializer = ReportRangeSerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        return self.report(
            serializer.validated_data.get('from'),
            serializer.validated_data.get('to'),
        )

    def get(self, request):
        return Response({'ok': True, 'data': self.get_rows(request)})


class ReportExportView(ReportView):
    """Same rows as the report, as a CSV attachment."""

    def get(self, request):
        return export_rows_to_csv(self.get_rows(request), self.columns, self.filename)


class SalesReportView(ReportView):
    report = staticmethod(services.sales_report)
    columns = services.SALES_REPORT_COLUMNS
    filename = 'sales-report'


class PurchaseReportView(ReportView):
    report = staticmethod(services.purchase_report)
    columns = services.PURCHASE_REPORT_COLUMNS
    filename = 'purchase-report'


class SalesSummaryView(ReportView):
    report = staticmethod(services.sales_summary)
    columns = services.SALES_SUMMARY_COLUMNS
    filename = 'sales-summary-report'


class PurchaseSummaryView(ReportView):
    report = staticmethod(services.purchase_summary)
    columns = services.PURCHASE_SUMMARY_COLUMNS
    filename = 'purchase-summary-report'


class SalesReportExportView(ReportExportView, SalesReportView):
    pass


class PurchaseReportExportView(ReportExportView, PurchaseReportView):
    pass


class SalesSummaryExportView(ReportExportView, SalesSummaryView):
    pass


class PurchaseSummaryExportView(ReportExportView, PurchaseSummaryView):
    pass


# ====================================
# DASHBOARD
# ====================================

class DashboardSummaryView(APIView):
    def get(self, request):
        return Response(services.dashboard_summary())


class MonthlySalesView(APIView):
    def get(self, request):
        return Response(services.monthly_sales())


class TopProductsView(APIView):
    def get(self, request):
        return Response(services.top_products())


class StockDistributionView(APIView):
    def get(self, request):
        return Response(services.stock_distribution())
