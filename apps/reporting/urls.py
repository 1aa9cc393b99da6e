"""
URL patterns for the reporting app.

- Dashboard aggregates
- Sales report per period
- Paginated report order list
"""

from django.urls import path

from . import views

app_name = "reporting"

urlpatterns = [
    path("api/reports/dashboard/", views.dashboard, name="dashboard"),
    path("api/reports/sales/", views.sales_report, name="sales_report"),
    path("api/reports/orders/", views.ReportOrderListView.as_view(), name="report_orders"),
]
