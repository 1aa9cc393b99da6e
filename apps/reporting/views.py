"""
Views for the reporting system.

- Dashboard with revenue, expenses, charts, popular menus and low stock
- Sales report for a period
- Paginated order list for the same period
"""

import logging

from rest_framework import generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from apps.core.pagination import ReportPagination
from apps.core.permissions import IsStoreManager
from apps.sales.models import Order
from apps.sales.serializers import OrderListSerializer

from .services import PERIOD_TODAY, build_dashboard, build_sales_report, filter_orders

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def dashboard(request):
    """
    Dashboard aggregates for any signed-in user.
    """
    data = build_dashboard()
    data["recent_orders"] = OrderListSerializer(data["recent_orders"], many=True).data
    return Response(data, status=status.HTTP_200_OK)


@api_view(["GET"])
@permission_classes([IsStoreManager])
def sales_report(request):
    """
    Sales report for a period.

    Query parameters:
    - period: today (default), week, month, year, all or custom
    - start_date, end_date: Range for the custom period (YYYY-MM-DD)
    """
    period = request.query_params.get("period") or PERIOD_TODAY

    try:
        report = build_sales_report(
            period,
            start_date=request.query_params.get("start_date"),
            end_date=request.query_params.get("end_date"),
        )
    except ValueError as e:
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(report, status=status.HTTP_200_OK)


class ReportOrderListView(generics.ListAPIView):
    """
    Orders of the report period, newest first, 10 per page.

    Accepts the same filters as the order list; the period defaults to today.
    """

    serializer_class = OrderListSerializer
    permission_classes = [IsStoreManager]
    pagination_class = ReportPagination

    def get_queryset(self):
        params = self.request.query_params.copy()
        params.setdefault("period", PERIOD_TODAY)

        queryset = Order.objects.select_related("user").prefetch_related("items")
        try:
            queryset = filter_orders(queryset, params)
        except ValueError as e:
            raise ValidationError({"detail": str(e)})
        return queryset.order_by("-created_at")
