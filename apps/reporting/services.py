"""
Reporting services for the dashboard and the sales reports.

- Period resolution (today, week, month, year, all, custom)
- Order summaries, popular items and payment method distribution
- Dashboard aggregates
"""

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from django.conf import settings
from django.db.models import Count, Sum
from django.utils import timezone
from django.utils.dateparse import parse_date

from apps.core.formatting_utils import format_short_date
from apps.core.models import StoreSettings
from apps.finance.models import Expense
from apps.menu.models import Menu
from apps.menu.services import UNCATEGORIZED_LABEL
from apps.sales.models import Order, OrderItem

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")

PERIOD_TODAY = "today"
PERIOD_WEEK = "week"
PERIOD_MONTH = "month"
PERIOD_YEAR = "year"
PERIOD_ALL = "all"
PERIOD_CUSTOM = "custom"

PERIODS = [PERIOD_TODAY, PERIOD_WEEK, PERIOD_MONTH, PERIOD_YEAR, PERIOD_ALL, PERIOD_CUSTOM]

PERIOD_LABELS = {
    PERIOD_TODAY: "Hari ini",
    PERIOD_WEEK: "7 hari terakhir",
    PERIOD_MONTH: "Bulan ini",
    PERIOD_YEAR: "Tahun ini",
    PERIOD_ALL: "Semua",
    PERIOD_CUSTOM: "Kustom",
}


def _to_date(value) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_date(str(value))
    if parsed is None:
        raise ValueError(f"Invalid date: {value}")
    return parsed


def resolve_period(
    period: str,
    start_date=None,
    end_date=None,
    now: Optional[datetime] = None,
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Turn a named period into an aware (start, end) datetime range.

    Args:
        period: One of today, week, month, year, all, custom
        start_date: First day of a custom period (date or YYYY-MM-DD)
        end_date: Last day of a custom period, included up to 23:59:59.999999
        now: Reference time, defaults to the current time

    Returns:
        Tuple of (start, end); both None for ``all``

    Raises:
        ValueError: For an unknown period or an invalid custom range
    """
    now = timezone.localtime(now or timezone.now())
    tz = now.tzinfo

    if period == PERIOD_ALL:
        return None, None

    if period == PERIOD_TODAY:
        start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    elif period == PERIOD_WEEK:
        start = now - timedelta(days=7)
    elif period == PERIOD_MONTH:
        start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    elif period == PERIOD_YEAR:
        start = now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    elif period == PERIOD_CUSTOM:
        first = _to_date(start_date)
        last = _to_date(end_date)
        if first is None or last is None:
            raise ValueError("Custom period requires start_date and end_date.")
        if first > last:
            raise ValueError("start_date must not be after end_date.")
        start = datetime.combine(first, time.min, tzinfo=tz)
        end = datetime.combine(last, time.max, tzinfo=tz)
        return start, end
    else:
        raise ValueError(f"Unknown period: {period}")

    return start, now


def filter_by_period(
    queryset, start: Optional[datetime], end: Optional[datetime], field="created_at"
):
    """Restrict a queryset to rows created within [start, end]."""
    if start is not None:
        queryset = queryset.filter(**{f"{field}__gte": start})
    if end is not None:
        queryset = queryset.filter(**{f"{field}__lte": end})
    return queryset


def filter_orders(queryset, params):
    """
    Apply the order list filters from query parameters.

    Supports status, payment_status, payment_method (``all`` disables a
    filter) and period with start_date/end_date. Without a period every
    order is returned.

    Raises:
        ValueError: For an unknown period or an invalid custom range
    """
    for field in ("status", "payment_status", "payment_method"):
        value = params.get(field)
        if value and value != "all":
            queryset = queryset.filter(**{field: value})

    period = params.get("period")
    if period:
        start, end = resolve_period(period, params.get("start_date"), params.get("end_date"))
        queryset = filter_by_period(queryset, start, end)

    return queryset


def revenue_orders(queryset=None):
    """Orders that count towards revenue: everything except cancelled orders."""
    if queryset is None:
        queryset = Order.objects.all()
    return queryset.exclude(status=Order.CANCELLED)


def summarize_orders(orders) -> Dict[str, Any]:
    """
    Summarize a list of orders.

    Cancelled orders are counted but excluded from sales figures.

    Returns:
        Dict with total_sales, total_orders, paid_orders, average_order_value,
        completed_orders, cancelled_orders and completion_rate (rounded percent)
    """
    orders = list(orders)
    total_orders = len(orders)
    sold = [order for order in orders if order.status != Order.CANCELLED]
    total_sales = sum((Decimal(order.total) for order in sold), ZERO)
    completed = sum(1 for order in orders if order.status == Order.COMPLETED)
    cancelled = total_orders - len(sold)

    average = (total_sales / len(sold)).quantize(Decimal("0.01")) if sold else ZERO
    completion_rate = round(completed * 100 / total_orders) if total_orders else 0

    return {
        "total_sales": total_sales,
        "total_orders": total_orders,
        "paid_orders": sum(1 for order in sold if order.payment_status == Order.PAID),
        "average_order_value": average,
        "completed_orders": completed,
        "cancelled_orders": cancelled,
        "completion_rate": completion_rate,
    }


def popular_items(orders_queryset, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Menus ranked by quantity sold within the given orders.

    Returns:
        List of dicts with menu_id, name, quantity and revenue
    """
    if limit is None:
        limit = settings.POS_POPULAR_ITEMS_LIMIT

    rows = (
        OrderItem.objects.filter(order__in=orders_queryset)
        .values("menu_id", "menu__name")
        .annotate(quantity=Sum("qty"), revenue=Sum("subtotal"))
        .order_by("-quantity", "menu__name")[:limit]
    )
    return [
        {
            "menu_id": row["menu_id"],
            "name": row["menu__name"],
            "quantity": row["quantity"],
            "revenue": row["revenue"] or ZERO,
        }
        for row in rows
    ]


def payment_method_distribution(orders_queryset) -> List[Dict[str, Any]]:
    """
    Number of orders per payment method, most used first.
    """
    labels = dict(Order.PAYMENT_METHOD_CHOICES)
    rows = (
        orders_queryset.order_by()
        .values("payment_method")
        .annotate(count=Count("id"), total=Sum("total"))
        .order_by("-count", "payment_method")
    )
    return [
        {
            "payment_method": row["payment_method"],
            "label": labels.get(row["payment_method"], row["payment_method"]),
            "count": row["count"],
            "total": row["total"] or ZERO,
        }
        for row in rows
    ]


def daily_sales(orders, days: int = 7, today: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    Sales and transaction count per local calendar day for the last ``days`` days.

    Days without orders are included with zero values, oldest first.
    """
    today = today or timezone.localdate()
    first_day = today - timedelta(days=days - 1)

    buckets = {
        first_day + timedelta(days=offset): {"sales": ZERO, "transactions": 0}
        for offset in range(days)
    }

    for order in orders:
        day = timezone.localtime(order.created_at).date()
        if day in buckets:
            buckets[day]["sales"] += Decimal(order.total)
            buckets[day]["transactions"] += 1

    return [
        {
            "date": day.isoformat(),
            "label": format_short_date(day),
            "sales": values["sales"],
            "transactions": values["transactions"],
        }
        for day, values in sorted(buckets.items())
    ]


def category_breakdown(orders_queryset) -> List[Dict[str, Any]]:
    """
    Revenue per menu category within the given orders.

    Menus without a category are grouped under "Tanpa Kategori"; categories
    with no revenue are left out.
    """
    rows = (
        OrderItem.objects.filter(order__in=orders_queryset)
        .values("menu__category_id", "menu__category__name")
        .annotate(value=Sum("subtotal"))
        .order_by("-value")
    )

    result = []
    for row in rows:
        value = row["value"] or ZERO
        if value <= 0:
            continue
        result.append(
            {
                "category_id": row["menu__category_id"],
                "name": row["menu__category__name"] or UNCATEGORIZED_LABEL,
                "value": value,
            }
        )
    return result


def low_stock_menus(threshold: Optional[int] = None):
    """Active menus with stock below the threshold, lowest stock first."""
    if threshold is None:
        threshold = StoreSettings.load().low_stock_threshold
    return Menu.objects.filter(is_active=True, stock__lt=threshold).order_by("stock", "name")


def build_dashboard(now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Aggregate everything the dashboard shows.
    """
    now = now or timezone.now()
    store = StoreSettings.load()

    orders = revenue_orders()
    total_revenue = orders.aggregate(total=Sum("total"))["total"] or ZERO
    total_expenses = Expense.objects.aggregate(total=Sum("amount"))["total"] or ZERO

    week_start = timezone.localtime(now) - timedelta(days=7)
    recent_window = orders.filter(created_at__gte=week_start)

    low_stock = []
    if store.low_stock_alert:
        low_stock = [
            {"id": menu.id, "name": menu.name, "stock": menu.stock}
            for menu in low_stock_menus(store.low_stock_threshold)
        ]

    recent_orders = Order.objects.select_related("user").prefetch_related("items")[
        : settings.POS_DASHBOARD_RECENT_ORDERS
    ]

    return {
        "stats": {
            "total_revenue": total_revenue,
            "total_expenses": total_expenses,
            "net_profit": total_revenue - total_expenses,
            "total_transactions": orders.count(),
        },
        "sales_chart": daily_sales(recent_window, days=7, today=timezone.localtime(now).date()),
        "category_breakdown": category_breakdown(orders),
        "popular_menus": popular_items(orders),
        "low_stock": low_stock,
        "low_stock_threshold": store.low_stock_threshold,
        "recent_orders": recent_orders,
    }


def build_sales_report(period: str, start_date=None, end_date=None) -> Dict[str, Any]:
    """
    Sales report for a period: summary, popular items and payment methods.

    Raises:
        ValueError: For an unknown period or an invalid custom range
    """
    start, end = resolve_period(period, start_date, end_date)
    orders = filter_by_period(Order.objects.all(), start, end)

    report = {
        "period": period,
        "period_label": PERIOD_LABELS[period],
        "start": start,
        "end": end,
        "summary": summarize_orders(orders.only("total", "status", "payment_status")),
        "popular_items": popular_items(revenue_orders(orders)),
        "payment_methods": payment_method_distribution(orders),
    }

    logger.debug(
        f"Sales report built for period {period}: {report['summary']['total_orders']} orders"
    )
    return report
