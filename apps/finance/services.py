"""
Financial summary: revenue, expenses and net profit.
"""

from decimal import Decimal

from django.db.models import Sum
from django.utils import timezone

from apps.sales.models import Order

from .models import Expense

ZERO = Decimal("0.00")


def _totals(orders, expenses):
    revenue = orders.aggregate(total=Sum("total"))["total"] or ZERO
    spent = expenses.aggregate(total=Sum("amount"))["total"] or ZERO
    return {
        "revenue": revenue,
        "expenses": spent,
        "net_profit": revenue - spent,
    }


def financial_summary(now=None):
    """
    Revenue, expenses and net profit, all time and for the current month.

    Cancelled orders do not count as revenue.
    """
    now = timezone.localtime(now or timezone.now())
    month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    orders = Order.objects.exclude(status=Order.CANCELLED)
    expenses = Expense.objects.all()

    return {
        "all_time": _totals(orders, expenses),
        "this_month": _totals(
            orders.filter(created_at__gte=month_start),
            expenses.filter(created_at__gte=month_start),
        ),
        "month_start": month_start,
    }


def expenses_by_category(expenses=None):
    """Total spent per expense category, largest first."""
    if expenses is None:
        expenses = Expense.objects.all()

    labels = dict(Expense.CATEGORY_CHOICES)
    rows = (
        expenses.order_by()
        .values("category")
        .annotate(total=Sum("amount"))
        .order_by("-total")
    )
    return [
        {"category": row["category"], "label": labels.get(row["category"]), "total": row["total"]}
        for row in rows
    ]
