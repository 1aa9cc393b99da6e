"""
Views for expense tracking and the financial summary.
"""

import logging

from rest_framework import generics
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.core.permissions import IsStoreManager

from .models import Expense
from .serializers import ExpenseSerializer
from .services import expenses_by_category, financial_summary

logger = logging.getLogger(__name__)


class ExpenseListCreateView(generics.ListCreateAPIView):
    """
    API endpoint for listing (newest first) and recording expenses.

    Query parameters:
    - category: Filter by expense category
    """

    serializer_class = ExpenseSerializer
    permission_classes = [IsStoreManager]

    def get_queryset(self):
        queryset = Expense.objects.select_related("user")

        category = self.request.query_params.get("category")
        if category and category != "all":
            queryset = queryset.filter(category=category)

        return queryset.order_by("-created_at")

    def perform_create(self, serializer):
        expense = serializer.save(user=self.request.user)
        logger.info(
            f"Expense {expense.id} ({expense.category}, {expense.amount}) "
            f"recorded by {self.request.user.username}"
        )


class ExpenseDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    API endpoint for viewing, editing and deleting an expense.
    """

    queryset = Expense.objects.select_related("user")
    serializer_class = ExpenseSerializer
    permission_classes = [IsStoreManager]


@api_view(["GET"])
@permission_classes([IsStoreManager])
def finance_summary(request):
    """
    Revenue, expenses and net profit, all time and for the current month,
    plus expenses per category.
    """
    summary = financial_summary()
    summary["expenses_by_category"] = expenses_by_category()
    return Response(summary)
