"""
URL configuration for finance app.
"""

from django.urls import path

from . import views

app_name = "finance"

urlpatterns = [
    path("api/finance/expenses/", views.ExpenseListCreateView.as_view(), name="expense_list"),
    path(
        "api/finance/expenses/<uuid:pk>/",
        views.ExpenseDetailView.as_view(),
        name="expense_detail",
    ),
    path("api/finance/summary/", views.finance_summary, name="summary"),
]
