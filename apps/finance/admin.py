"""
Django admin configuration for finance models.
"""

from django.contrib import admin

from .models import Expense


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """Admin interface for Expense model."""

    list_display = ["description", "category", "amount", "user", "created_at"]
    list_filter = ["category", "created_at"]
    search_fields = ["description"]
    date_hierarchy = "created_at"
    readonly_fields = ["created_at", "updated_at"]
