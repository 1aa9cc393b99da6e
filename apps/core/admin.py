"""
Django admin configuration for core models.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import StoreSettings, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for User model."""

    list_display = ["username", "full_name", "email", "role", "is_active", "created_at"]

    list_filter = ["role", "is_active", "is_staff"]

    search_fields = ["username", "full_name", "email"]

    ordering = ["-created_at"]

    fieldsets = BaseUserAdmin.fieldsets + (
        (
            "Store",
            {
                "fields": ("full_name", "avatar_url", "role"),
            },
        ),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        (
            "Store",
            {
                "fields": ("full_name", "role"),
            },
        ),
    )


@admin.register(StoreSettings)
class StoreSettingsAdmin(admin.ModelAdmin):
    """Admin interface for the store settings row."""

    list_display = ["name", "currency", "tax_rate", "low_stock_threshold", "updated_at"]

    fieldsets = (
        (
            "Business Information",
            {
                "fields": ("name", "address", "phone", "email", "description", "logo_url"),
            },
        ),
        (
            "Operations",
            {
                "fields": ("opening_hours", "tax_rate", "currency"),
            },
        ),
        (
            "Behaviour",
            {
                "fields": (
                    "notification_enabled",
                    "auto_print_receipt",
                    "low_stock_alert",
                    "low_stock_threshold",
                ),
            },
        ),
    )

    def has_add_permission(self, request):
        return not StoreSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
