"""
Django admin configuration for sales models.
"""

from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    """Inline admin for OrderItem model."""

    model = OrderItem
    extra = 0
    readonly_fields = ["id", "subtotal", "created_at"]
    fields = ["menu", "qty", "price_at_order", "subtotal", "status", "selected_variations", "notes"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin interface for Order model."""

    list_display = [
        "short_id",
        "customer_name",
        "user",
        "total",
        "payment_method",
        "payment_status",
        "status",
        "created_at",
    ]
    list_filter = ["status", "payment_status", "payment_method", "created_at"]
    search_fields = ["customer_name", "user__username"]
    readonly_fields = ["id", "created_at", "updated_at", "payment_date"]
    inlines = [OrderItemInline]
    date_hierarchy = "created_at"
    fieldsets = [
        (
            "Basic Information",
            {
                "fields": ["id", "user", "customer_name", "status"],
            },
        ),
        (
            "Payment",
            {
                "fields": [
                    "total",
                    "payment_method",
                    "payment_status",
                    "payment_date",
                    "cash_received",
                    "change_amount",
                ],
            },
        ),
        (
            "Timestamps",
            {
                "fields": ["created_at", "updated_at"],
            },
        ),
    ]


@admin.register(OrderItem)
class OrderItemAdmin(admin.ModelAdmin):
    """Admin interface for OrderItem model."""

    list_display = ["order", "menu", "qty", "price_at_order", "subtotal", "status", "created_at"]
    list_filter = ["status", "created_at"]
    search_fields = ["menu__name", "notes"]
    readonly_fields = ["id", "created_at", "updated_at"]
