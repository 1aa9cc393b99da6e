"""
Django admin configuration for menu models.
"""

from django.contrib import admin

from .models import Category, Menu, MenuVariation


class MenuVariationInline(admin.TabularInline):
    model = MenuVariation
    extra = 0
    fields = ["name", "price_adjustment", "is_active"]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin interface for Category model."""

    list_display = ["name", "created_at", "updated_at"]
    search_fields = ["name"]


@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    """Admin interface for Menu model."""

    list_display = ["name", "category", "price", "stock", "is_active", "updated_at"]
    list_filter = ["is_active", "category"]
    search_fields = ["name", "description"]
    list_editable = ["stock", "is_active"]
    readonly_fields = ["created_at", "updated_at"]
    inlines = [MenuVariationInline]


@admin.register(MenuVariation)
class MenuVariationAdmin(admin.ModelAdmin):
    """Admin interface for MenuVariation model."""

    list_display = ["name", "menu", "price_adjustment", "is_active"]
    list_filter = ["is_active"]
    search_fields = ["name", "menu__name"]
