"""
Menu models: categories, menus and menu variations.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Category(models.Model):
    """
    Menu category (e.g. Coffee, Non-Coffee, Food).
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the category",
    )

    name = models.CharField(
        max_length=100,
        unique=True,
        help_text="Category name",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "menu_categories"
        ordering = ["name"]
        verbose_name = "Category"
        verbose_name_plural = "Categories"

    def __str__(self):
        return self.name


class Menu(models.Model):
    """
    A sellable menu item with its stock level.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the menu",
    )

    name = models.CharField(
        max_length=255,
        help_text="Menu name as shown in the POS",
    )

    description = models.TextField(
        blank=True,
        help_text="Optional description",
    )

    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
        help_text="Base selling price",
    )

    stock = models.PositiveIntegerField(
        default=0,
        help_text="Units available for sale",
    )

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="menus",
        help_text="Category this menu belongs to",
    )

    is_active = models.BooleanField(
        default=True,
        help_text="Inactive menus are hidden from the POS",
    )

    image_url = models.URLField(
        max_length=500,
        blank=True,
        help_text="URL of the menu image",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "menus"
        ordering = ["name"]
        verbose_name = "Menu"
        verbose_name_plural = "Menus"
        indexes = [
            models.Index(fields=["category", "is_active"], name="menu_category_active_idx"),
            models.Index(fields=["is_active", "stock"], name="menu_active_stock_idx"),
        ]

    def __str__(self):
        return self.name

    def deduct_stock(self, quantity):
        """
        Deduct stock for a sale.

        Raises:
            ValueError: If quantity exceeds available stock
        """
        if quantity > self.stock:
            raise ValueError(
                f"Insufficient stock for {self.name}. "
                f"Available: {self.stock}, requested: {quantity}"
            )
        self.stock -= quantity
        self.save(update_fields=["stock", "updated_at"])

    def add_stock(self, quantity):
        """Return stock, e.g. when an order is cancelled."""
        self.stock += quantity
        self.save(update_fields=["stock", "updated_at"])


class MenuVariation(models.Model):
    """
    A variation of a menu (size, sugar level, extra shot) with a price adjustment.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )

    menu = models.ForeignKey(
        Menu,
        on_delete=models.CASCADE,
        related_name="variations",
        help_text="Menu this variation belongs to",
    )

    name = models.CharField(
        max_length=100,
        help_text="Variation name (e.g., Large, Less Sugar)",
    )

    price_adjustment = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Amount added to the base price; may be negative",
    )

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "menu_variations"
        ordering = ["menu", "name"]
        verbose_name = "Menu Variation"
        verbose_name_plural = "Menu Variations"

    def __str__(self):
        return f"{self.menu.name} - {self.name}"
