"""
Core models for the Teras POS back-office.
"""

import uuid
from decimal import Decimal

from django.contrib.auth.models import AbstractUser
from django.core.validators import MinValueValidator
from django.db import models


class User(AbstractUser):
    """
    Extended user model with a store role.

    The role decides which back-office areas the user can manage; every
    authenticated user can operate the POS.
    """

    # Role choices
    OWNER = "owner"
    MANAGER = "manager"
    STAFF = "staff"
    CASHIER = "cashier"

    ROLE_CHOICES = [
        (OWNER, "Owner"),
        (MANAGER, "Manager"),
        (STAFF, "Staff"),
        (CASHIER, "Kasir"),
    ]

    MANAGEMENT_ROLES = [OWNER, MANAGER]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    full_name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Display name shown in the POS and on receipts",
    )

    avatar_url = models.URLField(
        max_length=500,
        blank=True,
        help_text="URL of the user's avatar image",
    )

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=STAFF,
        help_text="User's role in the store",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"
        ordering = ["-created_at"]
        verbose_name = "User"
        verbose_name_plural = "Users"
        indexes = [
            models.Index(fields=["role"], name="user_role_idx"),
        ]

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    @property
    def display_name(self):
        return self.full_name or self.username

    def is_owner(self):
        """Check if user is the store owner."""
        return self.role == self.OWNER

    def is_manager(self):
        """Check if user is a store manager."""
        return self.role == self.MANAGER

    def is_cashier(self):
        """Check if user is a cashier."""
        return self.role == self.CASHIER

    def can_manage_store(self):
        """Check if user can manage menus, finance, reports and users."""
        return self.is_superuser or self.role in self.MANAGEMENT_ROLES


class StoreSettings(models.Model):
    """
    Business settings for the store.

    There is exactly one row; use ``StoreSettings.load()`` to fetch it.
    """

    CURRENCY_IDR = "IDR"
    CURRENCY_USD = "USD"

    CURRENCY_CHOICES = [
        (CURRENCY_IDR, "Indonesian Rupiah (Rp)"),
        (CURRENCY_USD, "US Dollar ($)"),
    ]

    SINGLETON_ID = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)

    # Business information
    name = models.CharField(
        max_length=255,
        default="Teras Kopi & Food",
        help_text="Store name printed on receipts",
    )
    address = models.TextField(blank=True)
    phone = models.CharField(max_length=30, blank=True)
    email = models.EmailField(blank=True)
    description = models.TextField(blank=True)
    logo_url = models.URLField(max_length=500, blank=True)
    opening_hours = models.CharField(
        max_length=100,
        default="08:00 - 22:00",
        help_text="Opening hours as shown to customers",
    )

    # Money
    tax_rate = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("10"),
        validators=[MinValueValidator(Decimal("0"))],
        help_text="Tax rate in percent",
    )
    currency = models.CharField(
        max_length=3,
        choices=CURRENCY_CHOICES,
        default=CURRENCY_IDR,
    )

    # Behaviour
    notification_enabled = models.BooleanField(default=True)
    auto_print_receipt = models.BooleanField(default=False)
    low_stock_alert = models.BooleanField(
        default=True,
        help_text="Show menus running low on stock on the dashboard",
    )
    low_stock_threshold = models.PositiveIntegerField(
        default=5,
        help_text="Menus with stock below this value are reported as low stock",
    )

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "store_settings"
        verbose_name = "Store Settings"
        verbose_name_plural = "Store Settings"

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_ID
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Return the settings row, creating it with defaults on first use."""
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_ID)
        return obj
