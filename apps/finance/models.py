"""
Finance models: operating expenses.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import User


class Expense(models.Model):
    """
    An operating expense recorded by the store.
    """

    # Category choices
    OPERATIONAL = "operational"
    INGREDIENTS = "ingredients"
    EQUIPMENT = "equipment"
    MAINTENANCE = "maintenance"
    MARKETING = "marketing"
    UTILITIES = "utilities"
    OTHER = "other"

    CATEGORY_CHOICES = [
        (OPERATIONAL, "Operasional"),
        (INGREDIENTS, "Bahan Baku"),
        (EQUIPMENT, "Peralatan"),
        (MAINTENANCE, "Maintenance"),
        (MARKETING, "Marketing"),
        (UTILITIES, "Utilitas"),
        (OTHER, "Lainnya"),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the expense",
    )

    description = models.CharField(
        max_length=255,
        help_text="What the money was spent on",
    )

    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
        help_text="Amount spent",
    )

    category = models.CharField(
        max_length=20,
        choices=CATEGORY_CHOICES,
        default=OPERATIONAL,
    )

    user = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="expenses",
        help_text="User who recorded the expense",
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "expenses"
        ordering = ["-created_at"]
        verbose_name = "Expense"
        verbose_name_plural = "Expenses"
        indexes = [
            models.Index(fields=["category", "-created_at"], name="expense_category_date_idx"),
        ]

    def __str__(self):
        return f"{self.description} - {self.amount}"
