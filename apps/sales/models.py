"""
Sales models: orders and order items.

An order groups the items sold in one POS transaction. Each item carries its
own preparation status; the order status is derived from them.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import User
from apps.menu.models import Menu

from . import status as order_status


class Order(models.Model):
    """
    Order model for tracking point-of-sale transactions.

    - Records the total, payment method and cash handling
    - Tracks payment status separately from preparation status
    - Links to the cashier who processed it
    """

    # Payment method choices
    CASH = "cash"
    QRIS = "qris"
    TRANSFER = "transfer"
    DEBIT = "debit"
    CREDIT = "credit"
    EWALLET = "ewallet"

    PAYMENT_METHOD_CHOICES = [
        (CASH, "Cash"),
        (QRIS, "QRIS"),
        (TRANSFER, "Transfer Bank"),
        (DEBIT, "Kartu Debit"),
        (CREDIT, "Kartu Kredit"),
        (EWALLET, "E-Wallet"),
    ]

    # Status choices
    PENDING = order_status.ORDER_PENDING
    PREPARING = order_status.ORDER_PREPARING
    READY = order_status.ORDER_READY
    COMPLETED = order_status.ORDER_COMPLETED
    CANCELLED = order_status.ORDER_CANCELLED

    STATUS_CHOICES = [
        (PENDING, "Menunggu"),
        (PREPARING, "Sedang Diproses"),
        (READY, "Siap"),
        (COMPLETED, "Selesai"),
        (CANCELLED, "Dibatalkan"),
    ]

    # Payment status choices
    UNPAID = "unpaid"
    PAID = "paid"

    PAYMENT_STATUS_CHOICES = [
        (UNPAID, "Belum Bayar"),
        (PAID, "Sudah Bayar"),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the order",
    )

    user = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="orders",
        help_text="Cashier who processed the order",
    )

    customer_name = models.CharField(
        max_length=255,
        blank=True,
        help_text="Customer name called out when the order is ready",
    )

    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Sum of the item subtotals",
    )

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=PENDING,
        help_text="Preparation status, derived from the item statuses",
    )

    # Payment details
    payment_method = models.CharField(
        max_length=20,
        choices=PAYMENT_METHOD_CHOICES,
        default=CASH,
        help_text="Payment method used",
    )

    payment_status = models.CharField(
        max_length=20,
        choices=PAYMENT_STATUS_CHOICES,
        default=UNPAID,
    )

    payment_date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the order was paid",
    )

    cash_received = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Cash handed over by the customer (cash payments only)",
    )

    change_amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Change returned to the customer",
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="When the order was created",
    )

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        verbose_name = "Order"
        verbose_name_plural = "Orders"
        indexes = [
            models.Index(fields=["status", "-created_at"], name="order_status_date_idx"),
            models.Index(fields=["payment_status"], name="order_payment_status_idx"),
            models.Index(fields=["payment_method"], name="order_payment_method_idx"),
        ]

    def __str__(self):
        return f"Order {str(self.id)[:8]} - {self.total}"

    @property
    def short_id(self):
        return str(self.id)[:8].upper()

    def refresh_status(self):
        """Derive the status from the current item statuses and save it."""
        statuses = self.items.values_list("status", flat=True)
        self.status = order_status.derive_order_status(statuses)
        self.save(update_fields=["status", "updated_at"])
        return self.status

    def can_be_cancelled(self):
        """Check if this order can be cancelled."""
        return self.status not in [self.COMPLETED, self.CANCELLED]

    def mark_as_cancelled(self):
        """Mark the order as cancelled."""
        if not self.can_be_cancelled():
            raise ValueError("This order cannot be cancelled")
        self.status = self.CANCELLED
        self.save(update_fields=["status", "updated_at"])

    def mark_as_paid(self):
        """Mark the order as paid now."""
        self.payment_status = self.PAID
        self.payment_date = timezone.now()
        self.save(update_fields=["payment_status", "payment_date", "updated_at"])

    def mark_as_unpaid(self):
        """Mark the order as unpaid and clear the payment date."""
        self.payment_status = self.UNPAID
        self.payment_date = None
        self.save(update_fields=["payment_status", "payment_date", "updated_at"])


class OrderItem(models.Model):
    """
    A menu line within an order, with its own preparation status.
    """

    PENDING = order_status.ITEM_PENDING
    PREPARING = order_status.ITEM_PREPARING
    READY = order_status.ITEM_READY
    DELIVERED = order_status.ITEM_DELIVERED

    STATUS_CHOICES = [
        (PENDING, "Menunggu"),
        (PREPARING, "Sedang Dibuat"),
        (READY, "Siap"),
        (DELIVERED, "Terkirim"),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for the order item",
    )

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Order that this item belongs to",
    )

    menu = models.ForeignKey(
        Menu,
        on_delete=models.PROTECT,
        related_name="order_items",
        help_text="Menu that was ordered",
    )

    qty = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Quantity ordered",
    )

    price_at_order = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Unit price at time of order, including variation adjustments",
    )

    subtotal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Subtotal for this line item (qty * price_at_order)",
    )

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=PENDING,
        help_text="Preparation status of this item",
    )

    selected_variations = models.JSONField(
        default=list,
        blank=True,
        help_text="Chosen variations as a list of {id, name, price_adjustment}",
    )

    notes = models.TextField(
        blank=True,
        help_text="Kitchen notes for this item",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "order_items"
        ordering = ["created_at"]
        verbose_name = "Order Item"
        verbose_name_plural = "Order Items"
        indexes = [
            models.Index(fields=["order"], name="orderitem_order_idx"),
            models.Index(fields=["menu"], name="orderitem_menu_idx"),
        ]

    def __str__(self):
        return f"{self.menu.name} x {self.qty}"
