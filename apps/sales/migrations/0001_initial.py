import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("menu", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the order",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "customer_name",
                    models.CharField(
                        blank=True,
                        help_text="Customer name called out when the order is ready",
                        max_length=255,
                    ),
                ),
                (
                    "total",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Sum of the item subtotals",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Menunggu"),
                            ("preparing", "Sedang Diproses"),
                            ("ready", "Siap"),
                            ("completed", "Selesai"),
                            ("cancelled", "Dibatalkan"),
                        ],
                        default="pending",
                        help_text="Preparation status, derived from the item statuses",
                        max_length=20,
                    ),
                ),
                (
                    "payment_method",
                    models.CharField(
                        choices=[
                            ("cash", "Cash"),
                            ("qris", "QRIS"),
                            ("transfer", "Transfer Bank"),
                            ("debit", "Kartu Debit"),
                            ("credit", "Kartu Kredit"),
                            ("ewallet", "E-Wallet"),
                        ],
                        default="cash",
                        help_text="Payment method used",
                        max_length=20,
                    ),
                ),
                (
                    "payment_status",
                    models.CharField(
                        choices=[("unpaid", "Belum Bayar"), ("paid", "Sudah Bayar")],
                        default="unpaid",
                        max_length=20,
                    ),
                ),
                (
                    "payment_date",
                    models.DateTimeField(
                        blank=True, help_text="When the order was paid", null=True
                    ),
                ),
                (
                    "cash_received",
                    models.DecimalField(
                        blank=True,
                        decimal_places=2,
                        help_text="Cash handed over by the customer (cash payments only)",
                        max_digits=12,
                        null=True,
                    ),
                ),
                (
                    "change_amount",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Change returned to the customer",
                        max_digits=12,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True, db_index=True, help_text="When the order was created"
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        help_text="Cashier who processed the order",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="orders",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Order",
                "verbose_name_plural": "Orders",
                "db_table": "orders",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status", "-created_at"], name="order_status_date_idx"),
                    models.Index(fields=["payment_status"], name="order_payment_status_idx"),
                    models.Index(fields=["payment_method"], name="order_payment_method_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OrderItem",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the order item",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "qty",
                    models.PositiveIntegerField(
                        help_text="Quantity ordered",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "price_at_order",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Unit price at time of order, including variation adjustments",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "subtotal",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Subtotal for this line item (qty * price_at_order)",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Menunggu"),
                            ("preparing", "Sedang Dibuat"),
                            ("ready", "Siap"),
                            ("delivered", "Terkirim"),
                        ],
                        default="pending",
                        help_text="Preparation status of this item",
                        max_length=20,
                    ),
                ),
                (
                    "selected_variations",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="Chosen variations as a list of {id, name, price_adjustment}",
                    ),
                ),
                ("notes", models.TextField(blank=True, help_text="Kitchen notes for this item")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "menu",
                    models.ForeignKey(
                        help_text="Menu that was ordered",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="order_items",
                        to="menu.menu",
                    ),
                ),
                (
                    "order",
                    models.ForeignKey(
                        help_text="Order that this item belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="sales.order",
                    ),
                ),
            ],
            options={
                "verbose_name": "Order Item",
                "verbose_name_plural": "Order Items",
                "db_table": "order_items",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["order"], name="orderitem_order_idx"),
                    models.Index(fields=["menu"], name="orderitem_menu_idx"),
                ],
            },
        ),
    ]
