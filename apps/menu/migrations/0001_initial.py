import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the category",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(help_text="Category name", max_length=100, unique=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Category",
                "verbose_name_plural": "Categories",
                "db_table": "menu_categories",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Menu",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the menu",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(help_text="Menu name as shown in the POS", max_length=255),
                ),
                ("description", models.TextField(blank=True, help_text="Optional description")),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Base selling price",
                        max_digits=12,
                        validators=[django.core.validators.MinValueValidator(Decimal("0"))],
                    ),
                ),
                (
                    "stock",
                    models.PositiveIntegerField(default=0, help_text="Units available for sale"),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True, help_text="Inactive menus are hidden from the POS"
                    ),
                ),
                (
                    "image_url",
                    models.URLField(
                        blank=True, help_text="URL of the menu image", max_length=500
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        help_text="Category this menu belongs to",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="menus",
                        to="menu.category",
                    ),
                ),
            ],
            options={
                "verbose_name": "Menu",
                "verbose_name_plural": "Menus",
                "db_table": "menus",
                "ordering": ["name"],
                "indexes": [
                    models.Index(
                        fields=["category", "is_active"], name="menu_category_active_idx"
                    ),
                    models.Index(fields=["is_active", "stock"], name="menu_active_stock_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="MenuVariation",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Variation name (e.g., Large, Less Sugar)", max_length=100
                    ),
                ),
                (
                    "price_adjustment",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Amount added to the base price; may be negative",
                        max_digits=12,
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "menu",
                    models.ForeignKey(
                        help_text="Menu this variation belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="variations",
                        to="menu.menu",
                    ),
                ),
            ],
            options={
                "verbose_name": "Menu Variation",
                "verbose_name_plural": "Menu Variations",
                "db_table": "menu_variations",
                "ordering": ["menu", "name"],
            },
        ),
    ]
