"""
Serializers for sales app.

- Cart payloads posted by the POS
- Order and order item representations
- Status update payloads
"""

from rest_framework import serializers

from apps.core.formatting_utils import format_currency

from .models import Order, OrderItem


class CartLineInputSerializer(serializers.Serializer):
    """A cart line as posted by the POS."""

    menu_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)
    variation_ids = serializers.ListField(
        child=serializers.UUIDField(), required=False, default=list
    )
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class CartInputSerializer(serializers.Serializer):
    """Cart lines plus the payment the cashier is about to take."""

    items = CartLineInputSerializer(many=True)
    payment_method = serializers.ChoiceField(
        choices=Order.PAYMENT_METHOD_CHOICES, default=Order.CASH, required=False
    )
    cash_received = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )

    def validate_items(self, value):
        """Validate that at least one item is provided."""
        if not value:
            raise serializers.ValidationError("At least one item is required.")
        return value


class CheckoutSerializer(CartInputSerializer):
    """Payload for creating an order from the POS."""

    customer_name = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )
    pay_later = serializers.BooleanField(required=False, default=False)


class CartLineSerializer(serializers.Serializer):
    """A merged cart line with its computed prices."""

    menu_id = serializers.CharField()
    name = serializers.CharField()
    quantity = serializers.IntegerField()
    stock = serializers.IntegerField()
    base_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    subtotal = serializers.DecimalField(max_digits=12, decimal_places=2)
    variations = serializers.SerializerMethodField()
    notes = serializers.CharField()

    def get_variations(self, obj):
        return [v.as_dict() for v in obj.variations]


class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for order items."""

    menu_name = serializers.CharField(source="menu.name", read_only=True)
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "id",
            "order",
            "menu",
            "menu_name",
            "qty",
            "price_at_order",
            "subtotal",
            "status",
            "status_display",
            "selected_variations",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OrderListSerializer(serializers.ModelSerializer):
    """Serializer for order lists."""

    status_display = serializers.CharField(source="get_status_display", read_only=True)
    payment_method_display = serializers.CharField(
        source="get_payment_method_display", read_only=True
    )
    payment_status_display = serializers.CharField(
        source="get_payment_status_display", read_only=True
    )
    cashier_name = serializers.SerializerMethodField()
    item_count = serializers.SerializerMethodField()
    formatted_total = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            "id",
            "short_id",
            "customer_name",
            "total",
            "formatted_total",
            "status",
            "status_display",
            "payment_method",
            "payment_method_display",
            "payment_status",
            "payment_status_display",
            "payment_date",
            "cash_received",
            "change_amount",
            "cashier_name",
            "item_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_cashier_name(self, obj):
        return obj.user.display_name if obj.user else None

    def get_item_count(self, obj):
        return sum(item.qty for item in obj.items.all())

    def get_formatted_total(self, obj):
        return format_currency(obj.total)


class OrderDetailSerializer(OrderListSerializer):
    """Serializer for a single order with its items."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta(OrderListSerializer.Meta):
        fields = OrderListSerializer.Meta.fields + ["items"]
        read_only_fields = fields


class ItemStatusSerializer(serializers.Serializer):
    """Payload for changing an order item's status."""

    status = serializers.ChoiceField(choices=OrderItem.STATUS_CHOICES)


class PaymentStatusSerializer(serializers.Serializer):
    """Payload for changing an order's payment status."""

    payment_status = serializers.ChoiceField(choices=Order.PAYMENT_STATUS_CHOICES)
