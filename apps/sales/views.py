"""
Views for POS and order management.

- Catalog of menus available for sale
- Live cart totals and change calculation
- Checkout
- Order list, detail, item status, payment status and cancellation
"""

import logging

from django.shortcuts import get_object_or_404

from rest_framework import filters, generics, permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from apps.core.permissions import IsStoreManager
from apps.menu.models import Menu
from apps.menu.serializers import MenuSerializer
from apps.menu.services import filter_menus
from apps.reporting.services import filter_orders

from .cart import ZERO, CartError, compute_change, validate_payment
from .models import Order, OrderItem
from .serializers import (
    CartInputSerializer,
    CartLineSerializer,
    CheckoutSerializer,
    ItemStatusSerializer,
    OrderDetailSerializer,
    OrderItemSerializer,
    OrderListSerializer,
    PaymentStatusSerializer,
)
from .services import (
    build_cart,
    cancel_order,
    checkout,
    update_item_status,
    update_payment_status,
)

logger = logging.getLogger(__name__)


# POS API


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
def pos_catalog(request):
    """
    Menus the cashier can sell: active and in stock.

    Query parameters:
    - search: Case-insensitive name search
    - category: Category id, or "none" for menus without a category
    """
    queryset = (
        Menu.objects.filter(is_active=True, stock__gt=0)
        .select_related("category")
        .prefetch_related("variations")
    )
    queryset = filter_menus(
        queryset,
        search=request.query_params.get("search"),
        category=request.query_params.get("category"),
    ).order_by("name")

    serializer = MenuSerializer(queryset, many=True)
    return Response({"results": serializer.data}, status=status.HTTP_200_OK)


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
def pos_calculate_totals(request):
    """
    Calculate cart totals without creating an order.

    This endpoint allows the POS to show live totals and change as the
    cashier builds the cart.

    Request body:
    {
        "items": [
            {
                "menu_id": "uuid",
                "quantity": 1,
                "variation_ids": ["uuid"] (optional),
                "notes": "" (optional)
            }
        ],
        "payment_method": "cash|qris|transfer|debit|credit|ewallet" (optional),
        "cash_received": "50000.00" (optional)
    }

    Response:
    {
        "lines": [...merged cart lines...],
        "total": "45000.00",
        "item_count": 3,
        "change": "5000.00",
        "short_by": "0.00",
        "can_checkout": true
    }
    """
    items = request.data.get("items") if hasattr(request.data, "get") else None
    if not items:
        return Response({"detail": "Items list is required."}, status=status.HTTP_400_BAD_REQUEST)

    serializer = CartInputSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    try:
        cart = build_cart(data["items"])
    except CartError as e:
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    payment_method = data.get("payment_method", Order.CASH)
    cash_received = data.get("cash_received")

    change = ZERO
    short_by = ZERO
    if payment_method == Order.CASH and cash_received is not None:
        difference = compute_change(cart.total, cash_received)
        if difference < 0:
            short_by = -difference
        else:
            change = difference

    try:
        validate_payment(payment_method, cart.total, cash_received, is_empty=cart.is_empty)
        can_checkout = True
    except CartError:
        can_checkout = False

    return Response(
        {
            "lines": CartLineSerializer(cart.lines, many=True).data,
            "total": str(cart.total),
            "item_count": cart.item_count,
            "change": str(change),
            "short_by": str(short_by),
            "can_checkout": can_checkout,
        },
        status=status.HTTP_200_OK,
    )


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
def pos_create_order(request):
    """
    Create an order from the POS cart.

    Request body:
    {
        "items": [
            {"menu_id": "uuid", "quantity": 1, "variation_ids": [], "notes": ""}
        ],
        "payment_method": "cash|qris|transfer|debit|credit|ewallet",
        "cash_received": "50000.00" (required for cash unless pay_later),
        "customer_name": "" (optional),
        "pay_later": false (optional)
    }

    Stock is re-checked and deducted under row locks; the order, its items
    and the stock movements are saved in one transaction.
    """
    serializer = CheckoutSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    try:
        cart = build_cart(data["items"])
        order = checkout(
            cart,
            payment_method=data.get("payment_method", Order.CASH),
            cash_received=data.get("cash_received"),
            customer_name=data.get("customer_name", ""),
            user=request.user,
            pay_later=data.get("pay_later", False),
        )
    except CartError as e:
        logger.info(f"POS checkout rejected for {request.user.username}: {e}")
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"POS order creation failed: {str(e)}", exc_info=True)
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    order = (
        Order.objects.select_related("user")
        .prefetch_related("items__menu")
        .get(pk=order.pk)
    )
    return Response(OrderDetailSerializer(order).data, status=status.HTTP_201_CREATED)


# Order Management API


class OrderListView(generics.ListAPIView):
    """
    API endpoint for listing orders, newest first.

    Query parameters:
    - status: Filter by order status
    - payment_status: Filter by payment status
    - payment_method: Filter by payment method
    - period: today, week, month, year, all or custom
    - start_date, end_date: Range for the custom period (YYYY-MM-DD)
    """

    serializer_class = OrderListSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [filters.OrderingFilter]
    ordering_fields = ["created_at", "total"]
    ordering = ["-created_at"]

    def get_queryset(self):
        queryset = Order.objects.select_related("user").prefetch_related("items")
        try:
            return filter_orders(queryset, self.request.query_params)
        except ValueError as e:
            raise ValidationError({"detail": str(e)})


class OrderDetailView(generics.RetrieveAPIView):
    """
    API endpoint for a single order with its items.
    """

    serializer_class = OrderDetailSerializer
    permission_classes = [permissions.IsAuthenticated]
    queryset = Order.objects.select_related("user").prefetch_related("items__menu")


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
def update_order_item_status(request, item_id):
    """
    Change the preparation status of an order item.

    The order status is derived again from all of its items and returned
    with the updated item.
    """
    try:
        item = OrderItem.objects.select_related("menu").get(id=item_id)
    except OrderItem.DoesNotExist:
        return Response({"detail": "Order item not found."}, status=status.HTTP_404_NOT_FOUND)

    serializer = ItemStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        item, order = update_item_status(item, serializer.validated_data["status"])
    except ValueError as e:
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Item status update failed for {item_id}: {str(e)}", exc_info=True)
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(
        {
            "item": OrderItemSerializer(item).data,
            "order_id": str(order.id),
            "order_status": order.status,
            "order_status_display": order.get_status_display(),
        },
        status=status.HTTP_200_OK,
    )


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
def update_order_payment_status(request, pk):
    """
    Mark an order as paid or unpaid.
    """
    order = get_object_or_404(Order, pk=pk)

    serializer = PaymentStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        update_payment_status(order, serializer.validated_data["payment_status"])
    except ValueError as e:
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(OrderListSerializer(order).data, status=status.HTTP_200_OK)


@api_view(["POST"])
@permission_classes([IsStoreManager])
def cancel_order_view(request, pk):
    """
    Cancel an order and return its items to stock.

    Completed and already cancelled orders cannot be cancelled.
    """
    order = get_object_or_404(Order, pk=pk)

    try:
        order = cancel_order(order)
    except ValueError as e:
        return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    logger.info(f"Order {order.id} cancelled by {request.user.username}")
    return Response(OrderListSerializer(order).data, status=status.HTTP_200_OK)
