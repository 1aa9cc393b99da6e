"""
Order service: checkout and order lifecycle.

Every multi-step write runs in one transaction so that an order, its items
and the stock movements are saved together or not at all.
"""

import logging
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from apps.menu.models import Menu

from .cart import (
    PAYMENT_CASH,
    ZERO,
    Cart,
    CartError,
    EmptyCartError,
    InsufficientStockError,
    VariationChoice,
    validate_payment,
)
from .models import Order, OrderItem
from .status import ITEM_STATUSES

logger = logging.getLogger(__name__)

PAYMENT_METHODS = [choice for choice, _ in Order.PAYMENT_METHOD_CHOICES]


def build_cart(lines):
    """
    Build a cart from POS line payloads.

    Args:
        lines: Iterable of dicts with ``menu_id``, ``quantity`` and optional
            ``variation_ids`` and ``notes``

    Returns:
        Cart with merged lines, priced from the current menus

    Raises:
        CartError: If a menu is unknown or inactive, or a variation does not
            belong to its menu
        InsufficientStockError: If the cart exceeds a menu's stock
    """
    lines = list(lines)
    menu_ids = {str(line["menu_id"]) for line in lines}
    menus = {
        str(menu.id): menu
        for menu in Menu.objects.filter(id__in=menu_ids, is_active=True).prefetch_related(
            "variations"
        )
    }

    cart = Cart()
    for line in lines:
        menu = menus.get(str(line["menu_id"]))
        if menu is None:
            raise CartError("Menu not found or inactive.")

        available = {str(v.id): v for v in menu.variations.all() if v.is_active}
        variations = []
        # A repeated id selects the variation once
        variation_ids = dict.fromkeys(str(v) for v in line.get("variation_ids") or [])
        for variation_id in variation_ids:
            variation = available.get(variation_id)
            if variation is None:
                raise CartError(f"Variation not available for {menu.name}.")
            variations.append(
                VariationChoice(
                    id=str(variation.id),
                    name=variation.name,
                    price_adjustment=variation.price_adjustment,
                )
            )

        cart.add(
            menu_id=menu.id,
            name=menu.name,
            base_price=menu.price,
            stock=menu.stock,
            quantity=line.get("quantity", 1),
            variations=variations,
            notes=line.get("notes", ""),
        )

    return cart


@transaction.atomic
def checkout(
    cart, payment_method, cash_received=None, customer_name="", user=None, pay_later=False
):
    """
    Turn a cart into an order.

    This method:
    1. Locks the menus in the cart and re-checks their stock
    2. Validates the payment (unless the order is paid later)
    3. Creates the order and its items, all items pending
    4. Deducts stock

    Returns:
        The created Order

    Raises:
        EmptyCartError: If the cart is empty
        InsufficientStockError: If stock ran out since the cart was built
        InsufficientPaymentError: If cash received is less than the total
        CartError: For an unknown payment method or a menu no longer for sale
    """
    if cart.is_empty:
        raise EmptyCartError("Cart is empty.")

    if payment_method not in PAYMENT_METHODS:
        raise CartError(f"Unknown payment method: {payment_method}")

    total = cart.total
    if pay_later:
        change = ZERO
    else:
        change = validate_payment(payment_method, total, cash_received)

    # Lock menus in a stable order
    menu_ids = sorted({line.menu_id for line in cart.lines})
    locked = {
        str(menu.id): menu
        for menu in Menu.objects.select_for_update().filter(id__in=menu_ids).order_by("id")
    }

    for menu_id in menu_ids:
        menu = locked.get(menu_id)
        if menu is None or not menu.is_active:
            raise CartError("Menu not found or inactive.")
        requested = cart.quantity_for_menu(menu_id)
        if requested > menu.stock:
            raise InsufficientStockError(
                f"Insufficient stock for {menu.name}. "
                f"Available: {menu.stock}, requested: {requested}"
            )

    paid = not pay_later
    if paid and payment_method == PAYMENT_CASH and cash_received is not None:
        cash_received = Decimal(cash_received)
    else:
        cash_received = None

    order = Order.objects.create(
        user=user,
        customer_name=(customer_name or "").strip(),
        total=total,
        status=Order.PENDING,
        payment_method=payment_method,
        payment_status=Order.PAID if paid else Order.UNPAID,
        payment_date=timezone.now() if paid else None,
        cash_received=cash_received,
        change_amount=change,
    )

    OrderItem.objects.bulk_create(
        [
            OrderItem(
                order=order,
                menu=locked[line.menu_id],
                qty=line.quantity,
                price_at_order=line.unit_price,
                subtotal=line.subtotal,
                status=OrderItem.PENDING,
                selected_variations=[v.as_dict() for v in line.variations],
                notes=line.notes,
            )
            for line in cart.lines
        ]
    )

    for menu_id in menu_ids:
        locked[menu_id].deduct_stock(cart.quantity_for_menu(menu_id))

    order.refresh_status()

    logger.info(
        f"Order {order.id} created by {getattr(user, 'username', 'anonymous')}: "
        f"{cart.item_count} items, total {total}, {payment_method}"
    )
    return order


@transaction.atomic
def update_item_status(item, new_status):
    """
    Change an item's preparation status and re-derive its order's status.

    Returns:
        Tuple of (item, order)

    Raises:
        ValueError: If the status is unknown or the order was cancelled
    """
    if new_status not in ITEM_STATUSES:
        raise ValueError(f"Unknown item status: {new_status}")

    order = Order.objects.select_for_update().get(pk=item.order_id)
    if order.status == Order.CANCELLED:
        raise ValueError("Items of a cancelled order cannot be updated.")

    item.status = new_status
    item.save(update_fields=["status", "updated_at"])

    previous = order.status
    order.refresh_status()

    logger.info(
        f"Order item {item.id} set to {new_status}; order {order.id} {previous} -> {order.status}"
    )
    return item, order


def update_payment_status(order, new_status):
    """
    Mark an order paid or unpaid.

    Raises:
        ValueError: If the payment status is unknown
    """
    if new_status == Order.PAID:
        order.mark_as_paid()
    elif new_status == Order.UNPAID:
        order.mark_as_unpaid()
    else:
        raise ValueError(f"Unknown payment status: {new_status}")

    logger.info(f"Order {order.id} payment status set to {new_status}")
    return order


@transaction.atomic
def cancel_order(order):
    """
    Cancel an order and return its items to stock.

    Raises:
        ValueError: If the order is completed or already cancelled
    """
    order = Order.objects.select_for_update().get(pk=order.pk)
    order.mark_as_cancelled()

    for item in order.items.select_related("menu"):
        menu = Menu.objects.select_for_update().get(pk=item.menu_id)
        menu.add_stock(item.qty)

    logger.info(f"Order {order.id} cancelled, stock restored")
    return order
