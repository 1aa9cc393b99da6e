"""
Order status derivation.

An order's status is never set directly while it is in progress: it is
derived from the preparation statuses of its items every time one of them
changes.
"""

# Item statuses
ITEM_PENDING = "pending"
ITEM_PREPARING = "preparing"
ITEM_READY = "ready"
ITEM_DELIVERED = "delivered"

ITEM_STATUSES = [ITEM_PENDING, ITEM_PREPARING, ITEM_READY, ITEM_DELIVERED]

# Order statuses
ORDER_PENDING = "pending"
ORDER_PREPARING = "preparing"
ORDER_READY = "ready"
ORDER_COMPLETED = "completed"
ORDER_CANCELLED = "cancelled"

ORDER_STATUSES = [ORDER_PENDING, ORDER_PREPARING, ORDER_READY, ORDER_COMPLETED, ORDER_CANCELLED]

IN_PROGRESS_ITEM_STATUSES = {ITEM_PREPARING, ITEM_READY, ITEM_DELIVERED}
READY_ITEM_STATUSES = {ITEM_READY, ITEM_DELIVERED}


def derive_order_status(item_statuses):
    """
    Derive an order's status from the statuses of its items.

    Args:
        item_statuses: Iterable of item status strings

    Returns:
        - ``pending`` when there are no items
        - ``completed`` when every item is delivered
        - ``ready`` when every item is ready or delivered
        - ``preparing`` when any item is preparing, ready or delivered
        - ``pending`` otherwise

    Examples:
        >>> derive_order_status(["delivered", "delivered"])
        'completed'
        >>> derive_order_status(["ready", "delivered"])
        'ready'
        >>> derive_order_status(["pending", "ready"])
        'preparing'
    """
    statuses = list(item_statuses)
    if not statuses:
        return ORDER_PENDING

    unknown = set(statuses) - set(ITEM_STATUSES)
    if unknown:
        raise ValueError(f"Unknown item status: {', '.join(sorted(unknown))}")

    if all(status == ITEM_DELIVERED for status in statuses):
        return ORDER_COMPLETED

    if all(status in READY_ITEM_STATUSES for status in statuses):
        return ORDER_READY

    if any(status in IN_PROGRESS_ITEM_STATUSES for status in statuses):
        return ORDER_PREPARING

    return ORDER_PENDING
