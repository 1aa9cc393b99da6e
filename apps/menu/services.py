"""
Menu query helpers shared by the menu management and POS endpoints.
"""

import logging
import uuid

from django.db.models import Q

from rest_framework.exceptions import ValidationError

logger = logging.getLogger(__name__)

UNCATEGORIZED_LABEL = "Tanpa Kategori"

TRUE_VALUES = ["true", "1", "yes"]


def filter_menus(queryset, search=None, category=None, is_active=None):
    """
    Apply the menu list filters.

    Args:
        queryset: Menu queryset to filter
        search: Case-insensitive substring of the menu name
        category: Category id, or "none" for menus without a category
        is_active: "true"/"false" string from the query string

    Returns:
        Filtered queryset
    """
    if search:
        queryset = queryset.filter(Q(name__icontains=search.strip()))

    if category and category != "all":
        if category == "none":
            queryset = queryset.filter(category__isnull=True)
        else:
            try:
                category_id = uuid.UUID(str(category))
            except ValueError:
                raise ValidationError({"category": "Invalid category id."})
            queryset = queryset.filter(category_id=category_id)

    if is_active is not None and is_active != "":
        queryset = queryset.filter(is_active=is_active.lower() in TRUE_VALUES)

    return queryset


def group_menus_by_category(menus):
    """
    Group menus by category.

    Categories are ordered by name and menus by name inside each group.
    Categories without menus are left out; menus without a category are
    collected in a trailing "Tanpa Kategori" group.

    Returns:
        List of dicts with ``category_id``, ``category_name`` and ``menus``
    """
    groups = {}
    uncategorized = []

    for menu in menus:
        if menu.category_id is None:
            uncategorized.append(menu)
            continue
        group = groups.setdefault(
            menu.category_id,
            {"category_id": menu.category_id, "category_name": menu.category.name, "menus": []},
        )
        group["menus"].append(menu)

    result = sorted(groups.values(), key=lambda g: g["category_name"].lower())
    if uncategorized:
        result.append(
            {"category_id": None, "category_name": UNCATEGORIZED_LABEL, "menus": uncategorized}
        )

    for group in result:
        group["menus"].sort(key=lambda m: m.name.lower())

    return result


def delete_menu(menu):
    """
    Delete a menu, or deactivate it if it appears on any order.

    Order history keeps a reference to the menu, so a menu that was ever
    sold can only be hidden from the POS.

    Returns:
        "deleted" or "deactivated"
    """
    if menu.order_items.exists():
        menu.is_active = False
        menu.save(update_fields=["is_active", "updated_at"])
        logger.info(f"Menu {menu.id} has order history, deactivated instead of deleted")
        return "deactivated"

    menu_id = menu.id
    menu.delete()
    logger.info(f"Menu {menu_id} deleted")
    return "deleted"
