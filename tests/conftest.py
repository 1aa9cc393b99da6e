"""
Pytest configuration and fixtures for the POS back-office.
"""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.core.models import User
from apps.menu.models import Category, Menu, MenuVariation


@pytest.fixture
def api_client():
    """
    Fixture for Django REST framework API client.
    """
    return APIClient()


@pytest.fixture
def owner(db):
    """Create the store owner."""
    return User.objects.create_user(
        username="owner",
        email="owner@example.com",
        password="OwnerPassword123!@#",
        full_name="Budi Santoso",
        role=User.OWNER,
    )


@pytest.fixture
def manager(db):
    """Create a store manager."""
    return User.objects.create_user(
        username="manager",
        email="manager@example.com",
        password="ManagerPassword123!@#",
        full_name="Sari Wulandari",
        role=User.MANAGER,
    )


@pytest.fixture
def cashier(db):
    """Create a cashier."""
    return User.objects.create_user(
        username="cashier",
        email="cashier@example.com",
        password="CashierPassword123!@#",
        full_name="Dewi Lestari",
        role=User.CASHIER,
    )


@pytest.fixture
def owner_client(owner):
    """API client authenticated as the owner."""
    client = APIClient()
    client.force_authenticate(user=owner)
    return client


@pytest.fixture
def manager_client(manager):
    """API client authenticated as a manager."""
    client = APIClient()
    client.force_authenticate(user=manager)
    return client


@pytest.fixture
def cashier_client(cashier):
    """API client authenticated as a cashier."""
    client = APIClient()
    client.force_authenticate(user=cashier)
    return client


@pytest.fixture
def category(db):
    """Create a menu category."""
    return Category.objects.create(name="Coffee")


@pytest.fixture
def menu(category):
    """Create a coffee menu with ten units in stock."""
    return Menu.objects.create(
        name="Es Kopi Susu",
        price=Decimal("18000.00"),
        stock=10,
        category=category,
    )


@pytest.fixture
def large(menu):
    """Create a paid size variation for the coffee menu."""
    return MenuVariation.objects.create(
        menu=menu,
        name="Large",
        price_adjustment=Decimal("5000.00"),
    )


@pytest.fixture
def snack(db):
    """Create an uncategorized menu with five units in stock."""
    return Menu.objects.create(
        name="Kentang Goreng",
        price=Decimal("15000.00"),
        stock=5,
    )


@pytest.fixture
def make_order(cashier):
    """
    Factory fixture that checks out a cart through the order service.
    """
    from apps.sales.services import build_cart, checkout

    def _make_order(lines, payment_method="cash", cash_received=None, pay_later=False):
        cart = build_cart(lines)
        if payment_method == "cash" and cash_received is None and not pay_later:
            cash_received = cart.total
        return checkout(
            cart,
            payment_method=payment_method,
            cash_received=cash_received,
            user=cashier,
            pay_later=pay_later,
        )

    return _make_order
