"""
Tests for menu management: categories, menus and variations.
"""

from decimal import Decimal

from django.urls import reverse

import pytest
from rest_framework import status

from apps.menu.models import Category, Menu, MenuVariation
from apps.menu.services import UNCATEGORIZED_LABEL, group_menus_by_category


@pytest.mark.django_db
class TestCategoryAPI:
    """Test category endpoints."""

    def test_list_by_name(self, cashier_client):
        Category.objects.create(name="Snack")
        Category.objects.create(name="Coffee")

        response = cashier_client.get(reverse("menu:category_list"))

        assert response.status_code == status.HTTP_200_OK
        assert [c["name"] for c in response.data] == ["Coffee", "Snack"]

    def test_manager_creates_category(self, manager_client):
        response = manager_client.post(
            reverse("menu:category_list"), {"name": "  Non-Coffee "}, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["name"] == "Non-Coffee"

    def test_cashier_cannot_create_category(self, cashier_client):
        response = cashier_client.post(
            reverse("menu:category_list"), {"name": "Dessert"}, format="json"
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_duplicate_name_rejected(self, manager_client, category):
        response = manager_client.post(
            reverse("menu:category_list"), {"name": "Coffee"}, format="json"
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_keeps_menus_uncategorized(self, manager_client, category, menu):
        response = manager_client.delete(
            reverse("menu:category_detail", kwargs={"pk": category.id})
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        menu.refresh_from_db()
        assert menu.category is None


@pytest.mark.django_db
class TestMenuAPI:
    """Test menu endpoints."""

    def test_list_with_filters(self, cashier_client, menu, snack):
        Menu.objects.create(name="Kopi Tubruk", price=Decimal("10000"), stock=4, is_active=False)
        url = reverse("menu:menu_list")

        response = cashier_client.get(url, {"search": "KOPI"})
        assert {m["name"] for m in response.data["results"]} == {"Es Kopi Susu", "Kopi Tubruk"}

        response = cashier_client.get(url, {"category": "none"})
        assert {m["name"] for m in response.data["results"]} == {"Kentang Goreng", "Kopi Tubruk"}

        response = cashier_client.get(url, {"is_active": "false"})
        assert [m["name"] for m in response.data["results"]] == ["Kopi Tubruk"]

        response = cashier_client.get(url, {"category": "not-a-uuid"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

        response = cashier_client.get(url, {"ordering": "price"})
        assert [m["name"] for m in response.data["results"]] == [
            "Kopi Tubruk",
            "Kentang Goreng",
            "Es Kopi Susu",
        ]

    def test_serializer_shows_category_and_active_variations(self, cashier_client, menu, large):
        MenuVariation.objects.create(menu=menu, name="Hot", is_active=False)

        response = cashier_client.get(reverse("menu:menu_detail", kwargs={"pk": menu.id}))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["category_name"] == "Coffee"
        assert [v["name"] for v in response.data["variations"]] == ["Large"]

    def test_manager_creates_menu(self, manager_client, category):
        response = manager_client.post(
            reverse("menu:menu_list"),
            {
                "name": "Matcha Latte",
                "price": "25000.00",
                "stock": 20,
                "category": str(category.id),
                "description": "Matcha with fresh milk",
            },
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert Menu.objects.get(name="Matcha Latte").category == category

    def test_negative_price_rejected(self, manager_client):
        response = manager_client.post(
            reverse("menu:menu_list"),
            {"name": "Broken", "price": "-1", "stock": 1},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_cashier_cannot_edit_menu(self, cashier_client, menu):
        response = cashier_client.patch(
            reverse("menu:menu_detail", kwargs={"pk": menu.id}), {"stock": 99}, format="json"
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_updates_stock(self, manager_client, menu):
        response = manager_client.patch(
            reverse("menu:menu_detail", kwargs={"pk": menu.id}), {"stock": 25}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        menu.refresh_from_db()
        assert menu.stock == 25

    def test_delete_unsold_menu(self, manager_client, snack):
        response = manager_client.delete(reverse("menu:menu_detail", kwargs={"pk": snack.id}))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Menu.objects.filter(pk=snack.pk).exists()

    def test_delete_sold_menu_deactivates(self, manager_client, menu, make_order):
        make_order([{"menu_id": menu.id, "quantity": 1}])

        response = manager_client.delete(reverse("menu:menu_detail", kwargs={"pk": menu.id}))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["result"] == "deactivated"
        menu.refresh_from_db()
        assert menu.is_active is False


@pytest.mark.django_db
class TestGroupedMenus:
    """Test grouping menus by category."""

    def test_groups_sorted_with_uncategorized_last(self, cashier_client, menu, snack):
        snacks = Category.objects.create(name="Bakery")
        Menu.objects.create(name="Roti Bakar", price=Decimal("14000"), stock=3, category=snacks)
        Menu.objects.create(name="Croissant", price=Decimal("20000"), stock=3, category=snacks)
        Category.objects.create(name="Empty")

        response = cashier_client.get(reverse("menu:menu_grouped"))

        assert response.status_code == status.HTTP_200_OK
        assert [g["category_name"] for g in response.data] == [
            "Bakery",
            "Coffee",
            UNCATEGORIZED_LABEL,
        ]
        assert [m["name"] for m in response.data[0]["menus"]] == ["Croissant", "Roti Bakar"]
        assert response.data[2]["category_id"] is None

    def test_group_helper_without_uncategorized(self, menu):
        groups = group_menus_by_category([menu])
        assert len(groups) == 1
        assert groups[0]["category_name"] == "Coffee"


@pytest.mark.django_db
class TestVariationAPI:
    """Test variation endpoints."""

    def test_add_and_list_variations(self, manager_client, menu):
        url = reverse("menu:variation_list", kwargs={"menu_id": menu.id})

        response = manager_client.post(
            url, {"name": "Extra Shot", "price_adjustment": "4000.00"}, format="json"
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["menu"] == menu.id

        response = manager_client.get(url)
        assert [v["name"] for v in response.data] == ["Extra Shot"]

    def test_update_and_delete_variation(self, manager_client, large):
        url = reverse("menu:variation_detail", kwargs={"pk": large.id})

        response = manager_client.patch(url, {"price_adjustment": "6000.00"}, format="json")
        assert response.status_code == status.HTTP_200_OK
        large.refresh_from_db()
        assert large.price_adjustment == Decimal("6000.00")

        response = manager_client.delete(url)
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not MenuVariation.objects.filter(pk=large.pk).exists()
