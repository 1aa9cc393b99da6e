"""
Tests for the order management API.
"""

import uuid
from datetime import timedelta

from django.urls import reverse
from django.utils import timezone

import pytest
from rest_framework import status

from apps.sales.models import Order, OrderItem


@pytest.mark.django_db
class TestOrderList:
    """Test listing and filtering orders."""

    def test_list_newest_first(self, cashier_client, menu, make_order):
        first = make_order([{"menu_id": menu.id, "quantity": 1}])
        second = make_order([{"menu_id": menu.id, "quantity": 2}])
        Order.objects.filter(pk=first.pk).update(created_at=timezone.now() - timedelta(hours=1))

        response = cashier_client.get(reverse("sales:order_list"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["count"] == 2
        ids = [row["id"] for row in response.data["results"]]
        assert ids == [str(second.id), str(first.id)]
        assert response.data["results"][0]["item_count"] == 2

    def test_filter_by_status_and_payment(self, cashier_client, menu, make_order):
        paid = make_order([{"menu_id": menu.id, "quantity": 1}], payment_method="qris")
        unpaid = make_order([{"menu_id": menu.id, "quantity": 1}], pay_later=True)
        unpaid.mark_as_cancelled()

        response = cashier_client.get(reverse("sales:order_list"), {"payment_status": "unpaid"})
        assert [row["id"] for row in response.data["results"]] == [str(unpaid.id)]

        response = cashier_client.get(reverse("sales:order_list"), {"status": "cancelled"})
        assert [row["id"] for row in response.data["results"]] == [str(unpaid.id)]

        response = cashier_client.get(reverse("sales:order_list"), {"payment_method": "qris"})
        assert [row["id"] for row in response.data["results"]] == [str(paid.id)]

        response = cashier_client.get(reverse("sales:order_list"), {"status": "all"})
        assert response.data["count"] == 2

    def test_filter_by_period(self, cashier_client, menu, make_order):
        recent = make_order([{"menu_id": menu.id, "quantity": 1}])
        old = make_order([{"menu_id": menu.id, "quantity": 1}])
        Order.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=30))

        response = cashier_client.get(reverse("sales:order_list"), {"period": "week"})
        assert [row["id"] for row in response.data["results"]] == [str(recent.id)]

        response = cashier_client.get(reverse("sales:order_list"), {"period": "all"})
        assert response.data["count"] == 2

    def test_invalid_period(self, cashier_client):
        response = cashier_client.get(reverse("sales:order_list"), {"period": "decade"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_custom_period_requires_dates(self, cashier_client):
        response = cashier_client.get(reverse("sales:order_list"), {"period": "custom"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestOrderDetail:
    """Test retrieving a single order."""

    def test_detail_includes_items(self, cashier_client, menu, large, make_order):
        order = make_order(
            [{"menu_id": menu.id, "quantity": 1, "variation_ids": [large.id], "notes": "hot"}]
        )

        response = cashier_client.get(reverse("sales:order_detail", kwargs={"pk": order.id}))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["short_id"] == str(order.id)[:8].upper()
        item = response.data["items"][0]
        assert item["menu_name"] == "Es Kopi Susu"
        assert item["notes"] == "hot"
        assert item["selected_variations"][0]["name"] == "Large"
        assert item["status_display"] == "Menunggu"

    def test_unknown_order(self, cashier_client):
        response = cashier_client.get(reverse("sales:order_detail", kwargs={"pk": uuid.uuid4()}))
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestOrderItemStatus:
    """Test updating item status through the API."""

    def test_update_derives_order_status(self, cashier_client, menu, snack, make_order):
        order = make_order(
            [{"menu_id": menu.id, "quantity": 1}, {"menu_id": snack.id, "quantity": 1}]
        )
        item = order.items.get(menu=menu)
        url = reverse("sales:order_item_status", kwargs={"item_id": item.id})

        response = cashier_client.post(url, {"status": "ready"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["item"]["status"] == OrderItem.READY
        assert response.data["order_status"] == Order.PREPARING
        assert response.data["order_status_display"] == "Sedang Diproses"

    def test_all_delivered_completes_order(self, cashier_client, menu, make_order):
        order = make_order([{"menu_id": menu.id, "quantity": 1}])
        item = order.items.get()
        url = reverse("sales:order_item_status", kwargs={"item_id": item.id})

        response = cashier_client.post(url, {"status": "delivered"}, format="json")

        assert response.data["order_status"] == Order.COMPLETED
        order.refresh_from_db()
        assert order.status == Order.COMPLETED

    def test_invalid_status(self, cashier_client, menu, make_order):
        order = make_order([{"menu_id": menu.id, "quantity": 1}])
        url = reverse("sales:order_item_status", kwargs={"item_id": order.items.get().id})

        response = cashier_client.post(url, {"status": "burnt"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_item(self, cashier_client):
        url = reverse("sales:order_item_status", kwargs={"item_id": uuid.uuid4()})

        response = cashier_client.post(url, {"status": "ready"}, format="json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["detail"] == "Order item not found."


@pytest.mark.django_db
class TestOrderPaymentStatus:
    """Test updating payment status through the API."""

    def test_mark_paid(self, cashier_client, menu, make_order):
        order = make_order([{"menu_id": menu.id, "quantity": 1}], pay_later=True)
        url = reverse("sales:order_payment_status", kwargs={"pk": order.id})

        response = cashier_client.post(url, {"payment_status": "paid"}, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["payment_status"] == Order.PAID
        assert response.data["payment_status_display"] == "Sudah Bayar"
        assert response.data["payment_date"] is not None

    def test_invalid_payment_status(self, cashier_client, menu, make_order):
        order = make_order([{"menu_id": menu.id, "quantity": 1}])
        url = reverse("sales:order_payment_status", kwargs={"pk": order.id})

        response = cashier_client.post(url, {"payment_status": "refunded"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestCancelOrder:
    """Test cancelling orders through the API."""

    def test_manager_can_cancel(self, manager_client, menu, make_order):
        order = make_order([{"menu_id": menu.id, "quantity": 4}])
        url = reverse("sales:order_cancel", kwargs={"pk": order.id})

        response = manager_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == Order.CANCELLED
        menu.refresh_from_db()
        assert menu.stock == 10

    def test_cashier_cannot_cancel(self, cashier_client, menu, make_order):
        order = make_order([{"menu_id": menu.id, "quantity": 1}])
        url = reverse("sales:order_cancel", kwargs={"pk": order.id})

        response = cashier_client.post(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_cannot_cancel_completed(self, manager_client, cashier_client, menu, make_order):
        order = make_order([{"menu_id": menu.id, "quantity": 1}])
        cashier_client.post(
            reverse("sales:order_item_status", kwargs={"item_id": order.items.get().id}),
            {"status": "delivered"},
            format="json",
        )

        response = manager_client.post(reverse("sales:order_cancel", kwargs={"pk": order.id}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["detail"] == "This order cannot be cancelled"
