"""
Tests for authentication, user management and store settings.
"""

from django.urls import reverse

import pytest
from rest_framework import status

from apps.core.models import StoreSettings, User


@pytest.mark.django_db
class TestRegistrationAndLogin:
    """Test registration and JWT login."""

    def test_register_creates_staff(self, api_client):
        response = api_client.post(
            reverse("core:register"),
            {
                "username": "newbie",
                "email": "newbie@example.com",
                "password": "Kopi!Pagi2024",
                "password2": "Kopi!Pagi2024",
                "full_name": "Anak Baru",
            },
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        user = User.objects.get(username="newbie")
        assert user.role == User.STAFF
        assert user.check_password("Kopi!Pagi2024")

    def test_password_mismatch(self, api_client):
        response = api_client.post(
            reverse("core:register"),
            {
                "username": "newbie",
                "email": "newbie@example.com",
                "password": "Kopi!Pagi2024",
                "password2": "Teh!Sore2024",
            },
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "password" in response.data

    def test_login_returns_tokens_and_role(self, api_client, cashier):
        response = api_client.post(
            reverse("core:token_obtain_pair"),
            {"username": "cashier", "password": "CashierPassword123!@#"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert "access" in response.data
        assert "refresh" in response.data
        assert response.data["user"]["role"] == User.CASHIER

    def test_bearer_token_authenticates(self, api_client, cashier):
        tokens = api_client.post(
            reverse("core:token_obtain_pair"),
            {"username": "cashier", "password": "CashierPassword123!@#"},
            format="json",
        ).data

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
        response = api_client.get(reverse("core:user_profile"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["username"] == "cashier"


@pytest.mark.django_db
class TestProfile:
    """Test the current user's profile."""

    def test_update_own_profile_but_not_role(self, cashier_client, cashier):
        response = cashier_client.patch(
            reverse("core:user_profile"),
            {"full_name": "Dewi L.", "role": User.OWNER},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        cashier.refresh_from_db()
        assert cashier.full_name == "Dewi L."
        assert cashier.role == User.CASHIER


@pytest.mark.django_db
class TestUserManagement:
    """Test user management by the owner."""

    def test_list_users_newest_first(self, owner_client, owner, cashier):
        response = owner_client.get(reverse("core:user_list"))

        assert response.status_code == status.HTTP_200_OK
        usernames = [row["username"] for row in response.data["results"]]
        assert set(usernames) == {"owner", "cashier"}
        created = [row["created_at"] for row in response.data["results"]]
        assert created == sorted(created, reverse=True)

    def test_filter_by_role(self, owner_client, owner, cashier, manager):
        response = owner_client.get(reverse("core:user_list"), {"role": "cashier"})

        assert [row["username"] for row in response.data["results"]] == ["cashier"]
        assert response.data["results"][0]["role_display"] == "Kasir"

    def test_cashier_cannot_list_users(self, cashier_client):
        response = cashier_client.get(reverse("core:user_list"))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_cannot_list_users(self, manager_client):
        response = manager_client.get(reverse("core:user_list"))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_cannot_promote_self(self, manager_client, manager):
        response = manager_client.patch(
            reverse("core:user_detail", kwargs={"pk": manager.id}),
            {"role": User.OWNER},
            format="json",
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        manager.refresh_from_db()
        assert manager.role == User.MANAGER

    def test_manager_cannot_delete_owner(self, manager_client, owner):
        response = manager_client.delete(reverse("core:user_detail", kwargs={"pk": owner.id}))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert User.objects.filter(pk=owner.pk).exists()

    def test_owner_changes_role(self, owner_client, cashier):
        response = owner_client.patch(
            reverse("core:user_detail", kwargs={"pk": cashier.id}),
            {"role": User.STAFF, "full_name": "Dewi Lestari"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        cashier.refresh_from_db()
        assert cashier.role == User.STAFF

    def test_cannot_delete_self(self, owner_client, owner):
        response = owner_client.delete(reverse("core:user_detail", kwargs={"pk": owner.id}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["detail"] == "You cannot delete your own account."
        assert User.objects.filter(pk=owner.pk).exists()

    def test_delete_other_user(self, owner_client, cashier):
        response = owner_client.delete(reverse("core:user_detail", kwargs={"pk": cashier.id}))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not User.objects.filter(pk=cashier.pk).exists()

    def test_role_helpers(self, owner, manager, cashier):
        assert owner.is_owner() and owner.can_manage_store()
        assert manager.is_manager() and manager.can_manage_store()
        assert cashier.is_cashier() and not cashier.can_manage_store()
        assert cashier.display_name == "Dewi Lestari"


@pytest.mark.django_db
class TestStoreSettings:
    """Test the store settings endpoint."""

    def test_defaults_created_on_first_read(self, cashier_client):
        response = cashier_client.get(reverse("core:store_settings"))

        assert response.status_code == status.HTTP_200_OK
        assert response.data["currency"] == "IDR"
        assert response.data["low_stock_threshold"] == 5
        assert StoreSettings.objects.count() == 1

    def test_cashier_cannot_update(self, cashier_client):
        response = cashier_client.patch(
            reverse("core:store_settings"), {"low_stock_threshold": 10}, format="json"
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_updates_settings(self, manager_client):
        response = manager_client.patch(
            reverse("core:store_settings"),
            {"name": "Teras Kopi Cabang 2", "low_stock_threshold": 10},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        store = StoreSettings.load()
        assert store.name == "Teras Kopi Cabang 2"
        assert store.low_stock_threshold == 10

    def test_single_row(self, db):
        StoreSettings(name="Another").save()
        StoreSettings.load()

        assert StoreSettings.objects.count() == 1
        assert StoreSettings.load().name == "Another"
