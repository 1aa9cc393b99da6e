"""
Tests for health checks and Sentry configuration.
"""

import pytest

from apps.core.sentry_config import before_send, initialize_sentry, scrub_sensitive_data


@pytest.mark.django_db
def test_health_check(client):
    """Test the liveness endpoint."""
    response = client.get("/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["environment"] == "test"


@pytest.mark.django_db
def test_readiness_probe(client):
    """Test the readiness endpoint checks the database."""
    response = client.get("/health/ready/")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": "ok"}}


@pytest.mark.django_db
def test_readiness_probe_reports_database_failure(client, monkeypatch):
    """Test that an unreachable database makes the service not ready."""
    monkeypatch.setattr(
        "apps.core.health.check_database", lambda: (False, "connection refused")
    )

    response = client.get("/health/ready/")

    assert response.status_code == 503
    assert response.json()["checks"]["database"] == "connection refused"


def test_sentry_not_initialized_without_dsn():
    """Test that Sentry stays off without a real DSN."""
    assert initialize_sentry(dsn="", environment="test") is False
    assert initialize_sentry(dsn="your-sentry-dsn", environment="test") is False


def test_scrub_sensitive_data():
    """Test that passwords and tokens are removed from event data."""
    scrubbed = scrub_sensitive_data(
        {"username": "cashier", "password": "secret", "nested": {"access_token": "abc"}}
    )

    assert scrubbed["username"] == "cashier"
    assert scrubbed["password"] != "secret"
    assert scrubbed["nested"]["access_token"] != "abc"


def test_scrub_customer_details_from_checkout_payload():
    """Test that customer names and phone numbers never leave the store."""
    scrubbed = scrub_sensitive_data(
        {"customer_name": "Budi", "payment_method": "cash", "note": "telp 0812-3456-7890"}
    )

    assert scrubbed["customer_name"] == "[REDACTED]"
    assert scrubbed["payment_method"] == "cash"
    assert "3456" not in scrubbed["note"]


def test_before_send_keeps_event():
    """Test that before_send returns the scrubbed event."""
    event = {"request": {"data": {"password": "secret"}}}

    result = before_send(event, {})

    assert result is not None
    assert result["request"]["data"]["password"] != "secret"
