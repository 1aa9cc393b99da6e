"""
Error reporting to Sentry for the POS API.

Events pass through ``before_send`` so that credentials, JWTs, customer
names, emails and phone numbers taken at the till are masked first.
"""

import re
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

# Sensitive field patterns to scrub
SENSITIVE_KEYS = {
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "access",
    "refresh",
    "authorization",
    "cookie",
    "csrf",
    "session",
    "customer_name",
}

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b")
PHONE_PATTERN = re.compile(r"\b(?:\+62|0)\d{2,3}[-\s]?\d{3,4}[-\s]?\d{3,4}\b")

PLACEHOLDER_DSNS = {"", "your-sentry-dsn", "changeme"}


def scrub_sensitive_data(data: Any) -> Any:
    """
    Mask sensitive keys and inline emails/phone numbers, recursing into containers.

    Args:
        data: Request payload, headers or extra context

    Returns:
        A scrubbed copy; non-string scalars are returned unchanged
    """
    if isinstance(data, dict):
        return {
            key: "[REDACTED]" if _is_sensitive_key(key) else scrub_sensitive_data(value)
            for key, value in data.items()
        }
    elif isinstance(data, list):
        return [scrub_sensitive_data(item) for item in data]
    elif isinstance(data, str):
        return _scrub_string(data)
    else:
        return data


def _is_sensitive_key(key: str) -> bool:
    key_lower = str(key).lower()
    return any(sensitive in key_lower for sensitive in SENSITIVE_KEYS)


def _scrub_string(text: str) -> str:
    text = EMAIL_PATTERN.sub(lambda m: _mask_email(m.group(0)), text)
    text = PHONE_PATTERN.sub(lambda m: f"XXXX-{m.group(0)[-4:]}", text)
    return text


def _mask_email(email: str) -> str:
    """
    Partially mask an email address.

    Returns:
        Masked email (e.g., jo***@example.com)
    """
    try:
        local, domain = email.split("@")
        if len(local) <= 2:
            masked_local = local[:1] + "***"
        else:
            masked_local = local[:2] + "***"
        return f"{masked_local}@{domain}"
    except (ValueError, IndexError):
        return "REDACTED@EMAIL"


def before_send(event: Dict[str, Any], hint: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Scrub an outgoing event in place before it is sent.

    Args:
        event: Event payload built by sentry-sdk
        hint: Unused; carries the original exception

    Returns:
        The scrubbed event
    """
    if "request" in event:
        request = event["request"]

        if "headers" in request:
            request["headers"] = scrub_sensitive_data(request["headers"])

        if "cookies" in request:
            request["cookies"] = {k: "[REDACTED]" for k in request["cookies"]}

        if "data" in request:
            request["data"] = scrub_sensitive_data(request["data"])

    if "extra" in event:
        event["extra"] = scrub_sensitive_data(event["extra"])

    # Keep id and username, mask email and IP
    if "user" in event:
        user = event["user"]
        if "email" in user:
            user["email"] = _mask_email(user["email"])
        if "ip_address" in user:
            user["ip_address"] = "XXX.XXX.XXX.XXX"

    if "exception" in event and "values" in event["exception"]:
        for exception in event["exception"]["values"]:
            if "value" in exception:
                exception["value"] = _scrub_string(exception["value"])

    return event


def initialize_sentry(
    dsn: Optional[str],
    environment: str = "development",
    traces_sample_rate: float = 0.1,
    release: Optional[str] = None,
) -> bool:
    """
    Turn on error reporting when a real DSN is configured.

    Args:
        dsn: Sentry DSN. Empty or placeholder values leave Sentry disabled.
        environment: Reported environment name
        traces_sample_rate: Share of requests traced, 0.0 to 1.0
        release: Release tag, usually settings.VERSION

    Returns:
        Whether reporting was enabled
    """
    if not dsn or dsn.strip().lower() in PLACEHOLDER_DSNS:
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        traces_sample_rate=traces_sample_rate,
        integrations=[
            DjangoIntegration(transaction_style="url"),
            LoggingIntegration(),
        ],
        before_send=before_send,
        send_default_pii=False,
        attach_stacktrace=True,
        max_breadcrumbs=50,
    )
    sentry_sdk.set_tag("service", "teras-pos")
    return True
