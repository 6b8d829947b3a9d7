"""Common validation helpers for customer use cases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from crm.domain.entities import CUSTOMER_FIELDS


def ensure_required_text(value: Any, label: str) -> str:
    """Return ``value`` stripped or raise ``ValueError`` when it is blank."""

    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Customer {label} is required")
    return value.strip()


def ensure_valid_email(email: Any) -> str:
    """Return a normalized email address or raise ``ValueError``."""

    normalized = ensure_required_text(email, "email")
    if normalized.count("@") != 1:
        raise ValueError("Customer email must be a valid email address")

    local_part, domain = normalized.split("@", 1)
    if not local_part or not domain:
        raise ValueError("Customer email must be a valid email address")
    return f"{local_part}@{domain.lower()}"


def ensure_non_negative(value: Any, label: str) -> float:
    """Return ``value`` as a number, rejecting booleans and negative amounts."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Customer {label} must be a number")
    if value < 0:
        raise ValueError(f"Customer {label} must not be negative")
    return value


def ensure_extra_attributes(attributes: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return extra attributes, refusing keys that shadow built-in fields."""

    if not attributes:
        return {}
    extras: dict[str, Any] = {}
    for key, value in attributes.items():
        if not isinstance(key, str) or not key.strip():
            raise ValueError("Customer attribute names must be non-empty strings")
        if key in CUSTOMER_FIELDS:
            raise ValueError(f"Customer attribute '{key}' is a built-in field")
        extras[key] = value
    return extras


__all__ = [
    "ensure_extra_attributes",
    "ensure_non_negative",
    "ensure_required_text",
    "ensure_valid_email",
]
