"""Use case for creating customers."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from crm.domain.entities import Customer
from crm.infrastructure.repositories import CustomerRepository
from crm.utils import now_in_app_timezone
from .validators import (
    ensure_extra_attributes,
    ensure_non_negative,
    ensure_required_text,
    ensure_valid_email,
)


def create_customer(
    session: Session,
    *,
    name: str,
    email: str,
    phone: str,
    total_spend: float = 0.0,
    last_order_date: datetime | None = None,
    visit_count: int = 0,
    created_at: datetime | None = None,
    attributes: Mapping[str, Any] | None = None,
) -> Customer:
    """Create a new customer record."""

    entity = Customer(
        id=None,
        name=ensure_required_text(name, "name"),
        email=ensure_valid_email(email),
        phone=ensure_required_text(phone, "phone"),
        total_spend=float(ensure_non_negative(total_spend, "total spend")),
        last_order_date=last_order_date,
        visit_count=int(ensure_non_negative(visit_count, "visit count")),
        created_at=created_at or now_in_app_timezone(),
        attributes=ensure_extra_attributes(attributes),
    )
    return CustomerRepository(session).create(entity)
