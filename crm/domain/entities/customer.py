"""Domain entity representing a customer record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Wire (camelCase) attribute names of the built-in customer fields.
CUSTOMER_FIELDS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "email": "email",
    "phone": "phone",
    "totalSpend": "total_spend",
    "lastOrderDate": "last_order_date",
    "visitCount": "visit_count",
    "createdAt": "created_at",
}


@dataclass
class Customer:
    """Core attributes of a customer plus any extra, schemaless attributes."""

    id: int | None
    name: str
    email: str
    phone: str
    total_spend: float = 0.0
    last_order_date: datetime | None = None
    visit_count: int = 0
    created_at: datetime | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def as_record(self) -> Mapping[str, Any]:
        """Return the customer as a mapping keyed by wire attribute names.

        Built-in fields take precedence over extra attributes with the same name.
        """

        record: dict[str, Any] = dict(self.attributes)
        for wire_name, attribute in CUSTOMER_FIELDS.items():
            record[wire_name] = getattr(self, attribute)
        return record


__all__ = ["CUSTOMER_FIELDS", "Customer"]
