"""Domain entity holding the outcome of an audience resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AudienceResolution:
    """Matching customer ids, in customer store order, and their count."""

    matched_customer_ids: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.matched_customer_ids)

    def to_payload(self) -> dict[str, Any]:
        return {
            "matchedCustomerIds": list(self.matched_customer_ids),
            "count": self.count,
        }


__all__ = ["AudienceResolution"]
