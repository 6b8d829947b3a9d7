"""Domain entity representing a marketing campaign."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from crm.utils import format_iso_datetime

from .rule import RuleSet


@dataclass(frozen=True)
class Campaign:
    """A named audience query; campaigns are created and listed, never edited."""

    id: int | None
    name: str
    rule_set: RuleSet
    created_at: datetime | None
    summary: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Return the persisted campaign shape with an ISO-8601 ``createdAt``."""

        document: dict[str, Any] = {
            "name": self.name,
            "audienceQuery": self.rule_set.to_payload(),
            "createdAt": format_iso_datetime(self.created_at),
        }
        if self.id is not None:
            document["id"] = self.id
        if self.summary is not None:
            document["summary"] = self.summary
        return document


__all__ = ["Campaign"]
