"""Tagged attribute values and the coercion rules used to compare them.

Customer attributes are schemaless, so every looked-up value is tagged as a
number, a date, free text or absent before a rule compares it. The comparison
type is chosen from both sides:

* both sides parse as numbers -> exact numeric comparison;
* the attribute is a date and the rule value parses as an ISO-8601 date ->
  chronological comparison;
* anything else -> case-sensitive string comparison.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from crm.utils import ensure_app_timezone, parse_iso_datetime

_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


class ValueKind(Enum):
    NUMBER = "number"
    DATE = "date"
    TEXT = "text"
    ABSENT = "absent"


@dataclass(frozen=True)
class FieldValue:
    """An attribute value tagged with the kind it was recognised as."""

    kind: ValueKind
    raw: Any = None

    @property
    def is_absent(self) -> bool:
        return self.kind is ValueKind.ABSENT

    def as_number(self) -> Decimal | None:
        if self.kind is ValueKind.NUMBER:
            if isinstance(self.raw, int):
                return Decimal(self.raw)
            # Floats compare by their shortest decimal form, so 0.1 equals "0.1".
            return Decimal(repr(float(self.raw)))
        if self.kind is ValueKind.TEXT:
            return parse_number(self.raw)
        return None

    def as_date(self) -> datetime | None:
        if self.kind is ValueKind.DATE:
            return ensure_app_timezone(self.raw)
        return None

    def as_text(self) -> str:
        if self.kind is ValueKind.ABSENT:
            return ""
        if self.kind is ValueKind.DATE:
            return self.raw.isoformat()
        if self.kind is ValueKind.NUMBER:
            if isinstance(self.raw, int):
                return str(self.raw)
            number = float(self.raw)
            return str(int(number)) if number.is_integer() else repr(number)
        return self.raw


ABSENT = FieldValue(ValueKind.ABSENT)


def parse_number(raw: str) -> Decimal | None:
    """Return ``raw`` as an exact decimal when it is a plain numeric literal."""

    candidate = raw.strip()
    if not _NUMBER_PATTERN.match(candidate):
        return None
    return Decimal(candidate)


def parse_date(raw: str) -> datetime | None:
    """Return ``raw`` as a datetime in the app timezone when it is ISO-8601."""

    return ensure_app_timezone(parse_iso_datetime(raw))


def tag_value(raw: Any) -> FieldValue:
    """Tag a raw attribute value with its comparison kind."""

    if raw is None:
        return ABSENT
    if isinstance(raw, bool):
        return FieldValue(ValueKind.TEXT, "true" if raw else "false")
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return FieldValue(ValueKind.TEXT, str(raw))
        return FieldValue(ValueKind.NUMBER, raw)
    if isinstance(raw, (datetime, date)):
        return FieldValue(ValueKind.DATE, raw)
    if isinstance(raw, str):
        return FieldValue(ValueKind.TEXT, raw)
    return FieldValue(ValueKind.TEXT, str(raw))


def lookup(record: Mapping[str, Any], field_name: str) -> FieldValue:
    """Return the tagged value of ``field_name``; missing attributes are ``ABSENT``."""

    return tag_value(record.get(field_name))


__all__ = [
    "ABSENT",
    "FieldValue",
    "ValueKind",
    "lookup",
    "parse_date",
    "parse_number",
    "tag_value",
]
