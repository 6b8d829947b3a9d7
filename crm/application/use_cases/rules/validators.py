"""Validation helpers turning untrusted rule candidates into rule sets."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from crm.domain.entities import LogicGate, Rule, RuleSet

_REQUIRED_FIELDS: tuple[str, ...] = ("field", "operator", "value")


class MalformedRuleError(ValueError):
    """Raised when a rule candidate is missing a required field or has the wrong shape."""

    def __init__(self, reason: str, *, index: int | None = None) -> None:
        self.index = index
        self.reason = reason
        location = f"Rule at index {index}" if index is not None else "Rule list"
        super().__init__(f"{location} is malformed: {reason}")


def _coerce_required_text(candidate: Mapping[str, Any], key: str, index: int) -> str:
    if key not in candidate or candidate[key] is None:
        raise MalformedRuleError(f"'{key}' is required", index=index)

    raw = candidate[key]
    if key == "value" and isinstance(raw, (int, float)) and not isinstance(raw, bool):
        if isinstance(raw, float) and not math.isfinite(raw):
            raise MalformedRuleError("'value' must be a finite number", index=index)
        return str(raw)
    if not isinstance(raw, str):
        raise MalformedRuleError(f"'{key}' must be a string", index=index)
    if not raw.strip():
        raise MalformedRuleError(f"'{key}' must not be empty", index=index)
    return raw


def normalize_logic_gate(raw: Any, *, index: int | None = None) -> LogicGate | None:
    """Return the gate named by ``raw`` (case-insensitive) or ``None`` when absent."""

    if raw is None:
        return None
    if not isinstance(raw, str):
        raise MalformedRuleError("'logicGate' must be a string", index=index)
    normalized = raw.strip().upper()
    if not normalized:
        return None
    try:
        return LogicGate(normalized)
    except ValueError:
        raise MalformedRuleError(
            f"'logicGate' must be one of AND, OR, NOT (got {raw!r})", index=index
        ) from None


def validate_rule_candidate(candidate: Any, *, index: int) -> Rule:
    """Validate a single candidate and return it as a ``Rule``."""

    if not isinstance(candidate, Mapping):
        raise MalformedRuleError("expected an object", index=index)

    field_name, operator, value = (
        _coerce_required_text(candidate, key, index) for key in _REQUIRED_FIELDS
    )
    return Rule(
        field=field_name.strip(),
        operator=operator.strip(),
        value=value,
        logic_gate=normalize_logic_gate(candidate.get("logicGate"), index=index),
    )


def validate_rule_candidates(candidates: Any) -> RuleSet:
    """Validate every candidate, returning a rule set or raising for the whole batch.

    The batch is all-or-nothing: the first malformed candidate aborts the
    conversion and no partial rule set is produced.
    """

    if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Sequence):
        raise MalformedRuleError("expected a list of rule objects")

    return RuleSet.of(
        validate_rule_candidate(candidate, index=index)
        for index, candidate in enumerate(candidates)
    )


def ensure_rule_set(rules: RuleSet | Sequence[Any]) -> RuleSet:
    """Return ``rules`` untouched when already validated, otherwise validate them."""

    if isinstance(rules, RuleSet):
        return rules
    return validate_rule_candidates(rules)


__all__ = [
    "MalformedRuleError",
    "ensure_rule_set",
    "normalize_logic_gate",
    "validate_rule_candidate",
    "validate_rule_candidates",
]
